"""공용 테스트 픽스처 — Pillow로 스킨 PNG를 만든다."""

import struct
import zlib
from io import BytesIO

import pytest
from PIL import Image

from renderer.codec import read_canvas


def _png_bytes(img: Image.Image) -> bytes:
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_bytes():
    return _png_bytes


@pytest.fixture
def as_canvas():
    """Pillow 이미지를 PNG로 저장했다가 다시 읽어 캔버스로 만든다."""
    def _as_canvas(img: Image.Image):
        return read_canvas(BytesIO(_png_bytes(img)))
    return _as_canvas


@pytest.fixture
def blank_skin() -> Image.Image:
    return Image.new("RGBA", (64, 64), (0, 0, 0, 0))


@pytest.fixture
def write_png(tmp_path):
    def _write(img: Image.Image, name: str = "skin.png"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        img.save(path, format="PNG")
        return path
    return _write


def _chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)


@pytest.fixture
def raw_png():
    """IHDR 비트 깊이를 직접 지정한 PNG 바이트를 만든다 (행마다 필터 0)."""
    def _raw_png(width: int, height: int, bit_depth: int, color_type: int,
                 rows: list[bytes], palette: bytes | None = None) -> bytes:
        ihdr = struct.pack(">IIBBBBB", width, height, bit_depth, color_type, 0, 0, 0)
        png = b"\x89PNG\r\n\x1a\n" + _chunk(b"IHDR", ihdr)
        if palette is not None:
            png += _chunk(b"PLTE", palette)
        png += _chunk(b"IDAT", zlib.compress(b"".join(b"\x00" + row for row in rows)))
        return png + _chunk(b"IEND", b"")
    return _raw_png
