"""PNG 입출력 모듈 — Pillow로 이미지를 읽어 캔버스로, 캔버스를 PNG로."""

import logging
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from PIL import Image

from .canvas import Canvas
from .errors import EncodeError, IoError
from .formats import bit_depth_of

logger = logging.getLogger(__name__)


def read_canvas(source: str | Path | BinaryIO) -> Canvas:
    """이미지 파일(경로 또는 바이너리 스트림)을 읽어 캔버스로 디코딩한다.

    파일/코덱 오류는 IoError로, 형식 오류는 DecodeError 계열 그대로 올라간다.
    """
    try:
        with Image.open(source) as img:
            # load() 후에는 tile이 비므로 먼저 읽어 둔다
            rawmode = _rawmode(img)
            img.load()
            mode = img.mode
            width, height = img.size
            data = img.tobytes()
            palette = img.getpalette("RGB") if mode == "P" else None
    except OSError as e:
        raise IoError(str(e)) from e

    bit_depth = bit_depth_of(mode, rawmode)
    logger.debug("이미지 읽음: %s (%s/%s, %dx%d)", _name(source), mode, rawmode, width, height)
    return Canvas.decode(data, width, height, mode, bit_depth, palette)


def encode_png(canvas: Canvas) -> bytes:
    """캔버스를 RGBA 8비트 PNG 바이트로 인코딩한다."""
    buf = BytesIO()
    try:
        canvas.to_image().save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(str(e)) from e
    return buf.getvalue()


def write_canvas(canvas: Canvas, path: str | Path) -> None:
    """캔버스를 PNG 파일로 저장한다.

    인코딩을 먼저 끝낸 뒤 파일을 만들기 때문에 인코딩 실패 시 대상 파일은 그대로 남는다.
    """
    png_bytes = encode_png(canvas)
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png_bytes)
    except OSError as e:
        raise IoError(str(e)) from e
    logger.debug("PNG 저장: %s (%d bytes)", path, len(png_bytes))


def _rawmode(img: Image.Image) -> str | None:
    """첫 타일의 디코더 rawmode (PNG는 "RGB;16B", "L;4" 같은 문자열)."""
    if not img.tile:
        return None
    args = img.tile[0][3]
    if isinstance(args, tuple):
        args = args[0] if args else None
    return args if isinstance(args, str) else None


def _name(source) -> str:
    return str(source) if isinstance(source, (str, Path)) else "<stream>"
