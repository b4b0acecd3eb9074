"""픽셀 캔버스 관리 모듈 — 디코딩·인코딩·사각형 지우기·합성 복사."""

from typing import NamedTuple, Sequence

from PIL import Image

from .color import TRANSPARENT, composite, pack
from .errors import DecodeError, MissingPalette, OutOfBounds, RangeError, UnsupportedBitDepth, UnsupportedFormat
from .formats import ColorFormat

# 좌표 타입 (부호 없는 8비트) 최댓값
COORD_MAX = 0xFF

# 팔레트 최대 항목 수
PALETTE_SIZE = 256


class Rect(NamedTuple):
    """(x, y, width, height) 사각형 영역."""

    x: int
    y: int
    width: int
    height: int


class Canvas:
    """고정 크기 RGBA 캔버스. 픽셀은 행 우선 1차원 리스트에 저장한다."""

    def __init__(self, width: int, height: int, fill: int = TRANSPARENT):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive: {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = [fill] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.size == other.size and self._pixels == other._pixels

    def __repr__(self) -> str:
        return f"Canvas({self._width}x{self._height})"

    def get_pixel(self, x: int, y: int) -> int:
        return self._pixels[y * self._width + x]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self._pixels[y * self._width + x] = color

    def pixels(self) -> list[int]:
        """행 우선 픽셀 리스트의 복사본."""
        return list(self._pixels)

    @classmethod
    def decode(
        cls,
        data: bytes,
        width: int,
        height: int,
        color_format: ColorFormat | str,
        bit_depth: int,
        palette: Sequence[int] | None = None,
    ) -> "Canvas":
        """빈틈없이 채워진 픽셀 버퍼를 캔버스로 해석한다.

        Args:
            data: 행 패딩 없는 픽셀 바이트
            color_format: ColorFormat 또는 Pillow 모드 문자열
            bit_depth: 채널당 비트 수 (8만 허용)
            palette: INDEXED 형식일 때 RGB 3바이트씩 이어진 팔레트

        Raises:
            UnsupportedBitDepth, UnsupportedFormat, MissingPalette, DecodeError
        """
        if bit_depth != 8:
            raise UnsupportedBitDepth(bit_depth)
        if isinstance(color_format, str):
            color_format = ColorFormat.from_mode(color_format)
        reader = _PIXEL_READERS.get(color_format)
        if reader is None:
            raise UnsupportedFormat(color_format)

        if color_format is ColorFormat.INDEXED:
            if palette is None:
                raise MissingPalette()
            # 부족한 항목은 검정(→ 투명)으로 채운다
            palette = bytes(palette[:PALETTE_SIZE * 3])
            palette += bytes(PALETTE_SIZE * 3 - len(palette))

        bpp = color_format.bytes_per_pixel
        expected = width * height * bpp
        if len(data) < expected:
            raise DecodeError(f"pixel buffer too short: {len(data)} < {expected} bytes")

        canvas = cls(width, height)
        pixels = canvas._pixels
        for y in range(height):
            for x in range(width):
                i = (y * width + x) * bpp
                pixels[y * width + x] = reader(data, i, palette)
        return canvas

    def encode(self) -> bytes:
        """RGBA 8비트, 행 우선 바이트열로 변환한다."""
        buf = bytearray()
        for color in self._pixels:
            buf += color.to_bytes(4, "big")
        return bytes(buf)

    def to_image(self) -> Image.Image:
        """Pillow RGBA 이미지로 변환한다."""
        return Image.frombytes("RGBA", self.size, self.encode())

    def clear_rect(self, position: tuple[int, int], size: tuple[int, int]) -> None:
        """사각형 영역을 투명으로 지운다. 검증이 끝나기 전에는 아무것도 바꾸지 않는다."""
        rect = Rect(position[0], position[1], size[0], size[1])
        _check_rect(rect, "size")
        _check_inside(rect, self.size, "clear")

        for y in range(rect.y, rect.y + rect.height):
            row = y * self._width
            for x in range(rect.x, rect.x + rect.width):
                self._pixels[row + x] = TRANSPARENT

    def blit(self, source: "Canvas", source_rect: Rect, position: tuple[int, int]) -> None:
        """source의 source_rect 영역을 position 위치에 합성한다 (덮어쓰지 않고 위에 그림)."""
        source_rect = Rect(*source_rect)
        dest_rect = Rect(position[0], position[1], source_rect.width, source_rect.height)
        _check_rect(source_rect, "source size")
        _check_rect(dest_rect, "size")
        _check_inside(source_rect, source.size, "source")
        _check_inside(dest_rect, self.size, "destination")

        for dy in range(source_rect.height):
            src_row = (source_rect.y + dy) * source._width + source_rect.x
            dst_row = (dest_rect.y + dy) * self._width + dest_rect.x
            for dx in range(source_rect.width):
                d = dst_row + dx
                self._pixels[d] = composite(self._pixels[d], source._pixels[src_row + dx])


def _check_rect(rect: Rect, label: str) -> None:
    """크기 0, 음수 좌표, 좌표 타입 오버플로를 검사한다."""
    if rect.width == 0 or rect.height == 0:
        raise RangeError(f"{label} can't be 0: {rect.width}x{rect.height}")
    if min(rect) < 0:
        raise RangeError(f"negative coordinate in {rect}")
    if rect.x + rect.width > COORD_MAX:
        raise RangeError(f"x + width overflows: {rect.x} + {rect.width}")
    if rect.y + rect.height > COORD_MAX:
        raise RangeError(f"y + height overflows: {rect.y} + {rect.height}")


def _check_inside(rect: Rect, bounds: tuple[int, int], label: str) -> None:
    if rect.x + rect.width > bounds[0] or rect.y + rect.height > bounds[1]:
        raise OutOfBounds(f"{label} rect {tuple(rect)} exceeds {bounds[0]}x{bounds[1]} canvas")


def _read_gray(data, i, palette):
    v = data[i]
    if v <= 1:
        return TRANSPARENT
    return pack(v, v, v, 0xFF)


def _read_gray_alpha(data, i, palette):
    v = data[i]
    return pack(v, v, v, data[i + 1])


def _read_indexed(data, i, palette):
    pi = data[i] * 3
    r, g, b = palette[pi], palette[pi + 1], palette[pi + 2]
    # 거의 검정인 팔레트 색은 투명 처리
    if r <= 1 and g <= 1 and b <= 1:
        return TRANSPARENT
    return pack(r, g, b, 0xFF)


def _read_rgb(data, i, palette):
    r, g, b = data[i], data[i + 1], data[i + 2]
    if r == 0 and g == 0 and b == 0:
        return TRANSPARENT
    return pack(r, g, b, 0xFF)


def _read_rgba(data, i, palette):
    return pack(data[i], data[i + 1], data[i + 2], data[i + 3])


_PIXEL_READERS = {
    ColorFormat.GRAYSCALE: _read_gray,
    ColorFormat.GRAYSCALE_ALPHA: _read_gray_alpha,
    ColorFormat.INDEXED: _read_indexed,
    ColorFormat.RGB: _read_rgb,
    ColorFormat.RGBA: _read_rgba,
}
