"""색상 형식 모듈 — 디코딩할 픽셀 버퍼의 형식 태그."""

from enum import Enum

from .errors import UnsupportedFormat


class ColorFormat(Enum):
    """픽셀 버퍼의 색상 형식. 값은 Pillow 모드 이름."""

    GRAYSCALE = "L"
    GRAYSCALE_ALPHA = "LA"
    INDEXED = "P"
    RGB = "RGB"
    RGBA = "RGBA"

    @property
    def bytes_per_pixel(self) -> int:
        return _BYTES_PER_PIXEL[self]

    @classmethod
    def from_mode(cls, mode: str) -> "ColorFormat":
        """Pillow 모드 문자열을 형식 태그로 변환한다."""
        try:
            return cls(mode)
        except ValueError:
            raise UnsupportedFormat(mode) from None


_BYTES_PER_PIXEL = {
    ColorFormat.GRAYSCALE: 1,
    ColorFormat.GRAYSCALE_ALPHA: 2,
    ColorFormat.INDEXED: 1,
    ColorFormat.RGB: 3,
    ColorFormat.RGBA: 4,
}


def bit_depth_of(mode: str, rawmode: str | None = None) -> int:
    """파일에 저장된 채널당 비트 수를 반환한다.

    Pillow는 16비트 RGB를 "RGB"로, 1/2/4비트 회색·팔레트를 "L"/"P"로 풀어 주므로
    모드만으로는 원래 깊이를 알 수 없다. 디코더의 rawmode("RGB;16B", "L;4", "P;2" 등)가
    있으면 그것을 우선한다.
    """
    for depth_mode in (rawmode, mode):
        if not depth_mode:
            continue
        if depth_mode == "1" or depth_mode.endswith(";1"):
            return 1
        if depth_mode.endswith(";2"):
            return 2
        if depth_mode.endswith(";4"):
            return 4
        if ";16" in depth_mode:
            return 16
    if mode in ("I", "F"):
        return 32
    return 8
