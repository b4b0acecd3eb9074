"""변환 오류 모듈 — 스킨→토템 변환 중 발생하는 예외 계층."""


class TotemError(Exception):
    """모든 변환 오류의 기반 클래스."""


class IoError(TotemError):
    """파일 열기/생성/읽기/쓰기 또는 코덱 읽기 실패."""


class DecodeError(TotemError):
    """픽셀 버퍼를 캔버스로 해석할 수 없음."""


class UnsupportedBitDepth(DecodeError):
    """채널당 8비트가 아닌 이미지."""

    def __init__(self, bit_depth: int):
        super().__init__(f"BitDepth must be 8 (got {bit_depth})")
        self.bit_depth = bit_depth


class UnsupportedFormat(DecodeError):
    """지원하지 않는 색상 형식."""

    def __init__(self, color_format):
        super().__init__(f"unsupported color format: {color_format!r}")
        self.color_format = color_format


class MissingPalette(DecodeError):
    """인덱스 이미지에 팔레트가 없음."""

    def __init__(self):
        super().__init__("palette not found for indexed image")


class LayoutError(TotemError):
    """레이아웃 테이블 또는 빌드 입력이 잘못됨."""


class InvalidSkinDimensions(LayoutError):
    """스킨 크기가 레이아웃이 요구하는 크기와 다름."""

    def __init__(self, size: tuple[int, int], expected: tuple[int, int] = (64, 64)):
        super().__init__(f"Skin must be {expected[0]}x{expected[1]} (got {size[0]}x{size[1]})")
        self.size = size
        self.expected = expected


class RangeError(TotemError, ValueError):
    """크기 0 사각형, 음수 좌표, 좌표 타입 오버플로."""


class OutOfBounds(RangeError):
    """좌표 타입 안이지만 실제 캔버스 영역을 벗어난 사각형."""


class EncodeError(TotemError):
    """코덱 쓰기 실패."""
