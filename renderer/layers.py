"""레이어 합성 모듈 — 스킨 캔버스에서 토템 캔버스를 만든다."""

from .canvas import Canvas
from .errors import InvalidSkinDimensions
from .layout import DEFAULT_LAYOUT, TotemLayout


class LayerCompositor:
    """레이아웃 연산을 순서대로 적용해 토템을 합성한다."""

    def __init__(self, layout: TotemLayout = DEFAULT_LAYOUT):
        self._layout = layout

    def build(self, skin: Canvas, second_layer: bool = False) -> Canvas:
        """스킨 위의 영역들을 새 토템 캔버스에 합성하여 반환한다.

        Args:
            skin: 64x64 스킨 캔버스 (읽기 전용으로만 사용)
            second_layer: True면 기본 레이어 뒤에 모자·재킷 등 두 번째 레이어를 덧그림

        Returns:
            16x16 토템 캔버스

        Raises:
            InvalidSkinDimensions: 스킨 크기가 레이아웃과 다를 때
            RangeError: 연산 중 하나가 잘못된 사각형을 가리킬 때 (그대로 전달)
        """
        if skin.size != self._layout.skin_size:
            raise InvalidSkinDimensions(skin.size, self._layout.skin_size)

        totem = Canvas(*self._layout.totem_size)

        # 기본 레이어 → 두 번째 레이어
        for op in self._layout.operations(second_layer):
            op.apply(totem, skin)

        return totem
