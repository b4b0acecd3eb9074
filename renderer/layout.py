"""토템 레이아웃 모듈 — 스킨의 어느 영역이 토템의 어디에 놓이는지 정의한다.

레이아웃은 순서 있는 연산 목록이다. 나중 연산이 앞선 결과 위에 합성되므로 순서가 중요하다.
"""

import json
from dataclasses import dataclass
from pathlib import Path

from .canvas import Canvas, Rect
from .errors import IoError, LayoutError

SKIN_SIZE = (64, 64)
TOTEM_SIZE = (16, 16)


@dataclass(frozen=True)
class BlitOp:
    """스킨의 source 영역을 토템의 dest 위치에 합성한다."""

    source: Rect
    dest: tuple[int, int]

    def apply(self, canvas: Canvas, skin: Canvas) -> None:
        canvas.blit(skin, self.source, self.dest)

    def to_dict(self) -> dict:
        return {"op": "blit", "source": list(self.source), "dest": list(self.dest)}


@dataclass(frozen=True)
class ClearOp:
    """토템의 사각형 영역을 투명으로 지운다."""

    position: tuple[int, int]
    size: tuple[int, int]

    def apply(self, canvas: Canvas, skin: Canvas) -> None:
        canvas.clear_rect(self.position, self.size)

    def to_dict(self) -> dict:
        return {"op": "clear", "position": list(self.position), "size": list(self.size)}


Operation = BlitOp | ClearOp


@dataclass(frozen=True)
class TotemLayout:
    """기본 연산 목록 + (선택) 두 번째 레이어 연산 목록."""

    base: tuple[Operation, ...]
    second_layer: tuple[Operation, ...] = ()
    skin_size: tuple[int, int] = SKIN_SIZE
    totem_size: tuple[int, int] = TOTEM_SIZE

    def operations(self, second_layer: bool = False) -> list[Operation]:
        """적용 순서대로 연산 목록을 반환한다."""
        ops = list(self.base)
        if second_layer:
            ops.extend(self.second_layer)
        return ops

    def to_dict(self) -> dict:
        return {
            "skin_size": list(self.skin_size),
            "totem_size": list(self.totem_size),
            "base": [op.to_dict() for op in self.base],
            "second_layer": [op.to_dict() for op in self.second_layer],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TotemLayout":
        """JSON 형태의 딕셔너리에서 레이아웃을 만든다."""
        if not isinstance(data, dict) or "base" not in data:
            raise LayoutError("layout must be an object with a 'base' list")
        try:
            return cls(
                base=tuple(_parse_op(op) for op in data["base"]),
                second_layer=tuple(_parse_op(op) for op in data.get("second_layer", [])),
                skin_size=_pair(data.get("skin_size", SKIN_SIZE)),
                totem_size=_pair(data.get("totem_size", TOTEM_SIZE)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise LayoutError(f"invalid layout: {e!r}") from e


def load_layout(path: str | Path) -> TotemLayout:
    """레이아웃 JSON 파일을 읽는다."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise IoError(str(e)) from e
    except json.JSONDecodeError as e:
        raise LayoutError(f"invalid layout json: {e}") from e
    return TotemLayout.from_dict(data)


def _pair(value) -> tuple[int, int]:
    x, y = value
    return (int(x), int(y))


def _parse_op(op: dict) -> Operation:
    kind = op["op"]
    if kind == "blit":
        return BlitOp(Rect(*(int(v) for v in op["source"])), _pair(op["dest"]))
    if kind == "clear":
        return ClearOp(_pair(op["position"]), _pair(op["size"]))
    raise ValueError(f"unknown op: {kind!r}")


def _blit(sx: int, sy: int, w: int, h: int, dx: int, dy: int) -> BlitOp:
    return BlitOp(Rect(sx, sy, w, h), (dx, dy))


def _pixel(sx: int, sy: int, dx: int, dy: int) -> BlitOp:
    return BlitOp(Rect(sx, sy, 1, 1), (dx, dy))


# 마인크래프트 64x64 스킨 → 16x16 토템
_BASE_OPS = (
    # 머리 앞면
    _blit(8, 8, 8, 8, 4, 1),
    # 머리 위쪽 모서리
    ClearOp((4, 1), (1, 1)),
    ClearOp((11, 1), (1, 1)),
    # 몸통: 앞면에서 네 줄만
    _blit(20, 21, 8, 1, 4, 9),
    _blit(20, 23, 8, 1, 4, 10),
    _blit(20, 29, 8, 1, 4, 11),
    _blit(20, 31, 8, 1, 4, 12),
    # 오른쪽 다리
    _blit(5, 20, 3, 2, 5, 13),
    _blit(6, 31, 2, 1, 6, 15),
    # 왼쪽 다리
    _blit(20, 52, 3, 2, 8, 13),
    _blit(20, 63, 2, 1, 8, 15),
    # 오른쪽 팔
    _pixel(44, 20, 3, 8),
    _pixel(45, 20, 3, 9),
    _pixel(46, 20, 3, 10),
    _pixel(44, 21, 2, 8),
    _pixel(45, 21, 2, 9),
    _pixel(46, 21, 2, 10),
    _pixel(44, 31, 1, 8),
    _pixel(45, 31, 1, 9),
    # 왼쪽 팔 (좌우 반전)
    _pixel(39, 52, 12, 8),
    _pixel(38, 52, 12, 9),
    _pixel(37, 52, 12, 10),
    _pixel(39, 53, 13, 8),
    _pixel(38, 53, 13, 9),
    _pixel(37, 53, 13, 10),
    _pixel(37, 63, 14, 8),
    _pixel(38, 63, 14, 9),
)

_SECOND_LAYER_OPS = (
    # 모자
    _blit(40, 8, 8, 8, 4, 1),
    # 오른쪽 소매
    _pixel(44, 36, 3, 8),
    _pixel(45, 36, 3, 9),
    _pixel(46, 36, 3, 10),
    _pixel(44, 37, 2, 8),
    _pixel(45, 37, 2, 9),
    _pixel(46, 37, 2, 10),
    _pixel(44, 47, 1, 8),
    _pixel(45, 47, 1, 9),
    # 왼쪽 소매
    _pixel(55, 52, 12, 8),
    _pixel(54, 52, 12, 9),
    _pixel(53, 52, 12, 10),
    _pixel(55, 53, 13, 8),
    _pixel(54, 53, 13, 9),
    _pixel(53, 53, 13, 10),
    _pixel(53, 63, 14, 8),
    _pixel(54, 63, 14, 9),
    # 재킷
    _blit(20, 37, 8, 1, 4, 9),
    _blit(20, 39, 8, 1, 4, 10),
    _blit(20, 45, 8, 1, 4, 11),
    _blit(20, 47, 8, 1, 4, 12),
    # 바지
    _blit(5, 36, 3, 2, 5, 13),
    _blit(6, 47, 2, 1, 6, 15),
    _blit(4, 52, 3, 2, 8, 13),
    _blit(4, 63, 2, 1, 8, 15),
)

DEFAULT_LAYOUT = TotemLayout(base=_BASE_OPS, second_layer=_SECOND_LAYER_OPS)
