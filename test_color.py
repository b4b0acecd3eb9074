"""색상 패킹·합성 테스트."""

import pytest

from renderer.color import TRANSPARENT, alpha, composite, is_opaque, pack, unpack

SAMPLES = [
    pack(255, 0, 0, 255),
    pack(12, 34, 56, 128),
    pack(1, 2, 3, 1),
    pack(200, 200, 200, 0),
    pack(0, 0, 0, 255),
    0xFFFFFFFF,
]


def test_pack_unpack_exact():
    assert pack(0x12, 0x34, 0x56, 0x78) == 0x12345678
    assert unpack(0x12345678) == (0x12, 0x34, 0x56, 0x78)
    assert unpack(pack(255, 254, 1, 0)) == (255, 254, 1, 0)
    assert unpack(TRANSPARENT) == (0, 0, 0, 0)


def test_pack_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        pack(256, 0, 0, 0)
    with pytest.raises(ValueError):
        pack(0, -1, 0, 0)


def test_alpha_helpers():
    assert alpha(pack(1, 2, 3, 77)) == 77
    assert is_opaque(pack(1, 2, 3, 255))
    assert not is_opaque(pack(1, 2, 3, 254))


@pytest.mark.parametrize("color", SAMPLES)
def test_transparent_base_yields_overlay(color):
    assert composite(TRANSPARENT, color) == color


@pytest.mark.parametrize("color", SAMPLES + [TRANSPARENT])
def test_opaque_overlay_wins(color):
    opaque = pack(10, 20, 30, 255)
    assert composite(color, opaque) == opaque


@pytest.mark.parametrize("color", SAMPLES + [TRANSPARENT])
def test_transparent_overlay_keeps_base(color):
    assert composite(color, TRANSPARENT) == color


def test_zero_alpha_is_transparent_regardless_of_rgb():
    base = pack(40, 50, 60, 200)
    assert composite(base, pack(255, 255, 255, 0)) == base
    overlay = pack(9, 8, 7, 100)
    assert composite(pack(255, 255, 255, 0), overlay) == overlay


def test_half_alpha_over_half_alpha_truncates():
    base = pack(255, 0, 0, 128)
    overlay = pack(0, 0, 255, 128)
    # 170.22 / 84.78 / 191.75 → 잘라내기
    assert unpack(composite(base, overlay)) == (170, 0, 84, 191)


def test_composite_is_not_symmetric():
    red = pack(255, 0, 0, 128)
    blue = pack(0, 0, 255, 128)
    assert unpack(composite(blue, red)) == (84, 0, 170, 191)
    assert composite(blue, red) != composite(red, blue)


def test_translucent_over_opaque_stays_opaque():
    base = pack(0, 0, 0, 255)
    overlay = pack(200, 100, 50, 64)
    r, g, b, a = unpack(composite(base, overlay))
    # 불투명 base 위에서는 base 색이 그대로 남는다 (이 공식은 base 알파를 우선)
    assert (r, g, b, a) == (0, 0, 0, 255)
