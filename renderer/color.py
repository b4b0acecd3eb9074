"""색상 모듈 — 32비트 RGBA 패킹과 알파 합성.

색상은 0xRRGGBBAA 형태의 정수 하나로 저장한다. 0은 완전 투명(빈 픽셀)을 뜻한다.
"""

TRANSPARENT = 0


def pack(r: int, g: int, b: int, a: int) -> int:
    """R, G, B, A 바이트를 32비트 색상으로 묶는다."""
    for ch in (r, g, b, a):
        if not 0 <= ch <= 0xFF:
            raise ValueError(f"channel out of range: {ch}")
    return (r << 24) | (g << 16) | (b << 8) | a


def unpack(color: int) -> tuple[int, int, int, int]:
    """32비트 색상을 (R, G, B, A) 바이트로 분해한다."""
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def alpha(color: int) -> int:
    return color & 0xFF


def is_opaque(color: int) -> bool:
    return color & 0xFF == 0xFF


def composite(base: int, overlay: int) -> int:
    """base 위에 overlay를 그린다 (straight alpha, 비대칭).

    각 채널은 반올림 없이 잘라서 8비트로 돌려놓는다.
    """
    if base == TRANSPARENT or is_opaque(overlay):
        return overlay
    if overlay == TRANSPARENT:
        return base

    # 알파 0은 RGB와 무관하게 투명
    a_base = alpha(base)
    a_over = alpha(overlay)
    if a_over == 0:
        return base
    if a_base == 0:
        return overlay

    rb, gb, bb, _ = unpack(base)
    ro, go, bo, _ = unpack(overlay)

    alpha1 = a_base / 255.0
    alpha2 = a_over / 255.0
    weight = alpha2 * (1.0 - alpha1)
    alpha_final = alpha1 + weight

    r = (rb * alpha1 + ro * weight) / alpha_final
    g = (gb * alpha1 + go * weight) / alpha_final
    b = (bb * alpha1 + bo * weight) / alpha_final
    a = a_base + a_over * (255 - a_base) / 255.0

    return pack(int(r), int(g), int(b), int(a))
