"""토템 PC 미리보기 — 기본/두 번째 레이어 결과를 확대해서 PNG로 저장."""

import sys

from PIL import Image, ImageDraw

from config import load_config
from converter import SkinConverter
from renderer.canvas import Canvas

PADDING = 16
LABEL_HEIGHT = 30

# 투명 영역 표시용 체커보드 색
_CHECKER_DARK = (60, 60, 70, 255)
_CHECKER_LIGHT = (90, 90, 100, 255)


def render_preview(totem: Canvas, scale: int = 16) -> Image.Image:
    """토템을 NEAREST로 확대하고 체커보드 위에 합성한다."""
    w, h = totem.width * scale, totem.height * scale
    board = Image.new("RGBA", (w, h), _CHECKER_DARK)
    draw = ImageDraw.Draw(board)
    for y in range(totem.height):
        for x in range(totem.width):
            if (x + y) % 2:
                draw.rectangle(
                    [x * scale, y * scale, (x + 1) * scale - 1, (y + 1) * scale - 1],
                    fill=_CHECKER_LIGHT,
                )
    # NEAREST로 확대 (픽셀 아트 유지)
    scaled = totem.to_image().resize((w, h), Image.Resampling.NEAREST)
    return Image.alpha_composite(board, scaled)


def preview(skin_path: str, out: str = "preview_totem.png") -> Image.Image:
    config = load_config()
    scale = config["preview"].get("scale", 16)
    converter = SkinConverter()

    variants = [("Base", False), ("Second layer", True)]
    cells = [render_preview(converter.render(skin_path, second), scale) for _, second in variants]

    cell_w = cells[0].width + PADDING * 2
    cell_h = cells[0].height + PADDING * 2 + LABEL_HEIGHT
    sheet = Image.new("RGB", (cell_w * len(cells), cell_h), (30, 30, 40))
    draw = ImageDraw.Draw(sheet)

    for i, ((label, _), cell) in enumerate(zip(variants, cells)):
        x = i * cell_w + PADDING
        sheet.paste(cell, (x, PADDING), cell)
        # 라벨
        draw.text((x, PADDING + cell.height + 4), label, fill=(200, 200, 200))

    sheet.save(out)
    print(f"저장됨: {out} ({sheet.width}x{sheet.height})")
    return sheet


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("사용법: python preview_totem.py SKIN.png [OUT.png]")
        return 1
    preview(*args[:2])
    return 0


if __name__ == "__main__":
    sys.exit(main())
