"""메인 — 스킨 PNG(또는 디렉토리)를 토템 PNG로 변환한다."""

import argparse
import logging
import sys
from pathlib import Path

from config import load_config
from converter import SkinConverter
from renderer.errors import TotemError
from renderer.layout import DEFAULT_LAYOUT, load_layout


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="64x64 스킨을 16x16 토템 텍스처로 변환한다.")
    parser.add_argument("skin", type=Path, help="스킨 PNG 파일 또는 스킨 디렉토리")
    parser.add_argument("totem", type=Path, help="토템 PNG 파일 또는 출력 디렉토리")
    parser.add_argument("--second-layer", action="store_true", default=None,
                        help="모자·재킷 등 두 번째 레이어도 합성")
    parser.add_argument("--layout", type=Path, default=None, help="레이아웃 JSON 파일")
    parser.add_argument("--config", type=Path, default=None, help="설정 파일 (기본: config.json)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=config["logging"].get("level", "INFO"),
        format="%(asctime)s [%(name)s] %(message)s",
    )

    second_layer = args.second_layer
    if second_layer is None:
        second_layer = config["convert"].get("second_layer", False)

    try:
        layout_file = args.layout or config["layout"].get("file")
        layout = load_layout(layout_file) if layout_file else DEFAULT_LAYOUT
        converter = SkinConverter(layout, second_layer=second_layer)

        if args.skin.is_dir():
            result = converter.convert_directory(
                args.skin,
                args.totem,
                pattern=config["convert"].get("pattern", "*.png"),
                suffix=config["convert"].get("suffix", ""),
            )
            return 0 if result.ok else 1

        converter.convert(args.skin, args.totem)
    except TotemError as e:
        logging.error("변환 실패: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
