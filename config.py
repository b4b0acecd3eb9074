"""설정 파일 로더 모듈.

config.json은 필요한 키만 적으면 된다. 나머지는 _DEFAULTS 값을 쓴다.
"""

import copy
import json
from pathlib import Path

# 기본 설정 경로
_CONFIG_PATH = Path(__file__).parent / "config.json"

_DEFAULTS = {
    # 변환 옵션 (CLI 인자가 없을 때)
    "convert": {
        "second_layer": False,
        "pattern": "*.png",
        "suffix": "",
    },
    # 빈 문자열이면 내장 레이아웃
    "layout": {
        "file": "",
    },
    "preview": {
        "scale": 16,
    },
    "logging": {
        "level": "INFO",
    },
}


def _merge_into(target: dict, override: dict) -> None:
    """override의 값을 target에 덮어쓴다. 양쪽 모두 dict인 키는 재귀적으로."""
    for key, value in override.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _merge_into(current, value)
        else:
            target[key] = copy.deepcopy(value)


def load_config(path: Path | str | None = None) -> dict:
    """기본값 위에 config.json을 병합한 설정을 반환한다.

    반환값은 매번 새로 만든 사본이라 수정해도 _DEFAULTS에 영향이 없다.
    """
    config = copy.deepcopy(_DEFAULTS)
    config_path = Path(path) if path else _CONFIG_PATH
    if config_path.exists():
        _merge_into(config, json.loads(config_path.read_text(encoding="utf-8")))
    return config
