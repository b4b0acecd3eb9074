"""스킨 변환 모듈 — PNG 스킨 파일을 토템 PNG로 변환한다 (단일 파일 / 디렉토리)."""

import logging
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path

from renderer.canvas import Canvas
from renderer.codec import encode_png, read_canvas, write_canvas
from renderer.errors import IoError, TotemError
from renderer.layers import LayerCompositor
from renderer.layout import DEFAULT_LAYOUT, TotemLayout

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """디렉토리 변환 결과."""
    converted: list[Path] = field(default_factory=list)   # 저장된 토템 경로
    failed: dict[Path, TotemError] = field(default_factory=dict)  # 스킨 경로 → 오류

    @property
    def ok(self) -> bool:
        return not self.failed


class SkinConverter:
    """스킨 → 토템 변환기. 변환마다 새 캔버스를 쓰므로 인스턴스 간 공유 상태가 없다."""

    def __init__(self, layout: TotemLayout = DEFAULT_LAYOUT, second_layer: bool = False):
        self._compositor = LayerCompositor(layout)
        self._second_layer = second_layer

    def _use_second_layer(self, second_layer: bool | None) -> bool:
        return self._second_layer if second_layer is None else second_layer

    def render(self, skin_path: str | Path, second_layer: bool | None = None) -> Canvas:
        """스킨 파일을 읽어 토템 캔버스를 만든다 (저장하지 않음)."""
        skin = read_canvas(skin_path)
        return self._compositor.build(skin, self._use_second_layer(second_layer))

    def convert_bytes(self, data: bytes, second_layer: bool | None = None) -> bytes:
        """메모리 안의 스킨 PNG 바이트를 토템 PNG 바이트로 변환한다."""
        skin = read_canvas(BytesIO(data))
        totem = self._compositor.build(skin, self._use_second_layer(second_layer))
        return encode_png(totem)

    def convert(self, skin_path: str | Path, totem_path: str | Path,
                second_layer: bool | None = None) -> None:
        """스킨 파일을 토템 파일로 변환한다. 실패하면 대상 파일은 건드리지 않는다."""
        totem = self.render(skin_path, second_layer)
        write_canvas(totem, totem_path)
        logger.info("토템 생성: %s → %s", skin_path, totem_path)

    def convert_directory(
        self,
        src_dir: str | Path,
        dst_dir: str | Path,
        pattern: str = "*.png",
        suffix: str = "",
        second_layer: bool | None = None,
    ) -> BatchResult:
        """디렉토리의 스킨을 모두 변환한다. 실패한 파일은 기록하고 건너뛴다."""
        src_dir = Path(src_dir)
        dst_dir = Path(dst_dir)
        if not src_dir.is_dir():
            raise IoError(f"skin directory not found: {src_dir}")
        if not suffix and dst_dir.resolve() == src_dir.resolve():
            raise IoError(f"output would overwrite skins in {src_dir} (set a suffix)")

        result = BatchResult()
        for path in sorted(src_dir.glob(pattern)):
            if not path.is_file():
                continue
            target = dst_dir / f"{path.stem}{suffix}.png"
            try:
                self.convert(path, target, second_layer)
            except TotemError as e:
                logger.warning("변환 실패: %s (%s)", path.name, e)
                result.failed[path] = e
            else:
                result.converted.append(target)

        logger.info("변환 완료: %d개 성공, %d개 실패", len(result.converted), len(result.failed))
        return result
