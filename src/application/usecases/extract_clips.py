"""クリップ抽出ユースケース: 動画を取得（必要なら）してから切り出す"""

from collections.abc import Sequence
from pathlib import Path

from src.application.interfaces.observers import (
    NULL_CLIP_OBSERVER,
    NULL_DOWNLOAD_OBSERVER,
    ClipObserver,
    DownloadObserver,
)
from src.application.usecases.acquire_video import AcquireVideoUseCase
from src.application.usecases.cut_clips import ClipCutter
from src.domain.entities import ClipSelection
from src.domain.result import Result
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


class ExtractClipsUseCase:
    """取得済みの元動画からクリップを切り出す"""

    def __init__(self, acquirer: AcquireVideoUseCase, cutter: ClipCutter):
        self.acquirer = acquirer
        self.cutter = cutter

    async def execute(
        self,
        url: str,
        selections: Sequence[ClipSelection],
        output_dir: Path,
        overwrite: bool = False,
        download_observer: DownloadObserver = NULL_DOWNLOAD_OBSERVER,
        clip_observer: ClipObserver = NULL_CLIP_OBSERVER,
    ) -> Result[dict[Path, Result[None]]]:
        """
        Args:
            url: YouTube動画URL
            selections: 切り出す範囲
            output_dir: 元動画とクリップの保存先
            overwrite: 元動画を取り直すか

        Returns:
            出力パス → 各クリップのResult
            元動画の取得に失敗した場合はその失敗をそのまま返す
        """
        acquired = await self.acquirer.acquire_url(url, output_dir, overwrite, download_observer)
        if not acquired.success:
            logger.error(f"[ExtractClips] 元動画を取得できません: {acquired.message}")
            return acquired

        return await self.cutter.cut(acquired.value, selections, Path(output_dir).resolve(), clip_observer)
