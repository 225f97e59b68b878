"""ストリームのダウンロード（1本または2本同時）"""

import asyncio
from collections.abc import Callable
from pathlib import Path

from src.application.interfaces.file_system import FileSystem
from src.application.interfaces.stream_downloader import StreamDownloader
from src.domain import diagnostics
from src.domain.entities import StreamDescriptor, VideoInfo
from src.domain.result import Result, fail, success
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


class ProgressAggregator:
    """
    2本の転送の進捗を1本にまとめる

    どちらかの更新のたびに、両側の転送量と合計サイズを足し合わせて通知する。
    各側の合計サイズは単調非減少に保つ。

    Example:
        (50, 100) と (30, 50) → (80, 150)
    """

    def __init__(self, on_progress: ProgressCallback, sides: int = 2):
        self._on_progress = on_progress
        self._transferred = [0] * sides
        self._totals = [0] * sides

    def side(self, index: int) -> ProgressCallback:
        """index番目の転送用コールバックを返す"""

        def update(transferred: int, total: int) -> None:
            self._transferred[index] = transferred
            self._totals[index] = max(self._totals[index], total)
            self._on_progress(sum(self._transferred), sum(self._totals))

        return update

    @property
    def combined(self) -> tuple[int, int]:
        return sum(self._transferred), sum(self._totals)


class StreamTransfer:
    """ストリームをローカルファイルへ保存"""

    def __init__(self, downloader: StreamDownloader, file_system: FileSystem):
        self.downloader = downloader
        self.file_system = file_system

    async def download(
        self,
        info: VideoInfo,
        descriptor: StreamDescriptor,
        destination: Path,
        on_progress: ProgressCallback | None = None,
    ) -> Result[Path]:
        """
        1本のストリームをダウンロード

        Args:
            info: 動画情報
            descriptor: 対象ストリーム
            destination: 保存先
            on_progress: (transferred, total) を受け取るコールバック

        Returns:
            保存先パスのResult、失敗時はDOWNLOAD_ERROR
        """
        logger.debug(
            f"[Transfer] 開始: format={descriptor.format_id} "
            f"container={descriptor.container} → {destination.name}"
        )
        try:
            async with await self.file_system.open_write(destination) as writer:
                async for chunk in self.downloader.stream(info, descriptor):
                    await writer.write(chunk.data)
                    if on_progress:
                        on_progress(chunk.transferred, chunk.total)
        except Exception as e:
            logger.error(f"[Transfer] ダウンロード失敗: {destination.name} - {e}")
            return fail(diagnostics.DOWNLOAD_ERROR, e)

        logger.info(f"[Transfer] 保存完了: {destination}")
        return success(destination)

    async def download_pair(
        self,
        info: VideoInfo,
        video: StreamDescriptor,
        audio: StreamDescriptor,
        video_path: Path,
        audio_path: Path,
        on_progress: ProgressCallback | None = None,
    ) -> Result[tuple[Path, Path]]:
        """
        映像と音声を同時にダウンロード

        両方の転送が終わるまで待ってから結果を返す。
        どちらかが失敗した場合は、その失敗をそのまま返す（映像側を優先）。
        """
        video_progress = audio_progress = None
        if on_progress:
            aggregator = ProgressAggregator(on_progress)
            video_progress, audio_progress = aggregator.side(0), aggregator.side(1)

        logger.info("[Transfer] 映像と音声を並行ダウンロード")
        video_result, audio_result = await asyncio.gather(
            self.download(info, video, video_path, video_progress),
            self.download(info, audio, audio_path, audio_progress),
        )
        if not video_result.success:
            return video_result
        if not audio_result.success:
            return audio_result
        return success((video_result.value, audio_result.value))
