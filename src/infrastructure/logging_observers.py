"""進捗をロガーへ出力するオブザーバー"""

import time

from src.application.interfaces.observers import ClipObserver, DownloadObserver
from src.domain.entities import FormatSelection, VideoInfo
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


def _percent(done: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return min(100.0, done * 100 / total)


class LoggingDownloadObserver(DownloadObserver):
    """ダウンロード・マージの進捗をinterval秒ごとにINFOログへ出力"""

    def __init__(self, interval_sec: float = 1.0):
        self.interval_sec = interval_sec
        self._last_logged: float | None = None
        self._merge_total_ms = 0

    def _should_log(self) -> bool:
        now = time.monotonic()
        if self._last_logged is not None and now - self._last_logged < self.interval_sec:
            return False
        self._last_logged = now
        return True

    def on_info(self, info: VideoInfo, formats: FormatSelection) -> None:
        kinds = "+".join(f.format_id or f.container for f in formats)
        logger.info(f"[Download] {info.metadata.title} をダウンロード中... ({kinds})")

    def on_download_progress(self, transferred: int, total: int) -> None:
        if self._should_log():
            logger.info(
                f"[Download] {_percent(transferred, total):5.1f}% "
                f"({transferred / 1e6:.1f}/{total / 1e6:.1f} MB)"
            )

    def on_downloaded(self) -> None:
        logger.info("[Download] ダウンロード終了")

    def on_merge_start(self, total_ms: int) -> None:
        self._merge_total_ms = total_ms
        logger.info("[Download] 映像と音声をマージ中...")

    def on_merge_progress(self, encoded_ms: int) -> None:
        if self._should_log():
            logger.info(f"[Download] マージ {_percent(encoded_ms, self._merge_total_ms):5.1f}%")

    def on_merged(self) -> None:
        logger.info("[Download] マージ終了")


class LoggingClipObserver(ClipObserver):
    """クリップごとの進捗をファイル名付きでログ出力"""

    def __init__(self) -> None:
        self._totals: dict[str, int] = {}

    def on_clip_start(self, filename: str, total_ms: int) -> None:
        self._totals[filename] = total_ms
        logger.info(f"[Clip] {filename} 切り出し開始 ({total_ms / 1000:.1f}秒)")

    def on_clip_progress(self, filename: str, encoded_ms: int) -> None:
        logger.debug(
            f"[Clip] {filename} {_percent(encoded_ms, self._totals.get(filename, 0)):5.1f}%"
        )

    def on_clip_saved(self, filename: str) -> None:
        logger.info(f"[Clip] {filename} 保存完了")

    def on_clip_failed(self, filename: str, error: BaseException) -> None:
        logger.error(f"[Clip] {filename} 失敗: {error}")
