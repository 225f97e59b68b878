"""進捗通知のオブザーバー（すべて何もしないデフォルト実装）"""

from src.domain.entities import FormatSelection, VideoInfo


class DownloadObserver:
    """ダウンロード・マージの進捗通知"""

    def on_info(self, info: VideoInfo, formats: FormatSelection) -> None:
        pass

    def on_download_progress(self, transferred: int, total: int) -> None:
        pass

    def on_downloaded(self) -> None:
        pass

    def on_merge_start(self, total_ms: int) -> None:
        pass

    def on_merge_progress(self, encoded_ms: int) -> None:
        pass

    def on_merged(self) -> None:
        pass


class ClipObserver:
    """クリップ切り出しの進捗通知（出力ファイル名ごと）"""

    def on_clip_start(self, filename: str, total_ms: int) -> None:
        pass

    def on_clip_progress(self, filename: str, encoded_ms: int) -> None:
        pass

    def on_clip_saved(self, filename: str) -> None:
        pass

    def on_clip_failed(self, filename: str, error: BaseException) -> None:
        pass


NULL_DOWNLOAD_OBSERVER = DownloadObserver()
NULL_CLIP_OBSERVER = ClipObserver()
