"""動画取得ユースケース: 解決 → 選択 → ダウンロード → マージ"""

from pathlib import Path

from src.application.interfaces.file_system import FileSystem
from src.application.interfaces.observers import NULL_DOWNLOAD_OBSERVER, DownloadObserver
from src.application.usecases.download_streams import StreamTransfer
from src.application.usecases.merge_streams import StreamMerger
from src.application.usecases.resolve_catalog import CatalogResolver
from src.domain import diagnostics
from src.domain.format_selection import select_formats
from src.domain.result import Result, fail, success
from src.domain.youtube_url import get_youtube_id_from_url
from src.infrastructure.logging_config import LogContext, get_logger

logger = get_logger(__name__)


def get_out_file_path(url: str, output_dir: Path, container: str = "mp4") -> Result[Path]:
    """URLに対応する最終ファイルのパス"""
    video_id = get_youtube_id_from_url(url)
    if not video_id:
        return fail(diagnostics.NO_ID_IN_URL)
    return success(Path(output_dir).resolve() / f"{video_id}.{container}")


class AcquireVideoUseCase:
    """
    動画IDごとに1つのローカルファイルを用意する

    出力ファイルが既に存在し overwrite=False の場合は通信せずに成功を返す。
    映像と音声が別ストリームの場合は <id>-video / <id>-audio の一時ファイルに
    並行ダウンロードしてからマージする（一時ファイルは削除しない）。
    自動リトライは行わない。
    """

    def __init__(
        self,
        resolver: CatalogResolver,
        transfer: StreamTransfer,
        merger: StreamMerger,
        file_system: FileSystem,
        target_container: str = "mp4",
    ):
        self.resolver = resolver
        self.transfer = transfer
        self.merger = merger
        self.file_system = file_system
        self.target_container = target_container

    async def acquire_url(
        self,
        url: str,
        output_dir: Path,
        overwrite: bool = False,
        observer: DownloadObserver = NULL_DOWNLOAD_OBSERVER,
    ) -> Result[Path]:
        """URLから動画IDを取り出して acquire を実行（IDがなければNO_ID_IN_URL）"""
        video_id = get_youtube_id_from_url(url)
        if not video_id:
            return fail(diagnostics.NO_ID_IN_URL)
        return await self.acquire(video_id, output_dir, overwrite, observer)

    async def acquire(
        self,
        video_id: str,
        output_dir: Path,
        overwrite: bool = False,
        observer: DownloadObserver = NULL_DOWNLOAD_OBSERVER,
    ) -> Result[Path]:
        """
        メイン実行フロー

        Args:
            video_id: YouTube動画ID
            output_dir: 出力ディレクトリ
            overwrite: 既存ファイルを取り直すか
            observer: 進捗通知先

        Returns:
            最終ファイルパスのResult
        """
        output_dir = Path(output_dir).resolve()
        out_file = output_dir / f"{video_id}.{self.target_container}"
        ctx = LogContext(video_id=video_id, out_file=str(out_file))

        try:
            await self.file_system.mkdir_all(output_dir)
            if not overwrite and await self.file_system.exists(out_file):
                logger.info(f"[Acquire] 既存ファイルを再利用 | {ctx}")
                return success(out_file)
        except Exception as e:
            logger.error(f"[Acquire] 出力ディレクトリを準備できません | {ctx} - {e}")
            return fail(diagnostics.DOWNLOAD_ERROR, e)

        # Phase 1: ストリームカタログ取得
        resolved = await self.resolver.resolve(video_id)
        if not resolved.success:
            return resolved
        info = resolved.value

        # Phase 2: フォーマット選択
        formats = select_formats(info.formats, self.target_container)
        if not formats:
            logger.warning(f"[Acquire] ダウンロード可能な映像フォーマットなし | {ctx}")
            return fail(diagnostics.NO_VIDEO_FORMAT)
        observer.on_info(info, formats)

        if len(formats) == 1:
            # 単一ストリーム: 最終ファイルへ直接保存
            logger.info(f"[Acquire] 単一ストリームをダウンロード | {ctx.update(format=formats[0].format_id)}")
            try:
                return await self.transfer.download(
                    info, formats[0], out_file, observer.on_download_progress
                )
            finally:
                observer.on_downloaded()

        # Phase 3: 映像・音声を並行ダウンロード
        video, audio = formats
        video_path = output_dir / f"{video_id}-video.{self.target_container}"
        audio_path = output_dir / f"{video_id}-audio.{audio.container}"
        logger.info(
            f"[Acquire] 映像と音声を個別にダウンロード | "
            f"{ctx.update(video=video.format_id, audio=audio.format_id)}"
        )
        try:
            transferred = await self.transfer.download_pair(
                info, video, audio, video_path, audio_path, observer.on_download_progress
            )
        finally:
            observer.on_downloaded()
        if not transferred.success:
            return transferred

        # Phase 4: マージ
        merged = await self.merger.merge(
            video_path,
            audio_path,
            out_file,
            info.metadata.duration_ms,
            observer,
        )
        if not merged.success:
            return merged
        return success(out_file)
