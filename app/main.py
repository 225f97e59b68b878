"""アプリケーションのエントリーポイント（依存関係の組み立て）

引数の解釈や対話的な入力は呼び出し側の責務。ここでは設定から
ユースケースを組み立てる関数と、それを実行する薄いヘルパーを提供する。
"""

from pathlib import Path

from dotenv import load_dotenv

from config.settings import Settings, get_settings
from src.application.usecases.acquire_video import AcquireVideoUseCase
from src.application.usecases.cut_clips import ClipCutter
from src.application.usecases.download_streams import StreamTransfer
from src.application.usecases.extract_clips import ExtractClipsUseCase
from src.application.usecases.merge_streams import StreamMerger
from src.application.usecases.resolve_catalog import CatalogResolver
from src.domain.entities import ClipSelection
from src.domain.result import Result
from src.infrastructure.ffmpeg_transcoder import FFmpegTranscoder
from src.infrastructure.httpx_stream_downloader import HttpxStreamDownloader
from src.infrastructure.local_file_system import LocalFileSystem
from src.infrastructure.logging_config import get_logger, parse_log_level, setup_logging
from src.infrastructure.logging_observers import LoggingClipObserver, LoggingDownloadObserver
from src.infrastructure.ytdlp_metadata_provider import YtdlpMetadataProvider

logger = get_logger(__name__)


def bootstrap(env_file: Path | None = None) -> Settings:
    """.env読み込みとロギング初期化を行い、設定を返す"""
    load_dotenv(env_file)
    settings = get_settings()
    setup_logging(level=parse_log_level(settings.LOG_LEVEL))
    return settings


def init_acquirer(settings: Settings) -> AcquireVideoUseCase:
    """DIで動画取得ユースケースを組み立て"""
    file_system = LocalFileSystem()
    transcoder = FFmpegTranscoder(ffmpeg_path=settings.FFMPEG_PATH)
    return AcquireVideoUseCase(
        resolver=CatalogResolver(YtdlpMetadataProvider()),
        transfer=StreamTransfer(
            downloader=HttpxStreamDownloader(
                chunk_size=settings.DOWNLOAD_CHUNK_SIZE,
                timeout=settings.HTTP_TIMEOUT,
            ),
            file_system=file_system,
        ),
        merger=StreamMerger(
            transcoder,
            target_container=settings.TARGET_CONTAINER,
            audio_codec=settings.AUDIO_CODEC,
        ),
        file_system=file_system,
        target_container=settings.TARGET_CONTAINER,
    )


def init_clip_usecase(settings: Settings) -> ExtractClipsUseCase:
    """DIでクリップ抽出ユースケースを組み立て"""
    return ExtractClipsUseCase(
        acquirer=init_acquirer(settings),
        cutter=ClipCutter(
            FFmpegTranscoder(ffmpeg_path=settings.FFMPEG_PATH),
            LocalFileSystem(),
            target_container=settings.TARGET_CONTAINER,
            concurrency=settings.CLIP_CONCURRENCY,
        ),
    )


async def download(
    url: str,
    settings: Settings,
    output_dir: Path | None = None,
    overwrite: bool = False,
) -> Result[Path]:
    """動画を1本ダウンロード（進捗はログ出力）"""
    acquirer = init_acquirer(settings)
    return await acquirer.acquire_url(
        url,
        output_dir or settings.OUTPUT_DIR,
        overwrite,
        LoggingDownloadObserver(),
    )


async def clip(
    url: str,
    selections: list[ClipSelection],
    settings: Settings,
    output_dir: Path | None = None,
    overwrite: bool = False,
) -> Result[dict[Path, Result[None]]]:
    """動画を取得してクリップを切り出す（進捗はログ出力）"""
    usecase = init_clip_usecase(settings)
    return await usecase.execute(
        url,
        selections,
        output_dir or settings.OUTPUT_DIR,
        overwrite,
        LoggingDownloadObserver(),
        LoggingClipObserver(),
    )
