# Infrastructure Layer
from src.infrastructure.ffmpeg_transcoder import FFmpegTranscoder
from src.infrastructure.httpx_stream_downloader import HttpxStreamDownloader
from src.infrastructure.local_file_system import LocalFileSystem
from src.infrastructure.logging_observers import LoggingClipObserver, LoggingDownloadObserver
from src.infrastructure.ytdlp_metadata_provider import YtdlpMetadataProvider

__all__ = [
    "YtdlpMetadataProvider",
    "HttpxStreamDownloader",
    "LocalFileSystem",
    "FFmpegTranscoder",
    "LoggingDownloadObserver",
    "LoggingClipObserver",
]
