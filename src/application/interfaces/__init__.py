# Application Interfaces (Protocols)
from src.application.interfaces.file_system import AsyncWriter, FileSystem
from src.application.interfaces.metadata_provider import MetadataProvider
from src.application.interfaces.observers import ClipObserver, DownloadObserver
from src.application.interfaces.stream_downloader import StreamChunk, StreamDownloader
from src.application.interfaces.transcoder import (
    TranscodeCommand,
    TranscodeExecution,
    TranscodeInput,
    TranscodeOutput,
    TranscodeProgress,
    Transcoder,
)

__all__ = [
    "MetadataProvider",
    "StreamDownloader",
    "StreamChunk",
    "FileSystem",
    "AsyncWriter",
    "Transcoder",
    "TranscodeCommand",
    "TranscodeExecution",
    "TranscodeInput",
    "TranscodeOutput",
    "TranscodeProgress",
    "DownloadObserver",
    "ClipObserver",
]
