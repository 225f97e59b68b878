# Use Cases
from src.application.usecases.acquire_video import AcquireVideoUseCase, get_out_file_path
from src.application.usecases.cut_clips import ClipCutter
from src.application.usecases.download_streams import ProgressAggregator, StreamTransfer
from src.application.usecases.extract_clips import ExtractClipsUseCase
from src.application.usecases.merge_streams import StreamMerger
from src.application.usecases.resolve_catalog import CatalogResolver

__all__ = [
    "AcquireVideoUseCase",
    "get_out_file_path",
    "CatalogResolver",
    "StreamTransfer",
    "ProgressAggregator",
    "StreamMerger",
    "ClipCutter",
    "ExtractClipsUseCase",
]
