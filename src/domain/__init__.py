# Domain Layer
from src.domain.diagnostics import Diagnostic
from src.domain.result import Failure, Result, Success, assert_success, fail, success
from src.domain.entities import (
    AudioQuality,
    ClipSelection,
    FormatSelection,
    StreamDescriptor,
    VideoInfo,
    VideoMetadata,
)
from src.domain.exceptions import (
    MetadataLookupError,
    SplytError,
    StreamTransferError,
    TranscodeError,
)
from src.domain.format_selection import select_formats

__all__ = [
    "Diagnostic",
    "Result",
    "Success",
    "Failure",
    "success",
    "fail",
    "assert_success",
    "AudioQuality",
    "StreamDescriptor",
    "VideoMetadata",
    "VideoInfo",
    "FormatSelection",
    "ClipSelection",
    "select_formats",
    "SplytError",
    "MetadataLookupError",
    "StreamTransferError",
    "TranscodeError",
]
