"""共通フィクスチャ"""

from pathlib import Path

import pytest

from fakes import FakeDownloader, FakeTranscoder, InMemoryFileSystem, make_descriptor, make_info
from src.domain.entities import VideoInfo


@pytest.fixture
def fs() -> InMemoryFileSystem:
    return InMemoryFileSystem()


@pytest.fixture
def downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def transcoder(fs: InMemoryFileSystem) -> FakeTranscoder:
    return FakeTranscoder(fs)


@pytest.fixture
def out_dir() -> Path:
    return Path("/videos/out")


@pytest.fixture
def split_info() -> VideoInfo:
    """映像のみ1080p + 音声のみwebm"""
    return make_info(
        make_descriptor("137", quality="1080p"),
        make_descriptor("136", quality="720p"),
        make_descriptor("251", container="webm", video=False, audio=True, bitrate=160),
        make_descriptor("140", container="m4a", video=False, audio=True, bitrate=128),
    )


@pytest.fixture
def combined_info() -> VideoInfo:
    """音声付き720pのみ"""
    return make_info(
        make_descriptor("22", audio=True, quality="720p", bitrate=192),
        make_descriptor("136", quality="480p"),
    )
