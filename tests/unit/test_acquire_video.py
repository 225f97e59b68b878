"""動画取得ユースケースのテスト"""

import asyncio
from pathlib import Path

import pytest

from fakes import (
    VIDEO_ID,
    FakeDownloader,
    FakeMetadataProvider,
    FakeTranscoder,
    InMemoryFileSystem,
    RecordingDownloadObserver,
    make_descriptor,
    make_info,
)
from src.application.usecases.acquire_video import AcquireVideoUseCase, get_out_file_path
from src.application.usecases.download_streams import StreamTransfer
from src.application.usecases.merge_streams import StreamMerger
from src.application.usecases.resolve_catalog import CatalogResolver
from src.domain import diagnostics
from src.domain.entities import VideoInfo
from src.domain.exceptions import MetadataLookupError, StreamTransferError


def build_usecase(
    provider: FakeMetadataProvider,
    downloader: FakeDownloader,
    transcoder: FakeTranscoder,
    fs: InMemoryFileSystem,
) -> AcquireVideoUseCase:
    return AcquireVideoUseCase(
        resolver=CatalogResolver(provider),
        transfer=StreamTransfer(downloader, fs),
        merger=StreamMerger(transcoder),
        file_system=fs,
    )


@pytest.fixture
def make_usecase(fs, downloader, transcoder):
    def _make(info: VideoInfo | None = None, error: Exception | None = None):
        provider = FakeMetadataProvider(info, error)
        return build_usecase(provider, downloader, transcoder, fs), provider

    return _make


class TestAcquireVideo:
    """AcquireVideoUseCaseのテスト"""

    def test_combined_stream_downloads_directly(self, make_usecase, combined_info, fs, transcoder, out_dir) -> None:
        """単一ストリームは最終ファイルへ直接保存し、マージしない"""
        usecase, provider = make_usecase(combined_info)
        observer = RecordingDownloadObserver()

        result = asyncio.run(usecase.acquire(VIDEO_ID, out_dir, observer=observer))

        assert result.success
        assert result.value == out_dir / f"{VIDEO_ID}.mp4"
        assert out_dir / f"{VIDEO_ID}.mp4" in fs.files
        assert transcoder.commands == []
        assert provider.calls == [f"https://www.youtube.com/watch?v={VIDEO_ID}"]
        assert observer.names()[0] == "info"
        assert observer.names()[-1] == "downloaded"

    def test_split_streams_download_then_merge(self, make_usecase, split_info, fs, transcoder, out_dir) -> None:
        """分離ストリームは一時ファイルに保存してからマージ"""
        usecase, _ = make_usecase(split_info)
        observer = RecordingDownloadObserver()

        result = asyncio.run(usecase.acquire(VIDEO_ID, out_dir, observer=observer))

        assert result.success
        video_tmp = out_dir / f"{VIDEO_ID}-video.mp4"
        audio_tmp = out_dir / f"{VIDEO_ID}-audio.webm"
        # 一時ファイルはマージ後も残る
        assert video_tmp in fs.files
        assert audio_tmp in fs.files
        command = transcoder.commands[0]
        assert [i.path for i in command.inputs] == [video_tmp, audio_tmp]
        assert command.outputs[0].path == out_dir / f"{VIDEO_ID}.mp4"
        assert command.outputs[0].options["c:a"] == "aac"
        names = observer.names()
        assert names.index("downloaded") < names.index("merge_start")
        assert ("merge_start", 212000) in observer.events

    def test_idempotent_without_overwrite(self, make_usecase, combined_info, downloader, out_dir) -> None:
        """2回目は通信せずに既存ファイルを返す"""
        usecase, provider = make_usecase(combined_info)

        first = asyncio.run(usecase.acquire(VIDEO_ID, out_dir))
        second = asyncio.run(usecase.acquire(VIDEO_ID, out_dir))

        assert first.success and second.success
        assert first.value == second.value
        assert len(provider.calls) == 1
        assert downloader.completed == ["22"]

    def test_overwrite_downloads_again(self, make_usecase, combined_info, fs, out_dir) -> None:
        """overwrite=Trueなら既存ファイルがあっても取り直す"""
        fs.add_file(out_dir / f"{VIDEO_ID}.mp4", b"old")
        usecase, provider = make_usecase(combined_info)

        result = asyncio.run(usecase.acquire(VIDEO_ID, out_dir, overwrite=True))

        assert result.success
        assert len(provider.calls) == 1
        assert fs.files[out_dir / f"{VIDEO_ID}.mp4"] != b"old"

    def test_resolve_failure(self, make_usecase, out_dir) -> None:
        """情報取得の失敗はDOWNLOAD_ERROR"""
        cause = MetadataLookupError("Video unavailable")
        usecase, _ = make_usecase(error=cause)

        result = asyncio.run(usecase.acquire(VIDEO_ID, out_dir))

        assert result.diagnostic == diagnostics.DOWNLOAD_ERROR
        assert result.error is cause

    def test_no_video_format(self, make_usecase, out_dir) -> None:
        """映像候補がなければNO_VIDEO_FORMAT"""
        info = make_info(make_descriptor("251", container="webm", video=False, audio=True))
        usecase, _ = make_usecase(info)

        result = asyncio.run(usecase.acquire(VIDEO_ID, out_dir))

        assert result.diagnostic == diagnostics.NO_VIDEO_FORMAT

    def test_transfer_failure_skips_merge(self, make_usecase, split_info, downloader, transcoder, out_dir) -> None:
        """片方の転送失敗でマージせずDOWNLOAD_ERROR"""
        downloader.errors["251"] = StreamTransferError("reset")
        usecase, _ = make_usecase(split_info)

        result = asyncio.run(usecase.acquire(VIDEO_ID, out_dir))

        assert result.diagnostic == diagnostics.DOWNLOAD_ERROR
        assert transcoder.commands == []
        assert downloader.completed == ["137"]

    def test_merge_failure(self, make_usecase, split_info, transcoder, out_dir) -> None:
        """マージ失敗はMERGE_ERROR"""
        transcoder.failing_outputs.add(f"{VIDEO_ID}.mp4")
        usecase, _ = make_usecase(split_info)

        result = asyncio.run(usecase.acquire(VIDEO_ID, out_dir))

        assert result.diagnostic == diagnostics.MERGE_ERROR

    def test_acquire_url(self, make_usecase, combined_info, out_dir) -> None:
        """URLからIDを取り出して取得"""
        usecase, _ = make_usecase(combined_info)

        result = asyncio.run(usecase.acquire_url(f"https://youtu.be/{VIDEO_ID}", out_dir))

        assert result.value == out_dir / f"{VIDEO_ID}.mp4"

    def test_acquire_url_without_id(self, make_usecase, combined_info, out_dir) -> None:
        """IDを含まないURLはNO_ID_IN_URL（通信なし）"""
        usecase, provider = make_usecase(combined_info)

        result = asyncio.run(usecase.acquire_url("https://www.youtube.com/", out_dir))

        assert result.diagnostic == diagnostics.NO_ID_IN_URL
        assert provider.calls == []


class TestGetOutFilePath:
    """最終ファイルパスのテスト"""

    def test_path(self) -> None:
        result = get_out_file_path(f"https://www.youtube.com/watch?v={VIDEO_ID}", Path("/videos"))
        assert result.value == Path("/videos") / f"{VIDEO_ID}.mp4"

    def test_no_id(self) -> None:
        result = get_out_file_path("https://www.youtube.com/", Path("/videos"))
        assert result.diagnostic == diagnostics.NO_ID_IN_URL
