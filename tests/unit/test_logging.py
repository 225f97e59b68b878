"""ロギング関連のテスト"""

import logging

import pytest

from src.infrastructure.logging_config import LogContext, get_logger, parse_log_level
from src.infrastructure.logging_observers import LoggingClipObserver, LoggingDownloadObserver


class TestLogContext:
    """LogContextのテスト"""

    def test_str(self) -> None:
        ctx = LogContext(video_id="abc", container="mp4")
        assert str(ctx) == "video_id='abc' | container='mp4'"

    def test_update_returns_new_instance(self) -> None:
        ctx = LogContext(video_id="abc")
        updated = ctx.update(format="137")
        assert str(ctx) == "video_id='abc'"
        assert str(updated) == "video_id='abc' | format='137'"


def test_get_logger_is_cached() -> None:
    assert get_logger("splyt.test") is get_logger("splyt.test")


def test_parse_log_level() -> None:
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level("nonsense") == logging.INFO


class TestLoggingObservers:
    """ログ出力オブザーバーのテスト"""

    def test_clip_events(self, caplog: pytest.LogCaptureFixture) -> None:
        observer = LoggingClipObserver()
        with caplog.at_level(logging.INFO):
            observer.on_clip_start("clip1.mp4", 14000)
            observer.on_clip_saved("clip1.mp4")
            observer.on_clip_failed("clip2.mp4", RuntimeError("boom"))
        assert "clip1.mp4" in caplog.text
        assert "boom" in caplog.text

    def test_download_progress_is_throttled(self, caplog: pytest.LogCaptureFixture) -> None:
        observer = LoggingDownloadObserver(interval_sec=3600)
        with caplog.at_level(logging.INFO):
            observer.on_download_progress(10, 100)
            observer.on_download_progress(20, 100)
        assert caplog.text.count("%") == 1
