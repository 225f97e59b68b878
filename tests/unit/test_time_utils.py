"""時間変換ユーティリティのテスト"""

import pytest

from src.domain import diagnostics
from src.domain.time_utils import format_ffmpeg_time, parse_duration, parse_timestamp


class TestParseTimestamp:
    """タイムスタンプ解析のテスト"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1:23", 83),
            ("01:23", 83),
            ("00:01:23", 83),
            ("1:32:48", 5568),
            (" 23:42 ", 1422),
            ("90:00", 5400),
        ],
    )
    def test_valid(self, value: str, expected: int) -> None:
        """有効な形式"""
        result = parse_timestamp(value)
        assert result.success
        assert result.value == expected

    @pytest.mark.parametrize(
        "value",
        ["", "83", "1:60", "1:2:3:4", "a:10", "1:234", "-1:10", None],
    )
    def test_invalid(self, value: object) -> None:
        """不正な形式はINVALID_TIMESTAMP"""
        result = parse_timestamp(value)
        assert not result.success
        assert result.diagnostic == diagnostics.INVALID_TIMESTAMP


class TestParseDuration:
    """長さ指定の解析のテスト"""

    def test_valid(self) -> None:
        """数字のみ"""
        result = parse_duration("5")
        assert result.success
        assert result.value == 5

    @pytest.mark.parametrize("value", ["", "5s", "1.5", "-3", None])
    def test_invalid(self, value: object) -> None:
        """数字以外はINVALID_DURATION"""
        result = parse_duration(value)
        assert not result.success
        assert result.diagnostic == diagnostics.INVALID_DURATION


class TestFormatFfmpegTime:
    """ffmpeg時間指定のテスト"""

    def test_whole_seconds(self) -> None:
        assert format_ffmpeg_time(83) == "00:01:23.00"

    def test_fraction(self) -> None:
        assert format_ffmpeg_time(3661.5) == "01:01:01.50"

    def test_zero(self) -> None:
        assert format_ffmpeg_time(0) == "00:00:00.00"

    def test_rounding_carries_into_seconds(self) -> None:
        """端数の繰り上がりは秒・分へ伝播"""
        assert format_ffmpeg_time(1.999) == "00:00:02.00"
        assert format_ffmpeg_time(59.996) == "00:01:00.00"
