"""ドメインエンティティのテスト"""

import pytest

from src.domain.entities import AudioQuality, ClipSelection, StreamDescriptor, VideoMetadata


class TestClipSelection:
    """ClipSelectionのテスト"""

    def test_duration(self) -> None:
        """区間の長さ計算"""
        clip = ClipSelection(start_sec=83, end_sec=97)
        assert clip.duration_sec == 14
        assert clip.duration_ms == 14000

    def test_name_is_optional(self) -> None:
        """名前は省略可能"""
        assert ClipSelection(start_sec=0, end_sec=1).name is None
        assert ClipSelection(start_sec=0, end_sec=1, name="intro").name == "intro"

    def test_invalid_range_negative_start(self) -> None:
        """開始時間が負の場合エラー"""
        with pytest.raises(ValueError, match="non-negative"):
            ClipSelection(start_sec=-1, end_sec=100)

    def test_invalid_range_end_before_start(self) -> None:
        """終了時間が開始時間以前の場合エラー"""
        with pytest.raises(ValueError, match="greater than"):
            ClipSelection(start_sec=200, end_sec=100)
        with pytest.raises(ValueError, match="greater than"):
            ClipSelection(start_sec=100, end_sec=100)

    def test_to_ffmpeg_ss(self) -> None:
        """ffmpeg -ss フォーマット"""
        clip = ClipSelection(start_sec=3661.5, end_sec=3700)  # 1:01:01.50
        assert clip.to_ffmpeg_ss() == "01:01:01.50"

    def test_to_ffmpeg_t(self) -> None:
        """ffmpeg -t フォーマット"""
        clip = ClipSelection(start_sec=0, end_sec=65.25)  # 1分5秒
        assert clip.to_ffmpeg_t() == "00:01:05.25"


class TestStreamDescriptor:
    """StreamDescriptorのテスト"""

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("1080p", 1080),
            ("720p60", 720),
            ("144p HDR", 144),
            ("tiny", None),
            ("", None),
            (None, None),
        ],
    )
    def test_quality(self, label: str | None, expected: int | None) -> None:
        """qualityLabelから数値の解像度を取り出す"""
        descriptor = StreamDescriptor(container="mp4", has_video=True, has_audio=False, quality_label=label)
        assert descriptor.quality == expected

    def test_is_combined(self) -> None:
        """映像と音声の両方を持つ場合のみcombined"""
        assert StreamDescriptor(container="mp4", has_video=True, has_audio=True).is_combined
        assert not StreamDescriptor(container="mp4", has_video=True, has_audio=False).is_combined

    def test_immutable(self) -> None:
        """記述子は変更不可"""
        descriptor = StreamDescriptor(container="mp4", has_video=True, has_audio=False)
        with pytest.raises(AttributeError):
            descriptor.container = "webm"  # type: ignore[misc]


class TestAudioQuality:
    """AudioQualityのテスト"""

    def test_parse_plain(self) -> None:
        """yt-dlpのformat_note形式"""
        assert AudioQuality.parse("medium") is AudioQuality.MEDIUM
        assert AudioQuality.parse("low") is AudioQuality.LOW

    def test_parse_youtube_enum(self) -> None:
        """YouTubeのAUDIO_QUALITY_*形式"""
        assert AudioQuality.parse("AUDIO_QUALITY_MEDIUM") is AudioQuality.MEDIUM

    def test_parse_unknown(self) -> None:
        """不明な値はNone"""
        assert AudioQuality.parse("1080p") is None
        assert AudioQuality.parse(None) is None


class TestVideoMetadata:
    """VideoMetadataのテスト"""

    def test_duration_ms(self) -> None:
        """秒からミリ秒への変換"""
        metadata = VideoMetadata(video_id="dQw4w9WgXcQ", title="t", duration_sec=212)
        assert metadata.duration_ms == 212000

    def test_url(self) -> None:
        """視聴URL"""
        metadata = VideoMetadata(video_id="dQw4w9WgXcQ", title="t", duration_sec=1)
        assert metadata.url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
