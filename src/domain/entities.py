"""ドメインエンティティ定義"""

from dataclasses import dataclass, field
from enum import Enum

from src.domain.time_utils import format_ffmpeg_time
from src.domain.youtube_url import youtube_watch_url


class AudioQuality(Enum):
    """音声品質の区分"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: str | None) -> "AudioQuality | None":
        """
        "medium" や "AUDIO_QUALITY_MEDIUM" 形式の文字列を変換

        不明な値はNoneを返す
        """
        if not value:
            return None
        normalized = value.strip().lower().removeprefix("audio_quality_")
        for quality in cls:
            if quality.value == normalized:
                return quality
        return None


@dataclass(frozen=True)
class StreamDescriptor:
    """ダウンロード可能な1ストリームの記述子"""

    container: str
    has_video: bool
    has_audio: bool
    quality_label: str | None = None
    audio_bitrate: float | None = None
    audio_quality: AudioQuality | None = None
    # 以下はアダプタ固有の付帯情報
    format_id: str | None = None
    url: str | None = None
    http_headers: dict[str, str] = field(default_factory=dict, compare=False, hash=False)
    filesize: int | None = None

    @property
    def is_combined(self) -> bool:
        """映像と音声を両方含むか"""
        return self.has_video and self.has_audio

    @property
    def quality(self) -> int | None:
        """qualityLabelの数値部分（"1080p60" → 1080）、解析不能ならNone"""
        if not self.quality_label:
            return None
        head = self.quality_label.split("p")[0].strip()
        if not head.isdigit():
            return None
        return int(head) or None


@dataclass(frozen=True)
class VideoMetadata:
    """YouTube動画のメタデータ"""

    video_id: str
    title: str
    duration_sec: int
    channel_name: str | None = None

    @property
    def url(self) -> str:
        return youtube_watch_url(self.video_id)

    @property
    def duration_ms(self) -> int:
        return self.duration_sec * 1000


@dataclass(frozen=True)
class VideoInfo:
    """メタデータとストリームカタログの組"""

    metadata: VideoMetadata
    formats: tuple[StreamDescriptor, ...]


# 単一ストリーム、または (映像, 音声) の組
FormatSelection = tuple[StreamDescriptor] | tuple[StreamDescriptor, StreamDescriptor]


@dataclass(frozen=True)
class ClipSelection:
    """切り出す時間範囲（名前は任意）"""

    start_sec: float
    end_sec: float
    name: str | None = None

    def __post_init__(self) -> None:
        if self.start_sec < 0:
            raise ValueError("start_sec must be non-negative")
        if self.end_sec <= self.start_sec:
            raise ValueError("end_sec must be greater than start_sec")

    @property
    def duration_sec(self) -> float:
        """区間の長さ（秒）"""
        return self.end_sec - self.start_sec

    @property
    def duration_ms(self) -> int:
        return int(round(self.duration_sec * 1000))

    def to_ffmpeg_ss(self) -> str:
        """ffmpegの-ssオプション用フォーマット（HH:MM:SS.ms）"""
        return format_ffmpeg_time(self.start_sec)

    def to_ffmpeg_t(self) -> str:
        """ffmpegの-tオプション用フォーマット（duration）"""
        return format_ffmpeg_time(self.duration_sec)
