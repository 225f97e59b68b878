"""yt-dlp を使用した動画情報・ストリームカタログ取得"""

import asyncio
from typing import Any

import yt_dlp

from src.domain.entities import AudioQuality, StreamDescriptor, VideoInfo, VideoMetadata
from src.domain.exceptions import MetadataLookupError
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


# 単一GETで取得できるプロトコル（m3u8やDASHセグメントはマニフェストのみ返る）
DIRECT_PROTOCOLS = frozenset({"http", "https"})


def is_direct_download(fmt: dict[str, Any]) -> bool:
    """URLがあり、そのままHTTPで取得できるフォーマットか"""
    return bool(fmt.get("url")) and fmt.get("protocol") in DIRECT_PROTOCOLS


def _has_codec(value: Any) -> bool:
    return bool(value) and value != "none"


def _quality_label(fmt: dict[str, Any]) -> str | None:
    """"1080p" 形式のラベル。format_noteが解像度表記でなければ高さから作る"""
    note = fmt.get("format_note")
    if isinstance(note, str) and note[:1].isdigit() and "p" in note:
        return note
    height = fmt.get("height")
    if isinstance(height, int) and height > 0:
        return f"{height}p"
    return None


def descriptor_from_format(fmt: dict[str, Any]) -> StreamDescriptor:
    """yt-dlpのformat辞書をStreamDescriptorに変換"""
    has_video = _has_codec(fmt.get("vcodec"))
    has_audio = _has_codec(fmt.get("acodec"))
    abr = fmt.get("abr")
    return StreamDescriptor(
        container=fmt.get("ext") or "",
        has_video=has_video,
        has_audio=has_audio,
        quality_label=_quality_label(fmt) if has_video else None,
        audio_bitrate=float(abr) if has_audio and abr else None,
        audio_quality=AudioQuality.parse(fmt.get("format_note")) if has_audio else None,
        format_id=fmt.get("format_id"),
        url=fmt.get("url"),
        http_headers=dict(fmt.get("http_headers") or {}),
        filesize=fmt.get("filesize") or fmt.get("filesize_approx"),
    )


class YtdlpMetadataProvider:
    """yt-dlp の extract_info(download=False) でカタログを取得"""

    def __init__(self) -> None:
        self.ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
        }

    async def get_info(self, url: str) -> VideoInfo:
        """
        動画情報を取得（ブロッキング処理はワーカースレッドで実行）

        Raises:
            MetadataLookupError: 取得失敗
        """
        return await asyncio.to_thread(self._extract, url)

    def _extract(self, url: str) -> VideoInfo:
        logger.debug(f"[yt-dlp] 情報取得開始: {url}")
        try:
            with yt_dlp.YoutubeDL(self.ydl_opts) as ydl:
                info = ydl.extract_info(url, download=False)
        except yt_dlp.utils.DownloadError as e:
            error_msg = str(e)
            if "Private video" in error_msg:
                logger.debug(f"[yt-dlp] 非公開動画: {url}")
            elif "Video unavailable" in error_msg:
                logger.debug(f"[yt-dlp] 動画が利用不可: {url}")
            raise MetadataLookupError(f"yt-dlp error: {error_msg}") from e

        if not info:
            raise MetadataLookupError(f"No video info returned for {url}")

        formats = tuple(
            descriptor_from_format(fmt)
            for fmt in info.get("formats") or []
            if is_direct_download(fmt)
        )
        metadata = VideoMetadata(
            video_id=info.get("id") or "",
            title=info.get("title") or "",
            duration_sec=int(info.get("duration") or 0),
            channel_name=info.get("channel") or info.get("uploader"),
        )
        logger.debug(f"[yt-dlp] 情報取得完了: {metadata.video_id} - {len(formats)}フォーマット")
        return VideoInfo(metadata=metadata, formats=formats)
