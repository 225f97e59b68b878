"""YouTube URLの検証と動画IDの抽出"""

import re
from urllib.parse import urlparse

from src.domain import diagnostics
from src.domain.result import Result, fail, success

# "/", "v=", "%3D" の直後に続く11文字のID
_VIDEO_ID_PATTERN = re.compile(r"(/|%3D|v=)([0-9A-Za-z_-]{11})([%#?&]|$)")

YOUTUBE_HOSTS = frozenset(
    {
        "youtube.com",
        "www.youtube.com",
        "youtu.be",
        "m.youtube.com",
    }
)


def get_youtube_id_from_url(url: str) -> str | None:
    """URLから動画IDを取り出す。見つからなければNone"""
    match = _VIDEO_ID_PATTERN.search(url)
    if not match:
        return None
    return match.group(2)


def validate_youtube_url(url: str) -> Result[str]:
    """
    YouTube URLを検証して動画IDを返す

    Returns:
        動画IDのResult
        失敗時: NO_URL_PROTOCOL / NOT_YOUTUBE_URL / NO_YOUTUBE_ID
    """
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return fail(diagnostics.NO_URL_PROTOCOL)
    if parsed.netloc.lower() not in YOUTUBE_HOSTS:
        return fail(diagnostics.NOT_YOUTUBE_URL)
    video_id = get_youtube_id_from_url(url)
    if not video_id:
        return fail(diagnostics.NO_YOUTUBE_ID)
    return success(video_id)


def youtube_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"
