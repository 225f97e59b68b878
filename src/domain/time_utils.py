"""時間変換ユーティリティ"""

import re

from src.domain import diagnostics
from src.domain.result import Result, fail, success

_FIRST_PART = re.compile(r"^[0-9]+$")
_SUBSEQUENT_PART = re.compile(r"^[0-9][0-9]?$")


def format_ffmpeg_time(seconds: float) -> str:
    """
    秒数をffmpegの時間指定（HH:MM:SS.ms）に変換

    Example:
        3661.5 → "01:01:01.50"
    """
    total_centiseconds = int(round(seconds * 100))
    total_seconds, centiseconds = divmod(total_centiseconds, 100)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{centiseconds:02d}"


def parse_timestamp(value: object) -> Result[int]:
    """
    タイムスタンプ文字列を秒数に変換

    受け付ける形式: "1:23", "01:23", "00:01:23"
    先頭以外の要素は2桁以内かつ59以下

    Returns:
        秒数のResult、形式不正ならINVALID_TIMESTAMP
    """
    invalid = fail(diagnostics.INVALID_TIMESTAMP)
    if not isinstance(value, str):
        return invalid
    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not _FIRST_PART.match(parts[0]):
        return invalid

    total = int(parts[0])
    for part in parts[1:]:
        if not _SUBSEQUENT_PART.match(part):
            return invalid
        number = int(part)
        if number > 59:
            return invalid
        total = total * 60 + number
    return success(total)


def parse_duration(value: object) -> Result[int]:
    """秒数指定の長さ（"5" など）を整数に変換"""
    if not isinstance(value, str) or not _FIRST_PART.match(value):
        return fail(diagnostics.INVALID_DURATION)
    return success(int(value))
