"""失敗種別を表す診断情報（code, message）の定義"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """原因例外とは独立した、安定した失敗種別"""

    code: int
    message: str


NO_ID_IN_URL = Diagnostic(1, "Could not find video ID in YouTube link.")

DOWNLOAD_ERROR = Diagnostic(2, "Encountered an error downloading video.")

INVALID_TIMESTAMP = Diagnostic(
    3,
    "Invalid format for timestamp. (Valid formats for a timestamp at one minute "
    "and twenty-three seconds are '00:01:23', '01:23', and '1:23'.)",
)

INVALID_DURATION = Diagnostic(3, "Invalid duration. Should be a positive integer.")

NO_URL_PROTOCOL = Diagnostic(4, "Invalid URL: missing protocol (https://).")

NO_YOUTUBE_ID = Diagnostic(5, "Invalid URL: could not find video ID.")

NOT_YOUTUBE_URL = Diagnostic(6, "Only YouTube URLs are supported.")

NO_VIDEO_FORMAT = Diagnostic(7, "Could not find a video format to download.")

MERGE_ERROR = Diagnostic(8, "An error occurred while merging downloaded video and audio.")

CUT_ERROR = Diagnostic(9, "An error occurred while cutting a clip.")
