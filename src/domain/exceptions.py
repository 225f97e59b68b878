"""ドメイン固有の例外定義"""


class SplytError(Exception):
    """基底例外クラス"""

    pass


class MetadataLookupError(SplytError):
    """動画情報・ストリームカタログの取得エラー"""

    pass


class StreamTransferError(SplytError):
    """ストリームのダウンロードエラー"""

    pass


class TranscodeError(SplytError):
    """ffmpeg実行エラー"""

    def __init__(self, message: str, exit_code: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr
