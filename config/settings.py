"""設定管理"""

import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


def output_dir_for(platform: str) -> Path:
    """プラットフォームごとの既定の保存先"""
    home = Path.home()
    if platform == "darwin":
        return home / "Movies" / "splyt"
    if platform == "win32":
        return home / "Videos" / "splyt"
    return home / "splyt"


def default_output_dir() -> Path:
    return output_dir_for(sys.platform)


class Settings(BaseSettings):
    """アプリケーション設定"""

    # Paths
    # 起動時に一度だけ解決し、ユースケースへ明示的に渡す
    OUTPUT_DIR: Path = Field(default_factory=default_output_dir)
    FFMPEG_PATH: str = "ffmpeg"

    # Media
    TARGET_CONTAINER: str = "mp4"
    # 音声コンテナが TARGET_CONTAINER と異なる場合の再エンコード先
    AUDIO_CODEC: str = "aac"

    # Network
    DOWNLOAD_CHUNK_SIZE: int = 1024 * 1024
    HTTP_TIMEOUT: float = 30.0

    # Processing
    # 同時に実行するクリップ切り出し数（1 = 逐次）
    CLIP_CONCURRENCY: int = 1

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """シングルトンで設定を取得"""
    return Settings()
