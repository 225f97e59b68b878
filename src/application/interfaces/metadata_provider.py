"""動画メタデータ取得インターフェース"""

from typing import Protocol

from src.domain.entities import VideoInfo


class MetadataProvider(Protocol):
    """動画情報とストリームカタログの取得"""

    async def get_info(self, url: str) -> VideoInfo:
        """
        動画情報を取得（ダウンロードはしない）

        Args:
            url: YouTube動画URL

        Returns:
            メタデータとストリーム記述子の一覧

        Raises:
            MetadataLookupError: 取得失敗
        """
        ...
