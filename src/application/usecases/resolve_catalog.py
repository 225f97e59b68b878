"""ストリームカタログの解決"""

from src.application.interfaces.metadata_provider import MetadataProvider
from src.domain import diagnostics
from src.domain.entities import VideoInfo
from src.domain.result import Result, fail, success
from src.domain.youtube_url import youtube_watch_url
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


class CatalogResolver:
    """動画IDからメタデータとストリーム一覧を取得（キャッシュなし）"""

    def __init__(self, metadata_provider: MetadataProvider):
        self.metadata_provider = metadata_provider

    async def resolve(self, video_id: str) -> Result[VideoInfo]:
        """
        Returns:
            VideoInfoのResult、取得失敗はDOWNLOAD_ERROR
        """
        logger.info(f"[Resolver] 動画情報を取得中: {video_id}")
        try:
            info = await self.metadata_provider.get_info(youtube_watch_url(video_id))
        except Exception as e:
            logger.error(f"[Resolver] 動画情報の取得失敗: {video_id} - {e}")
            return fail(diagnostics.DOWNLOAD_ERROR, e)

        logger.info(
            f"[Resolver] 取得完了: {info.metadata.title!r} "
            f"({len(info.formats)}フォーマット, {info.metadata.duration_sec}秒)"
        )
        return success(info)
