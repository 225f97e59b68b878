"""httpx によるストリームのダウンロード"""

from collections.abc import AsyncIterator

import httpx

from src.application.interfaces.stream_downloader import StreamChunk
from src.domain.entities import StreamDescriptor, VideoInfo
from src.domain.exceptions import StreamTransferError
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024


class HttpxStreamDownloader:
    """記述子のURLを非同期HTTPで取得し、チャンクごとに進捗を通知"""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        timeout: float = 30.0,
    ):
        """
        Args:
            chunk_size: 1回に読み出すバイト数
            timeout: 接続・読み取りのタイムアウト（秒）
        """
        self.chunk_size = chunk_size
        self.timeout = timeout

    async def stream(
        self,
        info: VideoInfo,
        descriptor: StreamDescriptor,
    ) -> AsyncIterator[StreamChunk]:
        """
        Yields:
            StreamChunk (data, transferred, total)

        Raises:
            StreamTransferError: URLなし、HTTPエラー、通信失敗
        """
        if not descriptor.url:
            raise StreamTransferError(
                f"No stream URL for format {descriptor.format_id} of {info.metadata.video_id}"
            )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers=descriptor.http_headers,
            ) as client:
                async with client.stream("GET", descriptor.url) as response:
                    response.raise_for_status()
                    total = int(response.headers.get("content-length") or descriptor.filesize or 0)
                    logger.debug(
                        f"[HTTP] 受信開始: format={descriptor.format_id} total={total}"
                    )
                    transferred = 0
                    async for data in response.aiter_bytes(self.chunk_size):
                        transferred += len(data)
                        yield StreamChunk(
                            data=data,
                            transferred=transferred,
                            total=max(total, transferred),
                        )
        except httpx.HTTPError as e:
            raise StreamTransferError(
                f"HTTP error downloading format {descriptor.format_id}: {e}"
            ) from e
