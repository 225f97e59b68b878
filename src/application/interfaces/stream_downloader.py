"""ストリームダウンロードインターフェース"""

from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Protocol

from src.domain.entities import StreamDescriptor, VideoInfo


@dataclass(frozen=True)
class StreamChunk:
    """受信したデータ片と累計の進捗"""

    data: bytes
    transferred: int
    total: int


class StreamDownloader(Protocol):
    """選択したストリームのバイト列を取得"""

    def stream(
        self,
        info: VideoInfo,
        descriptor: StreamDescriptor,
    ) -> AsyncIterator[StreamChunk]:
        """
        ストリームをチャンク単位で読み出す

        Args:
            info: 動画情報
            descriptor: ダウンロードするストリーム

        Yields:
            StreamChunk (data, transferred, total)

        Raises:
            StreamTransferError: 通信失敗
        """
        ...
