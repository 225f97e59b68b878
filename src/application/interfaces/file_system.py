"""ファイルシステムインターフェース"""

from pathlib import Path
from typing import Protocol


class AsyncWriter(Protocol):
    """非同期書き込みハンドル"""

    async def write(self, data: bytes) -> None: ...

    async def close(self) -> None: ...

    async def __aenter__(self) -> "AsyncWriter": ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...


class FileSystem(Protocol):
    """パイプラインが利用するファイル操作"""

    async def exists(self, path: Path) -> bool: ...

    async def mkdir_all(self, path: Path) -> None: ...

    async def open_write(self, path: Path) -> AsyncWriter:
        """書き込み用に開く（既存ファイルは切り詰め）"""
        ...

    async def list_directory(self, path: Path) -> list[str]:
        """ディレクトリ内のファイル名一覧"""
        ...
