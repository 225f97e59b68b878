"""ローカルディスクのファイルシステム実装"""

import asyncio
from pathlib import Path
from typing import BinaryIO


class LocalFileWriter:
    """書き込みをワーカースレッドで行うファイルハンドル"""

    def __init__(self, handle: BinaryIO):
        self._handle = handle

    async def write(self, data: bytes) -> None:
        await asyncio.to_thread(self._handle.write, data)

    async def close(self) -> None:
        await asyncio.to_thread(self._handle.close)

    async def __aenter__(self) -> "LocalFileWriter":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


class LocalFileSystem:
    """pathlib によるファイル操作（ブロッキング処理はスレッドで実行）"""

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(Path(path).exists)

    async def mkdir_all(self, path: Path) -> None:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)

    async def open_write(self, path: Path) -> LocalFileWriter:
        handle = await asyncio.to_thread(open, path, "wb")
        return LocalFileWriter(handle)

    async def list_directory(self, path: Path) -> list[str]:
        def _list() -> list[str]:
            return sorted(p.name for p in Path(path).iterdir())

        return await asyncio.to_thread(_list)
