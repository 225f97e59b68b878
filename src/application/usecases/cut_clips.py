"""時間範囲ごとのクリップ切り出し"""

import asyncio
import re
from collections.abc import Sequence
from pathlib import Path

from src.application.interfaces.file_system import FileSystem
from src.application.interfaces.observers import NULL_CLIP_OBSERVER, ClipObserver
from src.application.interfaces.transcoder import (
    TranscodeInput,
    TranscodeOutput,
    TranscodeProgress,
    Transcoder,
)
from src.domain import diagnostics
from src.domain.entities import ClipSelection
from src.domain.result import Result, fail, success
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

AUTO_NAME_PREFIX = "clip"


def next_clip_number(filenames: Sequence[str], extension: str) -> int:
    """
    既存の clip<N>.<ext> の最大Nの次の番号

    Example:
        ["clip1.mp4", "clip3.mp4"] → 4
    """
    pattern = re.compile(rf"^{AUTO_NAME_PREFIX}(\d+)\.{re.escape(extension)}$")
    numbers = [int(m.group(1)) for m in map(pattern.match, filenames) if m]
    return max(numbers, default=0) + 1


def with_extension(name: str, extension: str) -> str:
    """拡張子がなければ付与"""
    suffix = f".{extension}"
    return name if name.lower().endswith(suffix) else name + suffix


class ClipCutter:
    """
    1つの元動画から複数クリップを切り出す

    各クリップはシーク（ss）と出力長（t）を指定して個別にエンコードする。
    1クリップの失敗は結果マップに記録するだけで、他のクリップは継続する。
    自動命名は出力ディレクトリを走査するため、同じディレクトリへの
    同時書き込みは1プロセスのみを前提とする。
    """

    def __init__(
        self,
        transcoder: Transcoder,
        file_system: FileSystem,
        target_container: str = "mp4",
        concurrency: int = 1,
    ):
        self.transcoder = transcoder
        self.file_system = file_system
        self.target_container = target_container
        self.concurrency = max(1, concurrency)

    async def assign_output_paths(
        self,
        selections: Sequence[ClipSelection],
        output_dir: Path,
    ) -> list[Path]:
        """
        呼び出し順に出力パスを決定（名前なしは clip<N> で連番）

        連番は既存ファイルと同じ呼び出し内の名前指定を飛ばして進める。

        Raises:
            ValueError: 名前指定が重複している
        """
        existing = await self.file_system.list_directory(output_dir)
        named = [with_extension(s.name, self.target_container) for s in selections if s.name]
        duplicates = sorted({name for name in named if named.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate clip names: {', '.join(duplicates)}")

        taken = set(existing) | set(named)
        number = next_clip_number(existing, self.target_container)
        paths = []
        for selection in selections:
            if selection.name:
                filename = with_extension(selection.name, self.target_container)
            else:
                while f"{AUTO_NAME_PREFIX}{number}.{self.target_container}" in taken:
                    number += 1
                filename = f"{AUTO_NAME_PREFIX}{number}.{self.target_container}"
                number += 1
            paths.append(output_dir / filename)
        return paths

    async def cut(
        self,
        source_path: Path,
        selections: Sequence[ClipSelection],
        output_dir: Path,
        observer: ClipObserver = NULL_CLIP_OBSERVER,
    ) -> Result[dict[Path, Result[None]]]:
        """
        Args:
            source_path: 切り出し元の動画
            selections: 切り出す範囲（呼び出し側で検証済み）
            output_dir: 出力ディレクトリ
            observer: ファイル名ごとの進捗通知先

        Returns:
            出力パス → 各クリップのResult
            出力ディレクトリを準備できない場合と名前指定が重複する場合は
            何も切り出さずに全体がCUT_ERROR
        """
        try:
            await self.file_system.mkdir_all(output_dir)
            output_paths = await self.assign_output_paths(selections, output_dir)
        except ValueError as e:
            logger.error(f"[Clip] 出力ファイル名が重複: {e}")
            return fail(diagnostics.CUT_ERROR, e)
        except Exception as e:
            logger.error(f"[Clip] 出力ディレクトリの準備に失敗: {output_dir} - {e}")
            return fail(diagnostics.CUT_ERROR, e)

        logger.info(f"[Clip] {len(selections)}件のクリップを切り出し開始: {source_path.name}")
        semaphore = asyncio.Semaphore(self.concurrency)

        async def run(selection: ClipSelection, output_path: Path) -> Result[None]:
            async with semaphore:
                return await self._cut_one(source_path, selection, output_path, observer)

        outcomes = await asyncio.gather(
            *(run(s, p) for s, p in zip(selections, output_paths))
        )
        results = dict(zip(output_paths, outcomes))

        failed = sum(1 for r in outcomes if not r.success)
        if failed:
            logger.warning(f"[Clip] 完了: 成功{len(outcomes) - failed}件 / 失敗{failed}件")
        else:
            logger.info(f"[Clip] 完了: {len(outcomes)}件")
        return success(results)

    async def _cut_one(
        self,
        source_path: Path,
        selection: ClipSelection,
        output_path: Path,
        observer: ClipObserver,
    ) -> Result[None]:
        filename = output_path.name
        command = self.transcoder.command(
            inputs=[TranscodeInput(source_path, {"ss": selection.to_ffmpeg_ss()})],
            outputs=[
                TranscodeOutput(
                    output_path,
                    {
                        "t": selection.to_ffmpeg_t(),
                        "movflags": "+faststart",
                        "y": None,
                    },
                )
            ],
        )

        def on_update(progress: TranscodeProgress) -> None:
            observer.on_clip_progress(filename, progress.out_time_ms)

        logger.debug(
            f"[Clip] {filename}: ss={selection.to_ffmpeg_ss()} t={selection.to_ffmpeg_t()}"
        )
        observer.on_clip_start(filename, selection.duration_ms)
        try:
            execution = command.spawn()
            execution.on_update(on_update)
            await execution.wait()
        except Exception as e:
            logger.error(f"[Clip] 切り出し失敗: {filename} - {e}")
            observer.on_clip_failed(filename, e)
            return fail(diagnostics.CUT_ERROR, e)

        observer.on_clip_saved(filename)
        logger.info(f"[Clip] 保存完了: {output_path}")
        return success(None)
