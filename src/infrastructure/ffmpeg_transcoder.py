"""ffmpeg 外部プロセスによるトランスコード"""

import asyncio
from collections import deque

from src.application.interfaces.transcoder import (
    Options,
    ProgressListener,
    TranscodeInput,
    TranscodeOutput,
    TranscodeProgress,
)
from src.domain.exceptions import TranscodeError
from src.infrastructure.ffmpeg_progress import FFmpegProgressParser
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

# エラーメッセージに含めるstderrの末尾行数
STDERR_TAIL_LINES = 20


def _option_args(options: Options) -> list[str]:
    """{"c:v": "copy", "y": None} → ["-c:v", "copy", "-y"]"""
    args: list[str] = []
    for key, value in options.items():
        args.append(f"-{key}")
        if value is not None:
            args.append(str(value))
    return args


class FFmpegExecution:
    """
    起動済みのffmpegプロセス

    進捗は -progress pipe:1 の出力を解析してリスナーへ通知する。
    wait() は成功で完了し、非ゼロ終了や起動失敗では TranscodeError を送出する。
    """

    def __init__(self, args: list[str]):
        self.args = args
        self._listeners: list[ProgressListener] = []
        self._task: asyncio.Task[None] | None = None

    def start(self) -> None:
        self._task = asyncio.get_running_loop().create_task(self._run())

    def on_update(self, listener: ProgressListener) -> None:
        self._listeners.append(listener)

    async def wait(self) -> None:
        if self._task is None:
            raise TranscodeError("ffmpeg process was never started")
        await self._task

    def _emit(self, progress: TranscodeProgress) -> None:
        for listener in self._listeners:
            try:
                listener(progress)
            except Exception:
                logger.exception("[FFmpeg] 進捗リスナーでエラー")

    async def _run(self) -> None:
        logger.debug(f"[FFmpeg] コマンド: {' '.join(self.args)}")
        try:
            process = await asyncio.create_subprocess_exec(
                *self.args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TranscodeError(f"Failed to start ffmpeg ({self.args[0]}): {e}") from e

        stderr_tail: deque[str] = deque(maxlen=STDERR_TAIL_LINES)
        await asyncio.gather(
            self._read_progress(process.stdout),
            self._read_stderr(process.stderr, stderr_tail),
        )
        exit_code = await process.wait()

        if exit_code != 0:
            stderr = "\n".join(stderr_tail)
            raise TranscodeError(
                f"ffmpeg exited with code {exit_code}: {stderr_tail[-1] if stderr_tail else ''}",
                exit_code=exit_code,
                stderr=stderr,
            )

    async def _read_progress(self, stream: asyncio.StreamReader) -> None:
        parser = FFmpegProgressParser()
        async for raw in stream:
            block = parser.feed(raw.decode(errors="replace"))
            if block is not None and block.out_time_ms is not None:
                self._emit(TranscodeProgress(out_time_ms=block.out_time_ms, speed=block.speed))

    async def _read_stderr(self, stream: asyncio.StreamReader, tail: deque[str]) -> None:
        async for raw in stream:
            line = raw.decode(errors="replace").rstrip()
            if line:
                tail.append(line)


class FFmpegCommand:
    """入力・出力を組み立てたffmpegコマンド（spawnで起動）"""

    def __init__(
        self,
        ffmpeg_path: str,
        inputs: list[TranscodeInput],
        outputs: list[TranscodeOutput],
    ):
        self.ffmpeg_path = ffmpeg_path
        self.inputs = inputs
        self.outputs = outputs

    def build_args(self) -> list[str]:
        args = [
            self.ffmpeg_path,
            "-hide_banner",
            "-nostats",
            "-progress", "pipe:1",
        ]
        for item in self.inputs:
            args += _option_args(item.options)
            args += ["-i", str(item.path)]
        for item in self.outputs:
            args += _option_args(item.options)
            args.append(str(item.path))
        return args

    def spawn(self) -> FFmpegExecution:
        execution = FFmpegExecution(self.build_args())
        execution.start()
        return execution


class FFmpegTranscoder:
    """ffmpeg実行ファイルを使うコマンドビルダー"""

    def __init__(self, ffmpeg_path: str = "ffmpeg"):
        """
        Args:
            ffmpeg_path: ffmpegの実行パス
        """
        self.ffmpeg_path = ffmpeg_path

    def command(
        self,
        inputs: list[TranscodeInput],
        outputs: list[TranscodeOutput],
    ) -> FFmpegCommand:
        return FFmpegCommand(self.ffmpeg_path, inputs, outputs)
