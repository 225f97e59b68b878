"""トランスコードエンジン（ffmpeg）インターフェース"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

# オプション値がNoneのものは値なしフラグ（例: -y）
Options = Mapping[str, str | None]


@dataclass(frozen=True)
class TranscodeInput:
    """入力ファイルと入力オプション（例: ss）"""

    path: Path
    options: Options = field(default_factory=dict)


@dataclass(frozen=True)
class TranscodeOutput:
    """出力ファイルと出力オプション（例: t, c:v）"""

    path: Path
    options: Options = field(default_factory=dict)


@dataclass(frozen=True)
class TranscodeProgress:
    """エンジンから届く進捗"""

    out_time_ms: int
    speed: str | None = None


ProgressListener = Callable[[TranscodeProgress], None]


class TranscodeExecution(Protocol):
    """起動済みのトランスコード処理"""

    def on_update(self, listener: ProgressListener) -> None:
        """進捗リスナーを登録"""
        ...

    async def wait(self) -> None:
        """
        完了まで待機

        Raises:
            TranscodeError: エンジンがエラーを報告した場合
        """
        ...


class TranscodeCommand(Protocol):
    """組み立て済みのコマンド（spawnで明示的に起動）"""

    inputs: list[TranscodeInput]
    outputs: list[TranscodeOutput]

    def spawn(self) -> TranscodeExecution: ...


class Transcoder(Protocol):
    """コマンドビルダー"""

    def command(
        self,
        inputs: list[TranscodeInput],
        outputs: list[TranscodeOutput],
    ) -> TranscodeCommand: ...
