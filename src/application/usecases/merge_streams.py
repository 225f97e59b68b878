"""映像と音声の多重化（マージ）"""

from pathlib import Path

from src.application.interfaces.observers import NULL_DOWNLOAD_OBSERVER, DownloadObserver
from src.application.interfaces.transcoder import (
    TranscodeInput,
    TranscodeOutput,
    TranscodeProgress,
    Transcoder,
)
from src.domain import diagnostics
from src.domain.result import Result, fail, success
from src.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


class StreamMerger:
    """
    別々にダウンロードした映像・音声を1つのコンテナにまとめる

    映像は常にストリームコピー。音声はコンテナが一致する場合のみコピーし、
    それ以外は audio_codec で再エンコードする。
    """

    def __init__(
        self,
        transcoder: Transcoder,
        target_container: str = "mp4",
        audio_codec: str = "aac",
    ):
        self.transcoder = transcoder
        self.target_container = target_container
        self.audio_codec = audio_codec

    def audio_needs_encoding(self, audio_path: Path) -> bool:
        return audio_path.suffix.lower() != f".{self.target_container}"

    async def merge(
        self,
        video_path: Path,
        audio_path: Path,
        output_path: Path,
        expected_duration_ms: int,
        observer: DownloadObserver = NULL_DOWNLOAD_OBSERVER,
    ) -> Result[None]:
        """
        Args:
            video_path: 映像ファイル
            audio_path: 音声ファイル
            output_path: 出力ファイル（既存なら上書き）
            expected_duration_ms: 進捗の分母となる動画長

        Returns:
            失敗時はMERGE_ERROR（原因例外付き）
        """
        audio_codec = self.audio_codec if self.audio_needs_encoding(audio_path) else "copy"
        command = self.transcoder.command(
            inputs=[TranscodeInput(video_path), TranscodeInput(audio_path)],
            outputs=[
                TranscodeOutput(
                    output_path,
                    {
                        "c:v": "copy",
                        "c:a": audio_codec,
                        "y": None,
                    },
                )
            ],
        )

        def on_update(progress: TranscodeProgress) -> None:
            observer.on_merge_progress(progress.out_time_ms)

        logger.info(f"[Merge] 開始: audio={audio_codec} → {output_path.name}")
        observer.on_merge_start(expected_duration_ms)
        try:
            execution = command.spawn()
            execution.on_update(on_update)
            await execution.wait()
        except Exception as e:
            logger.error(f"[Merge] 失敗: {output_path.name} - {e}")
            return fail(diagnostics.MERGE_ERROR, e)
        finally:
            observer.on_merged()

        logger.info(f"[Merge] 完了: {output_path}")
        return success(None)
