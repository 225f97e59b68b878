"""ストリームカタログから最適なフォーマットを選ぶ純粋関数"""

from collections.abc import Iterable

from src.domain.entities import AudioQuality, FormatSelection, StreamDescriptor

DEFAULT_CONTAINER = "mp4"


def _better_video(
    best: StreamDescriptor | None,
    candidate: StreamDescriptor,
) -> StreamDescriptor:
    """映像候補の比較。解像度優先、同解像度なら音声付きを優先"""
    if best is None:
        return candidate
    quality = candidate.quality
    best_quality = best.quality
    if quality is None or best_quality is None:
        # 解析できる方を採用、どちらも不明なら現状維持
        if best_quality is not None:
            return best
        if quality is not None:
            return candidate
        return best
    if quality > best_quality:
        return candidate
    if best_quality > quality:
        return best
    if candidate.has_audio and not best.has_audio:
        return candidate
    return best


def _better_audio(
    best: StreamDescriptor | None,
    candidate: StreamDescriptor,
) -> StreamDescriptor:
    """音声候補の比較。音声のみ > ビットレート > 品質MEDIUM"""
    if best is None:
        return candidate
    if best.has_video and not candidate.has_video:
        return candidate
    if candidate.has_video and not best.has_video:
        return best
    if best.audio_bitrate and candidate.audio_bitrate:
        return best if best.audio_bitrate > candidate.audio_bitrate else candidate
    if best.audio_bitrate:
        return best
    if candidate.audio_bitrate:
        return candidate
    if best.audio_quality and candidate.audio_quality:
        return candidate if candidate.audio_quality is AudioQuality.MEDIUM else best
    return best


def select_formats(
    descriptors: Iterable[StreamDescriptor],
    target_container: str = DEFAULT_CONTAINER,
) -> FormatSelection | None:
    """
    ダウンロードするストリームを選択

    映像と音声を両方含む単一ストリームがあればそれを優先（マージ不要）。
    なければ最高画質の映像と最良の音声を組で返す。
    メタデータの欠損や不正値では失敗せず、比較できる側を採用する。

    Args:
        descriptors: ストリームカタログ
        target_container: 映像ストリームに要求するコンテナ

    Returns:
        (映像,) / (映像, 音声) / 映像候補がなければNone
    """
    descriptors = list(descriptors)

    best_video: StreamDescriptor | None = None
    for descriptor in descriptors:
        if not descriptor.has_video or descriptor.container != target_container:
            continue
        best_video = _better_video(best_video, descriptor)

    if best_video is None:
        return None
    if best_video.has_audio:
        return (best_video,)

    best_audio: StreamDescriptor | None = None
    for descriptor in descriptors:
        if not descriptor.has_audio:
            continue
        best_audio = _better_audio(best_audio, descriptor)

    if best_audio is None:
        return (best_video,)
    return (best_video, best_audio)
