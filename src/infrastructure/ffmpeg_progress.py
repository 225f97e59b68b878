"""ffmpeg -progress 出力の解析"""

from dataclasses import dataclass


@dataclass
class FFmpegProgressBlock:
    """1ブロック分の進捗（"progress=" 行で区切られる）"""

    out_time_us: int | None = None
    speed: str | None = None
    finished: bool = False

    @property
    def out_time_ms(self) -> int | None:
        if self.out_time_us is None:
            return None
        return self.out_time_us // 1000


def _parse_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


class FFmpegProgressParser:
    """
    -progress pipe:1 の key=value 行を逐次解析

    feed() に1行ずつ渡し、"progress=continue|end" 行でブロックが確定する。
    """

    def __init__(self) -> None:
        self._current = FFmpegProgressBlock()

    def feed(self, line: str) -> FFmpegProgressBlock | None:
        """
        Returns:
            ブロックが確定した場合はその内容、途中ならNone
        """
        line = line.strip()
        if "=" not in line:
            return None
        key, _, value = line.partition("=")
        key, value = key.strip(), value.strip()

        # out_time_ms は実際にはマイクロ秒（ffmpegの歴史的な命名）
        if key in ("out_time_us", "out_time_ms"):
            parsed = _parse_int(value)
            if parsed is not None:
                self._current.out_time_us = parsed
        elif key == "speed":
            self._current.speed = None if value == "N/A" else value
        elif key == "progress":
            block = self._current
            block.finished = value == "end"
            self._current = FFmpegProgressBlock()
            return block
        return None
