"""Line-by-line reading from a text stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import Iterator, List, Optional, TextIO

BUFFER_SIZE = 42


class LineReader:
    """Reads a stream in chunks of ``buffer_size`` characters and hands out lines.

    Each line keeps its trailing newline; the last line of a stream that does
    not end in a newline is returned without one.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def next_line(self) -> Optional[str]:
        """The next line of the stream, or ``None`` once it is exhausted."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end == -1:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[:end + 1], self._pending[end + 1:]
        return line

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_map_lines(stream: TextIO) -> List[str]:
    """Every line of ``stream``, each cut at its first newline."""
    return [line.split("\n", 1)[0] for line in LineReader(stream)]