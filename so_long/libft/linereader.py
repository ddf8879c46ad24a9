"""Reading a text stream one line at a time in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, TextIO

BUFFER_SIZE = 10000


class LineReader:
    """Hands out the lines of a text stream, each with its newline kept.

    The last line may lack a newline. Once the stream is exhausted every
    further request gives None.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False

    def _fill(self) -> None:
        while "\n" not in self._pending and not self._eof:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
            else:
                self._pending += chunk

    def next_line(self) -> Optional[str]:
        """The next line, or None when nothing is left."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: TextIO) -> list[str]:
    """Every line of stream, newlines kept."""
    return list(LineReader(stream))