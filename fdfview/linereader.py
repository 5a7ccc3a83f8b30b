"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

BUFFER_SIZE = 42


class _Readable(Protocol):
    def read(self, size: int, /) -> str: ...


class LineReader:
    """Return successive lines of a text stream, reading ``buffer_size`` at a time.

    A line keeps its trailing newline. Text after the last newline is returned
    as a final line; after that, ``read_line`` gives None.
    """

    def __init__(self, stream: _Readable, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash = ""

    def read_line(self) -> Optional[str]:
        """The next line including its newline, or None when the stream is exhausted."""
        while True:
            index = self._stash.find("\n")
            if index >= 0:
                line = self._stash[:index + 1]
                self._stash = self._stash[index + 1:]
                return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._stash += chunk
        if self._stash:
            line, self._stash = self._stash, ""
            return line
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


def read_lines(path: Union[str, Path]) -> list[str]:
    """All lines of the file at ``path``, each keeping its newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))