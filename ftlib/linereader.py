"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Return successive lines from a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one. The
    stream is read ``buffer_size`` units at a time and any text past the
    returned line is kept for the next call. If a read fails, the kept text
    is discarded and the error propagates.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        stash = self._stash
        self._stash = None
        while True:
            chunk = self._stream.read(self._buffer_size)
            newline = "\n" if isinstance(chunk, str) else b"\n"
            stash = chunk if stash is None else stash + chunk
            if not chunk or newline in chunk:
                break
        if not stash:
            return None
        end = stash.find(newline)
        if end < 0 or end == len(stash) - 1:
            return stash
        self._stash = stash[end + 1:]
        return stash[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` as :class:`LineReader` returns them."""
    yield from LineReader(stream, buffer_size)