"""Buffered line reading from a text or binary stream."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Protocol

BUFFER_SIZE = 42


class _Readable(Protocol[AnyStr]):
    def read(self, size: int, /) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read a stream line by line in chunks of buffer_size.

    Lines keep their trailing newline; the last line of a stream that does
    not end in a newline is returned without one.  Once the stream is
    exhausted and nothing is pending, readline returns None.  Each call
    tries the stream again, so data appended later is still picked up.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._searched = 0

    def _find_newline(self) -> int:
        """Return the index of the first newline in the pending data, or -1.

        Only the part not yet searched is scanned; the searched position is
        advanced when no newline is found.
        """
        pending = self._pending
        if not pending:
            return -1
        separator = b"\n" if isinstance(pending, bytes) else "\n"
        index = pending.find(separator, self._searched)  # type: ignore[arg-type]
        if index < 0:
            self._searched = len(pending)
        return index

    def _take(self, end: int) -> AnyStr:
        assert self._pending is not None
        line = self._pending[:end]
        self._pending = self._pending[end:]
        self._searched = 0
        return line

    def readline(self) -> AnyStr | None:
        """Return the next line, or None when the stream has nothing left."""
        while True:
            index = self._find_newline()
            if index >= 0:
                return self._take(index + 1)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if self._pending:
            return self._take(len(self._pending))
        return None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line