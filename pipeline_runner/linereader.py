"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Union

BUFFER_SIZE = 3


class LineReader:
    """Read lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Lines keep their trailing newline; the last line of the input may lack
    one. Data read past the end of a line is kept for the next call.
    """

    def __init__(self, fd: Union[int, object], buffer_size: int = BUFFER_SIZE) -> None:
        if not isinstance(fd, int) and hasattr(fd, "fileno"):
            fd = fd.fileno()
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError("fd must be a file descriptor or have a fileno()")
        if fd < 0:
            raise ValueError("fd must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once no data is left."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line