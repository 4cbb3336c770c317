"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import operator
import os
from typing import Optional

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]

BUFFER_SIZE = 42


class LineReader:
    """Reads lines from file descriptors, keeping leftover data per descriptor.

    Each call to :meth:`next_line` returns the next line with its newline,
    the last line without one if the data does not end in a newline, and
    None once the descriptor is exhausted.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        buffer_size = operator.index(buffer_size)
        if buffer_size < 1:
            raise ValueError(f"buffer size must be at least 1, got {buffer_size}")
        self.buffer_size = buffer_size
        self._stash: dict[int, bytes] = {}

    def next_line(self, fd: int) -> Optional[str]:
        """Return the next line read from ``fd``, or None at end of input.

        A read error drops any data kept for ``fd`` and propagates.
        """
        fd = operator.index(fd)
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        stash = self._stash.pop(fd, b"")
        while b"\n" not in stash:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            stash += chunk
        if not stash:
            return None
        line, newline, rest = stash.partition(b"\n")
        if rest:
            self._stash[fd] = rest
        return (line + newline).decode("utf-8", errors="surrogateescape")


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from ``fd`` using a shared reader."""
    return _default_reader.next_line(fd)