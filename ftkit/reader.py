"""Reading a file descriptor one line at a time.

A reader keeps the unread remainder of each descriptor separately, so
lines from several descriptors can be read in any interleaving. Lines
are returned as ``bytes`` and keep their trailing newline; the last line
of a stream may lack one.
"""

from __future__ import annotations

import contextlib
import os
from typing import Optional

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line", "safe_close"]

BUFFER_SIZE = 10


class LineReader:
    """Reads lines from file descriptors in chunks of ``buffer_size`` bytes."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._leftovers: dict[int, bytes] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """The next line of ``fd``, or ``None`` once the stream is exhausted.

        A read error discards what was buffered for ``fd`` and is raised.
        """
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        pending = self._leftovers.pop(fd, b"")
        while True:
            cut = pending.find(b"\n")
            if cut >= 0:
                rest = pending[cut + 1:]
                if rest:
                    self._leftovers[fd] = rest
                return pending[:cut + 1]
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                return pending or None
            pending += chunk


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """The next line of ``fd`` from a shared reader with the default buffer."""
    return _default_reader.next_line(fd)


def safe_close(fd: Optional[int]) -> int:
    """Close ``fd`` unless it is ``None`` or -1, ignoring errors; return -1."""
    if fd is not None and fd != -1:
        with contextlib.suppress(OSError):
            os.close(fd)
    return -1