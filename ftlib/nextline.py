"""Reading a file descriptor one line at a time, with pending data kept per descriptor."""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFFER_SIZE = 1024
FD_MAX = 1024

_NEWLINE = b"\n"


class LineReader:
    """Reads lines from file descriptors, remembering what was read past each line."""

    def __init__(self, buffer_size: int = BUFFER_SIZE, fd_max: int = FD_MAX) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if fd_max <= 0:
            raise ValueError(f"descriptor limit must be positive, got {fd_max}")
        self.buffer_size = buffer_size
        self.fd_max = fd_max
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """The next line from ``fd`` with its newline, if it has one; None at end of input.

        Raises ValueError for a descriptor outside ``0 .. fd_max - 1``. A read
        error propagates as OSError and drops anything pending for ``fd``.
        """
        if not 0 <= fd < self.fd_max:
            raise ValueError(f"file descriptor {fd} outside 0..{self.fd_max - 1}")
        data = self._pending.pop(fd, b"")
        while _NEWLINE not in data:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            data += chunk
        if not data:
            return None
        line, newline, rest = data.partition(_NEWLINE)
        if rest:
            self._pending[fd] = rest
        return line + newline


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """The next line from ``fd`` using a shared reader with the default buffer size."""
    return _default_reader.read_line(fd)