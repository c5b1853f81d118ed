"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def put_char(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``."""
    _write_all(fd, _char_bytes(c))


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written for None."""
    if s is None:
        return
    _write_all(fd, s.partition("\0")[0].encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    put_str(s, fd)
    put_char("\n", fd)


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))