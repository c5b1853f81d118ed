"""Operations on mutable byte buffers: fill, copy, search, compare, allocate."""

from __future__ import annotations

from typing import Optional, Union

WritableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Set the first ``n`` bytes of ``buf`` to the low byte of ``c``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memmove(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; overlapping views are safe."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dest``."""
    return memmove(dest, src, n)


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` among the first ``n``, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values: -1, 0 or 1."""
    _check_count(n, a, b)
    left = bytes(a[:n])
    right = bytes(b[:n])
    return (left > right) - (left < right)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of ``nmemb * size`` bytes; one byte when either is zero."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"allocation of {nmemb} * {size} bytes overflows")
    return bytearray(total)