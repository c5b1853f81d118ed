"""NUL-terminated string routines: length, bounded copy, search, compare, parse, duplicate.

Strings are ordinary Python ``str`` values. A ``"\\0"`` inside a string ends it,
as the terminator would, so everything after it is ignored.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import NamedTuple, Optional, Union

CharLike = Union[int, str]

_NUL = "\0"
_INT_BITS = 32
_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


class CopyResult(NamedTuple):
    """The string a bounded copy produced and the length it tried to create."""

    text: str
    length: int


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    return s.partition(_NUL)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _check_size(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's complement."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))


def strlcpy(dst: str, src: str, size: int) -> CopyResult:
    """Copy at most ``size - 1`` characters of ``src``; ``dst`` is kept when ``size`` is 0.

    The length returned is always that of ``src``.
    """
    _check_size(size, "size")
    src = _cstr(src)
    text = _cstr(dst) if size == 0 else src[: size - 1]
    return CopyResult(text, len(src))


def strlcat(dst: str, src: str, size: int) -> CopyResult:
    """Append ``src`` to ``dst`` so the result holds at most ``size - 1`` characters.

    When ``size`` does not exceed the length of ``dst`` nothing is appended and
    the length returned is ``size + len(src)``; otherwise it is
    ``len(dst) + len(src)``.
    """
    _check_size(size, "size")
    dst = _cstr(dst)
    src = _cstr(src)
    if size <= len(dst):
        return CopyResult(dst, size + len(src))
    room = size - len(dst) - 1
    return CopyResult(dst + src[:room], len(dst) + len(src))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    s = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    s = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def _compare(s1: str, s2: str) -> int:
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first pair that differs."""
    _check_size(n, "count")
    return _compare(_cstr(s1)[:n], _cstr(s2)[:n])


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the difference of the first pair that differs."""
    return _compare(_cstr(s1), _cstr(s2))


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size(length, "length")
    little = _cstr(little)
    if not little:
        return 0
    index = _cstr(big)[:length].find(little)
    return None if index == -1 else index


def atoi(s: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits gives 0. The result wraps
    like a 32-bit signed integer.
    """
    match = _ATOI_PATTERN.match(_cstr(s))
    assert match is not None  # the pattern accepts the empty string
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int(value)


def strdup(s: str) -> str:
    """A copy of ``s`` up to its terminator."""
    return _cstr(s)


def strndup(s: str, n: int) -> str:
    """A copy of at most the first ``n`` characters of ``s``."""
    _check_size(n, "count")
    return _cstr(s)[:n]