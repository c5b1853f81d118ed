"""String building: substrings, joining, trimming, splitting, number formatting, mapping."""

from __future__ import annotations

from typing import Callable, List, Optional

from .strfuncs import strdup

_NUL = "\0"


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    text = strdup(s)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    chars = strdup(charset)
    text = strdup(s)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: str) -> List[str]:
    """The non-empty runs of ``s`` between occurrences of ``sep``."""
    sep = _single_char(sep, "separator")
    text = strdup(s)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def itoa(n: int) -> str:
    """The decimal representation of ``n``, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(strdup(s)))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` on every character of ``s``.

    Where ``f`` returns a string it replaces the character; where it returns
    None the character is kept. The resulting string is returned.
    """
    pieces = []
    for index, ch in enumerate(strdup(s)):
        replacement = f(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)