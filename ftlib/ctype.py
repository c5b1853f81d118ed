"""Character classification and case conversion for the ASCII range."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_PRINT = range(ord(" "), ord("~") + 1)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the character code of ``c``, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: CharLike) -> bool:
    """True for the decimal digits 0-9."""
    return _code(c) in _DIGIT


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return _code(c) in _ASCII


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return _code(c) in _PRINT


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else comes back unchanged."""
    code = _code(c)
    if code in _LOWER:
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else comes back unchanged."""
    code = _code(c)
    if code in _UPPER:
        return _same_kind(c, code + _CASE_OFFSET)
    return c