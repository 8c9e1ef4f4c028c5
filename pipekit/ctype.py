"""Character classification and case conversion for ASCII code points.

Each function takes either an integer code point or a one-character string.
Classification functions return a bool. Case conversion returns a value of
the same kind it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected an int code point or a one-character string")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    raise TypeError("expected an int code point or a one-character string")


def _is_upper(code: int) -> bool:
    return 65 <= code <= 90


def _is_lower(code: int) -> bool:
    return 97 <= code <= 122


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isdigit(c) or isalpha(c)


def isascii(c: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else is returned unchanged."""
    code = _code(c)
    if _is_lower(code):
        return _convert(c, code - 32)
    return c


def tolower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else is returned unchanged."""
    code = _code(c)
    if _is_upper(code):
        return _convert(c, code + 32)
    return c