"""Conversion between decimal text and integers."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. A value outside the 32-bit signed range gives -1 when
    the sign was positive and 0 when it was negative.
    """
    pos = 0
    while pos < len(s) and s[pos] in _SPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(s) and s[pos] in _DIGITS:
        pos += 1
    digits = s[start:pos]
    result = sign * int(digits) if digits else 0
    if INT_MIN <= result <= INT_MAX:
        return result
    return -1 if sign == 1 else 0


def itoa(n: int) -> str:
    """Render an integer as decimal text."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an int")
    return str(n)