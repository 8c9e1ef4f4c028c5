"""String helpers: searching, comparing, slicing, joining and splitting."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar

_NUL = "\0"

T = TypeVar("T")


def _check_char(c: str) -> str:
    if not isinstance(c, str):
        raise TypeError("expected a one-character string")
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the code points at the first mismatch, with the
    end of a string counting as 0; returns 0 when the compared parts match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0 or index == n - 1:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return str(s)


def substr(s: Optional[str], start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``.

    An absent string, a start at or past the end, or a length below one give
    the empty string.
    """
    if s is None or start < 0 or start >= len(s) or length < 1:
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin expects two strings")
    return s1 + s2


def strtrim(s: str, chars: str) -> str:
    """``s`` with every leading and trailing character found in ``chars`` removed."""
    if not isinstance(s, str) or not isinstance(chars, str):
        raise TypeError("strtrim expects two strings")
    if not chars:
        return s
    return s.strip(chars)


def split_words(s: str, sep: str) -> List[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> MutableSequence[T]:
    """Call ``f(index, item)`` for each item of a mutable sequence, in place.

    When ``f`` returns a value other than None, it replaces the item.
    The sequence itself is returned.
    """
    for index, item in enumerate(list(s)):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement
    return s


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the resulting contents and the full length of ``src``. With a
    size of zero the destination is left as it was.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` slots.

    Returns the resulting contents and the length the full concatenation
    would have needed, counting at most ``size`` for the destination part.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = len(dst)
    needed = len(src) + min(size, dst_len)
    room = size - dst_len - 1
    if room > 0:
        return dst + src[:room], needed
    return dst, needed