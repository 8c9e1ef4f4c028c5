"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Any, Optional, Union

FileLike = Union[int, Any]


def _fd(target: FileLike) -> int:
    if isinstance(target, bool):
        raise TypeError("expected a file descriptor")
    if isinstance(target, int):
        return target
    fileno = getattr(target, "fileno", None)
    if fileno is None:
        raise TypeError("expected a file descriptor or an object with fileno()")
    return fileno()


def _write_all(target: FileLike, data: bytes) -> None:
    fd = _fd(target)
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: Union[str, int], fd: FileLike) -> None:
    """Write one character (or one byte value 0-255) to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        _write_all(fd, c.encode("utf-8"))
    elif isinstance(c, int) and not isinstance(c, bool):
        if not 0 <= c <= 255:
            raise ValueError("byte value out of range")
        _write_all(fd, bytes([c]))
    else:
        raise TypeError("expected a character or a byte value")


def put_str(s: Optional[str], fd: FileLike) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl(s: Optional[str], fd: FileLike) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    put_str(s, fd)
    _write_all(fd, b"\n")


def put_nbr(n: int, fd: FileLike) -> None:
    """Write ``n`` in decimal to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("put_nbr expects an int")
    _write_all(fd, str(n).encode("ascii"))