"""Byte-buffer operations on bytearray and bytes objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError("length exceeds buffer size")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (low 8 bits)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buf``."""
    return memset(buf, 0, length)


def memcpy(dst: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``dst``; overlapping regions are handled."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if dst_offset + length > len(dst) or src_offset + length > len(dst):
        raise ValueError("length exceeds buffer size")
    dst[dst_offset:dst_offset + length] = bytes(dst[src_offset:src_offset + length])
    return dst


def memchr(buf: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, buf)
    index = bytes(buf[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, length: int) -> int:
    """Difference of the first differing bytes within ``length``, else 0."""
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)