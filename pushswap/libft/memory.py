"""Byte-buffer helpers working on bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(buf: Buffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    if n > len(buf):
        raise ValueError(f"{name} ({n}) exceeds buffer length ({len(buf)})")


def memset(buf: WritableBuffer, c: int, length: int) -> WritableBuffer:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length(buf, length, "length")
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_length(dst, n, "n")
    _check_length(src, n, "n")
    dst[:n] = src[:n]
    return dst


def memmove(dst: WritableBuffer, src: Buffer, length: int) -> WritableBuffer:
    """Copy ``length`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check_length(dst, length, "length")
    _check_length(src, length, "length")
    dst[:length] = bytes(src[:length])
    return dst


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length(buf, n, "n")
    target = c & 0xFF
    return next((i for i, byte in enumerate(bytes(buf[:n])) if byte == target), None)


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(s1, n, "n")
    _check_length(s2, n, "n")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0