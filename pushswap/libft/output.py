"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Union

Char = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _text(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def putchar_fd(c: Char, fd: int) -> None:
    """Write one character to ``fd``; an int is written as a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode()
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``."""
    _write_all(fd, _text(s).encode())


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` up to its first NUL, then a newline, to ``fd``."""
    _write_all(fd, _text(s).encode() + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(int(n)).encode())