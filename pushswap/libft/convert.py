"""Number conversion, splitting and character mapping over strings."""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, MutableSequence, Optional, Union

from .chars import isdigit
from .strings import strlen

Char = Union[int, str]

_WHITESPACE = "\t\n\v\f\r "


def _text(s: str) -> str:
    return s[: strlen(s)]


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped and one optional sign is read; parsing
    stops at the first character that is not a digit. No digits give 0.
    """
    text = _text(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    digits = "".join(takewhile(isdigit, text))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal form of ``n``."""
    return str(int(n))


def split(s: Optional[str], c: Char) -> Optional[list[str]]:
    """Split ``s`` on the character ``c``, dropping empty pieces.

    Returns None when ``s`` is None.
    """
    if s is None:
        return None
    text = _text(s)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        sep = c
    else:
        sep = chr(c & 0xFF)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(_text(s)))


def striteri(
    s: MutableSequence, f: Callable[[int, Char], Optional[Char]]
) -> None:
    """Call ``f(index, item)`` for each item of ``s`` before its first NUL.

    A result other than None replaces the item in place.
    """
    for index, item in enumerate(s):
        if item == "\0" or item == 0:
            break
        result = f(index, item)
        if result is not None:
            s[index] = result