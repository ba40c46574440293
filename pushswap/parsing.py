"""Reading the integers to sort from command-line arguments."""

from __future__ import annotations

import re
from typing import Iterable

from .libft.chars import isdigit

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = "\t\n\v\f\r "
_WHITESPACE_RUN = re.compile(r"[\t\n\v\f\r ]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a list of integers."""


def is_whitespace(char: str) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return len(char) == 1 and char in _WHITESPACE


def split_spaces(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of whitespace."""
    return [word for word in _WHITESPACE_RUN.split(text) if word]


def is_number(text: str) -> bool:
    """True when ``text`` is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(isdigit(ch) for ch in body)


def parse_int(text: str) -> int:
    """Parse a signed decimal integer that must fit in 32 bits.

    Leading whitespace is skipped. Raises InputError when no digits follow
    the sign, when a non-digit appears, or when the value is out of range.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    if not body:
        raise InputError(f"no digits in {text!r}")
    if not all(isdigit(ch) for ch in body):
        raise InputError(f"not an integer: {text!r}")
    value = sign * int(body)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the program's arguments into the list of numbers to sort.

    A single argument holding a space is split on whitespace; otherwise
    every argument is one number. Raises InputError on bad input.
    """
    args = list(args)
    if not args:
        raise InputError("no arguments")
    if len(args) == 1 and " " in args[0]:
        words = split_spaces(args[0])
    else:
        words = args
    values = []
    for word in words:
        if not is_number(word):
            raise InputError(f"not an integer: {word!r}")
        values.append(parse_int(word))
    return values