"""Helpers for NUL-terminated strings.

Text functions take ``str`` values and only look at the characters before
the first ``"\\0"``. The bounded copy functions work on ``bytearray`` buffers,
where a zero byte ends the string.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]
Char = Union[int, str]


def strlen(s: Union[str, Buffer]) -> int:
    """Return the length of ``s`` up to its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        end = bytes(s).find(b"\0")
    return len(s) if end < 0 else end


def _text(s: str) -> str:
    """Return ``s`` cut at its first NUL."""
    return s[: strlen(s)]


def _char(c: Char) -> str:
    """Return the character ``c`` names, reduced to a single byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def strlcpy(dst: WritableBuffer, src: Buffer, dstsize: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``dstsize`` bytes including the NUL.

    Returns the length of ``src``, so a result of ``dstsize`` or more means
    the copy was cut short.
    """
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    if dstsize > len(dst):
        raise ValueError(f"dstsize ({dstsize}) exceeds buffer length ({len(dst)})")
    srclen = strlen(src)
    if dstsize:
        count = min(dstsize - 1, srclen)
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return srclen


def strlcat(dst: WritableBuffer, src: Buffer, dstsize: int) -> int:
    """Append ``src`` to the string in ``dst`` within ``dstsize`` bytes in total.

    Returns the length the joined string would have had with room enough;
    when ``dstsize`` is not larger than the current string, ``dst`` is left
    alone and ``dstsize + len(src)`` is returned.
    """
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    dstlen = strlen(dst)
    if dstsize <= dstlen:
        return dstsize + strlen(src)
    return dstlen + strlcpy(memoryview(dst)[dstlen:], src, dstsize - dstlen)


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _text(s)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _text(s)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    if n < 0:
        raise ValueError("n must not be negative")
    a = _text(s1)[:n]
    b = _text(s2)[:n]
    for x, y in zip(a + "\0", b + "\0"):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` within the first ``length`` characters, or None."""
    if length < 0:
        raise ValueError("length must not be negative")
    text = _text(haystack)
    pattern = _text(needle)
    if not pattern:
        return 0
    if length == 0:
        return None
    # A match must end within the first ``length`` characters.
    last_start = min(len(text) - len(pattern), length - len(pattern))
    for pos in range(last_start + 1):
        if text.startswith(pattern, pos):
            return pos
    return None


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _text(s)


def substr(s: Optional[str], start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    An empty string comes back when ``s`` is None, ``length`` is 0 or
    ``start`` lies past the end.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None or not length:
        return ""
    text = _text(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    chars = _text(charset)
    if not chars:
        return _text(s)
    return _text(s).strip(chars)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _text(s1) + _text(s2)