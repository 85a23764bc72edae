"""String helpers with C-library style semantics used by the shell front end."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading, optionally signed decimal integer; 0 if there is none.

    Leading whitespace is skipped, one sign is accepted and parsing stops at
    the first non-digit.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and text[position] in _DIGITS:
        position += 1
    digits = text[start:position]
    return sign * int(digits) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find needle entirely within the first limit characters of haystack.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Find needle in haystack; 0 for an empty needle, None when absent."""
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def _compare(first: str, second: str) -> int:
    for left, right in zip_longest(first, second, fillvalue="\0"):
        if left != right or left == "\0":
            return ord(left) - ord(right)
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the sign of the result orders them, 0 if equal."""
    return _compare(first, second)


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most limit characters of two strings."""
    if limit <= 0:
        return 0
    return _compare(first[:limit], second[:limit])


def memcmp(first: bytes, second: bytes, limit: int) -> int:
    """Compare the first limit bytes of two buffers, byte by byte."""
    if limit <= 0:
        return 0
    if len(first) < limit or len(second) < limit:
        raise ValueError("buffers are shorter than the compared length")
    for left, right in zip(first[:limit], second[:limit]):
        if left != right:
            return left - right
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text (at most size - 1 characters) and len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting text and the length the full result would have:
    len(src) when size is 0, len(src) + size when dst already fills the
    buffer, and len(dst) + len(src) otherwise.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)