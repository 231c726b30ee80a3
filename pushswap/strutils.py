"""String helpers with the semantics of the classic C library routines."""

from __future__ import annotations

import string
from itertools import zip_longest
from typing import Callable

_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if sep == "":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the offset of the match, or None when there is none.
    """
    if not needle:
        return 0
    found = haystack[:max(length, 0)].find(needle)
    return None if found < 0 else found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare up to ``n`` characters; the sign of the result orders the strings."""
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        c1, c2 = ord(a), ord(b)
        if c1 == 0 or c2 == 0 or c1 != c2:
            return c1 - c2
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to each character."""
    return "".join(func(i, c) for i, c in enumerate(text))


def toupper_string(text: str) -> str:
    """Upper-case the ASCII letters of ``text``, leaving everything else alone."""
    return text.translate(_UPPER_TABLE)