"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    """Return the character code of ``c``, which is a code or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def isalpha(c: Char) -> bool:
    """True for the ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: Char) -> bool:
    """True for the decimal digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and decimal digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for the printable ASCII characters, space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; other characters are returned as they are."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; other characters are returned as they are."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)