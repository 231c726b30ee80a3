"""Validation and conversion of the command-line numbers."""

from __future__ import annotations

from typing import Sequence

from pushswap.chartype import isdigit
from pushswap.numconv import atoi, atol


class InputError(ValueError):
    """Raised when the numbers given on the command line are not acceptable."""


def _is_number(text: str) -> bool:
    """True for an optional sign followed only by decimal digits."""
    body = text[1:] if text[0] in "+-" and len(text) > 1 else text
    return all(isdigit(c) for c in body)


def _is_zero(text: str) -> bool:
    """True when ``text`` spells the value zero, such as ``0``, ``-0`` or ``+00``."""
    body = text[1:] if text[0] in "+-" else text
    return all(c == "0" for c in body)


def _has_double_or_overflow(args: Sequence[str]) -> bool:
    if any(atoi(arg) != atol(arg) for arg in args):
        return True
    values = [atoi(arg) for arg in args]
    return len(set(values)) != len(values)


def check_input(args: Sequence[str]) -> bool:
    """True when every argument is a distinct integer that fits in 32 bits."""
    for arg in args:
        if arg == "" or not _is_number(arg):
            return False
    if sum(_is_zero(arg) for arg in args) > 1:
        return False
    return not _has_double_or_overflow(args)


def parse_values(args: Sequence[str]) -> list[int]:
    """Return the integers given by ``args``, raising InputError when they are invalid."""
    if not check_input(args):
        raise InputError("invalid input")
    return [atoi(arg) for arg in args]