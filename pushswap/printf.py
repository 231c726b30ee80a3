"""Formatted output built on parsed conversion specifications."""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import Any

from pushswap.fmtspec import (
    FormatError,
    Spec,
    parse_format_string,
    validate_format_string,
)
from pushswap.numconv import itoa_ll, ptoa, utohex
from pushswap.strutils import toupper_string

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_NUMERIC = frozenset("diuxXp")
_SIGNED = frozenset("di")
_HEX = frozenset("xX")


def handle_null_string(spec: Spec, text: str) -> str:
    """Replace the text of a null string argument.

    A precision shorter than ``(null)`` hides it entirely; otherwise the
    full ``(null)`` is kept, whatever ``text`` held.
    """
    if -1 < spec.precision < len(_NULL_STRING):
        return ""
    return _NULL_STRING


def _apply_flags(spec: Spec, text: str) -> str:
    """Apply the ``+``, space and ``#`` flags."""
    signed = spec.specifier in _SIGNED
    if spec.has_plus and signed and not text.startswith("-"):
        text = "+" + text
    if spec.has_space and signed and not text.startswith(("-", "+")):
        text = " " + text
    if spec.has_hash and spec.specifier in _HEX and not text.startswith("0"):
        text = ("0x" if spec.specifier == "x" else "0X") + text
    return text


def _split_prefix(text: str) -> tuple[str, str]:
    """Separate a sign, a blank or a hex prefix from the digits that follow."""
    if text[:1] in ("-", "+", " "):
        return text[:1], text[1:]
    if text[:1] == "0" and text[1:2] in ("x", "X"):
        return text[:2], text[2:]
    return "", text


def apply_precision_nbr(spec: Spec, text: str) -> str:
    """Zero-extend the digits of a number to its precision, or to the width with ``0``."""
    if spec.precision == 0 and text == "0":
        return ""
    prefix, digits = _split_prefix(text)
    if spec.precision > -1:
        target = spec.precision
    elif spec.has_zero and spec.width and not spec.has_minus:
        target = spec.width - len(prefix)
    else:
        target = len(digits)
    if len(digits) >= target:
        return text
    return prefix + "0" * (target - len(digits)) + digits


def apply_precision(spec: Spec, text: str) -> str:
    """Apply the precision: truncation for strings, zero padding for numbers."""
    kind = spec.specifier
    if kind in ("s", "c"):
        precision = spec.precision
        if kind == "c" and precision == 0:
            precision = -1
        if precision == 0:
            return ""
        if precision > 0:
            return text[:precision]
        return text
    if kind in _NUMERIC:
        return apply_precision_nbr(spec, text)
    return text


def apply_padding_width(spec: Spec, text: str, padding_char: str) -> str:
    """Pad ``text`` with ``padding_char`` up to the field width."""
    null_char = spec.specifier == "c" and text[:1] in ("", "\0")
    length = 1 if null_char else len(text)
    if spec.width <= length:
        return text
    padding = padding_char * (spec.width - length)
    if spec.has_minus and not null_char:
        return text + padding
    return padding + text


def handle_options(spec: Spec, text: str) -> str:
    """Apply flags, precision and width to the converted ``text``."""
    if spec.specifier == "s" and text.startswith(_NULL_STRING):
        text = handle_null_string(spec, text)
    text = _apply_flags(spec, text)
    if spec.precision > -1 or (spec.has_zero and spec.width and not spec.has_minus):
        text = apply_precision(spec, text)
    if spec.width:
        text = apply_padding_width(spec, text, spec.padding_char())
    return text


def _null_char(spec: Spec) -> str:
    """Render a ``%c`` of the NUL character, which is padded but never dropped."""
    if not spec.has_option():
        return "\0"
    fill = " " * (max(spec.width, 1) - 1)
    return "\0" + fill if spec.has_minus else fill + "\0"


def _convert(spec: Spec) -> str:
    """Turn the value held by ``spec`` into its bare text."""
    kind = spec.specifier
    content: Any = spec.content
    if kind in ("c", "%"):
        return chr(int(content) & 0xFF)
    if kind == "s":
        return _NULL_STRING if content is None else str(content)
    if kind in ("d", "i", "u"):
        return itoa_ll(int(content))
    if kind in _HEX:
        digits = utohex(int(content) & 0xFFFFFFFF)
        return toupper_string(digits) if kind == "X" else digits
    if kind == "p":
        return _NULL_POINTER if content is None else ptoa(int(content))
    raise FormatError(f"unknown conversion {kind!r}")


def render(spec: Spec) -> str:
    """Return the text one Spec produces; a Spec without a specifier produces nothing."""
    if spec.specifier == "":
        return ""
    if spec.specifier == "%":
        spec = replace(spec, width=0)
    text = _convert(spec)
    if spec.specifier == "c" and text == "\0":
        return _null_char(spec)
    if spec.has_option():
        return handle_options(spec, text)
    return text


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result."""
    if fmt is None:
        raise FormatError("format string is missing")
    if not validate_format_string(fmt):
        raise FormatError(f"invalid format string {fmt!r}")
    return "".join(render(spec) for spec in parse_format_string(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)