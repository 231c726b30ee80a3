"""Parsing of format strings into literal text and conversion specifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from pushswap.chartype import isdigit
from pushswap.numconv import atoi

SPECIFIERS = "cspdiuxX%"
FLAGS = "-0# +"
_NUMERIC = "diuxXp"


class FormatError(ValueError):
    """Raised when a format string cannot be parsed or lacks arguments."""


@dataclass
class Spec:
    """One piece of a format string: literal text or a conversion with its options.

    ``specifier`` is empty when the conversion had no valid specifier.
    Literal text is represented as specifier ``s`` with the text as content.
    """

    specifier: str = ""
    content: Any = None
    has_minus: bool = False
    has_zero: bool = False
    precision: int = -1
    width: int = 0
    has_hash: bool = False
    has_plus: bool = False
    has_space: bool = False

    def has_option(self) -> bool:
        """True when any flag, a width or a precision was given."""
        return bool(
            self.has_minus
            or self.has_zero
            or self.precision > -1
            or self.width
            or self.has_hash
            or self.has_plus
            or self.has_space
        )

    def padding_char(self) -> str:
        """The character used to fill up to the field width."""
        if (
            self.has_zero
            and not self.has_minus
            and self.specifier != ""
            and self.specifier in _NUMERIC
            and self.precision == -1
        ):
            return "0"
        return " "


def is_specifier(c: str) -> bool:
    """True when ``c`` is one of the conversion characters."""
    return len(c) == 1 and c in SPECIFIERS


def is_flag(c: str) -> bool:
    """True when ``c`` is one of the flag characters."""
    return len(c) == 1 and c in FLAGS


def _skip_digits(text: str, pos: int) -> int:
    while pos < len(text) and isdigit(text[pos]):
        pos += 1
    return pos


def _conversion_length(text: str) -> int:
    """Length of the conversion following a ``%``, or 0 when it is invalid."""
    if text.startswith("%"):
        return 1
    pos = 0
    while pos < len(text) and is_flag(text[pos]):
        pos += 1
    pos = _skip_digits(text, pos)
    if pos < len(text) and text[pos] == ".":
        pos = _skip_digits(text, pos + 1)
    if pos < len(text) and is_specifier(text[pos]):
        return pos + 1
    return 0


def validate_format_string(fmt: str) -> bool:
    """True when every ``%`` in ``fmt`` starts a well-formed conversion."""
    pos = 0
    while pos < len(fmt):
        if fmt[pos] != "%":
            pos += 1
            continue
        length = _conversion_length(fmt[pos + 1:])
        if length == 0:
            return False
        pos += 1 + length
    return True


def pre_count_elements(fmt: str) -> int:
    """Count the text runs and conversions that ``fmt`` is made of."""
    count = 0
    pos = 0
    while pos < len(fmt):
        count += 1
        if fmt[pos] == "%":
            pos += 1
            pos += _conversion_length(fmt[pos:])
        else:
            end = fmt.find("%", pos)
            pos = len(fmt) if end < 0 else end
    return count


def parse_flags(text: str) -> tuple[Spec, int]:
    """Parse flags, width and precision at the start of ``text``.

    Returns the partly filled Spec and the number of characters consumed.
    """
    spec = Spec()
    pos = 0
    while pos < len(text) and is_flag(text[pos]):
        flag = text[pos]
        if flag == "-":
            spec.has_minus = True
        elif flag == "0":
            spec.has_zero = True
        elif flag == "#":
            spec.has_hash = True
        elif flag == "+":
            spec.has_plus = True
        else:
            spec.has_space = True
        pos += 1
    end = _skip_digits(text, pos)
    if end > pos:
        spec.width = atoi(text[pos:end])
        pos = end
    if pos < len(text) and text[pos] == ".":
        end = _skip_digits(text, pos + 1)
        if end > pos + 1:
            spec.precision = atoi(text[pos + 1:end])
            pos = end
        else:
            spec.precision = 0
            pos += 1
    return spec, pos


def _wrap32(value: int) -> int:
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError("not enough arguments for format string") from None


def _fill_content(spec: Spec, args: Iterator[Any]) -> None:
    spec_char = spec.specifier
    if spec_char == "%":
        spec.content = ord("%")
        return
    arg = _next_arg(args)
    if spec_char == "c":
        code = (ord(arg[0]) if arg else 0) if isinstance(arg, str) else int(arg)
        spec.content = code & 0xFF
    elif spec_char == "s":
        spec.content = "(null)" if arg is None else str(arg)
    elif spec_char in "di":
        spec.content = _wrap32(int(arg))
    elif spec_char in "uxX":
        spec.content = int(arg) & 0xFFFFFFFF
    elif spec_char == "p":
        spec.content = 0 if arg is None else int(arg)


def _parse_conversion(text: str, args: Iterator[Any], specs: list[Spec]) -> int:
    spec, pos = parse_flags(text)
    if pos < len(text) and is_specifier(text[pos]):
        spec.specifier = text[pos]
        _fill_content(spec, args)
        pos += 1
    specs.append(spec)
    return pos


def parse_format_string(fmt: str, args: Iterable[Any]) -> list[Spec]:
    """Split ``fmt`` into Specs, taking conversion values from ``args`` in order."""
    arg_iter = iter(args)
    specs: list[Spec] = []
    pos = 0
    consumed = 0
    while pos < len(fmt):
        if fmt[pos] == "%":
            pos += 1
            consumed = _parse_conversion(fmt[pos:], arg_iter, specs)
        else:
            end = fmt.find("%", pos)
            if end < 0:
                end = len(fmt)
            specs.append(Spec(specifier="s", content=fmt[pos:end]))
            consumed = end - pos
        if consumed == 0:
            break
        pos += consumed
    if consumed == 0 and pos < len(fmt):
        raise FormatError(f"cannot parse format at {fmt[pos:]!r}")
    return specs