"""Integer parsing and formatting with fixed-width C integer semantics."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_leading_integer(text: str) -> int:
    """Parse the optional whitespace, sign and digits at the start of ``text``."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    digits = text[pos:end]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading integer, wrapping like a 32-bit signed int."""
    return _wrap(_parse_leading_integer(text), 32)


def atol(text: str) -> int:
    """Parse a leading integer, wrapping like a 64-bit signed long."""
    return _wrap(_parse_leading_integer(text), 64)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not _INT32_MIN <= n <= _INT32_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def itoa_ll(n: int) -> str:
    """Return the decimal text of a 64-bit signed integer."""
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise OverflowError(f"{n} does not fit in a 64-bit long long")
    return str(n)


def utohex(n: int) -> str:
    """Return the lower-case hexadecimal text of a 64-bit unsigned integer."""
    return format(n & ((1 << 64) - 1), "x")


def ptoa(ptr: int) -> str:
    """Format an address the way ``%p`` does: ``(nil)`` or ``0x`` and hex digits."""
    if ptr == 0:
        return "(nil)"
    return "0x" + utohex(ptr)