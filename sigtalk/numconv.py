"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

_WHITESPACE = " \t\f\r\n\v"
_UINT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value %= _UINT_MOD
    return value - _UINT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a decimal integer the way a C-style ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. Anything else ends the number; no digits
    gives 0. The value wraps around as a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    magnitude = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        magnitude = (magnitude * 10 + ord(char) - ord("0")) % _UINT_MOD
    return _to_int32(-magnitude if negative else magnitude)


def itoa(number: int) -> str:
    """Render a number as decimal text, taken as a 32-bit signed integer."""
    return str(_to_int32(number))


def uitoa(number: int) -> str:
    """Render a number as decimal text, taken as a 32-bit unsigned integer."""
    return str(number % _UINT_MOD)