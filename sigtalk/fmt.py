"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

from .numconv import itoa, uitoa

_UINT_MOD = 1 << 32
_ULONG_MOD = 1 << 64
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_POINTER_PREFIX = "0x"


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def format_hex(value: int, upper: bool = False) -> str:
    """Render ``value`` in hexadecimal, taken as a 64-bit unsigned integer."""
    value = _require_int(value) % _ULONG_MOD
    return format(value, "X" if upper else "x")


def format_pointer(value: int) -> str:
    """Render an address as ``0x``-prefixed hex, or ``(nil)`` for zero."""
    value = _require_int(value) % _ULONG_MOD
    if value == 0:
        return _NULL_POINTER
    return _POINTER_PREFIX + format_hex(value)


def format_string(value: Optional[str]) -> str:
    """Render a string argument; ``None`` becomes ``(null)``."""
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"expected a string argument, got {type(value).__name__}")
    return value


def format_unsigned(value: int) -> str:
    """Render ``value`` in decimal, taken as a 32-bit unsigned integer."""
    return uitoa(_require_int(value))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value) % 256)


def _format_signed(value: Any) -> str:
    return itoa(_require_int(value))


def _format_hex32(upper: bool) -> Callable[[Any], str]:
    def render(value: Any) -> str:
        return format_hex(_require_int(value) % _UINT_MOD, upper)

    return render


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": format_unsigned,
    "x": _format_hex32(False),
    "X": _format_hex32(True),
}


def format_message(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args``.

    A ``%`` followed by an unknown conversion (including ``%%`` and a
    trailing ``%``) produces a single ``%`` and consumes no argument.
    Extra arguments are ignored; too few raise ``TypeError``.
    """
    remaining = iter(args)
    chars = iter(template)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, "")
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            pieces.append("%")
            continue
        try:
            argument = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {template!r}") from None
        pieces.append(handler(argument))
    return "".join(pieces)


def printf(template: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the expanded template to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    output = format_message(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(output)
    return len(output)