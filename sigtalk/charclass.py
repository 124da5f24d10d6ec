"""ASCII character classification and case mapping.

Every function takes a character code (an ``int``) or a one-character
string. Only the ASCII ranges are recognised: codes outside them are
never letters or digits, and case mapping leaves them untouched.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_DIGITS = range(ord("0"), ord("9") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code_of(code: CharLike) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected a character code or character, got {type(code).__name__}")
    return code


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(code: CharLike) -> bool:
    """True for an ASCII letter."""
    value = _code_of(code)
    return value in _LOWER or value in _UPPER


def isdigit(code: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _code_of(code) in _DIGITS


def isalnum(code: CharLike) -> bool:
    """True for an ASCII letter or decimal digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return _code_of(code) in _ASCII


def isprint(code: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return _code_of(code) in _PRINTABLE


def tolower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    value = _code_of(code)
    if value in _UPPER:
        value += _CASE_OFFSET
    return _same_kind(code, value)


def toupper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    value = _code_of(code)
    if value in _LOWER:
        value -= _CASE_OFFSET
    return _same_kind(code, value)