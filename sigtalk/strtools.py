"""String helpers with C library semantics, expressed on Python strings.

Searches return an index into the text, or ``None`` when nothing is
found. Searching for the NUL character finds the end of the text, as
it would in a NUL-terminated string.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

ByteLike = Union[bytes, bytearray, memoryview]
Text = Union[str, bytes, bytearray]

_NUL = "\0"


def _single_char(character: str) -> str:
    if not isinstance(character, str) or len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    return character


def _codes(text: Text) -> list[int]:
    if isinstance(text, str):
        return [ord(char) for char in text]
    return list(bytes(text))


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    _single_char(separator)
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    A ``None`` charset leaves the text unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle matches at 0 whatever the length. Returns the index
    of the first match, or ``None``.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    found = haystack[:length].find(needle)
    return found if found >= 0 else None


def strncmp(first: Text, second: Text, count: int) -> int:
    """Compare at most ``count`` characters, stopping at the first NUL.

    Returns the difference of the first differing character codes, the
    end of a string counting as code 0; 0 when they agree.
    """
    _check_non_negative("count", count)
    if count == 0:
        return 0
    pairs = zip_longest(_codes(first)[:count], _codes(second)[:count], fillvalue=0)
    for left, right in pairs:
        if left != right or left == 0:
            return left - right
    return 0


def memcmp(first: ByteLike, second: ByteLike, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0. Both
    buffers must hold at least ``count`` bytes.
    """
    _check_non_negative("count", count)
    left, right = bytes(first), bytes(second)
    if len(left) < count or len(right) < count:
        raise ValueError(f"both buffers must hold at least {count} bytes")
    for a, b in zip(left[:count], right[:count]):
        if a != b:
            return a - b
    return 0


def strchr(text: str, character: str) -> Optional[int]:
    """Index of the first ``character`` in ``text``, or ``None``.

    Searching for NUL gives the end of the text when none is embedded.
    """
    _single_char(character)
    found = text.find(character)
    if found >= 0:
        return found
    return len(text) if character == _NUL else None


def strrchr(text: str, character: str) -> Optional[int]:
    """Index of the last ``character`` in ``text``, or ``None``.

    Searching for NUL always gives the end of the text.
    """
    _single_char(character)
    if character == _NUL:
        return len(text)
    found = text.rfind(character)
    return found if found >= 0 else None


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings, a missing one counting as empty."""
    return (first or "") + (second or "")


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    mapped = []
    for index, char in enumerate(text):
        result = func(index, char)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return a single character, got {result!r}")
        mapped.append(result)
    return "".join(mapped)