"""Bit-level message encoding shared by the signal client and server.

A message travels as its UTF-8 bytes followed by one NUL byte, each byte
sent most significant bit first, one bit per signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Callable, Iterator, Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


def byte_to_bits(value: int) -> tuple[int, ...]:
    """Split a byte into its eight bits, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a byte value, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def encode_message(text: Union[str, bytes, bytearray]) -> Iterator[int]:
    """Yield the bits for ``text`` followed by the terminating NUL byte."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    return chain.from_iterable(map(byte_to_bits, data + bytes([TERMINATOR])))


@dataclass(frozen=True)
class CompletedMessage:
    """A whole message received from one sender."""

    sender: int
    data: bytes
    signals: int

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")


class MessageDecoder:
    """Reassembles bytes and messages from a stream of bits.

    Bits from a sender other than the current one discard any partial
    message and start afresh for the new sender. ``on_byte`` is called
    with every completed byte, the terminating NUL included.
    """

    def __init__(self, on_byte: Optional[Callable[[int], None]] = None) -> None:
        self._on_byte = on_byte
        self.reset()

    @property
    def sender(self) -> Optional[int]:
        return self._sender

    def reset(self) -> None:
        """Forget the current sender and any partial message."""
        self._sender: Optional[int] = None
        self._value = 0
        self._bits = 0
        self._signals = 0
        self._buffer = bytearray()

    def feed(self, sender: int, bit: int) -> Optional[CompletedMessage]:
        """Take one bit from ``sender``; return the message it completes, if any."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if sender != self._sender:
            self.reset()
            self._sender = sender
        self._value = ((self._value << 1) | int(bit)) & 0xFF
        self._bits += 1
        self._signals += 1
        if self._bits < BITS_PER_BYTE:
            return None

        byte = self._value
        self._value = 0
        self._bits = 0
        if self._on_byte is not None:
            self._on_byte(byte)
        if byte != TERMINATOR:
            self._buffer.append(byte)
            return None

        message = CompletedMessage(sender, bytes(self._buffer), self._signals)
        self._buffer.clear()
        self._signals = 0
        return message