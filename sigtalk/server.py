"""Receive text messages sent one bit per signal and acknowledge each bit."""

from __future__ import annotations

import codecs
import os
import signal
import sys
import time
from contextlib import suppress
from typing import NoReturn, Optional, Sequence, TextIO

from .fmt import printf
from .protocol import TERMINATOR, CompletedMessage, MessageDecoder

_BIT_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}
_PAUSE = 100e-6


class Server:
    """Decodes incoming bit signals and echoes the text to ``file``.

    SIGUSR1 carries a 0 bit and SIGUSR2 a 1 bit. Every bit is answered
    with SIGUSR2; a completed message is answered first with SIGUSR1.
    """

    def __init__(self, file: Optional[TextIO] = None) -> None:
        self._file = file
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._decoder = MessageDecoder(on_byte=self._echo)

    def _stream(self) -> TextIO:
        return sys.stdout if self._file is None else self._file

    def _echo(self, byte: int) -> None:
        if byte == TERMINATOR:
            chunk = self._text.decode(b"", final=True)
            self._text.reset()
        else:
            chunk = self._text.decode(bytes([byte]))
        if chunk:
            stream = self._stream()
            stream.write(chunk)
            stream.flush()

    def handle(self, signum: int, sender: int) -> Optional[CompletedMessage]:
        """Take one bit signal from ``sender``; return the message it completes."""
        if signum not in _BIT_SIGNALS:
            raise ValueError(f"unexpected signal: {signum}")
        if sender != self._decoder.sender:
            self._text.reset()
        message = self._decoder.feed(sender, 1 if signum == signal.SIGUSR2 else 0)
        if message is not None:
            printf(
                "\n%d signal received from client PID: %d\n",
                message.signals,
                message.sender,
                file=self._stream(),
            )
            self._stream().flush()
            os.kill(sender, signal.SIGUSR1)
        time.sleep(_PAUSE)
        with suppress(OSError):
            os.kill(sender, signal.SIGUSR2)
        return message

    def serve_forever(self) -> NoReturn:
        """Wait for bit signals and handle them until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _BIT_SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_BIT_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: print the PID and serve until interrupted."""
    printf("PID: %d\n\n", os.getpid())
    sys.stdout.flush()
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    except OSError:
        printf("\nserver: unexpected error.\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())