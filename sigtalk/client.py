"""Send a text message to a server process, one bit per signal.

A 0 bit is sent as SIGUSR1 and a 1 bit as SIGUSR2. After every bit the
client waits for the server's SIGUSR2 acknowledgement; a SIGUSR1 from the
server reports that the whole message has arrived.
"""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence, Union

from .fmt import printf
from .numconv import atoi
from .protocol import encode_message

_ACK = signal.SIGUSR2
_DONE = signal.SIGUSR1
_BIT_SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)
_WATCHED = {signal.SIGUSR1, signal.SIGUSR2}
_PAUSE = 100e-6


class SendError(Exception):
    """Raised when the server cannot be signalled."""


def _signal(pid: int, signum: int) -> None:
    try:
        os.kill(pid, signum)
    except OSError as exc:
        raise SendError(f"cannot signal process {pid}: {exc}") from exc


def send_text(text: Union[str, bytes], server_pid: int) -> int:
    """Send ``text`` to ``server_pid`` and wait for it to be confirmed.

    Returns the number of signals the server acknowledged. Must be called
    from the main thread so that the acknowledgements reach it.
    """
    if server_pid <= 0:
        raise SendError(f"invalid server PID: {server_pid}")
    bits = encode_message(text)
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, _WATCHED)
    try:
        acknowledged = 0
        for bit in bits:
            _signal(server_pid, _BIT_SIGNALS[bit])
            if signal.sigwait(_WATCHED) == _DONE:
                # The server follows its completion signal with one last ack.
                signal.sigwait({_ACK})
                return acknowledged + 1
            acknowledged += 1
            time.sleep(_PAUSE)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)
    raise SendError("server did not confirm the end of the message")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client <server_pid> <text to send>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("Usage: client <server_pid> <text to send>\n")
        return 1
    printf("client pid: %d\n", os.getpid())
    server_pid = atoi(args[0])
    printf("Text currently sending.. \n")
    sys.stdout.flush()
    try:
        count = send_text(args[1], server_pid)
    except SendError:
        printf("\nClient: unexpected error.\n")
        return 1
    printf("%d signal sent successfully!\n", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())