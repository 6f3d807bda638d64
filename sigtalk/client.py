"""Client that sends a message to a server one bit per signal."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence

from sigtalk.chartype import atoi
from sigtalk.printf import printf
from sigtalk.protocol import encode_message, signal_for_bit

DEFAULT_DELAY = 0.0005


class ClientError(Exception):
    """Raised when a signal cannot be delivered to the server."""


def send_bit(pid: int, bit: int, delay: float = DEFAULT_DELAY) -> None:
    """Send one bit to ``pid`` and wait ``delay`` seconds."""
    sig = signal_for_bit(bit)
    try:
        os.kill(pid, sig)
    except OSError as exc:
        raise ClientError(f"could not send {sig.name} to PID {pid}") from exc
    time.sleep(delay)


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send ``message`` and its terminator to ``pid``."""
    for bit in encode_message(message):
        send_bit(pid, bit, delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Send the message given on the command line to the server's PID."""
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "client"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("USAGE: %s <server pid> <message>\n", prog)
        return 1
    pid = atoi(args[0])
    try:
        send_message(pid, args[1])
    except ClientError as exc:
        printf("ERROR: %s\n", str(exc))
        return 1
    printf("\nMessage sent successfuly!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())