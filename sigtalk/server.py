"""Server that prints messages received one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from types import FrameType
from typing import TextIO

from sigtalk.printf import printf
from sigtalk.protocol import MessageDecoder, bit_for_signal


class Server:
    """Decodes SIGUSR1/SIGUSR2 bits and prints each completed message."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self.decoder = MessageDecoder()

    def _stream(self) -> TextIO:
        return sys.stdout if self._output is None else self._output

    def handle_signal(self, signum: int, frame: FrameType | None) -> None:
        """Signal handler: take one bit and print the message when complete."""
        message = self.decoder.feed(bit_for_signal(signum))
        if message is None:
            return
        text = message.decode("utf-8", errors="replace") if message else None
        stream = self._stream()
        printf("%s\n", text, file=stream)
        stream.flush()

    def install(self) -> None:
        """Register this server as the handler of SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)

    def serve_forever(self) -> None:
        """Wait for signals indefinitely."""
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the process id, then receive and print messages."""
    printf("Server PID: %d\n", os.getpid())
    sys.stdout.flush()
    server = Server()
    try:
        server.install()
    except (OSError, ValueError):
        printf("ERROR: sigaction failed!\n")
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())