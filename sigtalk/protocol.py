"""Wire format for messages carried by SIGUSR1/SIGUSR2 signals.

Each byte travels as eight signals, least significant bit first. SIGUSR1
carries a 0 bit and SIGUSR2 carries a 1 bit. A message ends with a NUL byte.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator

BITS_PER_BYTE = 8
TERMINATOR = 0

_SIGNAL_BITS = {signal.SIGUSR1: 0, signal.SIGUSR2: 1}


def _require_bit(bit: int) -> int:
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return int(bit)


def bit_for_signal(signum: int) -> int:
    """Return the bit carried by ``signum``: 0 for SIGUSR1, 1 for SIGUSR2."""
    try:
        return _SIGNAL_BITS[signum]
    except KeyError:
        raise ValueError(f"signal {signum!r} carries no bit") from None


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    return signal.SIGUSR2 if _require_bit(bit) else signal.SIGUSR1


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of ``value``, least significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"a byte must be within 0..255, got {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE))


def _bits(data: bytes) -> Iterator[int]:
    for byte in data:
        yield from encode_byte(byte)
    yield from encode_byte(TERMINATOR)


def encode_message(message: str | bytes) -> Iterator[int]:
    """Return the bits that carry ``message`` followed by its terminator.

    Text is encoded as UTF-8. A message may not contain a NUL byte.
    """
    if isinstance(message, str):
        data = message.encode("utf-8", "surrogateescape")
    elif isinstance(message, (bytes, bytearray, memoryview)):
        data = bytes(message)
    else:
        raise TypeError(f"expected str or bytes, got {type(message).__name__}")
    if b"\0" in data:
        raise ValueError("a message may not contain a NUL byte")
    return _bits(data)


class MessageDecoder:
    """Reassemble messages from a stream of bits."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._current = 0
        self._count = 0

    def feed(self, bit: int) -> bytes | None:
        """Take one bit; return the message once its terminator is complete."""
        if _require_bit(bit):
            self._current |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._current
        self._current = 0
        self._count = 0
        if byte != TERMINATOR:
            self._buffer.append(byte)
            return None
        message = bytes(self._buffer)
        self._buffer.clear()
        return message

    def reset(self) -> None:
        """Drop any partly received byte and message."""
        self._buffer.clear()
        self._current = 0
        self._count = 0