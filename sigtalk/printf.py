"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%.

Numbers follow C's 32-bit ``int``/``unsigned int`` rules: arguments are
wrapped into range before being printed. Pointers are printed as 64-bit
hexadecimal addresses. An unknown conversion prints nothing and consumes
no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT32 = 2**32
_INT32_MIN = -(2**31)
_UINT64 = 2**64

_NUL = "\0"
_MISSING = object()


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an int, got {type(value).__name__}")
    return int(value)


def _until_nul(text: str) -> str:
    return text.split(_NUL, 1)[0]


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a str or None, got {type(value).__name__}")
    return _until_nul(value)


def _format_ptr(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = _require_int(value, "p") % _UINT64
    return f"0x{address:x}"


def _format_signed(value: Any) -> str:
    number = (_require_int(value, "d") - _INT32_MIN) % _UINT32 + _INT32_MIN
    return str(number)


def _format_unsigned(value: Any) -> str:
    return str(_require_int(value, "u") % _UINT32)


def _format_hex_lower(value: Any) -> str:
    return f"{_require_int(value, 'x') % _UINT32:x}"


def _format_hex_upper(value: Any) -> str:
    return f"{_require_int(value, 'X') % _UINT32:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_ptr,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return handler(value)


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    The format ends at the first NUL character. Surplus arguments are
    ignored; missing ones raise ``TypeError``.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    remaining = iter(args)
    chars = iter(_until_nul(fmt))
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)