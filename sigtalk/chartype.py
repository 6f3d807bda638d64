"""Character classification and integer/text conversion helpers.

The classifiers accept either an integer character code or a one-character
string.
"""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _code(value: int | str) -> int:
    """Return the integer code of a character given as int or 1-char str."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int or a single character, got {type(value).__name__}")
    return value


def _wrap_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Accepts one optional sign, then reads digits until the first non-digit.
    Returns 0 when no digits follow. The result wraps to a 32-bit int.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < length and text[end] in _DIGITS:
        end += 1
    digits = text[pos:end]
    if not digits:
        return 0
    return _wrap_int32(int(digits) * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def is_alpha(code: int | str) -> bool:
    """True for ASCII letters."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def is_digit(code: int | str) -> bool:
    """True for ASCII decimal digits."""
    c = _code(code)
    return ord("0") <= c <= ord("9")


def is_alnum(code: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(code) <= 126


def _convert(code: int | str, low: str, high: str, shift: int) -> int | str:
    c = _code(code)
    if ord(low) <= c <= ord(high):
        c += shift
    return chr(c) if isinstance(code, str) else c


def to_upper(code: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values pass unchanged.

    The result has the same type as the argument.
    """
    return _convert(code, "a", "z", -32)


def to_lower(code: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values pass unchanged.

    The result has the same type as the argument.
    """
    return _convert(code, "A", "Z", 32)