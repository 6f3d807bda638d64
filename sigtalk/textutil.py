"""String and byte helpers: splitting, trimming, searching and comparing.

Searching functions return indices rather than pointers. A position that is
not found is reported as ``None``.
"""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _char(value: int | str) -> str:
    """Return a one-character string from a character or an integer code."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int or a single character, got {type(value).__name__}")
    return chr(value)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, separator: int | str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty words.

    Runs of separators, and separators at either end, produce no empty
    entries. A NUL separator never matches, so a non-empty text is one word.
    """
    _require_str(text, "text")
    sep = _char(separator)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text yields an empty string.
    """
    _require_str(text, "text")
    _require_count(start, "start")
    _require_count(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, 0 for an empty needle, or ``None``.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    _require_count(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters, stopping at the end of either text.

    Returns the difference of the first differing character codes, the end
    of a text counting as code 0; 0 when the compared parts are equal.
    """
    _require_str(first, "first")
    _require_str(second, "second")
    _require_count(limit, "limit")
    for pos in range(limit):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def memcmp(first: bytes, second: bytes, limit: int) -> int:
    """Compare the first ``limit`` bytes of two byte sequences.

    Returns the difference of the first differing bytes, or 0. Both
    sequences must hold at least ``limit`` bytes.
    """
    _require_count(limit, "limit")
    left = memoryview(first).cast("B")
    right = memoryview(second).cast("B")
    if len(left) < limit or len(right) < limit:
        raise ValueError(f"both sequences must hold at least {limit} bytes")
    for a, b in zip(left[:limit], right[:limit]):
        if a != b:
            return a - b
    return 0


def strchr(text: str, char: int | str) -> int | None:
    """Index of the first ``char`` in ``text``.

    Searching for NUL gives the length of the text; a miss gives ``None``.
    """
    _require_str(text, "text")
    wanted = _char(char)
    if wanted == _NUL and _NUL not in text:
        return len(text)
    index = text.find(wanted)
    return None if index < 0 else index


def strrchr(text: str, char: int | str) -> int | None:
    """Index of the last ``char`` in ``text``.

    Searching for NUL gives the length of the text; a miss gives ``None``.
    """
    _require_str(text, "text")
    wanted = _char(char)
    if wanted == _NUL:
        return len(text)
    index = text.rfind(wanted)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Concatenate two texts."""
    return _require_str(first, "first") + _require_str(second, "second")


def strmapi(text: str | None, func: Callable[[int, str], str]) -> str:
    """Build a new text from ``func(index, char)`` applied to each character.

    A missing text yields an empty string.
    """
    if text is None:
        return ""
    _require_str(text, "text")
    return "".join(func(index, char) for index, char in enumerate(text))