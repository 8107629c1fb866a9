"""Small string helpers with C-library style semantics."""

from __future__ import annotations

import re

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = re.compile(r"[+-]*")
_DIGITS = re.compile(r"[0-9]*")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace is skipped.  More than one sign character yields 0,
    as does text without digits.
    """
    rest = text.lstrip(_WHITESPACE)
    signs = _SIGNS.match(rest).group()
    if len(signs) > 1:
        return 0
    digits = _DIGITS.match(rest, len(signs)).group()
    value = int(digits) if digits else 0
    return _wrap_int32(-value if signs == "-" else value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Find ``needle`` within the first ``n`` characters of ``haystack``.

    Returns the index of the first match, or None.  An empty needle matches
    at index 0.
    """
    if not needle:
        return 0
    index = haystack[: max(n, 0)].find(needle)
    return None if index == -1 else index