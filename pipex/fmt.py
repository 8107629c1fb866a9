"""A small printf with the conversions %s %d %i %u %c %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT32 = 0xFFFFFFFF
_ULONG = 0xFFFFFFFFFFFFFFFF


def _int32(value: Any) -> int:
    value = int(value) & _UINT32
    return value - 0x100000000 if value >= 0x80000000 else value


def _convert_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert_ptr(value: Any) -> str:
    address = int(value) & _ULONG
    return "(nil)" if address == 0 else f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _convert_str,
    "d": lambda value: str(_int32(value)),
    "i": lambda value: str(_int32(value)),
    "u": lambda value: str(int(value) & _UINT32),
    "c": _convert_char,
    "x": lambda value: f"{int(value) & _UINT32:x}",
    "X": lambda value: f"{int(value) & _UINT32:X}",
    "p": _convert_ptr,
}


def _next_value(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_string(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the text.

    An unknown conversion prints the character after the ``%``; a ``%`` at
    the very end of the template produces a NUL character.
    """
    values = iter(args)
    chars = iter(template)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("\0")
            break
        if spec == "%":
            parts.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            parts.append(spec)
        else:
            parts.append(convert(_next_value(values)))
    return "".join(parts)


def printf(template: str, *args: Any) -> int:
    """Write the expanded ``template`` to standard output; return its length."""
    text = format_string(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)