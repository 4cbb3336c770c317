"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any

__all__ = ["format_printf", "printf"]

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_MISSING = object()


def _wrap_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _signed(value: Any) -> str:
    return str(_wrap_int32(operator.index(value)))


def _unsigned(value: Any) -> str:
    return str(operator.index(value) & _UINT32_MASK)


def _hex_lower(value: Any) -> str:
    return format(operator.index(value) & _UINT32_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(operator.index(value) & _UINT32_MASK, "X")


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) if isinstance(value, int) else id(value)
    address &= _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    converter = _CONVERTERS.get(spec)
    if converter is None:
        # Unknown conversions print nothing and consume no argument.
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return converter(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write for ``fmt`` and ``args``."""
    if fmt is None:
        raise TypeError("format must not be None")
    arguments = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append("%" if spec == "%" else _convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)