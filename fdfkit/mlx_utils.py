"""Hashing, colour conversion, pixel writing and line reading helpers."""

from __future__ import annotations

import operator
import struct
from typing import IO, AnyStr, Optional

__all__ = ["fnv_hash", "rgba_to_mono", "draw_pixel", "read_line", "BPP"]

BPP = 4

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = 0xFFFFFFFFFFFFFFFF

_RED_WEIGHT = 0.299
_GREEN_WEIGHT = 0.587
_BLUE_WEIGHT = 0.114


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def fnv_hash(data: bytes | bytearray | str) -> int:
    """Return the 64-bit FNV-1a hash of ``data``.

    Strings are hashed as their UTF-8 encoding. Bytes above 0x7F are
    sign-extended before mixing, as a signed char would be.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = _FNV_OFFSET
    for byte in bytes(data):
        if byte >= 0x80:
            byte = (byte - 0x100) & _MASK64
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK64
    return value


def _weighted(weight: float, channel: int) -> int:
    return int(_f32(_f32(weight) * channel)) & 0xFF


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to grey using luminance weights; alpha is kept."""
    color = operator.index(color) & 0xFFFFFFFF
    r = _weighted(_RED_WEIGHT, (color >> 24) & 0xFF)
    g = _weighted(_GREEN_WEIGHT, (color >> 16) & 0xFF)
    b = _weighted(_BLUE_WEIGHT, (color >> 8) & 0xFF)
    y = (r + g + b) & 0xFF
    return (y << 24) | (y << 16) | (y << 8) | (color & 0xFF)


def draw_pixel(buffer: bytearray, offset: int, color: int) -> None:
    """Write ``color`` as four RGBA bytes into ``buffer`` at ``offset``."""
    offset = operator.index(offset)
    if offset < 0 or offset + BPP > len(buffer):
        raise IndexError(f"pixel at offset {offset} is out of bounds")
    buffer[offset:offset + BPP] = (operator.index(color) & 0xFFFFFFFF).to_bytes(BPP, "big")


def read_line(stream: IO[AnyStr]) -> Optional[AnyStr]:
    """Return the next line of ``stream`` with its newline, or None at end of file."""
    line = stream.readline()
    return line if line else None