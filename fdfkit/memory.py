"""Byte-buffer primitives: fill, copy, move, search and compare."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Optional

__all__ = ["memset", "bzero", "calloc", "memcpy", "memmove", "memchr", "memcmp"]


def _count(n: int, *lengths: int) -> int:
    """Validate a byte count against the buffers it will touch."""
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")
    return n


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``value``."""
    n = _count(n, len(buffer))
    buffer[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    n = _count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    dest = operator.index(dest)
    src = operator.index(src)
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    n = _count(n, len(buffer) - dest, len(buffer) - src)
    if dest != src and n:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: Sequence[int], c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    n = _count(n, len(data))
    target = operator.index(c) & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    n = _count(n, len(a), len(b))
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)