"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
from typing import TextIO

from fdfkit.numbers import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str | None, stream: TextIO) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_endl(s: str | None, stream: TextIO) -> None:
    """Write a string followed by a newline; ``None`` writes only the newline."""
    put_str(s, stream)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write a 32-bit integer in decimal."""
    stream.write(itoa(operator.index(n)))