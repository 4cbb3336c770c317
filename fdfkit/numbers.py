"""Lenient decimal parsing and formatting with C integer widths."""

from __future__ import annotations

import operator
import re

__all__ = ["atoi", "atol", "itoa"]

_LEADING_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse(text: str) -> int:
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer like :func:`atoi`, wrapping to 64 bits."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Format a 32-bit integer in decimal; wider values wrap first."""
    return str(_wrap(operator.index(n), 32))