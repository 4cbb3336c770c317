"""Character classification and case conversion in the C locale."""

from __future__ import annotations

import operator

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_space",
    "is_valid_sign",
    "to_upper",
    "to_lower",
]

CharLike = "str | int"

_SIGNS = (ord("+"), ord("-"))


def _code(c: str | int) -> int:
    """Return the code point of a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return 9 <= code <= 13 or code == ord(" ")


def is_valid_sign(a: str | int, b: str | int) -> bool:
    """True when ``a`` is a sign and the character after it, ``b``, is not."""
    return _code(a) in _SIGNS and _code(b) not in _SIGNS


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code