"""String helpers with C-string semantics: search, compare, slice, join, split."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any, Optional

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "strlcpy",
    "strlcat",
]

_NUL = "\0"


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _size(n: int, name: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; ``None`` counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    if _char(c) == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None; NUL finds ``len(s)``."""
    if _char(c) == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the code points of the first unequal pair,
    or 0 when the compared parts are equal. The end of a string compares
    as NUL, and comparison stops at a NUL common to both.
    """
    n = _size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0; a match must end within
    ``length`` characters.
    """
    length = _size(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string; ``None`` gives ``None``.
    """
    start = _size(start, "start")
    length = _size(length, "length")
    if s is None:
        return None
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: str) -> str:
    """Concatenate ``s1`` and ``s2``; a missing ``s1`` counts as empty."""
    return (s1 or "") + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters found in ``charset`` from both ends of ``s``.

    ``None`` for ``s`` gives ``None``; ``None`` for ``charset`` returns ``s``
    unchanged.
    """
    if s is None:
        return None
    if charset is None:
        return s
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[list[str]]:
    """Split ``s`` on the character ``sep``, dropping empty words.

    ``None`` for ``s`` gives ``None``.
    """
    if s is None:
        return None
    sep = _char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for every character of ``s``.

    ``None`` for ``s`` gives an empty string.
    """
    if s is None:
        return ""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: Optional[MutableSequence[Any]], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on every item of a mutable sequence.

    When ``f`` returns something other than None, it replaces the item in
    place. ``None`` for ``s`` does nothing.
    """
    if s is None:
        return
    for index, item in enumerate(list(s)):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text, which holds at most ``size - 1`` characters,
    and the full length of ``src``, so truncation shows as the length
    exceeding what was copied.
    """
    size = _size(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it would have had without
    truncation. When ``dst`` already fills the buffer it comes back
    unchanged and the length is ``size + len(src)``.
    """
    size = _size(size, "size")
    dest_len = min(len(dst), size)
    if dest_len == size:
        return dst, size + len(src)
    room = size - 1 - dest_len
    return dst + src[:room], dest_len + len(src)