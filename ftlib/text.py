"""Searching, comparing and assembling strings.

Positions are returned as indices into the string, or ``None`` when nothing
is found. A search for the terminator (character code 0) finds the position
just past the last character, where a terminated string would keep it.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[int, str]

_TERMINATOR = "\0"


def _as_char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(_require_str("s", s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``."""
    _require_str("s", s)
    ch = _as_char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``."""
    _require_str("s", s)
    ch = _as_char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Compare two strings.

    Returns the difference between the codes of the first pair of characters
    that differ, the shorter string ending in a code of 0; 0 if equal.
    """
    _require_str("a", a)
    _require_str("b", b)
    return strncmp(a, b, max(len(a), len(b)) + 1)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    _require_str("a", a)
    _require_str("b", b)
    if n < 0:
        raise ValueError(f"negative length {n}")
    for index in range(n):
        x = _code_at(a, index)
        y = _code_at(b, index)
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index where ``needle`` first occurs wholly within the first
    ``n`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _require_str("haystack", haystack)
    _require_str("needle", needle)
    if n < 0:
        raise ValueError(f"negative length {n}")
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a string equal to ``s``."""
    return str(_require_str("s", s))


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return _require_str("a", a) + _require_str("b", b)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of ``s`` gives an empty string.
    """
    _require_str("s", s)
    if start < 0:
        raise ValueError(f"negative start {start}")
    if length < 0:
        raise ValueError(f"negative length {length}")
    if start > len(s):
        return ""
    return s[start:start + length]