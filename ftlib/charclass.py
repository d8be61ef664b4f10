"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Classification functions return ``bool``; case conversion returns a
value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _like(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def _is_upper(code: int) -> bool:
    return 65 <= code <= 90


def _is_lower(code: int) -> bool:
    return 97 <= code <= 122


def is_alpha(c: Char) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """True for ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Map an ASCII capital letter to lower case; anything else is unchanged."""
    code = _code(c)
    return _like(c, code + 32) if _is_upper(code) else c


def to_upper(c: Char) -> Char:
    """Map an ASCII small letter to upper case; anything else is unchanged."""
    code = _code(c)
    return _like(c, code - 32) if _is_lower(code) else c