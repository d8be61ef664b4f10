"""Conversions between text and integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading integer from ``text``.

    Leading ASCII whitespace is skipped, then one optional ``+`` or ``-``,
    then as many decimal digits as follow. Parsing stops at the first other
    character; with no digits the result is 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading ``-`` when negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return f"{n:d}"