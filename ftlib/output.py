"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftlib.convert import itoa

Char = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Char, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    _target(stream).write(ch)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing at all."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal to ``stream``."""
    _target(stream).write(itoa(n))