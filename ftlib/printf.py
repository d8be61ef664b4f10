"""Formatted output with a small set of conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Integers follow C widths: ``%d``/``%i`` wrap to a
signed 32-bit value, ``%u``/``%x``/``%X`` to an unsigned 32-bit value and
``%p`` to an unsigned 64-bit value. An unknown conversion produces nothing
and consumes no argument; a lone ``%`` at the end of the format is written
as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1
_NULL_STRING = "(null)"


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an int, got {type(value).__name__}")
    return value


def _as_signed(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s requires a str, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & _POINTER_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next_arg(args, spec))
    if spec == "s":
        return _string(_next_arg(args, spec))
    if spec == "p":
        return _pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return str(_as_signed(_require_int(_next_arg(args, spec), spec)))
    if spec == "u":
        return str(_require_int(_next_arg(args, spec), spec) & _UINT_MASK)
    if spec == "x":
        return f"{_require_int(_next_arg(args, spec), spec) & _UINT_MASK:x}"
    if spec == "X":
        return f"{_require_int(_next_arg(args, spec), spec) & _UINT_MASK:X}"
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a str, got {type(fmt).__name__}")
    arguments = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        else:
            pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default)
    and return the number of characters written."""
    text = sprintf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)