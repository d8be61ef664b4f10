"""Splitting, trimming, mapping and bounded copying of strings.

``split``, ``strtrim`` and ``strmapi`` work on ``str`` and return new values.
``striteri`` rewrites a mutable sequence of characters in place.
``strlcpy`` and ``strlcat`` work on zero-terminated ``bytearray`` buffers.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Union

Char = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]


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


def _terminated_length(buf: BytesLike) -> int:
    """Length up to the first zero byte, or the whole buffer if none."""
    data = bytes(buf)
    index = data.find(0)
    return len(data) if index < 0 else index


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces.

    When ``s`` begins with ``sep`` the word count is reduced by one, so the
    final word is not returned.
    """
    _require_str("s", s)
    ch = _as_char(sep)
    if ch == "\0":
        words = [s] if s else []
    else:
        words = [word for word in s.split(ch) if word]
    if s.startswith(ch) and words:
        words.pop()
    return words


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    _require_str("s", s)
    _require_str("chars", chars)
    return s.strip(chars)


def strmapi(s: str, func: Callable[[int, str], Char]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    _require_str("s", s)
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(_as_char(func(index, ch)) for index, ch in enumerate(s))


def striteri(
    buffer: MutableSequence[Char], func: Callable[[int, Char], Char]
) -> None:
    """Replace each element of ``buffer`` with ``func(index, element)``.

    Iteration stops at the first terminator (``0`` or ``"\\0"``), as it would
    in a zero-terminated string.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    for index, item in enumerate(buffer):
        if item == 0 or item == "\0":
            break
        buffer[index] = func(index, item)


def strlcpy(dst: bytearray, src: BytesLike, size: int) -> int:
    """Copy ``src`` into ``dst`` writing at most ``size`` bytes including the
    terminating zero; return the length of ``src``."""
    if size < 0:
        raise ValueError(f"negative size {size}")
    src_len = _terminated_length(src)
    if size == 0:
        return src_len
    count = min(src_len, size - 1)
    if len(dst) < count + 1:
        raise ValueError(
            f"destination holds {len(dst)} bytes, {count + 1} needed"
        )
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append ``src`` to the terminated string in ``dst`` so that the whole
    stays within ``size`` bytes including the terminating zero.

    Returns the length the combined string would have had; when ``dst`` is
    already ``size`` bytes or longer, returns ``len(src) + size`` unchanged.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    src_len = _terminated_length(src)
    dst_len = _terminated_length(dst)
    if dst_len >= size:
        return src_len + size
    count = min(size - dst_len - 1, src_len)
    end = dst_len + count
    if len(dst) < end + 1:
        raise ValueError(f"destination holds {len(dst)} bytes, {end + 1} needed")
    dst[dst_len:end] = bytes(src[:count])
    dst[end] = 0
    return src_len + dst_len