"""Operations on mutable byte buffers.

Buffers are ``bytearray`` or writable ``memoryview`` objects; sources may be
any bytes-like object. Byte values are reduced modulo 256 as an unsigned char
would be.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(name: str, buf: BytesLike, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_length("buffer", buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within the first
    ``n`` bytes, or ``None`` if there is none."""
    _check_length("buffer", buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    unequal pair, or 0 if they match."""
    _check_length("first buffer", a, n)
    _check_length("second buffer", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    _check_length("destination", dst, n)
    _check_length("source", src, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Buffer, src: BytesLike, n: int) -> Buffer:
    """Copy ``n`` bytes like :func:`memcpy`, correct even when the two
    regions overlap; return ``dst``."""
    _check_length("destination", dst, n)
    _check_length("source", src, n)
    # Snapshot the source first so overlapping views cannot corrupt it.
    snapshot = bytes(src[:n])
    dst[:n] = snapshot
    return dst