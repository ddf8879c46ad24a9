"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to c in data[:n], or None."""
    _check_length(n, data)
    offset = bytes(data[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first n bytes.

    Returns 0 when equal, otherwise the difference between the first pair of
    differing bytes.
    """
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy n bytes from src into the start of dest and return dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy n bytes from src to dest, correct even when the two overlap."""
    _check_length(n, dest, src)
    # Taking a snapshot of the source makes overlapping views safe.
    snapshot = bytes(src[:n])
    dest[:n] = snapshot
    return dest