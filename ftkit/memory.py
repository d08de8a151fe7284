"""Byte-buffer operations: fill, search, compare, copy and allocation.

Buffers that are written to must be mutable bytes-like objects, normally
``bytearray``. Buffers that are only read may be any bytes-like object.
A byte count larger than a buffer raises ``ValueError``. A negative count
raises ``ValueError`` too.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

__all__ = [
    "memset",
    "bzero",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "calloc",
    "realloc",
]

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    """Raise if ``n`` is negative or exceeds the length of any buffer."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def _check_writable(buf: WritableBuffer) -> None:
    if isinstance(buf, memoryview):
        if buf.readonly:
            raise TypeError("buffer is read-only")
        return
    if not isinstance(buf, bytearray):
        raise TypeError(f"expected a writable buffer, got {type(buf).__name__}")


def memset(buf: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_writable(buf)
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memchr(buf: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) in the first
    ``n`` bytes, or ``None`` when there is none."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, read as
    unsigned values, or 0 when the first ``n`` bytes agree.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_writable(dest)
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: WritableBuffer, dest: int, src: int, n: int) -> WritableBuffer:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _check_writable(buf)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for offset in (dest, src):
        if offset < 0 or offset + n > len(buf):
            raise ValueError(
                f"region at offset {offset} of {n} bytes lies outside "
                f"buffer of length {len(buf)}"
            )
    if dest == src or n == 0:
        return buf
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb`` elements of ``size`` bytes each.

    A zero count or size gives an empty buffer. A total that does not fit
    a machine size raises ``OverflowError``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > sys.maxsize:
        raise OverflowError(f"allocation of {nmemb} x {size} bytes is too large")
    return bytearray(total)


def realloc(buf: Optional[WritableBuffer], new_size: int) -> Optional[WritableBuffer]:
    """Resize a buffer, keeping its leading contents.

    With ``new_size`` 0 the buffer is released and ``None`` is returned.
    With no buffer a fresh zeroed one is returned. With an unchanged size
    the same buffer is returned; otherwise a new buffer holds the old bytes
    that fit, with any new bytes zeroed.
    """
    if new_size < 0:
        raise ValueError(f"size must not be negative, got {new_size}")
    if new_size == 0:
        return None
    if buf is None:
        return calloc(new_size, 1)
    if new_size == len(buf):
        return buf
    resized = calloc(new_size, 1)
    keep = min(len(buf), new_size)
    resized[:keep] = bytes(buf[:keep])
    return resized