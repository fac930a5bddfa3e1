"""Byte-buffer helpers working on bytearray and memoryview objects."""

from __future__ import annotations

from typing import Optional

_CALLOC_LIMIT = 2147483647


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer, value: int, count: int):
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (mod 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def memcpy(dest, src, count: int):
    """Copy ``count`` bytes from ``src`` into the start of ``dest``.

    When both are None, None is returned.
    """
    if dest is None and src is None:
        return None
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(dest, src, count: int):
    """Copy ``count`` bytes like memcpy, correct even when the areas overlap."""
    if dest is None and src is None:
        return None
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memchr(data, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first
    ``count`` bytes, or None when there is none."""
    _check_count(count, data)
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(bytes(data[:count])) if byte == target),
        None,
    )


def memcmp(first, second, count: int) -> int:
    """Compare the first ``count`` bytes; return the difference of the first
    differing pair, or 0 when they match."""
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def calloc(nitems: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nitems * size`` bytes.

    A zero count or size gives a one-byte buffer.  Requests of 2147483647
    bytes or more (in either factor or the product) raise MemoryError.
    """
    if nitems < 0 or size < 0:
        raise ValueError("nitems and size must not be negative")
    if nitems == 0 or size == 0:
        return bytearray(1)
    if (
        nitems >= _CALLOC_LIMIT
        or size >= _CALLOC_LIMIT
        or nitems * size >= _CALLOC_LIMIT
    ):
        raise MemoryError(f"cannot allocate {nitems} x {size} bytes")
    return bytearray(nitems * size)