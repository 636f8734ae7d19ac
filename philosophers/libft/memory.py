"""Byte-buffer helpers working on ``bytearray``-like objects.

Reads accept any bytes-like object; writes need a mutable buffer such as a
``bytearray`` or a writable ``memoryview``. Lengths beyond the end of a buffer
raise ``IndexError`` instead of reading or writing past it.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_range(buffer: BytesLike, start: int, length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start < 0 or start + length > len(buffer):
        raise IndexError(
            f"range [{start}, {start + length}) outside buffer of size {len(buffer)}"
        )


def memset(buffer: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Fill the first ``length`` bytes with the low byte of ``value``."""
    _check_range(buffer, 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: WritableBuffer, length: int) -> None:
    """Zero the first ``length`` bytes."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``length``, or None."""
    _check_range(data, 0, length)
    index = bytes(memoryview(data)[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, length: int) -> int:
    """Difference of the first unequal bytes within ``length``, or 0."""
    _check_range(first, 0, length)
    _check_range(second, 0, length)
    for a, b in zip(memoryview(first)[:length], memoryview(second)[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(
    dst: Optional[WritableBuffer], src: Optional[BytesLike], length: int
) -> Optional[WritableBuffer]:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_range(src, 0, length)
    _check_range(dst, 0, length)
    dst[:length] = bytes(memoryview(src)[:length])
    return dst


def memmove(
    buffer: WritableBuffer, dst: int, src: int, length: int
) -> WritableBuffer:
    """Move ``length`` bytes within ``buffer`` from offset ``src`` to ``dst``.

    Overlapping ranges are handled correctly.
    """
    _check_range(buffer, src, length)
    _check_range(buffer, dst, length)
    if dst != src:
        buffer[dst : dst + length] = bytes(memoryview(buffer)[src : src + length])
    return buffer