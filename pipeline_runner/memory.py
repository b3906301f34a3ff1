"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} exceeds buffer size {len(buffer)}"
            )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value``'s low byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == SIZE_MAX or size == SIZE_MAX or count * size > SIZE_MAX:
        raise MemoryError("requested allocation is too large")
    return bytearray(count * size)


def memchr(data: bytes, value: int, length: int) -> Optional[int]:
    """Return the index of ``value``'s low byte in the first ``length`` bytes."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, length: int) -> int:
    """Compare ``length`` bytes; return the difference at the first mismatch."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(
    dest: Optional[bytearray], src: Optional[bytes], length: int
) -> Optional[bytearray]:
    """Copy ``length`` bytes of ``src`` into the start of ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src are required")
    _check_length(length, dest, src)
    dest[:length] = src[:length]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(dest, src) + length > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer