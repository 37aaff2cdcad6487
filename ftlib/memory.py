"""Byte-buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

import operator
from collections.abc import Sequence


def _check_count(count: int, *lengths: int) -> int:
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for length in lengths:
        if count > length:
            raise ValueError(f"count {count} exceeds buffer length {length}")
    return count


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    count = _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, count)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes."""
    nmemb = operator.index(nmemb)
    size = operator.index(size)
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` to the start of ``dest``."""
    count = _check_count(count, len(dest), len(src))
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    count = _check_count(count)
    for offset in (dest_offset, src_offset):
        if offset < 0 or offset + count > len(buffer):
            raise ValueError(
                f"region at {offset} of {count} bytes exceeds buffer length {len(buffer)}"
            )
    chunk = bytes(buffer[src_offset:src_offset + count])
    buffer[dest_offset:dest_offset + count] = chunk
    return buffer


def memchr(data: Sequence[int], value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` (low 8 bits)
    among the first ``count`` bytes, or None."""
    count = _check_count(count, len(data))
    target = value & 0xFF
    for index, byte in enumerate(data[:count]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Compare the first ``count`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    count = _check_count(count, len(first), len(second))
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0