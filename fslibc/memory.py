"""Fill, copy, move and compare operations on byte buffers.

Offsets into a buffer play the part of addresses: the first byte of a buffer
is taken to sit on a word boundary.
"""

from __future__ import annotations


def _check_range(buffer, start: int, count: int, what: str) -> None:
    if start < 0 or count < 0 or start + count > len(buffer):
        raise IndexError(
            f"{what} range [{start}, {start + count}) lies outside a buffer of {len(buffer)} bytes"
        )


def memset(buffer, value: int, count: int, start: int = 0) -> int:
    """Set ``count`` bytes from ``start`` to the lowest byte of ``value``.

    Returns ``start``.
    """
    _check_range(buffer, start, count, "fill")
    buffer[start:start + count] = bytes([value & 0xFF]) * count
    return start


def memset_l(buffer, value: int, count: int, start: int = 0, word_size: int = 8) -> int:
    """Fill ``count`` bytes from ``start`` with a repeated little-endian word.

    Each byte receives the byte of ``value`` that matches its position within
    its word, so the pattern stays aligned to word boundaries whatever
    ``start`` is. Returns ``start``.
    """
    if word_size <= 0:
        raise ValueError("word_size must be positive")
    _check_range(buffer, start, count, "fill")
    pattern = (value & ((1 << (8 * word_size)) - 1)).to_bytes(word_size, "little")
    phase = start % word_size
    repeated = pattern * (count // word_size + 2)
    buffer[start:start + count] = repeated[phase:phase + count]
    return start


def memcpy(dest, dest_start: int, src, src_start: int, count: int) -> int:
    """Copy ``count`` bytes from ``src`` into ``dest``. Returns ``dest_start``."""
    _check_range(dest, dest_start, count, "destination")
    _check_range(src, src_start, count, "source")
    dest[dest_start:dest_start + count] = bytes(memoryview(src)[src_start:src_start + count])
    return dest_start


def memmove(buffer, dest_start: int, src_start: int, count: int) -> int:
    """Copy ``count`` bytes within ``buffer``; the regions may overlap.

    Returns ``dest_start``.
    """
    _check_range(buffer, dest_start, count, "destination")
    _check_range(buffer, src_start, count, "source")
    buffer[dest_start:dest_start + count] = bytes(buffer[src_start:src_start + count])
    return dest_start


def memcmp(first, second, count: int) -> int:
    """Compare the first ``count`` bytes as unsigned values: -1, 0 or 1."""
    _check_range(first, 0, count, "first")
    _check_range(second, 0, count, "second")
    left = bytes(memoryview(first)[:count])
    right = bytes(memoryview(second)[:count])
    return (left > right) - (left < right)