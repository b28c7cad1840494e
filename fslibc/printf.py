"""A small printf-style formatter.

Supported conversions: ``%s``, ``%c``, ``%%``, ``%d``/``%i``, ``%u``,
``%x``, ``%X`` and ``%p``, with ``l`` and ``ll`` length modifiers.
Plain ints are 32 bits wide, ``long`` is ``long_bits`` wide and
``long long`` is 64 bits wide. Unknown conversions print nothing and
take no argument.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

_INT_BITS = 32
_LONG_LONG_BITS = 64


def _as_bytes(value) -> bytes:
    """Bytes of a string argument, up to its first NUL."""
    if isinstance(value, str):
        raw = value.encode("latin-1")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    else:
        raise TypeError(f"string argument expected, got {type(value).__name__}")
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _as_byte(value) -> int:
    """A single character given as an int or as a one-character string."""
    if isinstance(value, int):
        return value & 0xFF
    if isinstance(value, str):
        raw = value.encode("latin-1")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    else:
        raise TypeError(f"character argument expected, got {type(value).__name__}")
    if len(raw) != 1:
        raise ValueError("expected a single character")
    return raw[0]


def _integer(value) -> int:
    if isinstance(value, int):
        return value
    raise TypeError(f"integer argument expected, got {type(value).__name__}")


def _unsigned(value, bits: int) -> int:
    return _integer(value) & ((1 << bits) - 1)


def _signed(value, bits: int) -> int:
    unsigned = _unsigned(value, bits)
    return unsigned - (1 << bits) if unsigned >> (bits - 1) else unsigned


def _convert(spec: int, longs: int, take: Callable[[], object], long_bits: int) -> bytes:
    if longs >= 2:
        bits = _LONG_LONG_BITS
    elif longs == 1:
        bits = long_bits
    else:
        bits = _INT_BITS

    conversion = chr(spec)
    if conversion == "s":
        return _as_bytes(take())
    if conversion == "c":
        return bytes([_as_byte(take())])
    if conversion == "%":
        return b"%"
    if conversion in "di":
        return str(_signed(take(), bits)).encode("ascii")
    if conversion == "u":
        return str(_unsigned(take(), bits)).encode("ascii")
    if conversion == "x":
        return format(_unsigned(take(), bits), "x").encode("ascii")
    if conversion == "X":
        return format(_unsigned(take(), bits), "X").encode("ascii")
    if conversion == "p":
        pointer = take()
        return b"0x" + format(_unsigned(0 if pointer is None else pointer, long_bits), "x").encode("ascii")
    return b""


def iter_formatted(fmt, args: Iterable, long_bits: int = 64) -> Iterator[int]:
    """Yield the bytes of ``fmt`` formatted with ``args``, one at a time.

    Arguments are taken only as the output reaches them, so a consumer
    that stops early leaves the rest untouched.
    """
    if long_bits not in (32, 64):
        raise ValueError("long_bits must be 32 or 64")
    pending = iter(args)

    def take():
        try:
            return next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    chars = iter(_as_bytes(fmt))
    for char in chars:
        if char != ord("%"):
            yield char
            continue
        longs = 0
        for spec in chars:
            if spec == ord("l"):
                longs += 1
                continue
            yield from _convert(spec, longs, take, long_bits)
            break


def format_string(fmt, *args):
    """Format ``args`` into ``fmt``; returns str for a str format, bytes otherwise."""
    out = bytes(iter_formatted(fmt, args))
    return out.decode("latin-1") if isinstance(fmt, str) else out