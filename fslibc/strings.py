"""Operations on NUL-terminated byte strings.

Strings are bytes-like objects whose text ends at the first NUL byte, or at
the end of the object when there is none. ``str`` arguments are taken as
Latin-1. Functions that write need a ``bytearray`` destination.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple


def _as_bytes(data) -> bytes | bytearray | memoryview:
    if isinstance(data, str):
        return data.encode("latin-1")
    return data


def _cstr(data, start: int = 0) -> bytes:
    view = bytes(memoryview(_as_bytes(data))[start:])
    end = view.find(0)
    return view if end < 0 else view[:end]


def _byte(char) -> int:
    if isinstance(char, int):
        value = char
    else:
        raw = _as_bytes(char)
        if len(raw) != 1:
            raise ValueError("expected a single byte")
        value = raw[0]
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def _write(dest, data: bytes) -> None:
    if len(data) > len(dest):
        raise IndexError(f"destination holds {len(dest)} bytes, {len(data)} needed")
    dest[:len(data)] = data


def strlen(buffer, start: int = 0) -> int:
    """Number of bytes from ``start`` up to the terminating NUL."""
    return len(_cstr(buffer, start))


def strcpy(dest, src):
    """Copy ``src`` and its terminator into ``dest``; returns ``dest``."""
    strcpy_e(dest, src)
    return dest


def strcpy_e(dest, src) -> int:
    """Copy ``src`` and its terminator into ``dest``; returns the terminator's offset."""
    text = _cstr(src)
    _write(dest, text + b"\0")
    return len(text)


def _strncpy(dest, src, length: int) -> bytes:
    # Copies at most length bytes; the terminator is written only if it fits,
    # and nothing is padded. At least one byte is always written.
    chunk = (_cstr(src) + b"\0")[:max(length, 1)]
    _write(dest, chunk)
    return chunk


def strncpy(dest, src, length: int):
    """Copy at most ``length`` bytes of ``src`` into ``dest``; returns ``dest``."""
    _strncpy(dest, src, length)
    return dest


def strncpy_e(dest, src, length: int) -> int:
    """Like :func:`strncpy`, returning the offset of the written terminator.

    When the terminator did not fit, returns the offset just past the last
    byte written.
    """
    chunk = _strncpy(dest, src, length)
    last = len(chunk) - 1
    return last + 1 if chunk[-1] else last


def strcmp(first, second) -> int:
    """Difference of the first differing unsigned bytes, or 0 when equal."""
    left = _cstr(first) + b"\0"
    right = _cstr(second) + b"\0"
    for a, b in zip(left, right):
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(first, second, count: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``count`` bytes.

    The first byte is always compared.
    """
    limit = max(count, 1)
    left = (_cstr(first) + b"\0")[:limit]
    right = (_cstr(second) + b"\0")[:limit]
    for a, b in zip(left, right):
        if a != b or a == 0:
            return a - b
    return 0


def strchr(text, char) -> int | None:
    """Offset of the first ``char`` in ``text``, or None.

    The terminating NUL itself is never found.
    """
    value = _byte(char)
    if value == 0:
        return None
    found = _cstr(text).find(value)
    return None if found < 0 else found


def strstr(text, pattern) -> int | None:
    """Offset of the first occurrence of ``pattern``; None if absent or empty."""
    needle = _cstr(pattern)
    if not needle:
        return None
    found = _cstr(text).find(needle)
    return None if found < 0 else found


def strpbrk(text, delimiters) -> int | None:
    """Offset of the first byte of ``text`` found in ``delimiters``, or None."""
    wanted = set(_cstr(delimiters))
    return next((i for i, b in enumerate(_cstr(text)) if b in wanted), None)


def strspn(text, delimiters) -> int:
    """Length of the leading run of ``text`` made only of ``delimiters`` bytes."""
    wanted = set(_cstr(delimiters))
    body = _cstr(text)
    return next((i for i, b in enumerate(body) if b not in wanted), len(body))


class Token(NamedTuple):
    """A token found in a buffer: its offset and its bytes."""

    offset: int
    text: bytes


class Tokenizer:
    """Splits a mutable buffer into tokens in place.

    Each delimiter that ends a token is overwritten with NUL, as the
    buffer is walked from left to right.
    """

    def __init__(self, buffer, delimiters):
        if not isinstance(buffer, (bytearray, memoryview)):
            raise TypeError("Tokenizer needs a mutable buffer such as bytearray")
        self._buffer = buffer
        self.delimiters = _as_bytes(delimiters)
        self._position: int | None = 0

    def next_token(self, delimiters=None) -> Token | None:
        """Return the next token, or None once the buffer is used up."""
        if self._position is None:
            return None
        delims = self.delimiters if delimiters is None else _as_bytes(delimiters)
        start = self._position + strspn(self._buffer[self._position:], delims)
        rest = _cstr(self._buffer, start)
        end = strpbrk(rest, delims)
        if end is not None:
            self._buffer[start + end] = 0
            self._position = start + end + 1
            return Token(start, rest[:end])
        self._position = None
        return Token(start, rest) if rest else None

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token


def tokenize(buffer, delimiters) -> Iterator[Token]:
    """Yield the tokens of ``buffer``, splitting it in place."""
    yield from Tokenizer(buffer, delimiters)