"""Character streams driven by user-supplied device callbacks."""

from __future__ import annotations

from contextlib import contextmanager
from itertools import takewhile
from typing import Callable, Iterable, Iterator, Optional

from .printf import _as_byte, _as_bytes, iter_formatted

PutC = Callable[[int], int]
GetC = Callable[[], Optional[int]]
Hook = Callable[[], None]


class StreamError(Exception):
    """Raised when a stream cannot take more output or cannot do an operation."""

    def __init__(self, message: str, written: int = 0):
        super().__init__(message)
        self.written = written


class Stream:
    """A stream writing through ``putc`` and reading through ``getc``.

    ``putc(byte)`` returns a negative number when the device can take no
    more. ``getc()`` returns a byte, or None or a negative number at end of
    input. ``pre_output`` and ``post_output`` run around every output
    operation; ``post_output`` runs even when the output fails.
    """

    long_bits = 64

    def __init__(
        self,
        putc: PutC | None = None,
        getc: GetC | None = None,
        pre_output: Hook | None = None,
        post_output: Hook | None = None,
    ):
        self._write = putc
        self._read = getc
        self.pre_output = pre_output
        self.post_output = post_output
        self._pushed_back: int | None = None

    @contextmanager
    def _output(self) -> Iterator[None]:
        if self.pre_output:
            self.pre_output()
        try:
            yield
        finally:
            if self.post_output:
                self.post_output()

    def _send(self, byte: int) -> bool:
        if self._write is None:
            raise StreamError("stream is not writable")
        return self._write(byte) >= 0

    def _emit(self, byte: int, written: int) -> None:
        if not self._send(byte):
            raise StreamError("output failed", written)

    def _put_all(self, data: Iterable[int]) -> int:
        count = 0
        for byte in data:
            self._emit(byte, count)
            count += 1
        return count

    def fputc(self, char) -> int:
        """Write one character; returns its byte value."""
        value = _as_byte(char)
        with self._output():
            self._emit(value, 0)
        return value

    def fputs(self, text) -> int:
        """Write ``text`` without a newline; returns the number of bytes written."""
        data = _as_bytes(text)
        with self._output():
            return self._put_all(data)

    def puts(self, text) -> int:
        """Write ``text`` and a newline; returns the number of bytes of ``text``."""
        data = _as_bytes(text)
        with self._output():
            count = self._put_all(data)
            self._emit(ord("\n"), count)
            return count

    def fwrite(self, data, size: int, count: int) -> int:
        """Write ``count`` items of ``size`` bytes; returns the whole items written.

        A device failure ends the write early and shows in a short count.
        """
        if size < 0 or count < 0:
            raise ValueError("size and count must not be negative")
        total = size * count
        payload = b"" if total == 0 else bytes(memoryview(data)[:total])
        if len(payload) < total:
            raise ValueError(f"data holds {len(payload)} bytes, {total} needed")
        written = 0
        with self._output():
            for byte in payload:
                if not self._send(byte):
                    break
                written += 1
        return written // size if size > 0 else 0

    def fread(self, size: int, count: int) -> bytes:
        """Read up to ``count`` items of ``size`` bytes.

        Stops at end of input, so the result may end in a partial item.
        """
        if size < 0 or count < 0:
            raise ValueError("size and count must not be negative")
        reads = (self.getc() for _ in range(size * count))
        return bytes(takewhile(lambda byte: byte is not None, reads))

    def getc(self) -> int | None:
        """Read one byte, or None at end of input."""
        if self._pushed_back is not None:
            value, self._pushed_back = self._pushed_back, None
            return value
        if self._read is None:
            raise StreamError("stream is not readable")
        value = self._read()
        return None if value is None or value < 0 else value

    def ungetc(self, char) -> int:
        """Push one byte back to be read next; only one may wait at a time."""
        if self._pushed_back is not None:
            raise StreamError("a pushed-back byte is already waiting")
        self._pushed_back = _as_byte(char)
        return self._pushed_back

    def fgets(self, size: int) -> bytes:
        """Read a line of at most ``size - 1`` bytes, keeping its newline."""
        line = bytearray()
        for _ in range(size - 1):
            value = self.getc()
            if value is None:
                break
            line.append(value)
            if value == ord("\n"):
                break
        return bytes(line)

    def printf(self, fmt, *args) -> int:
        """Write formatted output; returns the number of bytes written."""
        with self._output():
            return self._put_all(iter_formatted(fmt, args, self.long_bits))