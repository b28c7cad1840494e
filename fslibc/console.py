"""Standard input and output streams and the operations that use them."""

from __future__ import annotations

from .stream import Stream, StreamError


class Console:
    """Holds the standard input and output streams."""

    def __init__(self, stdin: Stream | None = None, stdout: Stream | None = None):
        self.stdin = stdin
        self.stdout = stdout

    def _out(self) -> Stream:
        if self.stdout is None:
            raise StreamError("no standard output stream")
        return self.stdout

    def _in(self) -> Stream:
        if self.stdin is None:
            raise StreamError("no standard input stream")
        return self.stdin

    def putchar(self, char) -> int:
        """Write one character to standard output."""
        return self._out().fputc(char)

    def getchar(self) -> int | None:
        """Read one byte from standard input, or None at end of input."""
        return self._in().getc()

    def puts(self, text) -> int:
        """Write ``text`` and a newline to standard output."""
        return self._out().puts(text)

    def printf(self, fmt, *args) -> int:
        """Write formatted output to standard output."""
        return self._out().printf(fmt, *args)