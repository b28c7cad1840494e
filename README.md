# fslibc

Routines in the style of a small freestanding C library, written as plain
Python. The package does not depend on anything outside the standard library.

## Modules

### `fslibc.memory`

These functions work on `bytearray` buffers. Offsets take the place of
addresses, and each function returns the start offset that it wrote to.

- `memset(buffer, value, count, start=0)` fills `count` bytes with the lowest
  byte of `value`.
- `memset_l(buffer, value, count, start=0, word_size=8)` fills bytes with a
  repeated little-endian word. The pattern stays aligned to word boundaries of
  the buffer.
- `memcpy(dest, dest_start, src, src_start, count)` copies bytes from one
  buffer to another.
- `memmove(buffer, dest_start, src_start, count)` copies bytes within one
  buffer. The regions may overlap.
- `memcmp(first, second, count)` compares bytes as unsigned values and returns
  `-1`, `0` or `1`.

A range that falls outside a buffer raises `IndexError`.

### `fslibc.strings`

These functions work on NUL-terminated byte strings. A `str` argument is taken
as Latin-1. A function that writes needs a `bytearray` destination. Where C
returns a pointer, these functions return an offset, or `None` when nothing is
found.

- `strlen`, `strcpy`, `strcpy_e`, `strncpy`, `strncpy_e`, `strcmp`,
  `strncmp`, `strchr`, `strstr`, `strpbrk` and `strspn`.
- `strcpy_e` returns the offset of the terminator that it wrote.
- `strncpy` writes a terminator only when one fits, and it never pads.
- `Tokenizer(buffer, delimiters)` splits a mutable buffer in place, in the way
  `strtok_r` does. Call `next_token()` to get the next token, optionally with
  other delimiters. `next_token()` returns a `Token(offset, text)`, or `None`
  when no tokens are left. Iterating over a `Tokenizer` yields its tokens.
- `tokenize(buffer, delimiters)` yields the tokens directly.

### `fslibc.search`

- `bsearch_index(key, items, compare=None)` returns the index of a match in a
  sorted sequence. When there is no match, it returns `~insertion_point`.
  `compare(key, item)` gives a negative, zero or positive result. When no
  `compare` is given, the natural ordering is used.
- `bsearch(key, items, compare=None)` returns the matching item, or `None`.

### `fslibc.printf`

A minimal formatter. It handles `%s %c %% %d %i %u %x %X %p` and the `l` and
`ll` length modifiers. Plain ints are 32 bits wide, `long` is 32 or 64 bits
wide, and `long long` is 64 bits wide. An unknown conversion prints nothing
and takes no argument.

- `format_string(fmt, *args)` returns a `str` for a `str` format and `bytes`
  otherwise.
- `iter_formatted(fmt, args, long_bits=64)` yields the output bytes one at a
  time. It takes each argument only when the output reaches it.

### `fslibc.stream`

`Stream(putc, getc, pre_output, post_output)` is built from device
callables:

- `putc(byte)` returns a negative number when the device can take no more
  output.
- `getc()` returns a byte, or returns `None` or a negative number at end of
  input.
- The optional `pre_output` and `post_output` hooks run around each output
  operation. `post_output` runs even when the output fails.

A stream has these methods:

- `fputc`, `fputs`, `puts` and `printf`. Each returns the number of bytes
  written, except `fputc`, which returns the byte value. When the device
  fails, these methods raise `StreamError`. Its `written` attribute holds how
  many bytes were written before the failure.
- `fwrite(data, size, count)` returns the number of whole items written. When
  the device fails, it stops and returns a short count.
- `fread(size, count)` returns the bytes it read and stops at end of input.
- `getc()` returns the next byte, or `None` at end of input.
- `ungetc(char)` pushes back one byte. Pushing back a second byte before the
  first has been read raises `StreamError`.
- `fgets(size)` reads a line of at most `size - 1` bytes and keeps its
  newline.

### `fslibc.console`

`Console(stdin, stdout)` holds a standard input stream and a standard output
stream. It provides `putchar`, `getchar`, `puts` and `printf`. Using a stream
that was not set raises `StreamError`.

## Example

```python
from fslibc.printf import format_string
from fslibc.strings import tokenize

format_string("The answer is %d, or %x in hex", 42, 42)
# 'The answer is 42, or 2a in hex'

[token.text for token in tokenize(bytearray(b"/this/is//file/path/"), b"/")]
# [b'this', b'is', b'file', b'path']
```

The following stream writes into a list:

```python
from fslibc.stream import Stream

out = []

def putc(c):
    out.append(chr(c))
    return c

stream = Stream(putc)
stream.printf("%s from %s!\n", "Hello", "printf")
# 19
"".join(out)
# 'Hello from printf!\n'
```

## What it does not do

There is no assertion helper that can be switched off. Use Python's own
`assert`. The formatter has no field widths, precision, padding flags or
floating-point conversions.

## Running the tests

```
pip install -e .[test]
pytest
```