import struct

import pytest

from fslibc.stream import Stream, StreamError

WORDS = (0x6BA09E07, 0x5F767B19, 0xB4A33CDD, 0x17A64C09, 0x92487695, 0x853092EB)
DATA = struct.pack("<6I", *WORDS)

PRE = ("pre", 0)
POST = ("post", 0)


def put(c):
    return ("putc", c if isinstance(c, int) else ord(c))


class Device:
    def __init__(self, text=b"", eof_after=None):
        self.log = []
        self.output = bytearray()
        self.eof_after = eof_after
        self._input = iter(text)
        self.getc_calls = 0

    def putc(self, c):
        self.log.append(("putc", c))
        if self.eof_after == 0:
            return -1
        if self.eof_after is not None:
            self.eof_after -= 1
        self.output.append(c)
        return c

    def getc(self):
        self.getc_calls += 1
        return next(self._input, -1)

    def pre(self):
        self.log.append(PRE)

    def post(self):
        self.log.append(POST)


# fgets

def test_fgets_to_eof():
    device = Device(b"Hello")
    stream = Stream(device.putc, device.getc)
    assert stream.fgets(10) == b"Hello"


def test_fgets_newline():
    device = Device(b"Hello\nWorld")
    stream = Stream(device.putc, device.getc)
    assert stream.fgets(20) == b"Hello\n"


def test_fgets_buffer_size():
    device = Device(b"Hello_World")
    stream = Stream(device.putc, device.getc)
    assert stream.fgets(6) == b"Hello"


def test_fgets_crlf():
    device = Device(b"Hello\r\nWorld")
    stream = Stream(device.putc, device.getc)
    assert stream.fgets(20) == b"Hello\r\n"


@pytest.mark.parametrize("text", [b"Hello\nWorld", b"Hello\r\nWorld"])
def test_fgets_after_line(text):
    device = Device(text)
    stream = Stream(device.putc, device.getc)
    stream.fgets(20)
    assert stream.fgets(20) == b"World"


# fread

def test_fread_basic():
    device = Device(DATA)
    stream = Stream(device.putc, device.getc)
    result = stream.fread(4, 6)
    assert len(result) // 4 == 6
    assert struct.unpack("<6I", result) == WORDS


def test_fread_eof():
    words = WORDS[:5] + (0x890092EB,)
    text = struct.pack("<5I", *words[:5]) + b"\xeb\x92"
    device = Device(text)
    stream = Stream(device.putc, device.getc)
    result = stream.fread(4, 6)
    assert len(result) // 4 == 5
    assert struct.unpack("<5I", result[:20]) == words[:5]
    assert int.from_bytes(result[20:], "little") == words[5] & 0x0000FFFF


@pytest.mark.parametrize("size, count", [(4, 0), (0, 6)])
def test_fread_zero(size, count):
    device = Device(DATA)
    stream = Stream(device.putc, device.getc)
    assert stream.fread(size, count) == b""
    assert device.getc_calls == 0


# fwrite

def test_fwrite_basic():
    device = Device()
    stream = Stream(device.putc, device.getc)
    assert stream.fwrite(DATA, 4, 6) == 6
    assert device.log == [put(b) for b in DATA]


def test_fwrite_pre_post():
    device = Device()
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    assert stream.fwrite(DATA, 4, 6) == 6
    assert device.log == [PRE] + [put(b) for b in DATA] + [POST]


@pytest.mark.parametrize("size, count", [(0, 6), (4, 0)])
def test_fwrite_zero(size, count):
    device = Device()
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    assert stream.fwrite(None, size, count) == 0
    assert device.log == [PRE, POST]


def test_fwrite_eof():
    device = Device(eof_after=18)
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    assert stream.fwrite(DATA, 4, 6) == 18 // 4
    assert device.log == [PRE] + [put(b) for b in DATA[:19]] + [POST]


def test_fwrite_short_data():
    device = Device()
    stream = Stream(device.putc, device.getc)
    with pytest.raises(ValueError):
        stream.fwrite(b"abc", 4, 1)


# getc / ungetc

def test_getc_basic():
    device = Device(b"Hello")
    stream = Stream(device.putc, device.getc)
    assert [stream.getc() for _ in range(6)] == [ord(c) for c in "Hello"] + [None]


def test_ungetc():
    device = Device(b"123")
    stream = Stream(device.putc, device.getc)
    assert stream.getc() == ord("1")
    assert stream.ungetc("a") == ord("a")
    with pytest.raises(StreamError):
        stream.ungetc("b")
    assert stream.getc() == ord("a")
    assert stream.getc() == ord("2")


def test_getc_not_readable():
    with pytest.raises(StreamError):
        Stream(putc=lambda c: c).getc()


# fputc

def test_fputc_basic():
    device = Device()
    stream = Stream(device.putc, device.getc)
    assert stream.fputc("A") == ord("A")
    assert device.log == [put("A")]
    assert device.output == b"A"


def test_fputc_pre():
    device = Device()
    stream = Stream(device.putc, pre_output=device.pre)
    assert stream.fputc("C") == ord("C")
    assert device.log == [PRE, put("C")]
    assert device.output == b"C"


def test_fputc_post():
    device = Device()
    stream = Stream(device.putc, post_output=device.post)
    assert stream.fputc("D") == ord("D")
    assert device.log == [put("D"), POST]


def test_fputc_pre_post():
    device = Device()
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    assert stream.fputc("E") == ord("E")
    assert device.log == [PRE, put("E"), POST]
    assert device.output == b"E"


def test_fputc_eof():
    device = Device(eof_after=0)
    stream = Stream(device.putc, device.getc)
    with pytest.raises(StreamError):
        stream.fputc("A")
    assert device.log == [put("A")]
    assert device.output == b""


def test_fputc_eof_pre_post():
    device = Device(eof_after=0)
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    with pytest.raises(StreamError):
        stream.fputc("E")
    assert device.log == [PRE, put("E"), POST]
    assert device.output == b""


# fputs / puts

def test_fputs_basic():
    device = Device()
    stream = Stream(device.putc, device.getc)
    assert stream.fputs("ABCD") == 4
    assert device.log == [put(c) for c in "ABCD"]
    assert device.output == b"ABCD"


def test_puts_basic():
    device = Device()
    stream = Stream(device.putc, device.getc)
    assert stream.puts("ABCD") >= 0
    assert device.log == [put(c) for c in "ABCD\n"]
    assert device.output == b"ABCD\n"


def test_fputs_pre_post():
    device = Device()
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    assert stream.fputs("ABCD") == 4
    assert device.log == [PRE] + [put(c) for c in "ABCD"] + [POST]


def test_puts_pre_post():
    device = Device()
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    assert stream.puts("ABCD") == 4
    assert device.log == [PRE] + [put(c) for c in "ABCD\n"] + [POST]
    assert device.output == b"ABCD\n"


def test_fputs_eof():
    device = Device(eof_after=2)
    stream = Stream(device.putc, device.getc)
    with pytest.raises(StreamError) as info:
        stream.fputs("ABCD")
    assert info.value.written == 2
    assert device.log == [put(c) for c in "ABC"]
    assert device.output == b"AB"


def test_fputs_eof_pre_post():
    device = Device(eof_after=2)
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    with pytest.raises(StreamError):
        stream.fputs("ABCD")
    assert device.log == [PRE] + [put(c) for c in "ABC"] + [POST]
    assert device.output == b"AB"


def test_puts_eof_early():
    device = Device(eof_after=2)
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    with pytest.raises(StreamError):
        stream.puts("ABCD")
    assert device.log == [PRE] + [put(c) for c in "ABC"] + [POST]
    assert device.output == b"AB"


def test_puts_eof_last():
    device = Device(eof_after=4)
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    with pytest.raises(StreamError) as info:
        stream.puts("ABCD")
    assert info.value.written == 4
    assert device.log == [PRE] + [put(c) for c in "ABCD\n"] + [POST]
    assert device.output == b"ABCD"


def test_not_writable():
    with pytest.raises(StreamError):
        Stream(getc=lambda: -1).fputs("x")


# printf

def test_printf_basic():
    device = Device()
    stream = Stream(device.putc, device.getc)
    assert stream.printf("Hello, World!\n") == 14
    assert device.output == b"Hello, World!\n"


def test_printf_pre_post_multi():
    device = Device()
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    count = stream.printf("Testing %s%% of all possibilities%c", "a few ", "!")
    expected = "Testing a few % of all possibilities!"
    assert count == len(expected)
    assert device.log == [PRE] + [put(c) for c in expected] + [POST]
    assert device.output == expected.encode()


def test_printf_pre_post_multi_eof():
    device = Device(eof_after=20)
    stream = Stream(device.putc, device.getc, device.pre, device.post)
    with pytest.raises(StreamError) as info:
        stream.printf("Testing %s%% of all possibilities%c", "a few ", "!")
    expected = "Testing a few % of a"
    assert info.value.written == 20
    assert device.log == [PRE] + [put(c) for c in expected] + [put("l"), POST]
    assert device.output == expected.encode()


@pytest.mark.parametrize(
    "eof_after, fmt, arg, expected",
    [
        (10, "Will stop %d", -1223, b"Will stop "),
        (12, "Will stop %d", -1223, b"Will stop -1"),
        (10, "Will stop %lld", -1223, b"Will stop "),
        (12, "Will stop %lld", -1223, b"Will stop -1"),
        (12, "Will stop %s", "1223", b"Will stop 12"),
        (10, "Will stop %c", "a", b"Will stop "),
        (12, "Will stop %u", 1223, b"Will stop 12"),
        (12, "Will stop %x", 0xA223, b"Will stop a2"),
        (12, "Will stop %X", 0xA223, b"Will stop A2"),
        (12, "A pointer: %p!", 0x032D47F2, b"A pointer: 0"),
        (15, "A pointer: %p!", 0x032D47F2, b"A pointer: 0x32"),
    ],
)
def test_printf_eof(eof_after, fmt, arg, expected):
    device = Device(eof_after=eof_after)
    stream = Stream(device.putc, device.getc)
    with pytest.raises(StreamError):
        stream.printf(fmt, arg)
    assert device.output == expected


def test_printf_percent_eof():
    device = Device(eof_after=10)
    stream = Stream(device.putc, device.getc)
    with pytest.raises(StreamError):
        stream.printf("Will stop %%")
    assert device.output == b"Will stop "


def test_printf_invalid_specifier():
    device = Device()
    stream = Stream(device.putc, device.getc)
    assert stream.printf("An invalid %k specifier") == 21
    assert device.output == b"An invalid  specifier"


def test_printf_long_bits():
    device = Device()
    stream = Stream(device.putc, device.getc)
    stream.long_bits = 32
    assert stream.printf("%lu", -1) == 10
    assert device.output == b"4294967295"