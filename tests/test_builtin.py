import io
import os
import struct

import pytest

from barert.builtin import (
    MAX_ALLOC,
    MAX_BUF,
    assertion_message,
    copy_into,
    format_hex,
    format_int,
    format_message,
    fprint,
    grow_buffer,
    make_buffer,
    new_capacity,
)


def test_builtin_program_output():
    s1 = make_buffer(1, 16, 16)
    s2 = make_buffer(4, 8, 8)
    struct.pack_into("<ii", s2, 0, 5, 6)

    s2 = grow_buffer(s2, 8, 16, 4)
    assert len(s2) == 64

    n = copy_into(s1, b"Hello world!\n")
    assert n == 13

    s1 = grow_buffer(s1, n, 64, 1)
    assert len(s1) == 64
    n += copy_into(s1[n:], b"Hello everyone!\n")
    first = struct.unpack_from("<i", s2, 0)[0]
    n += copy_into(s1[n:], format_int(first, len(s1) - n).encode())
    n += copy_into(s1[n:], b"\n")

    assert bytes(s1[:n]) == b"Hello world!\nHello everyone!\n5\n"


def test_grow_buffer_keeps_items():
    data = make_buffer(4, 2, 2)
    struct.pack_into("<ii", data, 0, 5, 6)
    grown = grow_buffer(data, 2, 3, 4)
    assert struct.unpack_from("<ii", grown, 0) == (5, 6)
    assert len(grown) == 4 * 4


def test_grow_buffer_rejects_huge_size():
    with pytest.raises(ValueError, match="len out of range"):
        grow_buffer(bytearray(4), 0, MAX_ALLOC + 1, 1)


def test_make_buffer_zeroed():
    buf = make_buffer(2, 3, 5)
    assert bytes(buf) == bytes(10)


@pytest.mark.parametrize(
    "length, cap, message",
    [
        (MAX_ALLOC + 1, MAX_ALLOC + 1, "len out of range"),
        (1, MAX_ALLOC + 1, "cap out of range"),
    ],
)
def test_make_buffer_limits(length, cap, message):
    with pytest.raises(ValueError, match=message):
        make_buffer(1, length, cap)


@pytest.mark.parametrize(
    "new_len, old_cap, expected",
    [
        (16, 8, 16),
        (64, 16, 64),
        (5, 0, 5),
        (300, 256, 512),
    ],
)
def test_new_capacity_values(new_len, old_cap, expected):
    assert new_capacity(new_len, old_cap) == expected


@pytest.mark.parametrize(
    "value, limit, expected",
    [
        (0, None, "0"),
        (158, None, "158"),
        (100, None, "100"),
        (-42, None, "-42"),
        (12345, 3, "123"),
        (-7, 1, "-"),
        (5, 0, ""),
    ],
)
def test_format_int(value, limit, expected):
    assert format_int(value, limit) == expected


@pytest.mark.parametrize(
    "value, limit, expected",
    [
        (0, None, "0x"),
        (255, None, "0xff"),
        (0xDEADBEEF, None, "0xdeadbeef"),
        (0x1234, 1, "0"),
        (0x1234, 4, "0x12"),
        (-1, None, "0xffffffffffffffff"),
    ],
)
def test_format_hex(value, limit, expected):
    assert format_hex(value, limit) == expected


def test_format_message_conversions():
    text = format_message("%s: %d %c %p 100%%", "code", -3, "x", 16)
    assert text == "code: -3 x 0x10 100%"


def test_format_message_char_from_int():
    assert format_message("[%c]", 65) == "[A]"


def test_format_message_unknown_conversion_dropped():
    assert format_message("a%qb%d", 7) == "ab7"


def test_format_message_string_stops_at_nul():
    assert format_message("<%s>", "abc\0def") == "<abc>"


def test_format_message_none_string():
    assert format_message("<%s>", None) == "<>"


def test_format_message_bounded():
    text = format_message("%s%s", "a" * 1000, "b" * 100)
    assert len(text) == MAX_BUF
    assert text.endswith("b" * 24)


def test_format_message_missing_argument():
    with pytest.raises(ValueError):
        format_message("%d")


def test_fprint_to_stream():
    out = io.StringIO()
    count = fprint(out, "sys_read failed: %s\n", "try again")
    assert out.getvalue() == "sys_read failed: try again\n"
    assert count == len("sys_read failed: try again\n")


def test_fprint_to_fd():
    read_end, write_end = os.pipe()
    try:
        count = fprint(write_end, "n=%d\n", 12)
        data = os.read(read_end, 100)
    finally:
        os.close(read_end)
        os.close(write_end)
    assert data == b"n=12\n"
    assert count == 5


def test_assertion_message():
    assert assertion_message("mem != nil", "builtin.c", 42) == (
        "builtin.c:42: Assertion `mem != nil' failed.\n"
    )


def test_copy_into_limits_to_shorter():
    dst = bytearray(4)
    assert copy_into(dst, b"abcdef") == 4
    assert dst == bytearray(b"abcd")
    dst2 = bytearray(b"xxxxxx")
    assert copy_into(dst2, b"ab") == 2
    assert dst2 == bytearray(b"abxxxx")