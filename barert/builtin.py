"""Number formatting, bounded message formatting and growable buffers."""

from __future__ import annotations

import os
from typing import IO, Any, Union

from barert.arena import allocate

__all__ = [
    "MAX_ALLOC",
    "MAX_BUF",
    "assertion_message",
    "copy_into",
    "format_hex",
    "format_int",
    "format_message",
    "fprint",
    "grow_buffer",
    "make_buffer",
    "new_capacity",
]

MAX_ALLOC = 1 << 31
"""Largest number of bytes a single buffer may take."""

MAX_BUF = 1024
"""Largest number of characters a formatted message may hold."""

_UINT64 = (1 << 64) - 1
_GROWTH_THRESHOLD = 256
_HEX_DIGITS = "0123456789abcdef"

Buffer = Union[bytearray, memoryview]


def _bounded(text: str, limit: int | None) -> str:
    if limit is None:
        return text
    if limit <= 0:
        return ""
    return text[:limit]


def format_int(value: int, limit: int | None = None) -> str:
    """Render a signed decimal integer, keeping at most ``limit`` characters."""
    text = str(value)
    return _bounded(text, limit)


def format_hex(value: int, limit: int | None = None) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits.

    Zero renders as a bare ``0x``; the result keeps at most ``limit``
    characters.
    """
    value &= _UINT64
    digits = []
    while value > 0:
        digits.append(_HEX_DIGITS[value % 16])
        value //= 16
    text = "0x" + "".join(reversed(digits))
    return _bounded(text, limit)


def _char(arg: Any) -> str:
    if isinstance(arg, int):
        return chr(arg)
    if isinstance(arg, str) and len(arg) == 1:
        return arg
    raise TypeError(f"%c expects an int or a single character, got {arg!r}")


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``%c``, ``%s``, ``%d``, ``%p`` and ``%%`` in ``fmt``.

    Unknown conversions are dropped without consuming an argument. The result
    never exceeds MAX_BUF characters; ``%s`` stops at the first NUL.
    """
    out: list[str] = []
    used = 0
    remaining_args = iter(args)

    def next_arg(spec: str) -> Any:
        try:
            return next(remaining_args)
        except StopIteration:
            raise ValueError(f"missing argument for %{spec}") from None

    chars = iter(fmt)
    for ch in chars:
        if used >= MAX_BUF:
            break
        if ch != "%":
            out.append(ch)
            used += 1
            continue
        spec = next(chars, None)
        if spec is None:
            break
        room = MAX_BUF - used
        if spec == "c":
            piece = _char(next_arg(spec))
        elif spec == "s":
            arg = next_arg(spec)
            text = "" if arg is None else str(arg).split("\0", 1)[0]
            piece = text[:room]
        elif spec == "d":
            piece = format_int(int(next_arg(spec)), room)
        elif spec == "p":
            piece = format_hex(int(next_arg(spec)), room)
        elif spec == "%":
            piece = "%"
        else:
            piece = ""
        out.append(piece)
        used += len(piece)
    return "".join(out)


def fprint(stream: Union[int, IO[str]], fmt: str, *args: Any) -> int:
    """Format a message and write it to a file descriptor or text stream.

    Returns the number of characters formatted.
    """
    text = format_message(fmt, *args)
    if isinstance(stream, int):
        os.write(stream, text.encode("utf-8"))
    else:
        stream.write(text)
    return len(text)


def assertion_message(expr: str, file: str, line: int) -> str:
    """Build the ``file:line: Assertion `expr' failed.`` report line."""
    text = f"{file}:{format_int(line)}: Assertion `{expr}' failed.\n"
    return text[:MAX_BUF]


def copy_into(dst: Buffer, src: Union[bytes, Buffer]) -> int:
    """Copy as many bytes as both sides allow from ``src`` to ``dst``."""
    count = min(len(dst), len(src))
    if count:
        memoryview(dst)[:count] = bytes(memoryview(src)[:count])
    return count


def new_capacity(new_len: int, old_cap: int) -> int:
    """Pick the capacity a buffer grows to so it can hold ``new_len`` items.

    Small buffers double; from 256 items on, growth eases towards 1.25x.
    """
    new_cap = old_cap
    double_cap = (new_cap + new_cap) & _UINT64
    if new_len > double_cap:
        return new_len
    if old_cap < _GROWTH_THRESHOLD:
        return double_cap
    while True:
        previous = new_cap
        new_cap = (new_cap + ((new_cap + 3 * _GROWTH_THRESHOLD) >> 2)) & _UINT64
        if new_cap < previous:
            return new_len
        if new_cap >= new_len:
            return new_cap


def make_buffer(type_size: int, length: int, cap: int) -> memoryview:
    """Allocate zeroed storage for ``cap`` items of ``type_size`` bytes.

    Raises ValueError when the length or capacity is beyond MAX_ALLOC bytes.
    """
    if type_size * cap > MAX_ALLOC:
        if type_size * length > MAX_ALLOC:
            raise ValueError("make_buffer: len out of range")
        raise ValueError("make_buffer: cap out of range")
    return allocate(type_size * cap)


def grow_buffer(data: Buffer, length: int, new_len: int, type_size: int) -> memoryview:
    """Return new storage able to hold ``new_len`` items.

    The first ``length`` items of ``data`` are carried over. Raises ValueError
    when the grown storage would exceed MAX_ALLOC bytes.
    """
    old_cap = len(data) // type_size
    cap = new_capacity(new_len, old_cap)
    size = cap * type_size
    if size > MAX_ALLOC:
        raise ValueError("grow_buffer: len out of range")
    grown = allocate(size)
    keep = length * type_size
    grown[:keep] = bytes(memoryview(data)[:keep])
    return grown