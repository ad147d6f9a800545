# barert

A compact toolkit of low-level runtime pieces in plain Python, with no
dependencies outside the standard library.

## Modules

- `barert.errors` — `Errno`, an `IntEnum` of Linux error numbers;
  `error_message(code)`, the message the error table holds for a number
  (numbers above `NUM_ERRS` or below zero give `"unknown error"`);
  `SyscallError`, an `OSError` subclass with `code` and `msg`; and
  `raise_for(code)`, which raises `SyscallError` for any nonzero number.
- `barert.builtin` — `format_int` and `format_hex` (decimal and `0x…` hex,
  optionally cut to a character limit); `format_message(fmt, *args)`, which
  expands `%c`, `%s`, `%d`, `%p` and `%%`, drops unknown conversions and stops
  at `MAX_BUF` (1024) characters; `fprint(stream, fmt, *args)`, which writes
  that message to a file descriptor or text stream; `assertion_message`;
  `copy_into(dst, src)`, a bounded byte copy; and growable storage through
  `make_buffer`, `grow_buffer` and `new_capacity` (doubling below 256 items,
  easing towards 1.25x above). Requests beyond `MAX_ALLOC` (2 GiB) raise
  `ValueError`.
- `barert.arena` — `Arena`, a bump allocator handing out zeroed `memoryview`
  regions and reserving new blocks in multiples of `EXTENSION_SIZE` bytes, and
  `allocate(size)`, which uses one process-wide arena. Nothing is ever freed.
- `barert.buffer` — `CircularBuffer(size)`: write into `remaining()`, publish
  with `produce(n)`, read `unconsumed()`, release with `consume(n)`; `len()`
  gives the unconsumed byte count, `remaining_space()` the free space and
  `reset()` empties it. Producing or consuming too much raises `ValueError`.
- `barert.pool` — `Pool(factory)`, a LIFO free list: `get()` returns the last
  released item or a new one from `factory`, `put(item)` releases one (at most
  `POOL_CAPACITY` items, otherwise `OverflowError`).
- `barert.timefmt` — `time_to_tm(t)` turns Unix seconds into a frozen `Tm`
  in Moscow time (UTC+3; `mon` counts from 0, `year` from 1900);
  `format_rfc822(tm)` and `format_local(tm)` render it.
- `barert.syscalls` — wrappers that raise `SyscallError` on failure: `read`,
  `read_into`, `write`, `close`, `mmap_anonymous`, `clock_gettime` (returning
  a `Timespec`), `socket`, `setsockopt`, `bind`, `listen`, `accept`,
  `epoll_create`, `epoll_ctl`, `epoll_wait`, plus `iovec(data)` building an
  `Iovec`, `swap_port` and the matching constants (`AF_INET`, `SOCK_NONBLOCK`,
  `EPOLLIN`, `EPOLLET`, `EPOLL_CTL_ADD`, ...).

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Formatting a timestamp:

```python
from barert.timefmt import time_to_tm, format_rfc822, format_local

tm = time_to_tm(1699109223)
print(format_rfc822(tm))  # Sat, 04 Nov 2023 17:47:03 +0300
print(format_local(tm))   # 04.11.2023 17:47:03 MSK
```

Formatting a message:

```python
from barert.builtin import format_message

print(format_message("%s has %d items", "queue", 3))  # queue has 3 items
```

Moving bytes through a circular buffer:

```python
from barert.buffer import CircularBuffer

cb = CircularBuffer(4096)
view = cb.remaining()
view[:6] = b"hello\n"
cb.produce(6)
print(bytes(cb.unconsumed()))  # b'hello\n'
cb.consume(len(cb))
```

Reusing objects through a pool:

```python
from barert.pool import Pool

pool = Pool(dict)
session = pool.get()
pool.put(session)
assert pool.get() is session
```

Turning an errno into an exception:

```python
from barert.errors import SyscallError, raise_for

try:
    raise_for(11)
except SyscallError as exc:
    print(exc.code, exc)  # 11 try again
```

## What it does not include

barert is a library only. It installs no command, and it ships no server:
the socket and epoll wrappers in `barert.syscalls` are the pieces an event
loop would be built from, but the package does not contain such a loop.
The system-call helpers, epoll in particular, need Linux.