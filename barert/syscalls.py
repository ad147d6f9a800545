"""Thin, exception-raising wrappers over the system calls the runtime relies on."""

from __future__ import annotations

import mmap
import os
import select
import socket as _socket
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Union

from barert.errors import Errno, SyscallError

__all__ = [
    "AF_INET",
    "AF_LOCAL",
    "AF_UNIX",
    "CLOCK_REALTIME",
    "EPOLLET",
    "EPOLLIN",
    "EPOLLOUT",
    "EPOLL_CLOEXEC",
    "EPOLL_CTL_ADD",
    "EPOLL_CTL_DEL",
    "EPOLL_CTL_MOD",
    "INADDR_ANY",
    "Iovec",
    "SOCK_DGRAM",
    "SOCK_NONBLOCK",
    "SOCK_STREAM",
    "SOL_SOCKET",
    "SO_REUSEADDR",
    "SO_REUSEPORT",
    "STDERR",
    "STDIN",
    "STDOUT",
    "Timespec",
    "accept",
    "bind",
    "clock_gettime",
    "close",
    "epoll_create",
    "epoll_ctl",
    "epoll_wait",
    "iovec",
    "listen",
    "mmap_anonymous",
    "read",
    "read_into",
    "setsockopt",
    "socket",
    "swap_port",
    "write",
]

STDIN = 0
STDOUT = 1
STDERR = 2

CLOCK_REALTIME = 0

SOCK_STREAM = 1
SOCK_DGRAM = 2
SOCK_NONBLOCK = 0o4000

SO_REUSEADDR = 2
SO_REUSEPORT = 15

AF_UNIX = 1
AF_LOCAL = AF_UNIX
AF_INET = 2

SOL_SOCKET = 1

INADDR_ANY = "0.0.0.0"

EPOLL_CTL_ADD = 1
EPOLL_CTL_DEL = 2
EPOLL_CTL_MOD = 3

EPOLLIN = 1
EPOLLOUT = 4
EPOLLET = 1 << 31
EPOLL_CLOEXEC = 0o2000000

FileLike = Union[int, Any]


@contextmanager
def _syscall() -> Iterator[None]:
    """Turn any OS-level failure inside the block into SyscallError."""
    try:
        yield
    except SyscallError:
        raise
    except OSError as exc:
        code = exc.errno if exc.errno is not None else Errno.UNKNOWN_ERR
        raise SyscallError(code) from exc


def _fd(obj: FileLike) -> int:
    if isinstance(obj, int):
        return obj
    return obj.fileno()


@dataclass(frozen=True)
class Timespec:
    """Seconds and nanoseconds read from a clock."""

    sec: int
    nsec: int

    @property
    def total_ns(self) -> int:
        return self.sec * 1_000_000_000 + self.nsec


@dataclass(frozen=True)
class Iovec:
    """A view of a region of memory for scatter/gather I/O."""

    base: memoryview

    def __len__(self) -> int:
        return self.base.nbytes

    def __bytes__(self) -> bytes:
        return self.base.tobytes()


def iovec(data: Union[str, bytes, bytearray, memoryview]) -> Iovec:
    """Describe ``data`` as an I/O vector.

    A ``str`` is encoded as UTF-8 and ends at its first NUL character.
    """
    if isinstance(data, str):
        data = data.split("\0", 1)[0].encode("utf-8")
    return Iovec(memoryview(data).cast("B"))


def read(fd: FileLike, count: int) -> bytes:
    """Read up to ``count`` bytes; an empty result means end of file."""
    with _syscall():
        return os.read(_fd(fd), count)


def read_into(fd: FileLike, buf: Union[bytearray, memoryview]) -> int:
    """Read into a writable buffer and return the number of bytes read."""
    with _syscall():
        return os.readv(_fd(fd), [buf])


def write(fd: FileLike, data: Union[bytes, bytearray, memoryview, str]) -> int:
    """Write ``data`` and return the number of bytes written."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    with _syscall():
        return os.write(_fd(fd), data)


def close(fd: FileLike) -> None:
    """Close a file descriptor, socket or epoll instance."""
    with _syscall():
        if isinstance(fd, int):
            os.close(fd)
        else:
            fd.close()


def mmap_anonymous(length: int) -> mmap.mmap:
    """Map ``length`` zeroed, private, readable and writable bytes."""
    if length <= 0:
        raise SyscallError(Errno.EINVAL)
    with _syscall():
        return mmap.mmap(
            -1,
            length,
            flags=mmap.MAP_PRIVATE | mmap.MAP_ANONYMOUS,
            prot=mmap.PROT_READ | mmap.PROT_WRITE,
        )


def clock_gettime(clock: int) -> Timespec:
    """Read the given clock."""
    with _syscall():
        ns = time.clock_gettime_ns(clock)
    sec, nsec = divmod(ns, 1_000_000_000)
    return Timespec(sec, nsec)


def socket(family: int, type: int, protocol: int) -> _socket.socket:
    """Create a socket; ``SOCK_NONBLOCK`` in ``type`` makes it non-blocking."""
    with _syscall():
        return _socket.socket(family, type, protocol)


def setsockopt(sock: _socket.socket, level: int, optname: int, value: Union[int, bytes]) -> None:
    """Set a socket option to an integer or raw bytes value."""
    with _syscall():
        sock.setsockopt(level, optname, value)


def bind(sock: _socket.socket, host: str, port: int) -> None:
    """Bind an internet socket to ``host`` and ``port``."""
    with _syscall():
        sock.bind((host, port))


def listen(sock: _socket.socket, backlog: int) -> None:
    """Start accepting connections on ``sock``."""
    with _syscall():
        sock.listen(backlog)


def accept(sock: _socket.socket, flags: int = 0) -> _socket.socket:
    """Accept one connection; ``SOCK_NONBLOCK`` makes the new socket non-blocking.

    On a non-blocking socket with nothing pending this raises SyscallError
    with code EAGAIN.
    """
    with _syscall():
        conn, _address = sock.accept()
    conn.setblocking(not flags & SOCK_NONBLOCK)
    return conn


def epoll_create(flags: int = 0) -> "select.epoll":
    """Create an epoll instance; only 0 and EPOLL_CLOEXEC are valid flags."""
    if flags not in (0, EPOLL_CLOEXEC):
        raise SyscallError(Errno.EINVAL)
    with _syscall():
        return select.epoll()


def epoll_ctl(ep: "select.epoll", op: int, fd: FileLike, events: int = 0) -> None:
    """Add, modify or remove the watch on ``fd``."""
    with _syscall():
        if op == EPOLL_CTL_ADD:
            ep.register(_fd(fd), events)
        elif op == EPOLL_CTL_MOD:
            ep.modify(_fd(fd), events)
        elif op == EPOLL_CTL_DEL:
            ep.unregister(_fd(fd))
        else:
            raise SyscallError(Errno.EINVAL)


def epoll_wait(ep: "select.epoll", maxevents: int, timeout: int) -> list[tuple[int, int]]:
    """Wait up to ``timeout`` milliseconds (-1: forever) for events.

    Returns at most ``maxevents`` pairs of file descriptor and event mask.
    """
    if maxevents <= 0:
        raise SyscallError(Errno.EINVAL)
    seconds = timeout / 1000 if timeout >= 0 else -1
    with _syscall():
        return ep.poll(seconds, maxevents)


def swap_port(port: int) -> int:
    """Swap the two bytes of a 16-bit port number."""
    return ((port << 8) | ((port & 0xFF00) >> 8)) & 0xFFFF