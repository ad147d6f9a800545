"""System call error numbers, their messages and the exception raised for them."""

from __future__ import annotations

import enum

__all__ = [
    "Errno",
    "NUM_ERRS",
    "SyscallError",
    "error_message",
    "raise_for",
]


class Errno(enum.IntEnum):
    """Linux error numbers as returned by the kernel."""

    SUCCESS = 0
    EPERM = 1
    ENOENT = 2
    ESRCH = 3
    EINTR = 4
    EIO = 5
    ENXIO = 6
    E2BIG = 7
    ENOEXEC = 8
    EBADF = 9
    ECHILD = 10
    EAGAIN = 11
    ENOMEM = 12
    EACCES = 13
    EFAULT = 14
    ENOTBLK = 15
    EBUSY = 16
    EEXIST = 17
    EXDEV = 18
    ENODEV = 19
    ENOTDIR = 20
    EISDIR = 21
    EINVAL = 22
    ENFILE = 23
    EMFILE = 24
    ENOTTY = 25
    ETXTBSY = 26
    EFBIG = 27
    ENOSPC = 28
    ESPIPE = 29
    EROFS = 30
    EMLINK = 31
    EPIPE = 32
    EDOM = 33
    ERANGE = 34
    EDEADLK = 35
    ENAMETOOLONG = 36
    ENOLCK = 37
    ENOSYS = 38
    ENOTEMPTY = 39
    ELOOP = 40
    ENOMSG = 42
    EIDRM = 43
    ECHRNG = 44
    EL2NSYNC = 45
    EL3HLT = 46
    EL3RST = 47
    ELNRNG = 48
    EUNATCH = 49
    ENOCSI = 50
    EL2HLT = 51
    EBADE = 52
    EBADR = 53
    EXFULL = 54
    ENOANO = 55
    EBADRQC = 56
    EBADSLT = 57
    EDEADLOCK = 35
    EBFONT = 59
    ENOSTR = 60
    ENODATA = 61
    ETIME = 62
    ENOSR = 63
    ENONET = 64
    ENOPKG = 65
    EREMOTE = 66
    ENOLINK = 67
    EADV = 68
    ESRMNT = 69
    ECOMM = 70
    EPROTO = 71
    EMULTIHOP = 72
    EDOTDOT = 73
    EBADMSG = 74
    EOVERFLOW = 75
    ENOTUNIQ = 76
    EBADFD = 77
    EREMCHG = 78
    ELIBACC = 79
    ELIBBAD = 80
    ELIBSCN = 81
    ELIBMAX = 82
    ELIBEXEC = 83
    EILSEQ = 84
    ERESTART = 85
    ESTRPIPE = 86
    EUSERS = 87
    ENOTSOCK = 88
    EDESTADDRREQ = 89
    EMSGSIZE = 90
    EPROTOTYPE = 91
    ENOPROTOOPT = 92
    EPROTONOSUPPORT = 93
    ESOCKTNOSUPPORT = 94
    EOPNOTSUPP = 95
    EPFNOSUPPORT = 96
    EAFNOSUPPORT = 97
    EADDRINUSE = 98
    EADDRNOTAVAIL = 99
    ENETDOWN = 100
    ENETUNREACH = 101
    ENETRESET = 102
    ECONNABORTED = 103
    ECONNRESET = 104
    ENOBUFS = 105
    EISCONN = 106
    ENOTCONN = 107
    ESHUTDOWN = 108
    ETOOMANYREFS = 109
    ETIMEDOUT = 110
    ECONNREFUSED = 111
    EHOSTDOWN = 112
    EHOSTUNREACH = 113
    EALREADY = 114
    EINPROGRESS = 115
    ESTALE = 116
    EUCLEAN = 117
    ENOTNAM = 118
    ENAVAIL = 119
    EISNAM = 120
    EREMOTEIO = 121
    EDQUOT = 122
    ENOMEDIUM = 123
    EMEDIUMTYPE = 124
    ECANCELED = 125
    ENOKEY = 126
    EKEYEXPIRED = 127
    EKEYREVOKED = 128
    EKEYREJECTED = 129
    EOWNERDEAD = 130
    ENOTRECOVERABLE = 131
    ERFKILL = 132
    EHWPOISON = 133
    UNKNOWN_ERR = 134


NUM_ERRS = 133

# Indexed by error number. Slots 41 and 58 have no error of their own and
# carry the entries for EAGAIN and EDEADLOCK instead.
_TABLE: tuple[tuple[int, str], ...] = (
    (Errno.SUCCESS, "success"),
    (Errno.EPERM, "operation not permitted"),
    (Errno.ENOENT, "no such file or directory"),
    (Errno.ESRCH, "no such process"),
    (Errno.EINTR, "interrupted system call"),
    (Errno.EIO, "I/O error"),
    (Errno.ENXIO, "no such device or address"),
    (Errno.E2BIG, "argument list too long"),
    (Errno.ENOEXEC, "exec format error"),
    (Errno.EBADF, "bad file number"),
    (Errno.ECHILD, "no child processes"),
    (Errno.EAGAIN, "try again"),
    (Errno.ENOMEM, "out of memory"),
    (Errno.EACCES, "permission denied"),
    (Errno.EFAULT, "bad address"),
    (Errno.ENOTBLK, "block device required"),
    (Errno.EBUSY, "device or resource busy"),
    (Errno.EEXIST, "file exists"),
    (Errno.EXDEV, "cross-device link"),
    (Errno.ENODEV, "no such device"),
    (Errno.ENOTDIR, "not a directory"),
    (Errno.EISDIR, "is a directory"),
    (Errno.EINVAL, "invalid argument"),
    (Errno.ENFILE, "file table overflow"),
    (Errno.EMFILE, "too many open files"),
    (Errno.ENOTTY, "not a typewriter"),
    (Errno.ETXTBSY, "text file busy"),
    (Errno.EFBIG, "file too large"),
    (Errno.ENOSPC, "no space left on device"),
    (Errno.ESPIPE, "illegal seek"),
    (Errno.EROFS, "read-only file system"),
    (Errno.EMLINK, "too many links"),
    (Errno.EPIPE, "broken pipe"),
    (Errno.EDOM, "math argument out of domain of func"),
    (Errno.ERANGE, "math result not representable"),
    (Errno.EDEADLK, "resource deadlock avoided"),
    (Errno.ENAMETOOLONG, "file name too long"),
    (Errno.ENOLCK, "no record locks available"),
    (Errno.ENOSYS, "function not implemented"),
    (Errno.ENOTEMPTY, "directory not empty"),
    (Errno.ELOOP, "too many levels of symbolic links"),
    (Errno.EAGAIN, "try again"),
    (Errno.ENOMSG, "no message of desired type"),
    (Errno.EIDRM, "identifier removed"),
    (Errno.ECHRNG, "channel number out of range"),
    (Errno.EL2NSYNC, "level 2 not synchronized"),
    (Errno.EL3HLT, "level 3 halted"),
    (Errno.EL3RST, "level 3 reset"),
    (Errno.ELNRNG, "link number out of range"),
    (Errno.EUNATCH, "protocol driver not attached"),
    (Errno.ENOCSI, "no CSI structure available"),
    (Errno.EL2HLT, "level 2 halted"),
    (Errno.EBADE, "invalid exchange"),
    (Errno.EBADR, "invalid request descriptor"),
    (Errno.EXFULL, "exchange full"),
    (Errno.ENOANO, "no anode"),
    (Errno.EBADRQC, "invalid request code"),
    (Errno.EBADSLT, "invalid slot"),
    (Errno.EDEADLOCK, "resource deadlock avoided"),
    (Errno.EBFONT, "bad font file format"),
    (Errno.ENOSTR, "not a stream"),
    (Errno.ENODATA, "no data available"),
    (Errno.ETIME, "timer expired"),
    (Errno.ENOSR, "out of streams resources"),
    (Errno.ENONET, "machine is not on the network"),
    (Errno.ENOPKG, "package not installed"),
    (Errno.EREMOTE, "object is remote"),
    (Errno.ENOLINK, "link has been severed"),
    (Errno.EADV, "advertise error"),
    (Errno.ESRMNT, "srmount error"),
    (Errno.ECOMM, "communication error on send"),
    (Errno.EPROTO, "protocol error"),
    (Errno.EMULTIHOP, "multihop attempted"),
    (Errno.EDOTDOT, "RFS specific error"),
    (Errno.EBADMSG, "not a data message"),
    (Errno.EOVERFLOW, "value too large for defined data type"),
    (Errno.ENOTUNIQ, "name not unique on network"),
    (Errno.EBADFD, "file descriptor in bad state"),
    (Errno.EREMCHG, "remote address changed"),
    (Errno.ELIBACC, "can not access a needed shared library"),
    (Errno.ELIBBAD, "accessing a corrupted shared library"),
    (Errno.ELIBSCN, ".lib section in a.out corrupted"),
    (Errno.ELIBMAX, "attempting to link in too many shared libraries"),
    (Errno.ELIBEXEC, "cannot exec a shared library directly"),
    (Errno.EILSEQ, "illegal byte sequence"),
    (Errno.ERESTART, "interrupted system call should be restarted"),
    (Errno.ESTRPIPE, "streams pipe error"),
    (Errno.EUSERS, "too many users"),
    (Errno.ENOTSOCK, "socket operation on non-socket"),
    (Errno.EDESTADDRREQ, "destination address required"),
    (Errno.EMSGSIZE, "message too long"),
    (Errno.EPROTOTYPE, "protocol wrong type for socket"),
    (Errno.ENOPROTOOPT, "protocol not available"),
    (Errno.EPROTONOSUPPORT, "protocol not supported"),
    (Errno.ESOCKTNOSUPPORT, "socket type not supported"),
    (Errno.EOPNOTSUPP, "operation not supported on transport endpoint"),
    (Errno.EPFNOSUPPORT, "protocol family not supported"),
    (Errno.EAFNOSUPPORT, "address family not supported by protocol"),
    (Errno.EADDRINUSE, "address already in use"),
    (Errno.EADDRNOTAVAIL, "cannot assign requested address"),
    (Errno.ENETDOWN, "network is down"),
    (Errno.ENETUNREACH, "network is unreachable"),
    (Errno.ENETRESET, "network dropped connection on reset"),
    (Errno.ECONNABORTED, "software caused connection abort"),
    (Errno.ECONNRESET, "connection reset by peer"),
    (Errno.ENOBUFS, "no buffer space available"),
    (Errno.EISCONN, "transport endpoint is already connected"),
    (Errno.ENOTCONN, "transport endpoint is not connected"),
    (Errno.ESHUTDOWN, "cannot send after transport endpoint shutdown"),
    (Errno.ETOOMANYREFS, "too many references: cannot splice"),
    (Errno.ETIMEDOUT, "connection timed out"),
    (Errno.ECONNREFUSED, "connection refused"),
    (Errno.EHOSTDOWN, "host is down"),
    (Errno.EHOSTUNREACH, "no route to host"),
    (Errno.EALREADY, "operation already in progress"),
    (Errno.EINPROGRESS, "operation now in progress"),
    (Errno.ESTALE, "stale file handle"),
    (Errno.EUCLEAN, "structure needs cleaning"),
    (Errno.ENOTNAM, "not a XENIX named type file"),
    (Errno.ENAVAIL, "no XENIX semaphores available"),
    (Errno.EISNAM, "is a named type file"),
    (Errno.EREMOTEIO, "remote I/O error"),
    (Errno.EDQUOT, "disk quota exceeded"),
    (Errno.ENOMEDIUM, "no medium found"),
    (Errno.EMEDIUMTYPE, "wrong medium type"),
    (Errno.ECANCELED, "operation canceled"),
    (Errno.ENOKEY, "required key not available"),
    (Errno.EKEYEXPIRED, "key has expired"),
    (Errno.EKEYREVOKED, "key has been revoked"),
    (Errno.EKEYREJECTED, "key was rejected by service"),
    (Errno.EOWNERDEAD, "owner died"),
    (Errno.ENOTRECOVERABLE, "state not recoverable"),
    (Errno.ERFKILL, "operation not possible due to RF-kill"),
    (Errno.EHWPOISON, "memory page has hardware error"),
    (Errno.UNKNOWN_ERR, "unknown error"),
)


def _entry(code: int) -> tuple[int, str]:
    """Look up the table entry for a raw error number.

    Numbers above NUM_ERRS, and negative ones (which are huge as unsigned
    values), resolve to the entry at NUM_ERRS.
    """
    if code < 0 or code > NUM_ERRS:
        return _TABLE[NUM_ERRS]
    return _TABLE[code]


def error_message(code: int) -> str:
    """Return the message the error table holds for an error number."""
    return _entry(code)[1]


class SyscallError(OSError):
    """A failed system call, carrying the resolved error number and message."""

    def __init__(self, code: int) -> None:
        resolved, message = _entry(code)
        super().__init__(int(resolved), message)
        self.code = int(resolved)
        self.msg = message

    def __str__(self) -> str:
        return self.msg


def raise_for(code: int) -> None:
    """Raise SyscallError for a nonzero error number; do nothing for zero."""
    if code == 0:
        return None
    raise SyscallError(code)