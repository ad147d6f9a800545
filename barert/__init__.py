"""Low-level runtime pieces: errors, formatting, buffers, arenas, pools, time formatting and system calls."""

__version__ = "0.1.0"
__all__ = ["errors", "builtin", "arena", "buffer", "pool", "timefmt", "syscalls"]