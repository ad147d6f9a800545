"""A bump allocator handing out zeroed byte regions from large blocks."""

from __future__ import annotations

__all__ = ["EXTENSION_SIZE", "Arena", "allocate"]

EXTENSION_SIZE = 4096 * 132
"""Bytes an arena reserves each time it runs out of room."""


class Arena:
    """Hands out consecutive regions of reserved blocks; nothing is ever freed."""

    def __init__(self) -> None:
        self._block: bytearray | None = None
        self._offset = 0
        self.in_use = 0
        self.allocated = 0

    def _room(self) -> int:
        if self._block is None:
            return 0
        return len(self._block) - self._offset

    def _extend(self, size: int) -> None:
        chunks = max(1, -(-size // EXTENSION_SIZE))
        self._block = bytearray(chunks * EXTENSION_SIZE)
        self._offset = 0
        self.allocated += len(self._block)

    def allocate(self, size: int) -> memoryview:
        """Return a writable, zeroed view of ``size`` bytes."""
        if size < 0:
            raise ValueError(f"cannot allocate a negative size: {size}")
        if size > self._room():
            self._extend(size)
        if self._block is None:
            return memoryview(bytearray())
        start = self._offset
        self._offset += size
        self.in_use += size
        return memoryview(self._block)[start:start + size]


_global_arena = Arena()


def allocate(size: int) -> memoryview:
    """Allocate ``size`` zeroed bytes from the process-wide arena."""
    return _global_arena.allocate(size)