"""A byte buffer that data is produced into at the tail and consumed from the head."""

from __future__ import annotations

__all__ = ["CircularBuffer"]


class CircularBuffer:
    """A buffer of ``size`` usable bytes backed by twice that much storage.

    Data is written into :meth:`remaining`, made visible with :meth:`produce`,
    read through :meth:`unconsumed` and released with :meth:`consume`. Once the
    head passes the middle of the storage, both positions move back by half.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        self._buf = bytearray(2 * size)
        self._half = size
        self.head = 0
        self.tail = 0

    def consume(self, n: int) -> None:
        """Release ``n`` bytes from the head of the unconsumed data."""
        if n < 0 or n > len(self):
            raise ValueError(f"cannot consume {n} bytes, {len(self)} unconsumed")
        self.head += n
        if self.head > self._half:
            pending = bytes(self._buf[self.head:self.tail])
            self.head -= self._half
            self.tail -= self._half
            self._buf[self.head:self.tail] = pending

    def produce(self, n: int) -> None:
        """Mark ``n`` bytes written into :meth:`remaining` as unconsumed data."""
        if n < 0 or n > self.remaining_space():
            raise ValueError(
                f"cannot produce {n} bytes, {self.remaining_space()} free"
            )
        self.tail += n

    def remaining(self) -> memoryview:
        """Return a writable view of the free space after the tail."""
        return memoryview(self._buf)[self.tail:self.head + self._half]

    def remaining_space(self) -> int:
        """Return how many bytes can still be produced."""
        return self._half - (self.tail - self.head)

    def reset(self) -> None:
        """Drop all data and start again at the beginning of the storage."""
        self.head = self.tail = 0

    def __len__(self) -> int:
        return self.tail - self.head

    def unconsumed(self) -> memoryview:
        """Return a read-only view of the data produced but not yet consumed."""
        return memoryview(self._buf)[self.head:self.tail].toreadonly()