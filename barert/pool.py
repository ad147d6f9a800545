"""A bounded last-in first-out pool of reusable items."""

from __future__ import annotations

from typing import Any, Callable

__all__ = ["POOL_SIZE", "POOL_CAPACITY", "Pool"]

POOL_SIZE = 1024
"""Slots reserved for a pool, including those its own bookkeeping takes."""

POOL_CAPACITY = POOL_SIZE - 3
"""Idle items a pool can hold."""


class Pool:
    """Keeps released items for reuse and creates new ones when empty."""

    def __init__(self, factory: Callable[[], Any]) -> None:
        self._factory = factory
        self._items: list[Any] = []

    def get(self) -> Any:
        """Return the most recently released item, or a new one."""
        if self._items:
            return self._items.pop()
        return self._factory()

    def put(self, item: Any) -> None:
        """Release an item for later reuse."""
        if len(self._items) >= POOL_CAPACITY:
            raise OverflowError(f"pool holds at most {POOL_CAPACITY} items")
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)