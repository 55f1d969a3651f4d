"""A fixed-capacity first-in, first-out buffer."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """FIFO buffer with a fixed capacity.

    ``push`` refuses items once the buffer is full, while ``push_overwrite``
    drops the oldest item to make room.
    """

    __slots__ = ("_items",)

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be greater than 0")
        self._items: deque[T] = deque(maxlen=capacity)

    def push_overwrite(self, item: T) -> None:
        """Append ``item``, discarding the oldest item if the buffer is full."""
        self._items.append(item)

    def push(self, item: T) -> None:
        """Append ``item``; raise ``OverflowError`` if the buffer is full."""
        if self.is_full():
            raise OverflowError("RingBuffer is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the oldest item."""
        if not self._items:
            raise IndexError("RingBuffer is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the oldest item without removing it."""
        if not self._items:
            raise IndexError("RingBuffer is empty")
        return self._items[0]

    def capacity(self) -> int:
        """Maximum number of items the buffer holds."""
        maxlen = self._items.maxlen
        assert maxlen is not None
        return maxlen

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the oldest item to the newest."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity()}, items={list(self._items)!r})"