"""FIFO and priority queues used throughout the simulation."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when taking from or peeking into an empty queue."""


class LinkedQueue(Generic[T]):
    """First-in, first-out queue."""

    def __init__(self, items: Iterator[T] | None = None) -> None:
        self._items: deque[T] = deque(items or ())

    def enqueue(self, item: T) -> None:
        """Add an item at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front of the queue."""
        if not self._items:
            raise EmptyQueueError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the item at the front without removing it."""
        if not self._items:
            raise EmptyQueueError("peek into an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def remove(self, item: T) -> bool:
        """Remove the first entry that is the very object given; report success."""
        for index, entry in enumerate(self._items):
            if entry is item:
                del self._items[index]
                return True
        return False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._items)!r})"


class PriorityQueue(Generic[T]):
    """Queue ordered by priority, highest first; equal priorities keep arrival order."""

    def __init__(self) -> None:
        self._keys: list[int] = []
        self._entries: list[tuple[T, int]] = []

    def enqueue(self, item: T, priority: int) -> None:
        """Insert an item after every entry whose priority is at least as high."""
        index = bisect_right(self._keys, -priority)
        self._keys.insert(index, -priority)
        self._entries.insert(index, (item, priority))

    def dequeue(self) -> tuple[T, int]:
        """Remove and return the front entry as (item, priority)."""
        if not self._entries:
            raise EmptyQueueError("dequeue from an empty priority queue")
        del self._keys[0]
        return self._entries.pop(0)

    def peek(self) -> tuple[T, int]:
        """Return the front entry as (item, priority) without removing it."""
        if not self._entries:
            raise EmptyQueueError("peek into an empty priority queue")
        return self._entries[0]

    def is_empty(self) -> bool:
        return not self._entries

    def remove(self, item: T) -> bool:
        """Remove the first entry holding the very object given; report success."""
        for index, (entry, _) in enumerate(self._entries):
            if entry is item:
                del self._entries[index]
                del self._keys[index]
                return True
        return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[T, int]]:
        """Yield (item, priority) pairs from front to back."""
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"PriorityQueue({self._entries!r})"