"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when an element is read from an empty queue."""


class Queue(Generic[T]):
    """An unbounded FIFO queue that grows as elements are added."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def enqueue(self, element: T) -> None:
        """Add an element at the back of the queue."""
        self._items.append(element)

    def dequeue(self) -> T:
        """Remove and return the element at the front of the queue."""
        if not self._items:
            raise EmptyQueueError("empty queue")
        return self._items.popleft()

    def front(self) -> T:
        """Return the element at the front without removing it."""
        if not self._items:
            raise EmptyQueueError("empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._items