"""Stacks and problems solved with them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate
from typing import Generic, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


class EmptyStackError(IndexError):
    """Raised when an element is read from an empty stack."""


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class Stack(Generic[T]):
    """An unbounded last-in, first-out stack."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, element: T) -> None:
        """Put an element on top of the stack."""
        self._items.append(element)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise EmptyStackError("empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise EmptyStackError("empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._items


class TwoStacks:
    """Two stacks sharing one fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._first: list[int] = []
        self._second: list[int] = []

    def __len__(self) -> int:
        return len(self._first) + len(self._second)

    def _ensure_room(self) -> None:
        if len(self) >= self.capacity:
            raise StackOverflowError("stack overflow")

    def push1(self, value: int) -> None:
        """Push onto the first stack."""
        self._ensure_room()
        self._first.append(value)

    def push2(self, value: int) -> None:
        """Push onto the second stack."""
        self._ensure_room()
        self._second.append(value)

    def pop1(self) -> int:
        """Pop from the first stack."""
        if not self._first:
            raise EmptyStackError("stack 1 is empty")
        return self._first.pop()

    def pop2(self) -> int:
        """Pop from the second stack."""
        if not self._second:
            raise EmptyStackError("stack 2 is empty")
        return self._second.pop()

    def first(self) -> list[int]:
        """Return the first stack's contents, top first."""
        return self._first[::-1]

    def second(self) -> list[int]:
        """Return the second stack's contents, top first."""
        return self._second[::-1]


def is_balanced(text: str) -> bool:
    """Tell whether every bracket in text is closed in the right order.

    Any character that is not an opening bracket is treated as a closer, so
    text holding other characters is not balanced.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif not stack or stack.pop() != _PAIRS.get(char):
            return False
    return not stack


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each element, the next greater one going round the list circularly, or -1."""
    size = len(nums)
    result = [-1] * size
    stack: list[int] = []
    for i in reversed(range(2 * size)):
        value = nums[i % size]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < size and stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def trapped_water(heights: Sequence[int]) -> list[int]:
    """Return the water held above each bar of an elevation map."""
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return [max(min(lo, hi) - h, 0) for lo, hi, h in zip(left, right, heights)]