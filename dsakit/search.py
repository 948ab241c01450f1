"""Searches over sequences.

Every function returns the index of an element equal to ``target``, or -1
when there is none. All but ``linear_search`` and ``rotated_search`` expect
the sequence sorted in ascending order.
"""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt
from typing import Any


def linear_search(items: Sequence[Any], target: Any) -> int:
    """Return the first index holding target, or -1."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return -1


def _binary_search(items: Sequence[Any], target: Any, low: int, high: int) -> int:
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Binary search over a sorted sequence."""
    return _binary_search(items, target, 0, len(items) - 1)


def ternary_search(items: Sequence[Any], target: Any) -> int:
    """Ternary search: split the range in three at each step."""
    low, high = 0, len(items) - 1
    while high >= low:
        third = (high - low) // 3
        mid1 = low + third
        mid2 = high - third
        if items[mid1] == target:
            return mid1
        if items[mid2] == target:
            return mid2
        if target < items[mid1]:
            high = mid1 - 1
        elif target > items[mid2]:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return -1


def exponential_search(items: Sequence[Any], target: Any) -> int:
    """Double a bound until it passes target, then binary search below it."""
    if not items:
        return -1
    if items[0] == target:
        return 0
    size = len(items)
    bound = 1
    while bound < size and items[bound] <= target:
        bound *= 2
    return _binary_search(items, target, bound // 2, min(bound, size - 1))


def interpolation_search(items: Sequence[Any], target: Any) -> int:
    """Probe where target would sit if values were evenly spread."""
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= target <= items[high]:
        if items[high] == items[low]:
            return low if items[low] == target else -1
        pos = low + int((high - low) / (items[high] - items[low]) * (target - items[low]))
        if items[pos] == target:
            return pos
        if items[pos] < target:
            low = pos + 1
        else:
            high = pos - 1
    return -1


def jump_search(items: Sequence[Any], target: Any) -> int:
    """Jump ahead in blocks of sqrt(n), then scan the block that may hold target."""
    size = len(items)
    if size == 0:
        return -1
    block = isqrt(size)
    step = block
    prev = 0
    while items[min(step, size) - 1] < target:
        prev = step
        step += block
        if prev >= size:
            return -1
    while items[prev] < target:
        prev += 1
        if prev == min(step, size):
            return -1
    return prev if items[prev] == target else -1


def find_pivot(items: Sequence[Any]) -> int:
    """Return the index of the largest element of a rotated sorted sequence.

    For a sequence that is not rotated this is its last index; for an empty
    sequence it is -1.
    """
    low, high = 0, len(items) - 1
    while True:
        if high < low:
            return -1
        if high == low:
            return low
        mid = (low + high) // 2
        if mid < high and items[mid] > items[mid + 1]:
            return mid
        if mid > low and items[mid] < items[mid - 1]:
            return mid - 1
        if items[low] >= items[mid]:
            high = mid - 1
        else:
            low = mid + 1


def rotated_search(items: Sequence[Any], target: Any) -> int:
    """Search a sorted sequence that has been rotated by some amount."""
    pivot = find_pivot(items)
    if pivot == -1:
        return _binary_search(items, target, 0, len(items) - 1)
    if items[pivot] == target:
        return pivot
    if items[0] <= target:
        return _binary_search(items, target, 0, pivot - 1)
    return _binary_search(items, target, pivot + 1, len(items) - 1)