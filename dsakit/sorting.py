"""Comparison and distribution sorts.

Every function returns a new ascending list and leaves its argument as it was.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in [0, 1) by spreading them over one bucket per value.

    Raises ValueError for a value outside [0, 1).
    """
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value.

    Raises ValueError for a negative value.
    """
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, times in enumerate(counts) for _ in range(times)]


def _sift_down(items: list[Any], root: int, end: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < end and items[left] > items[largest]:
            largest = left
        if right < end and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Heap sort: heapify from the last parent down, then pop the maximum each round."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, root, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def iterative_heap_sort(values: Iterable[Any]) -> list[Any]:
    """Heap sort that builds the heap by sifting each new element up."""
    items = list(values)
    size = len(items)
    for i in range(1, size):
        child = i
        while child > 0 and items[child] > items[(child - 1) // 2]:
            parent = (child - 1) // 2
            items[child], items[parent] = items[parent], items[child]
            child = parent
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    left, right = merge_sort(items[:mid]), merge_sort(items[mid:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Gapped insertion sort with the gap halved each round, starting at n / 2."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            temp = items[i]
            j = i
            while j >= gap and items[j - gap] > temp:
                items[j] = items[j - gap]
                j -= gap
            items[j] = temp
        gap //= 2
    return items


def bitonic_sort(values: Iterable[Any], ascending: bool = True) -> list[Any]:
    """Bitonic sort; the number of values must be a power of two (or zero).

    Raises ValueError otherwise.
    """
    items = list(values)
    size = len(items)
    if size & (size - 1):
        raise ValueError("bitonic sort needs a power-of-two number of values")

    def merge(start: int, length: int, up: bool) -> None:
        if length > 1:
            half = length // 2
            for i in range(start, start + half):
                if (items[i] > items[i + half]) == up:
                    items[i], items[i + half] = items[i + half], items[i]
            merge(start, half, up)
            merge(start + half, half, up)

    def sort(start: int, length: int, up: bool) -> None:
        if length > 1:
            half = length // 2
            sort(start, half, True)
            sort(start + half, half, False)
            merge(start, length, up)

    sort(0, size, ascending)
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort: each pass carries the largest remaining value to the end."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def cocktail_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that alternates left-to-right and right-to-left passes."""
    items = list(values)
    start, end = 0, len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        start += 1
    return items


def cycle_sort(values: Iterable[int]) -> list[int]:
    """Sort integers in 1..n by swapping each into slot value - 1.

    Raises ValueError for a value outside 1..n, n being the number of values.
    """
    items = list(values)
    size = len(items)
    for value in items:
        if not 1 <= value <= size:
            raise ValueError(f"cycle sort needs values in 1..{size}, got {value!r}")
    i = 0
    while i < size:
        correct = items[i] - 1
        if items[i] != items[correct]:
            items[i], items[correct] = items[correct], items[i]
        else:
            i += 1
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError for a negative value.
    """
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort: grow a sorted prefix one element at a time."""
    items = list(values)
    for n in range(1, len(items)):
        last = items[n]
        j = n - 1
        while j >= 0 and items[j] > last:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = last
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Selection sort: swap the smallest remaining value to the front each round."""
    items = list(values)
    for i in range(len(items) - 1):
        min_idx = min(range(i, len(items)), key=items.__getitem__)
        if min_idx != i:
            items[i], items[min_idx] = items[min_idx], items[i]
    return items