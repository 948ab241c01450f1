"""Assorted small problems: subsequences, array equality, nearest point, meetings."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product
from typing import Any


def subsequences(text: str) -> list[str]:
    """Return every subsequence of text, including the empty one.

    Order follows a choice made per character, left to right, that takes the
    character before leaving it out: "ab" gives ["ab", "a", "b", ""].
    """
    return [
        "".join(char for char, keep in zip(text, mask) if keep)
        for mask in product((True, False), repeat=len(text))
    ]


def arrays_equal(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Tell whether two sequences hold the same elements, in any order."""
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)


def nearest_valid_point(x: int, y: int, points: Sequence[Sequence[int]]) -> int:
    """Return the index of the nearest point sharing x or y with (x, y).

    Distance is Manhattan distance; ties go to the smaller index. Returns -1
    when no point shares a coordinate.
    """
    best_index = -1
    best_distance = None
    for index, (px, py) in enumerate(points):
        if px == x or py == y:
            distance = abs(x - px) + abs(y - py)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_index = index
    return best_index


def max_meetings(start: Sequence[int], end: Sequence[int]) -> int:
    """Return the most meetings that fit in one room without overlapping.

    Meetings are taken greedily by earliest end (then earliest start); a
    meeting may begin only strictly after the previous one ends.
    """
    if len(start) != len(end):
        raise ValueError("start and end must have the same length")
    meetings = sorted(zip(start, end), key=lambda meeting: (meeting[1], meeting[0]))
    if not meetings:
        return 0
    count = 1
    last_end = meetings[0][1]
    for begin, finish in meetings[1:]:
        if last_end < begin:
            count += 1
            last_end = finish
    return count