"""Open-addressing hash tables and a pair-sum lookup."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence


class _ProbingTable(ABC):
    """A fixed-size table of integer keys resolving collisions by probing."""

    def __init__(self, size: int, keys: Iterable[int]) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[int | None] = [None] * size
        for key in keys:
            self._store(key)

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> tuple[int | None, ...]:
        """The table's slots; None marks an empty slot."""
        return tuple(self._slots)

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) != -1

    @abstractmethod
    def _probe(self, key: int) -> Iterator[int]:
        """Yield the slots to try for key, in order."""

    def _store(self, key: int) -> int:
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise ValueError(f"no free slot for key {key!r}")

    def _find(self, key: int) -> int:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot == key:
                return index
            if slot is None:
                return -1
        return -1


class LinearProbingTable(_ProbingTable):
    """Hash by key modulo size; on collision try the following slots in turn."""

    def __init__(self, size: int = 10, keys: Iterable[int] = ()) -> None:
        super().__init__(size, keys)

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        return ((start + i) % self.size for i in range(self.size))

    def insert(self, key: int) -> int:
        """Store key in the first free slot of its probe sequence and return that slot.

        Raises ValueError if the probe sequence reaches no free slot.
        """
        return self._store(key)

    def search(self, key: int) -> int:
        """Return the slot holding key, or -1 if it is not in the table."""
        return self._find(key)


class DoubleHashingTable(_ProbingTable):
    """Hash by key modulo size; on collision step by prime - (home slot % prime)."""

    def __init__(self, size: int = 10, prime: int = 7, keys: Iterable[int] = ()) -> None:
        if prime <= 0:
            raise ValueError("prime must be positive")
        self.prime = prime
        super().__init__(size, keys)

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        step = self.prime - start % self.prime
        return ((start + i * step) % self.size for i in range(self.size))

    def insert(self, key: int) -> int:
        """Store key in the first free slot of its probe sequence and return that slot.

        Raises ValueError if the probe sequence reaches no free slot.
        """
        return self._store(key)

    def search(self, key: int) -> int:
        """Return the slot holding key, or -1 if it is not in the table."""
        return self._find(key)


def find_pair(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first pair (earlier, later) of elements summing to target, or None."""
    seen: set[int] = set()
    for num in nums:
        if target - num in seen:
            return target - num, num
        seen.add(num)
    return None