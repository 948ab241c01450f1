"""Dynamic-programming classics: coin change, Kadane, Fibonacci and word break."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def coin_change_ways(coins: Sequence[int], total: int) -> int:
    """Count the multisets of coins, each usable any number of times, summing to total."""
    if total < 0:
        raise ValueError("total must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * total
    for coin in coins:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of values (Kadane)."""
    if not values:
        raise ValueError("values must not be empty")
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def fibonacci(n: int) -> int:
    """Return the n-th term of the sequence 1, 1, 2, 3, 5, ... counting from 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 1, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_recursive(n: int) -> int:
    """The same term as fibonacci, by plain exponential recursion."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 1:
        return 1
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def word_break(words: Iterable[str], text: str) -> list[str]:
    """Return every way to split text into dictionary words, joined by spaces.

    Shorter leading words are tried first.
    """
    dictionary = set(words)
    sentences: list[str] = []

    def split(rest: str, taken: list[str]) -> None:
        if not rest:
            sentences.append(" ".join(taken))
            return
        for end in range(1, len(rest) + 1):
            head = rest[:end]
            if head in dictionary:
                taken.append(head)
                split(rest[end:], taken)
                taken.pop()

    if text:
        split(text, [])
    return sentences