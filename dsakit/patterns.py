"""Finding every occurrence of a pattern in a text."""

from __future__ import annotations

_BASE = 256
_DEFAULT_MODULUS = 2**31 - 1


def naive_search(pattern: str, text: str) -> list[int]:
    """Return every index at which pattern occurs in text, overlaps included."""
    return [
        i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)
    ]


def rabin_karp_search(pattern: str, text: str, modulus: int = _DEFAULT_MODULUS) -> list[int]:
    """Return every index at which pattern occurs, using a rolling hash.

    Windows whose hash matches the pattern's are confirmed character by
    character, so the result does not depend on the modulus.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    width, length = len(pattern), len(text)
    if width == 0:
        return list(range(length + 1))
    if width > length:
        return []

    high = pow(_BASE, width - 1, modulus)
    pattern_hash = window_hash = 0
    for pc, tc in zip(pattern, text):
        pattern_hash = (_BASE * pattern_hash + ord(pc)) % modulus
        window_hash = (_BASE * window_hash + ord(tc)) % modulus

    matches: list[int] = []
    last = length - width
    for i in range(last + 1):
        if pattern_hash == window_hash and text.startswith(pattern, i):
            matches.append(i)
        if i < last:
            window_hash = (
                _BASE * (window_hash - ord(text[i]) * high) + ord(text[i + width])
            ) % modulus
    return matches