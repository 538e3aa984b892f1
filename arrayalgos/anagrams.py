"""Locate rearrangements of a pattern inside a longer text."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator


def _anagram_starts(text: str, pattern: str) -> Iterator[int]:
    """Yield, in ascending order, each index where a window of text is an anagram of pattern."""
    width = len(pattern)
    if len(text) < width:
        return

    target = Counter(pattern)
    window = Counter(text[:width])
    if window == target:
        yield 0

    for start, (outgoing, incoming) in enumerate(zip(text, text[width:]), start=1):
        window[incoming] += 1
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]
        if window == target:
            yield start


def find_anagrams(text: str, pattern: str) -> list[int]:
    """Return the start index of every substring of text that is an anagram of pattern."""
    return list(_anagram_starts(text, pattern))


def contains_permutation(pattern: str, text: str) -> bool:
    """Return True if some substring of text is a permutation of pattern."""
    return any(True for _ in _anagram_starts(text, pattern))