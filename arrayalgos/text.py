"""String algorithms: vowel windows, prefix reversal, run-length compression."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby

VOWELS = frozenset("aeiou")


def max_vowels(text: str, k: int) -> int:
    """Return the largest number of vowels in any substring of length k."""
    if k < 0:
        raise ValueError("substring length must not be negative")
    if k == 0 or k > len(text):
        return 0

    flags = [ch in VOWELS for ch in text]
    count = sum(flags[:k])
    best = count
    for outgoing, incoming in zip(flags, flags[k:]):
        if best == k:
            break
        count += incoming - outgoing
        best = max(best, count)
    return best


def reverse_prefix(word: str, ch: str) -> str:
    """Reverse word up to and including the first occurrence of ch."""
    end = word.find(ch)
    if end < 0:
        return word
    return word[end::-1] + word[end + 1:]


def compress(chars: Iterable[str]) -> list[str]:
    """Run-length encode characters: each run becomes the character, then its count if above 1."""
    result: list[str] = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        result.append(ch)
        if count != 1:
            result.extend(str(count))
    return result


def count_good_substrings(text: str) -> int:
    """Count substrings of length three whose characters are all different."""
    return sum(1 for triple in zip(text, text[1:], text[2:]) if len(set(triple)) == 3)


def _is_vowel_string(word: str) -> bool:
    return bool(word) and word[0] in VOWELS and word[-1] in VOWELS


def vowel_strings(words: Sequence[str], queries: Iterable[Sequence[int]]) -> list[int]:
    """For each (start, end) query, count words in that inclusive range that begin and end with a vowel."""
    prefix = list(accumulate((_is_vowel_string(w) for w in words), initial=0))
    answers = []
    for query in queries:
        start, end = query
        if not 0 <= start <= end < len(words):
            raise ValueError(f"query {start}..{end} is outside 0..{len(words) - 1}")
        answers.append(prefix[end + 1] - prefix[start])
    return answers