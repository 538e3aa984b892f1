import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arrayalgos.anagrams import contains_permutation, find_anagrams

_letters = st.text(alphabet="abcd", max_size=25)
_patterns = st.text(alphabet="abcd", min_size=1, max_size=5)


def test_find_anagrams_worked_example():
    assert find_anagrams("cbaebabacd", "abc") == [0, 6]


def test_find_anagrams_text_shorter_than_pattern():
    assert find_anagrams("ab", "abc") == []


@pytest.mark.parametrize("text", ["", "a", "hello"])
def test_find_anagrams_empty_pattern_matches_everywhere(text):
    assert find_anagrams(text, "") == list(range(len(text) + 1))


@given(_letters, _patterns)
def test_every_reported_window_is_an_anagram(text, pattern):
    for start in find_anagrams(text, pattern):
        assert sorted(text[start:start + len(pattern)]) == sorted(pattern)


@given(_letters, _patterns)
def test_indices_are_strictly_ascending_and_in_range(text, pattern):
    starts = find_anagrams(text, pattern)
    assert starts == sorted(set(starts))
    assert all(0 <= s <= len(text) - len(pattern) for s in starts)


@given(_letters, _patterns, _letters, st.randoms())
def test_inserted_shuffle_is_found(prefix, pattern, suffix, rnd: random.Random):
    shuffled = list(pattern)
    rnd.shuffle(shuffled)
    text = prefix + "".join(shuffled) + suffix
    assert len(prefix) in find_anagrams(text, pattern)
    assert contains_permutation(pattern, text) is True


@given(_patterns, _letters)
def test_contains_permutation_agrees_with_find_anagrams(pattern, text):
    assert contains_permutation(pattern, text) == bool(find_anagrams(text, pattern))


def test_contains_permutation_worked_example():
    assert contains_permutation("ab", "eidbaooo") is True


@given(_patterns)
def test_reversed_pattern_is_a_permutation(pattern):
    assert contains_permutation(pattern, pattern[::-1]) is True


@given(_patterns)
def test_pattern_longer_than_text_is_never_contained(pattern):
    assert contains_permutation(pattern + "a", pattern) is False