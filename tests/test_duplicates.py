from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arrayalgos.duplicates import find_duplicates


def test_example():
    assert sorted(find_duplicates([4, 3, 2, 7, 8, 2, 3, 1])) == [2, 3]


def test_no_duplicates_in_permutation():
    assert find_duplicates([3, 1, 2]) == []


def test_empty():
    assert find_duplicates([]) == []


@pytest.mark.parametrize("values", [[0], [1, 3], [-1, 1], [2, 2, 5]])
def test_out_of_range_raises(values):
    with pytest.raises(ValueError):
        find_duplicates(values)


def test_input_is_not_modified():
    data = [2, 2, 1]
    find_duplicates(data)
    assert data == [2, 2, 1]


@st.composite
def at_most_twice(draw):
    n = draw(st.integers(min_value=1, max_value=30))
    pool = [v for v in range(1, n + 1) for _ in range(2)]
    chosen = draw(st.permutations(pool))[:n]
    return chosen


@given(at_most_twice())
def test_reports_exactly_the_repeated_values(values):
    counts = Counter(values)
    expected = sorted(v for v, c in counts.items() if c == 2)
    assert sorted(find_duplicates(values)) == expected