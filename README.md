# arrayalgos

A small library of array, string and matrix algorithms built on sliding
windows, prefix sums, two pointers and frequency counting. Every function
takes plain Python sequences or iterables and returns new values; inputs
are never modified.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module                  | Functions |
|-------------------------|-----------|
| `arrayalgos.extremes`   | `largest_element`, `smallest_element`, `second_largest_element`, `second_smallest_element` |
| `arrayalgos.sorting`    | `is_sorted_and_rotated`, `remove_duplicates`, `sorted_squares`, `three_sum_closest` |
| `arrayalgos.duplicates` | `find_duplicates` |
| `arrayalgos.matrix`     | `construct_2d_array` |
| `arrayalgos.prefix`     | `product_except_self`, `sum_absolute_differences`, `left_right_difference` |
| `arrayalgos.windows`    | `k_radius_averages`, `max_average`, `max_distinct_window_sum`, `count_windows_at_least`, `subarray_beauty` |
| `arrayalgos.anagrams`   | `find_anagrams`, `contains_permutation` |
| `arrayalgos.text`       | `max_vowels`, `reverse_prefix`, `compress`, `count_good_substrings`, `vowel_strings` |

## Examples

```python
from arrayalgos.extremes import second_largest_element
from arrayalgos.sorting import three_sum_closest
from arrayalgos.windows import max_average, k_radius_averages
from arrayalgos.anagrams import find_anagrams
from arrayalgos.matrix import construct_2d_array
from arrayalgos.text import compress

second_largest_element([50, 3, 21, 500, 90, 20])   # 90
three_sum_closest([-1, 2, 1, -4], 1)               # 2
max_average([1, 12, -5, -6, 50, 3], 4)             # 12.75
k_radius_averages([7, 4, 3, 9, 1, 8, 5, 2, 6], 3)  # [-1, -1, -1, 5, 4, 4, -1, -1, -1]
find_anagrams("cbaebabacd", "abc")                 # [0, 6]
construct_2d_array([1, 2, 3, 4], 2, 2)             # [[1, 2], [3, 4]]
compress("aabccc")                                 # ['a', '2', 'b', 'c', '3']
```

## Edge cases and errors

- `largest_element` and `smallest_element` raise `ValueError` on empty input.
- `second_largest_element` returns `None` when no value lies below the
  maximum; `second_smallest_element` returns `-1` when no value lies above
  the minimum.
- `three_sum_closest` raises `ValueError` for fewer than three values.
- `find_duplicates` expects every value to lie in `1..len(values)` and raises
  `ValueError` otherwise.
- `construct_2d_array` returns `[]` when `rows * cols` differs from the
  input length.
- The window functions in `arrayalgos.windows` raise `ValueError` when the
  window length is outside `1..len(values)`; `k_radius_averages` instead
  fills positions without a full window with `-1` and rejects a negative
  radius. `subarray_beauty` also requires `1 <= x <= k` and values in
  `-50..50`.
- `vowel_strings` raises `ValueError` for a query outside the word list.
- Vowels are the lowercase letters `a`, `e`, `i`, `o`, `u`.

## Scope

This is a library only: it has no command-line tool, and it reads and
writes no files.