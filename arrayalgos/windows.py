"""Fixed-length sliding-window algorithms over sequences of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

_BEAUTY_LIMIT = 50


def _check_window(k: int, length: int) -> None:
    if not 1 <= k <= length:
        raise ValueError(f"window length {k} must lie in 1..{length}")


def _window_sums(nums: Sequence[int], k: int) -> Iterator[int]:
    """Yield the sum of every window of length k, left to right."""
    total = sum(nums[:k])
    yield total
    for outgoing, incoming in zip(nums, nums[k:]):
        total += incoming - outgoing
        yield total


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def k_radius_averages(values: Iterable[int], k: int) -> list[int]:
    """Return the truncated average of the 2k+1 items centred on each position, or -1."""
    if k < 0:
        raise ValueError("radius must not be negative")
    nums = list(values)
    result = [-1] * len(nums)
    width = 2 * k + 1
    if width <= len(nums):
        for start, total in enumerate(_window_sums(nums, width)):
            result[start + k] = _truncating_div(total, width)
    return result


def max_average(values: Iterable[int], k: int) -> float:
    """Return the largest average of any window of length k."""
    nums = list(values)
    _check_window(k, len(nums))
    return max(_window_sums(nums, k)) / k


def max_distinct_window_sum(values: Iterable[int], k: int) -> int:
    """Return the largest sum of a window of length k whose items are all distinct, or 0."""
    nums = list(values)
    _check_window(k, len(nums))
    counts = Counter(nums[:k])
    total = sum(nums[:k])
    best = max(total, 0) if len(counts) == k else 0
    for outgoing, incoming in zip(nums, nums[k:]):
        counts[incoming] += 1
        counts[outgoing] -= 1
        if counts[outgoing] == 0:
            del counts[outgoing]
        total += incoming - outgoing
        if len(counts) == k:
            best = max(best, total)
    return best


def count_windows_at_least(values: Iterable[int], k: int, threshold: int) -> int:
    """Count the windows of length k whose average is at least threshold."""
    nums = list(values)
    _check_window(k, len(nums))
    return sum(1 for total in _window_sums(nums, k) if total >= threshold * k)


def _xth_negative(counts: list[int], x: int) -> int:
    seen = 0
    for offset, count in enumerate(counts):
        seen += count
        if seen >= x:
            return offset - _BEAUTY_LIMIT
    return 0


def subarray_beauty(values: Iterable[int], k: int, x: int) -> list[int]:
    """Return, per window of length k, its x-th smallest value if negative, else 0.

    Values must lie in -50..50.
    """
    nums = list(values)
    _check_window(k, len(nums))
    if not 1 <= x <= k:
        raise ValueError(f"x must lie in 1..{k}")
    for value in nums:
        if not -_BEAUTY_LIMIT <= value <= _BEAUTY_LIMIT:
            raise ValueError(f"value {value} is outside -{_BEAUTY_LIMIT}..{_BEAUTY_LIMIT}")

    counts = [0] * _BEAUTY_LIMIT
    negatives = 0

    def add(value: int, step: int) -> None:
        nonlocal negatives
        if value < 0:
            counts[value + _BEAUTY_LIMIT] += step
            negatives += step

    for value in nums[:k]:
        add(value, 1)

    result = [_xth_negative(counts, x) if negatives >= x else 0]
    for outgoing, incoming in zip(nums, nums[k:]):
        add(incoming, 1)
        add(outgoing, -1)
        result.append(_xth_negative(counts, x) if negatives >= x else 0)
    return result