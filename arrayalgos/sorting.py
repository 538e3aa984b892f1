"""Algorithms over sorted sequences: rotation check, deduplication, squares, 3-sum."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import groupby


def is_sorted_and_rotated(values: Sequence[int]) -> bool:
    """Return True if the values are a non-decreasing sequence rotated by some amount."""
    items = list(values)
    if not items:
        return True
    rotated = items[1:] + items[:1]
    descents = sum(1 for a, b in zip(items, rotated) if a > b)
    return descents <= 1


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Return the sorted input with each run of equal values collapsed to one."""
    return [value for value, _ in groupby(values)]


def sorted_squares(values: Iterable[int]) -> list[int]:
    """Return the squares of an ascending sequence, in ascending order."""
    items = list(values)
    negative_squares = [v * v for v in reversed(items) if v < 0]
    other_squares = [v * v for v in items if v >= 0]
    return list(heapq.merge(other_squares, negative_squares))


def three_sum_closest(values: Iterable[int], target: int) -> int:
    """Return the sum of three values that lies closest to target."""
    nums = sorted(values)
    if len(nums) < 3:
        raise ValueError("three_sum_closest() needs at least three values")

    best_sum = 0
    best_diff: int | None = None
    last = len(nums) - 1
    for i, first in enumerate(nums[:-2]):
        lo, hi = i + 1, last
        while lo < hi:
            total = first + nums[lo] + nums[hi]
            diff = abs(target - total)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best_sum = total
            if total > target:
                hi -= 1
            else:
                lo += 1
    return best_sum