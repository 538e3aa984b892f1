"""Running-total algorithms: products and sums to the left and right of each item."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from itertools import accumulate


def product_except_self(values: Iterable[int]) -> list[int]:
    """Return, for each position, the product of every other value."""
    nums = list(values)
    if not nums:
        return []
    left = accumulate(nums[:-1], operator.mul, initial=1)
    right = list(accumulate(reversed(nums[1:]), operator.mul, initial=1))
    right.reverse()
    return [lhs * rhs for lhs, rhs in zip(left, right)]


def sum_absolute_differences(values: Iterable[int]) -> list[int]:
    """Return, for each item of an ascending sequence, the sum of its distances to all others."""
    nums = list(values)
    n = len(nums)
    total = sum(nums)
    result = []
    left_sum = 0
    for i, value in enumerate(nums):
        right_sum = total - left_sum - value
        left_side = value * i - left_sum
        right_side = right_sum - value * (n - 1 - i)
        result.append(left_side + right_side)
        left_sum += value
    return result


def left_right_difference(values: Iterable[int]) -> list[int]:
    """Return |sum of items left of i - sum of items right of i| for each position i."""
    nums = list(values)
    right_sum = sum(nums)
    left_sum = 0
    result = []
    for value in nums:
        right_sum -= value
        result.append(abs(left_sum - right_sum))
        left_sum += value
    return result