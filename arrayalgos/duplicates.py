"""Find the values that occur twice in a sequence drawn from 1..n."""

from __future__ import annotations

from collections.abc import Iterable


def find_duplicates(values: Iterable[int]) -> list[int]:
    """Return the repeated values of a sequence whose items all lie in 1..len.

    Each value is moved to its home slot (value - 1); whatever cannot be
    placed because its slot is already taken is a repeat.
    """
    nums = list(values)
    n = len(nums)
    for value in nums:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} is outside the range 1..{n}")

    i = 0
    while i < n:
        value = nums[i]
        if value != i + 1 and nums[value - 1] != value:
            nums[i], nums[value - 1] = nums[value - 1], value
        else:
            i += 1

    return [value for position, value in enumerate(nums, start=1) if value != position]