"""Largest, smallest and runner-up elements of a sequence of numbers."""

from __future__ import annotations

from collections.abc import Iterable


def largest_element(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError if there are none."""
    items = list(values)
    if not items:
        raise ValueError("largest_element() needs at least one value")
    return max(items)


def smallest_element(values: Iterable[int]) -> int:
    """Return the smallest value; raise ValueError if there are none."""
    items = list(values)
    if not items:
        raise ValueError("smallest_element() needs at least one value")
    return min(items)


def second_largest_element(values: Iterable[int]) -> int | None:
    """Return the largest value strictly below the maximum, or None if there is none."""
    largest: int | None = None
    second: int | None = None
    for value in values:
        if largest is None or value > largest:
            second = largest
            largest = value
        elif value < largest and (second is None or value > second):
            second = value
    return second


def second_smallest_element(values: Iterable[int]) -> int:
    """Return the smallest value strictly above the minimum, or -1 if there is none."""
    smallest: int | None = None
    second: int | None = None
    for value in values:
        if smallest is None or value < smallest:
            second = smallest
            smallest = value
        elif value > smallest and (second is None or value < second):
            second = value
    return -1 if second is None else second