"""Reshape a flat list into a two-dimensional grid."""

from __future__ import annotations

from collections.abc import Sequence


def construct_2d_array(original: Sequence[int], rows: int, cols: int) -> list[list[int]]:
    """Lay out original row by row in a rows x cols grid.

    Returns an empty list when the sizes do not match.
    """
    if rows * cols != len(original):
        return []
    items = list(original)
    return [items[start:start + cols] for start in range(0, rows * cols, cols)] if cols else [
        [] for _ in range(rows)
    ]