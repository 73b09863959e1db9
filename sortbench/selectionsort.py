"""Selection sort over a suffix of a mutable sequence."""

from __future__ import annotations

from collections.abc import MutableSequence


def selection_sort(values: MutableSequence[int], start: int = 0) -> None:
    """Sort ``values[start:]`` in place, leaving earlier elements alone.

    Each position takes the first smallest element found after it.
    """
    if not 0 <= start <= len(values):
        raise ValueError(f"start must be between 0 and {len(values)}, got {start}")
    for position in range(start, len(values)):
        lowest = min(range(position, len(values)), key=values.__getitem__)
        if lowest != position:
            values[position], values[lowest] = values[lowest], values[position]