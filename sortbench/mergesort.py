"""Top-down merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _merged(items: Sequence[int]) -> list[int]:
    if len(items) <= 1:
        return list(items)
    half = len(items) // 2
    left = _merged(items[:half])
    right = _merged(items[half:])
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: MutableSequence[int]) -> None:
    """Sort in place by splitting in halves and merging the sorted halves."""
    values[:] = _merged(list(values))