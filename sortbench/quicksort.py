"""Quicksort with a last-element pivot, and a hybrid with insertion sort."""

from __future__ import annotations

from collections.abc import MutableSequence

from sortbench.debug import IN_LEN
from sortbench.insertionsort import insertion_sort

_INSERTION_THRESHOLD = IN_LEN >> 2


def _resolve_range(
    values: MutableSequence[int], start: int, end: int | None
) -> int:
    if end is None:
        end = len(values)
    if not 0 <= start <= end <= len(values):
        raise ValueError(
            f"need 0 <= start <= end <= {len(values)}, got start={start}, end={end}"
        )
    return end


def _partition(values: MutableSequence[int], start: int, end: int) -> int:
    """Partition around ``values[end - 1]`` and return the pivot's new index."""
    pivot = values[end - 1]
    boundary = start
    for j in range(start, end):
        if values[j] < pivot:
            values[j], values[boundary] = values[boundary], values[j]
            boundary += 1
    values[end - 1], values[boundary] = values[boundary], values[end - 1]
    return boundary


def quick_sort(
    values: MutableSequence[int], start: int = 0, end: int | None = None
) -> None:
    """Sort ``values[start:end]`` in place using the last element as pivot."""
    end = _resolve_range(values, start, end)
    pending = [(start, end)]
    while pending:
        low, high = pending.pop()
        if low == high:
            continue
        pivot_index = _partition(values, low, high)
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index))


def quick_insert_sort(
    values: MutableSequence[int], start: int = 0, end: int | None = None
) -> None:
    """Sort ``values[start:end]`` by partitioning, then insertion sorting.

    After each partition the part above the pivot is insertion sorted. The
    part below is partitioned again while it holds at least a quarter of
    the benchmark list's length, and insertion sorted once it is smaller.
    Insertions run leftward past ``start``, so elements before ``start``
    should all be smaller than the range. The range must not be empty.
    """
    end = _resolve_range(values, start, end)
    if start == end:
        raise ValueError("quick_insert_sort needs a non-empty range")
    while True:
        pivot_index = _partition(values, start, end)
        # Everything above the pivot is at least the pivot, so these
        # insertions stop at it and do not depend on the lower part.
        insertion_sort(values, end, pivot_index + 1)
        if pivot_index - start < _INSERTION_THRESHOLD:
            insertion_sort(values, pivot_index, start)
            return
        end = pivot_index