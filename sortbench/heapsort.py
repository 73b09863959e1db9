"""Heap-based sorting driven by a root sift-down on each pass."""

from __future__ import annotations

from collections.abc import MutableSequence


def max_heapify(
    values: MutableSequence[int], index: int, length: int | None = None
) -> None:
    """Sift ``values[index]`` down within ``values[:length]``.

    The element is swapped with its larger child until neither child is
    larger. ``length`` defaults to the whole sequence.
    """
    if length is None:
        length = len(values)
    if not 0 <= length <= len(values):
        raise ValueError(f"length must be between 0 and {len(values)}, got {length}")
    if index < 0:
        raise ValueError(f"index must not be negative, got {index}")
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < length and values[left] > values[largest]:
            largest = left
        if right < length and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def heap_sort(values: MutableSequence[int]) -> None:
    """Sort in place by repeatedly moving the root to the end of the heap.

    Each pass sifts only the root down before swapping it with the last
    element of the shrinking heap; no full heap is built first. Inputs that
    are already max-heaps (such as descending lists) and inputs of up to
    three elements come out ascending; others may not be fully ordered.
    """
    for end in range(len(values), 1, -1):
        max_heapify(values, 0, end)
        values[0], values[end - 1] = values[end - 1], values[0]