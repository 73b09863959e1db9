"""Insertion sort over a prefix of a mutable sequence."""

from __future__ import annotations

from collections.abc import MutableSequence


def insertion_sort(
    values: MutableSequence[int], length: int | None = None, key: int = 0
) -> None:
    """Sort ``values[:length]`` in place, treating ``values[:key]`` as sorted.

    Every element from index ``key`` up to ``length`` is shifted left past
    each larger element in front of it, all the way down to index 0.
    ``length`` defaults to the whole sequence.
    """
    if length is None:
        length = len(values)
    if not 0 <= key <= length <= len(values):
        raise ValueError(
            f"need 0 <= key <= length <= {len(values)}, "
            f"got key={key}, length={length}"
        )
    for position in range(key, length):
        current = values[position]
        j = position - 1
        while j >= 0 and current < values[j]:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current