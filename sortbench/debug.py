"""Helpers for rendering integer lists and max-heaps as text."""

from __future__ import annotations

from collections.abc import Sequence

IN_LEN = 1000
"""Number of elements in the benchmark input list."""


def format_list(values: Sequence[int]) -> str:
    """Render values as ``[a] [b] ...``, each entry followed by a space."""
    return "".join(f"[{value}] " for value in values)


def print_list(values: Sequence[int]) -> None:
    """Print values on one line in the ``[a] [b] ...`` form."""
    print(format_list(values))


def format_max_heap(values: Sequence[int]) -> str:
    """Render the top levels of an array-backed heap, one level per line.

    The root is printed on its own line. Then come levels 1 up to
    ``(len(values) - 1) // 2 - 1``. Each entry on a level is preceded by
    padding that shrinks as the level widens.
    """
    if not values:
        raise ValueError("cannot render an empty heap")
    levels = (len(values) - 1) >> 1
    needed = (1 << levels) - 1 if levels > 1 else 1
    if len(values) < needed:
        raise ValueError(
            f"heap of {len(values)} elements is too short to render "
            f"{levels} levels (needs {needed})"
        )

    lines = [f"   {values[0]}\n"]
    for level in range(1, levels):
        width = 1 << level
        padding = " " * max(0, levels - width)
        row = values[width - 1 : 2 * width - 1]
        lines.append("".join(f"{padding}{value} " for value in row) + "\n")
    return "".join(lines)


def print_max_heap(values: Sequence[int]) -> None:
    """Print the heap rendering produced by :func:`format_max_heap`."""
    print(format_max_heap(values), end="")