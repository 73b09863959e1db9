"""Time each sorting algorithm on the fixed benchmark input."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass

from sortbench.debug import IN_LEN
from sortbench.heapsort import heap_sort
from sortbench.inputs import inputs
from sortbench.insertionsort import insertion_sort
from sortbench.mergesort import merge_sort
from sortbench.quicksort import quick_insert_sort, quick_sort
from sortbench.selectionsort import selection_sort

_ALGORITHMS: tuple[tuple[str, Callable[[MutableSequence[int]], None]], ...] = (
    ("QUICK SORT", quick_sort),
    ("MERGE SORT", merge_sort),
    ("HEAP SORT", heap_sort),
    ("INSERTION SORT", insertion_sort),
    ("SELECTION SORT", selection_sort),
    ("QUICK + INSERT SORT", quick_insert_sort),
)


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one timed sort: its name, duration and output."""

    name: str
    microseconds: int
    values: list[int]


def run_benchmarks(values: Sequence[int]) -> list[BenchmarkResult]:
    """Sort a fresh copy of ``values`` with each algorithm, timing each run."""
    results = []
    for name, sort in _ALGORITHMS:
        working = list(values)
        started = time.perf_counter_ns()
        sort(working)
        elapsed = (time.perf_counter_ns() - started) // 1000
        results.append(BenchmarkResult(name, elapsed, working))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run every benchmark on the fixed input and print the timings."""
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Time several sorting algorithms on a fixed list.",
    )
    parser.parse_args(argv)

    values = inputs(IN_LEN)
    print(f"list size: {IN_LEN} elements")
    for result in run_benchmarks(values):
        print(f"{result.name} TOOK {result.microseconds} MS")
    print("------------------------")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())