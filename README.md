# sortbench

sortbench runs six sorting algorithms on the same fixed list of 1000
integers. It prints how long each one took. The six are quick sort, merge
sort, heap sort, insertion sort, selection sort, and a quick sort that hands
partitions to insertion sort.

## Installation

```
pip install .
```

## Running the benchmark

```
sortbench
```

The command takes no options other than `--help`. Each algorithm sorts its
own copy of the list. The output looks like this, with timings that differ
from machine to machine:

```
list size: 1000 elements
QUICK SORT TOOK 1234 MS
MERGE SORT TOOK 2345 MS
HEAP SORT TOOK ...
INSERTION SORT TOOK ...
SELECTION SORT TOOK ...
QUICK + INSERT SORT TOOK ...
------------------------
```

Each figure is in microseconds, even though the label says "MS".

## Using the algorithms

Each algorithm has its own module. Each one sorts a mutable sequence in
place and returns `None`.

```python
from sortbench.inputs import inputs
from sortbench.quicksort import quick_sort, quick_insert_sort
from sortbench.mergesort import merge_sort
from sortbench.heapsort import heap_sort
from sortbench.insertionsort import insertion_sort
from sortbench.selectionsort import selection_sort

data = inputs(1000)          # the fixed benchmark list (a fresh copy)

values = list(data)
quick_sort(values)           # or quick_sort(values, start, end)

values = list(data)
merge_sort(values)

values = list(data)
insertion_sort(values)       # or insertion_sort(values, length, key)

values = list(data)
selection_sort(values)       # or selection_sort(values, start)
```

Notes on each module:

- `inputs(length=1000)` returns the first `length` benchmark values. It
  raises `ValueError` if `length` is outside 0–1000.
- `quick_sort(values, start=0, end=None)` sorts `values[start:end]`. The
  last element of the range is the pivot.
- `quick_insert_sort(values, start=0, end=None)` partitions around the last
  element. It insertion sorts the part above the pivot. It partitions the
  part below the pivot again while that part holds at least 250 elements,
  and insertion sorts it once it is smaller.
  - The range must not be empty.
  - The insertions can move elements left past `start`. Elements before
    `start` should therefore all be smaller than those in the range.
- `insertion_sort(values, length=None, key=0)` sorts `values[:length]`. It
  treats `values[:key]` as already sorted.
- `selection_sort(values, start=0)` sorts `values[start:]` and leaves the
  elements before `start` alone.
- `merge_sort(values)` sorts the whole sequence.
- `heap_sort(values)` and `max_heapify(values, index, length=None)`:
  - `heap_sort` sifts only the root down on each pass before it moves the
    root to the end. It does not build a full heap first.
  - It sorts lists of up to three elements, and lists that are already
    max-heaps, such as descending lists, into ascending order.
  - Other input, including the benchmark list, may come out only partly
    ordered.

Invalid ranges or indices raise `ValueError`.

### Timing your own data

`sortbench.main.run_benchmarks(values)` sorts a fresh copy of `values` with
each of the six algorithms, in the order shown above. It returns a list of
`BenchmarkResult` objects. Each has a `name`, the elapsed time in
`microseconds`, and the sorted `values`.

### Looking at lists

`sortbench.debug` has helpers for showing lists as text:

- `format_list(values)` returns the elements as `[a] [b] ...`.
  `print_list(values)` prints that text.
- `format_max_heap(values)` returns a rough level-by-level picture of the
  upper levels of an array-backed heap. `print_max_heap(values)` prints it.
  Both raise `ValueError` if the list is empty or too short for the number
  of levels they would draw.

## What it does not do

The benchmark always uses the built-in list of 1000 integers. The command
cannot read input from a file, change the list size, or run only some of
the algorithms. To do any of that, call `run_benchmarks` yourself.

## Running the tests

```
pip install .[test]
pytest
```