import itertools
import random

import pytest

from sortbench.heapsort import heap_sort, max_heapify
from sortbench.inputs import inputs


def _heap_violations(values):
    return [
        child
        for child in range(1, len(values))
        if values[(child - 1) // 2] < values[child]
    ]


def test_max_heapify_sifts_root_down():
    values = [1, 5, 3, 4, 2]
    max_heapify(values, 0, 5)
    assert values == [5, 4, 3, 1, 2]


def test_max_heapify_respects_length():
    values = [1, 2, 9]
    max_heapify(values, 0, 2)
    assert values == [2, 1, 9]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_max_heapify_restores_heap_when_subtrees_are_heaps(seed):
    rng = random.Random(seed)
    heap = sorted((rng.randint(0, 100) for _ in range(31)), reverse=True)
    heap[0] = -1
    original = list(heap)
    max_heapify(heap, 0, len(heap))
    assert _heap_violations(heap) == []
    assert heap[0] == max(original)
    assert sorted(heap) == sorted(original)
    assert heap != original


def test_max_heapify_rejects_bad_length():
    with pytest.raises(ValueError):
        max_heapify([1, 2, 3], 0, 4)


def test_max_heapify_rejects_negative_index():
    with pytest.raises(ValueError):
        max_heapify([1, 2, 3], -1)


def test_heap_sort_descending_input_comes_out_ascending():
    values = sorted(inputs(), reverse=True)
    heap_sort(values)
    assert values == sorted(values)
    assert values == sorted(inputs())


@pytest.mark.parametrize("values", list(itertools.permutations([7, 3, 9])))
def test_heap_sort_three_elements(values):
    values = list(values)
    heap_sort(values)
    assert values == sorted(values)
    assert values[0] == 3 and values[-1] == 9


def test_heap_sort_only_sifts_root():
    values = [1, 2, 3, 10]
    heap_sort(values)
    assert values == [1, 2, 10, 3]


def test_heap_sort_keeps_elements():
    values = inputs()
    heap_sort(values)
    assert sorted(values) == sorted(inputs())


@pytest.mark.parametrize("values", [[], [42]])
def test_heap_sort_trivial(values):
    expected = list(values)
    heap_sort(values)
    assert values == expected