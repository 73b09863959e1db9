import random

import pytest

from sortbench.inputs import inputs
from sortbench.selectionsort import selection_sort


def test_sorts_benchmark_input():
    values = inputs()
    selection_sort(values, 0)
    assert values == sorted(inputs())


@pytest.mark.parametrize("seed", range(4))
def test_sorts_random_lists(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 9) for _ in range(rng.randint(0, 50))]
    expected = sorted(values)
    selection_sort(values)
    assert values == expected


def test_start_leaves_prefix_untouched():
    original = inputs(25)
    values = list(original)
    selection_sort(values, 10)
    assert values[:10] == original[:10]
    assert values[10:] == sorted(original[10:])


def test_start_at_end_changes_nothing():
    original = inputs(12)
    values = list(original)
    selection_sort(values, 12)
    assert values == original


@pytest.mark.parametrize("start", [-1, 13])
def test_invalid_start_raises(start):
    with pytest.raises(ValueError):
        selection_sort(inputs(12), start)