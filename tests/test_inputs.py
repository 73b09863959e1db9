import pytest

from sortbench.debug import IN_LEN
from sortbench.inputs import inputs


def test_full_length_by_default():
    assert len(inputs()) == IN_LEN


def test_known_positions():
    values = inputs(IN_LEN)
    assert values[0] == 1915
    assert values[1] == 500
    assert values[42] == 2
    assert values[311] == 2000
    assert values[903] == 2000
    assert values[999] == 636


def test_value_range():
    values = inputs(IN_LEN)
    assert min(values) == 2
    assert max(values) == 2000


def test_prefix_matches_full_list():
    full = inputs(IN_LEN)
    for length in (0, 1, 10, 500, IN_LEN):
        assert inputs(length) == full[:length]


def test_returns_independent_copies():
    first = inputs(IN_LEN)
    first[0] = -1
    first.clear()
    second = inputs(IN_LEN)
    assert len(second) == IN_LEN
    assert second[0] == 1915


def test_contains_duplicates():
    values = inputs(IN_LEN)
    assert len(set(values)) < len(values)


@pytest.mark.parametrize("length", [-1, IN_LEN + 1])
def test_out_of_range_length_raises(length):
    with pytest.raises(ValueError):
        inputs(length)