import pytest

from sortbench.debug import (
    IN_LEN,
    format_list,
    format_max_heap,
    print_list,
    print_max_heap,
)


def test_format_list_brackets_each_value():
    assert format_list([1, 2, 3]) == "[1] [2] [3] "


def test_format_list_empty():
    assert format_list([]) == ""


def test_format_list_entry_count_matches_input():
    values = list(range(IN_LEN))
    rendered = format_list(values)
    assert rendered.count("[") == IN_LEN
    assert rendered.split() == [f"[{v}]" for v in values]


def test_print_list_writes_line(capsys):
    values = [5, -3, 12]
    print_list(values)
    assert capsys.readouterr().out == format_list(values) + "\n"


def test_format_max_heap_single_root():
    assert format_max_heap([42]) == "   42\n"


def test_format_max_heap_three_elements_shows_only_root():
    assert format_max_heap([9, 4, 7]) == "   9\n"


def test_format_max_heap_seven_elements():
    rendered = format_max_heap([7, 6, 5, 4, 3, 2, 1])
    assert rendered == "   7\n 6  5 \n4 3 2 1 \n"


def test_print_max_heap_matches_format(capsys):
    values = [7, 6, 5, 4, 3, 2, 1]
    print_max_heap(values)
    assert capsys.readouterr().out == format_max_heap(values)


def test_format_max_heap_empty_raises():
    with pytest.raises(ValueError):
        format_max_heap([])


def test_format_max_heap_too_short_raises():
    with pytest.raises(ValueError):
        format_max_heap(list(range(9)))