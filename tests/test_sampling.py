import pytest

from data_summarizer.profiling import SampleFormatter


ROWS = tuple((str(i), f"name {i}") for i in range(5))


def test_limit_above_row_count_returns_all_rows_unmodified():
    assert SampleFormatter().format(ROWS, limit=10) == ROWS


def test_limit_takes_leading_rows_in_order():
    assert SampleFormatter().format(ROWS, limit=2) == (("0", "name 0"), ("1", "name 1"))


def test_zero_limit_returns_no_rows():
    assert SampleFormatter().format(ROWS, limit=0) == ()


def test_negative_limit_is_rejected():
    with pytest.raises(ValueError):
        SampleFormatter().format(ROWS, limit=-1)


def test_long_cells_are_truncated_with_ellipsis():
    long_cell = "x" * 250
    exact_cell = "y" * 200
    sample = SampleFormatter().format([(long_cell, exact_cell)], limit=1)

    assert sample[0][0] == "x" * 200 + "..."
    assert sample[0][1] == exact_cell


def test_custom_cell_cap():
    assert SampleFormatter(max_cell_length=4).format([("abcdef",)], limit=1) == (("abcd...",),)

    with pytest.raises(ValueError):
        SampleFormatter(max_cell_length=0)
