import math

import pytest

from data_summarizer.models import (
    CategoricalColumnStats,
    DateColumnStats,
    InferredType,
    NumericColumnStats,
    TextColumnStats,
)
from data_summarizer.profiling import StatisticsComputer


@pytest.fixture
def computer():
    return StatisticsComputer()


def test_numeric_column_aggregates(computer):
    stats = computer.compute(["1", "2", "3", "", "5"], InferredType.NUMERIC)

    assert isinstance(stats, NumericColumnStats)
    assert stats.count == 4
    assert stats.null_count == 1
    assert stats.distinct_count == 4
    assert stats.mean == 2.75
    assert stats.min == 1
    assert stats.max == 5
    assert stats.median == 2.5


def test_std_dev_is_population(computer):
    stats = computer.compute(["1", "2", "3", "5"], InferredType.NUMERIC)

    assert stats.std_dev == pytest.approx(math.sqrt(8.75 / 4))


def test_odd_count_median_is_middle_value(computer):
    stats = computer.compute(["9", "1", "4"], InferredType.NUMERIC)

    assert stats.median == 4


def test_unparseable_numeric_cells_are_excluded_without_affecting_nulls(computer):
    stats = computer.compute(["1", "2", "oops", ""], InferredType.NUMERIC)

    assert stats.count == 3
    assert stats.null_count == 1
    assert stats.distinct_count == 3
    assert stats.mean == 1.5
    assert stats.max == 2


def test_overflowing_numbers_are_excluded(computer):
    stats = computer.compute(["1", "3", "1e999", "-1e999"], InferredType.NUMERIC)

    assert stats.mean == 2
    assert stats.min == 1
    assert stats.max == 3


def test_numeric_column_without_parseable_values_has_no_aggregates(computer):
    stats = computer.compute(["x", ""], InferredType.NUMERIC)

    assert stats.count == 1
    assert stats.mean is None
    assert stats.median is None


def test_categorical_top_values_by_count(computer):
    values = ["v1"] * 7 + ["v2"] * 2 + ["v3"]
    stats = computer.compute(values, InferredType.CATEGORICAL)

    assert isinstance(stats, CategoricalColumnStats)
    assert [(tv.value, tv.count) for tv in stats.top_values] == [("v1", 7), ("v2", 2), ("v3", 1)]
    assert stats.other_count == 0


def test_categorical_ties_break_by_value(computer):
    stats = computer.compute(["b", "a", "", "b", "a", "c"], InferredType.CATEGORICAL)

    assert [(tv.value, tv.count) for tv in stats.top_values] == [("a", 2), ("b", 2), ("c", 1)]
    assert stats.null_count == 1


def test_categorical_keeps_top_ten_and_counts_the_rest(computer):
    values = []
    for i in range(12):
        values.extend([f"k{i:02d}"] * (i + 1))
    stats = computer.compute(values, InferredType.CATEGORICAL)

    assert len(stats.top_values) == 10
    assert stats.top_values[0].value == "k11"
    assert stats.top_values[-1].value == "k02"
    # k00 (1) + k01 (2)
    assert stats.other_count == 3
    assert stats.distinct_count == 12


@pytest.mark.parametrize("inferred_type, stats_type", [
    (InferredType.DATE, DateColumnStats),
    (InferredType.TEXT, TextColumnStats),
])
def test_date_and_text_have_common_fields_only(computer, inferred_type, stats_type):
    stats = computer.compute(["2024-01-01", "", "2024-01-01", "2024-02-01"], inferred_type)

    assert isinstance(stats, stats_type)
    assert (stats.count, stats.null_count, stats.distinct_count) == (3, 1, 2)
    assert not hasattr(stats, "mean")
    assert not hasattr(stats, "top_values")


def test_counts_cover_every_row(computer):
    values = ["a", "", "b", "", "a"]
    for inferred_type in InferredType:
        stats = computer.compute(values, inferred_type)
        assert stats.count + stats.null_count == len(values)
        assert stats.distinct_count <= stats.count


def test_huge_numeric_values_give_finite_aggregates(computer):
    stats = computer.compute(["1e308"] * 3, InferredType.NUMERIC)

    assert math.isfinite(stats.mean)
    assert math.isfinite(stats.std_dev)
    assert stats.max == 1e308
