"""
Statistics Computer

Computes per-column aggregates for the inferred type. Columns are
handled independently; nothing is correlated across columns.
"""

from typing import Sequence

from ..models import (
    CategoricalColumnStats,
    ColumnStats,
    DateColumnStats,
    InferredType,
    NumericColumnStats,
    TextColumnStats,
    ValueCount,
)
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import numeric_summary, parse_number, rank_values

logger = get_logger(__name__)

TOP_K_VALUES = 10


class StatisticsComputer:
    """
    Builds the ColumnStats variant matching an inferred type.

    Common fields for every type:
        count: non-empty cells
        null_count: empty cells
        distinct_count: distinct non-empty values

    Example:
        >>> stats = StatisticsComputer().compute(["1", "2", "3", "", "5"], InferredType.NUMERIC)
        >>> stats.mean, stats.median
        (2.75, 2.5)
    """

    def compute(self, values: Sequence[str], inferred_type: InferredType) -> ColumnStats:
        non_null = [value for value in values if value != ""]
        common = {
            'count': len(non_null),
            'null_count': len(values) - len(non_null),
            'distinct_count': len(set(non_null)),
        }

        if inferred_type == InferredType.NUMERIC:
            return self._numeric(non_null, common)
        elif inferred_type == InferredType.CATEGORICAL:
            return self._categorical(non_null, common)
        elif inferred_type == InferredType.DATE:
            return DateColumnStats(**common)
        elif inferred_type == InferredType.TEXT:
            return TextColumnStats(**common)

        raise ValueError(f"Unknown inferred type: {inferred_type}")

    def _numeric(self, non_null: Sequence[str], common: dict) -> NumericColumnStats:
        numbers = []
        for value in non_null:
            parsed = parse_number(value)
            if parsed is not None:
                numbers.append(parsed)

        skipped = len(non_null) - len(numbers)
        if skipped:
            logger.debug(f"Excluded {skipped} non-numeric cell(s) from numeric aggregates")

        return NumericColumnStats(**common, **numeric_summary(numbers))

    def _categorical(self, non_null: Sequence[str], common: dict) -> CategoricalColumnStats:
        top, other_count = rank_values(non_null, top_k=TOP_K_VALUES)

        return CategoricalColumnStats(
            **common,
            top_values=tuple(ValueCount(value=value, count=count) for value, count in top),
            other_count=other_count,
        )
