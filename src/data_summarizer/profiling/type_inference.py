"""
Type Inferencer

Classifies a column as numeric, date, categorical, or text from its cells.
Empty cells are nulls and never count as evidence.

Priority:
1. numeric      - at least NUMERIC_THRESHOLD of non-null cells are numbers
2. date         - at least DATE_THRESHOLD of non-null cells are dates
3. categorical  - distinct/count <= CATEGORICAL_MAX_RATIO and
                  distinct <= CATEGORICAL_MAX_DISTINCT
4. text         - everything else, including all-null columns
"""

from typing import Sequence

from ..models import InferredType
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import is_date, is_number

logger = get_logger(__name__)

NUMERIC_THRESHOLD = 0.9
DATE_THRESHOLD = 0.9
CATEGORICAL_MAX_RATIO = 0.5
CATEGORICAL_MAX_DISTINCT = 50


class TypeInferencer:
    """
    Infers the statistical type of one column.

    The result depends only on the multiset of cell values, never on
    their order. Threshold boundaries are inclusive.

    Example:
        >>> TypeInferencer().infer(["1", "2", "", "3.5"])
        <InferredType.NUMERIC: 'numeric'>
    """

    def infer(self, values: Sequence[str]) -> InferredType:
        sample = [value for value in values if value != ""]
        if not sample:
            return InferredType.TEXT

        total = len(sample)

        numeric_hits = sum(1 for value in sample if is_number(value))
        if numeric_hits / total >= NUMERIC_THRESHOLD:
            return InferredType.NUMERIC

        date_hits = sum(1 for value in sample if is_date(value))
        if date_hits / total >= DATE_THRESHOLD:
            return InferredType.DATE

        distinct = len(set(sample))
        if distinct / total <= CATEGORICAL_MAX_RATIO and distinct <= CATEGORICAL_MAX_DISTINCT:
            return InferredType.CATEGORICAL

        return InferredType.TEXT
