"""
Statistical utilities for the data summarizer.
Provides value recognizers used for type inference and the numeric and
frequency aggregates used for column statistics.
"""

import math
import re
import numpy as np
import pandas as pd
from typing import Dict, List, Optional, Sequence, Tuple

# Base-10 signed integer or decimal, optional exponent. No thousands
# separators, currency symbols, hex, or inf/nan spellings.
NUMBER_PATTERN = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$')

DATE_PATTERNS = (
    # YYYY-MM-DD
    re.compile(r'^\d{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])$'),
    # MM/DD/YYYY
    re.compile(r'^(?:0?[1-9]|1[0-2])/(?:0?[1-9]|[12]\d|3[01])/\d{4}$'),
    # ISO-8601 timestamp
    re.compile(
        r'^\d{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])'
        r'[T ](?:[01]\d|2[0-3]):[0-5]\d(?::[0-5]\d(?:\.\d+)?)?'
        r'(?:Z|[+-](?:[01]\d|2[0-3]):?[0-5]\d)?$'
    ),
)


def is_number(value: str) -> bool:
    """
    Check whether a cell reads as a base-10 number.

    Example:
        >>> is_number(" -1.5e3 ")
        True
        >>> is_number("1,000")
        False
    """
    return NUMBER_PATTERN.match(value.strip()) is not None


def is_date(value: str) -> bool:
    """
    Check whether a cell matches one of the recognized date layouts.

    Example:
        >>> is_date("2024-02-29")
        True
        >>> is_date("12/31/2023")
        True
        >>> is_date("2024-01-01T08:30:00Z")
        True
    """
    stripped = value.strip()
    return any(pattern.match(stripped) for pattern in DATE_PATTERNS)


def parse_number(value: str) -> Optional[float]:
    """
    Parse a cell to a finite float.

    Returns None for anything that is not a plain base-10 number or that
    overflows to infinity (e.g. "1e999").
    """
    if not is_number(value):
        return None

    parsed = float(value.strip())
    if not math.isfinite(parsed):
        return None

    return parsed


def numeric_summary(values: Sequence[float]) -> Dict[str, Optional[float]]:
    """
    Calculate min, max, mean, population std dev, and median.

    Args:
        values: Finite floats in their original order

    Returns:
        Dictionary of aggregates; every aggregate is None for empty input

    Example:
        >>> numeric_summary([1.0, 2.0, 3.0, 5.0])['median']
        2.5
    """
    if len(values) == 0:
        return {'min': None, 'max': None, 'mean': None, 'std_dev': None, 'median': None}

    arr = np.asarray(values, dtype=np.float64)

    # Sums near float max overflow. Scaling by a power of two keeps every
    # |scaled| below 2 and only changes exponents, not mantissas.
    _, exponent = np.frexp(np.abs(arr).max())
    scale = np.ldexp(1.0, int(exponent) - 1)
    scaled = arr / scale

    return {
        'min': float(arr.min()),
        'max': float(arr.max()),
        'mean': float(scaled.mean() * scale),
        'std_dev': float(scaled.std(ddof=0) * scale),
        'median': float(np.median(scaled) * scale),
    }


def rank_values(values: Sequence[str], top_k: int) -> Tuple[List[Tuple[str, int]], int]:
    """
    Rank distinct values by frequency.

    Ordering is count descending, then value ascending, so equal input
    always gives an identical ranking.

    Args:
        values: Non-null cell values
        top_k: Number of values to keep

    Returns:
        Tuple of (top values as (value, count) pairs, count of all remaining occurrences)

    Example:
        >>> rank_values(["b", "a", "b", "c", "a", "b"], top_k=2)
        ([('b', 3), ('a', 2)], 1)
    """
    if len(values) == 0:
        return [], 0

    counts = pd.Series(list(values), dtype=object).value_counts(sort=False)
    ranked = sorted(
        ((str(value), int(count)) for value, count in counts.items()),
        key=lambda item: (-item[1], item[0])
    )

    top = ranked[:top_k]
    other_count = sum(count for _, count in ranked[top_k:])

    return top, other_count
