"""
Column profiling: type inference, per-column statistics, and row sampling.
"""

from .column_stats import StatisticsComputer
from .sampling import SampleFormatter
from .type_inference import TypeInferencer

__all__ = ['StatisticsComputer', 'SampleFormatter', 'TypeInferencer']
