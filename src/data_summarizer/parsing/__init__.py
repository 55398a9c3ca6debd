"""
CSV parsing: tokenizing raw text into rows and finalizing column headers.
"""

from .headers import HeaderExtractor
from .row_parser import RowParser

__all__ = ['HeaderExtractor', 'RowParser']
