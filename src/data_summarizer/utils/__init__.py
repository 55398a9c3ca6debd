"""
Utility modules for the data summarizer.
Provides common functionality for logging, file I/O, and statistics.
"""

from .logging_utils import setup_logger, get_logger
from .file_utils import load_config, load_csv_bytes, save_json, get_file_list
from .stats_utils import is_date, is_number, parse_number, numeric_summary, rank_values

__all__ = [
    'setup_logger',
    'get_logger',
    'load_config',
    'load_csv_bytes',
    'save_json',
    'get_file_list',
    'is_date',
    'is_number',
    'parse_number',
    'numeric_summary',
    'rank_values',
]
