"""Statistical summaries of uploaded CSV text for LLM prompts."""

from .config import Config, SummarizerSettings, get_config
from .errors import DataSummarizerError, EmptyInputError, InputTooLargeError, MalformedCsvError
from .models import (
    CategoricalColumnStats,
    ColumnStats,
    DataSummary,
    DateColumnStats,
    InferredType,
    NumericColumnStats,
    ParsedTable,
    TextColumnStats,
    ValueCount,
)
from .summarizer import Summarizer, summarize_csv_text

__all__ = [
    'Config',
    'SummarizerSettings',
    'get_config',
    'DataSummarizerError',
    'EmptyInputError',
    'InputTooLargeError',
    'MalformedCsvError',
    'CategoricalColumnStats',
    'ColumnStats',
    'DataSummary',
    'DateColumnStats',
    'InferredType',
    'NumericColumnStats',
    'ParsedTable',
    'TextColumnStats',
    'ValueCount',
    'Summarizer',
    'summarize_csv_text',
]
