"""Errors raised by the summarization engine.

None of these are retried: summarizing is a pure function of its input,
so the same input fails the same way every time.
"""


class DataSummarizerError(ValueError):
    """Base class for input the summarizer refuses to process."""


class EmptyInputError(DataSummarizerError):
    """The upload is empty or contains only whitespace."""

    def __init__(self, message: str = "CSV input is empty"):
        super().__init__(message)


class MalformedCsvError(DataSummarizerError):
    """The upload is structurally broken, e.g. a quote is never closed."""


class InputTooLargeError(DataSummarizerError):
    """The upload exceeds the configured byte or row ceiling."""

    def __init__(self, measure: str, actual: int, limit: int):
        self.measure = measure
        self.actual = actual
        self.limit = limit
        super().__init__(f"CSV input too large: {actual} {measure} exceeds limit of {limit}")
