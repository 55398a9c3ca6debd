"""Sample Formatter: the leading rows of a table, with long cells shortened."""

from typing import Sequence, Tuple

from ..models import Row

DEFAULT_MAX_CELL_LENGTH = 200
ELLIPSIS = "..."


class SampleFormatter:
    """
    Selects the first ``limit`` rows in their original order.

    Rows are never shuffled or randomly drawn, so the same upload always
    yields the same prompt context. Output stays structured; joining
    rows into prompt text is the prompt builder's job.

    Example:
        >>> SampleFormatter(max_cell_length=3).format([("abcdef", "x")], limit=10)
        (('abc...', 'x'),)
    """

    def __init__(self, max_cell_length: int = DEFAULT_MAX_CELL_LENGTH):
        if max_cell_length < 1:
            raise ValueError(f"max_cell_length must be positive, got {max_cell_length}")
        self.max_cell_length = max_cell_length

    def format(self, rows: Sequence[Row], limit: int) -> Tuple[Row, ...]:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        return tuple(
            tuple(self._truncate(cell) for cell in row)
            for row in rows[:limit]
        )

    def _truncate(self, cell: str) -> str:
        if len(cell) <= self.max_cell_length:
            return cell
        return cell[:self.max_cell_length] + ELLIPSIS
