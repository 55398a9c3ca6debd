"""Data models for parsed tables, column statistics, and summaries."""

from enum import Enum
from typing import Dict, Literal, Optional, Tuple, Union
from typing_extensions import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


Row = Tuple[str, ...]


class _FrozenModel(BaseModel):
    """Immutable model that serializes with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


#### Parsed Table ####

class ParsedTable(_FrozenModel):
    """Headers and width-normalized rows of one CSV upload."""
    headers: Tuple[str, ...]
    rows: Tuple[Row, ...] = ()
    warnings: Tuple[str, ...] = Field(
        default=(),
        description="Row-width corrections applied while parsing"
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "ParsedTable":
        if len(set(self.headers)) != len(self.headers):
            raise ValueError("headers must be unique")
        width = len(self.headers)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"row {index} has {len(row)} cells, expected {width}")
        return self

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column(self, index: int) -> Tuple[str, ...]:
        """Cell values of one column, in row order."""
        return tuple(row[index] for row in self.rows)


#### Column Statistics ####

class InferredType(str, Enum):
    NUMERIC = "numeric"
    DATE = "date"
    CATEGORICAL = "categorical"
    TEXT = "text"


class ValueCount(_FrozenModel):
    value: str
    count: int


class _ColumnStatsBase(_FrozenModel):
    count: int = Field(..., ge=0, description="Non-empty cells")
    null_count: int = Field(..., ge=0, description="Empty cells")
    distinct_count: int = Field(..., ge=0, description="Distinct non-empty values")

    @model_validator(mode="after")
    def _check_distinct(self):
        if self.distinct_count > self.count:
            raise ValueError("distinct_count cannot exceed count")
        return self


class NumericColumnStats(_ColumnStatsBase):
    inferred_type: Literal[InferredType.NUMERIC] = InferredType.NUMERIC
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    std_dev: Optional[float] = Field(default=None, description="Population standard deviation")
    median: Optional[float] = None


class CategoricalColumnStats(_ColumnStatsBase):
    inferred_type: Literal[InferredType.CATEGORICAL] = InferredType.CATEGORICAL
    top_values: Tuple[ValueCount, ...] = ()
    other_count: int = Field(default=0, ge=0, description="Occurrences of values outside top_values")


class DateColumnStats(_ColumnStatsBase):
    inferred_type: Literal[InferredType.DATE] = InferredType.DATE


class TextColumnStats(_ColumnStatsBase):
    inferred_type: Literal[InferredType.TEXT] = InferredType.TEXT


ColumnStats = Annotated[
    Union[NumericColumnStats, DateColumnStats, CategoricalColumnStats, TextColumnStats],
    Field(discriminator="inferred_type"),
]


#### Summary Bundle ####

class DataSummary(_FrozenModel):
    """Everything the prompt builder needs to describe one upload."""
    headers: Tuple[str, ...]
    row_count: int = Field(..., ge=0)
    column_stats: Dict[str, ColumnStats]
    sample_rows: Tuple[Row, ...] = ()
    warnings: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """JSON-ready dict with camelCase keys (headers, rowCount, columnStats, sampleRows)."""
        return self.model_dump(mode="json", by_alias=True)
