"""Value objects for counting and rendering."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator

from uniqcount.domain.counting.exceptions import InvalidDelimiterError


class CountMode(str, Enum):
    """What a single input line contributes to the frequency table."""

    LINE = "line"
    CHARACTER = "character"

    @property
    def label(self) -> str:
        """Header of the first table column."""
        if self is CountMode.CHARACTER:
            return "Occurrences"
        return "Word"


class RankedEntry(BaseModel):
    """A record together with how many times it was seen."""

    record: str
    count: PositiveInt

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.record} ({self.count})"


class OutputFormat(BaseModel):
    """Selects table output (no delimiter) or delimited text output."""

    delimiter: str | None = None

    model_config = ConfigDict(frozen=True)

    # overriding pydantic init to allow OutputFormat(",")
    def __init__(self, delimiter: str | None = None, **data: Any):
        if "delimiter" not in data:
            data["delimiter"] = delimiter
        super().__init__(**data)

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str | None) -> str | None:
        if v is not None and len(v) != 1:
            raise InvalidDelimiterError(v)
        return v

    @property
    def is_delimited(self) -> bool:
        return self.delimiter is not None
