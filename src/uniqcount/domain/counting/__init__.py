"""Counting domain: frequency tables and their ranking."""

from uniqcount.domain.counting.exceptions import (
    InvalidDelimiterError,
    InvalidTargetCharacterError,
)
from uniqcount.domain.counting.frequency_counter import (
    FrequencyCounter,
    count_character,
    count_lines,
)
from uniqcount.domain.counting.frequency_table import FrequencyTable
from uniqcount.domain.counting.ranking import rank
from uniqcount.domain.counting.value_objects import (
    CountMode,
    OutputFormat,
    RankedEntry,
)

__all__ = [
    "CountMode",
    "FrequencyCounter",
    "FrequencyTable",
    "InvalidDelimiterError",
    "InvalidTargetCharacterError",
    "OutputFormat",
    "RankedEntry",
    "count_character",
    "count_lines",
    "rank",
]
