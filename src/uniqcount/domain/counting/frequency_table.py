"""Frequency table of records."""

from __future__ import annotations

from collections import Counter

from uniqcount.domain.counting.ranking import rank
from uniqcount.domain.counting.value_objects import RankedEntry


class FrequencyTable(Counter[str]):
    """Mapping from record to the number of times it occurred.

    Only ever holds positive counts. Compares equal to a plain dict with the
    same content.
    """

    def add(self, record: str) -> None:
        self[record] += 1

    def ranked(self) -> list[RankedEntry]:
        return rank(self)
