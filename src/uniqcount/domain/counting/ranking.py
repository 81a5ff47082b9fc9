"""Ordering of frequency table entries for output."""

from __future__ import annotations

from collections.abc import Mapping

from uniqcount.domain.counting.value_objects import RankedEntry


def rank(table: Mapping[str, int]) -> list[RankedEntry]:
    """Sort entries by count descending.

    Equal counts are ordered by record ascending so that output is
    reproducible between runs.
    """
    ordered = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    return [RankedEntry(record=record, count=count) for record, count in ordered]
