"""Streaming frequency counter."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from uniqcount.domain.counting.exceptions import InvalidTargetCharacterError
from uniqcount.domain.counting.frequency_table import FrequencyTable
from uniqcount.domain.counting.value_objects import CountMode

logger = logging.getLogger(__name__)


class FrequencyCounter:
    """Build a FrequencyTable from a sequence of lines.

    In line mode every line is its own record. In character mode the record
    of a line is the decimal string of how often ``target`` occurs in it, so
    the resulting table is a distribution of per-line hit counts.
    """

    def __init__(
        self,
        mode: CountMode = CountMode.LINE,
        target: str | None = None,
    ) -> None:
        if mode is CountMode.CHARACTER and (target is None or len(target) != 1):
            raise InvalidTargetCharacterError(target)
        self.mode = mode
        self.target = target

    def record_for(self, line: str) -> str:
        if self.mode is CountMode.CHARACTER:
            return str(line.count(self.target))  # type: ignore[arg-type]
        return line

    def count(self, lines: Iterable[str]) -> FrequencyTable:
        """Consume ``lines`` once, in order.

        Any error raised while iterating (I/O or decoding) propagates and no
        table is returned.
        """
        table = FrequencyTable()
        for line in lines:
            table.add(self.record_for(line))

        logger.debug(
            "Counted %d lines into %d distinct records (mode=%s)",
            table.total(),
            len(table),
            self.mode.value,
        )
        return table


def count_lines(lines: Iterable[str]) -> FrequencyTable:
    return FrequencyCounter().count(lines)


def count_character(lines: Iterable[str], target: str) -> FrequencyTable:
    return FrequencyCounter(CountMode.CHARACTER, target).count(lines)
