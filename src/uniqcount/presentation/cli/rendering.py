"""Output rendering for ranked entries.

Two formats are supported: an aligned table (rich) and a delimited text
stream. Delimited output does not quote or escape records that contain the
delimiter.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.control import escape_control_codes
from rich.table import Table
from rich.text import Text

from uniqcount.domain.counting import CountMode, OutputFormat, RankedEntry

DELIMITED_HEADER = ("word", "count")
COUNT_HEADER = "Count"

# Padding (1 each side per cell) plus the column separator
_TABLE_CHROME_WIDTH = 5


def record_text(record: str) -> Text:
    """Printable cell for a record.

    Tabs are expanded and control codes such as \\r are shown escaped, so the
    cell is exactly as wide as it prints and distinct records stay distinct.
    """
    # Text() keeps records like "[red]" from being parsed as markup
    text = Text(escape_control_codes(record))
    text.expand_tabs()
    return text


def build_table(entries: Sequence[RankedEntry], mode: CountMode) -> Table:
    table = Table(
        box=box.MINIMAL,
        show_edge=False,
        header_style="bold",
    )
    table.add_column(mode.label, justify="left", no_wrap=True, overflow="ignore")
    table.add_column(COUNT_HEADER, justify="right", no_wrap=True)

    for entry in entries:
        table.add_row(record_text(entry.record), str(entry.count))

    return table


def natural_table_width(entries: Sequence[RankedEntry], mode: CountMode) -> int:
    """Width needed to print the table without folding any cell."""
    record_width = max(
        [cell_len(mode.label), *(record_text(e.record).cell_len for e in entries)],
    )
    count_width = max(
        [cell_len(COUNT_HEADER), *(len(str(e.count)) for e in entries)],
    )
    return record_width + count_width + _TABLE_CHROME_WIDTH


def render_table(
    entries: Sequence[RankedEntry],
    mode: CountMode,
    console: Console | None = None,
) -> None:
    table = build_table(entries, mode)
    if console is None:
        console = Console()
    # Widen the console instead of letting rich fold long records
    width = natural_table_width(entries, mode)
    if width > console.width:
        console.width = width
    console.print(table, crop=False)


def format_delimited(entries: Sequence[RankedEntry], delimiter: str) -> list[str]:
    lines = [delimiter.join(DELIMITED_HEADER)]
    lines.extend(f"{entry.record}{delimiter}{entry.count}" for entry in entries)
    return lines


def render_delimited(
    entries: Sequence[RankedEntry],
    delimiter: str,
    stream: TextIO,
) -> None:
    for line in format_delimited(entries, delimiter):
        stream.write(line)
        stream.write("\n")


def render(
    entries: Sequence[RankedEntry],
    output_format: OutputFormat,
    mode: CountMode,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write ``entries`` to stdout in the selected format."""
    if output_format.is_delimited:
        render_delimited(
            entries,
            output_format.delimiter,  # type: ignore[arg-type]
            stream or sys.stdout,
        )
    else:
        render_table(entries, mode, console)
