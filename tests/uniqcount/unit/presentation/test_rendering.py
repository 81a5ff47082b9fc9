"""Tests for table and delimited rendering."""

import io

from rich.console import Console

from uniqcount.domain.counting import CountMode, OutputFormat, count_lines, rank
from uniqcount.presentation.cli.rendering import (
    format_delimited,
    natural_table_width,
    record_text,
    render,
    render_delimited,
    render_table,
)

WORDS = ["word1", "word2", "word1", "word3", "word2", "word2"]


def _console(width: int = 80) -> Console:
    return Console(
        file=io.StringIO(),
        width=width,
        force_terminal=False,
        color_system=None,
    )


def _lines(console: Console) -> list[str]:
    return [line for line in console.file.getvalue().splitlines() if line.strip()]


class TestDelimited:
    """Test cases for delimited output."""

    def test_word_count_example(self):
        """Test header plus one line per entry, descending by count."""
        entries = count_lines(WORDS).ranked()

        assert format_delimited(entries, ",") == [
            "word,count",
            "word2,3",
            "word1,2",
            "word3,1",
        ]

    def test_empty_table_is_header_only(self):
        assert format_delimited([], ",") == ["word,count"]

    def test_delimiter_used_on_every_line(self):
        lines = format_delimited(rank({"a": 2, "b": 1}), "\t")

        assert lines == ["word\tcount", "a\t2", "b\t1"]

    def test_split_recovers_table(self):
        """Test that splitting on the delimiter gives back the counts."""
        table = count_lines(["x", "y y", "x", "z", "x", "z"])

        lines = format_delimited(table.ranked(), ";")
        parsed = dict(line.split(";") for line in lines[1:])

        assert {record: int(count) for record, count in parsed.items()} == table

    def test_delimiter_inside_record_is_not_escaped(self):
        """Test that records are written verbatim."""
        assert format_delimited(rank({"a,b": 1}), ",")[1] == "a,b,1"

    def test_render_delimited_writes_newline_terminated_lines(self):
        stream = io.StringIO()

        render_delimited(count_lines(WORDS).ranked(), ",", stream)

        assert stream.getvalue() == "word,count\nword2,3\nword1,2\nword3,1\n"


class TestTable:
    """Test cases for table output."""

    def test_header_and_rows_in_rank_order(self):
        console = _console()

        render_table(count_lines(WORDS).ranked(), CountMode.LINE, console)

        lines = _lines(console)
        assert "Word" in lines[0]
        assert "Count" in lines[0]
        assert set(lines[1].strip()) <= {"─", "┼", "╶", "╴"}
        assert [line.split()[0] for line in lines[2:]] == ["word2", "word1", "word3"]

    def test_vertical_separator_between_columns(self):
        console = _console()

        render_table(rank({"a": 1}), CountMode.LINE, console)

        assert "│" in _lines(console)[0]
        assert "│" in _lines(console)[2]

    def test_count_column_is_right_justified(self):
        """Test that counts of different widths end in the same column."""
        console = _console()

        render_table(rank({"many": 12345, "few": 7}), CountMode.LINE, console)

        lines = _lines(console)
        header, rows = lines[0], lines[2:]
        ends = {len(line.rstrip()) for line in [header, *rows]}
        assert len(ends) == 1

    def test_character_mode_header(self):
        console = _console()

        render_table(rank({"4": 3}), CountMode.CHARACTER, console)

        assert "Occurrences" in _lines(console)[0]

    def test_empty_table_is_header_only(self):
        """Test that an empty table prints header and separator only."""
        console = _console()

        render_table([], CountMode.LINE, console)

        lines = _lines(console)
        assert len(lines) == 2
        assert "Word" in lines[0]

    def test_long_records_are_not_folded(self):
        """Test that a record wider than the console stays on one line."""
        record = "x" * 150
        console = _console(width=40)

        render_table(rank({record: 1}), CountMode.LINE, console)

        assert any(record in line for line in _lines(console))

    def test_tab_separated_record_is_not_cut_off(self):
        """Test that tabs are counted at their printed width."""
        fields = ["abcdef"] * 8
        record = "\t".join(fields)
        console = _console(width=40)

        render_table(rank({record: 12345}), CountMode.LINE, console)

        row = _lines(console)[2]
        assert row.split("│")[0].split() == fields
        assert row.rstrip().endswith("12345")

    def test_control_codes_are_shown_escaped(self):
        """Test that a record with a carriage return stays distinguishable."""
        console = _console()

        render_table(rank({"a\rb": 2, "ab": 1}), CountMode.LINE, console)

        records = [line.split()[0] for line in _lines(console)[2:]]
        assert records == ["a\\rb", "ab"]

    def test_records_are_not_markup(self):
        console = _console()

        render_table(rank({"[bold]x[/bold]": 1}), CountMode.LINE, console)

        assert "[bold]x[/bold]" in console.file.getvalue()

    def test_natural_width(self):
        entries = rank({"abcdefghij": 100})

        assert natural_table_width(entries, CountMode.LINE) == 10 + 5 + 5
        assert natural_table_width([], CountMode.CHARACTER) == 11 + 5 + 5

    def test_natural_width_expands_tabs(self):
        """Test that a tab counts up to the next multiple of eight."""
        entries = rank({"ab\tc": 1})

        assert record_text("ab\tc").cell_len == 9
        assert natural_table_width(entries, CountMode.LINE) == 9 + 5 + 5


class TestRender:
    """Test cases for render() format dispatch."""

    def test_delimited_format(self):
        stream = io.StringIO()

        render(
            count_lines(WORDS).ranked(),
            OutputFormat(","),
            CountMode.LINE,
            stream=stream,
        )

        assert stream.getvalue().splitlines()[0] == "word,count"

    def test_table_format(self):
        console = _console()

        render(
            count_lines(WORDS).ranked(),
            OutputFormat(),
            CountMode.LINE,
            console=console,
        )

        assert "word2" in console.file.getvalue()
