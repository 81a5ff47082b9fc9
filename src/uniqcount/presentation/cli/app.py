"""uniqcount CLI applications using Typer.

Two console scripts share one pipeline:

- ``uniqcount``: tally identical lines, an efficient ``sort | uniq -c``
- ``charcount``: tally how many lines contain a character N times

Both print counts sorted descending, as a table or as delimited text.
"""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from uniqcount import __version__
from uniqcount.config import Settings, get_settings
from uniqcount.domain.counting import CountMode, FrequencyCounter, OutputFormat
from uniqcount.domain.shared import (
    ConfigurationError,
    InputError,
    InteractiveInputError,
    UniqcountError,
)
from uniqcount.infrastructure import STDIN_PATH, open_lines
from uniqcount.presentation.cli.rendering import render

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

DEFAULT_TARGET_CHARACTER = ","

uniqcount_app = typer.Typer(
    name="uniqcount",
    help="Count identical lines, sorted by descending count.",
    add_completion=False,
)

charcount_app = typer.Typer(
    name="charcount",
    help="Count lines by how often they contain a character.",
    add_completion=False,
)


def configure_logging(settings: Settings) -> None:
    """Configure logging for a CLI run.

    Logs go to stderr so that stdout only carries results.
    """
    log_level = getattr(logging, settings.log_level, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Override any existing config
    )
    logging.getLogger("uniqcount").setLevel(log_level)


def _single_character(value: str | None) -> str | None:
    if value is not None and len(value) != 1:
        msg = f"must be a single character, got {value!r}"
        raise typer.BadParameter(msg)
    return value


def _print_error(error: UniqcountError) -> None:
    err_console.print(f"[red]Error: {escape(error.message)}[/red]", soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"uniqcount {__version__}")
        raise typer.Exit()


FILE_ARGUMENT = typer.Argument(
    STDIN_PATH,
    help="The file to read, use - to read from stdin (must not be a tty)",
    show_default=True,
)
DELIMITER_OPTION = typer.Option(
    None,
    "--delimiter",
    "-d",
    callback=_single_character,
    help="Output delimiter, defaults to a human readable table",
)
VERSION_OPTION = typer.Option(
    False,
    "--version",
    callback=_version_callback,
    is_eager=True,
    help="Show the version and exit.",
)


def run_count(
    ctx: typer.Context,
    file: str,
    mode: CountMode,
    delimiter: str | None,
    target: str | None = None,
) -> None:
    """Read ``file``, count it and print the ranked result."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        # logging is not configured yet, so the diagnostic is all there is
        _print_error(e)
        raise typer.Exit(e.exit_code) from e
    configure_logging(settings)

    output_format = OutputFormat(delimiter)
    counter = FrequencyCounter(mode, target)

    try:
        with open_lines(file, settings.input_encoding) as lines:
            table = counter.count(lines)
    except InteractiveInputError as e:
        logger.info("Refusing to read from an interactive terminal")
        typer.echo(ctx.get_help())
        raise typer.Exit(e.exit_code) from None
    except InputError as e:
        logger.error(e.log_line())
        _print_error(e)
        raise typer.Exit(e.exit_code) from e

    logger.info("Read %d lines, %d distinct records", table.total(), len(table))
    render(table.ranked(), output_format, mode)


@uniqcount_app.command()
def uniqcount(
    ctx: typer.Context,
    file: str = FILE_ARGUMENT,
    delimiter: str | None = DELIMITER_OPTION,
    version: bool = VERSION_OPTION,
) -> None:
    """Efficient version of "sort | uniq -c" with some output options.

    Output order is word, count. Sorted by descending count.
    """
    run_count(ctx, file, CountMode.LINE, delimiter)


@charcount_app.command()
def charcount(
    ctx: typer.Context,
    file: str = FILE_ARGUMENT,
    delimiter: str | None = DELIMITER_OPTION,
    char: str = typer.Option(
        DEFAULT_TARGET_CHARACTER,
        "--char",
        "-c",
        callback=_single_character,
        help="The character to count on every line",
    ),
    version: bool = VERSION_OPTION,
) -> None:
    """Count how many lines contain a character 0, 1, 2, ... times.

    Output order is occurrences, count. Sorted by descending count.
    """
    run_count(ctx, file, CountMode.CHARACTER, delimiter, target=char)


def cli() -> None:
    """Entry point for the uniqcount script."""
    uniqcount_app()


def charcount_cli() -> None:
    """Entry point for the charcount script."""
    charcount_app()


if __name__ == "__main__":
    cli()
