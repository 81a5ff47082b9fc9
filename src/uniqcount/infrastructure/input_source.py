"""Input selection and line decoding.

Lines are read as bytes and decoded one at a time so that an undecodable
line is reported with its line number and aborts the run.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import IO, Any

from uniqcount.domain.shared.exceptions import (
    InputDecodingError,
    InputUnavailableError,
    InteractiveInputError,
)

logger = logging.getLogger(__name__)

STDIN_PATH = "-"
_STDIN_NAME = "<stdin>"


def stdin_is_interactive(stream: object) -> bool:
    """Return True when ``stream`` is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def decode_lines(
    raw_lines: Iterable[bytes],
    encoding: str = "utf-8",
    source: str = _STDIN_NAME,
) -> Iterator[str]:
    """Yield each line without its ``\\n`` or ``\\r\\n`` terminator."""
    for line_number, raw in enumerate(raw_lines, start=1):
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            yield raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise InputDecodingError(source, line_number, encoding) from e


@contextmanager
def open_lines(
    path: str,
    encoding: str = "utf-8",
    stdin: IO[Any] | None = None,
) -> Iterator[Iterator[str]]:
    """Open ``path`` (or stdin for ``-``) and yield an iterator of lines.

    Parameters
    ----------
    path
        File to read, or ``-`` for standard input
    encoding
        Codec used to decode each line (strict)
    stdin
        Stream standing in for ``sys.stdin``; its binary buffer is read when
        it has one

    Raises
    ------
    InteractiveInputError
        Standard input was selected but is a terminal. Raised before reading.
    InputUnavailableError
        The file could not be opened.
    """
    if path == STDIN_PATH:
        stream = stdin if stdin is not None else sys.stdin
        if stdin_is_interactive(stream):
            raise InteractiveInputError()
        logger.debug("Reading from standard input")
        # Never close stdin, the interpreter owns it
        yield decode_lines(getattr(stream, "buffer", stream), encoding, _STDIN_NAME)
        return

    try:
        handle = open(path, "rb")  # noqa: SIM115
    except OSError as e:
        raise InputUnavailableError(path, e.strerror or str(e)) from e

    logger.debug("Reading from %s", path)
    with handle:
        yield decode_lines(handle, encoding, path)
