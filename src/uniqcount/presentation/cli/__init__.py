"""Command-line interface for uniqcount."""

from uniqcount.presentation.cli.app import (
    charcount_app,
    charcount_cli,
    cli,
    uniqcount_app,
)

__all__ = [
    "charcount_app",
    "charcount_cli",
    "cli",
    "uniqcount_app",
]
