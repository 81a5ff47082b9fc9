"""Infrastructure adapters (input streams)."""

from uniqcount.infrastructure.input_source import (
    STDIN_PATH,
    decode_lines,
    open_lines,
    stdin_is_interactive,
)

__all__ = [
    "STDIN_PATH",
    "decode_lines",
    "open_lines",
    "stdin_is_interactive",
]
