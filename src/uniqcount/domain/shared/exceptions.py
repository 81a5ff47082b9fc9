"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
whole package. All raised errors inherit from UniqcountError so the CLI can
map them to exit codes and diagnostics in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DELIMITER = "INVALID_DELIMITER"
    INVALID_TARGET_CHARACTER = "INVALID_TARGET_CHARACTER"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"

    # Input Errors
    INPUT_UNAVAILABLE = "INPUT_UNAVAILABLE"
    INPUT_DECODING_FAILED = "INPUT_DECODING_FAILED"
    INTERACTIVE_INPUT = "INTERACTIVE_INPUT"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class UniqcountError(Exception):
    """Base exception for all uniqcount errors.

    Attributes
    ----------
    message
        One-line diagnostic printed after "Error: "
    code
        Stable error code, included in the log record
    details
        Extra context for the log record, never printed
    exit_code
        Process exit status the CLI ends with
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def log_line(self) -> str:
        """Render the error for the log, details included."""
        context = " ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"{self.message} [{self.code.value}] {context}".rstrip()


class ValidationError(UniqcountError):
    """Raised when an option or argument value is not acceptable."""

    exit_code = 2

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConfigurationError(ValidationError):
    """Raised when UNIQCOUNT_ environment settings cannot be parsed."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__(
            message="Invalid configuration: " + "; ".join(problems),
            code=ErrorCode.INVALID_CONFIGURATION,
            details={"problems": problems},
        )


class InputError(UniqcountError):
    """Raised when the input stream cannot be opened or read."""


class InputUnavailableError(InputError):
    """Raised when the input file is missing or cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            message=f"Cannot read '{path}': {reason}",
            code=ErrorCode.INPUT_UNAVAILABLE,
            details={"path": path, "reason": reason},
        )
        self.path = path


class InputDecodingError(InputError):
    """Raised when an input line is not valid text in the expected encoding."""

    def __init__(self, source: str, line_number: int, encoding: str) -> None:
        super().__init__(
            message=f"Line {line_number} of '{source}' is not valid {encoding}",
            code=ErrorCode.INPUT_DECODING_FAILED,
            details={
                "source": source,
                "line_number": line_number,
                "encoding": encoding,
            },
        )
        self.line_number = line_number


class InteractiveInputError(InputError):
    """Raised instead of blocking on a terminal with nothing piped in."""

    exit_code = 2

    def __init__(self) -> None:
        super().__init__(
            message="Standard input is an interactive terminal",
            code=ErrorCode.INTERACTIVE_INPUT,
        )
