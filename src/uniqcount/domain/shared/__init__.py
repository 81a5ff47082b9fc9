"""Shared domain components.

This module exports the exception hierarchy used across the package.
"""

from uniqcount.domain.shared.exceptions import (
    ConfigurationError,
    ErrorCode,
    InputDecodingError,
    InputError,
    InputUnavailableError,
    InteractiveInputError,
    UniqcountError,
    ValidationError,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "UniqcountError",
    # Exception categories
    "ValidationError",
    "ConfigurationError",
    "InputError",
    "InputUnavailableError",
    "InputDecodingError",
    "InteractiveInputError",
]
