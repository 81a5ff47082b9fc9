"""Counting domain exceptions."""

from uniqcount.domain.shared.exceptions import ErrorCode, ValidationError


class InvalidDelimiterError(ValidationError):
    """Raised when the output delimiter is not exactly one character."""

    def __init__(self, delimiter: str) -> None:
        super().__init__(
            message=f"Delimiter must be a single character, got {delimiter!r}",
            code=ErrorCode.INVALID_DELIMITER,
            details={"delimiter": delimiter},
        )


class InvalidTargetCharacterError(ValidationError):
    """Raised when the character to count is missing or not one character."""

    def __init__(self, target: str | None) -> None:
        super().__init__(
            message=f"Character to count must be a single character, got {target!r}",
            code=ErrorCode.INVALID_TARGET_CHARACTER,
            details={"target": target},
        )
