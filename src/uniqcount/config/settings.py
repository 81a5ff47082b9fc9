"""Runtime settings loaded from environment variables.

Settings only cover ambient behaviour (logging, input decoding). The output
format is controlled exclusively by command-line options.

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import codecs
import logging
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uniqcount.domain.shared import ConfigurationError

from ._utils import resolve_env_file_path


class Settings(BaseSettings):
    """uniqcount configuration.

    Values are loaded from:
    1. OS environment variables with the UNIQCOUNT_ prefix (highest priority)
    2. The file named by UNIQCOUNT_ENV_FILE
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="UNIQCOUNT_",
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging goes to stderr, stdout is reserved for results
    log_level: str = "WARNING"

    # Encoding used to decode input lines (strict)
    input_encoding: str = "utf-8"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @field_validator("input_encoding")
    @classmethod
    def _validate_input_encoding(cls, v: str) -> str:
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            msg = f"Unknown encoding: {v}"
            raise ValueError(msg) from e


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings.

    Raises
    ------
    ConfigurationError
        If an UNIQCOUNT_ variable holds an unusable value
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(_describe_errors(e)) from e


def _describe_errors(error: ValidationError) -> list[str]:
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        msg = err["msg"].removeprefix("Value error, ")
        problems.append(f"UNIQCOUNT_{field.upper()}: {msg}")
    return problems


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
