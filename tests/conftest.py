"""Root pytest configuration.

Test Structure:
    tests/
    └── uniqcount/
        ├── unit/              # Fast, isolated tests per layer
        │   ├── config/
        │   ├── domain/
        │   ├── infrastructure/
        │   └── presentation/
        └── integration/       # CLI runs end to end via CliRunner
            └── cli/
"""

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from uniqcount.config import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with default settings and a fresh settings cache."""
    for key in list(os.environ):
        if key.startswith("UNIQCOUNT_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the logging.basicConfig(force=True) done by each CLI run."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[str | bytes, str], Path]:
    """Write text or raw bytes to a file under tmp_path and return its path."""

    def _write(content: str | bytes, name: str = "input.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
