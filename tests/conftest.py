"""Shared test fixtures for property file checksums."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from structlog.stdlib import ProcessorFormatter

from src.models.file import File
from src.models.file_category import FileCategory

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def property_file() -> File:
    """Provide an empty file with the PROPERTY category."""
    file = File()
    file.set_category(FileCategory.PROPERTY)
    return file


@pytest.fixture
def image_file() -> File:
    """Provide an empty file with the IMAGE category."""
    file = File()
    file.set_category(FileCategory.IMAGE)
    return file


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run from an empty directory with no config variables set."""
    for name in ("LOG_LEVEL", "JSON_LOGS", "DEFAULT_CATEGORY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Remove the handler installed by configure_logging and restore the root level."""
    level = logging.getLogger().level
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
