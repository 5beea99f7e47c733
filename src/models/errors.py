"""Exceptions raised by file content and checksum operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.models.file_category import FileCategory


class FileContentError(Exception):
    """Base class for file content and checksum errors."""


class InvalidContentError(FileContentError):
    """Raised when content passed to append is absent or malformed."""


class WrongCategoryError(FileContentError):
    """Raised when content is appended to a file that is not a PROPERTY file."""

    def __init__(self, category: FileCategory | None) -> None:
        self.category = category
        label = category.value if category is not None else "unset"
        super().__init__(f"cannot append content to a file with category '{label}'")


class EmptyBytesArrayError(FileContentError):
    """Raised when a CRC32 checksum is requested over zero bytes."""
