"""Pydantic data models for property file checksums."""

from src.models.config import Config
from src.models.errors import (
    EmptyBytesArrayError,
    FileContentError,
    InvalidContentError,
    WrongCategoryError,
)
from src.models.file import File
from src.models.file_category import FileCategory

__all__ = [
    "Config",
    "EmptyBytesArrayError",
    "File",
    "FileCategory",
    "FileContentError",
    "InvalidContentError",
    "WrongCategoryError",
]
