"""File category model."""

from __future__ import annotations

from enum import StrEnum


class FileCategory(StrEnum):
    """Kind of payload a file holds. Only PROPERTY files accept text content."""

    PROPERTY = "property"
    IMAGE = "image"
