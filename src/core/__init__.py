"""Core -- pure functions for content checksums."""

from __future__ import annotations

from src.core.checksum import (
    calculate_crc32,
    compute_checksum,
    encode_big_endian,
    format_checksum,
    verify_checksum,
)

__all__ = [
    "calculate_crc32",
    "compute_checksum",
    "encode_big_endian",
    "format_checksum",
    "verify_checksum",
]
