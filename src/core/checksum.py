"""CRC32 checksum computation over file content."""

from __future__ import annotations

import zlib
from typing import TYPE_CHECKING

from src.models.errors import EmptyBytesArrayError
from src.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from src.models.file import File

logger = get_logger(__name__)


def calculate_crc32(data: bytes) -> int:
    """Calculate the CRC32 checksum of data as an unsigned 32-bit integer.

    Raises:
        EmptyBytesArrayError: data is empty.
    """
    if not data:
        msg = "cannot calculate CRC32 of an empty byte sequence"
        raise EmptyBytesArrayError(msg)
    return zlib.crc32(data) & 0xFFFFFFFF


def encode_big_endian(content: Sequence[str]) -> bytes:
    """Encode UTF-16 code units as two bytes each, most significant byte first."""
    return "".join(content).encode("utf-16-be", "surrogatepass")


def compute_checksum(record: File) -> int:
    """Compute the CRC32 checksum of a file's content.

    Empty content yields 0 without calling calculate_crc32. Otherwise the
    content is encoded big-endian and the CRC32 result is returned as is.

    Raises:
        EmptyBytesArrayError: calculate_crc32 was given an empty byte sequence.
    """
    content = record.get_content()
    if not content:
        logger.debug("checksum_skipped_empty_content")
        return 0

    data = encode_big_endian(content)
    checksum = calculate_crc32(data)
    logger.debug("checksum_computed", byte_length=len(data), checksum=checksum)
    return checksum


def verify_checksum(record: File, expected: int) -> bool:
    """Check a file's content against an expected checksum."""
    return compute_checksum(record) == expected


def format_checksum(value: int) -> str:
    """Render a checksum as zero-padded lowercase hex, e.g. 0x0000002a."""
    return f"0x{value:08x}"
