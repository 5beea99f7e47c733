"""CLI command implementations for property file checksums."""

from __future__ import annotations

import sys

import click

from src.core.checksum import compute_checksum, format_checksum, verify_checksum
from src.models.config import Config
from src.models.errors import FileContentError
from src.models.file import File
from src.models.file_category import FileCategory
from src.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

_CATEGORY_CHOICE = click.Choice([category.value for category in FileCategory])


def _get_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()


def _setup(category: str | None) -> FileCategory:
    """Configure logging and resolve the category to use."""
    config = _get_config()
    configure_logging(config.log_level, json_output=config.json_logs)
    return FileCategory(category) if category else config.default_category


def _build_file(category: FileCategory, texts: tuple[str, ...]) -> File:
    """Create a file with the given category and append each text in order."""
    file = File()
    file.set_category(category)
    for text in texts:
        file.append_content(text)
    return file


def _parse_checksum(ctx: click.Context, param: click.Parameter, value: str) -> int:
    """Parse a checksum given in decimal or 0x-prefixed hex."""
    try:
        parsed = int(value, 16) if value.lower().startswith("0x") else int(value)
    except ValueError:
        msg = f"'{value}' is not a decimal or 0x-prefixed hex integer"
        raise click.BadParameter(msg) from None
    if parsed < 0 or parsed > 0xFFFFFFFF:
        msg = "checksum must be an unsigned 32-bit value"
        raise click.BadParameter(msg)
    return parsed


@click.command()
@click.option("--category", type=_CATEGORY_CHOICE, default=None, help="File category")
@click.argument("texts", nargs=-1)
def checksum(category: str | None, texts: tuple[str, ...]) -> None:
    """Compute the CRC32 checksum of TEXTS appended to a file."""
    resolved = _setup(category)

    try:
        file = _build_file(resolved, texts)
        value = compute_checksum(file)
    except FileContentError as exc:
        click.echo(f"[ERROR] {exc}")
        sys.exit(1)

    logger.info("checksum_reported", category=resolved.value, checksum=value)
    click.echo("[SUCCESS] Checksum computed")
    click.echo(f"  category: {resolved.value}")
    click.echo(f"  content: {''.join(texts)}")
    click.echo(f"  length: {file.content_length}")
    click.echo(f"  crc32: {value}")
    click.echo(f"  hex: {format_checksum(value)}")


@click.command()
@click.option(
    "--expected",
    required=True,
    callback=_parse_checksum,
    help="Expected checksum (decimal or 0x-prefixed hex)",
)
@click.option("--category", type=_CATEGORY_CHOICE, default=None, help="File category")
@click.argument("texts", nargs=-1)
def verify(expected: int, category: str | None, texts: tuple[str, ...]) -> None:
    """Verify that TEXTS appended to a file match an expected checksum."""
    resolved = _setup(category)

    try:
        file = _build_file(resolved, texts)
        matches = verify_checksum(file, expected)
        actual = compute_checksum(file)
    except FileContentError as exc:
        click.echo(f"[ERROR] {exc}")
        sys.exit(1)

    if not matches:
        logger.warning("checksum_mismatch", expected=expected, actual=actual)
        click.echo(
            f"[ERROR] Checksum mismatch: expected {format_checksum(expected)}, "
            f"got {format_checksum(actual)}"
        )
        sys.exit(1)

    click.echo(f"[SUCCESS] Checksum matches ({format_checksum(actual)})")
