"""CLI entry point for property file checksums."""

from __future__ import annotations

import click

from src.cli.commands import checksum, verify


@click.group()
def cli() -> None:
    """Property file content checksums."""


cli.add_command(checksum)
cli.add_command(verify)
