"""UUID CLI commands."""

from __future__ import annotations

import click

from .. import uuids
from ._utils.formatting import print_error, print_success
from .main import main

MAX_BATCH = 1000


@main.group("uuid")
def uuid_group() -> None:
    """UUIDv4 generation and validation.

    \b
    Examples:
        norytools uuid generate
        norytools uuid generate -n 10 --uppercase --no-dashes
        norytools uuid validate 550e8400-e29b-41d4-a716-446655440000
    """
    pass


@uuid_group.command("generate")
@click.option("--count", "-n", type=click.IntRange(1, MAX_BATCH), default=1, show_default=True)
@click.option("--uppercase", "-u", is_flag=True, help="Upper-case hex digits")
@click.option("--no-dashes", is_flag=True, help="Omit the dashes")
@click.option("--prefix", default="", help="Text to prepend to every UUID")
def generate_command(count: int, uppercase: bool, no_dashes: bool, prefix: str) -> None:
    """Generate COUNT random version 4 UUIDs, one per line."""
    for value in uuids.generate_many(count, uppercase, no_dashes, prefix):
        click.echo(value)


@uuid_group.command("validate")
@click.argument("value")
def validate_command(value: str) -> None:
    """Check that VALUE is a version 4 UUID."""
    result = uuids.validate_uuid(value)
    if not result.is_valid:
        print_error(result.error or "Invalid UUID format")
        raise SystemExit(1)
    print_success(f"Valid UUID (version {result.version})")
