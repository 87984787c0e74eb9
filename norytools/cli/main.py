"""Main CLI entry point for norytools."""

import logging

import click


def get_version() -> str:
    """Get the current version."""
    try:
        from norytools import __version__

        return __version__
    except ImportError:
        return "unknown"


@click.group()
@click.version_option(version=get_version(), prog_name="norytools")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """norytools - JSON, Base64 and UUID developer utilities.

    \b
    Examples:
        norytools json format data.json          Pretty-print a file
        norytools json analyze data.json         Show structure statistics
        norytools json filter data.json -q ada   Keep values containing "ada"
        norytools base64 encode "hello"          Encode text
        norytools uuid generate -n 5             Generate five UUIDs
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


# Import subcommands - these register themselves with the main group
def _register_commands() -> None:
    """Register all subcommand groups."""
    from . import (
        base64_commands,  # noqa: F401
        json_commands,  # noqa: F401
        uuid_commands,  # noqa: F401
    )


_register_commands()

if __name__ == "__main__":
    main()
