"""Base64 CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from .. import base64_codec
from ..exceptions import CodecError
from ._utils.formatting import print_error, print_stats, print_success
from .main import main


def _read_text(text: str | None) -> str:
    if text is None or text == "-":
        return click.get_text_stream("stdin").read()
    return text


@main.group("base64")
def base64_group() -> None:
    """Base64 encoding and decoding.

    \b
    Examples:
        norytools base64 encode "hello world"
        norytools base64 encode --file image.png --wrap 76
        norytools base64 decode aGVsbG8gd29ybGQ=
        echo aGVsbG8 | norytools base64 decode -
    """
    pass


@base64_group.command("encode")
@click.argument("text", required=False)
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Encode the raw bytes of a file instead of TEXT.",
)
@click.option("--url-safe", is_flag=True, help="Use - and _ instead of + and /")
@click.option("--no-padding", is_flag=True, help="Strip trailing = padding")
@click.option("--wrap", type=click.IntRange(min=0), default=0, help="Wrap lines at N characters")
def encode_command(
    text: str | None, file_path: Path | None, url_safe: bool, no_padding: bool, wrap: int
) -> None:
    """Encode TEXT (or stdin) to Base64."""
    try:
        if file_path is not None:
            encoded = base64_codec.encode_file(file_path)
        else:
            encoded = base64_codec.encode(
                _read_text(text), url_safe=url_safe, padding=not no_padding
            )
    except CodecError as e:
        print_error(str(e))
        raise SystemExit(1) from None
    click.echo(base64_codec.format_lines(encoded, wrap))


@base64_group.command("decode")
@click.argument("data", required=False)
@click.option("--url-safe", is_flag=True, help="Input uses - and _ instead of + and /")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write decoded bytes to this file.",
)
def decode_command(data: str | None, url_safe: bool, output: Path | None) -> None:
    """Decode Base64 DATA (or stdin)."""
    try:
        if output is not None:
            base64_codec.decode_to_file(_read_text(data), output, url_safe=url_safe)
            print_success(f"Wrote {output}")
            return
        click.echo(base64_codec.decode(_read_text(data), url_safe=url_safe))
    except CodecError as e:
        print_error(str(e))
        raise SystemExit(1) from None


@base64_group.command("validate")
@click.argument("data", required=False)
def validate_command(data: str | None) -> None:
    """Check that DATA (or stdin) is valid Base64."""
    text = _read_text(data)
    if not base64_codec.is_valid(text):
        print_error("Invalid Base64 input")
        raise SystemExit(1)
    sizes = base64_codec.calculate_size(text)
    print_success("Valid Base64")
    print_stats({"Encoded length": sizes["encoded"], "Decoded bytes": sizes["decoded"]}, "Size")
