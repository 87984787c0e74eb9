"""Base64 encoding and decoding helpers.

Text is encoded as UTF-8 before Base64, so any Unicode string round-trips.
"""

from __future__ import annotations

import base64
import binascii
import re
from pathlib import Path

from .exceptions import CodecError

_WHITESPACE_PATTERN = re.compile(r"\s+")


def encode(text: str, url_safe: bool = False, padding: bool = True) -> str:
    """Encode text to Base64.

    Args:
        text: Text to encode.
        url_safe: Use `-` and `_` instead of `+` and `/`.
        padding: Keep trailing `=` padding.
    """
    try:
        raw = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CodecError("Error encoding text to Base64") from e
    encoder = base64.urlsafe_b64encode if url_safe else base64.b64encode
    encoded = encoder(raw).decode("ascii")
    if not padding:
        encoded = encoded.rstrip("=")
    return encoded


def decode_bytes(data: str, url_safe: bool = False) -> bytes:
    """Decode Base64 to raw bytes, restoring missing padding.

    Raises:
        CodecError: If the input is not valid Base64.
    """
    cleaned = _WHITESPACE_PATTERN.sub("", data)
    if url_safe:
        cleaned = cleaned.replace("-", "+").replace("_", "/")
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CodecError("Invalid Base64 input") from e


def decode(data: str, url_safe: bool = False) -> str:
    """Decode Base64 to text.

    Raises:
        CodecError: If the input is not Base64 or does not decode to UTF-8.
    """
    raw = decode_bytes(data, url_safe)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CodecError("Invalid Base64 input", details={"reason": "not UTF-8 text"}) from e


def format_lines(data: str, line_length: int) -> str:
    """Re-wrap Base64 text into lines of at most `line_length` characters."""
    joined = data.replace("\n", "")
    if line_length <= 0 or not joined:
        return data
    return "\n".join(joined[i : i + line_length] for i in range(0, len(joined), line_length))


def is_valid(data: str) -> bool:
    """Whether `data` decodes as standard Base64, ignoring whitespace."""
    try:
        decode_bytes(data)
    except CodecError:
        return False
    return True


def encode_file(path: str | Path) -> str:
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def decode_to_file(data: str, path: str | Path, url_safe: bool = False) -> Path:
    target = Path(path)
    target.write_bytes(decode_bytes(data, url_safe))
    return target


def calculate_size(data: str) -> dict[str, int]:
    """Encoded length and estimated decoded byte count, ignoring whitespace."""
    cleaned = _WHITESPACE_PATTERN.sub("", data)
    return {"encoded": len(cleaned), "decoded": len(cleaned) * 3 // 4}
