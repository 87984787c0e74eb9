"""UUIDv4 generation and validation."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass

UUID_PATTERN = re.compile(
    r"([0-9a-f]{8})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{12})", re.IGNORECASE
)
# Leading label such as "urn:" or "id:"
_PREFIX_PATTERN = re.compile(r"^[a-zA-Z]+:")
_UNDASHED_LENGTH = 32


@dataclass
class UUIDValidationResult:
    is_valid: bool
    version: int | None = None
    error: str | None = None


def generate(uppercase: bool = False, no_dashes: bool = False, prefix: str = "") -> str:
    """Generate a random version 4 UUID string.

    Args:
        uppercase: Use upper-case hex digits.
        no_dashes: Drop the four dashes (32 hex digits).
        prefix: Text prepended verbatim.
    """
    value = uuid.uuid4().hex if no_dashes else str(uuid.uuid4())
    if uppercase:
        value = value.upper()
    return f"{prefix}{value}"


def generate_many(
    count: int, uppercase: bool = False, no_dashes: bool = False, prefix: str = ""
) -> list[str]:
    return [generate(uppercase, no_dashes, prefix) for _ in range(count)]


def validate_uuid(value: str) -> UUIDValidationResult:
    """Check that `value` is a version 4, RFC 4122 variant UUID.

    An alphabetic `label:` prefix is ignored and the 32-digit form without
    dashes is accepted.
    """
    cleaned = _PREFIX_PATTERN.sub("", value)
    if len(cleaned) == _UNDASHED_LENGTH:
        cleaned = "-".join(
            (cleaned[:8], cleaned[8:12], cleaned[12:16], cleaned[16:20], cleaned[20:])
        )

    if not UUID_PATTERN.fullmatch(cleaned):
        return UUIDValidationResult(is_valid=False, error="Invalid UUID format")

    version = int(cleaned[14], 16)
    if version != 4:
        return UUIDValidationResult(is_valid=False, version=version, error="Not a version 4 UUID")

    # Variant bits 10xx live in the first digit of the fourth group
    if int(cleaned[19], 16) & 0x8 != 0x8:
        return UUIDValidationResult(is_valid=False, version=version, error="Invalid UUID variant")

    return UUIDValidationResult(is_valid=True, version=version)
