"""Custom exceptions for norytools.

All exceptions inherit from NoryToolsError, so callers can catch every
norytools failure in one place while still telling the categories apart.

Example:
    from norytools import analyze, JsonParseError, NoryToolsError

    try:
        report = analyze(text)
    except JsonParseError as e:
        print(f"Fix the input first: {e}")
    except NoryToolsError as e:
        print(f"norytools error: {e}")
"""

from __future__ import annotations

from typing import Any


class NoryToolsError(Exception):
    """Base exception for all norytools errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class JsonParseError(NoryToolsError, ValueError):
    """Raised when text is not valid JSON.

    The message is the one reported by the underlying parser, unchanged.

    Example:
        JsonParseError("Expecting value: line 1 column 1 (char 0)")
    """

    pass


class InvalidPathError(NoryToolsError):
    """Raised when a dotted path cannot be resolved against a JSON value.

    This includes:
    - Stepping into a scalar
    - Missing object keys
    - Out-of-range or non-numeric array indices
    """

    def __init__(self, message: str = "Invalid path", details: dict[str, Any] | None = None):
        super().__init__(message, details)


class FilterError(NoryToolsError):
    """Raised when the filter pipeline fails at any stage.

    The message is always the same; the failing stage is not exposed.
    """

    def __init__(
        self,
        message: str = "Invalid JSON or filter options",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)


class AnalysisError(NoryToolsError):
    """Raised when the analyzer itself fails on an already-parsed tree.

    Input has been parsed successfully by the time this can fire, so it
    points at a defect in the analyzer rather than at user input.
    """

    def __init__(self, message: str = "Invalid JSON format", details: dict[str, Any] | None = None):
        super().__init__(message, details)


class ConfigurationError(NoryToolsError):
    """Raised when norytools is misconfigured.

    Example:
        ConfigurationError(
            "Invalid cycle detection mode 'foo'",
            details={"valid_modes": ["global", "ancestor"]}
        )
    """

    pass


class FileLoadError(NoryToolsError):
    """Raised when a JSON file cannot be loaded.

    This includes:
    - Files above the configured size cap
    - Unreadable files
    - Files whose content is not valid JSON
    """

    pass


class CodecError(NoryToolsError):
    """Raised when Base64 encoding or decoding fails."""

    pass
