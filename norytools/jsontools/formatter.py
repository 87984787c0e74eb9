"""Beautify and minify JSON text."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass

from ..exceptions import JsonParseError
from ..nodes import JsonValue
from .parser import parse

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


@dataclass
class FormatTimings:
    """Milliseconds spent in each formatting step."""

    parse_time: float
    format_time: float


@dataclass
class FormatResult:
    """Result of format_json().

    On failure `formatted` holds the original text unchanged and `error`
    carries the parser message.
    """

    formatted: str
    error: str | None = None
    performance: FormatTimings | None = None


def serialize(value: JsonValue, indent: int = DEFAULT_INDENT) -> str:
    """Serialize a parsed tree.

    indent 0 gives a single line with no spaces between tokens; a positive
    indent pretty-prints with that many spaces per level.

    Raises:
        ValueError: If the tree holds NaN or infinite floats, which have no
            JSON form. parse() never produces them.
    """
    if indent <= 0:
        return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=False, allow_nan=False, indent=indent)


def format_json(text: str, indent: int = DEFAULT_INDENT) -> FormatResult:
    """Validate text and re-serialize it with the given indentation.

    Repeated keys collapse to their last value and keep the position of
    their first occurrence, so formatting is lossy for such input.
    Formatting already formatted output with the same indent is a no-op.
    """
    parse_start = time.perf_counter()
    try:
        parsed = parse(text)
    except JsonParseError as e:
        return FormatResult(formatted=text, error=e.message)
    parse_time = (time.perf_counter() - parse_start) * 1000

    format_start = time.perf_counter()
    try:
        formatted = serialize(parsed, indent)
    except (ValueError, TypeError, RecursionError) as e:
        logger.error("JSON formatting error: %s", e)
        return FormatResult(formatted=text, error=f"Formatting failed: {e}")
    format_time = (time.perf_counter() - format_start) * 1000

    logger.debug("Formatted %d chars in %.2fms (indent=%d)", len(text), format_time, indent)
    return FormatResult(
        formatted=formatted,
        performance=FormatTimings(parse_time=parse_time, format_time=format_time),
    )


def beautify(text: str) -> FormatResult:
    return format_json(text, DEFAULT_INDENT)


def minify(text: str) -> FormatResult:
    return format_json(text, 0)
