"""Strict JSON parsing, validation and source-text heuristics.

Parsing goes through the standard library json module with NaN/Infinity
literals rejected, so the accepted grammar is plain RFC 8259 JSON.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any

from ..config import DuplicateKeyScope
from ..exceptions import JsonParseError
from ..nodes import JsonValue

# Comma followed only by whitespace before a closing brace/bracket.
# Runs on raw text, so commas inside string literals can match too.
TRAILING_COMMA_PATTERN = re.compile(r",[\s\n]*[}\]]")
LEADING_WHITESPACE_PATTERN = re.compile(r"^\s+")


@dataclass
class ValidationResult:
    """Outcome of validate()."""

    is_valid: bool
    error: str | None = None


def _parse_float(literal: str) -> float | None:
    # Literals beyond float range (1e400) become null, as JSON has no infinity
    value = float(literal)
    return value if math.isfinite(value) else None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def parse(text: str) -> JsonValue:
    """Parse JSON text.

    Raises:
        JsonParseError: If the text is not valid JSON. The message is the
            parser's own message.

    Number literals too large for a float (`1e400`) parse to None.
    """
    try:
        return json.loads(text, parse_float=_parse_float, parse_constant=_reject_constant)
    except RecursionError:
        raise JsonParseError("Maximum nesting depth exceeded") from None
    except (ValueError, TypeError) as e:
        raise JsonParseError(str(e)) from None


def validate(text: str) -> ValidationResult:
    """Check whether text parses as JSON.

    Examples:
        >>> validate("{}").is_valid
        True
        >>> validate("not json").error
        'Expecting value: line 1 column 1 (char 0)'
    """
    try:
        parse(text)
    except JsonParseError as e:
        return ValidationResult(is_valid=False, error=e.message)
    return ValidationResult(is_valid=True)


def detect_indentation(text: str) -> int:
    """Length of the leading whitespace on the first indented line.

    The first line is skipped since it holds the opening bracket. Returns 0
    for single-line or unindented text.
    """
    for line in text.split("\n")[1:]:
        match = LEADING_WHITESPACE_PATTERN.match(line)
        if match:
            return len(match.group(0))
    return 0


def has_trailing_commas(text: str) -> bool:
    return TRAILING_COMMA_PATTERN.search(text) is not None


def has_duplicate_keys(
    text: str, scope: DuplicateKeyScope = DuplicateKeyScope.DOCUMENT
) -> bool:
    """Re-parse text while watching every object key.

    With DOCUMENT scope any member name seen twice anywhere counts, so
    `{"a": {"a": 1}}` is reported. Array indices are member names too in
    this scope: `{"a": [1], "b": [2]}` reports the shared index "0", and so
    does `{"0": 1, "x": [2]}`. OBJECT scope only reports a key repeated
    inside a single object literal. Plain parsing keeps the last value for
    repeated keys, which is why this needs its own pass.
    """
    seen: set[str] = set()
    found = False

    def note(name: str) -> None:
        nonlocal found
        if name in seen:
            found = True
        seen.add(name)

    def visit(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        nonlocal found
        if scope is DuplicateKeyScope.OBJECT:
            keys = [key for key, _ in pairs]
            if len(keys) != len(set(keys)):
                found = True
        else:
            for key, _ in pairs:
                note(key)
        return dict(pairs)

    try:
        parsed = json.loads(text, object_pairs_hook=visit, parse_constant=_reject_constant)
    except RecursionError:
        raise JsonParseError("Maximum nesting depth exceeded") from None
    except (ValueError, TypeError) as e:
        raise JsonParseError(str(e)) from None

    if scope is DuplicateKeyScope.DOCUMENT and not found:
        stack = [parsed]
        while stack and not found:
            node = stack.pop()
            if isinstance(node, list):
                for index in range(len(node)):
                    note(str(index))
                stack.extend(node)
            elif isinstance(node, dict):
                stack.extend(node.values())
    return found
