"""Parsing utilities for CLI input."""

import json
from typing import Any

import click

from ...config import FilterCondition
from ...exceptions import ConfigurationError


def parse_literal(raw: str) -> Any:
    """Interpret a command-line value as a JSON literal when it is one.

    "42" -> 42, "true" -> True, "null" -> None, '"42"' -> "42".
    Anything that does not parse as a scalar JSON literal stays a string.
    """
    try:
        value = json.loads(raw)
    except ValueError:
        return raw
    if isinstance(value, (dict, list)):
        return raw
    return value


def parse_condition(value: str) -> FilterCondition:
    """Parse a --condition value into a FilterCondition.

    Supported formats:
        - "status=active"           key and value
        - "=42"                     any key, value 42
        - '{"key": "age", "value": 30, "operator": "gte"}'

    Raises:
        click.BadParameter: If the format is invalid.
    """
    text = value.strip()
    try:
        if text.startswith("{"):
            data = json.loads(text)
            if not isinstance(data, dict):
                raise ValueError("condition must be a JSON object")
            return FilterCondition.from_dict(data)
    except (ValueError, ConfigurationError) as e:
        raise click.BadParameter(f"Invalid condition '{value}': {e}") from None

    key, sep, raw_value = text.partition("=")
    if not sep:
        raise click.BadParameter(
            f"Invalid condition format: '{value}'. "
            "Use 'key=value', '=value' or a JSON object with key/value/type/operator."
        )
    return FilterCondition(key=key.strip() or None, value=parse_literal(raw_value))
