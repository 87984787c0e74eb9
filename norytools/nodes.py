"""Node classification for parsed JSON trees.

Every traversal in norytools.jsontools dispatches on JsonKind instead of repeating
isinstance chains. bool must be tested before int because bool is an int
subclass in Python.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

# Recursive alias for parsed JSON
JsonValue = str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]


class JsonKind(str, Enum):
    """Tag for each kind of node in a parsed JSON tree."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"  # Not a JSON type; only from hand-built trees


CONTAINER_KINDS = frozenset({JsonKind.OBJECT, JsonKind.ARRAY})


def kind_of(value: Any) -> JsonKind:
    """Classify a value into its JsonKind."""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    return JsonKind.UNDEFINED


def is_container(value: Any) -> bool:
    return kind_of(value) in CONTAINER_KINDS


def scalar_text(value: Any) -> str:
    """Render a scalar the way it reads in JSON source.

    Strings are returned as-is (no quotes), null/true/false use their JSON
    literals and numbers use the JSON number form.
    """
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return value
    if kind is JsonKind.NULL:
        return "null"
    if kind is JsonKind.BOOLEAN:
        return "true" if value else "false"
    if kind is JsonKind.NUMBER:
        return json.dumps(value)
    return str(value)


def search_text(value: Any) -> str:
    """Text a value is searched by in free-text queries.

    Arrays join their elements with commas, with null elements left empty.
    Objects have no text of their own and give "".
    """
    kind = kind_of(value)
    if kind is JsonKind.ARRAY:
        return ",".join("" if item is None else search_text(item) for item in value)
    if kind is JsonKind.OBJECT:
        return ""
    return scalar_text(value)
