"""Path strings shared by the analyzer and the filter engine.

Paths use dots between object keys and `[index]` for array elements, e.g.
`users[0].email`. The root has the empty path.
"""

from __future__ import annotations

import re

from ..exceptions import InvalidPathError
from ..nodes import JsonKind, JsonValue, kind_of

_SEGMENT_PATTERN = re.compile(r"^([^\[\]]*)((?:\[\d+\])+)$")
_INDEX_PATTERN = re.compile(r"\[(\d+)\]")


def join_key(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def join_index(parent: str, index: int) -> str:
    return f"{parent}[{index}]"


def split_path(path: str) -> list[str]:
    """Split a dotted path into literal segments.

    Bracketed indices become their own segments, so `a[0].b` and `a.0.b`
    both give `["a", "0", "b"]`. An empty path has no segments.
    """
    if not path:
        return []
    segments: list[str] = []
    for part in path.split("."):
        match = _SEGMENT_PATTERN.match(part)
        if not match:
            segments.append(part)
            continue
        if match.group(1):
            segments.append(match.group(1))
        segments.extend(_INDEX_PATTERN.findall(match.group(2)))
    return segments


def resolve_path(value: JsonValue, path: str) -> JsonValue:
    """Walk `path` from `value` one segment at a time.

    Raises:
        InvalidPathError: As soon as a segment cannot be resolved: the
            current value is a scalar, the key is missing, or the array
            index is not a non-negative integer in range.
    """
    current = value
    for segment in split_path(path):
        kind = kind_of(current)
        if kind is JsonKind.OBJECT:
            if segment not in current:
                raise InvalidPathError()
            current = current[segment]
        elif kind is JsonKind.ARRAY:
            if not (segment.isascii() and segment.isdigit()) or int(segment) >= len(current):
                raise InvalidPathError()
            current = current[int(segment)]
        else:
            raise InvalidPathError()
    return current
