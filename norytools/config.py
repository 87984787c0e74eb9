"""Configuration models for norytools."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .exceptions import ConfigurationError
from .nodes import JsonKind


class CycleDetection(str, Enum):
    """Scope of the identity set used to detect circular references."""

    GLOBAL = "global"  # Every container seen anywhere; shared subtrees are reported too
    ANCESTOR = "ancestor"  # Only the containers on the current path


class DuplicateKeyScope(str, Enum):
    """Scope used when looking for duplicate keys in the source text."""

    DOCUMENT = "document"  # Any key name seen twice anywhere in the document
    OBJECT = "object"  # A key repeated inside one object literal


class ConditionOperator(str, Enum):
    """Comparison applied by a filter condition."""

    EQUALS = "equals"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"


# camelCase spellings accepted in dict payloads
_OPERATOR_ALIASES = {
    "startsWith": ConditionOperator.STARTS_WITH,
    "endsWith": ConditionOperator.ENDS_WITH,
}

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB
LARGE_FILE_SIZE = 1 * 1024 * 1024  # 1 MiB, above this files are read in chunks
CHUNK_SIZE = 64 * 1024


@dataclass
class AnalyzerConfig:
    """Configuration for the JSON analyzer.

    GOTCHAS:
    - GLOBAL cycle detection flags a subtree that is merely shared between
      two parents (a DAG) as circular. Parsed JSON text never shares nodes,
      so this only shows up with hand-built trees passed to analyze_value().
    - DOCUMENT duplicate-key scope flags `{"a": {"a": 1}}` as having
      duplicates, since the same key name appears twice in the document.
    """

    cycle_detection: CycleDetection = CycleDetection.GLOBAL
    duplicate_key_scope: DuplicateKeyScope = DuplicateKeyScope.DOCUMENT
    collect_paths: bool = True  # Record every object-key path in paths.all

    def __post_init__(self) -> None:
        self.cycle_detection = _coerce_enum(CycleDetection, self.cycle_detection, "cycle_detection")
        self.duplicate_key_scope = _coerce_enum(
            DuplicateKeyScope, self.duplicate_key_scope, "duplicate_key_scope"
        )


@dataclass
class LoaderConfig:
    """Limits applied when reading JSON files from disk."""

    max_file_size: int = MAX_FILE_SIZE
    large_file_size: int = LARGE_FILE_SIZE
    chunk_size: int = CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.max_file_size <= 0:
            raise ConfigurationError(
                "max_file_size must be positive", details={"max_file_size": self.max_file_size}
            )
        if self.chunk_size <= 0:
            raise ConfigurationError(
                "chunk_size must be positive", details={"chunk_size": self.chunk_size}
            )

    @classmethod
    def from_env(cls) -> LoaderConfig:
        """Build a config, overriding sizes from NORYTOOLS_* environment variables."""
        return cls(
            max_file_size=_env_int("NORYTOOLS_MAX_FILE_SIZE", MAX_FILE_SIZE),
            large_file_size=_env_int("NORYTOOLS_LARGE_FILE_SIZE", LARGE_FILE_SIZE),
        )


@dataclass
class FilterCondition:
    """A single predicate for the condition stage of the filter pipeline.

    `type` is the JSON kind a value must have; when omitted it is taken
    from the kind of `value`. `key` restricts matches to values stored
    under that object key.
    """

    key: str | None = None
    value: Any = None
    type: JsonKind | None = None
    operator: ConditionOperator = ConditionOperator.EQUALS

    def __post_init__(self) -> None:
        if self.type is not None:
            self.type = _coerce_enum(JsonKind, self.type, "type")
        if isinstance(self.operator, str) and self.operator in _OPERATOR_ALIASES:
            self.operator = _OPERATOR_ALIASES[self.operator]
        self.operator = _coerce_enum(ConditionOperator, self.operator, "operator")
        if self.key == "":
            self.key = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FilterCondition:
        return cls(
            key=data.get("key"),
            value=data.get("value"),
            type=data.get("type"),
            operator=data.get("operator") or ConditionOperator.EQUALS,
        )


@dataclass
class FilterOptions:
    """Options for filter_json(). Stages run in field order.

    GOTCHAS:
    - Only conditions[0] is evaluated; further conditions are ignored.
    - max_depth and limit of 0 mean "not set".
    - include_parents is accepted for compatibility; ancestors of a match
      are always kept.
    """

    path: str = ""
    query: str = ""
    case_sensitive: bool = False
    include_parents: bool = True
    max_depth: int | None = None
    conditions: list[FilterCondition] = field(default_factory=list)
    limit: int | None = None
    exclude: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.conditions = [
            c if isinstance(c, FilterCondition) else FilterCondition.from_dict(c)
            for c in self.conditions
        ]
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigurationError(
                "max_depth must not be negative", details={"max_depth": self.max_depth}
            )
        if self.limit is not None and self.limit < 0:
            raise ConfigurationError("limit must not be negative", details={"limit": self.limit})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FilterOptions:
        """Create from a dict using either snake_case or camelCase keys."""

        def pick(snake: str, camel: str, default: Any = None) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            path=data.get("path") or "",
            query=data.get("query") or "",
            case_sensitive=bool(pick("case_sensitive", "caseSensitive", False)),
            include_parents=bool(pick("include_parents", "includeParents", True)),
            max_depth=pick("max_depth", "maxDepth"),
            conditions=list(data.get("conditions") or []),
            limit=data.get("limit"),
            exclude=list(data.get("exclude") or []),
        )


def _coerce_enum(enum_cls: type[Enum], value: Any, name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {name} '{value}'",
            details={f"valid_{name}": [member.value for member in enum_cls]},
        ) from None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer", details={"value": raw}
        ) from None
