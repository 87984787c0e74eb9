"""Data models for the analysis report produced by JsonAnalyzer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal


@dataclass
class StringPatterns:
    """How many string values matched each known pattern."""

    dates: int = 0
    emails: int = 0
    urls: int = 0
    uuids: int = 0


@dataclass
class StringStats:
    count: int = 0
    max_length: int = 0
    min_length: int | None = None  # None until a string is seen
    average_length: float = 0.0
    empty: int = 0
    patterns: StringPatterns = field(default_factory=StringPatterns)


@dataclass
class NumberSummary:
    """Distribution statistics computed once traversal completes."""

    min: float | None = None
    max: float | None = None
    average: float = 0.0
    median: float = 0.0
    mode: list[float] = field(default_factory=list)  # Every value tied at the top frequency


@dataclass
class NumberStats:
    count: int = 0
    integers: int = 0
    decimals: int = 0
    min: float | None = None
    max: float | None = None
    stats: NumberSummary = field(default_factory=NumberSummary)


@dataclass
class BooleanStats:
    count: int = 0
    true: int = 0
    false: int = 0


@dataclass
class ValueStats:
    """Counters for scalar values."""

    strings: StringStats = field(default_factory=StringStats)
    numbers: NumberStats = field(default_factory=NumberStats)
    booleans: BooleanStats = field(default_factory=BooleanStats)
    nulls: int = 0
    undefined: int = 0


@dataclass
class ObjectStats:
    count: int = 0
    max_nesting: int = 0  # Deepest level at which an object occurs
    average_keys: float = 0.0
    key_distribution: dict[str, int] = field(default_factory=dict)


@dataclass
class ArrayStats:
    count: int = 0
    max_length: int = 0
    total_items: int = 0
    average_length: float = 0.0
    nested_arrays: int = 0  # Arrays with at least one direct child array


@dataclass
class StructureStats:
    objects: ObjectStats = field(default_factory=ObjectStats)
    arrays: ArrayStats = field(default_factory=ArrayStats)
    values: ValueStats = field(default_factory=ValueStats)


@dataclass
class FormatInfo:
    """Heuristics computed from the raw source text, not the parsed tree."""

    indentation: int = 0
    has_trailing_commas: bool = False
    has_duplicate_keys: bool = False


@dataclass
class PerformanceInfo:
    """Wall-clock timings in milliseconds."""

    parse_time: float = 0.0
    analysis_time: float = 0.0
    total_time: float = 0.0


@dataclass
class Summary:
    total_size: int = 0  # UTF-8 bytes of the source
    total_keys: int = 0
    max_depth: int = 0
    format: FormatInfo = field(default_factory=FormatInfo)
    performance: PerformanceInfo = field(default_factory=PerformanceInfo)


@dataclass
class PathInfo:
    longest: str = ""
    deepest: list[str] = field(default_factory=list)
    all: list[str] = field(default_factory=list)
    circular: list[str] = field(default_factory=list)


@dataclass
class ValidationIssue:
    path: str
    message: str
    severity: Literal["error", "warning"] = "warning"


@dataclass
class ValidationReport:
    """Advisory findings. Never raised; analysis completes regardless."""

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class Analysis:
    """Complete structural analysis of one JSON document.

    Every analyze call builds a fresh report and keeps no reference to it
    once it returns, so the caller owns it. The analyzer never changes a
    report it has handed out, and reports share no mutable parts.
    """

    summary: Summary = field(default_factory=Summary)
    structure: StructureStats = field(default_factory=StructureStats)
    paths: PathInfo = field(default_factory=PathInfo)
    validation: ValidationReport = field(default_factory=ValidationReport)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict for JSON serialization."""
        return asdict(self)
