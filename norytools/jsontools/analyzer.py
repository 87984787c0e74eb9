"""Structural analysis of JSON documents.

JsonAnalyzer walks a parsed tree once, depth-first and pre-order, and fills
an Analysis report: object/array shape, scalar value statistics, string
pattern counts, the path inventory and any circular references.

The walk uses an explicit stack rather than Python recursion, so the only
nesting limit is the one the json module imposes while parsing.

Circular references:
    With CycleDetection.GLOBAL (the default) every container entered is
    remembered for the rest of the walk. A container reached a second time
    is reported in paths.circular even when it is only shared by two
    parents and no real cycle exists. CycleDetection.ANCESTOR only reports
    containers that reappear among their own ancestors.

Example:
    from norytools.jsontools import analyze

    report = analyze('{"user": {"email": "a@example.com", "tags": [1, 2]}}')
    report.summary.max_depth                            # 2
    report.structure.values.strings.patterns.emails     # 1
"""

from __future__ import annotations

import json
import logging
import re
import statistics
import time
from typing import Any

from ..config import AnalyzerConfig, CycleDetection
from ..exceptions import AnalysisError, JsonParseError
from ..nodes import CONTAINER_KINDS, JsonKind, JsonValue, kind_of
from .parser import detect_indentation, has_duplicate_keys, has_trailing_commas, parse
from .paths import join_index, join_key
from .report import Analysis, FormatInfo, ValidationIssue

logger = logging.getLogger(__name__)

# Patterns are matched against the whole string value
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z", re.ASCII)
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
URL_PATTERN = re.compile(r"(https?://)?[\da-z.-]+\.[a-z.]{2,6}[/\w .-]*", re.ASCII)
UUID_V4_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.IGNORECASE
)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class JsonAnalyzer:
    """Computes Analysis reports for JSON text or already-parsed trees."""

    def __init__(self, config: AnalyzerConfig | None = None):
        self.config = config or AnalyzerConfig()

    def analyze(self, text: str) -> Analysis:
        """Parse and analyze JSON text.

        Raises:
            JsonParseError: If the text is not valid JSON.
            AnalysisError: If the analyzer fails on the parsed tree.
        """
        start = time.perf_counter()
        parsed = parse(text)
        parse_time = _elapsed_ms(start)

        report = Analysis()
        report.summary.total_size = len(text.encode("utf-8"))
        report.summary.format = self._format_info(text)
        self._run(parsed, report)

        total_time = _elapsed_ms(start)
        report.summary.performance.parse_time = parse_time
        report.summary.performance.total_time = total_time
        report.summary.performance.analysis_time = total_time - parse_time
        logger.debug(
            "Analyzed %d bytes in %.2fms (parse %.2fms)",
            report.summary.total_size,
            total_time,
            parse_time,
        )
        return report

    def analyze_value(self, value: Any, source_text: str | None = None) -> Analysis:
        """Analyze an in-memory tree.

        Unlike analyze(), the tree may share containers between parents or
        contain cycles, and may hold non-JSON values (counted as undefined).
        Size and format heuristics come from `source_text` when given,
        otherwise size is taken from a compact serialization if one exists.
        """
        start = time.perf_counter()
        report = Analysis()
        if source_text is not None:
            report.summary.total_size = len(source_text.encode("utf-8"))
            report.summary.format = self._format_info(source_text)
        else:
            report.summary.total_size = self._serialized_size(value)
        self._run(value, report)

        total_time = _elapsed_ms(start)
        report.summary.performance.total_time = total_time
        report.summary.performance.analysis_time = total_time
        return report

    def _format_info(self, text: str) -> FormatInfo:
        try:
            duplicates = has_duplicate_keys(text, self.config.duplicate_key_scope)
        except JsonParseError:
            # Unparseable source text has no key inventory
            duplicates = False
        return FormatInfo(
            indentation=detect_indentation(text),
            has_trailing_commas=has_trailing_commas(text),
            has_duplicate_keys=duplicates,
        )

    @staticmethod
    def _serialized_size(value: Any) -> int:
        try:
            text = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
        except (ValueError, TypeError, RecursionError):
            # Cyclic or non-JSON trees have no serialized form
            return 0
        return len(text.encode("utf-8"))

    def _run(self, root: Any, report: Analysis) -> None:
        numbers: list[float] = []
        try:
            self._walk(root, report, numbers)
            self._finalize(report, numbers)
        except Exception as e:
            logger.exception("JSON analysis error")
            raise AnalysisError() from e

    def _walk(self, root: Any, report: Analysis, numbers: list[float]) -> None:
        """Depth-first pre-order walk over an explicit stack.

        Frames are (leaving, node, path, depth, key). `key` is the object
        key the node is stored under, or None for the root and array
        elements. Leaving frames only exist in ancestor mode, where they
        take the container back out of the active set.
        """
        ancestor_mode = self.config.cycle_detection is CycleDetection.ANCESTOR
        active: set[int] = set()
        stack: list[tuple[bool, Any, str, int, str | None]] = [(False, root, "", 0, None)]

        while stack:
            leaving, node, path, depth, key = stack.pop()
            if leaving:
                active.discard(id(node))
                continue

            if key is not None:
                self._record_key(report, key, path)

            kind = kind_of(node)
            if kind not in CONTAINER_KINDS:
                self._record_scalar(report, kind, node, path, numbers)
                continue

            if id(node) in active:
                report.paths.circular.append(path)
                report.validation.errors.append(
                    ValidationIssue(
                        path=path, message="Circular reference detected", severity="error"
                    )
                )
                continue
            active.add(id(node))
            if ancestor_mode:
                stack.append((True, node, path, depth, None))

            self._record_depth(report, path, depth)
            if kind is JsonKind.OBJECT:
                objects = report.structure.objects
                objects.count += 1
                objects.max_nesting = max(objects.max_nesting, depth)
                children = [(False, v, join_key(path, k), depth + 1, k) for k, v in node.items()]
            else:
                arrays = report.structure.arrays
                arrays.count += 1
                arrays.max_length = max(arrays.max_length, len(node))
                arrays.total_items += len(node)
                if any(kind_of(item) is JsonKind.ARRAY for item in node):
                    arrays.nested_arrays += 1
                children = [
                    (False, item, join_index(path, i), depth + 1, None)
                    for i, item in enumerate(node)
                ]
            stack.extend(reversed(children))

    def _record_key(self, report: Analysis, key: str, path: str) -> None:
        distribution = report.structure.objects.key_distribution
        distribution[key] = distribution.get(key, 0) + 1
        report.summary.total_keys += 1
        if self.config.collect_paths:
            report.paths.all.append(path)
        # Ties keep the first path seen
        if len(path) > len(report.paths.longest):
            report.paths.longest = path

    @staticmethod
    def _record_depth(report: Analysis, path: str, depth: int) -> None:
        summary = report.summary
        if depth > summary.max_depth or not report.paths.deepest:
            summary.max_depth = depth
            report.paths.deepest = [path]
        elif depth == summary.max_depth:
            report.paths.deepest.append(path)

    def _record_scalar(
        self,
        report: Analysis,
        kind: JsonKind,
        value: Any,
        path: str,
        numbers: list[float],
    ) -> None:
        values = report.structure.values
        if kind is JsonKind.STRING:
            self._record_string(report, value)
        elif kind is JsonKind.NUMBER:
            nums = values.numbers
            nums.count += 1
            numbers.append(value)
            if isinstance(value, int) or value.is_integer():
                nums.integers += 1
            else:
                nums.decimals += 1
            nums.min = value if nums.min is None else min(nums.min, value)
            nums.max = value if nums.max is None else max(nums.max, value)
        elif kind is JsonKind.BOOLEAN:
            values.booleans.count += 1
            if value:
                values.booleans.true += 1
            else:
                values.booleans.false += 1
        elif kind is JsonKind.NULL:
            values.nulls += 1
        else:
            values.undefined += 1
            message = f"Undefined value found at path: {path}"
            report.validation.warnings.append(message)
            report.validation.errors.append(
                ValidationIssue(path=path, message=message, severity="warning")
            )

    @staticmethod
    def _record_string(report: Analysis, value: str) -> None:
        strings = report.structure.values.strings
        length = len(value)
        strings.count += 1
        strings.max_length = max(strings.max_length, length)
        if strings.min_length is None or length < strings.min_length:
            strings.min_length = length
        # Running mean, finalized as-is
        strings.average_length += (length - strings.average_length) / strings.count
        if length == 0:
            strings.empty += 1

        patterns = strings.patterns
        if DATE_PATTERN.fullmatch(value):
            patterns.dates += 1
        if EMAIL_PATTERN.fullmatch(value):
            patterns.emails += 1
        if URL_PATTERN.fullmatch(value):
            patterns.urls += 1
        if UUID_V4_PATTERN.fullmatch(value):
            patterns.uuids += 1

    @staticmethod
    def _finalize(report: Analysis, numbers: list[float]) -> None:
        structure = report.structure
        if structure.objects.count:
            structure.objects.average_keys = report.summary.total_keys / structure.objects.count
        if structure.arrays.count:
            structure.arrays.average_length = structure.arrays.total_items / structure.arrays.count

        if numbers:
            stats = structure.values.numbers.stats
            stats.min = min(numbers)
            stats.max = max(numbers)
            stats.average = statistics.mean(numbers)
            stats.median = statistics.median(numbers)
            stats.mode = sorted(statistics.multimode(numbers))


def analyze(text: str, config: AnalyzerConfig | None = None) -> Analysis:
    """Analyze JSON text. See JsonAnalyzer.analyze()."""
    return JsonAnalyzer(config).analyze(text)


def analyze_value(
    value: JsonValue | Any,
    source_text: str | None = None,
    config: AnalyzerConfig | None = None,
) -> Analysis:
    """Analyze an in-memory tree. See JsonAnalyzer.analyze_value()."""
    return JsonAnalyzer(config).analyze_value(value, source_text)
