"""Declarative filtering of JSON documents.

The pipeline runs these stages in a fixed order, each on the output of the
previous one:

1. path       - narrow to the value at a dotted path
2. query      - keep values whose text contains the query
3. conditions - keep values matching the first condition
4. limit      - keep the first N entries of an object result
5. exclude    - drop top-level keys (case-insensitive)

Query and condition stages share one pruning walk: a node that matches is
kept whole, containers keep only surviving children and disappear when
none survive, unmatched leaves disappear. Every ancestor of a kept node is
kept. A root that disappears entirely becomes `{}`.

For the query, an array stored under an object key is first tested as a
whole against its comma-joined element text, so `{"tags": ["red", "blue"]}`
queried for "red" keeps both tags. Arrays nested in arrays and the root
array are only searched element by element.

GOTCHAS:
- Only conditions[0] is evaluated. Extra conditions are accepted and
  ignored with a logged warning.
- Any failure surfaces as FilterError with one fixed message; the stage
  that failed is only visible in debug logs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from itertools import islice
from typing import Any

from ..config import ConditionOperator, FilterCondition, FilterOptions
from ..exceptions import FilterError
from ..nodes import JsonKind, JsonValue, kind_of, scalar_text, search_text
from .formatter import serialize
from .parser import parse
from .paths import resolve_path

logger = logging.getLogger(__name__)

OUTPUT_INDENT = 2

Matcher = Callable[[Any, str | None, bool], bool]


class _Dropped:
    """Marks a pruned subtree. Distinct from None, which is JSON null."""

    def __repr__(self) -> str:
        return "DROPPED"


DROPPED = _Dropped()

_NUMERIC_OPERATORS = {
    ConditionOperator.GT: lambda a, b: a > b,
    ConditionOperator.LT: lambda a, b: a < b,
    ConditionOperator.GTE: lambda a, b: a >= b,
    ConditionOperator.LTE: lambda a, b: a <= b,
}


class JsonFilter:
    """Applies FilterOptions to parsed JSON trees."""

    def __init__(self, options: FilterOptions | None = None):
        self.options = options or FilterOptions()

    def apply(self, value: JsonValue) -> JsonValue:
        """Run every configured stage over a parsed tree.

        Raises:
            InvalidPathError: If the path stage cannot resolve.
        """
        options = self.options
        result = value

        if options.path:
            result = resolve_path(result, options.path)
            logger.debug("Narrowed to path %r", options.path)

        if options.query:
            result = self._prune_root(result, self._matches_query)
            logger.debug("Applied query %r", options.query)

        if options.conditions:
            if len(options.conditions) > 1:
                logger.warning(
                    "Only the first filter condition is evaluated; ignoring %d more",
                    len(options.conditions) - 1,
                )
            result = self._prune_root(result, self._matches_condition)

        if options.limit and kind_of(result) is JsonKind.OBJECT:
            result = dict(islice(result.items(), options.limit))

        if options.exclude and kind_of(result) is JsonKind.OBJECT:
            excluded = {key.lower() for key in options.exclude}
            result = {k: v for k, v in result.items() if k.lower() not in excluded}

        return result

    def _prune_root(self, value: JsonValue, matches: Matcher) -> JsonValue:
        pruned = self._prune(value, None, 0, matches)
        return {} if pruned is DROPPED else pruned

    def _prune(
        self, node: Any, key: str | None, depth: int, matches: Matcher, member: bool = False
    ) -> Any:
        """Rebuild `node` keeping only matching parts.

        `key` is the object key the node sits under; array elements inherit
        the key of their array. `member` is True only for values stored
        directly under an object key.
        """
        if self.options.max_depth and depth > self.options.max_depth:
            return DROPPED
        if matches(node, key, member):
            return node

        kind = kind_of(node)
        if kind is JsonKind.OBJECT:
            kept_items = {}
            for child_key, child in node.items():
                pruned = self._prune(child, child_key, depth + 1, matches, member=True)
                if pruned is not DROPPED:
                    kept_items[child_key] = pruned
            return kept_items if kept_items else DROPPED
        if kind is JsonKind.ARRAY:
            kept_elements = []
            for child in node:
                pruned = self._prune(child, key, depth + 1, matches)
                if pruned is not DROPPED:
                    kept_elements.append(pruned)
            return kept_elements if kept_elements else DROPPED
        return DROPPED

    def _fold(self, text: str) -> str:
        return text if self.options.case_sensitive else text.lower()

    def _matches_query(self, node: Any, key: str | None, member: bool) -> bool:
        # An array under an object key is searched as a whole; elsewhere only leaves are
        kind = kind_of(node)
        if kind is JsonKind.OBJECT or (kind is JsonKind.ARRAY and not member):
            return False
        return self._fold(self.options.query) in self._fold(search_text(node))

    def _matches_condition(self, node: Any, key: str | None, member: bool) -> bool:
        condition = self.options.conditions[0]
        if condition.key is not None:
            if key is None or self._fold(key) != self._fold(condition.key):
                return False

        expected = condition.type or kind_of(condition.value)
        if kind_of(node) is not expected:
            return False
        return self._compare(node, condition)

    def _compare(self, node: Any, condition: FilterCondition) -> bool:
        operator = condition.operator
        if operator in _NUMERIC_OPERATORS:
            target = _as_number(condition.value)
            if target is None or kind_of(node) is not JsonKind.NUMBER:
                return False
            return _NUMERIC_OPERATORS[operator](node, target)

        if operator is ConditionOperator.EQUALS:
            if self.options.case_sensitive and kind_of(node) is kind_of(condition.value):
                return node == condition.value
            return self._fold(scalar_text(node)) == self._fold(scalar_text(condition.value))

        text = self._fold(scalar_text(node))
        needle = self._fold(scalar_text(condition.value))
        if operator is ConditionOperator.CONTAINS:
            return needle in text
        if operator is ConditionOperator.STARTS_WITH:
            return text.startswith(needle)
        return text.endswith(needle)


def _as_number(value: Any) -> float | None:
    if kind_of(value) is JsonKind.NUMBER:
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def filter_json(text: str, options: FilterOptions | dict[str, Any] | None = None) -> str:
    """Filter JSON text and return the result pretty-printed with 2 spaces.

    `options` may be a FilterOptions or a dict with snake_case or camelCase
    keys (`caseSensitive`, `maxDepth`, ...).

    Raises:
        FilterError: On invalid JSON, invalid options or an unresolvable path.
    """
    try:
        if isinstance(options, dict):
            options = FilterOptions.from_dict(options)
        result = JsonFilter(options).apply(parse(text))
        return serialize(result, OUTPUT_INDENT)
    except Exception as e:
        logger.debug("Filter failed: %s", e)
        raise FilterError() from None


def filter_by_path(text: str, path: str) -> str:
    """Return the value at `path`, pretty-printed with 2 spaces.

    Raises:
        JsonParseError: If the text is not valid JSON.
        InvalidPathError: If the path cannot be resolved.
    """
    return serialize(resolve_path(parse(text), path), OUTPUT_INDENT)
