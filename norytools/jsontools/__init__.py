"""JSON validation, formatting, analysis and filtering."""

from .analyzer import JsonAnalyzer, analyze, analyze_value
from .filters import DROPPED, JsonFilter, filter_by_path, filter_json
from .formatter import FormatResult, FormatTimings, beautify, format_json, minify, serialize
from .io import default_filename, load_json_file, save_json
from .parser import (
    ValidationResult,
    detect_indentation,
    has_duplicate_keys,
    has_trailing_commas,
    parse,
    validate,
)
from .paths import join_index, join_key, resolve_path, split_path
from .report import Analysis

__all__ = [
    # Analysis
    "JsonAnalyzer",
    "Analysis",
    "analyze",
    "analyze_value",
    # Filtering
    "JsonFilter",
    "DROPPED",
    "filter_json",
    "filter_by_path",
    # Formatting
    "FormatResult",
    "FormatTimings",
    "format_json",
    "beautify",
    "minify",
    "serialize",
    # Parsing
    "ValidationResult",
    "parse",
    "validate",
    "detect_indentation",
    "has_trailing_commas",
    "has_duplicate_keys",
    # Paths
    "join_key",
    "join_index",
    "split_path",
    "resolve_path",
    # Files
    "load_json_file",
    "save_json",
    "default_filename",
]
