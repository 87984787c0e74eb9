"""
norytools - Developer micro-utilities built around a JSON analysis engine.

Validate, format, analyze and filter JSON documents, plus Base64 and UUID
helpers.

Quick Start:

    from norytools import analyze, filter_json, format_json, validate

    text = '{"users": [{"email": "ada@example.com", "age": 36}]}'

    if validate(text).is_valid:
        print(format_json(text, indent=4).formatted)

    report = analyze(text)
    print(report.summary.max_depth)                          # 2
    print(report.structure.values.strings.patterns.emails)   # 1

    print(filter_json(text, {"query": "ada"}))

Error Handling:

    from norytools import FilterError, JsonParseError, NoryToolsError

    try:
        filter_json(text, {"path": "users.9"})
    except FilterError as e:
        print(e)  # Invalid JSON or filter options

Enable logging to see what's happening:

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""

from . import base64_codec, uuids
from .config import (
    AnalyzerConfig,
    ConditionOperator,
    CycleDetection,
    DuplicateKeyScope,
    FilterCondition,
    FilterOptions,
    LoaderConfig,
)
from .exceptions import (
    AnalysisError,
    CodecError,
    ConfigurationError,
    FileLoadError,
    FilterError,
    InvalidPathError,
    JsonParseError,
    NoryToolsError,
)
from .jsontools import (
    Analysis,
    FormatResult,
    JsonAnalyzer,
    JsonFilter,
    ValidationResult,
    analyze,
    analyze_value,
    beautify,
    filter_by_path,
    filter_json,
    format_json,
    load_json_file,
    minify,
    save_json,
    validate,
)
from .nodes import JsonKind, kind_of

__version__ = "0.1.0"

__all__ = [
    # JSON engine
    "analyze",
    "analyze_value",
    "filter_json",
    "filter_by_path",
    "format_json",
    "beautify",
    "minify",
    "validate",
    "load_json_file",
    "save_json",
    "JsonAnalyzer",
    "JsonFilter",
    "Analysis",
    "FormatResult",
    "ValidationResult",
    "JsonKind",
    "kind_of",
    # Config
    "AnalyzerConfig",
    "CycleDetection",
    "DuplicateKeyScope",
    "FilterOptions",
    "FilterCondition",
    "ConditionOperator",
    "LoaderConfig",
    # Exceptions
    "NoryToolsError",
    "JsonParseError",
    "InvalidPathError",
    "FilterError",
    "AnalysisError",
    "ConfigurationError",
    "FileLoadError",
    "CodecError",
    # Utilities
    "base64_codec",
    "uuids",
]
