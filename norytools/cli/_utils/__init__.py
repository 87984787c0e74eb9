"""CLI utilities for formatting and parsing."""

from .formatting import (
    console,
    format_bytes,
    format_ms,
    format_value,
    print_error,
    print_message,
    print_stats,
    print_success,
    print_table,
    print_warning,
    truncate,
)
from .parsers import parse_condition, parse_literal

__all__ = [
    "console",
    "print_message",
    "print_table",
    "print_stats",
    "print_error",
    "print_success",
    "print_warning",
    "truncate",
    "format_bytes",
    "format_ms",
    "format_value",
    "parse_condition",
    "parse_literal",
]
