"""JSON CLI commands: validate, format, analyze, filter and path."""

from __future__ import annotations

import json
from typing import Any

import click

from ..config import FilterOptions, LoaderConfig
from ..exceptions import FileLoadError, NoryToolsError
from ..jsontools import (
    Analysis,
    analyze,
    filter_by_path,
    filter_json,
    format_json,
    load_json_file,
    save_json,
    validate,
)
from ._utils.formatting import (
    console,
    format_bytes,
    format_ms,
    print_error,
    print_stats,
    print_success,
    print_table,
    print_warning,
    truncate,
)
from ._utils.parsers import parse_condition
from .main import main


def source_argument(fn: Any) -> Any:
    """Shared SOURCE argument: a file path or '-' for stdin."""
    return click.argument("source", type=click.Path(dir_okay=False, allow_dash=True))(fn)


def output_option(fn: Any) -> Any:
    """Shared --output option for commands that produce JSON text."""
    return click.option(
        "--output",
        "-o",
        type=click.Path(dir_okay=False),
        default=None,
        help="Write the result to this file instead of stdout.",
    )(fn)


def read_source(source: str, validate_json: bool = False) -> str:
    """Read SOURCE, enforcing the configured size limits.

    Exits with status 1 after printing the error when loading fails.
    """
    config = LoaderConfig.from_env()
    try:
        if source == "-":
            text = click.get_text_stream("stdin").read()
            if len(text.encode("utf-8")) > config.max_file_size:
                raise FileLoadError(
                    "File too large",
                    details={"max_size": format_bytes(config.max_file_size)},
                )
            return text
        return load_json_file(source, config, validate=validate_json)
    except NoryToolsError as e:
        print_error(str(e))
        raise SystemExit(1) from None


def emit(text: str, output: str | None) -> None:
    """Print text or save it to `output`."""
    if output:
        path = save_json(text, output)
        print_success(f"Wrote {path}")
    else:
        click.echo(text)


@main.group("json")
def json_group() -> None:
    """JSON validation, formatting, analysis and filtering.

    \b
    Examples:
        norytools json validate data.json
        norytools json format data.json --indent 4
        norytools json format data.json --minify -o data.min.json
        norytools json analyze data.json
        norytools json filter data.json --query error --limit 10
        norytools json path data.json users.0.email
    """
    pass


@json_group.command("validate")
@source_argument
def validate_command(source: str) -> None:
    """Check that SOURCE is valid JSON."""
    result = validate(read_source(source))
    if not result.is_valid:
        print_error(result.error or "Invalid JSON")
        raise SystemExit(1)
    print_success("Valid JSON")


@json_group.command("format")
@source_argument
@click.option("--indent", "-i", type=click.IntRange(min=0), default=2, show_default=True)
@click.option("--minify", "-m", is_flag=True, help="Single line output (same as --indent 0).")
@output_option
def format_command(source: str, indent: int, minify: bool, output: str | None) -> None:
    """Beautify or minify SOURCE."""
    result = format_json(read_source(source), 0 if minify else indent)
    if result.error:
        print_error(result.error)
        raise SystemExit(1)
    emit(result.formatted, output)


@json_group.command("analyze")
@source_argument
@click.option("--json", "as_json", is_flag=True, help="Print the full report as JSON.")
@click.option("--paths", "show_paths", is_flag=True, help="List every object-key path.")
def analyze_command(source: str, as_json: bool, show_paths: bool) -> None:
    """Report structure and value statistics for SOURCE."""
    try:
        report = analyze(read_source(source))
    except NoryToolsError as e:
        print_error(str(e))
        raise SystemExit(1) from None

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return
    _print_report(report, show_paths)


@json_group.command("filter")
@source_argument
@click.option("--path", "-p", default="", help="Dotted path to narrow to first, e.g. users.0")
@click.option("--query", "-q", default="", help="Keep values whose text contains this")
@click.option("--case-sensitive", "-c", is_flag=True, help="Match query/conditions exactly")
@click.option("--max-depth", type=click.IntRange(min=0), default=None, help="Drop deeper values")
@click.option(
    "--condition",
    "conditions",
    multiple=True,
    help="key=value or a JSON condition object. Only the first one is applied.",
)
@click.option("--limit", "-n", type=click.IntRange(min=0), default=None, help="Keep first N keys")
@click.option("--exclude", "-x", multiple=True, help="Top-level key to drop (repeatable)")
@output_option
def filter_command(
    source: str,
    path: str,
    query: str,
    case_sensitive: bool,
    max_depth: int | None,
    conditions: tuple[str, ...],
    limit: int | None,
    exclude: tuple[str, ...],
    output: str | None,
) -> None:
    """Filter SOURCE by path, text query and conditions."""
    if len(conditions) > 1:
        print_warning(f"Only the first condition is applied; ignoring {len(conditions) - 1}")
    options = FilterOptions(
        path=path,
        query=query,
        case_sensitive=case_sensitive,
        max_depth=max_depth,
        conditions=[parse_condition(c) for c in conditions],
        limit=limit,
        exclude=list(exclude),
    )
    try:
        result = filter_json(read_source(source), options)
    except NoryToolsError as e:
        print_error(str(e))
        raise SystemExit(1) from None
    emit(result, output)


@json_group.command("path")
@source_argument
@click.argument("path")
@output_option
def path_command(source: str, path: str, output: str | None) -> None:
    """Print the value at PATH inside SOURCE."""
    try:
        result = filter_by_path(read_source(source), path)
    except NoryToolsError as e:
        print_error(str(e))
        raise SystemExit(1) from None
    emit(result, output)


def _print_report(report: Analysis, show_paths: bool) -> None:
    summary = report.summary
    structure = report.structure
    values = structure.values

    print_stats(
        {
            "Size": format_bytes(summary.total_size),
            "Keys": summary.total_keys,
            "Max depth": summary.max_depth,
            "Indentation": summary.format.indentation,
            "Trailing commas": summary.format.has_trailing_commas,
            "Duplicate keys": summary.format.has_duplicate_keys,
            "Parse time": format_ms(summary.performance.parse_time),
            "Analysis time": format_ms(summary.performance.analysis_time),
            "Total time": format_ms(summary.performance.total_time),
        },
        title="Summary",
    )

    objects = structure.objects
    arrays = structure.arrays
    print_table(
        ["Node", "Count", "Details"],
        [
            [
                "objects",
                str(objects.count),
                f"max nesting {objects.max_nesting}, avg keys {objects.average_keys:.2f}",
            ],
            [
                "arrays",
                str(arrays.count),
                f"max length {arrays.max_length}, total items {arrays.total_items}, "
                f"avg length {arrays.average_length:.2f}, nested {arrays.nested_arrays}",
            ],
            ["strings", str(values.strings.count), _string_details(report)],
            ["numbers", str(values.numbers.count), _number_details(report)],
            [
                "booleans",
                str(values.booleans.count),
                f"true {values.booleans.true}, false {values.booleans.false}",
            ],
            ["nulls", str(values.nulls), ""],
            ["undefined", str(values.undefined), ""],
        ],
        title="Structure",
    )

    if objects.key_distribution:
        top_keys = sorted(objects.key_distribution.items(), key=lambda kv: -kv[1])[:10]
        print_table(
            ["Key", "Occurrences"], [[truncate(k), str(n)] for k, n in top_keys], title="Top keys"
        )

    paths = report.paths
    print_stats(
        {
            "Longest": paths.longest or "-",
            "Deepest": ", ".join(truncate(p or "$") for p in paths.deepest[:5]) or "-",
            "Circular": len(paths.circular),
        },
        title="Paths",
    )
    if show_paths:
        for p in paths.all:
            console.print(p, markup=False, highlight=False)

    for warning in report.validation.warnings:
        print_warning(warning)


def _string_details(report: Analysis) -> str:
    strings = report.structure.values.strings
    if not strings.count:
        return ""
    patterns = strings.patterns
    return (
        f"length {strings.min_length}-{strings.max_length} (avg {strings.average_length:.1f}), "
        f"empty {strings.empty}, dates {patterns.dates}, emails {patterns.emails}, "
        f"urls {patterns.urls}, uuids {patterns.uuids}"
    )


def _number_details(report: Analysis) -> str:
    numbers = report.structure.values.numbers
    if not numbers.count:
        return ""
    stats = numbers.stats
    mode = ", ".join(str(m) for m in stats.mode[:5])
    if len(stats.mode) > 5:
        mode += ", ..."
    return (
        f"ints {numbers.integers}, decimals {numbers.decimals}, range {stats.min}..{stats.max}, "
        f"avg {stats.average:.4g}, median {stats.median:.4g}, mode [{mode}]"
    )
