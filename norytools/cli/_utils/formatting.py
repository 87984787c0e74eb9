"""Rich rendering for norytools CLI output.

All user-supplied text (JSON keys, paths, error messages) is escaped before
it reaches Rich markup, so a key like `[bold]` prints literally.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()

# Message prefix and style per level
_LEVELS = {
    "error": ("Error", "bold red"),
    "success": ("Success", "bold green"),
    "warning": ("Warning", "bold yellow"),
}

_BYTE_UNITS = ("B", "KB", "MB", "GB")

ELLIPSIS = "..."


def format_value(value: Any) -> str:
    """Render one report value for display.

    Booleans read as yes/no, None as "-", and non-integral floats get two
    decimals. Everything else is str().
    """
    if isinstance(value, bool):
        return "yes" if value else "no"
    if value is None:
        return "-"
    if isinstance(value, float) and not value.is_integer():
        return f"{value:.2f}"
    return str(value)


def print_message(level: str, msg: str) -> None:
    prefix, style = _LEVELS[level]
    console.print(f"[{style}]{prefix}:[/{style}] {escape(msg)}")


def print_error(msg: str) -> None:
    print_message("error", msg)


def print_success(msg: str) -> None:
    print_message("success", msg)


def print_warning(msg: str) -> None:
    print_message("warning", msg)


def print_table(headers: list[str], rows: list[list[str]], title: str | None = None) -> None:
    """Print rows under the given column headers. Cells are escaped."""
    table = Table(*headers, title=title)
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    console.print(table)


def print_stats(stats: dict[str, Any], title: str = "Statistics") -> None:
    """Print a two-column name/value panel.

    Values go through format_value(), so report fields can be passed as-is.
    """
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    for name, value in stats.items():
        grid.add_row(escape(name), escape(format_value(value)))
    console.print(Panel(grid, title=title, expand=False))


def truncate(text: str, max_len: int = 50) -> str:
    """Shorten text to max_len characters by cutting out its middle.

    Key paths keep both their root and their last segment, e.g.
    `users[0].address.street` at 16 becomes `users[0...street`.
    """
    if len(text) <= max_len:
        return text
    if max_len <= len(ELLIPSIS):
        return text[:max_len]
    kept = max_len - len(ELLIPSIS)
    head = (kept + 1) // 2
    tail = kept - head
    return text[:head] + ELLIPSIS + (text[-tail:] if tail else "")


def format_bytes(num_bytes: int) -> str:
    """Format a byte count, e.g. "256 B", "1.5 KB", "10 MB".

    Values of 10 or more in their unit drop the decimal.
    """
    value = float(max(num_bytes, 0))
    for unit in _BYTE_UNITS:
        if value < 1024 or unit == _BYTE_UNITS[-1]:
            break
        value /= 1024
    if unit == "B":
        return f"{int(value)} B"
    return f"{value:.0f} {unit}" if value >= 10 else f"{value:.1f} {unit}"


def format_ms(value: float) -> str:
    """Format a millisecond timing, e.g. "0.42 ms". Tiny timings show as "<0.01 ms"."""
    if 0 < value < 0.01:
        return "<0.01 ms"
    return f"{value:.2f} ms"
