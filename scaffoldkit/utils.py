"""Shared utility functions for scaffoldkit.

Provides JSON I/O with the conventions the generators rely on (missing files
read as a default, tab-indented output) and Rich-based console reporting.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path, default: Any = None) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.
        default: Value returned when the file does not exist.

    Returns:
        The parsed document, or *default*.

    Raises:
        json.JSONDecodeError: If the file exists but is not valid JSON.
    """
    file_path = Path(path)
    if not file_path.exists():
        return default
    return json.loads(file_path.read_text(encoding="utf-8"))


def dump_json(data: Any, indent: str | int = "\t") -> str:
    """Serialise *data* the way generated JSON files are written.

    Keys keep their insertion order and the output ends with a newline.
    """
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str, *, target: Console | None = None) -> None:
    """Print a red error message on *target*, the shared console by default."""
    (target or console).print(f"[bold red]{escape(message)}[/bold red]")

