"""Shared utility functions for the FHEVM hub generators.

Provides Rich-based console reporting, file-system helpers and duration
formatting.  Progress and listings go to ``console`` (stdout); errors and
warnings go to ``err_console`` (stderr).
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> bool:
    """Make sure *path* is a directory, creating missing parents.

    Returns ``True`` only when this call created it.  A regular file at
    *path* (or any other mkdir failure) raises ``OSError``.
    """
    target = Path(path)
    if target.is_dir():
        return False
    target.mkdir(parents=True, exist_ok=True)
    return True


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Render elapsed seconds as ``"3.7s"`` or, past a minute, ``"1m 5s"``."""
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule announcing a generation run."""
    console.print()
    console.print(Rule(f"[bold bright_cyan] {escape(title)} [/bold bright_cyan]", style="bright_cyan"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print what a generation run produced as a label/value table."""
    table = Table(title=escape(title), header_style="bold cyan")
    table.add_column("Result", style="dim", no_wrap=True)
    table.add_column("Value")
    for label, value in data.items():
        table.add_row(escape(label), escape(str(value)))

    console.print(table)
    console.print()


def print_next_steps(steps: Iterable[str]) -> None:
    """Print the indented "Next Steps" block shown after a successful run."""
    console.print("[bold]Next Steps:[/bold]")
    for step in steps:
        console.print(f"   {escape(step)}", highlight=False)
    console.print()


def print_info(message: str) -> None:
    """Print a plain, unhighlighted message."""
    console.print(escape(message), highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
