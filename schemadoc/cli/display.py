"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted JSON
- Export summary tables
- Success/failure indicators
"""

import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}")


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=2, default=str)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False, word_wrap=True)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_exports_table(rows: List[Dict[str, Any]]) -> None:
    """
    Print converted exports in a table.

    Args:
        rows: One dict per export with keys:
            - name: Export name (None for default exports)
            - path: Source path
            - type: Root model type
            - refs: Number of refs to other exports
            - meta: Comma-separated root meta flags
    """
    table = Table(title="Schema Exports", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan")
    table.add_column("Path", style="dim")
    table.add_column("Type", style="white")
    table.add_column("Refs", justify="right")
    table.add_column("Meta", style="yellow")

    for i, row in enumerate(rows, 1):
        table.add_row(
            str(i),
            row["name"] or "[dim]<default>[/dim]",
            row["path"],
            row["type"],
            str(row["refs"]),
            row["meta"],
        )

    console.print()
    console.print(table)
    console.print()


def print_separator() -> None:
    """Print a visual separator line."""
    console.print("[dim]" + "─" * 70 + "[/dim]")
