"""Console output for the projsync CLI."""

import json
from typing import Any, Optional

from rich.console import Console
from rich.table import Table


class OutputFormatter:
    """Formats CLI output as text (via rich) or JSON."""

    def __init__(self, json_output: bool = False, quiet: bool = False):
        """Initialize output formatter.

        Args:
            json_output: If True, results are printed as JSON and informational
                messages are suppressed
            quiet: If True, suppress non-essential output
        """
        self.json_output = json_output
        self.quiet = quiet
        self.console = Console(highlight=False, emoji=False, soft_wrap=True)
        self.err_console = Console(
            stderr=True, highlight=False, emoji=False, soft_wrap=True
        )

    def _emit(self, message: str, style: Optional[str] = None) -> None:
        self.console.print(message, style=style, markup=False)

    def print(self, message: str = "") -> None:
        """Print a plain message unless quiet or in JSON mode."""
        if self.quiet or self.json_output:
            return
        self._emit(message)

    def info(self, message: str) -> None:
        """Print an informational message."""
        if self.quiet or self.json_output:
            return
        self._emit(message, style="cyan")

    def success(self, message: str) -> None:
        """Print a success message."""
        if self.quiet or self.json_output:
            return
        self._emit(message, style="green")

    def warning(self, message: str) -> None:
        """Print a warning. Warnings are shown even in quiet mode."""
        self.err_console.print(f"Warning: {message}", style="yellow", markup=False)

    def error(self, message: str) -> None:
        """Print an error. Errors are always shown."""
        self.err_console.print(f"Error: {message}", style="bold red", markup=False)

    def output_json(self, data: Any) -> None:
        """Print data as JSON."""
        self.console.print_json(json.dumps(data))

    def print_summary(self, title: str, items: list[tuple[str, str]]) -> None:
        """Print a two-column summary table.

        Args:
            title: Table title
            items: (label, value) rows
        """
        if self.quiet or self.json_output:
            return
        table = Table(title=title, show_header=False)
        table.add_column("Key", style="bold")
        table.add_column("Value", overflow="fold")
        for label, value in items:
            table.add_row(label, value)
        self.console.print(table)
