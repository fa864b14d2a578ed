"""Rich-based console output for autobar CLI commands."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape


class RichOutputFormatter:
    """Formats user-facing CLI messages on stderr.

    Results (the JSON config) are written to stdout separately so the command
    can be piped into a file.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.console = Console(file=sys.stderr, highlight=False, soft_wrap=True)

    def info(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"[cyan]info[/cyan] {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]warning[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]error[/bold red] {escape(message)}")
