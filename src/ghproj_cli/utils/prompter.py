"""Interactive selection prompts."""

from __future__ import annotations

import typer
from rich.markup import escape

from ghproj_cli.utils.ui.console import get_console


class Prompter:
    """Numbered-list selection prompt."""

    def __init__(self, console=None):
        self.console = console or get_console()

    def select(self, message: str, default: str, options: list[str]) -> int:
        """Ask the user to pick one of *options*; return its index."""
        if not options:
            raise ValueError("no options to select from")

        self.console.print(f"[bold]{message}[/bold]")
        for i, option in enumerate(options, 1):
            self.console.print(f"  {i}. {escape(option)}")

        default_choice = "1"
        if default in options:
            default_choice = str(options.index(default) + 1)

        while True:
            choice = typer.prompt("Pick a number", default=default_choice)
            try:
                idx = int(choice) - 1
            except ValueError:
                idx = -1
            if 0 <= idx < len(options):
                return idx
            self.console.print(
                f"[red]Invalid choice:[/red] enter a number between 1 and {len(options)}"
            )
