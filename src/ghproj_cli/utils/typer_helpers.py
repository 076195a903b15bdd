"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from ghproj_cli.utils.ui.console import get_error_console


def suggest_commands(attempted: str, available: list[str], limit: int = 3) -> list[str]:
    """Commands that share a prefix with *attempted*, then close spellings."""
    prefixed = [name for name in available if name.startswith(attempted)]
    similar = get_close_matches(attempted, available, n=limit, cutoff=0.6)
    return list(dict.fromkeys(prefixed + similar))[:limit]


class SuggestingGroup(TyperGroup):
    """Typer group answering unknown subcommands with "Did you mean this?"."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            visible = [
                name for name, command in self.commands.items() if not command.hidden
            ]
            suggestions = suggest_commands(args[0], visible)
            if not suggestions:
                raise

            console = get_error_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.command_path}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            console.print()
            console.print(f"Run '{ctx.command_path} --help' for usage.")
            raise typer.Exit(1) from e
