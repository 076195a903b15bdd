"""Main entry point for ghproj CLI."""

import typer
from rich.console import Console

from ghproj_cli import __version__
from ghproj_cli.commands import projects
from ghproj_cli.services.config_service import get_config_service
from ghproj_cli.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="ghproj",
    cls=SuggestingGroup,
    help="Work with GitHub Projects from the command line",
    no_args_is_help=True,
)

console = Console()


app.add_typer(projects.app, name="project", help="Work with GitHub Projects")


@app.command()
def version() -> None:
    """Show version and the configured GitHub host."""
    console.print(f"[bold]ghproj[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]host: {get_config_service().host}[/dim]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
