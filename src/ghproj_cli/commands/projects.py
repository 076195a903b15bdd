"""Project commands for ghproj CLI."""

import typer

from ghproj_cli.commands.template_command import template
from ghproj_cli.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    cls=SuggestingGroup,
    help="Work with GitHub Projects",
    no_args_is_help=True,
)

app.command("template")(template)
