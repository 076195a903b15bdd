"""Mark or unmark a project as a template."""

import re
from dataclasses import dataclass
from enum import Enum

import typer

from ghproj_cli.commands.decorators import command_wrapper
from ghproj_cli.exceptions import FlagError
from ghproj_cli.models.project import Project
from ghproj_cli.services.api.queries import (
    SUPPRESS_NESTED_PAGINATION,
    ProjectClient,
    ProjectMutation,
    new_project_client,
)
from ghproj_cli.utils.iostreams import IOStreams, get_iostreams
from ghproj_cli.utils.ui.formatters import json_project

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_NUMBER_RE = re.compile(r"^[+-]?[0-9]+$")


class OutputFormat(str, Enum):
    JSON = "json"


class TemplateAction(Enum):
    MARK = "mark"
    UNMARK = "unmark"


@dataclass(frozen=True)
class TemplateMutation:
    operation_name: str
    field: str
    input_type: str
    verb: str


TEMPLATE_MUTATIONS: dict[TemplateAction, TemplateMutation] = {
    TemplateAction.MARK: TemplateMutation(
        operation_name="MarkProjectTemplate",
        field="markProjectV2AsTemplate",
        input_type="MarkProjectV2AsTemplateInput",
        verb="Marked",
    ),
    TemplateAction.UNMARK: TemplateMutation(
        operation_name="UnmarkProjectTemplate",
        field="unmarkProjectV2AsTemplate",
        input_type="UnmarkProjectV2AsTemplateInput",
        verb="Unmarked",
    ),
}


@dataclass
class TemplateOptions:
    owner: str = ""
    undo: bool = False
    number: int = 0
    project_id: str = ""
    format: str = ""

    @property
    def action(self) -> TemplateAction:
        return TemplateAction.UNMARK if self.undo else TemplateAction.MARK


@dataclass
class TemplateConfig:
    client: ProjectClient
    opts: TemplateOptions
    io: IOStreams


def parse_project_number(value: str) -> int:
    """Parse a positional project number as a signed 32-bit integer."""
    if _NUMBER_RE.match(value):
        number = int(value)
        if _INT32_MIN <= number <= _INT32_MAX:
            return number
    raise FlagError(f"invalid number: {value}")


def template_args(config: TemplateConfig) -> tuple[str, ProjectMutation, dict]:
    """Build the operation name, mutation and variables for the selected action."""
    entry = TEMPLATE_MUTATIONS[config.opts.action]
    mutation = ProjectMutation(field=entry.field, input_type=entry.input_type)
    variables = {
        "input": {"projectId": config.opts.project_id},
        **SUPPRESS_NESTED_PAGINATION,
    }
    return entry.operation_name, mutation, variables


async def run_template(config: TemplateConfig) -> None:
    can_prompt = config.io.can_prompt()
    owner = await config.client.new_owner(can_prompt, config.opts.owner)

    project = await config.client.new_project(
        can_prompt, owner, config.opts.number, False
    )
    config.opts.project_id = project.id

    operation_name, mutation, variables = template_args(config)
    await config.client.mutate(operation_name, mutation, variables)

    # JSON output reports the project as it was fetched, before the mutation
    if config.opts.format == OutputFormat.JSON.value:
        print_json(config, project)
        return

    print_results(config, mutation.project)


def print_results(config: TemplateConfig, project: Project) -> None:
    if not config.io.is_stdout_tty():
        return

    verb = TEMPLATE_MUTATIONS[config.opts.action].verb
    config.io.out.write(f"{verb} project {project.number} as a template.\n")


def print_json(config: TemplateConfig, project: Project) -> None:
    config.io.write_bytes(json_project(project))


@command_wrapper
async def template(
    number: str | None = typer.Argument(
        None, metavar="[<number>]", help="Project number", show_default=False
    ),
    owner: str = typer.Option(
        "", "--owner", help="Login of the owner. Use \"@me\" for the current user."
    ),
    undo: bool = typer.Option(False, "--undo", help="Unmark the project as a template."),
    output_format: OutputFormat | None = typer.Option(
        None, "--format", help="Output format"
    ),
) -> None:
    """
    Mark a project as a template.

    Examples:
      ghproj project template 1 --owner "github"
      ghproj project template 1 --owner "github" --undo
    """
    opts = TemplateOptions(
        owner=owner,
        undo=undo,
        format=output_format.value if output_format else "",
    )
    if number is not None:
        opts.number = parse_project_number(number)

    client = new_project_client()
    try:
        await run_template(TemplateConfig(client=client, opts=opts, io=get_iostreams()))
    finally:
        await client.close()
