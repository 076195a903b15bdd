"""GitHub Projects queries: owner and project resolution, mutations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ghproj_cli.exceptions import AppError, GraphQLError, NotFoundError
from ghproj_cli.models.project import Owner, OwnerType, Project
from ghproj_cli.services.api.client import GraphQLClient, get_client
from ghproj_cli.utils.prompter import Prompter

# Largest page the API serves
LIMIT_MAX = 100

# Every ProjectV2 selection pages its items and fields. Commands that only
# need the project header bind these so no nested nodes are fetched.
SUPPRESS_NESTED_PAGINATION: dict[str, Any] = {
    "firstItems": 0,
    "afterItems": None,
    "firstFields": 0,
    "afterFields": None,
}

PAGE_VARIABLE_DEFINITIONS = (
    "$firstItems: Int!, $afterItems: String, $firstFields: Int!, $afterFields: String"
)

PROJECT_FRAGMENT = """
fragment projectFields on ProjectV2 {
  id
  number
  title
  url
  shortDescription
  public
  closed
  template
  readme
  items(first: $firstItems, after: $afterItems) { totalCount }
  fields(first: $firstFields, after: $afterFields) { totalCount }
  owner {
    __typename
    ... on User { login }
    ... on Organization { login }
  }
}
"""

VIEWER_OWNER_QUERY = "query ViewerOwner { viewer { id login } }"

USER_ORG_OWNER_QUERY = """
query UserOrgOwner($login: String!) {
  user(login: $login) { id login }
  organization(login: $login) { id login }
}
"""

VIEWER_LOGIN_ORGS_QUERY = """
query ViewerLoginAndOrgs($first: Int!) {
  viewer {
    id
    login
    organizations(first: $first) {
      nodes { id login viewerCanCreateProjects }
    }
  }
}
"""

# owner type -> (operation prefix, selection, response key)
_OWNER_SCOPES: dict[OwnerType, tuple[str, str, str]] = {
    OwnerType.USER: ("User", "user(login: $login)", "user"),
    OwnerType.ORGANIZATION: ("Org", "organization(login: $login)", "organization"),
    OwnerType.VIEWER: ("Viewer", "viewer", "viewer"),
}


@dataclass
class ProjectMutation:
    """A named write operation returning the affected ProjectV2.

    ``project`` is filled in by ``ProjectClient.mutate``.
    """

    field: str
    input_type: str
    project: Project | None = None

    def document(self, operation_name: str) -> str:
        return (
            f"mutation {operation_name}($input: {self.input_type}!, "
            f"{PAGE_VARIABLE_DEFINITIONS}) {{\n"
            f"  {self.field}(input: $input) {{\n"
            "    projectV2 { ...projectFields }\n"
            "  }\n"
            "}\n" + PROJECT_FRAGMENT
        )

    def load(self, data: dict[str, Any]) -> None:
        self.project = Project.model_validate(data[self.field]["projectV2"])


def _owner_variables(owner: Owner) -> dict[str, Any]:
    if owner.type == OwnerType.VIEWER:
        return {}
    return {"login": owner.login}


def _owner_variable_definitions(owner: Owner) -> str:
    if owner.type == OwnerType.VIEWER:
        return ""
    return "$login: String!, "


def _page_variables(include_fields: bool) -> dict[str, Any]:
    variables = dict(SUPPRESS_NESTED_PAGINATION)
    if include_fields:
        variables["firstFields"] = LIMIT_MAX
    return variables


class ProjectClient:
    """Client for resolving owners/projects and mutating projects."""

    def __init__(self, client: GraphQLClient, prompter: Prompter | None = None):
        self.client = client
        self.prompter = prompter or Prompter()

    async def close(self) -> None:
        await self.client.close()

    async def owner_id_and_type(self, login: str) -> tuple[str, OwnerType]:
        """Look up the node ID and account type of *login*."""
        if login == "@me":
            data = await self.client.query("ViewerOwner", VIEWER_OWNER_QUERY)
            return data["viewer"]["id"], OwnerType.VIEWER

        try:
            data = await self.client.query(
                "UserOrgOwner", USER_ORG_OWNER_QUERY, {"login": login}
            )
        except GraphQLError as e:
            # Only one of user/organization can exist for a login
            if not e.only_not_found():
                raise
            data = e.data

        if data.get("user"):
            return data["user"]["id"], OwnerType.USER
        if data.get("organization"):
            return data["organization"]["id"], OwnerType.ORGANIZATION
        raise NotFoundError(f"unknown owner type for {login}")

    async def user_org_logins(self) -> list[Owner]:
        """The viewer followed by organizations the viewer can create projects in."""
        data = await self.client.query(
            "ViewerLoginAndOrgs", VIEWER_LOGIN_ORGS_QUERY, {"first": LIMIT_MAX}
        )
        viewer = data["viewer"]
        logins = [Owner(login=viewer["login"], type=OwnerType.VIEWER, id=viewer["id"])]
        for org in viewer["organizations"]["nodes"]:
            if org.get("viewerCanCreateProjects"):
                logins.append(
                    Owner(login=org["login"], type=OwnerType.ORGANIZATION, id=org["id"])
                )
        return logins

    async def new_owner(self, can_prompt: bool, login: str) -> Owner:
        """Resolve *login*, prompting for one when it is empty."""
        if login:
            owner_id, owner_type = await self.owner_id_and_type(login)
            return Owner(login=login, type=owner_type, id=owner_id)

        if not can_prompt:
            raise AppError("owner is required when not running interactively")

        logins = await self.user_org_logins()
        options = [owner.login for owner in logins]
        answer = self.prompter.select("Which owner would you like to use?", "", options)
        return logins[answer]

    async def project(
        self, owner: Owner, number: int, include_fields: bool = False
    ) -> Project:
        """Fetch a single project by number."""
        prefix, selection, key = _OWNER_SCOPES[owner.type]
        document = (
            f"query {prefix}Project({_owner_variable_definitions(owner)}"
            f"$number: Int!, {PAGE_VARIABLE_DEFINITIONS}) {{\n"
            f"  {selection} {{ projectV2(number: $number) {{ ...projectFields }} }}\n"
            "}\n" + PROJECT_FRAGMENT
        )
        variables = {
            **_owner_variables(owner),
            "number": number,
            **_page_variables(include_fields),
        }
        data = await self.client.query(f"{prefix}Project", document, variables)
        node = (data.get(key) or {}).get("projectV2")
        if node is None:
            raise NotFoundError(f"project {number} not found for {owner.login}")
        return Project.model_validate(node)

    async def projects(self, owner: Owner, include_fields: bool = False) -> list[Project]:
        """List the first page of an owner's projects."""
        prefix, selection, key = _OWNER_SCOPES[owner.type]
        document = (
            f"query {prefix}Projects({_owner_variable_definitions(owner)}"
            f"$first: Int!, {PAGE_VARIABLE_DEFINITIONS}) {{\n"
            f"  {selection} {{ projectsV2(first: $first) {{ nodes {{ ...projectFields }} }} }}\n"
            "}\n" + PROJECT_FRAGMENT
        )
        variables = {
            **_owner_variables(owner),
            "first": LIMIT_MAX,
            **_page_variables(include_fields),
        }
        data = await self.client.query(f"{prefix}Projects", document, variables)
        nodes = ((data.get(key) or {}).get("projectsV2") or {}).get("nodes") or []
        return [Project.model_validate(node) for node in nodes]

    async def new_project(
        self, can_prompt: bool, owner: Owner, number: int, include_fields: bool
    ) -> Project:
        """Resolve a project by number, prompting for one when number is 0."""
        if number != 0:
            return await self.project(owner, number, include_fields)

        if not can_prompt:
            raise AppError("project number is required when not running interactively")

        projects = await self.projects(owner, include_fields)
        if not projects:
            raise NotFoundError(f"no projects found for {owner.login}")

        options = [project.title for project in projects]
        answer = self.prompter.select("Which project would you like to use?", "", options)
        return projects[answer]

    async def mutate(
        self,
        operation_name: str,
        mutation: ProjectMutation,
        variables: dict[str, Any],
    ) -> None:
        """Send *mutation* and load the returned project into it."""
        data = await self.client.mutate(
            operation_name, mutation.document(operation_name), variables
        )
        mutation.load(data)


def new_project_client() -> ProjectClient:
    """Build a ProjectClient over a fresh GraphQL client."""
    return ProjectClient(get_client())
