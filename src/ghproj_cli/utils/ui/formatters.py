"""Output formatters."""

import json
import re

from ghproj_cli.models.project import Project
from ghproj_cli.utils.ui.console import get_error_console

# Emitted as \u003c-style escapes so the document can be embedded in HTML
_HTML_UNSAFE = re.compile("[<>&\u2028\u2029]")


def _escape_html(text: str) -> str:
    return _HTML_UNSAFE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def json_project(project: Project) -> bytes:
    """Serialize a project to the compact JSON document printed by --format json."""
    document = {
        "number": project.number,
        "url": project.url,
        "shortDescription": project.short_description,
        "public": project.public,
        "closed": project.closed,
        "template": project.template,
        "title": project.title,
        "id": project.id,
        "readme": project.readme,
        "items": {"totalCount": project.item_count.total_count},
        "fields": {"totalCount": project.field_count.total_count},
        "owner": {"type": project.owner_type(), "login": project.owner_login()},
    }
    encoded = json.dumps(document, separators=(",", ":"), ensure_ascii=False)
    return _escape_html(encoded).encode("utf-8")


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    get_error_console().print(f"[bold red]Error:[/bold red] {message}")
