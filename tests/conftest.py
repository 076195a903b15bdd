"""Shared test fixtures and configuration.

Keeps config and log files in a temporary directory and clears the
environment variables the CLI reads.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from ghproj_cli.models.project import Project


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path, monkeypatch):
    """Point platformdirs at *tmp_path* and reset cached singletons."""
    import ghproj_cli.utils.logger as logger_mod
    from ghproj_cli.services.config_service import get_config_service

    for name in ("GH_TOKEN", "GITHUB_TOKEN", "GH_HOST", "GH_PROMPT_DISABLED"):
        monkeypatch.delenv(name, raising=False)

    tmpdir = str(tmp_path)
    logger_mod._logger = None
    logging.getLogger("ghproj_cli").handlers.clear()
    get_config_service.cache_clear()

    with patch("ghproj_cli.utils.logger.user_log_dir", return_value=tmpdir):
        with patch(
            "ghproj_cli.services.config_service.user_config_dir", return_value=tmpdir
        ):
            yield tmp_path

    get_config_service.cache_clear()
    for handler in logging.getLogger("ghproj_cli").handlers:
        handler.close()
    logging.getLogger("ghproj_cli").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def project_node() -> dict:
    """A ProjectV2 node as returned by the GraphQL API."""
    return {
        "id": "PVT_kwDOABCD",
        "number": 42,
        "title": "Roadmap",
        "url": "https://github.com/orgs/github/projects/42",
        "shortDescription": "Quarterly roadmap",
        "public": True,
        "closed": False,
        "template": False,
        "readme": None,
        "items": {"totalCount": 0},
        "fields": {"totalCount": 0},
        "owner": {"__typename": "Organization", "login": "github"},
    }


@pytest.fixture()
def project(project_node) -> Project:
    return Project.model_validate(project_node)
