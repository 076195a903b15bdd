"""ghproj CLI domain models.

Pydantic models for configuration and for the GitHub Projects entities the
CLI reads from the GraphQL API.
"""

from .config_models import APIConfig, AppConfig
from .project import Owner, OwnerType, Project, ProjectOwner

__all__ = [
    "APIConfig",
    "AppConfig",
    "Owner",
    "OwnerType",
    "Project",
    "ProjectOwner",
]
