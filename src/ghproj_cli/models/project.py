"""GitHub Projects data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OwnerType(str, Enum):
    """Kind of account that owns a project."""

    USER = "USER"
    ORGANIZATION = "ORGANIZATION"
    VIEWER = "VIEWER"


@dataclass
class Owner:
    """A resolved project owner."""

    login: str
    type: OwnerType
    id: str = ""


class TotalCount(BaseModel):
    total_count: int = Field(default=0, alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)


class ProjectOwner(BaseModel):
    """Owner as embedded in a ProjectV2 node."""

    typename: str = Field(default="", alias="__typename")
    login: str = ""

    model_config = ConfigDict(populate_by_name=True)


class Project(BaseModel):
    """ProjectV2 node."""

    id: str
    number: int
    title: str = ""
    url: str = ""
    short_description: str = Field(default="", alias="shortDescription")
    public: bool = False
    closed: bool = False
    template: bool = False
    readme: str = ""
    item_count: TotalCount = Field(default_factory=TotalCount, alias="items")
    field_count: TotalCount = Field(default_factory=TotalCount, alias="fields")
    owner: ProjectOwner = Field(default_factory=ProjectOwner)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title", "url", "short_description", "readme", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        # GraphQL returns null for unset text fields
        return "" if v is None else v

    def owner_type(self) -> str:
        """Owner type as shown in JSON output ("User" or "Organization")."""
        return self.owner.typename

    def owner_login(self) -> str:
        return self.owner.login
