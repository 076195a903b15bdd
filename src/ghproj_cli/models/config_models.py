"""Configuration models for ghproj CLI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

GITHUB_HOST = "github.com"


class APIConfig(BaseModel):
    """API configuration."""

    timeout: int = Field(default=30, gt=0)


class AppConfig(BaseModel):
    """Main ghproj configuration."""

    host: str = Field(default=GITHUB_HOST, description="GitHub host name")
    token: str | None = Field(default=None, description="Personal access token")
    prompt: Literal["enabled", "disabled"] = Field(
        default="enabled", description="Whether interactive prompts are allowed"
    )
    api: APIConfig = Field(default_factory=APIConfig)

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Normalise the host name."""
        v = v.strip().lower()
        if not v:
            raise ValueError("host cannot be empty")
        return v

    @property
    def graphql_url(self) -> str:
        """GraphQL endpoint for the configured host."""
        return graphql_url_for(self.host)


def graphql_url_for(host: str) -> str:
    """Return the GraphQL endpoint of a GitHub or GitHub Enterprise host."""
    host = host.strip().lower()
    if host == GITHUB_HOST:
        return "https://api.github.com/graphql"
    return f"https://{host}/api/graphql"
