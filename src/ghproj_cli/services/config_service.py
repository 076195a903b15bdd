"""Configuration service for ghproj CLI.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json under the platform config directory
- Environment overrides (GH_HOST, GH_TOKEN, GITHUB_TOKEN, GH_PROMPT_DISABLED)
- Token lookup for the GraphQL client
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from ghproj_cli.exceptions import AppError
from ghproj_cli.models.config_models import AppConfig, graphql_url_for

TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")


class ConfigService:
    """Service for loading and saving the application's configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("ghproj_cli"))
        self.config_path = self.config_dir / "config.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage, creating defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise AppError(f"Failed to load config {self.config_path}: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        if self._config is None:
            raise AppError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise AppError(f"Failed to save config: {e}") from e

    @property
    def host(self) -> str:
        """Active GitHub host, GH_HOST taking precedence."""
        return os.environ.get("GH_HOST") or self.config.host

    @property
    def graphql_url(self) -> str:
        return graphql_url_for(self.host)

    def load_token(self) -> str | None:
        """Return the auth token from the environment or the config file."""
        for name in TOKEN_ENV_VARS:
            token = os.environ.get(name)
            if token:
                return token
        return self.config.token

    def prompts_disabled(self) -> bool:
        if os.environ.get("GH_PROMPT_DISABLED"):
            return True
        return self.config.prompt == "disabled"


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
