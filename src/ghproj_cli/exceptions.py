"""Exceptions raised by ghproj CLI.

Every error carries the exit code the command wrapper should terminate with.
"""

from __future__ import annotations

from typing import Any

from ghproj_cli.utils import exit_codes


class AppError(Exception):
    """Custom application error with exit code."""

    exit_code = exit_codes.ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class FlagError(AppError):
    """Invalid command-line input."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class AuthError(AppError):
    """Missing or rejected credentials."""

    exit_code = exit_codes.ERROR_AUTH_FAILURE


class APIError(AppError):
    """Transport failure or unexpected HTTP status."""

    exit_code = exit_codes.ERROR_NETWORK

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    """Owner or project could not be resolved."""

    exit_code = exit_codes.ERROR_NOT_FOUND


class GraphQLError(AppError):
    """The API answered with a GraphQL ``errors`` list."""

    def __init__(self, errors: list[dict[str, Any]], data: dict[str, Any] | None = None):
        messages = "\n".join(str(e.get("message", e)) for e in errors)
        super().__init__(f"GraphQL: {messages}")
        self.errors = errors
        self.data = data or {}

    def only_not_found(self) -> bool:
        """Return True when every error is a NOT_FOUND lookup failure."""
        return all(e.get("type") == "NOT_FOUND" for e in self.errors)
