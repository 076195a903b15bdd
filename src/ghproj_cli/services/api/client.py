"""GraphQL client for the GitHub API."""

from typing import Any

import httpx

from ghproj_cli import __version__
from ghproj_cli.exceptions import APIError, AuthError, GraphQLError
from ghproj_cli.services.config_service import get_config_service
from ghproj_cli.utils.logger import get_logger


class GraphQLClient:
    """HTTP client posting GraphQL documents to the GitHub API."""

    def __init__(self):
        self.config_manager = get_config_service()
        self.config = self.config_manager.config
        self.url = self.config_manager.graphql_url
        self.timeout = self.config.api.timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GraphQLClient":
        """Enter the async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the async context manager and ensure the client is closed."""
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers with authentication."""
        token = self.config_manager.load_token()
        if not token:
            raise AuthError(
                "No GitHub token found. Set GH_TOKEN or add a token to the config file."
            )
        return {
            "Content-Type": "application/json",
            "Accept": "application/vnd.github+json",
            "Authorization": f"bearer {token}",
            "User-Agent": f"ghproj-cli/{__version__}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
            )
        self._client.headers.update(self._get_headers())
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def execute(
        self,
        operation_name: str,
        document: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Post a GraphQL document and return its ``data`` member.

        Raises GraphQLError when the response carries ``errors``; the partial
        ``data`` is attached to the exception.
        """
        logger = get_logger()
        client = await self._get_client()
        payload = {
            "query": document,
            "variables": variables or {},
            "operationName": operation_name,
        }
        logger.debug("graphql request: %s", operation_name)

        try:
            response = await client.post(self.url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("graphql %s failed: HTTP %d", operation_name, status)
            if status == 401:
                raise AuthError(
                    "GitHub rejected the token (HTTP 401). Check GH_TOKEN."
                ) from e
            raise APIError(
                f"HTTP {status}: {e.response.reason_phrase} ({self.url})",
                status_code=status,
            ) from e
        except httpx.RequestError as e:
            logger.warning("graphql %s failed: %s", operation_name, e)
            raise APIError(f"Request to {self.url} failed: {e}") from e

        body = response.json()
        if body.get("errors"):
            logger.warning("graphql %s returned errors", operation_name)
            raise GraphQLError(body["errors"], body.get("data"))
        return body.get("data") or {}

    async def query(
        self, operation_name: str, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run a read-only query."""
        return await self.execute(operation_name, document, variables)

    async def mutate(
        self, operation_name: str, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run a mutation."""
        return await self.execute(operation_name, document, variables)


def get_client() -> GraphQLClient:
    """Get a GraphQL client instance."""
    return GraphQLClient()
