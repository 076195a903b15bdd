"""Unit tests for GraphQLClient.

Networking goes through httpx.MockTransport; config lookups are mocked.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import httpx
import pytest

from ghproj_cli.exceptions import APIError, AuthError, GraphQLError
from ghproj_cli.services.api.client import GraphQLClient, get_client

URL = "https://api.github.com/graphql"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_client(handler=None, token: str | None = "test-token") -> GraphQLClient:
    """Return a GraphQLClient with mocked config and an in-memory transport."""
    client = GraphQLClient.__new__(GraphQLClient)

    mock_config_manager = MagicMock()
    mock_config_manager.load_token.return_value = token
    client.config_manager = mock_config_manager
    client.config = MagicMock()
    client.url = URL
    client.timeout = 30
    client._client = None
    if handler is not None:
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return client


def _json_handler(body: dict, status_code: int = 200, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=body)

    return handler


class TestGetClientFactory:
    def test_returns_graphql_client_instance(self, mocker):
        config_svc = MagicMock(graphql_url=URL)
        config_svc.config.api.timeout = 12
        mocker.patch(
            "ghproj_cli.services.api.client.get_config_service", return_value=config_svc
        )
        client = get_client()
        assert isinstance(client, GraphQLClient)
        assert client.url == URL
        assert client.timeout == 12


class TestHeaders:
    def test_bearer_token(self):
        headers = _make_client(token="abc")._get_headers()
        assert headers["Authorization"] == "bearer abc"
        assert headers["Content-Type"] == "application/json"

    def test_missing_token_raises_auth_error(self):
        with pytest.raises(AuthError):
            _make_client(token=None)._get_headers()


class TestExecute:
    @pytest.mark.asyncio
    async def test_returns_data_and_posts_payload(self):
        seen: list[httpx.Request] = []
        client = _make_client(_json_handler({"data": {"viewer": {"login": "m"}}}, seen=seen))

        data = await client.query("ViewerOwner", "query ViewerOwner { viewer { login } }")

        assert data == {"viewer": {"login": "m"}}
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == URL
        assert request.headers["Authorization"] == "bearer test-token"
        payload = json.loads(request.content)
        assert payload["operationName"] == "ViewerOwner"
        assert payload["variables"] == {}
        await client.close()

    @pytest.mark.asyncio
    async def test_mutate_sends_variables(self):
        seen: list[httpx.Request] = []
        client = _make_client(_json_handler({"data": {"ok": True}}, seen=seen))

        await client.mutate("M", "mutation M { ok }", {"firstItems": 0, "afterItems": None})

        payload = json.loads(seen[0].content)
        assert payload["variables"] == {"firstItems": 0, "afterItems": None}
        await client.close()

    @pytest.mark.asyncio
    async def test_graphql_errors_raise_with_partial_data(self):
        body = {
            "data": {"user": None},
            "errors": [{"type": "NOT_FOUND", "message": "Could not resolve to a User"}],
        }
        client = _make_client(_json_handler(body))

        with pytest.raises(GraphQLError) as exc_info:
            await client.query("UserOrgOwner", "query { user }")

        assert exc_info.value.data == {"user": None}
        assert exc_info.value.only_not_found()
        assert "Could not resolve to a User" in str(exc_info.value)
        await client.close()

    @pytest.mark.asyncio
    async def test_unauthorized_raises_auth_error(self):
        client = _make_client(_json_handler({"message": "Bad credentials"}, status_code=401))
        with pytest.raises(AuthError):
            await client.query("Q", "query { viewer { login } }")
        await client.close()

    @pytest.mark.asyncio
    async def test_server_error_raises_api_error(self):
        client = _make_client(_json_handler({}, status_code=502))
        with pytest.raises(APIError) as exc_info:
            await client.query("Q", "query { viewer { login } }")
        assert exc_info.value.status_code == 502
        await client.close()

    @pytest.mark.asyncio
    async def test_transport_error_raises_api_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _make_client(handler)
        with pytest.raises(APIError, match="connection refused"):
            await client.query("Q", "query { viewer { login } }")
        await client.close()

    @pytest.mark.asyncio
    async def test_no_token_fails_before_request(self):
        seen: list[httpx.Request] = []
        client = _make_client(_json_handler({"data": {}}, seen=seen), token=None)
        with pytest.raises(AuthError):
            await client.query("Q", "query { viewer { login } }")
        assert seen == []
        await client.close()


class TestClose:
    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        client = _make_client(_json_handler({"data": {}}))
        async with client as c:
            assert c is client
        assert client._client is None

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        client = _make_client()
        await client.close()
        assert client._client is None
