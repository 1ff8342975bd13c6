"""Tests for the HTTP transport helpers."""

import base64
import json
from unittest.mock import AsyncMock, Mock

import pytest
from mcp.server.fastmcp import FastMCP
from starlette.testclient import TestClient

from lokalise_mcp import VERSION
from lokalise_mcp.server.transports import (
    QueryConfigMiddleware,
    apply_query_config,
    create_http_app,
    decode_smithery_config,
    parse_query_config,
)


def encode(payload) -> str:
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


class TestSmitheryConfig:
    """Test decoding of the base64 config parameter."""

    def test_decodes_object(self):
        assert decode_smithery_config(encode({"LOKALISE_API_KEY": "k"})) == {"LOKALISE_API_KEY": "k"}

    def test_restores_plus_signs(self):
        """Test that '+' turned into spaces by query decoding still decodes."""
        encoded = encode({"LOKALISE_API_KEY": "k>>>?"})
        assert decode_smithery_config(encoded.replace("+", " ")) == {"LOKALISE_API_KEY": "k>>>?"}

    def test_invalid_payloads(self):
        """Test that bad payloads are rejected without raising."""
        assert decode_smithery_config("!!!") is None
        assert decode_smithery_config(base64.b64encode(b"not json").decode()) is None
        assert decode_smithery_config(encode(["a", "b"])) is None


class TestQueryConfig:
    """Test query string configuration."""

    def test_parse_nests_dot_notation(self):
        """Test nesting and that the config parameter is skipped."""
        parsed = parse_query_config([
            ("LOKALISE_API_KEY", "k"),
            ("server.host", "localhost"),
            ("server.port", "4000"),
            ("config", "ignored"),
        ])

        assert parsed == {
            "LOKALISE_API_KEY": "k",
            "server": {"host": "localhost", "port": "4000"},
        }

    def test_apply_smithery(self):
        """Test that the config parameter wins over plain parameters."""
        loader = Mock()
        encoded = encode({"LOKALISE_API_KEY": "k"})

        source = apply_query_config(f"config={encoded}&LOKALISE_API_KEY=other", loader)

        assert source == "smithery"
        loader.set_smithery_config.assert_called_once_with(encoded)
        loader.set_http_query_config.assert_not_called()
        loader.reload.assert_called_once_with()

    def test_apply_invalid_smithery(self):
        """Test that an undecodable config parameter changes nothing."""
        loader = Mock()

        assert apply_query_config("config=%25%25%25", loader) is None
        loader.reload.assert_not_called()

    def test_apply_query_parameters(self):
        loader = Mock()

        source = apply_query_config("LOKALISE_API_KEY=k&LOKALISE_API_HOSTNAME=https%3A%2F%2Fapi.example%2F", loader)

        assert source == "http_query"
        loader.set_http_query_config.assert_called_once_with({
            "LOKALISE_API_KEY": "k",
            "LOKALISE_API_HOSTNAME": "https://api.example/",
        })
        loader.reload.assert_called_once_with()

    def test_apply_empty(self):
        loader = Mock()

        assert apply_query_config("", loader) is None
        loader.reload.assert_not_called()


class TestQueryConfigMiddleware:
    """Test the ASGI middleware."""

    @staticmethod
    def scope(path: str, query: bytes = b"LOKALISE_API_KEY=k", scope_type: str = "http") -> dict:
        return {"type": scope_type, "path": path, "query_string": query}

    @pytest.mark.asyncio
    async def test_applies_on_mcp_endpoint(self):
        """Test that MCP requests apply their query string before the app runs."""
        app = AsyncMock()
        loader = Mock()
        middleware = QueryConfigMiddleware(app, path="/mcp", loader=loader)

        await middleware(self.scope("/mcp/"), AsyncMock(), AsyncMock())

        loader.set_http_query_config.assert_called_once_with({"LOKALISE_API_KEY": "k"})
        app.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_ignores_other_paths(self):
        """Test that other routes and lifespan events pass through untouched."""
        app = AsyncMock()
        loader = Mock()
        middleware = QueryConfigMiddleware(app, path="/mcp", loader=loader)

        await middleware(self.scope("/"), AsyncMock(), AsyncMock())
        await middleware({"type": "lifespan"}, AsyncMock(), AsyncMock())

        loader.reload.assert_not_called()
        assert app.await_count == 2


class TestHttpApp:
    """Test the Starlette application."""

    def test_health_check(self):
        """Test the plain text status route."""
        client = TestClient(create_http_app(FastMCP("test")))

        response = client.get("/")

        assert response.status_code == 200
        assert response.text == f"Lokalise MCP Server v{VERSION} is running"

    def test_cors_headers(self):
        """Test that cross-origin requests are allowed."""
        client = TestClient(create_http_app(FastMCP("test")))

        response = client.get("/", headers={"Origin": "https://inspector.example"})

        assert response.headers["access-control-allow-origin"] == "*"
