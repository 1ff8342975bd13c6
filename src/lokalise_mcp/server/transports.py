"""
Transports for the MCP server.

stdio serves a single client over stdin/stdout. HTTP serves the streamable
HTTP endpoint at ``/mcp`` with uvicorn; clients may pass configuration in
the query string, either as a base64 JSON ``config`` parameter or as
individual (dot-notation) parameters.
"""

from typing import Any, Dict, Iterable, Optional, Tuple
from urllib.parse import unquote
import base64
import binascii
import json
import logging

import uvicorn
from mcp.server.fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.datastructures import QueryParams
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from lokalise_mcp import VERSION
from lokalise_mcp.config import ConfigLoader, config
from lokalise_mcp.server.factory import MCP_ENDPOINT

logger = logging.getLogger(__name__)

SMITHERY_PARAM = "config"


def decode_smithery_config(encoded: str) -> Optional[Dict[str, Any]]:
    """Decode a URL-encoded base64 JSON configuration, or None when invalid."""
    try:
        # '+' arrives as a space once the query string is decoded
        text = unquote(encoded).replace(" ", "+")
        data = json.loads(base64.b64decode(text).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to parse Smithery config: {e}")
        return None
    if not isinstance(data, dict):
        logger.error("Failed to parse Smithery config: not a JSON object")
        return None
    return data


def parse_query_config(params: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """Nest dot-notation query parameters.

    ``server.host=x`` becomes ``{"server": {"host": "x"}}``. The ``config``
    parameter is skipped.
    """
    parsed: Dict[str, Any] = {}
    for key, value in params:
        if key == SMITHERY_PARAM:
            continue
        *parents, leaf = key.split(".")
        current = parsed
        for part in parents:
            child = current.get(part)
            if not isinstance(child, dict):
                child = current[part] = {}
            current = child
        current[leaf] = value
    return parsed


def apply_query_config(query_string: str, loader: ConfigLoader = config) -> Optional[str]:
    """Apply configuration carried by an MCP request's query string.

    Returns:
        ``"smithery"`` or ``"http_query"`` for the source that was applied,
        or None when the query string carried no usable configuration
    """
    params = QueryParams(query_string)
    if not params:
        return None

    encoded = params.get(SMITHERY_PARAM)
    if encoded:
        logger.debug(f"Received Smithery config parameter ({len(encoded)} characters)")
        smithery_config = decode_smithery_config(encoded)
        if smithery_config is None:
            return None
        loader.set_smithery_config(unquote(encoded).replace(" ", "+"))
        loader.reload()
        logger.info(
            f"Configuration loaded from Smithery (api key: {bool(smithery_config.get('LOKALISE_API_KEY'))}, "
            f"hostname: {smithery_config.get('LOKALISE_API_HOSTNAME')})"
        )
        return "smithery"

    logger.debug(f"Received query parameters: {sorted(params.keys())}")
    parsed = parse_query_config(params.multi_items())
    if not parsed:
        return None
    loader.set_http_query_config(parsed)
    loader.reload()
    logger.info("Configuration reloaded with HTTP query parameters")
    return "http_query"


class QueryConfigMiddleware:
    """ASGI middleware applying query string configuration to MCP requests."""

    def __init__(self, app: ASGIApp, path: str = MCP_ENDPOINT, loader: Optional[ConfigLoader] = None):
        self.app = app
        self.path = path.rstrip("/")
        self.loader = loader or config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].rstrip("/") == self.path:
            query_string = scope.get("query_string", b"").decode("latin-1")
            if query_string:
                apply_query_config(query_string, self.loader)
        await self.app(scope, receive, send)


def create_http_app(server: FastMCP) -> Starlette:
    """Build the Starlette application serving the MCP endpoint and the health check."""

    @server.custom_route("/", methods=["GET"])
    async def health(request: Request) -> Response:
        return PlainTextResponse(f"Lokalise MCP Server v{VERSION} is running")

    app = server.streamable_http_app()
    app.add_middleware(QueryConfigMiddleware, path=MCP_ENDPOINT)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )
    return app


async def run_stdio(server: FastMCP) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    logger.info("Starting MCP server with STDIO transport")
    await server.run_stdio_async()


async def run_http(server: FastMCP, port: Optional[int] = None, host: str = "0.0.0.0") -> None:
    """Serve MCP over streamable HTTP with uvicorn."""
    port = port or config.get_port()
    app = create_http_app(server)

    uvicorn_config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level="debug" if config.is_debug_enabled() else "warning",
    )
    logger.info(f"HTTP transport listening on http://localhost:{port}{MCP_ENDPOINT}")
    await uvicorn.Server(uvicorn_config).serve()
