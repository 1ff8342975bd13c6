"""
MCP server for Lokalise.

This package creates the FastMCP server, registers the workflow prompts and
runs the stdio and HTTP transports.
"""

from lokalise_mcp.server.factory import create_server
from lokalise_mcp.server.transports import run_http, run_stdio

__all__ = ["create_server", "run_http", "run_stdio"]
