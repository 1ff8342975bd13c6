"""
Command-line interface for Lokalise MCP.
"""

from lokalise_mcp.cli.app import create_app, main

__all__ = ["create_app", "main"]
