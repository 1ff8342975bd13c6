"""
Lokalise MCP - Model Context Protocol server and CLI for Lokalise.

This package exposes the Lokalise translation management API as MCP tools,
MCP resources and command-line commands.
"""

__version__ = "1.0.7"
__author__ = "Lokalise MCP Team"
__license__ = "MIT"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "lokalise-mcp"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
