"""
Configuration package for Lokalise MCP.

This package contains the configuration schemas, the .env and global config
file loaders, and the prioritized configuration loader.
"""

from lokalise_mcp.config.loader import ConfigLoader, ConfigSource, config

__all__ = ["ConfigLoader", "ConfigSource", "config"]
