"""
Domain registry for Lokalise MCP.

This module keeps track of the Lokalise domains and wires their CLI
commands, MCP tools and MCP resources into a typer app or a FastMCP server.
"""

from typing import Any, Dict, List
import logging

import typer
from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import DomainMeta, DomainModule

logger = logging.getLogger(__name__)


class DomainRegistry:
    """Registry for managing Lokalise domains."""

    def __init__(self):
        """Initialize an empty registry."""
        self._domains: Dict[str, DomainModule] = {}

    def register(self, domain: DomainModule, force: bool = False) -> bool:
        """Register a domain.

        Args:
            domain: Domain module to register
            force: Replace a domain already registered under the same name

        Returns:
            True if the domain was registered
        """
        name = domain.meta.name
        if not force and name in self._domains:
            logger.warning(f"Domain '{name}' already registered. Use force=True to override.")
            return False

        self._domains[name] = domain
        logger.debug(f"Registered domain: {name}")
        return True

    def list(self) -> List[DomainMeta]:
        """Metadata of every registered domain, in registration order."""
        return [domain.meta for domain in self._domains.values()]

    def register_all_cli(self, app: typer.Typer) -> List[str]:
        """Add the commands of every domain to a typer app.

        Returns:
            Names of the domains whose commands were added
        """
        for domain in self._domains.values():
            domain.register_cli(app)
        logger.debug(f"Registered CLI commands for {len(self._domains)} domains")
        return list(self._domains)

    def register_all_tools(self, server: FastMCP) -> List[str]:
        """Register the MCP tools of every domain on a server."""
        for name, domain in self._domains.items():
            domain.register_tools(server)
            logger.debug(f"Registered {domain.meta.tools_count} tools for domain {name}")
        logger.info(f"Registered tools for {len(self._domains)} domains")
        return list(self._domains)

    def register_all_resources(self, server: FastMCP) -> List[str]:
        """Register the MCP resources of every domain on a server."""
        for name, domain in self._domains.items():
            domain.register_resources(server)
            logger.debug(f"Registered {domain.meta.resources_count} resources for domain {name}")
        logger.info(f"Registered resources for {len(self._domains)} domains")
        return list(self._domains)

    def summary(self) -> Dict[str, Any]:
        """Get registry statistics.

        Returns:
            Domain count, totals of tools, resources and CLI commands, and
            the per-domain metadata
        """
        metas = self.list()
        return {
            "total_domains": len(metas),
            "total_tools": sum(meta.tools_count for meta in metas),
            "total_resources": sum(meta.resources_count for meta in metas),
            "total_cli_commands": sum(meta.cli_commands_count for meta in metas),
            "domains": [
                {
                    "name": meta.name,
                    "description": meta.description,
                    "version": meta.version,
                    "tools": meta.tools_count,
                    "resources": meta.resources_count,
                    "cli_commands": meta.cli_commands_count,
                }
                for meta in metas
            ],
        }


def create_default_registry() -> DomainRegistry:
    """Create a registry holding all Lokalise domains."""
    from lokalise_mcp.domains import (
        comments,
        contributors,
        glossary,
        keys,
        languages,
        projects,
        queuedprocesses,
        tasks,
        teamusers,
        translations,
        usergroups,
    )

    registry = DomainRegistry()
    for module in (
        projects,
        keys,
        languages,
        translations,
        tasks,
        comments,
        contributors,
        glossary,
        usergroups,
        teamusers,
        queuedprocesses,
    ):
        registry.register(module.DOMAIN)
    return registry
