"""
Projects domain.

Lists, inspects, creates, updates, empties and deletes Lokalise projects.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.projects.cli import register as register_cli
from lokalise_mcp.domains.projects.resources import register_resources
from lokalise_mcp.domains.projects.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="projects",
        description="Project management",
        tools_count=6,
        resources_count=2,
        cli_commands_count=6,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
