"""
Translation keys domain.

Lists, inspects, creates, updates and deletes the keys of a Lokalise project.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.keys.cli import register as register_cli
from lokalise_mcp.domains.keys.resources import register_resources
from lokalise_mcp.domains.keys.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="keys",
        description="Translation keys management",
        tools_count=7,
        resources_count=2,
        cli_commands_count=7,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
