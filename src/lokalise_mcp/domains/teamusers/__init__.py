"""
Team users domain.

Members of a Lokalise team and their team-wide roles.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.teamusers.cli import register as register_cli
from lokalise_mcp.domains.teamusers.resources import register_resources
from lokalise_mcp.domains.teamusers.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="teamusers",
        description="Team users management",
        tools_count=4,
        resources_count=2,
        cli_commands_count=4,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
