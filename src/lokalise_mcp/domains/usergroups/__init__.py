"""
User groups domain.

Team user groups bundle permissions, members and project access.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.usergroups.cli import register as register_cli
from lokalise_mcp.domains.usergroups.resources import register_resources
from lokalise_mcp.domains.usergroups.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="usergroups",
        description="Team user groups management",
        tools_count=9,
        resources_count=2,
        cli_commands_count=9,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
