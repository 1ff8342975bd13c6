"""
Comments domain.

Discussion threads attached to translation keys.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.comments.cli import register as register_cli
from lokalise_mcp.domains.comments.resources import register_resources
from lokalise_mcp.domains.comments.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="comments",
        description="Key comments management",
        tools_count=5,
        resources_count=2,
        cli_commands_count=5,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
