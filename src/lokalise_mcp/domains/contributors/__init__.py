"""
Contributors domain.

Project membership: who can work on which languages, with what rights.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.contributors.cli import register as register_cli
from lokalise_mcp.domains.contributors.resources import register_resources
from lokalise_mcp.domains.contributors.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="contributors",
        description="Project contributors management",
        tools_count=6,
        resources_count=2,
        cli_commands_count=6,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
