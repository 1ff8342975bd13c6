"""
Languages domain.

System languages supported by Lokalise and the languages configured in a
project.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.languages.cli import register as register_cli
from lokalise_mcp.domains.languages.resources import register_resources
from lokalise_mcp.domains.languages.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="languages",
        description="System and project languages management",
        tools_count=6,
        resources_count=2,
        cli_commands_count=6,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
