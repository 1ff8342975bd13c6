"""
Translations domain.

Reads and updates translation content, including a rate-limited bulk update.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.translations.cli import register as register_cli
from lokalise_mcp.domains.translations.resources import register_resources
from lokalise_mcp.domains.translations.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="translations",
        description="Translation content management",
        tools_count=4,
        resources_count=2,
        cli_commands_count=4,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
