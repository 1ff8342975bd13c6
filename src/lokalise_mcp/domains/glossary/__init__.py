"""
Glossary domain.

Terms that must be translated consistently, kept untranslated or avoided.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.glossary.cli import register as register_cli
from lokalise_mcp.domains.glossary.resources import register_resources
from lokalise_mcp.domains.glossary.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="glossary",
        description="Glossary terms management",
        tools_count=5,
        resources_count=2,
        cli_commands_count=5,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
