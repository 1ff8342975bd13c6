"""
Tasks domain.

Translation and review assignments: who works on which keys and languages,
and by when.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.tasks.cli import register as register_cli
from lokalise_mcp.domains.tasks.resources import register_resources
from lokalise_mcp.domains.tasks.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="tasks",
        description="Translation task management",
        tools_count=5,
        resources_count=2,
        cli_commands_count=5,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
