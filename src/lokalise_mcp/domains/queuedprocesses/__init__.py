"""
Queued processes domain.

Status of asynchronous Lokalise jobs such as file uploads and exports.
"""

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.queuedprocesses.cli import register as register_cli
from lokalise_mcp.domains.queuedprocesses.resources import register_resources
from lokalise_mcp.domains.queuedprocesses.tools import register_tools

DOMAIN = DomainModule(
    meta=DomainMeta(
        name="queuedprocesses",
        description="Background process monitoring",
        tools_count=2,
        resources_count=1,
        cli_commands_count=2,
    ),
    register_cli=register_cli,
    register_tools=register_tools,
    register_resources=register_resources,
)

__all__ = ["DOMAIN"]
