"""
MCP server factory.
"""

from typing import Optional
import logging

from mcp.server.fastmcp import FastMCP

from lokalise_mcp import PACKAGE_NAME, VERSION
from lokalise_mcp.domains.registry import DomainRegistry, create_default_registry
from lokalise_mcp.server.prompts import PromptRegistry, register_prompts

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Tools and resources for the Lokalise translation management platform. "
    "Start with lokalise_list_projects to find project IDs, then explore keys, "
    "languages, translations, tasks, comments, glossary terms and contributors of a "
    "project. Team level tools (usergroups, team users) take a team ID. "
    "Resources use the lokalise:// scheme, for example lokalise://projects or "
    "lokalise://keys/{project_id}?limit=50. All results are Markdown."
)

MCP_ENDPOINT = "/mcp"


def create_server(
    registry: Optional[DomainRegistry] = None,
    prompt_registry: Optional[PromptRegistry] = None,
) -> FastMCP:
    """Create an MCP server with every domain's tools and resources and the prompts.

    Args:
        registry: Domains to expose; all Lokalise domains when omitted
        prompt_registry: Prompt templates; the built-in prompts when omitted

    Returns:
        The configured server, not yet running
    """
    logger.info(f"Creating Lokalise MCP server v{VERSION}")

    server = FastMCP(
        PACKAGE_NAME,
        instructions=INSTRUCTIONS,
        stateless_http=True,
        streamable_http_path=MCP_ENDPOINT,
    )

    registry = registry or create_default_registry()
    registry.register_all_tools(server)
    registry.register_all_resources(server)
    register_prompts(server, prompt_registry)

    summary = registry.summary()
    logger.info(
        f"MCP server configured with {summary['total_domains']} domains, "
        f"{summary['total_tools']} tools and {summary['total_resources']} resources"
    )
    return server
