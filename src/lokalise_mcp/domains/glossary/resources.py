"""MCP resources for the project glossary."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.glossary import controller
from lokalise_mcp.domains.glossary.types import GetGlossaryTermArgs, ListGlossaryTermsArgs


def register_resources(server: FastMCP) -> None:
    """Register the glossary resources."""

    @server.resource(
        "lokalise://glossary-terms/{project_id}",
        name="lokalise-glossary-terms",
        description="Glossary terms of a project. Query: limit, cursor",
        mime_type="text/markdown",
    )
    async def glossary_terms(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://glossary-terms/{project_id}", controller.list_glossary_terms,
            ListGlossaryTermsArgs,
            {"project_id": project_id, "limit": query_value(params, "limit"), "cursor": query_value(params, "cursor")},
        )

    @server.resource(
        "lokalise://glossary-terms/{project_id}/{term_id}",
        name="lokalise-glossary-term-details",
        description="Details of a single glossary term",
        mime_type="text/markdown",
    )
    async def glossary_term_details(project_id: str, term_id: str) -> str:
        term_id, _ = split_resource_query(term_id)
        return await run_resource(
            server, f"lokalise://glossary-terms/{project_id}/{term_id}", controller.get_glossary_term,
            GetGlossaryTermArgs,
            {"project_id": project_id, "term_id": term_id},
        )
