"""MCP resources for languages."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.languages import controller
from lokalise_mcp.domains.languages.types import ListProjectLanguagesArgs, ListSystemLanguagesArgs


def register_resources(server: FastMCP) -> None:
    """Register the languages resources.

    The static system languages resource is registered first so it is not
    shadowed by the project template.
    """

    @server.resource(
        "lokalise://languages/system",
        name="lokalise-system-languages",
        description="All languages supported by Lokalise",
        mime_type="text/markdown",
    )
    async def system_languages() -> str:
        return await run_resource(
            server, "lokalise://languages/system", controller.list_system_languages, ListSystemLanguagesArgs, {},
        )

    @server.resource(
        "lokalise://languages/{project_id}",
        name="lokalise-project-languages",
        description="Languages of a project. Query: include_progress",
        mime_type="text/markdown",
    )
    async def project_languages(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://languages/{project_id}", controller.list_project_languages,
            ListProjectLanguagesArgs,
            {"project_id": project_id, "include_progress": query_value(params, "include_progress") == "true"},
        )
