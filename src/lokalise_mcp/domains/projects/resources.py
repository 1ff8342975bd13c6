"""MCP resources for projects."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.projects import controller
from lokalise_mcp.domains.projects.types import GetProjectArgs, ListProjectsArgs


def register_resources(server: FastMCP) -> None:
    """Register the projects resources."""

    @server.resource(
        "lokalise://projects",
        name="lokalise-projects",
        description="All Lokalise projects available to the API token",
        mime_type="text/markdown",
    )
    async def projects() -> str:
        return await run_resource(
            server, "lokalise://projects", controller.list_projects, ListProjectsArgs, {},
        )

    @server.resource(
        "lokalise://projects/{project_id}",
        name="lokalise-project-details",
        description="Details of a Lokalise project. Query: include_languages, include_keys_summary",
        mime_type="text/markdown",
    )
    async def project_details(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://projects/{project_id}", controller.get_project, GetProjectArgs,
            {
                "project_id": project_id,
                "include_languages": query_value(params, "include_languages") == "true",
                "include_keys_summary": query_value(params, "include_keys_summary") == "true",
            },
        )
