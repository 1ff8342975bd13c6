"""MCP resources for project contributors."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.contributors import controller
from lokalise_mcp.domains.contributors.types import GetContributorArgs, ListContributorsArgs


def register_resources(server: FastMCP) -> None:
    """Register the contributors resources."""

    @server.resource(
        "lokalise://contributors/{project_id}",
        name="lokalise-project-contributors",
        description="Contributors of a project. Query: limit, page",
        mime_type="text/markdown",
    )
    async def project_contributors(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://contributors/{project_id}", controller.list_contributors,
            ListContributorsArgs,
            {"project_id": project_id, "limit": query_value(params, "limit"), "page": query_value(params, "page")},
        )

    @server.resource(
        "lokalise://contributors/{project_id}/{contributor_id}",
        name="lokalise-contributor-details",
        description="Details of a single contributor",
        mime_type="text/markdown",
    )
    async def contributor_details(project_id: str, contributor_id: str) -> str:
        contributor_id, _ = split_resource_query(contributor_id)
        return await run_resource(
            server, f"lokalise://contributors/{project_id}/{contributor_id}",
            controller.get_contributor, GetContributorArgs,
            {"project_id": project_id, "contributor_id": contributor_id},
        )
