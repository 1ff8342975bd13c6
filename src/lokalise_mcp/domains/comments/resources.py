"""MCP resources for comments."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.comments import controller
from lokalise_mcp.domains.comments.types import ListKeyCommentsArgs, ListProjectCommentsArgs


def register_resources(server: FastMCP) -> None:
    """Register the comments resources."""

    @server.resource(
        "lokalise://comments/{project_id}",
        name="lokalise-project-comments",
        description="All comments in a project. Query: limit, page",
        mime_type="text/markdown",
    )
    async def project_comments(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://comments/{project_id}", controller.list_project_comments,
            ListProjectCommentsArgs,
            {"project_id": project_id, "limit": query_value(params, "limit"), "page": query_value(params, "page")},
        )

    @server.resource(
        "lokalise://comments/{project_id}/{key_id}",
        name="lokalise-key-comments",
        description="Comments on a single key. Query: limit, page",
        mime_type="text/markdown",
    )
    async def key_comments(project_id: str, key_id: str) -> str:
        key_id, params = split_resource_query(key_id)
        return await run_resource(
            server, f"lokalise://comments/{project_id}/{key_id}", controller.list_key_comments,
            ListKeyCommentsArgs,
            {
                "project_id": project_id,
                "key_id": key_id,
                "limit": query_value(params, "limit"),
                "page": query_value(params, "page"),
            },
        )
