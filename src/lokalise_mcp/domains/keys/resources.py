"""MCP resources for translation keys."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_list, query_value, run_resource, split_resource_query
from lokalise_mcp.domains.keys import controller
from lokalise_mcp.domains.keys.types import GetKeyArgs, ListKeysArgs


def register_resources(server: FastMCP) -> None:
    """Register the keys resources."""

    @server.resource(
        "lokalise://keys/{project_id}",
        name="lokalise-project-keys",
        description="Translation keys of a project. Query: limit, page, include_translations, filter_keys, filter_platforms",
        mime_type="text/markdown",
    )
    async def project_keys(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://keys/{project_id}", controller.list_keys, ListKeysArgs,
            {
                "project_id": project_id,
                "limit": query_value(params, "limit"),
                "page": query_value(params, "page"),
                "include_translations": query_value(params, "include_translations") == "true",
                "filter_keys": query_list(query_value(params, "filter_keys")),
                "filter_platforms": query_list(query_value(params, "filter_platforms")),
            },
        )

    @server.resource(
        "lokalise://keys/{project_id}/{key_id}",
        name="lokalise-key-details",
        description="Details of a single translation key",
        mime_type="text/markdown",
    )
    async def key_details(project_id: str, key_id: str) -> str:
        key_id, _ = split_resource_query(key_id)
        return await run_resource(
            server, f"lokalise://keys/{project_id}/{key_id}", controller.get_key, GetKeyArgs,
            {"project_id": project_id, "key_id": key_id},
        )
