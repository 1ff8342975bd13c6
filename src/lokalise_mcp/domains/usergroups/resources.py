"""MCP resources for team user groups."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.usergroups import controller
from lokalise_mcp.domains.usergroups.types import GetUserGroupArgs, ListUserGroupsArgs


def register_resources(server: FastMCP) -> None:
    """Register the user groups resources."""

    @server.resource(
        "lokalise://usergroups/{team_id}",
        name="lokalise-team-usergroups",
        description="User groups of a team. Query: limit, page",
        mime_type="text/markdown",
    )
    async def team_usergroups(team_id: str) -> str:
        team_id, params = split_resource_query(team_id)
        return await run_resource(
            server, f"lokalise://usergroups/{team_id}", controller.list_usergroups, ListUserGroupsArgs,
            {"team_id": team_id, "limit": query_value(params, "limit"), "page": query_value(params, "page")},
        )

    @server.resource(
        "lokalise://usergroups/{team_id}/{group_id}",
        name="lokalise-usergroup-details",
        description="Details of a single user group",
        mime_type="text/markdown",
    )
    async def usergroup_details(team_id: str, group_id: str) -> str:
        group_id, _ = split_resource_query(group_id)
        return await run_resource(
            server, f"lokalise://usergroups/{team_id}/{group_id}", controller.get_usergroup, GetUserGroupArgs,
            {"team_id": team_id, "group_id": group_id},
        )
