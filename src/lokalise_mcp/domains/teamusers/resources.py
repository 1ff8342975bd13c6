"""MCP resources for team users."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.teamusers import controller
from lokalise_mcp.domains.teamusers.types import GetTeamUserArgs, ListTeamUsersArgs


def register_resources(server: FastMCP) -> None:
    """Register the team users resources."""

    @server.resource(
        "lokalise://teamusers/{team_id}",
        name="lokalise-team-users",
        description="Users of a team. Query: limit, page",
        mime_type="text/markdown",
    )
    async def team_users(team_id: str) -> str:
        team_id, params = split_resource_query(team_id)
        return await run_resource(
            server, f"lokalise://teamusers/{team_id}", controller.list_team_users, ListTeamUsersArgs,
            {"team_id": team_id, "limit": query_value(params, "limit"), "page": query_value(params, "page")},
        )

    @server.resource(
        "lokalise://teamusers/{team_id}/{user_id}",
        name="lokalise-team-user-details",
        description="Details of a single team user",
        mime_type="text/markdown",
    )
    async def team_user_details(team_id: str, user_id: str) -> str:
        user_id, _ = split_resource_query(user_id)
        return await run_resource(
            server, f"lokalise://teamusers/{team_id}/{user_id}", controller.get_team_user, GetTeamUserArgs,
            {"team_id": team_id, "user_id": user_id},
        )
