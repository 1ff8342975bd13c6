"""MCP tools for team users."""

from typing import Annotated, List, Optional, Union

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.teamusers import controller
from lokalise_mcp.domains.teamusers.types import (
    DeleteTeamUserArgs,
    GetTeamUserArgs,
    ListTeamUsersArgs,
    TeamRole,
    UpdateTeamUserArgs,
)

TeamId = Annotated[str, Field(description="Lokalise team ID")]
UserId = Annotated[Union[int, str], Field(description="User ID")]


def register_tools(server: FastMCP) -> None:
    """Register the team users tools."""

    @server.tool(
        name="lokalise_list_team_users",
        description="Lists the users of a team with their roles. Required: team_id. Optional: limit (1-100), page.",
        structured_output=False,
    )
    async def list_team_users(
        team_id: TeamId,
        limit: Annotated[Optional[int], Field(description="Number of users to return (1-100)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_team_users", controller.list_team_users, ListTeamUsersArgs,
            team_id=team_id, limit=limit, page=page,
        )

    @server.tool(
        name="lokalise_get_team_user",
        description="Gets a team user with their role permissions. Required: team_id, user_id.",
        structured_output=False,
    )
    async def get_team_user(team_id: TeamId, user_id: UserId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_team_user", controller.get_team_user, GetTeamUserArgs,
            team_id=team_id, user_id=user_id,
        )

    @server.tool(
        name="lokalise_update_team_user",
        description="Changes a team user's role. Required: team_id, user_id, role (owner, admin, member, biller).",
        structured_output=False,
    )
    async def update_team_user(
        team_id: TeamId,
        user_id: UserId,
        role: Annotated[TeamRole, Field(description="New role")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_team_user", controller.update_team_user, UpdateTeamUserArgs,
            team_id=team_id, user_id=user_id, role=role,
        )

    @server.tool(
        name="lokalise_delete_team_user",
        description="Removes a user from a team. Required: team_id, user_id.",
        structured_output=False,
    )
    async def delete_team_user(team_id: TeamId, user_id: UserId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_delete_team_user", controller.delete_team_user, DeleteTeamUserArgs,
            team_id=team_id, user_id=user_id,
        )
