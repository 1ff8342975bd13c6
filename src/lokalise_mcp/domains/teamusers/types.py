"""Argument models for the team users domain."""

from typing import Literal, Optional, Union

from pydantic import Field

from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.domains.base import ToolArgs

TeamRole = Literal["owner", "admin", "member", "biller"]

TEAM_ROLES = ["owner", "admin", "member", "biller"]


class ListTeamUsersArgs(ToolArgs):
    team_id: str = Field(description="Team ID to list users for")
    limit: Optional[int] = Field(
        default=None, ge=1, le=MAX_TEAM_LIST_LIMIT,
        description="Number of users to return (1-100, default: 100)",
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number for pagination (default: 1)")


class GetTeamUserArgs(ToolArgs):
    team_id: str = Field(description="Team ID containing the user")
    user_id: Union[int, str] = Field(description="User ID")


class UpdateTeamUserArgs(ToolArgs):
    team_id: str = Field(description="Team ID containing the user")
    user_id: Union[int, str] = Field(description="User ID to update")
    role: TeamRole = Field(description="New role for the user")


class DeleteTeamUserArgs(ToolArgs):
    team_id: str = Field(description="Team ID containing the user")
    user_id: Union[int, str] = Field(description="User ID to remove from the team")
