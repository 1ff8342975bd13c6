"""Argument models for the user groups domain."""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.domains.base import ToolArgs
from lokalise_mcp.domains.contributors.types import ContributorRight

Identifier = Union[int, str]


class GroupLanguage(BaseModel):
    lang_id: int = Field(description="Language ID")
    is_writable: bool = Field(default=False, description="Whether members can edit this language")


class ListUserGroupsArgs(ToolArgs):
    team_id: str = Field(description="Team ID to list user groups for")
    limit: Optional[int] = Field(
        default=None, ge=1, le=MAX_TEAM_LIST_LIMIT,
        description="Number of user groups to return (1-100, default: 100)",
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number for pagination (default: 1)")


class GetUserGroupArgs(ToolArgs):
    team_id: str = Field(description="Team ID containing the user group")
    group_id: Identifier = Field(description="User group ID")


class UserGroupSettings(ToolArgs):
    name: str = Field(min_length=1, description="Name of the user group")
    is_reviewer: bool = Field(default=False, description="Whether group members are reviewers")
    is_admin: bool = Field(default=False, description="Whether group members are admins")
    admin_rights: Optional[List[ContributorRight]] = Field(
        default=None, description="Admin rights for the group if is_admin is true",
    )
    languages: Optional[List[GroupLanguage]] = Field(default=None, description="Language permissions")


class CreateUserGroupArgs(UserGroupSettings):
    team_id: str = Field(description="Team ID to create the user group in")
    projects: Optional[List[Identifier]] = Field(default=None, description="Projects to assign initially")
    members: Optional[List[Identifier]] = Field(default=None, description="Users to add initially")


class UpdateUserGroupArgs(UserGroupSettings):
    team_id: str = Field(description="Team ID containing the user group")
    group_id: Identifier = Field(description="User group ID to update")


class DeleteUserGroupArgs(ToolArgs):
    team_id: str = Field(description="Team ID containing the user group")
    group_id: Identifier = Field(description="User group ID to delete")


class GroupMembersArgs(ToolArgs):
    team_id: str = Field(description="Team ID containing the user group")
    group_id: Identifier = Field(description="User group ID")
    user_ids: List[Identifier] = Field(min_length=1, description="User IDs")


class GroupProjectsArgs(ToolArgs):
    team_id: str = Field(description="Team ID containing the user group")
    group_id: Identifier = Field(description="User group ID")
    project_ids: List[str] = Field(min_length=1, description="Project IDs")
