"""MCP tools for team user groups."""

from typing import Annotated, List, Optional, Union

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.contributors.types import ContributorRight
from lokalise_mcp.domains.usergroups import controller
from lokalise_mcp.domains.usergroups.types import (
    CreateUserGroupArgs,
    DeleteUserGroupArgs,
    GetUserGroupArgs,
    GroupLanguage,
    GroupMembersArgs,
    GroupProjectsArgs,
    ListUserGroupsArgs,
    UpdateUserGroupArgs,
)

TeamId = Annotated[str, Field(description="Lokalise team ID")]
GroupId = Annotated[Union[int, str], Field(description="User group ID")]
UserIds = Annotated[List[Union[int, str]], Field(description="User IDs")]
ProjectIds = Annotated[List[str], Field(description="Project IDs")]
Name = Annotated[str, Field(description="Group name")]
IsAdmin = Annotated[Optional[bool], Field(description="Members are admins")]
IsReviewer = Annotated[Optional[bool], Field(description="Members are reviewers")]
AdminRights = Annotated[Optional[List[ContributorRight]], Field(description="Admin rights when is_admin")]
Languages = Annotated[Optional[List[GroupLanguage]], Field(description="Language permissions")]


def register_tools(server: FastMCP) -> None:
    """Register the user groups tools."""

    @server.tool(
        name="lokalise_list_usergroups",
        description="Lists the user groups of a team. Required: team_id. Optional: limit (1-100), page.",
        structured_output=False,
    )
    async def list_usergroups(
        team_id: TeamId,
        limit: Annotated[Optional[int], Field(description="Number of groups to return (1-100)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_usergroups", controller.list_usergroups, ListUserGroupsArgs,
            team_id=team_id, limit=limit, page=page,
        )

    @server.tool(
        name="lokalise_get_usergroup",
        description="Gets a user group with permissions, members and projects. Required: team_id, group_id.",
        structured_output=False,
    )
    async def get_usergroup(team_id: TeamId, group_id: GroupId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_usergroup", controller.get_usergroup, GetUserGroupArgs,
            team_id=team_id, group_id=group_id,
        )

    @server.tool(
        name="lokalise_create_usergroup",
        description=(
            "Creates a user group. Required: team_id, name. Optional: is_admin, is_reviewer, admin_rights, "
            "languages [{lang_id, is_writable}], members, projects."
        ),
        structured_output=False,
    )
    async def create_usergroup(
        team_id: TeamId,
        name: Name,
        is_admin: IsAdmin = None,
        is_reviewer: IsReviewer = None,
        admin_rights: AdminRights = None,
        languages: Languages = None,
        members: Annotated[Optional[List[Union[int, str]]], Field(description="Initial member user IDs")] = None,
        projects: Annotated[Optional[List[Union[int, str]]], Field(description="Initial project IDs")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_create_usergroup", controller.create_usergroup, CreateUserGroupArgs,
            team_id=team_id, name=name, is_admin=is_admin, is_reviewer=is_reviewer,
            admin_rights=admin_rights, languages=languages, members=members, projects=projects,
        )

    @server.tool(
        name="lokalise_update_usergroup",
        description=(
            "Updates a user group's name and permissions. Required: team_id, group_id, name. "
            "Optional: is_admin, is_reviewer, admin_rights, languages."
        ),
        structured_output=False,
    )
    async def update_usergroup(
        team_id: TeamId,
        group_id: GroupId,
        name: Name,
        is_admin: IsAdmin = None,
        is_reviewer: IsReviewer = None,
        admin_rights: AdminRights = None,
        languages: Languages = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_usergroup", controller.update_usergroup, UpdateUserGroupArgs,
            team_id=team_id, group_id=group_id, name=name, is_admin=is_admin,
            is_reviewer=is_reviewer, admin_rights=admin_rights, languages=languages,
        )

    @server.tool(
        name="lokalise_delete_usergroup",
        description="Deletes a user group. Required: team_id, group_id.",
        structured_output=False,
    )
    async def delete_usergroup(team_id: TeamId, group_id: GroupId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_delete_usergroup", controller.delete_usergroup, DeleteUserGroupArgs,
            team_id=team_id, group_id=group_id,
        )

    @server.tool(
        name="lokalise_add_members_to_group",
        description="Adds users to a group. Required: team_id, group_id, user_ids.",
        structured_output=False,
    )
    async def add_members_to_group(team_id: TeamId, group_id: GroupId, user_ids: UserIds) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_add_members_to_group", controller.add_members_to_group, GroupMembersArgs,
            team_id=team_id, group_id=group_id, user_ids=user_ids,
        )

    @server.tool(
        name="lokalise_remove_members_from_group",
        description="Removes users from a group. Required: team_id, group_id, user_ids.",
        structured_output=False,
    )
    async def remove_members_from_group(team_id: TeamId, group_id: GroupId, user_ids: UserIds) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_remove_members_from_group", controller.remove_members_from_group, GroupMembersArgs,
            team_id=team_id, group_id=group_id, user_ids=user_ids,
        )

    @server.tool(
        name="lokalise_add_projects_to_group",
        description="Gives a group access to projects. Required: team_id, group_id, project_ids.",
        structured_output=False,
    )
    async def add_projects_to_group(team_id: TeamId, group_id: GroupId, project_ids: ProjectIds) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_add_projects_to_group", controller.add_projects_to_group, GroupProjectsArgs,
            team_id=team_id, group_id=group_id, project_ids=project_ids,
        )

    @server.tool(
        name="lokalise_remove_projects_from_group",
        description="Revokes a group's access to projects. Required: team_id, group_id, project_ids.",
        structured_output=False,
    )
    async def remove_projects_from_group(
        team_id: TeamId, group_id: GroupId, project_ids: ProjectIds,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_remove_projects_from_group", controller.remove_projects_from_group, GroupProjectsArgs,
            team_id=team_id, group_id=group_id, project_ids=project_ids,
        )
