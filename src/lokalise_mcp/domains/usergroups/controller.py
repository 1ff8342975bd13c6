"""User groups controller."""

from typing import Any, Dict

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.usergroups import formatter
from lokalise_mcp.domains.usergroups.service import group_languages, user_groups_service
from lokalise_mcp.domains.usergroups.types import (
    CreateUserGroupArgs,
    DeleteUserGroupArgs,
    GetUserGroupArgs,
    GroupMembersArgs,
    GroupProjectsArgs,
    ListUserGroupsArgs,
    UpdateUserGroupArgs,
    UserGroupSettings,
)


def _require_team(team_id: str) -> None:
    if not team_id or not team_id.strip():
        raise create_validation_error("Team ID is required and must be a string.")


def _settings_payload(args: UserGroupSettings) -> Dict[str, Any]:
    if args.admin_rights and not args.is_admin:
        raise create_validation_error("Admin rights can only be set when is_admin is true.")
    data = args.model_dump(include={"name", "is_reviewer", "is_admin", "admin_rights"}, exclude_none=True)
    if args.languages is not None:
        data["languages"] = group_languages([lang.model_dump() for lang in args.languages])
    return data


@controller_operation("User Groups", "listing user groups", "team_id")
async def list_usergroups(args: ListUserGroupsArgs) -> ControllerResponse:
    _require_team(args.team_id)
    collection = await user_groups_service.list_groups(args.team_id, args.limit, args.page)
    return ControllerResponse(content=formatter.format_user_groups_list(collection, args.team_id))


@controller_operation("User Group", "getting user group", "group_id")
async def get_usergroup(args: GetUserGroupArgs) -> ControllerResponse:
    _require_team(args.team_id)
    group = await user_groups_service.get_group(args.team_id, args.group_id)
    return ControllerResponse(content=formatter.format_user_group_details(group))


@controller_operation("User Group", "creating user group", "team_id")
async def create_usergroup(args: CreateUserGroupArgs) -> ControllerResponse:
    _require_team(args.team_id)
    group = await user_groups_service.create_group(
        args.team_id, _settings_payload(args), members=args.members, projects=args.projects,
    )
    return ControllerResponse(content=formatter.format_create_user_group_result(group))


@controller_operation("User Group", "updating user group", "group_id")
async def update_usergroup(args: UpdateUserGroupArgs) -> ControllerResponse:
    _require_team(args.team_id)
    group = await user_groups_service.update_group(args.team_id, args.group_id, _settings_payload(args))
    return ControllerResponse(content=formatter.format_update_user_group_result(group))


@controller_operation("User Group", "deleting user group", "group_id")
async def delete_usergroup(args: DeleteUserGroupArgs) -> ControllerResponse:
    _require_team(args.team_id)
    result = await user_groups_service.delete_group(args.team_id, args.group_id)
    return ControllerResponse(content=formatter.format_delete_user_group_result(result, args.team_id))


@controller_operation("User Group", "adding members", "group_id")
async def add_members_to_group(args: GroupMembersArgs) -> ControllerResponse:
    _require_team(args.team_id)
    group = await user_groups_service.add_members(args.team_id, args.group_id, args.user_ids)
    return ControllerResponse(content=formatter.format_membership_result(group, len(args.user_ids), "members", True))


@controller_operation("User Group", "removing members", "group_id")
async def remove_members_from_group(args: GroupMembersArgs) -> ControllerResponse:
    _require_team(args.team_id)
    group = await user_groups_service.remove_members(args.team_id, args.group_id, args.user_ids)
    return ControllerResponse(content=formatter.format_membership_result(group, len(args.user_ids), "members", False))


@controller_operation("User Group", "adding projects", "group_id")
async def add_projects_to_group(args: GroupProjectsArgs) -> ControllerResponse:
    _require_team(args.team_id)
    group = await user_groups_service.add_projects(args.team_id, args.group_id, args.project_ids)
    return ControllerResponse(content=formatter.format_membership_result(group, len(args.project_ids), "projects", True))


@controller_operation("User Group", "removing projects", "group_id")
async def remove_projects_from_group(args: GroupProjectsArgs) -> ControllerResponse:
    _require_team(args.team_id)
    group = await user_groups_service.remove_projects(args.team_id, args.group_id, args.project_ids)
    return ControllerResponse(
        content=formatter.format_membership_result(group, len(args.project_ids), "projects", False)
    )
