"""Team users controller."""

from typing import Union

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.teamusers import formatter
from lokalise_mcp.domains.teamusers.service import team_users_service
from lokalise_mcp.domains.teamusers.types import (
    DeleteTeamUserArgs,
    GetTeamUserArgs,
    ListTeamUsersArgs,
    UpdateTeamUserArgs,
)


def _require_team(team_id: str) -> None:
    if not team_id or not team_id.strip():
        raise create_validation_error("Team ID is required.")


def _require_user(team_id: str, user_id: Union[int, str]) -> None:
    _require_team(team_id)
    if str(user_id).strip() == "":
        raise create_validation_error("User ID is required.")


@controller_operation("Team Users", "listing team users", "team_id")
async def list_team_users(args: ListTeamUsersArgs) -> ControllerResponse:
    _require_team(args.team_id)
    collection = await team_users_service.list_users(args.team_id, args.limit, args.page)
    return ControllerResponse(content=formatter.format_team_users_list(collection, args.team_id))


@controller_operation("Team User", "getting team user", "user_id")
async def get_team_user(args: GetTeamUserArgs) -> ControllerResponse:
    _require_user(args.team_id, args.user_id)
    user = await team_users_service.get_user(args.team_id, args.user_id)
    return ControllerResponse(content=formatter.format_team_user_details(user))


@controller_operation("Team User", "updating team user", "user_id")
async def update_team_user(args: UpdateTeamUserArgs) -> ControllerResponse:
    _require_user(args.team_id, args.user_id)
    user = await team_users_service.update_user(args.team_id, args.user_id, args.role)
    return ControllerResponse(content=formatter.format_update_team_user_result(user))


@controller_operation("Team User", "deleting team user", "user_id")
async def delete_team_user(args: DeleteTeamUserArgs) -> ControllerResponse:
    _require_user(args.team_id, args.user_id)
    result = await team_users_service.delete_user(args.team_id, args.user_id)
    return ControllerResponse(content=formatter.format_delete_team_user_result(result, args.team_id))
