"""CLI commands for team users."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import check_choices, check_range, require_confirmation, run_command
from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.domains.teamusers import controller
from lokalise_mcp.domains.teamusers.types import (
    TEAM_ROLES,
    DeleteTeamUserArgs,
    GetTeamUserArgs,
    ListTeamUsersArgs,
    UpdateTeamUserArgs,
)

TEAM_ID_HELP = "Lokalise team ID"


def register(app: typer.Typer) -> None:
    """Register the team users commands."""

    @app.command("list-team-users")
    def list_team_users_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of users to return (1-100)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination"),
    ) -> None:
        """Lists the users of a team."""
        def action():
            check_range(limit, "--limit", 1, MAX_TEAM_LIST_LIMIT)
            check_range(page, "--page", 1)
            return controller.list_team_users(ListTeamUsersArgs(team_id=team_id, limit=limit, page=page))

        run_command("list-team-users", action)

    @app.command("get-team-user")
    def get_team_user_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        user_id: str = typer.Option(..., "--user-id", "-u", help="User ID"),
    ) -> None:
        """Gets a team user and their role."""
        run_command("get-team-user", lambda: controller.get_team_user(GetTeamUserArgs(team_id=team_id, user_id=user_id)))

    @app.command("update-team-user")
    def update_team_user_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        user_id: str = typer.Option(..., "--user-id", "-u", help="User ID"),
        role: str = typer.Option(..., "--role", "-r", help="New role: owner, admin, member or biller"),
    ) -> None:
        """Changes the role of a team user."""
        def action():
            check_choices([role], "--role", TEAM_ROLES)
            return controller.update_team_user(UpdateTeamUserArgs(team_id=team_id, user_id=user_id, role=role))

        run_command("update-team-user", action)

    @app.command("delete-team-user")
    def delete_team_user_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        user_id: str = typer.Option(..., "--user-id", "-u", help="User ID"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm removal (required for safety)"),
    ) -> None:
        """Removes a user from a team."""
        require_confirmation(confirm, "Removing a team user requires --confirm flag for safety")
        run_command("delete-team-user", lambda: controller.delete_team_user(DeleteTeamUserArgs(
            team_id=team_id, user_id=user_id,
        )))
