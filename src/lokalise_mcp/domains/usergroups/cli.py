"""CLI commands for team user groups."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import (
    check_range,
    parse_csv,
    parse_int_csv,
    require_confirmation,
    run_command,
)
from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
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

TEAM_ID_HELP = "Lokalise team ID"
GROUP_ID_HELP = "User group ID"


def _languages(writable: Optional[str], readable: Optional[str]):
    writable_ids = parse_int_csv(writable, "--writable-languages") or []
    readable_ids = parse_int_csv(readable, "--reference-languages") or []
    if not writable_ids and not readable_ids:
        return None
    return (
        [GroupLanguage(lang_id=lang_id, is_writable=True) for lang_id in writable_ids]
        + [GroupLanguage(lang_id=lang_id, is_writable=False) for lang_id in readable_ids]
    )


def register(app: typer.Typer) -> None:
    """Register the user groups commands."""

    @app.command("list-usergroups")
    def list_usergroups_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of groups to return (1-100)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination"),
    ) -> None:
        """Lists the user groups of a team."""
        def action():
            check_range(limit, "--limit", 1, MAX_TEAM_LIST_LIMIT)
            check_range(page, "--page", 1)
            return controller.list_usergroups(ListUserGroupsArgs(team_id=team_id, limit=limit, page=page))

        run_command("list-usergroups", action)

    @app.command("get-usergroup")
    def get_usergroup_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        group_id: str = typer.Option(..., "--group-id", "-g", help=GROUP_ID_HELP),
    ) -> None:
        """Gets a user group with its permissions, members and projects."""
        run_command("get-usergroup", lambda: controller.get_usergroup(GetUserGroupArgs(team_id=team_id, group_id=group_id)))

    @app.command("create-usergroup")
    def create_usergroup_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        name: str = typer.Option(..., "--name", "-n", help="Group name"),
        is_admin: bool = typer.Option(False, "--admin", help="Members are admins"),
        is_reviewer: bool = typer.Option(False, "--reviewer", help="Members are reviewers"),
        rights: Optional[str] = typer.Option(None, "--admin-rights", help="Admin rights (comma-separated)"),
        writable: Optional[str] = typer.Option(None, "--writable-languages", help="Writable language IDs"),
        readable: Optional[str] = typer.Option(None, "--reference-languages", help="Read-only language IDs"),
        members: Optional[str] = typer.Option(None, "--members", help="User IDs to add (comma-separated)"),
        projects: Optional[str] = typer.Option(None, "--projects", help="Project IDs to assign (comma-separated)"),
    ) -> None:
        """Creates a user group."""
        run_command("create-usergroup", lambda: controller.create_usergroup(CreateUserGroupArgs(
            team_id=team_id,
            name=name,
            is_admin=is_admin,
            is_reviewer=is_reviewer,
            admin_rights=parse_csv(rights),
            languages=_languages(writable, readable),
            members=parse_csv(members),
            projects=parse_csv(projects),
        )))

    @app.command("update-usergroup")
    def update_usergroup_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        group_id: str = typer.Option(..., "--group-id", "-g", help=GROUP_ID_HELP),
        name: str = typer.Option(..., "--name", "-n", help="Group name"),
        is_admin: bool = typer.Option(False, "--admin", help="Members are admins"),
        is_reviewer: bool = typer.Option(False, "--reviewer", help="Members are reviewers"),
        rights: Optional[str] = typer.Option(None, "--admin-rights", help="Admin rights (comma-separated)"),
        writable: Optional[str] = typer.Option(None, "--writable-languages", help="Writable language IDs"),
        readable: Optional[str] = typer.Option(None, "--reference-languages", help="Read-only language IDs"),
    ) -> None:
        """Updates the name and permissions of a user group."""
        run_command("update-usergroup", lambda: controller.update_usergroup(UpdateUserGroupArgs(
            team_id=team_id,
            group_id=group_id,
            name=name,
            is_admin=is_admin,
            is_reviewer=is_reviewer,
            admin_rights=parse_csv(rights),
            languages=_languages(writable, readable),
        )))

    @app.command("delete-usergroup")
    def delete_usergroup_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        group_id: str = typer.Option(..., "--group-id", "-g", help=GROUP_ID_HELP),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
    ) -> None:
        """Deletes a user group."""
        require_confirmation(confirm, "Deleting a user group requires --confirm flag for safety")
        run_command("delete-usergroup", lambda: controller.delete_usergroup(DeleteUserGroupArgs(
            team_id=team_id, group_id=group_id,
        )))

    @app.command("add-group-members")
    def add_group_members_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        group_id: str = typer.Option(..., "--group-id", "-g", help=GROUP_ID_HELP),
        user_ids: str = typer.Option(..., "--user-ids", help="User IDs (comma-separated)"),
    ) -> None:
        """Adds users to a group."""
        run_command("add-group-members", lambda: controller.add_members_to_group(GroupMembersArgs(
            team_id=team_id, group_id=group_id, user_ids=parse_csv(user_ids) or [],
        )))

    @app.command("remove-group-members")
    def remove_group_members_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        group_id: str = typer.Option(..., "--group-id", "-g", help=GROUP_ID_HELP),
        user_ids: str = typer.Option(..., "--user-ids", help="User IDs (comma-separated)"),
    ) -> None:
        """Removes users from a group."""
        run_command("remove-group-members", lambda: controller.remove_members_from_group(GroupMembersArgs(
            team_id=team_id, group_id=group_id, user_ids=parse_csv(user_ids) or [],
        )))

    @app.command("add-group-projects")
    def add_group_projects_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        group_id: str = typer.Option(..., "--group-id", "-g", help=GROUP_ID_HELP),
        project_ids: str = typer.Option(..., "--project-ids", help="Project IDs (comma-separated)"),
    ) -> None:
        """Gives a group access to projects."""
        run_command("add-group-projects", lambda: controller.add_projects_to_group(GroupProjectsArgs(
            team_id=team_id, group_id=group_id, project_ids=parse_csv(project_ids) or [],
        )))

    @app.command("remove-group-projects")
    def remove_group_projects_command(
        team_id: str = typer.Option(..., "--team-id", help=TEAM_ID_HELP),
        group_id: str = typer.Option(..., "--group-id", "-g", help=GROUP_ID_HELP),
        project_ids: str = typer.Option(..., "--project-ids", help="Project IDs (comma-separated)"),
    ) -> None:
        """Revokes a group's access to projects."""
        run_command("remove-group-projects", lambda: controller.remove_projects_from_group(GroupProjectsArgs(
            team_id=team_id, group_id=group_id, project_ids=parse_csv(project_ids) or [],
        )))
