"""CLI commands for project contributors."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import (
    check_range,
    parse_csv,
    parse_json_list,
    require_confirmation,
    run_command,
)
from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.domains.contributors import controller
from lokalise_mcp.domains.contributors.types import (
    AddContributorsArgs,
    ContributorLanguage,
    GetContributorArgs,
    GetCurrentUserArgs,
    ListContributorsArgs,
    NewContributor,
    RemoveContributorArgs,
    UpdateContributorArgs,
)

PROJECT_ID_HELP = "Lokalise project ID"


def _languages(value: Optional[str], writable: bool = True):
    isos = parse_csv(value)
    if isos is None:
        return None
    return [ContributorLanguage(lang_iso=iso, is_writable=writable) for iso in isos]


def register(app: typer.Typer) -> None:
    """Register the contributors commands."""

    @app.command("list-contributors")
    def list_contributors_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of contributors to return (1-100)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination"),
    ) -> None:
        """Lists contributors of a project with their roles and language access."""
        def action():
            check_range(limit, "--limit", 1, MAX_TEAM_LIST_LIMIT)
            check_range(page, "--page", 1)
            return controller.list_contributors(ListContributorsArgs(project_id=project_id, limit=limit, page=page))

        run_command("list-contributors", action)

    @app.command("get-contributor")
    def get_contributor_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        contributor_id: str = typer.Option(..., "--contributor-id", "-c", help="Contributor ID"),
    ) -> None:
        """Gets details of a contributor."""
        run_command("get-contributor", lambda: controller.get_contributor(GetContributorArgs(
            project_id=project_id, contributor_id=contributor_id,
        )))

    @app.command("me")
    def me_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
    ) -> None:
        """Shows the contributor profile of the API token owner."""
        run_command("me", lambda: controller.get_current_user(GetCurrentUserArgs(project_id=project_id)))

    @app.command("add-contributors")
    def add_contributors_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        email: Optional[str] = typer.Option(None, "--email", "-e", help="E-mail of a single contributor to add"),
        languages: Optional[str] = typer.Option(None, "--languages", help="Writable language ISO codes (comma-separated)"),
        name: Optional[str] = typer.Option(None, "--name", "-n", help="Full name of the contributor"),
        rights: Optional[str] = typer.Option(None, "--admin-rights", help="Admin rights (comma-separated)"),
        contributors: Optional[str] = typer.Option(
            None, "--contributors", help="JSON array or file path of contributors; overrides --email",
        ),
    ) -> None:
        """Adds contributors to a project."""
        def action():
            if contributors:
                items = parse_json_list(contributors, "--contributors")
            else:
                items = [NewContributor(
                    email=email or "",
                    fullname=name,
                    languages=_languages(languages) or [],
                    admin_rights=parse_csv(rights),
                )]
            return controller.add_contributors(AddContributorsArgs(project_id=project_id, contributors=items))

        run_command("add-contributors", action)

    @app.command("update-contributor")
    def update_contributor_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        contributor_id: str = typer.Option(..., "--contributor-id", "-c", help="Contributor ID"),
        languages: Optional[str] = typer.Option(None, "--languages", help="Writable language ISO codes (comma-separated)"),
        rights: Optional[str] = typer.Option(None, "--admin-rights", help="Admin rights (comma-separated)"),
    ) -> None:
        """Changes a contributor's language access or admin rights."""
        run_command("update-contributor", lambda: controller.update_contributor(UpdateContributorArgs(
            project_id=project_id,
            contributor_id=contributor_id,
            languages=_languages(languages),
            admin_rights=parse_csv(rights),
        )))

    @app.command("remove-contributor")
    def remove_contributor_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        contributor_id: str = typer.Option(..., "--contributor-id", "-c", help="Contributor ID"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm removal (required for safety)"),
    ) -> None:
        """Removes a contributor from a project."""
        require_confirmation(confirm, "Removing a contributor requires --confirm flag for safety")
        run_command("remove-contributor", lambda: controller.remove_contributor(RemoveContributorArgs(
            project_id=project_id, contributor_id=contributor_id,
        )))
