"""CLI commands for projects."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import check_range, require_confirmation, run_command
from lokalise_mcp.domains.projects import controller
from lokalise_mcp.domains.projects.types import (
    CreateProjectArgs,
    DeleteProjectArgs,
    EmptyProjectArgs,
    GetProjectArgs,
    ListProjectsArgs,
    ProjectData,
    UpdateProjectArgs,
)


def register(app: typer.Typer) -> None:
    """Register the projects commands."""

    @app.command("list-projects")
    def list_projects_command(
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of projects to return (1-500, default: 100)"),
        page: Optional[int] = typer.Option(None, "--page", "-p", help="Page number for pagination (default: 1)"),
        include_stats: bool = typer.Option(False, "--include-stats", help="Include detailed project statistics"),
    ) -> None:
        """Lists Lokalise projects available to the API token."""
        def action():
            check_range(limit, "--limit", 1, 500)
            check_range(page, "--page", 1)
            return controller.list_projects(ListProjectsArgs(limit=limit, page=page, include_stats=include_stats))

        run_command("list-projects", action)

    @app.command("get-project-details")
    def get_project_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help="Project ID to get details for"),
        include_languages: bool = typer.Option(False, "--include-languages", help="List progress for every language"),
        include_keys_summary: bool = typer.Option(False, "--include-keys-summary", help="Include a summary of keys"),
    ) -> None:
        """Gets detailed information about a Lokalise project."""
        run_command("get-project-details", lambda: controller.get_project(GetProjectArgs(
            project_id=project_id,
            include_languages=include_languages,
            include_keys_summary=include_keys_summary,
        )))

    @app.command("create-project")
    def create_project_command(
        name: str = typer.Option(..., "--name", "-n", help="Name of the project to create"),
        description: Optional[str] = typer.Option(None, "--description", "-d", help="Optional description for the project"),
        base_lang: str = typer.Option("en", "--base-lang", "-b", help="Base language ISO code"),
    ) -> None:
        """Creates a new Lokalise project."""
        run_command("create-project", lambda: controller.create_project(CreateProjectArgs(
            name=name, description=description, base_lang_iso=base_lang,
        )))

    @app.command("update-project")
    def update_project_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help="Project ID to update"),
        name: Optional[str] = typer.Option(None, "--name", "-n", help="New project name"),
        description: Optional[str] = typer.Option(None, "--description", "-d", help="New project description"),
    ) -> None:
        """Updates a project's name or description."""
        run_command("update-project", lambda: controller.update_project(UpdateProjectArgs(
            project_id=project_id,
            project_data=ProjectData(name=name, description=description),
        )))

    @app.command("delete-project")
    def delete_project_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help="Project ID to delete"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
    ) -> None:
        """Deletes a project permanently."""
        require_confirmation(confirm, "Project deletion requires --confirm flag for safety")
        run_command("delete-project", lambda: controller.delete_project(DeleteProjectArgs(project_id=project_id)))

    @app.command("empty-project")
    def empty_project_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help="Project ID to empty"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm emptying (required for safety)"),
    ) -> None:
        """Removes all keys and translations from a project, keeping the project."""
        require_confirmation(confirm, "Emptying a project requires --confirm flag for safety")
        run_command("empty-project", lambda: controller.empty_project(EmptyProjectArgs(project_id=project_id)))
