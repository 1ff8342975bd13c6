"""CLI commands for project tasks."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import (
    check_choices,
    check_range,
    fail,
    parse_csv,
    parse_int_csv,
    require_confirmation,
    run_command,
)
from lokalise_mcp.domains.tasks import controller
from lokalise_mcp.domains.tasks.types import (
    TASK_STATUSES,
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTaskArgs,
    ListTasksArgs,
    TaskData,
    TaskLanguage,
    UpdateTaskArgs,
)

PROJECT_ID_HELP = "Lokalise project ID"


def register(app: typer.Typer) -> None:
    """Register the tasks commands."""

    @app.command("list-tasks")
    def list_tasks_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of tasks to return (1-500)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination"),
        filter_title: Optional[str] = typer.Option(None, "--filter-title", help="Filter tasks by title"),
        statuses: Optional[str] = typer.Option(
            None, "--filter-statuses", help="Statuses to include (comma-separated: new,in_progress,completed,closed)",
        ),
    ) -> None:
        """Lists the tasks of a project."""
        def action():
            check_range(limit, "--limit", 1, controller.MAX_TASKS_LIMIT)
            check_range(page, "--page", 1)
            filter_statuses = parse_csv(statuses)
            check_choices(filter_statuses, "status", TASK_STATUSES)
            return controller.list_tasks(ListTasksArgs(
                project_id=project_id,
                limit=limit,
                page=page,
                filter_title=filter_title,
                filter_statuses=filter_statuses,
            ))

        run_command("list-tasks", action)

    @app.command("get-task")
    def get_task_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        task_id: int = typer.Option(..., "--task-id", "-t", help="Task ID"),
    ) -> None:
        """Gets the details of a task."""
        run_command("get-task", lambda: controller.get_task(GetTaskArgs(project_id=project_id, task_id=task_id)))

    @app.command("create-task")
    def create_task_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        title: str = typer.Option(..., "--title", help="Task title"),
        languages: Optional[str] = typer.Option(
            None, "--languages", "-l", help="Target language ISO codes (comma-separated, e.g. 'fr,de')",
        ),
        assignees: Optional[str] = typer.Option(
            None, "--assignees", "-a", help="User IDs assigned to every language (comma-separated)",
        ),
        description: Optional[str] = typer.Option(None, "--description", "-d", help="Task description"),
        keys: Optional[str] = typer.Option(None, "--keys", help="Key IDs to include (comma-separated)"),
        due_date: Optional[str] = typer.Option(None, "--due-date", help="Due date (YYYY-MM-DD HH:MM:SS)"),
        task_type: str = typer.Option("translation", "--task-type", help="Task type: translation or review"),
        auto_close_languages: bool = typer.Option(False, "--auto-close-languages", help="Auto-close completed languages"),
        auto_close_task: bool = typer.Option(False, "--auto-close-task", help="Auto-close the task when done"),
        lock_translations: bool = typer.Option(False, "--lock-translations", help="Lock translations in the task"),
    ) -> None:
        """Creates a task. Languages need --assignees unless users are given per language."""
        def action():
            isos = parse_csv(languages)
            if not isos:
                fail("At least one target language must be specified with --languages")
            check_choices([task_type], "--task-type", ["translation", "review"])
            return controller.create_task(CreateTaskArgs(
                project_id=project_id,
                title=title,
                description=description,
                due_date=due_date,
                keys=parse_int_csv(keys, "--keys"),
                languages=[TaskLanguage(language_iso=iso) for iso in isos],
                assignees=parse_int_csv(assignees, "--assignees"),
                task_type=task_type,
                auto_close_languages=auto_close_languages or None,
                auto_close_task=auto_close_task or None,
                do_lock_translations=lock_translations or None,
            ))

        run_command("create-task", action)

    @app.command("update-task")
    def update_task_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        task_id: int = typer.Option(..., "--task-id", "-t", help="Task ID"),
        title: Optional[str] = typer.Option(None, "--title", help="New task title"),
        description: Optional[str] = typer.Option(None, "--description", "-d", help="New task description"),
        due_date: Optional[str] = typer.Option(None, "--due-date", help="New due date (YYYY-MM-DD HH:MM:SS)"),
        close_task: bool = typer.Option(False, "--close-task", help="Close the task"),
    ) -> None:
        """Updates a task."""
        def action():
            if not (title or description or due_date or close_task):
                fail("At least one field must be provided to update (title, description, due-date, or close-task)")
            return controller.update_task(UpdateTaskArgs(
                project_id=project_id,
                task_id=task_id,
                task_data=TaskData(
                    title=title,
                    description=description,
                    due_date=due_date,
                    close_task=True if close_task else None,
                ),
            ))

        run_command("update-task", action)

    @app.command("delete-task")
    def delete_task_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        task_id: int = typer.Option(..., "--task-id", "-t", help="Task ID"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
    ) -> None:
        """Permanently deletes a task."""
        require_confirmation(
            confirm, "Task deletion requires --confirm flag for safety. WARNING: This action cannot be undone!",
        )
        run_command("delete-task", lambda: controller.delete_task(DeleteTaskArgs(project_id=project_id, task_id=task_id)))
