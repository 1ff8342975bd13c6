"""CLI commands for queued processes."""

import typer

from lokalise_mcp.cli.utils import run_command
from lokalise_mcp.domains.queuedprocesses import controller
from lokalise_mcp.domains.queuedprocesses.types import GetQueuedProcessArgs, ListQueuedProcessesArgs


def register(app: typer.Typer) -> None:
    """Register the queued processes commands."""

    @app.command("list-queued-processes")
    def list_queued_processes_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help="Lokalise project ID (projectId:branch allowed)"),
    ) -> None:
        """Lists file uploads, downloads and other background processes of a project."""
        run_command("list-queued-processes", lambda: controller.list_queued_processes(
            ListQueuedProcessesArgs(project_id=project_id),
        ))

    @app.command("get-queued-process")
    def get_queued_process_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help="Lokalise project ID"),
        process_id: str = typer.Option(..., "--process-id", help="Process ID"),
    ) -> None:
        """Shows the status and results of a background process."""
        run_command("get-queued-process", lambda: controller.get_queued_process(GetQueuedProcessArgs(
            project_id=project_id, process_id=process_id,
        )))
