"""CLI commands for comments."""

from typing import List, Optional

import typer

from lokalise_mcp.cli.utils import check_range, require_confirmation, run_command
from lokalise_mcp.core.constants import MAX_LIST_LIMIT
from lokalise_mcp.domains.comments import controller
from lokalise_mcp.domains.comments.types import (
    CommentInput,
    CreateCommentsArgs,
    DeleteCommentArgs,
    GetCommentArgs,
    ListKeyCommentsArgs,
    ListProjectCommentsArgs,
)

PROJECT_ID_HELP = "Lokalise project ID"


def register(app: typer.Typer) -> None:
    """Register the comments commands."""

    @app.command("list-key-comments")
    def list_key_comments_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_id: int = typer.Option(..., "--key-id", "-k", help="Key ID to list comments for"),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of comments to return (1-5000)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination"),
    ) -> None:
        """Lists comments attached to a translation key."""
        def action():
            check_range(limit, "--limit", 1, MAX_LIST_LIMIT)
            check_range(page, "--page", 1)
            return controller.list_key_comments(ListKeyCommentsArgs(
                project_id=project_id, key_id=key_id, limit=limit, page=page,
            ))

        run_command("list-key-comments", action)

    @app.command("list-project-comments")
    def list_project_comments_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of comments to return (1-5000)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination"),
    ) -> None:
        """Lists all comments in a project, grouped by key."""
        def action():
            check_range(limit, "--limit", 1, MAX_LIST_LIMIT)
            check_range(page, "--page", 1)
            return controller.list_project_comments(ListProjectCommentsArgs(
                project_id=project_id, limit=limit, page=page,
            ))

        run_command("list-project-comments", action)

    @app.command("get-comment")
    def get_comment_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_id: int = typer.Option(..., "--key-id", "-k", help="Key ID containing the comment"),
        comment_id: int = typer.Option(..., "--comment-id", "-c", help="Comment ID to get details for"),
    ) -> None:
        """Gets a single comment."""
        run_command("get-comment", lambda: controller.get_comment(GetCommentArgs(
            project_id=project_id, key_id=key_id, comment_id=comment_id,
        )))

    @app.command("create-comments")
    def create_comments_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_id: int = typer.Option(..., "--key-id", "-k", help="Key ID to attach comments to"),
        comments: List[str] = typer.Option(..., "--comment", "-c", help="Comment text (repeat for several comments)"),
    ) -> None:
        """Adds one or more comments to a translation key."""
        run_command("create-comments", lambda: controller.create_comments(CreateCommentsArgs(
            project_id=project_id,
            key_id=key_id,
            comments=[CommentInput(comment=text) for text in comments],
        )))

    @app.command("delete-comment")
    def delete_comment_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_id: int = typer.Option(..., "--key-id", "-k", help="Key ID containing the comment"),
        comment_id: int = typer.Option(..., "--comment-id", "-c", help="Comment ID to delete"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
    ) -> None:
        """Deletes a comment permanently."""
        require_confirmation(confirm, "Deletion requires --confirm flag for safety")
        run_command("delete-comment", lambda: controller.delete_comment(DeleteCommentArgs(
            project_id=project_id, key_id=key_id, comment_id=comment_id,
        )))
