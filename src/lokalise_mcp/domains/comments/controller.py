"""Comments controller."""

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.comments import formatter
from lokalise_mcp.domains.comments.service import comments_service
from lokalise_mcp.domains.comments.types import (
    CreateCommentsArgs,
    DeleteCommentArgs,
    GetCommentArgs,
    ListKeyCommentsArgs,
    ListProjectCommentsArgs,
)


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")


@controller_operation("Comments", "listing key comments", "key_id")
async def list_key_comments(args: ListKeyCommentsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    collection = await comments_service.list_key_comments(args.project_id, args.key_id, args.limit, args.page)
    return ControllerResponse(content=formatter.format_key_comments_list(collection, args.key_id))


@controller_operation("Comments", "listing project comments", "project_id")
async def list_project_comments(args: ListProjectCommentsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    collection = await comments_service.list_project_comments(args.project_id, args.limit, args.page)
    return ControllerResponse(content=formatter.format_project_comments_list(collection))


@controller_operation("Comment", "getting comment", "comment_id")
async def get_comment(args: GetCommentArgs) -> ControllerResponse:
    _require_project(args.project_id)
    comment = await comments_service.get_comment(args.project_id, args.key_id, args.comment_id)
    return ControllerResponse(content=formatter.format_comment_details(comment))


@controller_operation("Comments", "creating comments", "key_id")
async def create_comments(args: CreateCommentsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    for index, item in enumerate(args.comments):
        if not item.comment.strip():
            raise create_validation_error(f"Comment text is required for comment at index {index}.")

    created = await comments_service.create_comments(
        args.project_id, args.key_id, [item.model_dump() for item in args.comments],
    )
    return ControllerResponse(content=formatter.format_create_comments_result(created, args.key_id))


@controller_operation("Comment", "deleting comment", "comment_id")
async def delete_comment(args: DeleteCommentArgs) -> ControllerResponse:
    _require_project(args.project_id)
    result = await comments_service.delete_comment(args.project_id, args.key_id, args.comment_id)
    return ControllerResponse(
        content=formatter.format_delete_comment_result(result, args.project_id, args.comment_id)
    )
