"""MCP tools for comments."""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.comments import controller
from lokalise_mcp.domains.comments.types import (
    CommentInput,
    CreateCommentsArgs,
    DeleteCommentArgs,
    GetCommentArgs,
    ListKeyCommentsArgs,
    ListProjectCommentsArgs,
)

ProjectId = Annotated[str, Field(description="Lokalise project ID")]
KeyId = Annotated[int, Field(description="Key ID")]
CommentId = Annotated[int, Field(description="Comment ID")]
Limit = Annotated[Optional[int], Field(description="Number of comments to return (1-5000)")]
Page = Annotated[Optional[int], Field(description="Page number (default 1)")]


def register_tools(server: FastMCP) -> None:
    """Register the comments tools."""

    @server.tool(
        name="lokalise_list_key_comments",
        description="Lists the discussion on one key. Required: project_id, key_id. Optional: limit, page.",
        structured_output=False,
    )
    async def list_key_comments(
        project_id: ProjectId, key_id: KeyId, limit: Limit = None, page: Page = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_key_comments", controller.list_key_comments, ListKeyCommentsArgs,
            project_id=project_id, key_id=key_id, limit=limit, page=page,
        )

    @server.tool(
        name="lokalise_list_project_comments",
        description=(
            "Lists all comments in a project grouped by key, to find open questions and "
            "translator feedback. Required: project_id. Optional: limit, page."
        ),
        structured_output=False,
    )
    async def list_project_comments(
        project_id: ProjectId, limit: Limit = None, page: Page = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_project_comments", controller.list_project_comments,
            ListProjectCommentsArgs, project_id=project_id, limit=limit, page=page,
        )

    @server.tool(
        name="lokalise_get_comment",
        description="Gets one comment with author and timestamp. Required: project_id, key_id, comment_id.",
        structured_output=False,
    )
    async def get_comment(project_id: ProjectId, key_id: KeyId, comment_id: CommentId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_comment", controller.get_comment, GetCommentArgs,
            project_id=project_id, key_id=key_id, comment_id=comment_id,
        )

    @server.tool(
        name="lokalise_create_comments",
        description=(
            "Adds comments to a key to give translators context. Required: project_id, key_id, "
            "comments [{comment}]."
        ),
        structured_output=False,
    )
    async def create_comments(
        project_id: ProjectId,
        key_id: KeyId,
        comments: Annotated[List[CommentInput], Field(description="Comments to create")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_create_comments", controller.create_comments, CreateCommentsArgs,
            project_id=project_id, key_id=key_id, comments=comments,
        )

    @server.tool(
        name="lokalise_delete_comment",
        description="Permanently deletes a comment. Required: project_id, key_id, comment_id.",
        structured_output=False,
    )
    async def delete_comment(project_id: ProjectId, key_id: KeyId, comment_id: CommentId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_delete_comment", controller.delete_comment, DeleteCommentArgs,
            project_id=project_id, key_id=key_id, comment_id=comment_id,
        )
