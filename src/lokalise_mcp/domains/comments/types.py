"""Argument models for the comments domain."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lokalise_mcp.core.constants import MAX_LIST_LIMIT
from lokalise_mcp.domains.base import ToolArgs


class ListKeyCommentsArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the key")
    key_id: int = Field(description="Key ID to list comments for")
    limit: Optional[int] = Field(
        default=None, ge=1, le=MAX_LIST_LIMIT,
        description="Number of comments to return (1-5000, default: 100)",
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number for pagination (default: 1)")


class ListProjectCommentsArgs(ToolArgs):
    project_id: str = Field(description="Project ID to list all comments for")
    limit: Optional[int] = Field(
        default=None, ge=1, le=MAX_LIST_LIMIT,
        description="Number of comments to return (1-5000, default: 100)",
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number for pagination (default: 1)")


class GetCommentArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the comment")
    key_id: int = Field(description="Key ID containing the comment")
    comment_id: int = Field(description="Comment ID to get details for")


class CommentInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    comment: str = Field(description="The comment text")


class CreateCommentsArgs(ToolArgs):
    project_id: str = Field(description="Project ID to create comments in")
    key_id: int = Field(description="Key ID to attach comments to")
    comments: List[CommentInput] = Field(min_length=1, description="Array of comments to create")


class DeleteCommentArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the comment")
    key_id: int = Field(description="Key ID containing the comment")
    comment_id: int = Field(description="Comment ID to delete")
