"""Argument models for the contributors domain."""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field

from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.domains.base import ToolArgs

ContributorRight = Literal[
    "upload",
    "activity",
    "download",
    "settings",
    "create_branches",
    "statistics",
    "keys",
    "screenshots",
    "glossary",
    "contributors",
    "languages",
    "tasks",
]


class ContributorLanguage(BaseModel):
    lang_iso: str = Field(min_length=2, description="Language ISO code")
    is_writable: Optional[bool] = Field(default=None, description="Whether the contributor can edit this language")


class NewContributor(BaseModel):
    email: EmailStr = Field(description="Contributor e-mail")
    fullname: Optional[str] = Field(default=None, description="Full name")
    is_admin: Optional[bool] = Field(default=None, description="Deprecated: use admin_rights instead")
    is_reviewer: Optional[bool] = Field(default=None, description="Deprecated: use admin_rights instead")
    languages: List[ContributorLanguage] = Field(min_length=1, description="Languages the contributor can access")
    admin_rights: Optional[List[ContributorRight]] = Field(default=None, description="Admin rights to grant")


class ListContributorsArgs(ToolArgs):
    project_id: str = Field(description="Project ID to list contributors for")
    limit: Optional[int] = Field(
        default=None, ge=1, le=MAX_TEAM_LIST_LIMIT,
        description="Number of contributors to return (1-100, default: 100)",
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number for pagination (default: 1)")


class GetContributorArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the contributor")
    contributor_id: Union[int, str] = Field(description="Contributor ID to get details for")


class AddContributorsArgs(ToolArgs):
    project_id: str = Field(description="Project ID to add contributors to")
    contributors: List[NewContributor] = Field(min_length=1, description="Contributors to add")


class GetCurrentUserArgs(ToolArgs):
    project_id: str = Field(description="Project ID to get current user's contributor profile")


class UpdateContributorArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the contributor")
    contributor_id: Union[int, str] = Field(description="Contributor ID to update")
    is_admin: Optional[bool] = Field(default=None, description="Deprecated: use admin_rights instead")
    is_reviewer: Optional[bool] = Field(default=None, description="Deprecated: use admin_rights instead")
    languages: Optional[List[ContributorLanguage]] = Field(default=None, description="Language access to set")
    admin_rights: Optional[List[ContributorRight]] = Field(default=None, description="Admin rights to set")


class RemoveContributorArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the contributor")
    contributor_id: Union[int, str] = Field(description="Contributor ID to remove")
