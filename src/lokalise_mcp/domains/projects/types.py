"""Argument models for the projects domain."""

from typing import Optional

from pydantic import BaseModel, Field

from lokalise_mcp.domains.base import ToolArgs


class ListProjectsArgs(ToolArgs):
    limit: Optional[int] = Field(default=None, description="Number of projects to return (1-500, default: 100)")
    page: Optional[int] = Field(default=None, description="Page number for pagination (default: 1)")
    include_stats: bool = Field(default=False, description="Include detailed project statistics")


class GetProjectArgs(ToolArgs):
    project_id: str = Field(description="Project ID to get details for")
    include_languages: bool = Field(
        default=False, description="Include detailed language information and completion rates",
    )
    include_keys_summary: bool = Field(
        default=False, description="Include summary of keys (total, translated, missing)",
    )


class CreateProjectArgs(ToolArgs):
    name: str = Field(min_length=1, description="Name of the project to create")
    description: Optional[str] = Field(default=None, description="Optional description for the project")
    base_lang_iso: str = Field(default="en", description="Base language ISO code (default: 'en')")


class ProjectData(BaseModel):
    name: Optional[str] = Field(default=None, description="Updated project name")
    description: Optional[str] = Field(default=None, description="Updated project description")


class UpdateProjectArgs(ToolArgs):
    project_id: str = Field(description="Project ID to update")
    project_data: ProjectData = Field(description="Project data to update")


class DeleteProjectArgs(ToolArgs):
    project_id: str = Field(description="Project ID to delete")


class EmptyProjectArgs(ToolArgs):
    project_id: str = Field(description="Project ID to empty")
