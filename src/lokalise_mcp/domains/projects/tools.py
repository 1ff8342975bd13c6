"""MCP tools for projects."""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
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

ProjectId = Annotated[str, Field(description="Lokalise project ID")]


def register_tools(server: FastMCP) -> None:
    """Register the projects tools."""

    @server.tool(
        name="lokalise_list_projects",
        description=(
            "Lists all localization projects available to the API token. Optional: limit (1-500), "
            "page, include_stats. Returns names, IDs, base languages and progress. Start here to "
            "find a project_id."
        ),
        structured_output=False,
    )
    async def list_projects(
        limit: Annotated[Optional[int], Field(description="Number of projects to return (1-500)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
        include_stats: Annotated[bool, Field(description="Include detailed project statistics")] = False,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_projects", controller.list_projects, ListProjectsArgs,
            limit=limit, page=page, include_stats=include_stats,
        )

    @server.tool(
        name="lokalise_get_project",
        description=(
            "Gets a full project report: statistics, language progress, QA issues and settings. "
            "Required: project_id. Optional: include_languages, include_keys_summary."
        ),
        structured_output=False,
    )
    async def get_project(
        project_id: ProjectId,
        include_languages: Annotated[bool, Field(description="Show progress for every language")] = False,
        include_keys_summary: Annotated[bool, Field(description="Include a summary of keys")] = False,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_project", controller.get_project, GetProjectArgs,
            project_id=project_id, include_languages=include_languages,
            include_keys_summary=include_keys_summary,
        )

    @server.tool(
        name="lokalise_create_project",
        description=(
            "Creates a new localization project. Required: name. Optional: description, "
            "base_lang_iso (default 'en'). Returns the new project ID and next steps."
        ),
        structured_output=False,
    )
    async def create_project(
        name: Annotated[str, Field(description="Name of the project to create")],
        description: Annotated[Optional[str], Field(description="Project description")] = None,
        base_lang_iso: Annotated[Optional[str], Field(description="Base language ISO code")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_create_project", controller.create_project, CreateProjectArgs,
            name=name, description=description, base_lang_iso=base_lang_iso,
        )

    @server.tool(
        name="lokalise_update_project",
        description="Renames a project or changes its description. Required: project_id, project_data.",
        structured_output=False,
    )
    async def update_project(
        project_id: ProjectId,
        project_data: Annotated[ProjectData, Field(description="Fields to update (name, description)")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_project", controller.update_project, UpdateProjectArgs,
            project_id=project_id, project_data=project_data,
        )

    @server.tool(
        name="lokalise_delete_project",
        description="Permanently deletes a project with all its data. Required: project_id. Warning: irreversible.",
        structured_output=False,
    )
    async def delete_project(project_id: ProjectId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_delete_project", controller.delete_project, DeleteProjectArgs,
            project_id=project_id,
        )

    @server.tool(
        name="lokalise_empty_project",
        description=(
            "Deletes all keys and translations of a project while keeping the project and its "
            "settings. Required: project_id. Warning: irreversible."
        ),
        structured_output=False,
    )
    async def empty_project(project_id: ProjectId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_empty_project", controller.empty_project, EmptyProjectArgs,
            project_id=project_id,
        )
