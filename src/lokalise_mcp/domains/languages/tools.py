"""MCP tools for languages."""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.languages import controller
from lokalise_mcp.domains.languages.types import (
    AddProjectLanguagesArgs,
    GetLanguageArgs,
    LanguageData,
    ListProjectLanguagesArgs,
    ListSystemLanguagesArgs,
    NewLanguage,
    RemoveLanguageArgs,
    UpdateLanguageArgs,
)

ProjectId = Annotated[str, Field(description="Lokalise project ID")]
LanguageId = Annotated[int, Field(description="Language ID")]


def register_tools(server: FastMCP) -> None:
    """Register the languages tools."""

    @server.tool(
        name="lokalise_list_system_languages",
        description="Lists every language Lokalise supports. Optional: limit (1-500), page.",
        structured_output=False,
    )
    async def list_system_languages(
        limit: Annotated[Optional[int], Field(description="Number of languages to return (1-500)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_system_languages", controller.list_system_languages, ListSystemLanguagesArgs,
            limit=limit, page=page,
        )

    @server.tool(
        name="lokalise_list_project_languages",
        description=(
            "Lists the languages of a project. Required: project_id. "
            "Optional: include_progress to add translation progress per language."
        ),
        structured_output=False,
    )
    async def list_project_languages(
        project_id: ProjectId,
        include_progress: Annotated[Optional[bool], Field(description="Include translation progress")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_project_languages", controller.list_project_languages, ListProjectLanguagesArgs,
            project_id=project_id, include_progress=include_progress,
        )

    @server.tool(
        name="lokalise_add_project_languages",
        description=(
            "Adds languages to a project. Required: project_id, languages [{lang_iso, custom_iso?, "
            "custom_name?, custom_plural_forms?}] (1-100)."
        ),
        structured_output=False,
    )
    async def add_project_languages(
        project_id: ProjectId,
        languages: Annotated[List[NewLanguage], Field(description="Languages to add")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_add_project_languages", controller.add_project_languages, AddProjectLanguagesArgs,
            project_id=project_id, languages=languages,
        )

    @server.tool(
        name="lokalise_get_language",
        description="Gets a project language with its plural forms. Required: project_id, language_id.",
        structured_output=False,
    )
    async def get_language(project_id: ProjectId, language_id: LanguageId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_language", controller.get_language, GetLanguageArgs,
            project_id=project_id, language_id=language_id,
        )

    @server.tool(
        name="lokalise_update_language",
        description=(
            "Updates a project language. Required: project_id, language_id, "
            "language_data {lang_iso?, lang_name?, plural_forms?}."
        ),
        structured_output=False,
    )
    async def update_language(
        project_id: ProjectId,
        language_id: LanguageId,
        language_data: Annotated[LanguageData, Field(description="Fields to change")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_language", controller.update_language, UpdateLanguageArgs,
            project_id=project_id, language_id=language_id, language_data=language_data,
        )

    @server.tool(
        name="lokalise_remove_language",
        description="Removes a language and all its translations from a project. Required: project_id, language_id.",
        structured_output=False,
    )
    async def remove_language(project_id: ProjectId, language_id: LanguageId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_remove_language", controller.remove_language, RemoveLanguageArgs,
            project_id=project_id, language_id=language_id,
        )
