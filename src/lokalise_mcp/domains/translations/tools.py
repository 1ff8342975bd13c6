"""MCP tools for translations."""

from typing import Annotated, List, Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.translations import controller
from lokalise_mcp.domains.translations.types import (
    BulkUpdateTranslationsArgs,
    GetTranslationArgs,
    ListTranslationsArgs,
    TranslationData,
    TranslationUpdate,
    UpdateTranslationArgs,
)

ProjectId = Annotated[str, Field(description="Lokalise project ID")]
TranslationId = Annotated[int, Field(description="Translation ID")]
ZeroOne = Optional[Literal["0", "1"]]


def register_tools(server: FastMCP) -> None:
    """Register the translations tools."""

    @server.tool(
        name="lokalise_list_translations",
        description=(
            "Lists actual translation content across languages with cursor pagination. "
            "Required: project_id. Optional: limit (1-5000), cursor, filter_lang_id (numeric), "
            "filter_is_reviewed, filter_unverified, filter_untranslated, filter_qa_issues, "
            "filter_active_task_id. Use to review translation status and quality."
        ),
        structured_output=False,
    )
    async def list_translations(
        project_id: ProjectId,
        limit: Annotated[Optional[int], Field(description="Number of translations to return (1-5000)")] = None,
        cursor: Annotated[Optional[str], Field(description="Cursor from a previous response")] = None,
        filter_lang_id: Annotated[Optional[int], Field(description="Filter by language ID (numeric)")] = None,
        filter_is_reviewed: Annotated[ZeroOne, Field(description="0=not reviewed, 1=reviewed")] = None,
        filter_unverified: Annotated[ZeroOne, Field(description="0=verified, 1=unverified")] = None,
        filter_untranslated: Annotated[ZeroOne, Field(description="1=only untranslated")] = None,
        filter_qa_issues: Annotated[Optional[str], Field(description="Comma-separated QA issue types")] = None,
        filter_active_task_id: Annotated[Optional[int], Field(description="Filter by active task ID")] = None,
        disable_references: Annotated[ZeroOne, Field(description="Disable reference information")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_translations", controller.list_translations, ListTranslationsArgs,
            project_id=project_id, limit=limit, cursor=cursor, filter_lang_id=filter_lang_id,
            filter_is_reviewed=filter_is_reviewed, filter_unverified=filter_unverified,
            filter_untranslated=filter_untranslated, filter_qa_issues=filter_qa_issues,
            filter_active_task_id=filter_active_task_id, disable_references=disable_references,
        )

    @server.tool(
        name="lokalise_get_translation",
        description=(
            "Gets a single translation with its content, review state, custom statuses and task "
            "information. Required: project_id, translation_id."
        ),
        structured_output=False,
    )
    async def get_translation(
        project_id: ProjectId,
        translation_id: TranslationId,
        disable_references: Annotated[ZeroOne, Field(description="Disable reference information")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_translation", controller.get_translation, GetTranslationArgs,
            project_id=project_id, translation_id=translation_id, disable_references=disable_references,
        )

    @server.tool(
        name="lokalise_update_translation",
        description=(
            "Updates one translation's text and review state. Required: project_id, translation_id, "
            "translation_data {translation, is_reviewed?, is_unverified?, custom_translation_status_ids?}."
        ),
        structured_output=False,
    )
    async def update_translation(
        project_id: ProjectId,
        translation_id: TranslationId,
        translation_data: Annotated[TranslationData, Field(description="Translation data to update")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_translation", controller.update_translation, UpdateTranslationArgs,
            project_id=project_id, translation_id=translation_id, translation_data=translation_data,
        )

    @server.tool(
        name="lokalise_bulk_update_translations",
        description=(
            "Updates up to 100 translations one by one with rate limiting and up to 3 attempts "
            "each. Required: project_id, updates [{translation_id, translation_data}]. Failed items "
            "do not stop the batch; the result lists successes and failures."
        ),
        structured_output=False,
    )
    async def bulk_update_translations(
        project_id: ProjectId,
        updates: Annotated[List[TranslationUpdate], Field(description="Translation updates (1-100)")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_bulk_update_translations", controller.bulk_update_translations,
            BulkUpdateTranslationsArgs, project_id=project_id, updates=updates,
        )
