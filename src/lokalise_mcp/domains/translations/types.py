"""Argument and result models for the translations domain."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

from lokalise_mcp.core.constants import BULK_UPDATE_MAX_ITEMS
from lokalise_mcp.domains.base import ToolArgs

ZeroOne = Literal["0", "1"]

QA_ISSUES: List[str] = [
    "spelling_and_grammar",
    "inconsistent_placeholders",
    "inconsistent_html",
    "whitespace_issues",
    "missing_translation",
    "unreliable_translation",
    "unbalanced_brackets",
    "double_space",
    "special_character",
    "unverified",
    "glossary_term_violation",
]


class ListTranslationsArgs(ToolArgs):
    project_id: str = Field(description="Project ID to list translations for")
    limit: Optional[int] = Field(
        default=None, description="Number of translations to return (1-5000, default: 100)",
    )
    cursor: Optional[str] = Field(default=None, description="Cursor for pagination (from previous response)")
    filter_lang_id: Optional[int] = Field(default=None, description="Filter by language ID (numeric, not ISO code)")
    filter_is_reviewed: Optional[ZeroOne] = Field(
        default=None, description="Filter by review status (0=not reviewed, 1=reviewed)",
    )
    filter_unverified: Optional[ZeroOne] = Field(
        default=None, description="Filter by verification status (0=verified, 1=unverified)",
    )
    filter_untranslated: Optional[ZeroOne] = Field(
        default=None, description="Filter by translation status (1=show only untranslated)",
    )
    filter_qa_issues: Optional[str] = Field(
        default=None,
        description="Filter by QA issues (comma-separated: spelling_and_grammar,inconsistent_placeholders,etc.)",
    )
    filter_active_task_id: Optional[int] = Field(default=None, description="Filter by active task ID")
    disable_references: Optional[ZeroOne] = Field(
        default=None, description="Disable reference information in response",
    )


class GetTranslationArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the translation")
    translation_id: int = Field(description="Translation ID to get details for")
    disable_references: Optional[ZeroOne] = Field(
        default=None, description="Disable reference information in response",
    )


class TranslationData(BaseModel):
    translation: str = Field(description="The updated translation text")
    is_reviewed: Optional[bool] = Field(default=None, description="Mark translation as reviewed")
    is_unverified: Optional[bool] = Field(default=None, description="Mark translation as unverified (fuzzy)")
    custom_translation_status_ids: Optional[List[int]] = Field(
        default=None, description="Array of custom translation status IDs (numeric)",
    )


class UpdateTranslationArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the translation")
    translation_id: int = Field(description="Translation ID to update")
    translation_data: TranslationData = Field(description="Translation data to update")


class TranslationUpdate(BaseModel):
    translation_id: int = Field(description="Translation ID to update")
    translation_data: TranslationData = Field(description="Translation data to update")


class BulkUpdateTranslationsArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the translations")
    updates: List[TranslationUpdate] = Field(
        min_length=1, max_length=BULK_UPDATE_MAX_ITEMS,
        description="Array of translation updates (min 1, max 100)",
    )


class BulkUpdateItemResult(BaseModel):
    """Outcome of one translation in a bulk update."""

    translation_id: int
    success: bool
    translation: Optional[Any] = None
    error: Optional[str] = None
    attempts: int


class BulkUpdateResult(BaseModel):
    """Summary of a bulk translation update."""

    total_requested: int
    success_count: int
    failure_count: int
    results: List[BulkUpdateItemResult]
    duration_ms: int
