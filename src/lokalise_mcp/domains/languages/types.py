"""Argument models for the languages domain."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lokalise_mcp.domains.base import ToolArgs

MAX_LANGUAGES_PER_REQUEST = 100


class NewLanguage(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lang_iso: str = Field(min_length=1, description="Language ISO code (e.g. 'en', 'fr', 'de')")
    custom_iso: Optional[str] = Field(default=None, description="Custom ISO code")
    custom_name: Optional[str] = Field(default=None, description="Custom language name")
    custom_plural_forms: Optional[List[str]] = Field(default=None, description="Custom plural forms")


class LanguageData(BaseModel):
    lang_iso: Optional[str] = Field(default=None, description="New language ISO code")
    lang_name: Optional[str] = Field(default=None, description="New language name")
    plural_forms: Optional[List[str]] = Field(default=None, description="New plural forms")


class ListSystemLanguagesArgs(ToolArgs):
    limit: Optional[int] = Field(default=None, description="Number of languages to return (1-500, default: 100)")
    page: Optional[int] = Field(default=None, description="Page number for pagination (default: 1)")


class ListProjectLanguagesArgs(ToolArgs):
    project_id: str = Field(description="Project ID to list languages for")
    include_progress: bool = Field(default=False, description="Include translation progress for each language")


class AddProjectLanguagesArgs(ToolArgs):
    project_id: str = Field(description="Project ID to add languages to")
    languages: List[NewLanguage] = Field(description="Languages to add (1-100)")


class GetLanguageArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the language")
    language_id: int = Field(description="Language ID")


class UpdateLanguageArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the language")
    language_id: int = Field(description="Language ID to update")
    language_data: LanguageData = Field(description="Fields to change")


class RemoveLanguageArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the language")
    language_id: int = Field(description="Language ID to remove")
