"""Argument models for the glossary domain.

The glossary endpoints speak camelCase (``caseSensitive``, ``langId``); the
models accept snake_case or camelCase and dump camelCase via ``by_alias``.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lokalise_mcp.core.constants import MAX_LIST_LIMIT
from lokalise_mcp.domains.base import ToolArgs


class GlossaryModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GlossaryTranslation(GlossaryModel):
    lang_id: int = Field(description="Language ID of the translation")
    translation: Optional[str] = Field(default=None, description="Translated term")
    description: Optional[str] = Field(default=None, description="Context for the translation")


class NewGlossaryTerm(GlossaryModel):
    term: str = Field(min_length=1, description="Term text, e.g. a brand name")
    description: str = Field(description="Definition of the term")
    case_sensitive: bool = Field(default=False, description="Match the term case-sensitively")
    translatable: bool = Field(default=True, description="Whether the term may be translated")
    forbidden: bool = Field(default=False, description="Flag the term as forbidden in translations")
    translations: Optional[List[GlossaryTranslation]] = Field(default=None, description="Term translations")
    tags: Optional[List[str]] = Field(default=None, description="Tags, e.g. 'brand' or 'legal'")


class GlossaryTermUpdate(GlossaryModel):
    id: int = Field(description="Glossary term ID")
    term: Optional[str] = None
    description: Optional[str] = None
    case_sensitive: Optional[bool] = None
    translatable: Optional[bool] = None
    forbidden: Optional[bool] = None
    translations: Optional[List[GlossaryTranslation]] = None
    tags: Optional[List[str]] = None


class ListGlossaryTermsArgs(ToolArgs):
    project_id: str = Field(description="Project ID to list glossary terms for")
    limit: Optional[int] = Field(
        default=None, ge=1, le=MAX_LIST_LIMIT,
        description="Number of glossary terms to return (1-5000, default: 100)",
    )
    cursor: Optional[str] = Field(default=None, description="Cursor from a previous page")


class GetGlossaryTermArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the glossary term")
    term_id: int = Field(description="Glossary term ID")


class CreateGlossaryTermsArgs(ToolArgs):
    project_id: str = Field(description="Project ID to create glossary terms in")
    terms: List[NewGlossaryTerm] = Field(min_length=1, description="Terms to create")


class UpdateGlossaryTermsArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the glossary terms")
    terms: List[GlossaryTermUpdate] = Field(min_length=1, description="Term updates")


class DeleteGlossaryTermsArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the glossary terms")
    term_ids: List[int] = Field(min_length=1, description="Glossary term IDs to delete")
