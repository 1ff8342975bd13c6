"""Argument models for the keys domain."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from lokalise_mcp.core.constants import MAX_KEYS_PER_REQUEST, MAX_LIST_LIMIT
from lokalise_mcp.domains.base import ToolArgs

Platform = Literal["ios", "android", "web", "other"]
PLATFORMS: List[str] = ["ios", "android", "web", "other"]


class ListKeysArgs(ToolArgs):
    project_id: str = Field(description="Project ID to list keys for")
    limit: Optional[int] = Field(
        default=None, ge=1, le=MAX_LIST_LIMIT,
        description="Number of keys to return (1-5000, default: 100)",
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number for pagination (default: 1)")
    include_translations: bool = Field(default=False, description="Include translation data for each key")
    filter_keys: Optional[List[str]] = Field(default=None, description="Filter by specific key names")
    filter_platforms: Optional[List[Platform]] = Field(
        default=None, description="Filter by platforms (ios, android, web, other)",
    )
    filter_filenames: Optional[List[str]] = Field(
        default=None, description="Filter by specific filenames (e.g., ['strings.json'])",
    )


class GetKeyArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the key")
    key_id: int = Field(description="Key ID to get details for")


class KeyTranslationInput(BaseModel):
    language_iso: str = Field(description="Language ISO code")
    translation: str = Field(description="Translation text")


class NewKey(BaseModel):
    key_name: str = Field(description="Name of the key")
    description: Optional[str] = Field(default=None, description="Description of the translation key")
    platforms: List[Platform] = Field(min_length=1, description="Platforms this key belongs to (required)")
    translations: Optional[List[KeyTranslationInput]] = Field(
        default=None, description="Initial translations for the key",
    )
    tags: Optional[List[str]] = Field(default=None, description="Tags to organize the key")


class CreateKeysArgs(ToolArgs):
    project_id: str = Field(description="Project ID to create keys in")
    keys: List[NewKey] = Field(
        min_length=1, max_length=MAX_KEYS_PER_REQUEST,
        description="Array of key objects to create (1-1000 keys)",
    )


class KeyData(BaseModel):
    description: Optional[str] = Field(default=None, description="New description")
    platforms: Optional[List[Platform]] = Field(default=None, description="New platforms for the key")
    tags: Optional[List[str]] = Field(default=None, description="New tags for the key")


class UpdateKeyArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the key")
    key_id: int = Field(description="Key ID to update")
    key_data: KeyData = Field(description="Key data to update")


class DeleteKeyArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the key")
    key_id: int = Field(description="Key ID to delete")


class KeyUpdate(KeyData):
    key_id: int = Field(description="Key ID to update")


class BulkUpdateKeysArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the keys")
    keys: List[KeyUpdate] = Field(
        min_length=1, max_length=MAX_KEYS_PER_REQUEST,
        description="Array of key updates (1-1000 keys)",
    )


class BulkDeleteKeysArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the keys")
    key_ids: List[int] = Field(
        min_length=1, max_length=MAX_KEYS_PER_REQUEST,
        description="Array of key IDs to delete (1-1000 keys)",
    )
