"""MCP tools for translation keys."""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.keys import controller
from lokalise_mcp.domains.keys.types import (
    BulkDeleteKeysArgs,
    BulkUpdateKeysArgs,
    CreateKeysArgs,
    DeleteKeyArgs,
    GetKeyArgs,
    KeyData,
    KeyUpdate,
    ListKeysArgs,
    NewKey,
    Platform,
    UpdateKeyArgs,
)

ProjectId = Annotated[str, Field(description="Lokalise project ID")]
KeyId = Annotated[int, Field(description="Key ID")]


def register_tools(server: FastMCP) -> None:
    """Register the keys tools."""

    @server.tool(
        name="lokalise_list_keys",
        description=(
            "Explores the project's content structure by listing translation keys. "
            "Required: project_id. Optional: limit (1-5000, default 100), page, filter_keys, "
            "filter_platforms, filter_filenames, include_translations. Returns keys with metadata, "
            "platform coverage and quality indicators. Start here to understand project content."
        ),
        structured_output=False,
    )
    async def list_keys(
        project_id: ProjectId,
        limit: Annotated[Optional[int], Field(description="Number of keys to return (1-5000)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
        include_translations: Annotated[bool, Field(description="Include translation data for each key")] = False,
        filter_keys: Annotated[Optional[List[str]], Field(description="Filter by key names")] = None,
        filter_platforms: Annotated[Optional[List[Platform]], Field(description="Filter by platforms")] = None,
        filter_filenames: Annotated[Optional[List[str]], Field(description="Filter by filenames")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_keys", controller.list_keys, ListKeysArgs,
            project_id=project_id, limit=limit, page=page,
            include_translations=include_translations, filter_keys=filter_keys,
            filter_platforms=filter_platforms, filter_filenames=filter_filenames,
        )

    @server.tool(
        name="lokalise_create_keys",
        description=(
            "Adds new UI text or content to be translated (up to 1000 keys per request). "
            "Required: project_id, keys array with {key_name, platforms}. Optional per key: "
            "description, tags, translations. Returns created keys with IDs and any errors."
        ),
        structured_output=False,
    )
    async def create_keys(
        project_id: ProjectId,
        keys: Annotated[List[NewKey], Field(description="Keys to create (1-1000)")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_create_keys", controller.create_keys, CreateKeysArgs,
            project_id=project_id, keys=keys,
        )

    @server.tool(
        name="lokalise_get_key",
        description=(
            "Deep-dives into a single key. Required: project_id, key_id. Returns full key data "
            "including translations, platforms, tags, comments and screenshots."
        ),
        structured_output=False,
    )
    async def get_key(project_id: ProjectId, key_id: KeyId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_key", controller.get_key, GetKeyArgs,
            project_id=project_id, key_id=key_id,
        )

    @server.tool(
        name="lokalise_update_key",
        description=(
            "Modifies key metadata. Required: project_id, key_id, key_data with any of "
            "description, platforms, tags. Updates metadata only; use translation tools for text."
        ),
        structured_output=False,
    )
    async def update_key(
        project_id: ProjectId,
        key_id: KeyId,
        key_data: Annotated[KeyData, Field(description="Key data to update")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_key", controller.update_key, UpdateKeyArgs,
            project_id=project_id, key_id=key_id, key_data=key_data,
        )

    @server.tool(
        name="lokalise_delete_key",
        description=(
            "Permanently removes a key and all its translations. Required: project_id, key_id. "
            "Warning: irreversible."
        ),
        structured_output=False,
    )
    async def delete_key(project_id: ProjectId, key_id: KeyId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_delete_key", controller.delete_key, DeleteKeyArgs,
            project_id=project_id, key_id=key_id,
        )

    @server.tool(
        name="lokalise_bulk_update_keys",
        description=(
            "Modifies metadata for multiple keys in one request (up to 1000). Required: project_id, "
            "keys array with {key_id} plus changes. Returns updated keys and any errors."
        ),
        structured_output=False,
    )
    async def bulk_update_keys(
        project_id: ProjectId,
        keys: Annotated[List[KeyUpdate], Field(description="Key updates (1-1000)")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_bulk_update_keys", controller.bulk_update_keys, BulkUpdateKeysArgs,
            project_id=project_id, keys=keys,
        )

    @server.tool(
        name="lokalise_bulk_delete_keys",
        description=(
            "Removes multiple keys and their translations permanently. Required: project_id, "
            "key_ids array (1-1000). Warning: irreversible batch operation."
        ),
        structured_output=False,
    )
    async def bulk_delete_keys(
        project_id: ProjectId,
        key_ids: Annotated[List[int], Field(description="Key IDs to delete (1-1000)")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_bulk_delete_keys", controller.bulk_delete_keys, BulkDeleteKeysArgs,
            project_id=project_id, key_ids=key_ids,
        )
