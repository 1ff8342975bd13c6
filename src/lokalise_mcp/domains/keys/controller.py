"""
Keys controller.

Validates key operations, calls the keys service and renders the results.
"""

import logging

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.keys import formatter
from lokalise_mcp.domains.keys.service import keys_service
from lokalise_mcp.domains.keys.types import (
    BulkDeleteKeysArgs,
    BulkUpdateKeysArgs,
    CreateKeysArgs,
    DeleteKeyArgs,
    GetKeyArgs,
    ListKeysArgs,
    UpdateKeyArgs,
)

logger = logging.getLogger(__name__)


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required")


@controller_operation("Translation Keys", "listing keys", "project_id")
async def list_keys(args: ListKeysArgs) -> ControllerResponse:
    _require_project(args.project_id)
    collection = await keys_service.list_keys(
        args.project_id,
        limit=args.limit,
        page=args.page,
        include_translations=args.include_translations,
        filter_keys=args.filter_keys,
        filter_platforms=args.filter_platforms,
        filter_filenames=args.filter_filenames,
    )
    return ControllerResponse(content=formatter.format_keys_list(collection, args.project_id))


@controller_operation("Translation Key", "getting key details", "key_id")
async def get_key(args: GetKeyArgs) -> ControllerResponse:
    _require_project(args.project_id)
    key = await keys_service.get_key(args.project_id, args.key_id)
    return ControllerResponse(content=formatter.format_key_details(key, args.project_id))


@controller_operation("Translation Keys", "creating keys", "project_id")
async def create_keys(args: CreateKeysArgs) -> ControllerResponse:
    _require_project(args.project_id)
    payload = [key.model_dump(exclude_none=True) for key in args.keys]
    logger.debug(f"Creating {len(payload)} keys in project {args.project_id}")
    result = await keys_service.create_keys(args.project_id, payload)
    return ControllerResponse(content=formatter.format_create_keys_result(result, args.project_id))


@controller_operation("Translation Key", "updating key", "key_id")
async def update_key(args: UpdateKeyArgs) -> ControllerResponse:
    _require_project(args.project_id)
    data = args.key_data.model_dump(exclude_none=True)
    if not data:
        raise create_validation_error("At least one field must be provided in key_data")
    key = await keys_service.update_key(args.project_id, args.key_id, data)
    return ControllerResponse(content=formatter.format_update_key_result(key, args.project_id))


@controller_operation("Translation Key", "deleting key", "key_id")
async def delete_key(args: DeleteKeyArgs) -> ControllerResponse:
    _require_project(args.project_id)
    result = await keys_service.delete_key(args.project_id, args.key_id)
    return ControllerResponse(
        content=formatter.format_delete_key_result(result, args.project_id, args.key_id)
    )


@controller_operation("Translation Keys", "bulk updating keys", "project_id")
async def bulk_update_keys(args: BulkUpdateKeysArgs) -> ControllerResponse:
    _require_project(args.project_id)
    payload = [key.model_dump(exclude_none=True) for key in args.keys]
    result = await keys_service.bulk_update_keys(args.project_id, payload)
    return ControllerResponse(content=formatter.format_bulk_update_keys_result(result, args.project_id))


@controller_operation("Translation Keys", "bulk deleting keys", "project_id")
async def bulk_delete_keys(args: BulkDeleteKeysArgs) -> ControllerResponse:
    _require_project(args.project_id)
    result = await keys_service.bulk_delete_keys(args.project_id, args.key_ids)
    return ControllerResponse(
        content=formatter.format_bulk_delete_keys_result(result, args.project_id, len(args.key_ids))
    )
