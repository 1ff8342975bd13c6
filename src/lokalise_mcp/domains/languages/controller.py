"""Languages controller."""

import logging

from lokalise_mcp.core.errors import (
    McpError,
    create_auth_invalid_error,
    create_validation_error,
    get_deep_original_error,
    get_status_code,
)
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.languages import formatter
from lokalise_mcp.domains.languages.service import languages_service
from lokalise_mcp.domains.languages.types import (
    MAX_LANGUAGES_PER_REQUEST,
    AddProjectLanguagesArgs,
    GetLanguageArgs,
    ListProjectLanguagesArgs,
    ListSystemLanguagesArgs,
    RemoveLanguageArgs,
    UpdateLanguageArgs,
)

logger = logging.getLogger(__name__)

MAX_SYSTEM_LANGUAGES_LIMIT = 500


def _raise_if_unauthorized(error: McpError) -> None:
    root = get_deep_original_error(error.original_error)
    if root is None:
        return
    text = str(root)
    if get_status_code(root) == 401 or "Unauthorized" in text or "Invalid API token" in text:
        logger.error("Lokalise API authentication failed")
        raise create_auth_invalid_error(
            "Lokalise API authentication failed. Please check your API token.", error,
        ) from error


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")


def _require_language(language_id: int) -> None:
    if language_id < 1:
        raise create_validation_error("Language ID is required and must be a positive number.")


@controller_operation("Lokalise System Languages", "listing system languages")
async def list_system_languages(args: ListSystemLanguagesArgs) -> ControllerResponse:
    if args.limit is not None and not 1 <= args.limit <= MAX_SYSTEM_LANGUAGES_LIMIT:
        raise create_validation_error("Invalid limit parameter. Must be between 1 and 500.")
    if args.page is not None and args.page < 1:
        raise create_validation_error("Invalid page parameter. Must be 1 or greater.")
    try:
        collection = await languages_service.list_system_languages(args.limit, args.page)
    except McpError as e:
        _raise_if_unauthorized(e)
        raise
    return ControllerResponse(content=formatter.format_system_languages_list(collection))


@controller_operation("Project Languages", "listing project languages", "project_id")
async def list_project_languages(args: ListProjectLanguagesArgs) -> ControllerResponse:
    _require_project(args.project_id)
    try:
        collection = await languages_service.list_project_languages(args.project_id)
        progress = None
        if args.include_progress:
            progress = await languages_service.get_language_progress(args.project_id)
    except McpError as e:
        _raise_if_unauthorized(e)
        raise
    return ControllerResponse(content=formatter.format_project_languages(collection, args.project_id, progress))


@controller_operation("Project Languages", "adding languages", "project_id")
async def add_project_languages(args: AddProjectLanguagesArgs) -> ControllerResponse:
    _require_project(args.project_id)
    if not args.languages:
        raise create_validation_error("Languages array is required and must contain at least one language.")
    if len(args.languages) > MAX_LANGUAGES_PER_REQUEST:
        raise create_validation_error("Cannot add more than 100 languages at once.")

    payload = [lang.model_dump(exclude_none=True) for lang in args.languages]
    try:
        created = await languages_service.add_languages(args.project_id, payload)
    except McpError as e:
        _raise_if_unauthorized(e)
        raise
    return ControllerResponse(content=formatter.format_add_languages_result(created, args.project_id))


@controller_operation("Language", "getting language", "language_id")
async def get_language(args: GetLanguageArgs) -> ControllerResponse:
    _require_project(args.project_id)
    _require_language(args.language_id)
    try:
        language = await languages_service.get_language(args.project_id, args.language_id)
    except McpError as e:
        _raise_if_unauthorized(e)
        raise
    return ControllerResponse(content=formatter.format_language_details(language, args.project_id))


@controller_operation("Language", "updating language", "language_id")
async def update_language(args: UpdateLanguageArgs) -> ControllerResponse:
    _require_project(args.project_id)
    _require_language(args.language_id)
    data = args.language_data.model_dump(exclude_none=True)
    if not data:
        raise create_validation_error(
            "At least one field must be provided to update (lang_iso, lang_name, or plural_forms)."
        )
    try:
        language = await languages_service.update_language(args.project_id, args.language_id, data)
    except McpError as e:
        _raise_if_unauthorized(e)
        raise
    return ControllerResponse(content=formatter.format_update_language_result(language, args.project_id))


@controller_operation("Language", "removing language", "language_id")
async def remove_language(args: RemoveLanguageArgs) -> ControllerResponse:
    _require_project(args.project_id)
    _require_language(args.language_id)
    try:
        result = await languages_service.remove_language(args.project_id, args.language_id)
    except McpError as e:
        _raise_if_unauthorized(e)
        raise
    return ControllerResponse(
        content=formatter.format_remove_language_result(result, args.project_id, args.language_id)
    )
