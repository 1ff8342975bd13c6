"""Translations controller."""

import logging

from lokalise_mcp.core.constants import BULK_UPDATE_MAX_ITEMS, MAX_LIST_LIMIT
from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.translations import formatter
from lokalise_mcp.domains.translations.service import translations_service
from lokalise_mcp.domains.translations.types import (
    QA_ISSUES,
    BulkUpdateTranslationsArgs,
    GetTranslationArgs,
    ListTranslationsArgs,
    UpdateTranslationArgs,
)

logger = logging.getLogger(__name__)


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")


def _check_qa_issues(qa_issues: str) -> None:
    for issue in (item.strip() for item in qa_issues.split(",")):
        if issue not in QA_ISSUES:
            raise create_validation_error(
                f"Invalid QA issue filter: {issue}. Valid values are: {', '.join(QA_ISSUES)}"
            )


@controller_operation("Translations", "listing", "project_id")
async def list_translations(args: ListTranslationsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    if args.limit is not None and not 1 <= args.limit <= MAX_LIST_LIMIT:
        raise create_validation_error("Invalid limit parameter. Must be between 1 and 5000.")
    if args.filter_lang_id is not None and args.filter_lang_id < 1:
        raise create_validation_error("Invalid language ID filter. Must be a positive number.")
    if args.filter_qa_issues is not None:
        _check_qa_issues(args.filter_qa_issues)

    collection = await translations_service.list_translations(
        args.project_id,
        limit=args.limit,
        cursor=args.cursor,
        filters={
            "filter_lang_id": args.filter_lang_id,
            "filter_is_reviewed": args.filter_is_reviewed,
            "filter_unverified": args.filter_unverified,
            "filter_untranslated": args.filter_untranslated,
            "filter_qa_issues": args.filter_qa_issues,
            "filter_active_task_id": args.filter_active_task_id,
            "disable_references": args.disable_references,
        },
    )
    return ControllerResponse(content=formatter.format_translations_list(collection, args.filter_qa_issues))


@controller_operation("Translation", "retrieving", "translation_id")
async def get_translation(args: GetTranslationArgs) -> ControllerResponse:
    _require_project(args.project_id)
    translation = await translations_service.get_translation(
        args.project_id, args.translation_id, args.disable_references,
    )
    return ControllerResponse(content=formatter.format_translation_details(translation))


@controller_operation("Translation", "updating", "translation_id")
async def update_translation(args: UpdateTranslationArgs) -> ControllerResponse:
    _require_project(args.project_id)
    if not args.translation_data.translation:
        raise create_validation_error("Translation text is required for update.")
    translation = await translations_service.update_translation(
        args.project_id, args.translation_id, args.translation_data,
    )
    return ControllerResponse(content=formatter.format_update_translation_result(translation))


@controller_operation("Translations", "bulk updating", "project_id")
async def bulk_update_translations(args: BulkUpdateTranslationsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    if not args.updates:
        raise create_validation_error("At least one translation update is required.")
    if len(args.updates) > BULK_UPDATE_MAX_ITEMS:
        raise create_validation_error(
            f"Maximum {BULK_UPDATE_MAX_ITEMS} translations can be updated in a single bulk operation."
        )
    for index, update in enumerate(args.updates):
        if not update.translation_data.translation:
            raise create_validation_error(f"Translation text is required for update at index {index}.")

    logger.debug(f"Bulk updating {len(args.updates)} translations in project {args.project_id}")
    summary = await translations_service.bulk_update(args.project_id, args.updates)
    return ControllerResponse(content=formatter.format_bulk_update_result(summary))
