"""CLI commands for translations."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import check_range, parse_int_csv, parse_json_list, run_command
from lokalise_mcp.core.constants import MAX_LIST_LIMIT
from lokalise_mcp.domains.translations import controller
from lokalise_mcp.domains.translations.types import (
    BulkUpdateTranslationsArgs,
    GetTranslationArgs,
    ListTranslationsArgs,
    TranslationData,
    UpdateTranslationArgs,
)

PROJECT_ID_HELP = "Lokalise project ID"


def register(app: typer.Typer) -> None:
    """Register the translations commands."""

    @app.command("list-translations")
    def list_translations_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of translations to return (1-5000, default: 100)"),
        cursor: Optional[str] = typer.Option(None, "--cursor", "-c", help="Cursor for pagination (from previous response)"),
        lang_id: Optional[int] = typer.Option(None, "--lang-id", help="Filter by language ID (numeric)"),
        reviewed: Optional[str] = typer.Option(None, "--reviewed", help="Filter by review status (0=not reviewed, 1=reviewed)"),
        unverified: Optional[str] = typer.Option(None, "--unverified", help="Filter by verification status (0=verified, 1=unverified)"),
        untranslated: Optional[str] = typer.Option(None, "--untranslated", help="Show only untranslated (1)"),
        qa_issues: Optional[str] = typer.Option(None, "--qa-issues", help="Filter by QA issues (comma-separated)"),
    ) -> None:
        """Lists translations in a Lokalise project with cursor pagination."""
        def action():
            check_range(limit, "--limit", 1, MAX_LIST_LIMIT)
            check_range(lang_id, "--lang-id", 1)
            return controller.list_translations(ListTranslationsArgs(
                project_id=project_id.strip(),
                limit=limit,
                cursor=cursor,
                filter_lang_id=lang_id,
                filter_is_reviewed=reviewed,
                filter_unverified=unverified,
                filter_untranslated=untranslated,
                filter_qa_issues=qa_issues,
            ))

        run_command("list-translations", action)

    @app.command("get-translation")
    def get_translation_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        translation_id: int = typer.Option(..., "--translation-id", "-t", help="Translation ID to get details for"),
        no_references: bool = typer.Option(False, "--no-references", help="Disable reference information in response"),
    ) -> None:
        """Gets details of a specific translation."""
        run_command("get-translation", lambda: controller.get_translation(GetTranslationArgs(
            project_id=project_id.strip(),
            translation_id=translation_id,
            disable_references="1" if no_references else None,
        )))

    @app.command("update-translation")
    def update_translation_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        translation_id: int = typer.Option(..., "--translation-id", "-t", help="Translation ID to update"),
        translation: str = typer.Option(..., "--translation", help="New translation text"),
        reviewed: bool = typer.Option(False, "--reviewed", help="Mark translation as reviewed"),
        unverified: bool = typer.Option(False, "--unverified", help="Mark translation as unverified (fuzzy)"),
        status_ids: Optional[str] = typer.Option(None, "--status-ids", help="Custom translation status IDs (comma-separated)"),
    ) -> None:
        """Updates an existing translation."""
        def action():
            return controller.update_translation(UpdateTranslationArgs(
                project_id=project_id.strip(),
                translation_id=translation_id,
                translation_data=TranslationData(
                    translation=translation,
                    is_reviewed=reviewed or None,
                    is_unverified=unverified or None,
                    custom_translation_status_ids=parse_int_csv(status_ids, "--status-ids"),
                ),
            ))

        run_command("update-translation", action)

    @app.command("bulk-update-translations")
    def bulk_update_translations_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        updates: str = typer.Option(
            ..., "--updates", "-u",
            help='JSON array or file path, e.g. [{"translation_id":123,"translation_data":{"translation":"Hello"}}]',
        ),
    ) -> None:
        """Updates multiple translations with rate limiting and retries."""
        def action():
            return controller.bulk_update_translations(BulkUpdateTranslationsArgs(
                project_id=project_id.strip(),
                updates=parse_json_list(updates, "--updates"),
            ))

        run_command("bulk-update-translations", action)
