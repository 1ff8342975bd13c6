"""CLI commands for languages."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import (
    check_range,
    fail,
    parse_csv,
    parse_json_list,
    require_confirmation,
    run_command,
)
from lokalise_mcp.domains.languages import controller
from lokalise_mcp.domains.languages.types import (
    AddProjectLanguagesArgs,
    GetLanguageArgs,
    LanguageData,
    ListProjectLanguagesArgs,
    ListSystemLanguagesArgs,
    NewLanguage,
    RemoveLanguageArgs,
    UpdateLanguageArgs,
)

PROJECT_ID_HELP = "Lokalise project ID"


def register(app: typer.Typer) -> None:
    """Register the languages commands."""

    @app.command("list-system-languages")
    def list_system_languages_command(
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of languages to return (1-500)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination"),
    ) -> None:
        """Lists every language Lokalise supports."""
        def action():
            check_range(limit, "--limit", 1, controller.MAX_SYSTEM_LANGUAGES_LIMIT)
            check_range(page, "--page", 1)
            return controller.list_system_languages(ListSystemLanguagesArgs(limit=limit, page=page))

        run_command("list-system-languages", action)

    @app.command("list-project-languages")
    def list_project_languages_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        include_progress: bool = typer.Option(False, "--include-progress", help="Include translation progress"),
    ) -> None:
        """Lists the languages of a project."""
        run_command("list-project-languages", lambda: controller.list_project_languages(ListProjectLanguagesArgs(
            project_id=project_id, include_progress=include_progress,
        )))

    @app.command("add-project-languages")
    def add_project_languages_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        languages: Optional[str] = typer.Option(
            None, "--languages", help="Language ISO codes to add (comma-separated)",
        ),
        languages_file: Optional[str] = typer.Option(
            None, "--languages-json", help="JSON array or file path of language objects",
        ),
    ) -> None:
        """Adds languages to a project."""
        def action():
            if languages_file:
                items = parse_json_list(languages_file, "--languages-json")
            else:
                items = [NewLanguage(lang_iso=iso) for iso in parse_csv(languages) or []]
            if not items:
                fail("Provide --languages or --languages-json")
            return controller.add_project_languages(AddProjectLanguagesArgs(project_id=project_id, languages=items))

        run_command("add-project-languages", action)

    @app.command("get-language")
    def get_language_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        language_id: int = typer.Option(..., "--language-id", help="Language ID"),
    ) -> None:
        """Gets a project language."""
        def action():
            check_range(language_id, "--language-id", 1)
            return controller.get_language(GetLanguageArgs(project_id=project_id, language_id=language_id))

        run_command("get-language", action)

    @app.command("update-language")
    def update_language_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        language_id: int = typer.Option(..., "--language-id", help="Language ID"),
        lang_iso: Optional[str] = typer.Option(None, "--lang-iso", help="New language ISO code"),
        lang_name: Optional[str] = typer.Option(None, "--lang-name", help="New language name"),
        plural_forms: Optional[str] = typer.Option(None, "--plural-forms", help="New plural forms (comma-separated)"),
    ) -> None:
        """Updates a project language."""
        def action():
            check_range(language_id, "--language-id", 1)
            if not (lang_iso or lang_name or plural_forms):
                fail("At least one field must be provided to update (lang-iso, lang-name, or plural-forms)")
            return controller.update_language(UpdateLanguageArgs(
                project_id=project_id,
                language_id=language_id,
                language_data=LanguageData(lang_iso=lang_iso, lang_name=lang_name, plural_forms=parse_csv(plural_forms)),
            ))

        run_command("update-language", action)

    @app.command("remove-language")
    def remove_language_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        language_id: int = typer.Option(..., "--language-id", help="Language ID"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm removal (required for safety)"),
    ) -> None:
        """Removes a language and all its translations from a project."""
        require_confirmation(
            confirm,
            "Language removal requires --confirm flag for safety. "
            "WARNING: This action cannot be undone and will remove all translations!",
        )
        run_command("remove-language", lambda: controller.remove_language(RemoveLanguageArgs(
            project_id=project_id, language_id=language_id,
        )))
