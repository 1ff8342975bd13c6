"""CLI commands for the project glossary."""

from typing import List, Optional

import typer

from lokalise_mcp.cli.utils import (
    check_range,
    parse_csv,
    parse_int_csv,
    parse_json_list,
    require_confirmation,
    run_command,
)
from lokalise_mcp.core.constants import MAX_LIST_LIMIT
from lokalise_mcp.domains.glossary import controller
from lokalise_mcp.domains.glossary.types import (
    CreateGlossaryTermsArgs,
    DeleteGlossaryTermsArgs,
    GetGlossaryTermArgs,
    ListGlossaryTermsArgs,
    NewGlossaryTerm,
    UpdateGlossaryTermsArgs,
)

PROJECT_ID_HELP = "Lokalise project ID"


def register(app: typer.Typer) -> None:
    """Register the glossary commands."""

    @app.command("list-glossary-terms")
    def list_glossary_terms_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of terms to return (1-5000)"),
        cursor: Optional[str] = typer.Option(None, "--cursor", "-c", help="Cursor from a previous page"),
    ) -> None:
        """Lists the glossary terms of a project."""
        def action():
            check_range(limit, "--limit", 1, MAX_LIST_LIMIT)
            return controller.list_glossary_terms(ListGlossaryTermsArgs(
                project_id=project_id, limit=limit, cursor=cursor,
            ))

        run_command("list-glossary-terms", action)

    @app.command("get-glossary-term")
    def get_glossary_term_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        term_id: int = typer.Option(..., "--term-id", "-t", help="Glossary term ID"),
    ) -> None:
        """Gets a glossary term with its translations."""
        run_command("get-glossary-term", lambda: controller.get_glossary_term(GetGlossaryTermArgs(
            project_id=project_id, term_id=term_id,
        )))

    @app.command("create-glossary-term")
    def create_glossary_term_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        term: str = typer.Option(..., "--term", help="Term text"),
        description: str = typer.Option(..., "--description", "-d", help="Definition of the term"),
        case_sensitive: bool = typer.Option(False, "--case-sensitive", help="Term matching is case-sensitive"),
        not_translatable: bool = typer.Option(False, "--not-translatable", help="Term should not be translated"),
        forbidden: bool = typer.Option(False, "--forbidden", help="Term is forbidden in translations"),
        tags: Optional[str] = typer.Option(None, "--tags", help="Comma-separated tags"),
    ) -> None:
        """Creates a glossary term."""
        run_command("create-glossary-term", lambda: controller.create_glossary_terms(CreateGlossaryTermsArgs(
            project_id=project_id,
            terms=[NewGlossaryTerm(
                term=term,
                description=description,
                case_sensitive=case_sensitive,
                translatable=not not_translatable,
                forbidden=forbidden,
                tags=parse_csv(tags),
            )],
        )))

    @app.command("update-glossary-terms")
    def update_glossary_terms_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        terms: str = typer.Option(..., "--terms", help="JSON array or file path of term updates, each with an id"),
    ) -> None:
        """Updates glossary terms in bulk."""
        run_command("update-glossary-terms", lambda: controller.update_glossary_terms(UpdateGlossaryTermsArgs(
            project_id=project_id, terms=parse_json_list(terms, "--terms"),
        )))

    @app.command("delete-glossary-terms")
    def delete_glossary_terms_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        term_ids: str = typer.Option(..., "--term-ids", help="Glossary term IDs (comma-separated)"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
    ) -> None:
        """Permanently deletes glossary terms."""
        require_confirmation(confirm, "Deleting glossary terms requires --confirm flag for safety")

        def action():
            ids: Optional[List[int]] = parse_int_csv(term_ids, "--term-ids")
            return controller.delete_glossary_terms(DeleteGlossaryTermsArgs(project_id=project_id, term_ids=ids or []))

        run_command("delete-glossary-terms", action)
