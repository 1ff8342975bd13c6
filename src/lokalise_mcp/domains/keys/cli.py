"""CLI commands for translation keys."""

from typing import Optional

import typer

from lokalise_mcp.cli.utils import (
    check_choices,
    check_range,
    parse_csv,
    parse_int_csv,
    parse_json_list,
    require_confirmation,
    run_command,
)
from lokalise_mcp.core.constants import MAX_LIST_LIMIT
from lokalise_mcp.domains.keys import controller
from lokalise_mcp.domains.keys.types import (
    PLATFORMS,
    BulkDeleteKeysArgs,
    BulkUpdateKeysArgs,
    CreateKeysArgs,
    DeleteKeyArgs,
    GetKeyArgs,
    KeyData,
    ListKeysArgs,
    UpdateKeyArgs,
)

PROJECT_ID_HELP = "Lokalise project ID"


def register(app: typer.Typer) -> None:
    """Register the keys commands."""

    @app.command("list-keys")
    def list_keys_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Number of keys to return (1-5000, default: 100)"),
        page: Optional[int] = typer.Option(None, "--page", help="Page number for pagination (default: 1)"),
        include_translations: bool = typer.Option(False, "--include-translations", help="Include translation data for each key"),
        filter_keys: Optional[str] = typer.Option(None, "--filter-keys", help="Filter by key names (comma-separated)"),
        filter_platforms: Optional[str] = typer.Option(None, "--filter-platforms", help="Filter by platforms: ios, android, web, other (comma-separated)"),
        filter_filenames: Optional[str] = typer.Option(None, "--filter-filenames", help="Filter by filenames (comma-separated)"),
    ) -> None:
        """Lists translation keys from a Lokalise project with optional filtering and pagination."""
        def action():
            check_range(limit, "--limit", 1, MAX_LIST_LIMIT)
            check_range(page, "--page", 1)
            platforms = parse_csv(filter_platforms)
            check_choices(platforms, "platform", PLATFORMS)
            return controller.list_keys(ListKeysArgs(
                project_id=project_id,
                limit=limit,
                page=page,
                include_translations=include_translations,
                filter_keys=parse_csv(filter_keys),
                filter_platforms=platforms,
                filter_filenames=parse_csv(filter_filenames),
            ))

        run_command("list-keys", action)

    @app.command("create-keys")
    def create_keys_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        keys: str = typer.Option(..., "--keys", "-k", help="JSON string or file path containing an array of key objects"),
    ) -> None:
        """Creates translation keys in a Lokalise project with optional initial translations."""
        def action():
            return controller.create_keys(CreateKeysArgs(
                project_id=project_id,
                keys=parse_json_list(keys, "--keys"),
            ))

        run_command("create-keys", action)

    @app.command("get-key")
    def get_key_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_id: int = typer.Option(..., "--key-id", "-k", help="Key ID to retrieve"),
    ) -> None:
        """Gets detailed information about a translation key."""
        run_command("get-key", lambda: controller.get_key(GetKeyArgs(project_id=project_id, key_id=key_id)))

    @app.command("update-key")
    def update_key_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_id: int = typer.Option(..., "--key-id", "-k", help="Key ID to update"),
        description: Optional[str] = typer.Option(None, "--description", "-d", help="New description for the key"),
        platforms: Optional[str] = typer.Option(None, "--platforms", help="New platforms (comma-separated)"),
        tags: Optional[str] = typer.Option(None, "--tags", help="New tags (comma-separated)"),
    ) -> None:
        """Updates a translation key's description, platforms or tags."""
        def action():
            platform_list = parse_csv(platforms)
            check_choices(platform_list, "platform", PLATFORMS)
            return controller.update_key(UpdateKeyArgs(
                project_id=project_id,
                key_id=key_id,
                key_data=KeyData(description=description, platforms=platform_list, tags=parse_csv(tags)),
            ))

        run_command("update-key", action)

    @app.command("delete-key")
    def delete_key_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_id: int = typer.Option(..., "--key-id", "-k", help="Key ID to delete"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
    ) -> None:
        """Deletes a translation key and all its translations permanently."""
        require_confirmation(confirm, "Deletion requires --confirm flag for safety")
        run_command("delete-key", lambda: controller.delete_key(DeleteKeyArgs(project_id=project_id, key_id=key_id)))

    @app.command("bulk-update-keys")
    def bulk_update_keys_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        keys: str = typer.Option(..., "--keys", "-k", help="JSON string or file path containing an array of key updates"),
    ) -> None:
        """Updates multiple translation keys in one request."""
        def action():
            return controller.bulk_update_keys(BulkUpdateKeysArgs(
                project_id=project_id,
                keys=parse_json_list(keys, "--keys"),
            ))

        run_command("bulk-update-keys", action)

    @app.command("bulk-delete-keys")
    def bulk_delete_keys_command(
        project_id: str = typer.Option(..., "--project-id", "-p", help=PROJECT_ID_HELP),
        key_ids: str = typer.Option(..., "--key-ids", "-k", help="Comma-separated list of key IDs to delete"),
        confirm: bool = typer.Option(False, "--confirm", help="Confirm deletion (required for safety)"),
    ) -> None:
        """Deletes multiple translation keys and all their translations permanently."""
        require_confirmation(confirm, "Bulk deletion requires --confirm flag for safety")

        def action():
            return controller.bulk_delete_keys(BulkDeleteKeysArgs(
                project_id=project_id,
                key_ids=parse_int_csv(key_ids, "--key-ids") or [],
            ))

        run_command("bulk-delete-keys", action)
