"""Tests for the command-line interface."""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from lokalise_mcp import VERSION
from lokalise_mcp.cli.app import create_app
from lokalise_mcp.domains.base import ControllerResponse

runner = CliRunner()


@pytest.fixture(scope="module")
def app():
    return create_app()


class TestAppBasics:
    """Test the application callback and built-in commands."""

    def test_version(self, app):
        """Test the eager --version option."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output

    def test_every_domain_contributes_commands(self, app):
        """Test that domain commands are listed in the help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("list-projects", "list-keys", "list-tasks", "list-usergroups", "get-queued-process"):
            assert command in result.output

    def test_config_masks_key(self, app, monkeypatch):
        """Test that the config command never prints the token."""
        monkeypatch.setenv("LOKALISE_API_KEY", "secret-token")

        with patch("lokalise_mcp.cli.app.config.get_config_summary") as summary, \
                patch("lokalise_mcp.cli.app.config.validate", return_value=(True, [])):
            summary.return_value = {
                "values": {"LOKALISE_API_KEY": "***masked***", "PORT": 3000},
                "sources": ["default"],
                "env_file": "",
                "global_config": "~/.mcp/configs.json",
                "errors": [],
            }
            result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "***masked***" in result.output
        assert "secret-token" not in result.output


class TestValidationBeforeApiCalls:
    """Test that CLI options are checked before the API is called."""

    def test_list_keys_limit_out_of_range(self, app):
        """Test that --limit above 5000 fails without calling the controller."""
        with patch("lokalise_mcp.domains.keys.cli.controller.list_keys", new_callable=AsyncMock) as list_keys:
            result = runner.invoke(app, ["list-keys", "--project-id", "p1", "--limit", "5001"])

        assert result.exit_code == 1
        assert "Error: Invalid --limit value: Must be a number between 1 and 5000." in result.output
        list_keys.assert_not_called()

    def test_list_keys_limit_upper_bound(self, app):
        with patch(
            "lokalise_mcp.domains.keys.cli.controller.list_keys",
            new_callable=AsyncMock,
            return_value=ControllerResponse(content="# Translation Keys"),
        ) as list_keys:
            result = runner.invoke(app, ["list-keys", "--project-id", "p1", "--limit", "5000"])

        assert result.exit_code == 0
        assert list_keys.await_args.args[0].limit == 5000

    def test_list_keys_invalid_platform(self, app):
        """Test platform filter validation."""
        with patch("lokalise_mcp.domains.keys.cli.controller.list_keys", new_callable=AsyncMock) as list_keys:
            result = runner.invoke(app, ["list-keys", "-p", "p1", "--filter-platforms", "ios,desktop"])

        assert result.exit_code == 1
        assert "Invalid platform: desktop" in result.output
        list_keys.assert_not_called()

    def test_bulk_delete_requires_confirm(self, app):
        """Test that bulk deletion refuses to run without --confirm."""
        with patch(
            "lokalise_mcp.domains.keys.cli.controller.bulk_delete_keys", new_callable=AsyncMock
        ) as bulk_delete:
            result = runner.invoke(app, ["bulk-delete-keys", "--project-id", "p1", "--key-ids", "1,2"])

        assert result.exit_code == 1
        assert "Error: Bulk deletion requires --confirm flag for safety" in result.output
        bulk_delete.assert_not_called()

    def test_bulk_delete_rejects_non_numeric_ids(self, app):
        """Test that key IDs must be numbers."""
        result = runner.invoke(app, ["bulk-delete-keys", "-p", "p1", "--key-ids", "1,abc", "--confirm"])

        assert result.exit_code == 1
        assert "--key-ids must be a comma-separated list of numbers" in result.output

    def test_create_keys_invalid_json(self, app):
        """Test that --keys must be JSON or a JSON file."""
        result = runner.invoke(app, ["create-keys", "-p", "p1", "--keys", "{not json"])

        assert result.exit_code == 1
        assert "Invalid JSON for --keys" in result.output

    def test_delete_task_requires_confirm(self, app):
        """Test the confirmation guard of task deletion."""
        result = runner.invoke(app, ["delete-task", "--project-id", "p1", "--task-id", "5"])
        assert result.exit_code == 1


class TestCommandOutput:
    """Test successful command execution."""

    def test_get_key_prints_markdown(self, app):
        """Test that the controller's Markdown goes to stdout."""
        response = ControllerResponse(content="# Key: welcome_title")

        with patch(
            "lokalise_mcp.domains.keys.cli.controller.get_key",
            new_callable=AsyncMock,
            return_value=response,
        ) as get_key:
            result = runner.invoke(app, ["get-key", "--project-id", "p1", "--key-id", "42"])

        assert result.exit_code == 0
        assert "# Key: welcome_title" in result.output
        args = get_key.await_args.args[0]
        assert args.project_id == "p1"
        assert args.key_id == 42

    def test_create_keys_from_file(self, app, tmp_path):
        """Test that JSON options accept a file path."""
        keys_file = tmp_path / "keys.json"
        keys_file.write_text('[{"key_name": "welcome", "platforms": ["web"]}]')

        with patch(
            "lokalise_mcp.domains.keys.cli.controller.create_keys",
            new_callable=AsyncMock,
            return_value=ControllerResponse(content="created"),
        ) as create_keys:
            result = runner.invoke(app, ["create-keys", "-p", "p1", "--keys", str(keys_file)])

        assert result.exit_code == 0
        assert create_keys.await_args.args[0].keys[0].key_name == "welcome"
