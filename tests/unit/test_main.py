"""Tests for the CLI / server mode dispatch."""

from unittest.mock import AsyncMock, patch

import pytest

from lokalise_mcp.__main__ import is_cli_mode, main, validate_server_configuration


@pytest.fixture
def run_server():
    with patch("lokalise_mcp.__main__.run_server", new_callable=AsyncMock) as mocked, \
            patch("lokalise_mcp.__main__.configure_logging"):
        yield mocked


class TestModeDetection:
    """Test how the process decides between CLI and server."""

    def test_arguments_select_cli(self):
        assert is_cli_mode(["list-projects"]) is True
        assert is_cli_mode([]) is False

    def test_server_mode_overrides_arguments(self, monkeypatch):
        monkeypatch.setenv("MCP_SERVER_MODE", "true")
        assert is_cli_mode(["list-projects"]) is False

    def test_stdio_requires_api_key(self):
        assert validate_server_configuration("stdio") == ["LOKALISE_API_KEY"]
        assert validate_server_configuration("http") == []

    def test_stdio_with_api_key(self, monkeypatch):
        monkeypatch.setenv("LOKALISE_API_KEY", "token")
        assert validate_server_configuration("stdio") == []

    def test_key_set_after_load_needs_reload(self, monkeypatch, isolated_global_config):
        """Test that the merged configuration is cached until reloaded."""
        assert validate_server_configuration("stdio") == ["LOKALISE_API_KEY"]

        monkeypatch.setenv("LOKALISE_API_KEY", "token")
        assert validate_server_configuration("stdio") == ["LOKALISE_API_KEY"]

        isolated_global_config.reload()
        assert validate_server_configuration("stdio") == []


class TestMain:
    """Test the main entry point."""

    def test_stdio_without_key_exits(self, run_server):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        run_server.assert_not_called()

    def test_stdio_server(self, run_server, monkeypatch):
        monkeypatch.setenv("LOKALISE_API_KEY", "token")

        main([])

        run_server.assert_awaited_once_with("stdio")

    def test_http_server_without_key(self, run_server, monkeypatch):
        """Test that HTTP starts without a key; clients send it per request."""
        monkeypatch.setenv("TRANSPORT_MODE", "http")

        main([])

        run_server.assert_awaited_once_with("http")

    def test_cli_version(self, run_server):
        """Test that arguments are handed to the typer app."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        run_server.assert_not_called()
