"""Tests for the prioritized configuration loader."""

import base64
import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from lokalise_mcp.config.loader import ConfigLoader
from lokalise_mcp.core.api import LokaliseApi
from lokalise_mcp.core.errors import ErrorType, McpError


def encode(payload: dict) -> str:
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


class TestDefaults:
    """Getters without any configured source."""

    def test_default_getters(self, loader: ConfigLoader) -> None:
        """Test the schema defaults."""
        assert loader.get("LOKALISE_API_KEY") is None
        assert loader.get_transport_mode() == "stdio"
        assert loader.get_port() == 3000
        assert loader.get_lokalise_api_hostname() == "https://api.lokalise.com/api2/"
        assert loader.get_lokalise_hostname() == "lokalise.com"
        assert loader.is_debug_enabled() is False
        assert loader.get_debug_pattern() is None
        assert loader.is_mcp_server_mode() is False

    def test_missing_api_key_raises(self, loader: ConfigLoader) -> None:
        """Test that asking for a missing API key fails with AUTH_MISSING."""
        with pytest.raises(McpError) as exc_info:
            loader.get_lokalise_api_key()
        assert exc_info.value.type == ErrorType.AUTH_MISSING

    def test_validate_reports_missing_key(self, loader: ConfigLoader) -> None:
        """Test that validation requires the API key."""
        valid, errors = loader.validate()
        assert valid is False
        assert "LOKALISE_API_KEY is required" in errors


class TestSourcePriority:
    """Precedence between configuration sources."""

    def test_env_file_is_loaded(self, loader: ConfigLoader, config_dir: Path) -> None:
        """Test that a .env file supplies unset values."""
        (config_dir / ".env").write_text("LOKALISE_API_KEY=from-file\nPORT=4000\n")

        assert loader.get("LOKALISE_API_KEY") == "from-file"
        assert loader.get_port() == 4000
        assert loader.env_loader.get_loaded_file() == (config_dir / ".env").resolve()
        assert loader.env_loader.get_loaded_vars() == {"LOKALISE_API_KEY": "from-file", "PORT": "4000"}

    def test_env_file_found_in_parent(self, tmp_path: Path) -> None:
        """Test the upward search for .env files."""
        parent = tmp_path / "repo"
        child = parent / "src" / "pkg"
        child.mkdir(parents=True)
        (parent / ".env").write_text("LOKALISE_API_KEY=parent-key\n")

        loader = ConfigLoader(working_directory=child, global_config_path=tmp_path / "none.json")

        assert loader.get("LOKALISE_API_KEY") == "parent-key"

    def test_environment_overrides_env_file(
        self, loader: ConfigLoader, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that process environment variables win over .env values."""
        (config_dir / ".env").write_text("LOKALISE_API_KEY=from-file\n")
        monkeypatch.setenv("LOKALISE_API_KEY", "from-env")

        assert loader.get("LOKALISE_API_KEY") == "from-env"

    def test_global_config_fills_unset_values(self, config_dir: Path, tmp_path: Path) -> None:
        """Test the global config file, comments included, below .env."""
        (config_dir / ".env").write_text("LOKALISE_API_KEY=from-file\n")
        global_path = tmp_path / "configs.json"
        global_path.write_text(
            """{
              // Lokalise settings
              "lokalise-mcp": {
                "environments": {
                  "LOKALISE_API_KEY": "from-global",
                  "TRANSPORT_MODE": "http"
                }
              }
            }"""
        )

        loader = ConfigLoader(working_directory=config_dir, global_config_path=global_path)

        assert loader.get("LOKALISE_API_KEY") == "from-file"
        assert loader.get_transport_mode() == "http"
        assert loader.global_loader.get_applied_vars() == {"TRANSPORT_MODE": "http"}

    def test_broken_global_config_is_not_fatal(self, config_dir: Path, tmp_path: Path) -> None:
        """Test that an unreadable global config is skipped."""
        global_path = tmp_path / "configs.json"
        global_path.write_text("{ not json")

        loader = ConfigLoader(working_directory=config_dir, global_config_path=global_path)

        assert loader.get_transport_mode() == "stdio"

    def test_http_query_overrides_environment(
        self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that HTTP query parameters win over the environment."""
        monkeypatch.setenv("LOKALISE_API_KEY", "from-env")
        loader.load()

        loader.set_http_query_config({"LOKALISE_API_KEY": "from-query"})
        loader.reload()

        assert loader.get("LOKALISE_API_KEY") == "from-query"

    def test_smithery_has_highest_priority(self, loader: ConfigLoader) -> None:
        """Test that Smithery config wins over query and init configs."""
        loader.set_mcp_init_config({"LOKALISE_API_KEY": "from-init"})
        loader.set_http_query_config({"LOKALISE_API_KEY": "from-query"})
        loader.set_smithery_config(encode({"LOKALISE_API_KEY": "from-smithery"}))
        loader.reload()

        assert loader.get("LOKALISE_API_KEY") == "from-smithery"
        assert "smithery" in loader.get_active_sources()

    def test_http_query_overrides_mcp_init(self, loader: ConfigLoader) -> None:
        loader.set_mcp_init_config({
            "LOKALISE_API_KEY": "from-init",
            "LOKALISE_API_HOSTNAME": "https://api.stage.lokalise.cloud/api2/",
        })
        loader.set_http_query_config({"LOKALISE_API_KEY": "from-query"})
        loader.reload()

        assert loader.get("LOKALISE_API_KEY") == "from-query"
        assert loader.get_lokalise_api_hostname() == "https://api.stage.lokalise.cloud/api2/"

    def test_all_sources_together(
        self, config_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that each key resolves to the highest source defining it."""
        global_path = tmp_path / "configs.json"
        global_path.write_text(json.dumps({"lokalise-mcp": {"environments": {
            "LOKALISE_API_KEY": "from-global",
            "TRANSPORT_MODE": "stdio",
            "PORT": "5000",
            "NODE_ENV": "test",
        }}}))
        (config_dir / ".env").write_text("LOKALISE_API_KEY=from-file\nTRANSPORT_MODE=stdio\nPORT=4000\n")
        monkeypatch.setenv("LOKALISE_API_KEY", "from-env")
        monkeypatch.setenv("TRANSPORT_MODE", "http")
        monkeypatch.setenv("DEBUG", "false")

        loader = ConfigLoader(working_directory=config_dir, global_config_path=global_path)
        loader.set_mcp_init_config({"LOKALISE_API_KEY": "from-init", "DEBUG": "lokalise_mcp.core*"})
        loader.set_http_query_config({
            "LOKALISE_API_KEY": "from-query",
            "LOKALISE_API_HOSTNAME": "https://api.stage.lokalise.cloud/api2/",
        })
        loader.set_smithery_config(encode({
            "LOKALISE_API_KEY": "from-smithery",
            "LOKALISE_API_HOSTNAME": "https://api.lokalise.com/api2/",
        }))
        loader.reload()

        assert loader.get("LOKALISE_API_KEY") == "from-smithery"
        assert loader.get_lokalise_api_hostname() == "https://api.lokalise.com/api2/"
        assert loader.get("DEBUG") == "lokalise_mcp.core*"
        assert loader.get_transport_mode() == "http"
        assert loader.get_port() == 4000
        assert loader.get("NODE_ENV") == "test"
        assert loader.is_mcp_server_mode() is False

    def test_invalid_smithery_config_is_ignored(
        self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that an undecodable Smithery payload contributes nothing."""
        monkeypatch.setenv("LOKALISE_API_KEY", "from-env")

        loader.set_smithery_config("%%% not base64 %%%")
        loader.reload()

        assert loader.get("LOKALISE_API_KEY") == "from-env"

    def test_none_never_overwrites(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a source without a value keeps the lower layer's value."""
        monkeypatch.setenv("LOKALISE_API_KEY", "from-env")

        loader.set_http_query_config({"LOKALISE_API_KEY": None, "LOKALISE_API_HOSTNAME": None})
        loader.reload()

        assert loader.get("LOKALISE_API_KEY") == "from-env"
        assert loader.get_lokalise_api_hostname() == "https://api.lokalise.com/api2/"


class TestTypedGetters:
    """Coercion of merged values."""

    def test_invalid_port_falls_back(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a malformed PORT is reported and ignored."""
        monkeypatch.setenv("PORT", "not-a-port")

        assert loader.get_port() == 3000
        assert any("PORT" in error for error in loader.get_config_summary()["errors"])

    def test_debug_true(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test DEBUG=true enables all debug output."""
        monkeypatch.setenv("DEBUG", "true")

        assert loader.is_debug_enabled() is True
        assert loader.get_debug_pattern() == "*"

    def test_debug_pattern(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a DEBUG pattern is kept as-is."""
        monkeypatch.setenv("DEBUG", "lokalise_mcp.domains.keys*")

        assert loader.get_debug_config() == "lokalise_mcp.domains.keys*"
        assert loader.get_debug_pattern() == "lokalise_mcp.domains.keys*"

    def test_debug_mode_overrides_debug(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a client supplied debug_mode overrides DEBUG."""
        monkeypatch.setenv("DEBUG", "false")

        loader.set_mcp_init_config({"debug_mode": True})
        loader.reload()

        assert loader.is_debug_enabled() is True

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("TRUE", True), ("1", True), ("false", False), ("0", False), ("invalid", False)],
    )
    def test_get_boolean(
        self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
    ) -> None:
        monkeypatch.setenv("DEBUG", raw)
        assert loader.get_boolean("DEBUG") is expected

    def test_server_mode(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test MCP_SERVER_MODE parsing."""
        monkeypatch.setenv("MCP_SERVER_MODE", "true")
        assert loader.is_mcp_server_mode() is True

    @pytest.mark.parametrize(
        "hostname,expected",
        [
            ("https://api.lokalise.com/api2/", "lokalise.com"),
            ("https://api.stage.lokalise.cloud/api2/", "stage.lokalise.cloud"),
            ("http://localhost:8080/api2/", "lokalise.com"),
        ],
    )
    def test_lokalise_hostname(
        self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch, hostname: str, expected: str
    ) -> None:
        """Test deriving the web app domain from the API hostname."""
        monkeypatch.setenv("LOKALISE_API_HOSTNAME", hostname)
        assert loader.get_lokalise_hostname() == expected

    def test_node_env(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test NODE_ENV parsing and test environment detection."""
        monkeypatch.setenv("NODE_ENV", "test")

        assert loader.get_node_env() == "test"
        assert loader.is_test_environment() is True

    def test_full_config_holds_typed_values(
        self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that merged values keep their converted types."""
        monkeypatch.setenv("PORT", "8080")

        full = loader.get_full_config()

        assert full["PORT"] == 8080
        assert full["TRANSPORT_MODE"] == "stdio"

    def test_summary_masks_api_key(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the summary never exposes the token."""
        monkeypatch.setenv("LOKALISE_API_KEY", "secret-token")

        summary = loader.get_config_summary()

        assert summary["values"]["LOKALISE_API_KEY"] == "***masked***"
        assert "secret-token" not in json.dumps(summary)


class TestReload:
    """Reload listeners and the API client cache."""

    def test_reload_notifies_listeners(self, loader: ConfigLoader) -> None:
        """Test that reload calls registered listeners once each."""
        listener = Mock()
        loader.on_reload(listener)
        loader.on_reload(listener)

        loader.reload()

        listener.assert_called_once_with()

    def test_api_client_reset_on_reload(self, loader: ConfigLoader, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a reload drops the cached Lokalise client."""
        monkeypatch.setenv("LOKALISE_API_KEY", "token")
        api = LokaliseApi(loader)
        loader.on_reload(api.reset)

        with patch("lokalise_mcp.core.api.lokalise.Client") as client_class:
            first = api.get()
            assert api.get() is first
            client_class.assert_called_once_with("token", api_host="https://api.lokalise.com/api2/")

            loader.reload()
            assert api.is_initialized is False

            api.get()
            assert client_class.call_count == 2

    def test_api_client_requires_key(self, loader: ConfigLoader) -> None:
        """Test that building a client without a key fails with a 401 API error."""
        api = LokaliseApi(loader)

        with pytest.raises(McpError) as exc_info:
            api.get()

        assert exc_info.value.type == ErrorType.API_ERROR
        assert exc_info.value.status_code == 401
