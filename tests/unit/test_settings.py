"""Tests for configuration schemas."""

import pytest
from pydantic import ValidationError

from lokalise_mcp.config.schema import (
    CONFIG_KEYS,
    DEFAULT_API_HOSTNAME,
    EnvironmentSnapshot,
    HttpQueryConfig,
    McpInitConfig,
    RuntimeConfig,
    SmitheryConfig,
)


class TestRuntimeConfig:
    """Test cases for RuntimeConfig."""

    def test_default_values(self) -> None:
        """Test that default values are set correctly."""
        settings = RuntimeConfig()

        assert settings.LOKALISE_API_KEY is None
        assert settings.LOKALISE_API_HOSTNAME == DEFAULT_API_HOSTNAME
        assert settings.TRANSPORT_MODE == "stdio"
        assert settings.PORT == 3000
        assert settings.DEBUG is False
        assert settings.debug_mode is False
        assert settings.MCP_SERVER_MODE is False

    def test_invalid_transport_mode(self) -> None:
        """Test validation of an unknown transport."""
        with pytest.raises(ValidationError):
            RuntimeConfig(TRANSPORT_MODE="websocket")

    def test_port_validation(self) -> None:
        """Test port range validation."""
        RuntimeConfig(PORT=1)
        RuntimeConfig(PORT=65535)

        with pytest.raises(ValidationError):
            RuntimeConfig(PORT=0)
        with pytest.raises(ValidationError):
            RuntimeConfig(PORT=65536)

    def test_hostname_must_be_url(self) -> None:
        """Test that the API hostname has to be an http(s) URL."""
        RuntimeConfig(LOKALISE_API_HOSTNAME="https://api.stage.lokalise.cloud/api2/")

        with pytest.raises(ValidationError):
            RuntimeConfig(LOKALISE_API_HOSTNAME="not-a-url")

    def test_debug_accepts_pattern(self) -> None:
        """Test that DEBUG may hold a logger name pattern."""
        settings = RuntimeConfig(DEBUG="lokalise_mcp.domains.*")
        assert settings.DEBUG == "lokalise_mcp.domains.*"

    def test_config_keys(self) -> None:
        """Test that every runtime field is a recognized key."""
        assert "LOKALISE_API_KEY" in CONFIG_KEYS
        assert "debug_mode" in CONFIG_KEYS


class TestSmitheryConfig:
    """Test cases for SmitheryConfig."""

    def test_requires_api_key(self) -> None:
        """Test that the API key is mandatory."""
        with pytest.raises(ValidationError):
            SmitheryConfig()

    def test_defaults(self) -> None:
        """Test hostname and debug defaults."""
        settings = SmitheryConfig(LOKALISE_API_KEY="key")
        assert settings.LOKALISE_API_HOSTNAME == DEFAULT_API_HOSTNAME
        assert settings.debug_mode is False

    def test_rejects_unknown_fields(self) -> None:
        """Test that Smithery payloads are strict."""
        with pytest.raises(ValidationError):
            SmitheryConfig(LOKALISE_API_KEY="key", unexpected="value")


class TestClientConfigs:
    """Test cases for the HTTP query and MCP init schemas."""

    def test_http_query_allows_extra_keys(self) -> None:
        """Test that unknown query parameters pass through."""
        settings = HttpQueryConfig(LOKALISE_API_KEY="key", server={"host": "x"})
        assert settings.model_dump(exclude_none=True) == {
            "LOKALISE_API_KEY": "key",
            "server": {"host": "x"},
        }

    def test_http_query_hostname_validation(self) -> None:
        """Test that a bad hostname rejects the query config."""
        with pytest.raises(ValidationError):
            HttpQueryConfig(LOKALISE_API_HOSTNAME="ftp://example.com")

    def test_mcp_init_debug_mode_coercion(self) -> None:
        """Test that debug_mode strings coerce to booleans."""
        settings = McpInitConfig(debug_mode="true")
        assert settings.debug_mode is True


class TestEnvironmentSnapshot:
    """Test cases for EnvironmentSnapshot."""

    def test_reads_present_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that only set variables are reported, as strings."""
        monkeypatch.setenv("LOKALISE_API_KEY", "env-key")
        monkeypatch.setenv("PORT", "8080")

        present = EnvironmentSnapshot().present()

        assert present == {"LOKALISE_API_KEY": "env-key", "PORT": "8080"}
