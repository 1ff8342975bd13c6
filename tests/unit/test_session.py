"""Tests for configuration sent in the MCP initialize request."""

import gc
from types import SimpleNamespace
from unittest.mock import Mock

from lokalise_mcp.core import session as session_module
from lokalise_mcp.core.session import apply_mcp_init_config, extract_init_config


class FakeSession:
    """Session stand-in; server sessions must be weak-referenceable."""

    def __init__(self, extras: dict):
        self.client_params = SimpleNamespace(clientInfo=SimpleNamespace(model_extra=extras))


class FakeServer:
    def __init__(self, session: FakeSession):
        self._context = SimpleNamespace(session=session)

    def get_context(self):
        return self._context


class TestInitConfig:
    """Test extraction and application of client supplied settings."""

    def test_extract_keeps_known_fields(self):
        info = SimpleNamespace(model_extra={"LOKALISE_API_KEY": "k", "theme": "dark"})
        assert extract_init_config(info) == {"LOKALISE_API_KEY": "k"}

    def test_extract_without_extras(self):
        assert extract_init_config(None) == {}

    def test_applied_once_per_session(self, isolated_global_config):
        """Test that a session's settings are merged on its first request only."""
        server = FakeServer(FakeSession({"LOKALISE_API_KEY": "from-client"}))

        assert apply_mcp_init_config(server) is True
        assert isolated_global_config.get("LOKALISE_API_KEY") == "from-client"
        assert "mcp_init" in isolated_global_config.get_active_sources()

        assert apply_mcp_init_config(server) is False

    def test_each_session_is_applied(self, isolated_global_config):
        first = FakeServer(FakeSession({"LOKALISE_API_KEY": "first"}))
        second = FakeServer(FakeSession({"LOKALISE_API_KEY": "second"}))

        assert apply_mcp_init_config(first) is True
        assert apply_mcp_init_config(second) is True
        assert isolated_global_config.get("LOKALISE_API_KEY") == "second"

    def test_collected_sessions_are_forgotten(self, isolated_global_config):
        """Test that finished sessions do not stay tracked."""
        gc.collect()
        before = len(session_module._applied_sessions)
        server = FakeServer(FakeSession({"LOKALISE_API_KEY": "k"}))

        apply_mcp_init_config(server)
        assert len(session_module._applied_sessions) == before + 1

        del server
        gc.collect()
        assert len(session_module._applied_sessions) == before

    def test_outside_request(self):
        """Test that calls outside a request change nothing."""
        server = Mock()
        server.get_context.side_effect = ValueError("Context is not available outside of a request")

        assert apply_mcp_init_config(server) is False
