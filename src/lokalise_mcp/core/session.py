"""
MCP session configuration.

MCP clients may send Lokalise settings as extra fields of ``clientInfo`` in
the ``initialize`` request. They are applied once per session.
"""

from typing import Any, Dict
import logging
import weakref

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.config.loader import config
from lokalise_mcp.config.schema import McpInitConfig

logger = logging.getLogger(__name__)

_INIT_KEYS = set(McpInitConfig.model_fields)
# Sessions already applied; entries drop out when a session is collected
_applied_sessions: "weakref.WeakSet[Any]" = weakref.WeakSet()


def extract_init_config(client_info: Any) -> Dict[str, Any]:
    """Pick recognized configuration fields out of the client info extras."""
    extras = getattr(client_info, "model_extra", None) or {}
    return {key: value for key, value in extras.items() if key in _INIT_KEYS}


def apply_mcp_init_config(server: FastMCP) -> bool:
    """Apply the current session's initialization config, once per session.

    Returns:
        True when new configuration was applied
    """
    try:
        session = server.get_context().session
    except (LookupError, ValueError):
        # Not inside a request (CLI, tests)
        return False

    if session in _applied_sessions:
        return False
    _applied_sessions.add(session)

    client_params = getattr(session, "client_params", None)
    client_info = getattr(client_params, "clientInfo", None)
    init_config = extract_init_config(client_info)
    if not init_config:
        return False

    logger.debug(f"Applying MCP initialization config: {sorted(init_config)}")
    config.set_mcp_init_config(init_config)
    config.reload()
    return True
