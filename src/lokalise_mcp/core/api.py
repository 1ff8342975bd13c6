"""
Lokalise API client accessor.

A single ``lokalise.Client`` is built lazily from the merged configuration
and cached until the configuration is reloaded.
"""

from typing import Optional
import logging

import lokalise

from lokalise_mcp.config.loader import ConfigLoader, config
from lokalise_mcp.core.errors import create_api_error

logger = logging.getLogger(__name__)


class LokaliseApi:
    """Lazily constructed, resettable Lokalise client holder."""

    def __init__(self, config_loader: ConfigLoader):
        self._config = config_loader
        self._client: Optional[lokalise.Client] = None

    def get(self) -> lokalise.Client:
        """Return the cached client, building it on first use.

        Raises:
            McpError: When LOKALISE_API_KEY is not configured
        """
        if self._client is not None:
            return self._client

        api_key = self._config.get("LOKALISE_API_KEY")
        if not api_key:
            raise create_api_error(
                "LOKALISE_API_KEY is required but not found in configuration",
                401,
            )

        hostname = self._config.get_lokalise_api_hostname()
        self._client = lokalise.Client(api_key, api_host=hostname)
        logger.debug(f"Lokalise API client initialized (host: {hostname})")
        return self._client

    def reset(self) -> None:
        """Drop the cached client so the next ``get()`` rebuilds it."""
        if self._client is not None:
            logger.debug("Lokalise API client reset")
        self._client = None

    @property
    def is_initialized(self) -> bool:
        return self._client is not None


_api = LokaliseApi(config)
config.on_reload(_api.reset)


def get_lokalise_api() -> lokalise.Client:
    return _api.get()


def reset_lokalise_api() -> None:
    _api.reset()
