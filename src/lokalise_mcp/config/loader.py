"""
Prioritized configuration loader for Lokalise MCP.

Configuration is merged from several independent sources. Precedence
(higher numbers override lower):

1. Schema defaults
2. Global config file (``~/.mcp/configs.json``), via the environment
3. Project ``.env`` file, via the environment
4. Process environment variables
5. MCP client initialization payload
6. HTTP query parameters
7. Smithery base64 ``config`` parameter

A source never overwrites a value with ``None``; a source that fails
validation contributes nothing.
"""

import base64
import binascii
import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import urlparse
import logging

from pydantic import ValidationError

from lokalise_mcp.config.env_loader import EnvFileLoader, GlobalConfigLoader
from lokalise_mcp.config.schema import (
    CONFIG_KEYS,
    DEFAULT_PORT,
    EnvironmentSnapshot,
    HttpQueryConfig,
    McpInitConfig,
    RuntimeConfig,
    SmitheryConfig,
)
from lokalise_mcp.core.errors import create_auth_missing_error

logger = logging.getLogger(__name__)


class ConfigSource(Enum):
    """Configuration sources in ascending priority."""
    DEFAULT = "default"
    ENVIRONMENT = "environment"
    MCP_INIT = "mcp_init"
    HTTP_QUERY = "http_query"
    SMITHERY = "smithery"


@dataclass
class SourceLayer:
    """Values contributed by one configuration source."""
    source: ConfigSource
    values: Dict[str, Any]
    errors: List[str] = field(default_factory=list)

    @property
    def active(self) -> bool:
        return bool(self.values)


PRECEDENCE_ORDER = [
    ConfigSource.DEFAULT,
    ConfigSource.ENVIRONMENT,
    ConfigSource.MCP_INIT,
    ConfigSource.HTTP_QUERY,
    ConfigSource.SMITHERY,
]


def _parse_true(value: str) -> bool:
    return value == "true"


def _parse_debug(value: str) -> Union[bool, str]:
    if value == "true":
        return True
    if value == "false":
        return False
    return value


def _to_config_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigLoader:
    """
    Process-wide configuration view assembled from prioritized sources.

    ``load()`` runs once; ``set_*_config`` calls followed by ``reload()``
    re-merge everything and notify reload listeners (the API client cache).
    """

    # Environment variable coercion; failures are logged and skipped
    ENV_CONVERTERS: Dict[str, Callable[[str], Any]] = {
        "PORT": int,
        "MCP_SERVER_MODE": _parse_true,
        "debug_mode": _parse_true,
        "DEBUG": _parse_debug,
    }

    def __init__(
        self,
        working_directory: Optional[Path] = None,
        global_config_path: Optional[Path] = None,
    ):
        """Initialize the loader.

        Args:
            working_directory: Start directory for the ``.env`` search
            global_config_path: Override for ``~/.mcp/configs.json``
        """
        self.env_loader = EnvFileLoader(working_directory)
        self.global_loader = GlobalConfigLoader(global_config_path)
        self._config_loaded = False
        self._merged: Dict[str, Any] = {}
        self._layers: Dict[ConfigSource, SourceLayer] = {}
        self._smithery_config: Optional[SmitheryConfig] = None
        self._http_query_config: Optional[HttpQueryConfig] = None
        self._mcp_init_config: Optional[McpInitConfig] = None
        self._reload_listeners: List[Callable[[], None]] = []

    # Loading

    def load(self) -> None:
        """Load file-backed sources once and merge all sources."""
        if self._config_loaded:
            return

        # .env first so that the global file only fills what is still unset
        self.env_loader.load_env_file()
        self.global_loader.apply_environments()

        self._merge_configurations()
        self._config_loaded = True
        logger.debug(f"Configuration loaded from: {', '.join(self.get_active_sources())}")

    def reload(self) -> None:
        """Re-read all sources and reset dependent caches.

        Smithery, HTTP query and MCP init configurations survive the reload.
        """
        self._config_loaded = False
        self._merged = {}
        self._layers = {}
        self.load()
        for listener in list(self._reload_listeners):
            listener()
        logger.debug("Configuration reloaded")

    def on_reload(self, listener: Callable[[], None]) -> None:
        """Register a callback invoked after every reload."""
        if listener not in self._reload_listeners:
            self._reload_listeners.append(listener)

    # Source setters

    def set_smithery_config(self, encoded: str) -> None:
        """Store the Smithery configuration from its base64 JSON form.

        Invalid payloads are logged and leave no Smithery contribution.
        """
        try:
            decoded = base64.b64decode(encoded, validate=False).decode("utf-8")
            self._smithery_config = SmitheryConfig.model_validate(json.loads(decoded))
            logger.debug("Smithery configuration set")
        except (binascii.Error, UnicodeDecodeError, ValueError, ValidationError) as e:
            logger.error(f"Invalid Smithery configuration: {e}")
            self._smithery_config = None

    def set_http_query_config(self, query_config: Dict[str, Any]) -> None:
        """Store configuration parsed from HTTP query parameters."""
        try:
            self._http_query_config = HttpQueryConfig.model_validate(query_config)
            logger.debug(f"HTTP query configuration set: {sorted(query_config)}")
        except ValidationError as e:
            logger.error(f"Invalid HTTP query configuration: {e}")
            self._http_query_config = None

    def set_mcp_init_config(self, init_config: Dict[str, Any]) -> None:
        """Store configuration sent by the MCP client on initialization."""
        try:
            self._mcp_init_config = McpInitConfig.model_validate(init_config)
            logger.debug(f"MCP initialization configuration set: {sorted(init_config)}")
        except ValidationError as e:
            logger.error(f"Invalid MCP initialization configuration: {e}")
            self._mcp_init_config = None

    # Merging

    def _merge_configurations(self) -> None:
        self._layers = {
            ConfigSource.DEFAULT: SourceLayer(ConfigSource.DEFAULT, RuntimeConfig().model_dump()),
            ConfigSource.ENVIRONMENT: self._load_environment_variables(),
            ConfigSource.MCP_INIT: self._layer_from(ConfigSource.MCP_INIT, self._mcp_init_config),
            ConfigSource.HTTP_QUERY: self._layer_from(ConfigSource.HTTP_QUERY, self._http_query_config),
            ConfigSource.SMITHERY: self._layer_from(ConfigSource.SMITHERY, self._smithery_config),
        }

        merged: Dict[str, Any] = {}
        for source in PRECEDENCE_ORDER:
            layer = self._layers[source]
            self._overlay(merged, layer.values)
            # debug_mode of a client-supplied source overrides DEBUG
            if source not in (ConfigSource.DEFAULT, ConfigSource.ENVIRONMENT):
                if layer.values.get("debug_mode") is not None:
                    merged["DEBUG"] = layer.values["debug_mode"]

        self._merged = merged

    @staticmethod
    def _overlay(base: Dict[str, Any], overlay: Dict[str, Any]) -> None:
        for key, value in overlay.items():
            if value is None:
                continue
            base[key] = value

    @staticmethod
    def _layer_from(source: ConfigSource, model: Any) -> SourceLayer:
        values = model.model_dump(exclude_none=True) if model is not None else {}
        return SourceLayer(source, values)

    def _load_environment_variables(self) -> SourceLayer:
        layer = SourceLayer(ConfigSource.ENVIRONMENT, {})

        for key, raw in EnvironmentSnapshot().present().items():
            converter = self.ENV_CONVERTERS.get(key)
            if converter is None:
                layer.values[key] = raw
                continue
            try:
                layer.values[key] = converter(raw)
            except (ValueError, TypeError) as e:
                message = f"Invalid value for {key}: {raw} - {e}"
                logger.warning(message)
                layer.errors.append(message)

        return layer

    # Getters

    def _ensure_loaded(self) -> None:
        if not self._config_loaded:
            self.load()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a merged value as a string.

        Args:
            key: Configuration key
            default: Returned when the key has no value

        Returns:
            The value rendered as a string (booleans as ``"true"``/``"false"``)
        """
        self._ensure_loaded()
        value = self._merged.get(key)
        if value is None:
            return default
        return _to_config_string(value)

    def get_boolean(self, key: str, default: bool = False) -> bool:
        """Get a merged value as a boolean (``"true"`` or ``"1"``)."""
        value = self.get(key)
        if value is None:
            return default
        return value.lower() == "true" or value == "1"

    def get_lokalise_api_key(self) -> str:
        """Get the API key.

        Raises:
            McpError: When no source supplies LOKALISE_API_KEY
        """
        api_key = self.get("LOKALISE_API_KEY")
        if not api_key:
            raise create_auth_missing_error(
                "LOKALISE_API_KEY is required. Set it in the environment, a .env file, "
                "~/.mcp/configs.json or pass it as a query/initialization parameter."
            )
        return api_key

    def get_lokalise_api_hostname(self) -> str:
        return self.get("LOKALISE_API_HOSTNAME") or RuntimeConfig.model_fields["LOKALISE_API_HOSTNAME"].default

    def get_lokalise_hostname(self, default: str = "lokalise.com") -> str:
        """Get the bare Lokalise domain derived from the API hostname.

        ``https://api.stage.lokalise.cloud/api2/`` yields
        ``stage.lokalise.cloud``; ``https://api.lokalise.com/api2/`` yields
        ``lokalise.com``.
        """
        value = self.get("LOKALISE_API_HOSTNAME")
        if not value:
            return default

        hostname = urlparse(value).hostname
        if not hostname:
            return default

        parts = hostname.split(".")
        if len(parts) > 2 and parts[0] == "api":
            parts = parts[1:]
        if len(parts) >= 3:
            return ".".join(parts[-3:])
        if len(parts) == 2:
            return ".".join(parts)
        return default

    def get_transport_mode(self) -> str:
        mode = (self.get("TRANSPORT_MODE") or "").lower()
        return "http" if mode == "http" else "stdio"

    def get_port(self) -> int:
        value = self.get("PORT")
        try:
            port = int(value) if value is not None else DEFAULT_PORT
        except ValueError:
            return DEFAULT_PORT
        return port if 0 < port < 65536 else DEFAULT_PORT

    def get_debug_config(self) -> Union[bool, str]:
        """Get the debug setting: a boolean or a logger name pattern."""
        debug = self.get("DEBUG")
        if debug is None or debug in ("false", "0"):
            return False
        if debug in ("true", "1"):
            return True
        return debug

    def is_debug_enabled(self) -> bool:
        return self.get_debug_config() is not False

    def get_debug_pattern(self) -> Optional[str]:
        debug = self.get_debug_config()
        if debug is True:
            return "*"
        if isinstance(debug, str):
            return debug
        return None

    def get_node_env(self) -> Optional[str]:
        env = self.get("NODE_ENV")
        return env if env in ("development", "test", "production") else None

    def is_test_environment(self) -> bool:
        return self.get_node_env() == "test" or "PYTEST_CURRENT_TEST" in os.environ

    def is_mcp_server_mode(self) -> bool:
        return self.get_boolean("MCP_SERVER_MODE")

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate the merged configuration against the runtime schema.

        Returns:
            ``(valid, errors)``
        """
        self._ensure_loaded()
        errors: List[str] = []

        if not self._merged.get("LOKALISE_API_KEY"):
            errors.append("LOKALISE_API_KEY is required")

        try:
            RuntimeConfig.model_validate(self._merged)
        except ValidationError as e:
            for item in e.errors():
                location = ".".join(str(part) for part in item["loc"])
                errors.append(f"{location}: {item['msg']}")

        return not errors, errors

    def get_full_config(self) -> Dict[str, Any]:
        self._ensure_loaded()
        return dict(self._merged)

    def get_active_sources(self) -> List[str]:
        return [
            source.value for source in PRECEDENCE_ORDER
            if source in self._layers and self._layers[source].active
        ]

    def get_config_summary(self) -> Dict[str, Any]:
        """Get a summary of the configuration with the API key masked."""
        self._ensure_loaded()
        summary = {key: self._merged.get(key) for key in CONFIG_KEYS}
        if summary.get("LOKALISE_API_KEY"):
            summary["LOKALISE_API_KEY"] = "***masked***"
        return {
            "values": summary,
            "sources": self.get_active_sources(),
            "env_file": str(self.env_loader.get_loaded_file() or ""),
            "global_config": str(self.global_loader.config_path),
            "errors": [
                error for layer in self._layers.values() for error in layer.errors
            ],
        }


# Process-wide configuration instance
config = ConfigLoader()
