"""
Configuration schemas for Lokalise MCP.

Each configuration source is validated on its own model before it takes part
in the merge performed by :mod:`lokalise_mcp.config.loader`.
"""

from typing import Any, Dict, Literal, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_HOSTNAME = "https://api.lokalise.com/api2/"
DEFAULT_PORT = 3000


def _validate_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid URL '{value}'")
    return value


class RuntimeConfig(BaseModel):
    """
    Merged runtime configuration.

    Field names follow the environment variable names so that every source
    can be overlaid key by key.
    """

    model_config = ConfigDict(extra="allow")

    LOKALISE_API_KEY: Optional[str] = Field(
        default=None,
        description="Lokalise API token"
    )

    LOKALISE_API_HOSTNAME: str = Field(
        default=DEFAULT_API_HOSTNAME,
        description="Lokalise API base URL"
    )

    TRANSPORT_MODE: Literal["stdio", "http"] = Field(
        default="stdio",
        description="MCP transport"
    )

    PORT: int = Field(
        default=DEFAULT_PORT,
        ge=1,
        le=65535,
        description="HTTP transport port"
    )

    DEBUG: Union[bool, str] = Field(
        default=False,
        description="Debug flag or logger name pattern"
    )

    debug_mode: bool = Field(
        default=False,
        description="Boolean alias that overrides DEBUG"
    )

    NODE_ENV: Optional[Literal["development", "test", "production"]] = None

    MCP_SERVER_MODE: bool = Field(
        default=False,
        description="Force server mode even when CLI arguments are present"
    )

    @field_validator("LOKALISE_API_HOSTNAME")
    @classmethod
    def validate_hostname(cls, v: str) -> str:
        """Validate the API hostname URL."""
        return _validate_url(v)


class HttpQueryConfig(BaseModel):
    """Configuration supplied through HTTP query parameters."""

    model_config = ConfigDict(extra="allow")

    LOKALISE_API_KEY: Optional[str] = None
    LOKALISE_API_HOSTNAME: Optional[str] = None
    debug_mode: Optional[bool] = None

    @field_validator("LOKALISE_API_HOSTNAME")
    @classmethod
    def validate_hostname(cls, v: Optional[str]) -> Optional[str]:
        return _validate_url(v)


class SmitheryConfig(BaseModel):
    """Configuration supplied by Smithery as a base64 encoded JSON object."""

    model_config = ConfigDict(extra="forbid")

    LOKALISE_API_KEY: str = Field(min_length=1)
    LOKALISE_API_HOSTNAME: str = DEFAULT_API_HOSTNAME
    debug_mode: bool = False

    @field_validator("LOKALISE_API_HOSTNAME")
    @classmethod
    def validate_hostname(cls, v: str) -> str:
        return _validate_url(v)


class McpInitConfig(BaseModel):
    """Configuration sent by the MCP client during initialization."""

    model_config = ConfigDict(extra="allow")

    LOKALISE_API_KEY: Optional[str] = None
    LOKALISE_API_HOSTNAME: Optional[str] = None
    DEBUG: Optional[Union[bool, str]] = None
    debug_mode: Optional[bool] = None

    @field_validator("LOKALISE_API_HOSTNAME")
    @classmethod
    def validate_hostname(cls, v: Optional[str]) -> Optional[str]:
        return _validate_url(v)


class EnvironmentSnapshot(BaseSettings):
    """
    Raw string values of the recognized environment variables.

    Values stay as strings here; the loader applies its own coercion so that
    malformed values are skipped instead of failing validation.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    LOKALISE_API_KEY: Optional[str] = None
    LOKALISE_API_HOSTNAME: Optional[str] = None
    TRANSPORT_MODE: Optional[str] = None
    PORT: Optional[str] = None
    DEBUG: Optional[str] = None
    debug_mode: Optional[str] = None
    NODE_ENV: Optional[str] = None
    MCP_SERVER_MODE: Optional[str] = None

    def present(self) -> Dict[str, Any]:
        """Return only the variables that are actually set."""
        return self.model_dump(exclude_none=True)


CONFIG_KEYS = tuple(RuntimeConfig.model_fields.keys())
