"""
Structured error system for Lokalise MCP.

All failures are normalized into :class:`McpError`, which carries an
:class:`ErrorType`, an optional HTTP status code and the wrapped original
cause. The CLI and the MCP tool/resource handlers are the only places where
an error stops propagating.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import logging
import os

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

# Errors and tips go to stderr; stdout carries command output
error_console = Console(stderr=True)

MAX_ORIGINAL_ERROR_DEPTH = 10


class ErrorType(Enum):
    """Kinds of errors surfaced to users."""
    AUTH_MISSING = "AUTH_MISSING"
    AUTH_INVALID = "AUTH_INVALID"
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_PROJECT_ID = "INVALID_PROJECT_ID"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


@dataclass
class ErrorContext:
    """Where and on what an error happened."""
    source: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    operation: Optional[str] = None
    additional_info: Dict[str, Any] = field(default_factory=dict)


class McpError(Exception):
    """Base exception for all Lokalise MCP errors."""

    def __init__(
        self,
        message: str,
        type: ErrorType = ErrorType.UNEXPECTED_ERROR,
        status_code: Optional[int] = None,
        original_error: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.type = type
        self.status_code = status_code
        self.original_error = original_error
        self.context: Optional[ErrorContext] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        data = {
            "message": self.message,
            "type": self.type.value,
            "status_code": self.status_code,
        }
        if self.context is not None:
            data["context"] = asdict(self.context)
        return data

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (Status: {self.status_code})"
        return self.message


def create_auth_missing_error(
    message: str = "Authentication credentials are missing",
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.AUTH_MISSING, None, original_error)


def create_auth_invalid_error(
    message: str = "Authentication credentials are invalid",
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.AUTH_INVALID, 401, original_error)


def create_api_error(
    message: str,
    status_code: Optional[int] = None,
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.API_ERROR, status_code, original_error)


def create_network_error(
    message: str = "Network error occurred",
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.NETWORK_ERROR, None, original_error)


def create_rate_limit_error(
    message: str = "Rate limit exceeded",
    retry_after: Optional[int] = None,
    original_error: Any = None,
) -> McpError:
    if original_error is None and retry_after is not None:
        original_error = {"retryAfter": retry_after}
    return McpError(message, ErrorType.RATE_LIMIT_EXCEEDED, 429, original_error)


def create_not_found_error(
    message: str = "Resource not found",
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.NOT_FOUND, 404, original_error)


def create_invalid_project_id_error(
    project_id: str,
    original_error: Any = None,
) -> McpError:
    return McpError(
        f"Invalid project ID: {project_id}",
        ErrorType.INVALID_PROJECT_ID,
        400,
        original_error,
    )


def create_insufficient_permissions_error(
    message: str = "Insufficient permissions",
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.INSUFFICIENT_PERMISSIONS, 403, original_error)


def create_validation_error(
    message: str,
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.VALIDATION_ERROR, 400, original_error)


def create_timeout_error(
    message: str = "Request timed out",
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.TIMEOUT_ERROR, 408, original_error)


def create_unexpected_error(
    message: str = "An unexpected error occurred",
    original_error: Any = None,
) -> McpError:
    return McpError(message, ErrorType.UNEXPECTED_ERROR, None, original_error)


def validation_error_from_pydantic(error: ValidationError) -> McpError:
    """Turn a pydantic ValidationError into a readable validation McpError."""
    problems: List[str] = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "input"
        problems.append(f"{location}: {item.get('msg', 'invalid value')}")
    return create_validation_error(
        "Invalid arguments: " + "; ".join(problems),
        original_error=error,
    )


def ensure_mcp_error(error: Any) -> McpError:
    """Wrap anything raised into an McpError."""
    if isinstance(error, McpError):
        return error
    if isinstance(error, ValidationError):
        return validation_error_from_pydantic(error)
    if isinstance(error, BaseException):
        return create_unexpected_error(str(error), error)
    return create_unexpected_error(str(error))


def get_deep_original_error(error: Any) -> Any:
    """Follow the chain of wrapped errors down to the root cause.

    Args:
        error: Error (or arbitrary value) to unwrap

    Returns:
        The innermost original error, stopping after
        ``MAX_ORIGINAL_ERROR_DEPTH`` levels
    """
    if not error:
        return error

    current = error
    depth = 0
    while depth < MAX_ORIGINAL_ERROR_DEPTH:
        nested = getattr(current, "original_error", None)
        if nested is None and isinstance(current, dict):
            nested = current.get("originalError")
        if not nested:
            break
        current = nested
        depth += 1
    return current


def get_status_code(error: Any) -> Optional[int]:
    """Extract an HTTP status code from an SDK or HTTP client error."""
    if isinstance(error, McpError):
        return error.status_code

    for attr in ("code", "status_code", "status"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value

    response = getattr(error, "response", None)
    value = getattr(response, "status_code", None)
    if isinstance(value, int):
        return value
    return None


def classify_api_error(
    error: Any,
    status_code: Optional[int] = None,
    message: Optional[str] = None,
) -> McpError:
    """
    Classify an arbitrary error into a structured McpError.

    The HTTP status code wins when present; otherwise the message is matched
    against known substrings.

    Args:
        error: The original error
        status_code: Explicit status code, extracted from ``error`` if omitted
        message: Explicit message, ``str(error)`` if omitted

    Returns:
        Classified McpError instance
    """
    if status_code is None:
        status_code = get_status_code(error)
    if message is None:
        message = getattr(error, "message", None) or str(error)

    if status_code == 401:
        return create_auth_invalid_error("Authentication failed. Check your API token.", error)
    if status_code == 403:
        return create_insufficient_permissions_error("Access denied. Insufficient permissions.", error)
    if status_code == 404:
        return create_not_found_error("Resource not found.", error)
    if status_code == 408:
        return create_timeout_error("Request timed out.", error)
    if status_code == 429:
        return create_rate_limit_error("Rate limit exceeded. Please try again later.", original_error=error)
    if status_code in (500, 502, 503, 504):
        return create_api_error(f"Server error: {message}", status_code, error)

    lowered = message.lower()

    if "network" in lowered or "connection" in lowered:
        return create_network_error(message, error)
    if "timeout" in lowered:
        return create_timeout_error(message, error)
    if "rate limit" in lowered or "too many requests" in lowered:
        return create_rate_limit_error(message, original_error=error)
    if "not found" in lowered or "does not exist" in lowered:
        return create_not_found_error(message, error)
    if "invalid" in lowered and "project" in lowered:
        return McpError(message, ErrorType.INVALID_PROJECT_ID, 400, error)
    if "validation" in lowered or "invalid" in lowered:
        return create_validation_error(message, error)
    if "permission" in lowered or "access denied" in lowered:
        return create_insufficient_permissions_error(message, error)

    return create_api_error(message, status_code, error)


def handle_controller_error(error: Any, context: ErrorContext) -> McpError:
    """
    Attach controller context to an error and sharpen its classification.

    Errors wrapped as unexpected by a service are reclassified from the root
    cause when that cause carries an HTTP status code.

    Args:
        error: Error raised inside a controller
        context: Operation context

    Returns:
        The McpError for the caller to raise
    """
    mcp_error = ensure_mcp_error(error)

    if mcp_error.type == ErrorType.UNEXPECTED_ERROR:
        root = get_deep_original_error(mcp_error.original_error)
        if root is not None and get_status_code(root) is not None:
            mcp_error = classify_api_error(root)

    mcp_error.context = context
    logger.error(
        f"{context.source} failed: {mcp_error.type.value}: {mcp_error.message}"
        + (f" ({context.entity_type} {context.entity_id})" if context.entity_id else "")
    )
    return mcp_error


def format_error_for_mcp_tool(error: Any) -> Dict[str, Any]:
    """Render an error as an MCP tool payload.

    Returns:
        ``{"content": [{"type": "text", "text": ...}], "metadata": {...}}``
    """
    mcp_error = ensure_mcp_error(error)
    original = get_deep_original_error(mcp_error.original_error)

    if isinstance(original, BaseException):
        details: Any = {"message": str(original)}
    else:
        details = original

    return {
        "content": [{"type": "text", "text": f"Error: {mcp_error.message}"}],
        "metadata": {
            "errorType": mcp_error.type.value,
            "statusCode": mcp_error.status_code,
            "errorDetails": details,
        },
    }


def format_error_for_mcp_resource(error: Any, uri: str) -> Dict[str, Any]:
    """Render an error as an MCP resource content entry."""
    mcp_error = ensure_mcp_error(error)
    return {
        "uri": uri,
        "text": f"Error: {mcp_error.message}",
        "mimeType": "text/plain",
        "description": f"Error: {mcp_error.type.value}",
    }


def handle_cli_error(error: Any) -> None:
    """Print an error with a tip to stderr and exit with code 1.

    Raises:
        typer.Exit: Always, with exit code 1
    """
    mcp_error = ensure_mcp_error(error)
    logger.debug(f"{mcp_error.type.value} error: {mcp_error.message}")

    error_console.print(f"[red]Error:[/red] {escape(mcp_error.message)}", soft_wrap=True)

    if mcp_error.type == ErrorType.AUTH_MISSING:
        error_console.print(
            "\nTip: Make sure to set up your API token in the configuration file or environment variables.",
            soft_wrap=True,
        )
    elif mcp_error.type == ErrorType.AUTH_INVALID:
        error_console.print(
            "\nTip: Check that your API token is correct and has not expired.",
            soft_wrap=True,
        )
    elif mcp_error.type in (ErrorType.API_ERROR, ErrorType.RATE_LIMIT_EXCEEDED) and mcp_error.status_code == 429:
        error_console.print(
            "\nTip: You may have exceeded your API rate limits. Try again later or upgrade your API plan.",
            soft_wrap=True,
        )

    if os.environ.get("DEBUG", "").lower() not in ("true", "1"):
        error_console.print(
            "\nFor more detailed error information, run with DEBUG=true environment variable.",
            soft_wrap=True,
        )

    raise typer.Exit(1)
