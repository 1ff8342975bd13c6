"""
Building blocks shared by all Lokalise domains.

Every domain is a vertical slice: pydantic argument models, a service that
calls the Lokalise SDK, a controller that validates and formats, and optional
CLI, MCP tool and MCP resource bindings. This module provides the pieces the
slices have in common.
"""

import asyncio
import functools
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Type, TypeVar
from urllib.parse import parse_qsl, unquote
import logging

import typer
from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import BaseModel, ConfigDict, Field

from lokalise_mcp.core.api import get_lokalise_api
from lokalise_mcp.core.errors import (
    ErrorContext,
    McpError,
    create_unexpected_error,
    format_error_for_mcp_resource,
    format_error_for_mcp_tool,
    handle_controller_error,
)
from lokalise_mcp.core.session import apply_mcp_init_config

logger = logging.getLogger(__name__)

T = TypeVar("T")
ArgsT = TypeVar("ArgsT", bound=BaseModel)

Controller = Callable[[Any], Awaitable["ControllerResponse"]]


class ToolArgs(BaseModel):
    """Base for tool argument models; unknown arguments are rejected."""

    model_config = ConfigDict(extra="forbid")


class ControllerResponse(BaseModel):
    """Result of a controller operation."""

    content: str = Field(description="Markdown rendering of the result")


@dataclass
class DomainMeta:
    """Metadata about a domain."""
    name: str
    description: str
    version: str = "1.0.0"
    tools_count: int = 0
    resources_count: int = 0
    cli_commands_count: int = 0


@dataclass
class DomainModule:
    """A domain and its CLI, tool and resource bindings."""
    meta: DomainMeta
    register_cli: Callable[[typer.Typer], None]
    register_tools: Callable[[FastMCP], None]
    register_resources: Callable[[FastMCP], None]


class LokaliseService:
    """Base for domain services.

    The Lokalise SDK is synchronous; calls run in a worker thread so the
    event loop stays free. Failures are wrapped as unexpected errors that
    keep the SDK error as their cause.
    """

    async def _call(self, action: str, func: Callable[[Any], T]) -> T:
        api = get_lokalise_api()
        logger.debug(f"Calling Lokalise API: {action}")
        try:
            return await asyncio.to_thread(func, api)
        except McpError:
            raise
        except Exception as e:
            logger.error(f"Service error while {action}: {e}")
            raise create_unexpected_error(f"Unexpected service error while {action}", e) from e


def controller_operation(
    entity_type: str,
    operation: str,
    id_field: Optional[str] = None,
):
    """Wrap a controller coroutine with context-aware error handling.

    Args:
        entity_type: Human readable entity name, e.g. ``"Key"``
        operation: What the controller does, e.g. ``"listing keys"``
        id_field: Argument attribute holding the entity id
    """
    def decorator(func: Callable[[ArgsT], Awaitable[ControllerResponse]]):
        @functools.wraps(func)
        async def wrapper(args: ArgsT) -> ControllerResponse:
            try:
                return await func(args)
            except Exception as e:
                entity_id = getattr(args, id_field, None) if id_field else None
                context = ErrorContext(
                    source=f"{func.__module__}.{func.__name__}",
                    entity_type=entity_type,
                    entity_id=str(entity_id) if entity_id is not None else None,
                    operation=operation,
                )
                raise handle_controller_error(e, context) from e
        return wrapper
    return decorator


async def run_tool(
    server: FastMCP,
    tool_name: str,
    controller: Controller,
    args_model: Type[BaseModel],
    **arguments: Any,
) -> List[TextContent]:
    """
    Validate tool arguments, run the controller and build the tool result.

    Errors never escape: they are rendered as ``Error: <message>`` followed by
    a JSON block with ``errorType``, ``statusCode`` and ``errorDetails``.

    Args:
        server: Server the tool is registered on
        tool_name: Registered tool name, for logging
        controller: Controller coroutine taking the validated model
        args_model: Pydantic model for the arguments
        **arguments: Raw tool arguments; ``None`` means "use the default"

    Returns:
        Text content blocks
    """
    apply_mcp_init_config(server)
    logger.debug(f"Tool {tool_name} called")

    try:
        args = args_model.model_validate({k: v for k, v in arguments.items() if v is not None})
        result = await controller(args)
        return [TextContent(type="text", text=result.content)]
    except Exception as e:
        logger.error(f"Tool {tool_name} failed: {e}")
        payload = format_error_for_mcp_tool(e)
        return [
            TextContent(type="text", text=payload["content"][0]["text"]),
            TextContent(type="text", text=json.dumps(payload["metadata"], default=str)),
        ]


def split_resource_query(value: str) -> Tuple[str, Dict[str, str]]:
    """Split ``"123?limit=10"`` into ``("123", {"limit": "10"})``.

    Resource templates hand the query string over as part of the last path
    parameter.
    """
    base, sep, query = value.partition("?")
    params = dict(parse_qsl(query)) if sep else {}
    return unquote(base), params


def query_value(params: Dict[str, str], name: str) -> Optional[str]:
    """Look up a query parameter by snake_case or camelCase name."""
    if name in params:
        return params[name]
    head, *rest = name.split("_")
    return params.get(head + "".join(part.title() for part in rest))


def query_list(value: Optional[str]) -> Optional[List[str]]:
    """Comma separated query value to a list."""
    if not value:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


async def run_resource(
    server: FastMCP,
    uri: str,
    controller: Controller,
    args_model: Type[BaseModel],
    arguments: Dict[str, Any],
) -> str:
    """Run a controller for a resource read and return Markdown text.

    Failures are returned as ``Error: <message>`` text.
    """
    apply_mcp_init_config(server)
    logger.debug(f"Resource {uri} requested")

    try:
        args = args_model.model_validate({k: v for k, v in arguments.items() if v is not None})
        result = await controller(args)
        return result.content
    except Exception as e:
        logger.error(f"Resource {uri} failed: {e}")
        return format_error_for_mcp_resource(e, uri)["text"]
