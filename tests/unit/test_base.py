"""Tests for the shared domain building blocks."""

import json
from typing import Optional
from unittest.mock import AsyncMock

import pytest
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from lokalise_mcp.core.errors import ErrorType, McpError, create_api_error, create_unexpected_error
from lokalise_mcp.domains.base import (
    ControllerResponse,
    ToolArgs,
    controller_operation,
    query_list,
    query_value,
    run_resource,
    run_tool,
    split_resource_query,
)


class EchoArgs(ToolArgs):
    project_id: str = Field(min_length=1)
    limit: Optional[int] = Field(default=None, ge=1, le=100)


class SdkError(Exception):
    def __init__(self, message: str, code: int):
        super().__init__(message)
        self.code = code


@pytest.fixture
def server():
    return FastMCP("test")


class TestResourceQuery:
    """Test resource URI helpers."""

    def test_split_resource_query(self):
        assert split_resource_query("123.abc?limit=10&page=2") == ("123.abc", {"limit": "10", "page": "2"})
        assert split_resource_query("123.abc") == ("123.abc", {})

    def test_split_unquotes_base(self):
        assert split_resource_query("en%20US") == ("en US", {})

    def test_query_value_accepts_camel_case(self):
        """Test that both spellings of a parameter are recognized."""
        assert query_value({"include_translations": "1"}, "include_translations") == "1"
        assert query_value({"includeTranslations": "1"}, "include_translations") == "1"
        assert query_value({}, "include_translations") is None

    def test_query_list(self):
        assert query_list("ios, web,,") == ["ios", "web"]
        assert query_list("") is None
        assert query_list(None) is None


class TestControllerOperation:
    """Test the controller error boundary."""

    @pytest.mark.asyncio
    async def test_passes_result_through(self):
        @controller_operation("Key", "getting key", "project_id")
        async def get_thing(args):
            return ControllerResponse(content="ok")

        result = await get_thing(EchoArgs(project_id="p1"))

        assert result.content == "ok"

    @pytest.mark.asyncio
    async def test_attaches_context(self):
        """Test that failures carry the entity and operation."""
        @controller_operation("Key", "getting key", "project_id")
        async def get_thing(args):
            raise create_unexpected_error("Unexpected service error", SdkError("gone", 404))

        with pytest.raises(McpError) as exc_info:
            await get_thing(EchoArgs(project_id="p1"))

        error = exc_info.value
        assert error.type == ErrorType.NOT_FOUND
        assert error.context.entity_type == "Key"
        assert error.context.entity_id == "p1"
        assert error.context.operation == "getting key"
        assert error.context.source.endswith("get_thing")


class TestRunTool:
    """Test tool execution and error rendering."""

    @pytest.mark.asyncio
    async def test_success(self, server):
        """Test that controller Markdown becomes a single text block."""
        controller = AsyncMock(return_value=ControllerResponse(content="# Done"))

        result = await run_tool(server, "lokalise_echo", controller, EchoArgs, project_id="p1", limit=None)

        assert [block.text for block in result] == ["# Done"]
        args = controller.await_args.args[0]
        assert args.project_id == "p1"
        assert args.limit is None

    @pytest.mark.asyncio
    async def test_validation_error(self, server):
        """Test that invalid arguments never reach the controller."""
        controller = AsyncMock()

        result = await run_tool(server, "lokalise_echo", controller, EchoArgs, project_id="p1", limit=500)

        assert result[0].text.startswith("Error: Invalid arguments: limit:")
        metadata = json.loads(result[1].text)
        assert metadata["errorType"] == "VALIDATION_ERROR"
        assert metadata["statusCode"] == 400
        controller.assert_not_called()

    @pytest.mark.asyncio
    async def test_api_error(self, server):
        """Test that controller errors are reported with their metadata."""
        controller = AsyncMock(side_effect=create_api_error("Project not found", 404, {"code": 404}))

        result = await run_tool(server, "lokalise_echo", controller, EchoArgs, project_id="p1")

        assert result[0].text == "Error: Project not found"
        metadata = json.loads(result[1].text)
        assert metadata["statusCode"] == 404
        assert metadata["errorDetails"] == {"code": 404}


class TestRunResource:
    """Test resource execution."""

    @pytest.mark.asyncio
    async def test_success(self, server):
        controller = AsyncMock(return_value=ControllerResponse(content="# Projects"))

        text = await run_resource(server, "lokalise://projects", controller, EchoArgs, {"project_id": "p1"})

        assert text == "# Projects"

    @pytest.mark.asyncio
    async def test_error_text(self, server):
        """Test that failures become error text instead of exceptions."""
        controller = AsyncMock(side_effect=create_api_error("Forbidden", 403))

        text = await run_resource(server, "lokalise://keys/p1", controller, EchoArgs, {"project_id": "p1"})

        assert text == "Error: Forbidden"
