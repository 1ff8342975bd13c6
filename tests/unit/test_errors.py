"""Tests for the structured error system."""

import pytest
import typer
from pydantic import BaseModel, Field, ValidationError

from lokalise_mcp.core.errors import (
    ErrorContext,
    ErrorType,
    McpError,
    classify_api_error,
    create_api_error,
    create_invalid_project_id_error,
    create_rate_limit_error,
    create_unexpected_error,
    create_validation_error,
    ensure_mcp_error,
    format_error_for_mcp_resource,
    format_error_for_mcp_tool,
    get_deep_original_error,
    handle_cli_error,
    handle_controller_error,
)


class FakeApiError(Exception):
    """Stands in for an SDK error carrying an HTTP status."""

    def __init__(self, message: str, code: int):
        super().__init__(message)
        self.message = message
        self.code = code


class Limited(BaseModel):
    limit: int = Field(ge=1, le=10)


class TestMcpError:
    """Test the McpError class and factories."""

    def test_str_includes_status(self):
        """Test string rendering with and without a status code."""
        assert str(create_api_error("Boom", 500)) == "Boom (Status: 500)"
        assert str(create_unexpected_error("Boom")) == "Boom"

    def test_factories_set_type_and_status(self):
        """Test the status codes of the factories."""
        assert create_validation_error("bad").status_code == 400
        assert create_rate_limit_error().status_code == 429
        error = create_invalid_project_id_error("abc")
        assert error.type == ErrorType.INVALID_PROJECT_ID
        assert error.message == "Invalid project ID: abc"

    def test_rate_limit_keeps_retry_after(self):
        """Test that retry_after is kept as the original error."""
        error = create_rate_limit_error(retry_after=30)
        assert error.original_error == {"retryAfter": 30}

    def test_to_dict_with_context(self):
        """Test dictionary rendering with attached context."""
        error = create_validation_error("bad")
        error.context = ErrorContext(source="test", entity_type="Key", entity_id="1")

        data = error.to_dict()

        assert data["type"] == "VALIDATION_ERROR"
        assert data["context"]["entity_type"] == "Key"


class TestClassification:
    """Test classify_api_error."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            (401, ErrorType.AUTH_INVALID),
            (403, ErrorType.INSUFFICIENT_PERMISSIONS),
            (404, ErrorType.NOT_FOUND),
            (408, ErrorType.TIMEOUT_ERROR),
            (429, ErrorType.RATE_LIMIT_EXCEEDED),
            (500, ErrorType.API_ERROR),
            (503, ErrorType.API_ERROR),
        ],
    )
    def test_by_status(self, status, expected):
        """Test that the status code decides the type."""
        error = classify_api_error(FakeApiError("whatever", status))
        assert error.type == expected
        assert error.status_code == status

    @pytest.mark.parametrize(
        "message,expected",
        [
            ("Network is unreachable", ErrorType.NETWORK_ERROR),
            ("Connection reset", ErrorType.NETWORK_ERROR),
            ("Read timeout", ErrorType.TIMEOUT_ERROR),
            ("Too many requests", ErrorType.RATE_LIMIT_EXCEEDED),
            ("Key does not exist", ErrorType.NOT_FOUND),
            ("Invalid project ID format", ErrorType.INVALID_PROJECT_ID),
            ("Validation failed for keys", ErrorType.VALIDATION_ERROR),
            ("Access denied for user", ErrorType.INSUFFICIENT_PERMISSIONS),
            ("Something odd", ErrorType.API_ERROR),
        ],
    )
    def test_by_message(self, message, expected):
        """Test message substring classification without a status."""
        assert classify_api_error(Exception(message)).type == expected

    def test_server_error_message(self):
        """Test that 5xx errors keep the original message."""
        error = classify_api_error(FakeApiError("Bad gateway", 502))
        assert error.message == "Server error: Bad gateway"


class TestOriginalError:
    """Test unwrapping of nested errors."""

    def test_unwraps_chain(self):
        """Test following original_error to the root cause."""
        root = FakeApiError("root", 404)
        wrapped = create_unexpected_error("outer", create_api_error("middle", None, root))

        assert get_deep_original_error(wrapped) is root

    def test_stops_at_max_depth(self):
        """Test that unwrapping stops after ten levels."""
        errors = [create_unexpected_error("level 0")]
        for level in range(1, 15):
            errors.append(create_unexpected_error(f"level {level}", errors[-1]))

        assert get_deep_original_error(errors[-1]) is errors[4]

    def test_unwraps_dict_original(self):
        """Test dictionaries with an originalError entry."""
        assert get_deep_original_error({"originalError": {"detail": "x"}}) == {"detail": "x"}

    def test_falsy_input(self):
        """Test that falsy values are returned unchanged."""
        assert get_deep_original_error(None) is None


class TestEnsureMcpError:
    """Test ensure_mcp_error."""

    def test_keeps_mcp_error(self):
        error = create_validation_error("bad")
        assert ensure_mcp_error(error) is error

    def test_wraps_exception(self):
        original = RuntimeError("boom")
        error = ensure_mcp_error(original)
        assert error.type == ErrorType.UNEXPECTED_ERROR
        assert error.original_error is original

    def test_converts_pydantic_error(self):
        """Test that pydantic errors become readable validation errors."""
        with pytest.raises(ValidationError) as exc_info:
            Limited(limit=50)

        error = ensure_mcp_error(exc_info.value)

        assert error.type == ErrorType.VALIDATION_ERROR
        assert error.message.startswith("Invalid arguments: limit:")


class TestBoundaries:
    """Test the tool, resource, controller and CLI boundaries."""

    def test_format_for_tool(self):
        """Test the tool payload shape."""
        error = create_api_error("Request failed", 500, FakeApiError("upstream", 500))

        payload = format_error_for_mcp_tool(error)

        assert payload["content"] == [{"type": "text", "text": "Error: Request failed"}]
        assert payload["metadata"]["errorType"] == "API_ERROR"
        assert payload["metadata"]["statusCode"] == 500
        assert payload["metadata"]["errorDetails"] == {"message": "upstream"}

    def test_format_for_resource(self):
        """Test the resource payload shape."""
        payload = format_error_for_mcp_resource(create_validation_error("bad"), "lokalise://projects")
        assert payload["uri"] == "lokalise://projects"
        assert payload["text"] == "Error: bad"

    def test_controller_error_reclassifies_root_cause(self):
        """Test that wrapped SDK errors are classified from their status code."""
        wrapped = create_unexpected_error("Unexpected service error", FakeApiError("missing", 404))
        context = ErrorContext(source="keys.get_key", entity_type="Key", entity_id="42", operation="getting key")

        error = handle_controller_error(wrapped, context)

        assert error.type == ErrorType.NOT_FOUND
        assert error.context is context

    def test_controller_error_keeps_validation(self):
        """Test that already classified errors stay as they are."""
        error = handle_controller_error(create_validation_error("bad"), ErrorContext(source="x"))
        assert error.type == ErrorType.VALIDATION_ERROR

    def test_cli_error_exits(self, capsys):
        """Test that CLI errors print to stderr and exit with code 1."""
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(create_validation_error("Invalid --limit value"))

        assert exc_info.value.exit_code == 1
        captured = capsys.readouterr()
        assert "Error: Invalid --limit value" in captured.err
        assert captured.out == ""

    def test_cli_auth_tip(self, capsys):
        """Test the tip printed for a missing token."""
        with pytest.raises(typer.Exit):
            handle_cli_error(McpError("No token", ErrorType.AUTH_MISSING))

        assert "Tip: Make sure to set up your API token" in capsys.readouterr().err
