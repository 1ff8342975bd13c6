"""
Helpers shared by the domain CLI commands.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional
import logging

import typer
from rich.console import Console

from lokalise_mcp.core.errors import create_validation_error, handle_cli_error

logger = logging.getLogger(__name__)

# Command output goes to stdout as plain Markdown
console = Console()


def run_command(
    command: str,
    action: Callable[[], Awaitable[Any]],
) -> None:
    """Run an async controller call and print its Markdown content.

    Any error is reported on stderr and exits with code 1.
    """
    logger.debug(f"Executing {command} command")
    try:
        result = asyncio.run(action())
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e)
        return

    console.print(result.content, markup=False, highlight=False, soft_wrap=True)


def fail(message: str) -> None:
    """Print ``Error: <message>`` to stderr and exit with code 1."""
    handle_cli_error(create_validation_error(message))


def require_confirmation(confirm: bool, message: str) -> None:
    """Abort a destructive command unless ``--confirm`` was given."""
    if not confirm:
        typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(1)


def parse_json_option(value: str, option: str) -> Any:
    """Parse a JSON option given inline or as a path to a JSON file.

    Raises:
        McpError: When the value is neither valid JSON nor a readable JSON file
    """
    try:
        return json.loads(value)
    except ValueError:
        pass

    path = Path(value).expanduser()
    if not path.is_file():
        raise create_validation_error(f"Invalid JSON for {option} and file does not exist: {value}")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise create_validation_error(f"Invalid JSON in file {path} for {option}: {e}") from e


def parse_json_list(value: str, option: str) -> List[Any]:
    data = parse_json_option(value, option)
    if not isinstance(data, list):
        raise create_validation_error(f"{option} must be a JSON array")
    return data


def parse_csv(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated option; ``None`` stays ``None``."""
    if value is None:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None


def parse_int_csv(value: Optional[str], option: str) -> Optional[List[int]]:
    items = parse_csv(value)
    if items is None:
        return None
    try:
        return [int(item) for item in items]
    except ValueError as e:
        raise create_validation_error(f"{option} must be a comma-separated list of numbers") from e


def check_range(value: Optional[int], option: str, minimum: int, maximum: Optional[int] = None) -> None:
    """Validate a numeric option before any API call is made."""
    if value is None:
        return
    if value < minimum or (maximum is not None and value > maximum):
        if maximum is None:
            raise create_validation_error(f"Invalid {option} value: Must be {minimum} or greater.")
        raise create_validation_error(
            f"Invalid {option} value: Must be a number between {minimum} and {maximum}."
        )


def check_choices(values: Optional[List[str]], option: str, choices: List[str]) -> None:
    for value in values or []:
        if value not in choices:
            raise create_validation_error(
                f"Invalid {option}: {value}. Valid values: {', '.join(choices)}"
            )
