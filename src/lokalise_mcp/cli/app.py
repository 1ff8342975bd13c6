"""
Main CLI application entry point.

This module contains the Typer application. Commands are contributed by
the Lokalise domains; the application itself only adds ``--version`` and
the ``config`` command.
"""

from typing import List, Optional
import logging

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from lokalise_mcp import VERSION
from lokalise_mcp.config import config
from lokalise_mcp.domains.registry import DomainRegistry, create_default_registry

logger = logging.getLogger(__name__)

console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]Lokalise MCP[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


def create_app(registry: Optional[DomainRegistry] = None) -> typer.Typer:
    """Build the typer application with the commands of every domain."""
    app = typer.Typer(
        name="lokalise-mcp",
        help="Lokalise MCP - command-line access to the Lokalise API",
        add_completion=False,
        rich_markup_mode="rich",
        no_args_is_help=True,
    )

    @app.callback()
    def callback(
        version: Optional[bool] = typer.Option(
            None,
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ) -> None:
        """
        Lokalise MCP - command-line access to the Lokalise API.

        Every MCP tool is also available as a command. Run without arguments
        (or with MCP_SERVER_MODE=true) to start the MCP server instead.
        """
        config.load()

    @app.command("config")
    def config_command(
        show_sources: bool = typer.Option(False, "--sources", help="Show configuration sources"),
    ) -> None:
        """Show the active configuration with the API key masked."""
        if show_sources:
            _show_config_sources()
        else:
            _show_current_config()

    registry = registry or create_default_registry()
    registry.register_all_cli(app)
    return app


def _show_current_config() -> None:
    summary = config.get_config_summary()

    table = Table(title="Current Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in summary["values"].items():
        table.add_row(key, "Not set" if value is None else str(value))

    console.print(table)

    valid, errors = config.validate()
    if not valid:
        console.print(Panel("\n".join(errors), title="Configuration Problems", border_style="red"))


def _show_config_sources() -> None:
    """Show configuration sources and their status."""
    summary = config.get_config_summary()

    table = Table(title="Configuration Sources", show_header=True, header_style="bold magenta")
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Active", style="green")

    active: List[str] = summary["sources"]
    for source in ("default", "environment", "mcp_init", "http_query", "smithery"):
        table.add_row(source, "✓" if source in active else "✗")

    console.print(table)

    console.print(Panel(
        f"Environment File: {summary['env_file'] or 'None found'}\n"
        f"Global Config: {summary['global_config']}",
        title="Configuration Files",
        border_style="blue",
    ))

    if summary["errors"]:
        console.print(Panel("\n".join(summary["errors"]), title="Configuration Errors", border_style="red"))


def main(args: Optional[List[str]] = None) -> None:
    """Entry point for the CLI application."""
    app = create_app()
    app(args=args, prog_name="lokalise-mcp")


if __name__ == "__main__":
    main()
