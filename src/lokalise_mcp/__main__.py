"""
Entry point for Lokalise MCP.

With command-line arguments the CLI runs; without them (or with
``MCP_SERVER_MODE=true``) the MCP server starts on the configured transport:
    python -m lokalise_mcp list-projects
    TRANSPORT_MODE=http python -m lokalise_mcp
"""

from typing import List, Optional
import asyncio
import logging
import sys

from lokalise_mcp.config import config
from lokalise_mcp.core.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def is_cli_mode(args: List[str]) -> bool:
    return bool(args) and not config.is_mcp_server_mode()


def validate_server_configuration(mode: str) -> List[str]:
    """Required settings missing for the transport.

    HTTP clients supply the API key per request, so only stdio requires it
    up front.
    """
    if mode == "stdio" and not config.get("LOKALISE_API_KEY"):
        return ["LOKALISE_API_KEY"]
    return []


async def run_server(mode: str) -> None:
    """Create the MCP server and serve it on the given transport."""
    from lokalise_mcp.server import create_server, run_http, run_stdio

    server = create_server()
    if mode == "http":
        await run_http(server, config.get_port())
    else:
        await run_stdio(server)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the CLI or the MCP server."""
    args = sys.argv[1:] if argv is None else argv

    config.load()
    configure_logging(config)
    logger.debug(f"Process arguments: {args} (server mode: {config.is_mcp_server_mode()})")

    if is_cli_mode(args):
        from lokalise_mcp.cli.app import main as cli_main

        logger.info(f"CLI mode detected: {args}")
        cli_main(args)
        return

    mode = config.get_transport_mode()
    missing = validate_server_configuration(mode)
    if missing:
        logger.error(
            f"Required configuration missing: {', '.join(missing)}. "
            "Please set these environment variables or add them to your .env file."
        )
        sys.exit(1)

    logger.info(f"Starting server with {mode.upper()} transport")
    try:
        asyncio.run(run_server(mode))
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
