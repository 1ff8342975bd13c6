"""MCP resources for queued processes."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import run_resource, split_resource_query
from lokalise_mcp.domains.queuedprocesses import controller
from lokalise_mcp.domains.queuedprocesses.types import ListQueuedProcessesArgs


def register_resources(server: FastMCP) -> None:
    """Register the queued processes resource."""

    @server.resource(
        "lokalise://queuedprocesses/{project_id}",
        name="lokalise-queued-processes",
        description="Background processes of a project",
        mime_type="text/markdown",
    )
    async def queued_processes(project_id: str) -> str:
        project_id, _ = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://queuedprocesses/{project_id}", controller.list_queued_processes,
            ListQueuedProcessesArgs, {"project_id": project_id},
        )
