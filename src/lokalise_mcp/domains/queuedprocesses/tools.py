"""MCP tools for queued processes."""

from typing import Annotated, List

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.queuedprocesses import controller
from lokalise_mcp.domains.queuedprocesses.types import GetQueuedProcessArgs, ListQueuedProcessesArgs

ProjectId = Annotated[str, Field(description="Lokalise project ID (supports projectId:branchName)")]


def register_tools(server: FastMCP) -> None:
    """Register the queued processes tools."""

    @server.tool(
        name="lokalise_list_queued_processes",
        description=(
            "Lists background processes (file uploads, downloads, exports) of a project with their status. "
            "Required: project_id."
        ),
        structured_output=False,
    )
    async def list_queued_processes(
        project_id: ProjectId,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_queued_processes", controller.list_queued_processes, ListQueuedProcessesArgs,
            project_id=project_id,
        )

    @server.tool(
        name="lokalise_get_queued_process",
        description="Gets the status and results of a background process. Required: project_id, process_id.",
        structured_output=False,
    )
    async def get_queued_process(
        project_id: ProjectId,
        process_id: Annotated[str, Field(description="Process ID")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_queued_process", controller.get_queued_process, GetQueuedProcessArgs,
            project_id=project_id, process_id=process_id,
        )
