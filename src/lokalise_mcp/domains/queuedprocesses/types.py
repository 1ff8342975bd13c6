"""Argument models for the queued processes domain."""

from pydantic import Field

from lokalise_mcp.domains.base import ToolArgs


class ListQueuedProcessesArgs(ToolArgs):
    project_id: str = Field(
        min_length=1,
        description="Project ID to list queued processes for (supports branch notation: projectId:branchName)",
    )


class GetQueuedProcessArgs(ToolArgs):
    project_id: str = Field(min_length=1, description="Project ID containing the process")
    process_id: str = Field(min_length=1, description="Process ID (unique string identifier)")
