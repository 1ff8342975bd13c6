"""MCP resources for project tasks."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_list, query_value, run_resource, split_resource_query
from lokalise_mcp.domains.tasks import controller
from lokalise_mcp.domains.tasks.types import GetTaskArgs, ListTasksArgs


def register_resources(server: FastMCP) -> None:
    """Register the tasks resources."""

    @server.resource(
        "lokalise://tasks/{project_id}",
        name="lokalise-project-tasks",
        description="Tasks of a project. Query: limit, page, filter_title, filter_statuses",
        mime_type="text/markdown",
    )
    async def project_tasks(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://tasks/{project_id}", controller.list_tasks, ListTasksArgs,
            {
                "project_id": project_id,
                "limit": query_value(params, "limit"),
                "page": query_value(params, "page"),
                "filter_title": query_value(params, "filter_title"),
                "filter_statuses": query_list(query_value(params, "filter_statuses")),
            },
        )

    @server.resource(
        "lokalise://tasks/{project_id}/{task_id}",
        name="lokalise-task-details",
        description="Details of a single task",
        mime_type="text/markdown",
    )
    async def task_details(project_id: str, task_id: str) -> str:
        task_id, _ = split_resource_query(task_id)
        return await run_resource(
            server, f"lokalise://tasks/{project_id}/{task_id}", controller.get_task, GetTaskArgs,
            {"project_id": project_id, "task_id": task_id},
        )
