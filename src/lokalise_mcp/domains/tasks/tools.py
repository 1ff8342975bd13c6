"""MCP tools for project tasks."""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.tasks import controller
from lokalise_mcp.domains.tasks.types import (
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTaskArgs,
    ListTasksArgs,
    TaskData,
    TaskLanguage,
    TaskStatus,
    TaskType,
    UpdateTaskArgs,
)

ProjectId = Annotated[str, Field(description="Lokalise project ID")]
TaskId = Annotated[int, Field(description="Task ID")]


def register_tools(server: FastMCP) -> None:
    """Register the tasks tools."""

    @server.tool(
        name="lokalise_list_tasks",
        description=(
            "Lists translation and review tasks of a project with status, progress and deadlines. "
            "Required: project_id. Optional: limit (1-500), page, filter_title, filter_statuses."
        ),
        structured_output=False,
    )
    async def list_tasks(
        project_id: ProjectId,
        limit: Annotated[Optional[int], Field(description="Number of tasks to return (1-500)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
        filter_title: Annotated[Optional[str], Field(description="Filter by title")] = None,
        filter_statuses: Annotated[Optional[List[TaskStatus]], Field(description="Statuses to include")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_tasks", controller.list_tasks, ListTasksArgs,
            project_id=project_id, limit=limit, page=page,
            filter_title=filter_title, filter_statuses=filter_statuses,
        )

    @server.tool(
        name="lokalise_get_task",
        description="Gets a task with its language assignments, progress and schedule. Required: project_id, task_id.",
        structured_output=False,
    )
    async def get_task(project_id: ProjectId, task_id: TaskId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_task", controller.get_task, GetTaskArgs,
            project_id=project_id, task_id=task_id,
        )

    @server.tool(
        name="lokalise_create_task",
        description=(
            "Creates a translation or review task. Required: project_id, title. Languages need users or "
            "groups; pass assignees to assign the same users to every language. Optional: description, "
            "due_date, keys, languages, assignees, task_type, source_language_iso, auto_close_*, "
            "parent_task_id, closing_tags, do_lock_translations, custom_translation_status_ids."
        ),
        structured_output=False,
    )
    async def create_task(
        project_id: ProjectId,
        title: Annotated[str, Field(description="Task title")],
        description: Annotated[Optional[str], Field(description="Task description")] = None,
        due_date: Annotated[Optional[str], Field(description="Due date (ISO 8601)")] = None,
        keys: Annotated[Optional[List[int]], Field(description="Key IDs included in the task")] = None,
        languages: Annotated[Optional[List[TaskLanguage]], Field(description="Languages with users/groups")] = None,
        assignees: Annotated[Optional[List[int]], Field(description="User IDs for every language")] = None,
        task_type: Annotated[Optional[TaskType], Field(description="translation or review")] = None,
        source_language_iso: Annotated[Optional[str], Field(description="Source language ISO code")] = None,
        auto_close_languages: Annotated[Optional[bool], Field(description="Close languages when done")] = None,
        auto_close_task: Annotated[Optional[bool], Field(description="Close the task when done")] = None,
        auto_close_items: Annotated[Optional[bool], Field(description="Close items when done")] = None,
        parent_task_id: Annotated[Optional[int], Field(description="Parent task for review tasks")] = None,
        closing_tags: Annotated[Optional[List[str]], Field(description="Tags added on close")] = None,
        do_lock_translations: Annotated[Optional[bool], Field(description="Lock translations")] = None,
        custom_translation_status_ids: Annotated[
            Optional[List[int]], Field(description="Custom status IDs applied on completion")
        ] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_create_task", controller.create_task, CreateTaskArgs,
            project_id=project_id, title=title, description=description, due_date=due_date, keys=keys,
            languages=languages, assignees=assignees, task_type=task_type,
            source_language_iso=source_language_iso, auto_close_languages=auto_close_languages,
            auto_close_task=auto_close_task, auto_close_items=auto_close_items,
            parent_task_id=parent_task_id, closing_tags=closing_tags,
            do_lock_translations=do_lock_translations,
            custom_translation_status_ids=custom_translation_status_ids,
        )

    @server.tool(
        name="lokalise_update_task",
        description=(
            "Updates a task: title, description, due date, language assignments or closing it. "
            "Required: project_id, task_id, task_data."
        ),
        structured_output=False,
    )
    async def update_task(
        project_id: ProjectId,
        task_id: TaskId,
        task_data: Annotated[TaskData, Field(description="Fields to change")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_task", controller.update_task, UpdateTaskArgs,
            project_id=project_id, task_id=task_id, task_data=task_data,
        )

    @server.tool(
        name="lokalise_delete_task",
        description="Permanently deletes a task. Required: project_id, task_id.",
        structured_output=False,
    )
    async def delete_task(project_id: ProjectId, task_id: TaskId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_delete_task", controller.delete_task, DeleteTaskArgs,
            project_id=project_id, task_id=task_id,
        )
