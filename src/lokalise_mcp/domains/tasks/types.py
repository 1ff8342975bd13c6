"""Argument models for the tasks domain."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from lokalise_mcp.domains.base import ToolArgs

TaskStatus = Literal["new", "in_progress", "completed", "closed"]
TaskType = Literal["translation", "review"]

TASK_STATUSES = ["new", "in_progress", "completed", "closed"]


class TaskLanguage(BaseModel):
    language_iso: str = Field(description="Language ISO code")
    users: Optional[List[int]] = Field(default=None, description="User IDs assigned to this language")
    groups: Optional[List[int]] = Field(default=None, description="Group IDs assigned to this language")


class TaskLanguageUpdate(TaskLanguage):
    close_language: Optional[bool] = Field(default=None, description="Close the task for this language")


class ListTasksArgs(ToolArgs):
    project_id: str = Field(description="Project ID to list tasks for")
    limit: Optional[int] = Field(default=None, description="Number of tasks to return (1-500, default: 100)")
    page: Optional[int] = Field(default=None, description="Page number for pagination (default: 1)")
    filter_title: Optional[str] = Field(default=None, description="Filter tasks by title")
    filter_statuses: Optional[List[TaskStatus]] = Field(default=None, description="Filter tasks by status")


class GetTaskArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the task")
    task_id: int = Field(description="Task ID to get details for")


class CreateTaskArgs(ToolArgs):
    project_id: str = Field(description="Project ID to create the task in")
    title: str = Field(min_length=1, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    due_date: Optional[str] = Field(default=None, description="Due date (ISO 8601 or Y-m-d H:i:s)")
    keys: Optional[List[int]] = Field(default=None, description="Key IDs included in the task")
    languages: Optional[List[TaskLanguage]] = Field(default=None, description="Languages and their assignees")
    assignees: Optional[List[int]] = Field(
        default=None, description="User IDs assigned to every language that has no users or groups",
    )
    source_language_iso: Optional[str] = Field(default=None, description="Source language ISO code")
    auto_close_languages: Optional[bool] = Field(default=None, description="Close languages when done")
    auto_close_task: Optional[bool] = Field(default=None, description="Close the task when all languages are done")
    auto_close_items: Optional[bool] = Field(default=None, description="Close items when done")
    task_type: TaskType = Field(default="translation", description="Task type")
    parent_task_id: Optional[int] = Field(default=None, description="Parent task ID for review tasks")
    closing_tags: Optional[List[str]] = Field(default=None, description="Tags added to keys when the task closes")
    do_lock_translations: Optional[bool] = Field(default=None, description="Lock translations while in the task")
    custom_translation_status_ids: Optional[List[int]] = Field(
        default=None, description="Custom translation status IDs applied on completion",
    )


class TaskData(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, description="New task title")
    description: Optional[str] = Field(default=None, description="New task description")
    due_date: Optional[str] = Field(default=None, description="New due date")
    languages: Optional[List[TaskLanguageUpdate]] = Field(default=None, description="Language assignments")
    auto_close_languages: Optional[bool] = None
    auto_close_task: Optional[bool] = None
    auto_close_items: Optional[bool] = None
    closing_tags: Optional[List[str]] = None
    do_lock_translations: Optional[bool] = None
    close_task: Optional[bool] = Field(default=None, description="Close the whole task")


class UpdateTaskArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the task")
    task_id: int = Field(description="Task ID to update")
    task_data: TaskData = Field(description="Fields to change")


class DeleteTaskArgs(ToolArgs):
    project_id: str = Field(description="Project ID containing the task")
    task_id: int = Field(description="Task ID to delete")
