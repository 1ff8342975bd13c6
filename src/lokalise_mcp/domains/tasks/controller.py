"""Tasks controller."""

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.tasks import formatter
from lokalise_mcp.domains.tasks.service import tasks_service
from lokalise_mcp.domains.tasks.types import (
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTaskArgs,
    ListTasksArgs,
    UpdateTaskArgs,
)

MAX_TASKS_LIMIT = 500


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")


@controller_operation("Tasks", "listing tasks", "project_id")
async def list_tasks(args: ListTasksArgs) -> ControllerResponse:
    _require_project(args.project_id)
    if args.limit is not None and not 1 <= args.limit <= MAX_TASKS_LIMIT:
        raise create_validation_error(f"Invalid limit parameter. Must be between 1 and {MAX_TASKS_LIMIT}.")
    if args.page is not None and args.page < 1:
        raise create_validation_error("Invalid page parameter. Must be 1 or greater.")

    collection = await tasks_service.list_tasks(
        args.project_id, args.limit, args.page, args.filter_title, args.filter_statuses,
    )
    return ControllerResponse(content=formatter.format_tasks_list(collection, args.project_id))


@controller_operation("Task", "getting task", "task_id")
async def get_task(args: GetTaskArgs) -> ControllerResponse:
    _require_project(args.project_id)
    task = await tasks_service.get_task(args.project_id, args.task_id)
    return ControllerResponse(content=formatter.format_task_details(task, args.project_id))


@controller_operation("Task", "creating task", "project_id")
async def create_task(args: CreateTaskArgs) -> ControllerResponse:
    _require_project(args.project_id)
    if not args.title.strip():
        raise create_validation_error("Task title is required.")
    data = args.model_dump(exclude={"project_id"}, exclude_none=True)
    task = await tasks_service.create_task(args.project_id, data)
    return ControllerResponse(content=formatter.format_create_task_result(task, args.project_id))


@controller_operation("Task", "updating task", "task_id")
async def update_task(args: UpdateTaskArgs) -> ControllerResponse:
    _require_project(args.project_id)
    data = args.task_data.model_dump(exclude_none=True)
    if not data:
        raise create_validation_error(
            "At least one field must be provided to update (title, description, due_date, languages, close_task, ...)."
        )
    task = await tasks_service.update_task(args.project_id, args.task_id, data)
    return ControllerResponse(content=formatter.format_update_task_result(task, args.project_id))


@controller_operation("Task", "deleting task", "task_id")
async def delete_task(args: DeleteTaskArgs) -> ControllerResponse:
    _require_project(args.project_id)
    result = await tasks_service.delete_task(args.project_id, args.task_id)
    return ControllerResponse(content=formatter.format_delete_task_result(result, args.project_id, args.task_id))
