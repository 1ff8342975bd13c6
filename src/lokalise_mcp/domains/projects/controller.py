"""
Projects controller.

Authentication failures reported by the API are rewritten into a single
actionable message.
"""

import logging

from lokalise_mcp.core.errors import (
    McpError,
    create_auth_invalid_error,
    create_not_found_error,
    create_validation_error,
    get_deep_original_error,
    get_status_code,
)
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.projects import formatter
from lokalise_mcp.domains.projects.service import projects_service
from lokalise_mcp.domains.projects.types import (
    CreateProjectArgs,
    DeleteProjectArgs,
    EmptyProjectArgs,
    GetProjectArgs,
    ListProjectsArgs,
    UpdateProjectArgs,
)

logger = logging.getLogger(__name__)

MAX_PROJECTS_LIMIT = 500
MAX_PROJECT_NAME_LENGTH = 100


def _raise_api_failure(error: McpError, project_id: str = "") -> None:
    """Re-raise known API failures with a clearer message; otherwise return."""
    root = get_deep_original_error(error.original_error)
    if root is None:
        return
    status = get_status_code(root)
    text = str(root)

    if status == 401 or "Unauthorized" in text or "Invalid API token" in text:
        logger.error("Lokalise API authentication failed")
        raise create_auth_invalid_error(
            "Lokalise API authentication failed. Please check your API token.", error,
        ) from error
    if project_id and (status == 404 or "Not Found" in text):
        raise create_not_found_error(
            f"Project with ID '{project_id}' not found. Please check the project ID.", error,
        ) from error


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")


@controller_operation("Lokalise Project", "listing projects")
async def list_projects(args: ListProjectsArgs) -> ControllerResponse:
    if args.limit is not None and not 1 <= args.limit <= MAX_PROJECTS_LIMIT:
        raise create_validation_error("Invalid limit parameter. Must be between 1 and 500.")
    if args.page is not None and args.page < 1:
        raise create_validation_error("Invalid page parameter. Must be 1 or greater.")

    try:
        collection = await projects_service.list_projects(args.limit, args.page)
    except McpError as e:
        _raise_api_failure(e)
        raise
    return ControllerResponse(content=formatter.format_projects_list(collection, args.include_stats))


@controller_operation("Lokalise Project", "getting project details", "project_id")
async def get_project(args: GetProjectArgs) -> ControllerResponse:
    _require_project(args.project_id)
    try:
        project = await projects_service.get_project(args.project_id)
    except McpError as e:
        _raise_api_failure(e, args.project_id)
        raise
    return ControllerResponse(content=formatter.format_project_details(
        project, args.include_languages, args.include_keys_summary,
    ))


@controller_operation("Lokalise Project", "creating project")
async def create_project(args: CreateProjectArgs) -> ControllerResponse:
    if not args.name.strip():
        raise create_validation_error("Project name is required and must be a non-empty string.")
    if len(args.name) > MAX_PROJECT_NAME_LENGTH:
        raise create_validation_error("Project name must be 100 characters or less.")

    data = args.model_dump(exclude_none=True)
    try:
        project = await projects_service.create_project(data)
    except McpError as e:
        _raise_api_failure(e)
        raise
    return ControllerResponse(content=formatter.format_create_project_result(project))


@controller_operation("Lokalise Project", "updating project", "project_id")
async def update_project(args: UpdateProjectArgs) -> ControllerResponse:
    _require_project(args.project_id)
    data = args.project_data.model_dump(exclude_none=True)
    if not data:
        raise create_validation_error("At least one field must be provided to update (name or description).")

    try:
        project = await projects_service.update_project(args.project_id, data)
    except McpError as e:
        _raise_api_failure(e, args.project_id)
        raise
    return ControllerResponse(content=formatter.format_update_project_result(project))


@controller_operation("Lokalise Project", "deleting project", "project_id")
async def delete_project(args: DeleteProjectArgs) -> ControllerResponse:
    _require_project(args.project_id)
    try:
        await projects_service.delete_project(args.project_id)
    except McpError as e:
        _raise_api_failure(e, args.project_id)
        raise
    return ControllerResponse(content=formatter.format_delete_project_result(args.project_id))


@controller_operation("Lokalise Project", "emptying project", "project_id")
async def empty_project(args: EmptyProjectArgs) -> ControllerResponse:
    _require_project(args.project_id)
    try:
        await projects_service.empty_project(args.project_id)
    except McpError as e:
        _raise_api_failure(e, args.project_id)
        raise
    return ControllerResponse(content=formatter.format_empty_project_result(args.project_id))
