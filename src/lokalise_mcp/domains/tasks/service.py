"""Lokalise tasks API service."""

from typing import Any, Dict, List, Optional
import logging

from lokalise_mcp.core.constants import DEFAULT_PAGE_SIZE
from lokalise_mcp.core.errors import create_api_error
from lokalise_mcp.domains.base import LokaliseService

logger = logging.getLogger(__name__)


def assign_languages(languages: List[Dict[str, Any]], assignees: Optional[List[int]]) -> List[Dict[str, Any]]:
    """Fill in ``users`` for languages that name neither users nor groups.

    Raises:
        McpError: When a language has no assignees and no fallback is given
    """
    assigned = []
    for language in languages:
        if language.get("users") or language.get("groups"):
            assigned.append(language)
        elif assignees:
            assigned.append({**language, "users": list(assignees)})
        else:
            raise create_api_error(
                "Tasks with languages require either 'users' or 'groups' to be specified for each language, "
                "or use the 'assignees' parameter to assign users to all languages",
                400,
            )
    return assigned


class TasksService(LokaliseService):
    """Calls the tasks endpoints of the Lokalise API."""

    async def list_tasks(
        self,
        project_id: str,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        filter_title: Optional[str] = None,
        filter_statuses: Optional[List[str]] = None,
    ) -> Any:
        params: Dict[str, Any] = {"limit": limit or DEFAULT_PAGE_SIZE, "page": page or 1}
        if filter_title:
            params["filter_title"] = filter_title
        if filter_statuses:
            params["filter_statuses"] = ",".join(filter_statuses)
        return await self._call(
            f"listing tasks for project {project_id}",
            lambda api: api.tasks(project_id, params),
        )

    async def get_task(self, project_id: str, task_id: int) -> Any:
        return await self._call(f"getting task {task_id}", lambda api: api.task(project_id, task_id))

    async def create_task(self, project_id: str, data: Dict[str, Any]) -> Any:
        assignees = data.pop("assignees", None)
        if data.get("languages"):
            data["languages"] = assign_languages(data["languages"], assignees)
        logger.debug(f"Creating task '{data.get('title')}' with {len(data.get('languages') or [])} languages")
        return await self._call(
            f"creating task in project {project_id}",
            lambda api: api.create_task(project_id, data),
        )

    async def update_task(self, project_id: str, task_id: int, data: Dict[str, Any]) -> Any:
        return await self._call(
            f"updating task {task_id}",
            lambda api: api.update_task(project_id, task_id, data),
        )

    async def delete_task(self, project_id: str, task_id: int) -> Any:
        return await self._call(f"deleting task {task_id}", lambda api: api.delete_task(project_id, task_id))


tasks_service = TasksService()
