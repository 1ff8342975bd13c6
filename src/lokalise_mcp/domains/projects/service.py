"""Lokalise projects API service."""

from typing import Any, Dict, Optional
import logging

from lokalise_mcp.core.constants import DEFAULT_PAGE_SIZE
from lokalise_mcp.domains.base import LokaliseService

logger = logging.getLogger(__name__)


class ProjectsService(LokaliseService):
    """Calls the projects endpoints of the Lokalise API."""

    async def list_projects(self, limit: Optional[int] = None, page: Optional[int] = None) -> Any:
        params = {"limit": limit or DEFAULT_PAGE_SIZE, "page": page or 1}
        return await self._call("fetching projects", lambda api: api.projects(params))

    async def get_project(self, project_id: str) -> Any:
        return await self._call(f"fetching project {project_id}", lambda api: api.project(project_id))

    async def create_project(self, data: Dict[str, Any]) -> Any:
        logger.debug(f"Creating project {data.get('name')}")
        return await self._call("creating project", lambda api: api.create_project(data))

    async def update_project(self, project_id: str, data: Dict[str, Any]) -> Any:
        return await self._call(
            f"updating project {project_id}",
            lambda api: api.update_project(project_id, data),
        )

    async def delete_project(self, project_id: str) -> Any:
        return await self._call(f"deleting project {project_id}", lambda api: api.delete_project(project_id))

    async def empty_project(self, project_id: str) -> Any:
        return await self._call(f"emptying project {project_id}", lambda api: api.empty_project(project_id))


projects_service = ProjectsService()
