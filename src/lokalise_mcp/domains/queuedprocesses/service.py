"""Lokalise queued processes API service."""

from typing import Any

from lokalise_mcp.domains.base import LokaliseService


class QueuedProcessesService(LokaliseService):
    """Calls the queued processes endpoints of the Lokalise API."""

    async def list_processes(self, project_id: str) -> Any:
        return await self._call(
            f"listing queued processes for project {project_id}",
            lambda api: api.queued_processes(project_id),
        )

    async def get_process(self, project_id: str, process_id: str) -> Any:
        return await self._call(
            f"getting queued process {process_id}",
            lambda api: api.queued_process(project_id, process_id),
        )


queued_processes_service = QueuedProcessesService()
