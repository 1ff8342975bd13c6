"""Lokalise contributors API service."""

from typing import Any, Dict, List, Optional, Union

from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.domains.base import LokaliseService


class ContributorsService(LokaliseService):
    """Calls the contributors endpoints of the Lokalise API."""

    async def list_contributors(self, project_id: str, limit: Optional[int] = None, page: Optional[int] = None) -> Any:
        params = {"limit": limit or MAX_TEAM_LIST_LIMIT, "page": page or 1}
        return await self._call(
            f"listing contributors for project {project_id}",
            lambda api: api.contributors(project_id, params),
        )

    async def get_contributor(self, project_id: str, contributor_id: Union[int, str]) -> Any:
        return await self._call(
            f"getting contributor {contributor_id}",
            lambda api: api.contributor(project_id, contributor_id),
        )

    async def add_contributors(self, project_id: str, contributors: List[Dict[str, Any]]) -> Any:
        return await self._call(
            f"adding {len(contributors)} contributors to project {project_id}",
            lambda api: api.create_contributors(project_id, contributors),
        )

    async def get_current_user(self, project_id: str) -> Any:
        return await self._call(
            f"getting current contributor in project {project_id}",
            lambda api: api.current_contributor(project_id),
        )

    async def update_contributor(self, project_id: str, contributor_id: Union[int, str], data: Dict[str, Any]) -> Any:
        return await self._call(
            f"updating contributor {contributor_id}",
            lambda api: api.update_contributor(project_id, contributor_id, data),
        )

    async def remove_contributor(self, project_id: str, contributor_id: Union[int, str]) -> Any:
        return await self._call(
            f"removing contributor {contributor_id}",
            lambda api: api.delete_contributor(project_id, contributor_id),
        )


contributors_service = ContributorsService()
