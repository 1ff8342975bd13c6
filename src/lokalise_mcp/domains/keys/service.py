"""Lokalise keys API service."""

from typing import Any, Dict, List, Optional
import logging

from lokalise_mcp.domains.base import LokaliseService

logger = logging.getLogger(__name__)


class KeysService(LokaliseService):
    """Calls the keys endpoints of the Lokalise API."""

    async def list_keys(
        self,
        project_id: str,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        include_translations: bool = False,
        filter_keys: Optional[List[str]] = None,
        filter_platforms: Optional[List[str]] = None,
        filter_filenames: Optional[List[str]] = None,
    ) -> Any:
        params: Dict[str, Any] = {
            "limit": limit or 100,
            "page": page or 1,
            "include_translations": 1 if include_translations else 0,
        }
        if filter_keys:
            params["filter_keys"] = ",".join(filter_keys)
        if filter_platforms:
            params["filter_platforms"] = ",".join(filter_platforms)
        if filter_filenames:
            params["filter_filenames"] = ",".join(filter_filenames)

        return await self._call(
            f"fetching keys for project {project_id}",
            lambda api: api.keys(project_id, params),
        )

    async def get_key(self, project_id: str, key_id: int) -> Any:
        return await self._call(
            f"fetching key {key_id}",
            lambda api: api.key(project_id, key_id, {"disable_references": 0}),
        )

    async def create_keys(self, project_id: str, keys: List[Dict[str, Any]]) -> Any:
        logger.debug(f"Creating {len(keys)} keys in project {project_id}")
        return await self._call(
            f"creating keys in project {project_id}",
            lambda api: api.create_keys(project_id, keys),
        )

    async def update_key(self, project_id: str, key_id: int, data: Dict[str, Any]) -> Any:
        return await self._call(
            f"updating key {key_id}",
            lambda api: api.update_key(project_id, key_id, data),
        )

    async def bulk_update_keys(self, project_id: str, keys: List[Dict[str, Any]]) -> Any:
        return await self._call(
            f"bulk updating {len(keys)} keys",
            lambda api: api.update_keys(project_id, keys),
        )

    async def delete_key(self, project_id: str, key_id: int) -> Any:
        return await self._call(
            f"deleting key {key_id}",
            lambda api: api.delete_key(project_id, key_id),
        )

    async def bulk_delete_keys(self, project_id: str, key_ids: List[int]) -> Any:
        return await self._call(
            f"bulk deleting {len(key_ids)} keys",
            lambda api: api.delete_keys(project_id, key_ids),
        )


keys_service = KeysService()
