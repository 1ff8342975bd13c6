"""Lokalise comments API service."""

from typing import Any, Dict, List, Optional

from lokalise_mcp.core.constants import DEFAULT_PAGE_SIZE
from lokalise_mcp.domains.base import LokaliseService


def _page_params(limit: Optional[int], page: Optional[int]) -> Dict[str, int]:
    return {"limit": limit or DEFAULT_PAGE_SIZE, "page": page or 1}


class CommentsService(LokaliseService):
    """Calls the comments endpoints of the Lokalise API."""

    async def list_key_comments(
        self, project_id: str, key_id: int, limit: Optional[int] = None, page: Optional[int] = None,
    ) -> Any:
        params = _page_params(limit, page)
        return await self._call(
            f"listing comments for key {key_id}",
            lambda api: api.key_comments(project_id, key_id, params),
        )

    async def list_project_comments(
        self, project_id: str, limit: Optional[int] = None, page: Optional[int] = None,
    ) -> Any:
        params = _page_params(limit, page)
        return await self._call(
            f"listing comments for project {project_id}",
            lambda api: api.project_comments(project_id, params),
        )

    async def get_comment(self, project_id: str, key_id: int, comment_id: int) -> Any:
        return await self._call(
            f"getting comment {comment_id}",
            lambda api: api.key_comment(project_id, key_id, comment_id),
        )

    async def create_comments(self, project_id: str, key_id: int, comments: List[Dict[str, str]]) -> Any:
        return await self._call(
            f"creating {len(comments)} comments on key {key_id}",
            lambda api: api.create_key_comments(project_id, key_id, comments),
        )

    async def delete_comment(self, project_id: str, key_id: int, comment_id: int) -> Any:
        return await self._call(
            f"deleting comment {comment_id}",
            lambda api: api.delete_key_comment(project_id, key_id, comment_id),
        )


comments_service = CommentsService()
