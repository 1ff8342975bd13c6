"""Lokalise glossary terms API service."""

from typing import Any, Dict, List, Optional

from lokalise_mcp.core.constants import DEFAULT_PAGE_SIZE
from lokalise_mcp.domains.base import LokaliseService


class GlossaryService(LokaliseService):
    """Calls the glossary terms endpoints of the Lokalise API."""

    async def list_terms(self, project_id: str, limit: Optional[int] = None, cursor: Optional[str] = None) -> Any:
        params: Dict[str, Any] = {"limit": limit or DEFAULT_PAGE_SIZE}
        if cursor:
            params["cursor"] = cursor
        return await self._call(
            f"listing glossary terms for project {project_id}",
            lambda api: api.glossary_terms(project_id, params),
        )

    async def get_term(self, project_id: str, term_id: int) -> Any:
        return await self._call(
            f"getting glossary term {term_id}",
            lambda api: api.glossary_term(project_id, term_id),
        )

    async def create_terms(self, project_id: str, terms: List[Dict[str, Any]]) -> Any:
        return await self._call(
            f"creating {len(terms)} glossary terms",
            lambda api: api.create_glossary_terms(project_id, terms),
        )

    async def update_terms(self, project_id: str, terms: List[Dict[str, Any]]) -> Any:
        return await self._call(
            f"updating {len(terms)} glossary terms",
            lambda api: api.update_glossary_terms(project_id, terms),
        )

    async def delete_terms(self, project_id: str, term_ids: List[int]) -> Any:
        return await self._call(
            f"deleting {len(term_ids)} glossary terms",
            lambda api: api.delete_glossary_terms(project_id, term_ids),
        )


glossary_service = GlossaryService()
