"""Lokalise languages API service."""

from typing import Any, Dict, List, Optional

from lokalise_mcp.core.constants import DEFAULT_PAGE_SIZE
from lokalise_mcp.core.formatting import field
from lokalise_mcp.domains.base import LokaliseService

PROJECT_LANGUAGES_LIMIT = 500


class LanguagesService(LokaliseService):
    """Calls the languages endpoints of the Lokalise API."""

    async def list_system_languages(self, limit: Optional[int] = None, page: Optional[int] = None) -> Any:
        params = {"limit": limit or DEFAULT_PAGE_SIZE, "page": page or 1}
        return await self._call("listing system languages", lambda api: api.system_languages(params))

    async def list_project_languages(self, project_id: str) -> Any:
        params = {"limit": PROJECT_LANGUAGES_LIMIT}
        return await self._call(
            f"listing languages of project {project_id}",
            lambda api: api.project_languages(project_id, params),
        )

    async def get_language_progress(self, project_id: str) -> Dict[int, Any]:
        """Per-language statistics of a project keyed by language ID."""
        project = await self._call(f"getting statistics of project {project_id}", lambda api: api.project(project_id))
        statistics = field(project, "statistics", {})
        return {field(stat, "language_id"): stat for stat in field(statistics, "languages", [])}

    async def add_languages(self, project_id: str, languages: List[Dict[str, Any]]) -> Any:
        return await self._call(
            f"adding {len(languages)} languages to project {project_id}",
            lambda api: api.create_languages(project_id, languages),
        )

    async def get_language(self, project_id: str, language_id: int) -> Any:
        return await self._call(
            f"getting language {language_id}",
            lambda api: api.language(project_id, language_id),
        )

    async def update_language(self, project_id: str, language_id: int, data: Dict[str, Any]) -> Any:
        return await self._call(
            f"updating language {language_id}",
            lambda api: api.update_language(project_id, language_id, data),
        )

    async def remove_language(self, project_id: str, language_id: int) -> Any:
        return await self._call(
            f"removing language {language_id}",
            lambda api: api.delete_language(project_id, language_id),
        )


languages_service = LanguagesService()
