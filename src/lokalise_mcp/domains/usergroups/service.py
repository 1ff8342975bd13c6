"""Lokalise user groups API service."""

from typing import Any, Dict, List, Optional, Union
import logging

from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.core.errors import McpError
from lokalise_mcp.core.formatting import field
from lokalise_mcp.domains.base import LokaliseService

logger = logging.getLogger(__name__)

GroupId = Union[int, str]


def group_languages(languages: Optional[List[Dict[str, Any]]]) -> Optional[Dict[str, List[int]]]:
    """Split language permissions into the API's reference/contributable ID lists."""
    if languages is None:
        return None
    return {
        "reference": [lang["lang_id"] for lang in languages if not lang.get("is_writable")],
        "contributable": [lang["lang_id"] for lang in languages if lang.get("is_writable")],
    }


def _ids(values: List[Any]) -> List[int]:
    return [int(value) for value in values]


class UserGroupsService(LokaliseService):
    """Calls the team user group endpoints of the Lokalise API."""

    async def list_groups(self, team_id: str, limit: Optional[int] = None, page: Optional[int] = None) -> Any:
        params = {"limit": limit or MAX_TEAM_LIST_LIMIT, "page": page or 1}
        return await self._call(
            f"listing user groups of team {team_id}",
            lambda api: api.team_user_groups(team_id, params),
        )

    async def get_group(self, team_id: str, group_id: GroupId) -> Any:
        return await self._call(f"getting user group {group_id}", lambda api: api.team_user_group(team_id, group_id))

    async def create_group(
        self,
        team_id: str,
        data: Dict[str, Any],
        members: Optional[List[Any]] = None,
        projects: Optional[List[Any]] = None,
    ) -> Any:
        """
        Create a group, then attach initial members and projects.

        Failing to attach members or projects is logged and does not undo the
        group creation.
        """
        group = await self._call(
            f"creating user group in team {team_id}",
            lambda api: api.create_team_user_group(team_id, data),
        )
        group_id = field(group, "group_id")

        if members:
            try:
                group = await self.add_members(team_id, group_id, members)
            except McpError as e:
                logger.warning(f"Failed to add initial members to group {group_id}: {e}")
        if projects:
            try:
                group = await self.add_projects(team_id, group_id, projects)
            except McpError as e:
                logger.warning(f"Failed to add initial projects to group {group_id}: {e}")
        return group

    async def update_group(self, team_id: str, group_id: GroupId, data: Dict[str, Any]) -> Any:
        return await self._call(
            f"updating user group {group_id}",
            lambda api: api.update_team_user_group(team_id, group_id, data),
        )

    async def delete_group(self, team_id: str, group_id: GroupId) -> Any:
        return await self._call(
            f"deleting user group {group_id}",
            lambda api: api.delete_team_user_group(team_id, group_id),
        )

    async def add_members(self, team_id: str, group_id: GroupId, user_ids: List[Any]) -> Any:
        return await self._call(
            f"adding {len(user_ids)} members to user group {group_id}",
            lambda api: api.add_members_to_group(team_id, group_id, _ids(user_ids)),
        )

    async def remove_members(self, team_id: str, group_id: GroupId, user_ids: List[Any]) -> Any:
        return await self._call(
            f"removing {len(user_ids)} members from user group {group_id}",
            lambda api: api.remove_members_from_group(team_id, group_id, _ids(user_ids)),
        )

    async def add_projects(self, team_id: str, group_id: GroupId, project_ids: List[Any]) -> Any:
        return await self._call(
            f"adding {len(project_ids)} projects to user group {group_id}",
            lambda api: api.add_projects_to_group(team_id, group_id, [str(p) for p in project_ids]),
        )

    async def remove_projects(self, team_id: str, group_id: GroupId, project_ids: List[Any]) -> Any:
        return await self._call(
            f"removing {len(project_ids)} projects from user group {group_id}",
            lambda api: api.remove_projects_from_group(team_id, group_id, [str(p) for p in project_ids]),
        )


user_groups_service = UserGroupsService()
