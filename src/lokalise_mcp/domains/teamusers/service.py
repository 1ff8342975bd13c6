"""Lokalise team users API service."""

from typing import Any, Optional, Union

from lokalise_mcp.core.constants import MAX_TEAM_LIST_LIMIT
from lokalise_mcp.domains.base import LokaliseService


class TeamUsersService(LokaliseService):
    """Calls the team users endpoints of the Lokalise API."""

    async def list_users(self, team_id: str, limit: Optional[int] = None, page: Optional[int] = None) -> Any:
        params = {"limit": limit or MAX_TEAM_LIST_LIMIT, "page": page or 1}
        return await self._call(f"listing users of team {team_id}", lambda api: api.team_users(team_id, params))

    async def get_user(self, team_id: str, user_id: Union[int, str]) -> Any:
        return await self._call(f"getting team user {user_id}", lambda api: api.team_user(team_id, user_id))

    async def update_user(self, team_id: str, user_id: Union[int, str], role: str) -> Any:
        return await self._call(
            f"updating team user {user_id}",
            lambda api: api.update_team_user(team_id, user_id, {"role": role}),
        )

    async def delete_user(self, team_id: str, user_id: Union[int, str]) -> Any:
        return await self._call(f"deleting team user {user_id}", lambda api: api.delete_team_user(team_id, user_id))


team_users_service = TeamUsersService()
