"""MCP tools for project contributors."""

from typing import Annotated, List, Optional, Union

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.contributors import controller
from lokalise_mcp.domains.contributors.types import (
    AddContributorsArgs,
    ContributorLanguage,
    ContributorRight,
    GetContributorArgs,
    GetCurrentUserArgs,
    ListContributorsArgs,
    NewContributor,
    RemoveContributorArgs,
    UpdateContributorArgs,
)

ProjectId = Annotated[str, Field(description="Lokalise project ID")]
ContributorId = Annotated[Union[int, str], Field(description="Contributor (user) ID")]


def register_tools(server: FastMCP) -> None:
    """Register the contributors tools."""

    @server.tool(
        name="lokalise_list_contributors",
        description=(
            "Lists who works on a project with roles and language access. Required: project_id. "
            "Optional: limit (1-100), page."
        ),
        structured_output=False,
    )
    async def list_contributors(
        project_id: ProjectId,
        limit: Annotated[Optional[int], Field(description="Number of contributors to return (1-100)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_contributors", controller.list_contributors, ListContributorsArgs,
            project_id=project_id, limit=limit, page=page,
        )

    @server.tool(
        name="lokalise_get_contributor",
        description="Gets one contributor's permissions and language access. Required: project_id, contributor_id.",
        structured_output=False,
    )
    async def get_contributor(project_id: ProjectId, contributor_id: ContributorId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_contributor", controller.get_contributor, GetContributorArgs,
            project_id=project_id, contributor_id=contributor_id,
        )

    @server.tool(
        name="lokalise_add_contributors",
        description=(
            "Invites contributors to a project. Required: project_id, contributors [{email, "
            "languages [{lang_iso, is_writable?}], fullname?, admin_rights?}]."
        ),
        structured_output=False,
    )
    async def add_contributors(
        project_id: ProjectId,
        contributors: Annotated[List[NewContributor], Field(description="Contributors to add")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_add_contributors", controller.add_contributors, AddContributorsArgs,
            project_id=project_id, contributors=contributors,
        )

    @server.tool(
        name="lokalise_get_current_user",
        description="Shows the API token owner's contributor profile in a project. Required: project_id.",
        structured_output=False,
    )
    async def get_current_user(project_id: ProjectId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_current_user", controller.get_current_user, GetCurrentUserArgs,
            project_id=project_id,
        )

    @server.tool(
        name="lokalise_update_contributor",
        description=(
            "Changes a contributor's permissions. Required: project_id, contributor_id. "
            "Optional: languages, admin_rights, is_admin, is_reviewer."
        ),
        structured_output=False,
    )
    async def update_contributor(
        project_id: ProjectId,
        contributor_id: ContributorId,
        is_admin: Annotated[Optional[bool], Field(description="Deprecated: use admin_rights")] = None,
        is_reviewer: Annotated[Optional[bool], Field(description="Deprecated: use admin_rights")] = None,
        languages: Annotated[Optional[List[ContributorLanguage]], Field(description="Language access")] = None,
        admin_rights: Annotated[Optional[List[ContributorRight]], Field(description="Admin rights")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_contributor", controller.update_contributor, UpdateContributorArgs,
            project_id=project_id, contributor_id=contributor_id, is_admin=is_admin,
            is_reviewer=is_reviewer, languages=languages, admin_rights=admin_rights,
        )

    @server.tool(
        name="lokalise_remove_contributor",
        description="Removes a contributor from a project. Required: project_id, contributor_id.",
        structured_output=False,
    )
    async def remove_contributor(project_id: ProjectId, contributor_id: ContributorId) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_remove_contributor", controller.remove_contributor, RemoveContributorArgs,
            project_id=project_id, contributor_id=contributor_id,
        )
