"""MCP tools for the project glossary."""

from typing import Annotated, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from lokalise_mcp.domains.base import run_tool
from lokalise_mcp.domains.glossary import controller
from lokalise_mcp.domains.glossary.types import (
    CreateGlossaryTermsArgs,
    DeleteGlossaryTermsArgs,
    GetGlossaryTermArgs,
    GlossaryTermUpdate,
    ListGlossaryTermsArgs,
    NewGlossaryTerm,
    UpdateGlossaryTermsArgs,
)

ProjectId = Annotated[str, Field(description="Lokalise project ID")]


def register_tools(server: FastMCP) -> None:
    """Register the glossary tools."""

    @server.tool(
        name="lokalise_list_glossary_terms",
        description=(
            "Lists glossary terms (brand names, technical and forbidden terms) with their properties. "
            "Required: project_id. Optional: limit (1-5000), cursor."
        ),
        structured_output=False,
    )
    async def list_glossary_terms(
        project_id: ProjectId,
        limit: Annotated[Optional[int], Field(description="Number of terms to return (1-5000)")] = None,
        cursor: Annotated[Optional[str], Field(description="Cursor from a previous response")] = None,
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_list_glossary_terms", controller.list_glossary_terms, ListGlossaryTermsArgs,
            project_id=project_id, limit=limit, cursor=cursor,
        )

    @server.tool(
        name="lokalise_get_glossary_term",
        description="Gets a glossary term with its translations. Required: project_id, term_id.",
        structured_output=False,
    )
    async def get_glossary_term(
        project_id: ProjectId,
        term_id: Annotated[int, Field(description="Glossary term ID")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_get_glossary_term", controller.get_glossary_term, GetGlossaryTermArgs,
            project_id=project_id, term_id=term_id,
        )

    @server.tool(
        name="lokalise_create_glossary_terms",
        description=(
            "Creates glossary terms in bulk. Required: project_id, terms [{term, description, "
            "caseSensitive?, translatable?, forbidden?, translations [{langId, translation}]?, tags?}]."
        ),
        structured_output=False,
    )
    async def create_glossary_terms(
        project_id: ProjectId,
        terms: Annotated[List[NewGlossaryTerm], Field(description="Terms to create")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_create_glossary_terms", controller.create_glossary_terms, CreateGlossaryTermsArgs,
            project_id=project_id, terms=terms,
        )

    @server.tool(
        name="lokalise_update_glossary_terms",
        description="Updates glossary terms in bulk. Required: project_id, terms [{id, ...fields to change}].",
        structured_output=False,
    )
    async def update_glossary_terms(
        project_id: ProjectId,
        terms: Annotated[List[GlossaryTermUpdate], Field(description="Term updates")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_update_glossary_terms", controller.update_glossary_terms, UpdateGlossaryTermsArgs,
            project_id=project_id, terms=terms,
        )

    @server.tool(
        name="lokalise_delete_glossary_terms",
        description="Permanently deletes glossary terms. Required: project_id, term_ids.",
        structured_output=False,
    )
    async def delete_glossary_terms(
        project_id: ProjectId,
        term_ids: Annotated[List[int], Field(description="Glossary term IDs to delete")],
    ) -> List[TextContent]:
        return await run_tool(
            server, "lokalise_delete_glossary_terms", controller.delete_glossary_terms, DeleteGlossaryTermsArgs,
            project_id=project_id, term_ids=term_ids,
        )
