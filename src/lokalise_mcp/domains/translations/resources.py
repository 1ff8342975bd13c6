"""MCP resources for translations."""

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.base import query_value, run_resource, split_resource_query
from lokalise_mcp.domains.translations import controller
from lokalise_mcp.domains.translations.types import GetTranslationArgs, ListTranslationsArgs


def register_resources(server: FastMCP) -> None:
    """Register the translations resources."""

    @server.resource(
        "lokalise://translations/{project_id}",
        name="lokalise-project-translations",
        description=(
            "Translations of a project. Query: limit, cursor, filter_lang_id, "
            "filter_is_reviewed, filter_unverified, filter_qa_issues"
        ),
        mime_type="text/markdown",
    )
    async def project_translations(project_id: str) -> str:
        project_id, params = split_resource_query(project_id)
        return await run_resource(
            server, f"lokalise://translations/{project_id}", controller.list_translations,
            ListTranslationsArgs,
            {
                "project_id": project_id,
                "limit": query_value(params, "limit"),
                "cursor": query_value(params, "cursor"),
                "filter_lang_id": query_value(params, "filter_lang_id"),
                "filter_is_reviewed": query_value(params, "filter_is_reviewed"),
                "filter_unverified": query_value(params, "filter_unverified"),
                "filter_qa_issues": query_value(params, "filter_qa_issues"),
            },
        )

    @server.resource(
        "lokalise://translations/{project_id}/{translation_id}",
        name="lokalise-translation-details",
        description="Details of a single translation",
        mime_type="text/markdown",
    )
    async def translation_details(project_id: str, translation_id: str) -> str:
        translation_id, _ = split_resource_query(translation_id)
        return await run_resource(
            server, f"lokalise://translations/{project_id}/{translation_id}",
            controller.get_translation, GetTranslationArgs,
            {"project_id": project_id, "translation_id": translation_id},
        )
