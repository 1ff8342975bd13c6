"""Glossary controller."""

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.glossary import formatter
from lokalise_mcp.domains.glossary.service import glossary_service
from lokalise_mcp.domains.glossary.types import (
    CreateGlossaryTermsArgs,
    DeleteGlossaryTermsArgs,
    GetGlossaryTermArgs,
    ListGlossaryTermsArgs,
    UpdateGlossaryTermsArgs,
)


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")


@controller_operation("Glossary", "listing glossary terms", "project_id")
async def list_glossary_terms(args: ListGlossaryTermsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    collection = await glossary_service.list_terms(args.project_id, args.limit, args.cursor)
    return ControllerResponse(content=formatter.format_glossary_terms_list(collection))


@controller_operation("Glossary Term", "getting glossary term", "term_id")
async def get_glossary_term(args: GetGlossaryTermArgs) -> ControllerResponse:
    _require_project(args.project_id)
    term = await glossary_service.get_term(args.project_id, args.term_id)
    return ControllerResponse(content=formatter.format_glossary_term_details(term))


@controller_operation("Glossary", "creating glossary terms", "project_id")
async def create_glossary_terms(args: CreateGlossaryTermsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    for term in args.terms:
        if not term.term.strip() or not term.description.strip():
            raise create_validation_error("Each term must have both 'term' and 'description' fields.")
    terms = [t.model_dump(by_alias=True, exclude_none=True) for t in args.terms]
    result = await glossary_service.create_terms(args.project_id, terms)
    return ControllerResponse(content=formatter.format_create_glossary_terms_result(result))


@controller_operation("Glossary", "updating glossary terms", "project_id")
async def update_glossary_terms(args: UpdateGlossaryTermsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    for term in args.terms:
        if term.id < 1:
            raise create_validation_error("Each term update must include a valid term ID.")
    terms = [t.model_dump(by_alias=True, exclude_none=True) for t in args.terms]
    result = await glossary_service.update_terms(args.project_id, terms)
    return ControllerResponse(content=formatter.format_update_glossary_terms_result(result))


@controller_operation("Glossary", "deleting glossary terms", "project_id")
async def delete_glossary_terms(args: DeleteGlossaryTermsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    result = await glossary_service.delete_terms(args.project_id, args.term_ids)
    return ControllerResponse(content=formatter.format_delete_glossary_terms_result(result))
