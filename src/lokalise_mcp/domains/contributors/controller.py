"""Contributors controller."""

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.contributors import formatter
from lokalise_mcp.domains.contributors.service import contributors_service
from lokalise_mcp.domains.contributors.types import (
    AddContributorsArgs,
    GetContributorArgs,
    GetCurrentUserArgs,
    ListContributorsArgs,
    RemoveContributorArgs,
    UpdateContributorArgs,
)

UPDATE_FIELDS = ("is_admin", "is_reviewer", "languages", "admin_rights")


def _require_project(project_id: str) -> None:
    if not project_id or not project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")


@controller_operation("Contributors", "listing contributors", "project_id")
async def list_contributors(args: ListContributorsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    collection = await contributors_service.list_contributors(args.project_id, args.limit, args.page)
    return ControllerResponse(content=formatter.format_contributors_list(collection))


@controller_operation("Contributor", "getting contributor", "contributor_id")
async def get_contributor(args: GetContributorArgs) -> ControllerResponse:
    _require_project(args.project_id)
    contributor = await contributors_service.get_contributor(args.project_id, args.contributor_id)
    return ControllerResponse(content=formatter.format_contributor_details(contributor))


@controller_operation("Contributors", "adding contributors", "project_id")
async def add_contributors(args: AddContributorsArgs) -> ControllerResponse:
    _require_project(args.project_id)
    payload = [c.model_dump(mode="json", exclude_none=True) for c in args.contributors]
    created = await contributors_service.add_contributors(args.project_id, payload)
    return ControllerResponse(content=formatter.format_add_contributors_result(created))


@controller_operation("Contributor", "getting current user", "project_id")
async def get_current_user(args: GetCurrentUserArgs) -> ControllerResponse:
    _require_project(args.project_id)
    contributor = await contributors_service.get_current_user(args.project_id)
    return ControllerResponse(content=formatter.format_contributor_details(contributor, "Current User"))


@controller_operation("Contributor", "updating contributor", "contributor_id")
async def update_contributor(args: UpdateContributorArgs) -> ControllerResponse:
    _require_project(args.project_id)
    data = args.model_dump(include=set(UPDATE_FIELDS), exclude_none=True)
    if not data:
        raise create_validation_error(
            "At least one field must be provided to update (is_admin, is_reviewer, languages, admin_rights)."
        )
    contributor = await contributors_service.update_contributor(args.project_id, args.contributor_id, data)
    return ControllerResponse(content=formatter.format_update_contributor_result(contributor))


@controller_operation("Contributor", "removing contributor", "contributor_id")
async def remove_contributor(args: RemoveContributorArgs) -> ControllerResponse:
    _require_project(args.project_id)
    result = await contributors_service.remove_contributor(args.project_id, args.contributor_id)
    return ControllerResponse(
        content=formatter.format_remove_contributor_result(result, args.project_id, args.contributor_id)
    )
