"""Queued processes controller."""

from lokalise_mcp.core.errors import create_validation_error
from lokalise_mcp.domains.base import ControllerResponse, controller_operation
from lokalise_mcp.domains.queuedprocesses import formatter
from lokalise_mcp.domains.queuedprocesses.service import queued_processes_service
from lokalise_mcp.domains.queuedprocesses.types import GetQueuedProcessArgs, ListQueuedProcessesArgs


@controller_operation("Queued Processes", "listing queued processes", "project_id")
async def list_queued_processes(args: ListQueuedProcessesArgs) -> ControllerResponse:
    if not args.project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")
    collection = await queued_processes_service.list_processes(args.project_id)
    return ControllerResponse(content=formatter.format_queued_processes_list(collection, args.project_id))


@controller_operation("Queued Process", "getting queued process", "process_id")
async def get_queued_process(args: GetQueuedProcessArgs) -> ControllerResponse:
    if not args.project_id.strip():
        raise create_validation_error("Project ID is required and must be a string.")
    if not args.process_id.strip():
        raise create_validation_error("Process ID is required and must be a string.")
    process = await queued_processes_service.get_process(args.project_id, args.process_id)
    return ControllerResponse(content=formatter.format_queued_process_details(process))
