"""Markdown rendering for queued processes (uploads, downloads, exports)."""

from typing import Any, Dict, List

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_footer,
    format_heading,
    format_url,
    items_of,
)

STATUS_ICONS = {
    "queued": "⏳",
    "processing": "⚙️",
    "finished": "✅",
    "failed": "❌",
    "cancelled": "🚫",
}

PROCESS_TYPES = {
    "file-upload": "File Upload",
    "file-download": "File Download/Export",
    "project-export": "Project Export",
    "project-import": "Project Import",
}

STATUS_INFORMATION = {
    "queued": "⏳ **Queued**: Process is waiting for other processes ahead in the queue.",
    "processing": "⚙️ **Processing**: Process is currently being executed. Please wait for completion.",
    "finished": "✅ **Finished**: Process completed successfully. Check the details above for results.",
    "failed": "❌ **Failed**: Process failed to complete. Check the message for error details and retry if needed.",
    "cancelled": "🚫 **Cancelled**: Process was cancelled before completion. You can start a new process if needed.",
}


def status_icon(status: str) -> str:
    return STATUS_ICONS.get(status, "❓")


def process_type_label(process_type: str) -> str:
    return PROCESS_TYPES.get(process_type, process_type or "Unknown")


def is_upload_details(details: Any) -> bool:
    return isinstance(field(details, "files"), list)


def is_download_details(details: Any) -> bool:
    return all(field(details, name) is not None for name in ("download_url", "file_size_kb", "total_number_of_keys"))


def _upload_totals(files: List[Any]) -> Dict[str, int]:
    return {
        "Total Words": sum(field(f, "word_count_total", 0) for f in files),
        "Total Keys": sum(field(f, "key_count_total", 0) for f in files),
        "New Keys": sum(field(f, "key_count_inserted", 0) for f in files),
        "Updated Keys": sum(field(f, "key_count_updated", 0) for f in files),
    }


def _details_summary(details: Any) -> List[str]:
    if is_upload_details(details):
        files = field(details, "files", [])
        if not files:
            return []
        lines = ["- **Upload Summary**:", f"  - Files Processed: {len(files)}"]
        lines.extend(f"  - {label}: {value}" for label, value in _upload_totals(files).items())
        return lines
    if is_download_details(details):
        return [
            "- **Download Summary**:",
            f"  - File Size: {field(details, 'file_size_kb')} KB",
            f"  - Total Keys: {field(details, 'total_number_of_keys')}",
            f"  - {format_url(field(details, 'download_url'), 'Download Link')}",
        ]
    return []


def _process_details(details: Any) -> List[str]:
    if is_upload_details(details):
        files = field(details, "files", [])
        lines = [format_heading("Upload Statistics", 3)]
        if not files:
            return lines + ["No files processed"]
        lines.append(format_bullet_list(_upload_totals(files)))
        lines += ["", format_heading("Files Processed", 3)]
        for f in files:
            lines.append(f"- **{field(f, 'name_original', 'unknown')}**:")
            lines.append(f"  - Status: {field(f, 'status', 'unknown')}")
            if field(f, "message"):
                lines.append(f"  - Message: {field(f, 'message')}")
            lines.append(f"  - Words: {field(f, 'word_count_total', 0):,}")
            lines.append(
                f"  - Keys: {field(f, 'key_count_total', 0)} ({field(f, 'key_count_inserted', 0)} new, "
                f"{field(f, 'key_count_updated', 0)} updated, {field(f, 'key_count_skipped', 0)} skipped)"
            )
        return lines

    if is_download_details(details):
        size_kb = field(details, "file_size_kb", 0)
        return [
            format_heading("Download Information", 3),
            f"- **File Size**: {size_kb / 1024:.2f} MB ({size_kb} KB)",
            f"- **Total Keys**: {field(details, 'total_number_of_keys')}",
            f"- **Download URL**: {format_url(field(details, 'download_url'), 'Click here to download')}",
            "",
            "⚠️ *Note: Download links expire after a certain time.*",
        ]

    lines = [format_heading("Additional Details", 3)]
    items = details.items() if isinstance(details, dict) else getattr(details, "__dict__", {}).items()
    for key, value in items:
        lines.append(f"- **{key}**: {value}")
    return lines


def format_queued_processes_list(collection: Any, project_id: str) -> str:
    processes = items_of(collection)
    lines = [
        format_heading(f"Queued Processes (Project: {project_id})", 1),
        "",
        f"**Total Processes**: {len(processes)}",
        "",
    ]

    if not processes:
        lines += ["*No queued processes found for this project.*", "", format_footer("List retrieved")]
        return "\n".join(lines)

    lines += [format_heading("Active and Recent Processes", 2), ""]
    for process in processes:
        status = field(process, "status", "unknown")
        lines += [
            format_heading(
                f"{status_icon(status)} {process_type_label(field(process, 'type'))} ({field(process, 'process_id')})",
                3,
            ),
            "",
            f"- **Status**: {status.upper()}",
            f"- **Type**: {field(process, 'type')}",
        ]
        if field(process, "message"):
            lines.append(f"- **Message**: {field(process, 'message')}")
        lines += [
            f"- **Created By**: {field(process, 'created_by_email', 'Unknown')}",
            f"- **Created At**: {format_date(field(process, 'created_at'))}",
        ]
        details = field(process, "details")
        if details:
            lines += _details_summary(details)
        lines += ["", "---", ""]

    lines.append(format_footer("List retrieved"))
    return "\n".join(lines)


def format_queued_process_details(process: Any) -> str:
    status = field(process, "status", "unknown")
    lines = [
        format_heading(f"{process_type_label(field(process, 'type'))} Process Details", 1),
        "",
        format_heading(f"{status_icon(status)} Status: {status.upper()}", 2),
        "",
        format_heading("Process Information", 2),
        format_bullet_list({
            "Process ID": field(process, "process_id"),
            "Type": field(process, "type"),
            "Status": status,
            "Message": field(process, "message") or None,
        }),
        "",
        format_heading("Created By", 2),
        format_bullet_list({
            "User ID": field(process, "created_by"),
            "Email": field(process, "created_by_email"),
            "Created": format_date(field(process, "created_at")),
        }),
        "",
    ]

    details = field(process, "details")
    if details:
        lines += [format_heading("Process Details", 2)] + _process_details(details) + [""]

    lines += [
        format_heading("Status Information", 2),
        STATUS_INFORMATION.get(status, f"❓ **Unknown Status**: {status}"),
        "",
        format_footer("Process details retrieved"),
    ]
    return "\n".join(lines)
