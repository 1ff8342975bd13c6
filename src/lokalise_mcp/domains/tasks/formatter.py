"""Markdown rendering for project tasks."""

import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_page_navigation,
    format_safe_array,
    format_table,
    items_of,
    parse_date,
)


def _days_until(due: datetime, now: Optional[datetime] = None) -> int:
    now = now or datetime.now(timezone.utc)
    return math.ceil((due - now).total_seconds() / 86400)


def _plural_days(days: int) -> str:
    return f"{days} day{'' if days == 1 else 's'}"


def _due(value: Any) -> Optional[datetime]:
    try:
        return parse_date(value)
    except (ValueError, OverflowError, OSError):
        return None


def format_due_status(due_date: Any, now: Optional[datetime] = None) -> str:
    """Deadline status such as ``🔴 **OVERDUE** by 2 days``."""
    if not due_date:
        return "⚠️ **NO DEADLINE** - consider setting a due date"
    due = _due(due_date)
    if due is None:
        return "Invalid date format"

    days = _days_until(due, now)
    if due < (now or datetime.now(timezone.utc)):
        return f"🔴 **OVERDUE** by {_plural_days(abs(days))}"
    if days <= 1:
        return f"🟡 **DUE SOON** ({'today' if days == 0 else 'tomorrow'})"
    if days <= 7:
        return f"📅 **DUE THIS WEEK** (in {days} days)"
    return f"✅ **ON SCHEDULE** (in {days} days)"


def _progress(task: Any) -> str:
    progress = field(task, "progress")
    return f"{progress}%" if isinstance(progress, (int, float)) else "N/A"


def _count(value: Any) -> Any:
    return value if isinstance(value, int) else "N/A"


def _language_lines(languages: List[Any]) -> List[str]:
    lines = [f"**{len(languages)} language(s) configured:**", ""]
    for language in languages:
        users = len(field(language, "users", []))
        groups = len(field(language, "groups", []))
        lines.append(f"- **{str(field(language, 'language_iso', 'unknown')).upper()}:** {users} user(s), {groups} group(s)")
    lines.append("")
    return lines


def format_task_snapshot(task: Any) -> str:
    languages = field(task, "languages", [])
    info: Dict[str, Any] = {
        "Status": field(task, "status", "Unknown"),
        "Type": field(task, "task_type", "Unknown"),
        "Source Language": field(task, "source_language_iso", "Unknown"),
        "Progress": _progress(task),
        "Due": format_due_status(field(task, "due_date")),
        "Languages": format_safe_array(
            [str(field(lang, "language_iso", "?")).upper() for lang in languages], "None",
        ),
        "Created By": field(task, "created_by_email"),
    }
    description = field(task, "description")
    if description:
        info["Description"] = description
    return format_bullet_list(info)


def format_tasks_list(collection: Any, project_id: str) -> str:
    tasks = items_of(collection)
    lines = [format_heading("Tasks Analysis", 1), "", format_heading(f"Project: {project_id}", 2), ""]

    if not tasks:
        lines.append(format_empty_state("tasks", "this project", [
            "The project has no tasks created yet",
            "All tasks have been deleted",
            "Filter criteria excluded all tasks",
            "You may not have permission to view tasks",
        ]))
        lines.append(format_footer("Analysis completed"))
        return "\n".join(lines)

    total = field(collection, "total_count", len(tasks))
    status_counts: Dict[str, int] = {}
    for task in tasks:
        status = field(task, "status", "unknown")
        status_counts[status] = status_counts.get(status, 0) + 1

    rows = [
        {
            "id": field(task, "task_id", "N/A"),
            "title": field(task, "title") or "Untitled",
            "status": field(task, "status", "Unknown"),
            "type": field(task, "task_type", "Unknown"),
            "progress": _progress(task),
            "keys": _count(field(task, "keys_count")),
            "words": _count(field(task, "words_count")),
            "due": format_date(field(task, "due_date")) if field(task, "due_date") else "No deadline",
            "created": format_date(field(task, "created_at")) if field(task, "created_at") else "Unknown",
        }
        for task in tasks
    ]

    lines += [
        format_heading("Executive Summary", 2),
        "",
        f"**{len(tasks)} tasks** found in this project ({total} total).",
        "",
        format_bullet_list({status.replace("_", " ").title(): count for status, count in sorted(status_counts.items())}),
        "",
        format_page_navigation(collection),
        format_heading("Task Inventory", 2),
        "",
        format_table(rows, [
            {"key": "id", "header": "ID"},
            {"key": "title", "header": "Title", "max_width": 30},
            {"key": "status", "header": "Status"},
            {"key": "type", "header": "Type"},
            {"key": "progress", "header": "Progress"},
            {"key": "keys", "header": "Keys"},
            {"key": "words", "header": "Words"},
            {"key": "due", "header": "Due Date", "formatter": str},
            {"key": "created", "header": "Created", "formatter": str},
        ]),
        "",
        format_heading("Detailed Task Snapshots", 2),
        "",
    ]
    for task in tasks:
        lines += [
            format_heading(f"Task #{field(task, 'task_id')} - {field(task, 'title') or 'Untitled'}", 3),
            format_task_snapshot(task),
            "",
        ]

    lines += [
        format_heading("Summary", 2),
        "",
        f"**Project {project_id} has {len(tasks)} tasks** in this view.",
        "",
        format_footer("Analysis completed", f"Showing {len(tasks)} tasks from project `{project_id}`"),
    ]
    return "\n".join(lines)


def format_task_details(task: Any, project_id: str) -> str:
    languages = field(task, "languages", [])
    lines = [
        format_heading(f"Task Details: {field(task, 'title') or 'Untitled'}", 1),
        "",
        format_heading("Core Information", 2),
        format_bullet_list({
            "Task ID": field(task, "task_id"),
            "Project": f"`{project_id}`",
            "Title": field(task, "title") or "Untitled",
            "Description": field(task, "description") or "No description",
            "Status": field(task, "status", "Unknown"),
            "Type": field(task, "task_type", "Unknown"),
            "Parent Task": field(task, "parent_task_id"),
        }),
        "",
        format_heading("Schedule", 2),
        format_bullet_list({
            "Due Date": format_date(field(task, "due_date")) if field(task, "due_date") else "No deadline set",
            "Deadline Status": format_due_status(field(task, "due_date")),
            "Completed": format_date(field(task, "completed_at")) if field(task, "completed_at") else None,
        }),
        "",
        format_heading("Language Assignments", 2),
    ]

    if languages:
        for language in languages:
            users = [field(u, "email") or field(u, "fullname") or field(u, "user_id") for u in field(language, "users", [])]
            groups = [field(g, "name") or field(g, "id") for g in field(language, "groups", [])]
            lines.append(
                f"- **{str(field(language, 'language_iso', 'unknown')).upper()}** "
                f"• status: {field(language, 'status', 'Unknown')} "
                f"• progress: {_progress(language)} "
                f"• keys: {field(language, 'keys_count', 0)} "
                f"• words: {field(language, 'words_count', 0)}"
            )
            if users:
                lines.append(f"  - Users: {format_safe_array(users)}")
            if groups:
                lines.append(f"  - Groups: {format_safe_array(groups)}")
    else:
        lines.append("No languages assigned")

    lines += [
        "",
        format_heading("Configuration & Metrics", 2),
        format_bullet_list({
            "Source Language": field(task, "source_language_iso", "Unknown"),
            "Progress": _progress(task),
            "Keys": _count(field(task, "keys_count")),
            "Words": _count(field(task, "words_count")),
            "Auto Close Languages": field(task, "auto_close_languages"),
            "Auto Close Task": field(task, "auto_close_task"),
            "Auto Close Items": field(task, "auto_close_items"),
            "Lock Translations": field(task, "do_lock_translations"),
            "Closing Tags": format_safe_array(field(task, "closing_tags")),
            "Custom Status IDs": format_safe_array(field(task, "custom_translation_status_ids")),
        }),
        "",
        format_heading("Audit", 2),
        format_bullet_list({
            "Created": format_date(field(task, "created_at")) if field(task, "created_at") else "Unknown",
            "Created By": field(task, "created_by_email") or field(task, "created_by"),
        }),
        "",
        format_heading("Task Summary", 2),
    ]

    due = _due(field(task, "due_date")) if field(task, "due_date") else None
    if not field(task, "due_date"):
        lines.append("- ⚠️ No deadline set")
    elif due is None:
        lines.append("- ⚠️ Invalid due date format")
    elif due < datetime.now(timezone.utc):
        lines.append(f"- ⚠️ OVERDUE deadline: {due.date().isoformat()}")
    else:
        lines.append(f"- ✅ On schedule deadline: {due.date().isoformat()}")

    lines += [
        f"- Current status: {field(task, 'status', 'Unknown')}",
        f"- Task type: {field(task, 'task_type', 'Unknown')}",
        "",
        format_footer("Task details retrieved", f"Task `{field(task, 'task_id')}` from project `{project_id}`"),
    ]
    return "\n".join(lines)


def format_create_task_result(task: Any, project_id: str) -> str:
    languages = field(task, "languages", [])
    info: Dict[str, Any] = {
        "Task ID": field(task, "task_id"),
        "Project": f"`{project_id}`",
        "Title": field(task, "title"),
        "Type": field(task, "task_type", "Unknown"),
        "Status": field(task, "status"),
    }
    if field(task, "created_at"):
        info["Created"] = format_date(field(task, "created_at"))
    if field(task, "due_date"):
        info["Due Date"] = format_date(field(task, "due_date"))

    lines = [
        format_heading("Task Created Successfully", 1),
        "",
        format_heading("Created Task Information", 2),
        format_bullet_list(info),
        "",
    ]
    if languages:
        lines += [format_heading("Language Coverage", 2)] + _language_lines(languages)

    next_steps = [
        "Notify assigned team members about the new task",
        "Review task details and assignments",
        "Monitor progress as work begins",
    ]
    if field(task, "due_date"):
        due = _due(field(task, "due_date"))
        if due is not None and _days_until(due) <= 7:
            next_steps.append("⚠️ **Due date is approaching** - ensure team is aware of the deadline")
    else:
        next_steps.append("Consider setting a due date for better project management")

    lines += [
        format_heading("Next Steps", 2),
        "✅ **Task created successfully**",
        "",
        "**Recommended actions:**",
    ]
    lines.extend(f"- {step}" for step in next_steps)
    lines += ["", format_footer("Task created")]
    return "\n".join(lines)


def format_update_task_result(task: Any, project_id: str) -> str:
    languages = field(task, "languages", [])
    status = field(task, "status")
    info: Dict[str, Any] = {
        "Task ID": field(task, "task_id"),
        "Project": f"`{project_id}`",
        "Title": field(task, "title"),
        "Status": status,
    }
    if field(task, "due_date"):
        info["Due Date"] = f"{format_date(field(task, 'due_date'))} ({format_due_status(field(task, 'due_date'))})"

    lines = [
        format_heading("Task Updated Successfully", 1),
        "",
        format_heading("Updated Task Information", 2),
        format_bullet_list(info),
        "",
    ]
    if languages:
        lines += [format_heading("Language Assignments", 2)] + _language_lines(languages)

    lines += [format_heading("Update Confirmation", 2), "✅ **Task updated successfully**", ""]
    if status == "closed":
        lines += ["🎉 **Task has been closed** - work is complete!", ""]
    elif status == "completed":
        lines += ["✅ **Task marked as completed** - ready for final review", ""]

    lines.append(format_footer("Task updated"))
    return "\n".join(lines)


def format_delete_task_result(result: Any, project_id: str, task_id: int) -> str:
    lines = [
        format_heading("Task Deleted Successfully", 1),
        "",
        format_heading("Deletion Confirmation", 2),
        format_bullet_list({
            "Task ID": task_id,
            "Project": f"`{project_id}`",
            "Deleted": "Yes" if field(result, "task_deleted", True) else "No",
        }),
        "",
        format_heading("Important Notes", 2),
        "⚠️ **This action is permanent** - the task and its language assignments have been removed.",
        "",
        format_footer("Task deleted"),
    ]
    return "\n".join(lines)
