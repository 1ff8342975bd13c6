"""Markdown rendering for translations."""

from typing import Any, Dict, Optional

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_percentage,
    format_table,
    format_truncated,
    items_of,
)
from lokalise_mcp.domains.translations.types import BulkUpdateResult

QA_ISSUE_LABELS = {
    "spelling_and_grammar": "📝 Spelling & Grammar",
    "inconsistent_placeholders": "🔤 Inconsistent Placeholders",
    "inconsistent_html": "🏷️ Inconsistent HTML",
    "whitespace_issues": "⚪ Whitespace Issues",
    "missing_translation": "❌ Missing Translation",
    "unreliable_translation": "⚠️ Unreliable Translation",
    "unbalanced_brackets": "🔧 Unbalanced Brackets",
    "double_space": "⏩ Double Space",
    "special_character": "✨ Special Character",
    "unverified": "❓ Unverified",
    "glossary_term_violation": "📖 Glossary Term Violation",
}

SUCCESS_PREVIEW_LIMIT = 10


def _text(translation: Any) -> str:
    # Plural translations come back as a JSON object
    value = field(translation, "translation", "")
    return value if isinstance(value, str) else str(value)


def _reviewed(translation: Any) -> str:
    return "✓ Yes" if field(translation, "is_reviewed") else "✗ No"


def _verified(translation: Any) -> str:
    return "⚠️ Unverified" if field(translation, "is_unverified") else "✓ Yes"


def format_qa_issues(qa_issues: str) -> str:
    issues = [issue.strip() for issue in qa_issues.split(",") if issue.strip()]
    return ", ".join(QA_ISSUE_LABELS.get(issue, issue) for issue in issues)


def format_translations_list(collection: Any, qa_issues: Optional[str] = None) -> str:
    translations = items_of(collection)
    total = len(translations)
    next_cursor = field(collection, "next_cursor")

    lines = [format_heading(f"Translations List ({total} items)", 1), ""]
    if qa_issues:
        lines += [f"**QA issue filter:** {format_qa_issues(qa_issues)}", ""]

    if not translations:
        lines.append(format_empty_state("translations", "this query", [
            "Check if the project has any keys with translations",
            "Verify your filter parameters (language, review status, etc.)",
            "Ensure you have permission to view translations",
        ]))
        lines.append(format_footer("List retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "id": field(t, "translation_id"),
            "key_id": field(t, "key_id"),
            "language": field(t, "language_iso"),
            "translation": format_truncated(_text(t), 50),
            "reviewed": "✓" if field(t, "is_reviewed") else "✗",
            "verified": "⚠️" if field(t, "is_unverified") else "✓",
            "words": field(t, "words", 0),
            "modified": format_date(field(t, "modified_at")) if field(t, "modified_at") else "-",
        }
        for t in translations
    ]
    lines += [
        format_heading("Translations", 2),
        format_table(rows, [
            {"key": "id", "header": "Translation ID"},
            {"key": "key_id", "header": "Key ID"},
            {"key": "language", "header": "Language"},
            {"key": "translation", "header": "Translation", "formatter": str},
            {"key": "reviewed", "header": "Reviewed"},
            {"key": "verified", "header": "Verified"},
            {"key": "words", "header": "Words"},
            {"key": "modified", "header": "Modified", "formatter": str},
        ]),
        "",
    ]

    if next_cursor:
        lines += [
            format_heading("Pagination", 2),
            "- **More results available**: Use the cursor to fetch the next page",
            f"- **Next cursor**: `{next_cursor}`",
            "",
        ]

    reviewed = sum(1 for t in translations if field(t, "is_reviewed"))
    unverified = sum(1 for t in translations if field(t, "is_unverified"))
    lines += [
        format_heading("Summary", 2),
        format_bullet_list({
            "Total shown": total,
            "Reviewed": f"{reviewed} ({format_percentage(reviewed, total)})",
            "Unverified": f"{unverified} ({format_percentage(unverified, total)})",
            "Has more results": "Yes" if next_cursor else "No",
        }),
        "",
        format_footer("Translations list retrieved"),
    ]
    return "\n".join(lines)


def format_translation_details(translation: Any) -> str:
    modified_at = field(translation, "modified_at")
    lines = [
        format_heading(f"Translation ID: {field(translation, 'translation_id')}", 1),
        "",
        format_heading("Basic Information", 2),
        format_bullet_list({
            "Translation ID": field(translation, "translation_id"),
            "Key ID": field(translation, "key_id"),
            "Language": field(translation, "language_iso"),
            "Modified": format_date(modified_at) if modified_at else "Unknown",
            "Modified By": field(translation, "modified_by_email") or "Unknown user",
            "Word Count": field(translation, "words", 0),
        }),
        "",
        format_heading("Translation Content", 2),
        "```",
        _text(translation),
        "```",
        "",
        format_heading("Status", 2),
    ]

    status: Dict[str, Any] = {
        "Reviewed": _reviewed(translation),
        "Verified": _verified(translation),
        "Fuzzy": "⚠️ Yes" if field(translation, "is_fuzzy") else "✓ No",
    }
    if field(translation, "is_reviewed") and field(translation, "reviewed_by"):
        status["Reviewed By"] = f"User #{field(translation, 'reviewed_by')}"
    lines += [format_bullet_list(status), ""]

    custom_statuses = field(translation, "custom_translation_statuses", [])
    if custom_statuses:
        lines.append(format_heading("Custom Statuses", 2))
        lines += [f"- **{field(s, 'title')}** ({field(s, 'color')})" for s in custom_statuses]
        lines.append("")

    if field(translation, "task_id"):
        lines += [
            format_heading("Task Information", 2),
            format_bullet_list({
                "Task ID": field(translation, "task_id"),
                "Segment Number": field(translation, "segment_number", "N/A"),
            }),
            "",
        ]

    lines.append(format_footer("Translation details retrieved"))
    return "\n".join(lines)


def format_update_translation_result(translation: Any) -> str:
    modified_at = field(translation, "modified_at")
    lines = [
        format_heading("Translation Updated Successfully", 1),
        "",
        format_heading("Update Summary", 2),
        format_bullet_list({
            "Translation ID": field(translation, "translation_id"),
            "Key ID": field(translation, "key_id"),
            "Language": field(translation, "language_iso"),
            "Updated At": format_date(modified_at) if modified_at else "Just now",
        }),
        "",
        format_heading("Updated Translation", 2),
        "```",
        format_truncated(_text(translation), 200),
        "```",
        "",
        format_heading("Current Status", 2),
        format_bullet_list({
            "Reviewed": _reviewed(translation),
            "Verified": _verified(translation),
            "Word Count": field(translation, "words", 0),
        }),
        "",
        format_footer("Translation updated"),
    ]
    return "\n".join(lines)


def format_bulk_update_result(summary: BulkUpdateResult) -> str:
    total = summary.total_requested
    seconds = summary.duration_ms / 1000
    lines = [
        format_heading("Bulk Translation Update Results", 1),
        "",
        format_heading("Summary", 2),
        format_bullet_list({
            "Total Translations": total,
            "Successful Updates": f"{summary.success_count} ({format_percentage(summary.success_count, total)})",
            "Failed Updates": f"{summary.failure_count} ({format_percentage(summary.failure_count, total)})",
            "Total Duration": f"{seconds:.2f} seconds",
            "Average Time per Translation": f"{(seconds / total if total else 0):.2f} seconds",
        }),
        "",
    ]

    succeeded = [r for r in summary.results if r.success]
    if succeeded:
        rows = [
            {
                "id": r.translation_id,
                "language": field(r.translation, "language_iso", "N/A"),
                "reviewed": "✓" if field(r.translation, "is_reviewed") else "✗",
                "attempts": r.attempts,
            }
            for r in succeeded[:SUCCESS_PREVIEW_LIMIT]
        ]
        lines.append(format_heading("✅ Successful Updates", 2))
        lines.append(format_table(rows, [
            {"key": "id", "header": "Translation ID"},
            {"key": "language", "header": "Language"},
            {"key": "reviewed", "header": "Reviewed"},
            {"key": "attempts", "header": "Attempts"},
        ]))
        if len(succeeded) > SUCCESS_PREVIEW_LIMIT:
            lines.append(f"*... and {len(succeeded) - SUCCESS_PREVIEW_LIMIT} more successful updates*")
        lines.append("")

    failed = [r for r in summary.results if not r.success]
    if failed:
        rows = [
            {"id": r.translation_id, "error": r.error or "Unknown error", "attempts": r.attempts}
            for r in failed
        ]
        lines.append(format_heading("❌ Failed Updates", 2))
        lines.append(format_table(rows, [
            {"key": "id", "header": "Translation ID"},
            {"key": "error", "header": "Error", "formatter": lambda v: format_truncated(str(v), 53)},
            {"key": "attempts", "header": "Attempts"},
        ]))
        lines.append("")

    if total > 20:
        lines += [
            format_heading("Performance Notes", 2),
            format_bullet_list({
                "Rate Limiting": "~5 requests per second",
                "Retry Logic": "Up to 3 attempts per translation on failure",
                "Recommendation": "Consider smaller batches for better performance",
            }),
            "",
        ]

    lines.append(format_footer("Bulk update completed"))
    return "\n".join(lines)
