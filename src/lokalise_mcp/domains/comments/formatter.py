"""Markdown rendering for comments."""

from typing import Any, Dict, List, Sequence

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_page_navigation,
    format_page_summary,
    format_recommendations,
    format_table,
    format_truncated,
    items_of,
)

COMMENT_COLUMNS = [
    {"key": "id", "header": "ID"},
    {"key": "author", "header": "Author"},
    {"key": "comment", "header": "Comment", "formatter": str},
    {"key": "added", "header": "Added", "formatter": str},
]


def _author(comment: Any) -> str:
    return field(comment, "added_by_email") or f"User #{field(comment, 'added_by')}"


def _added(comment: Any) -> str:
    timestamp = field(comment, "added_at_timestamp")
    return format_date(timestamp if timestamp is not None else field(comment, "added_at"))


def _comment_rows(comments: Sequence[Any], width: int) -> List[Dict[str, Any]]:
    return [
        {
            "id": field(c, "comment_id"),
            "author": _author(c),
            "comment": format_truncated(field(c, "comment", ""), width + 3),
            "added": _added(c),
        }
        for c in comments
    ]


def format_key_comments_list(collection: Any, key_id: int) -> str:
    comments = items_of(collection)
    total = field(collection, "total_count", len(comments))
    lines = [format_heading(f"Comments for Key #{key_id} ({total})", 1), ""]

    if not comments:
        lines.append(format_empty_state("comments", f"key #{key_id}", [
            "Add a comment to start the discussion",
            "Comments help collaborate on translation decisions",
            "Use comments to provide context for translators",
        ]))
        lines.append(format_footer("No comments found"))
        return "\n".join(lines)

    summary = format_page_summary(collection, len(comments))
    summary["Total Comments"] = summary.pop("Total")
    lines += [
        format_heading("Summary", 2),
        format_bullet_list(summary),
        "",
        format_heading("Comments", 2),
        format_table(_comment_rows(comments, 50), COMMENT_COLUMNS),
        "",
        format_page_navigation(collection),
        format_footer("Comments retrieved"),
    ]
    return "\n".join(lines)


def format_project_comments_list(collection: Any) -> str:
    comments = items_of(collection)
    total = field(collection, "total_count", len(comments))
    lines = [format_heading(f"All Project Comments ({total})", 1), ""]

    if not comments:
        lines.append(format_empty_state("comments", "this project", [
            "Start adding comments to translation keys",
            "Comments help track translation decisions",
            "Use comments for team collaboration",
        ]))
        lines.append(format_footer("No comments found"))
        return "\n".join(lines)

    summary = format_page_summary(collection, len(comments))
    summary["Total Comments"] = summary.pop("Total")
    lines += [format_heading("Summary", 2), format_bullet_list(summary), ""]

    by_key: Dict[Any, List[Any]] = {}
    for comment in comments:
        by_key.setdefault(field(comment, "key_id"), []).append(comment)

    lines.append(format_heading("Comments by Key", 2))
    for key_id, key_comments in by_key.items():
        plural = "" if len(key_comments) == 1 else "s"
        lines += [
            format_heading(f"Key #{key_id} ({len(key_comments)} comment{plural})", 3),
            format_table(_comment_rows(key_comments, 40), COMMENT_COLUMNS),
            "",
        ]

    lines += [format_page_navigation(collection), format_footer("All comments retrieved")]
    return "\n".join(lines)


def format_comment_details(comment: Any) -> str:
    lines = [
        format_heading(f"Comment #{field(comment, 'comment_id')}", 1),
        "",
        format_heading("Comment", 2),
        "```",
        field(comment, "comment", ""),
        "```",
        "",
        format_heading("Details", 2),
        format_bullet_list({
            "Comment ID": field(comment, "comment_id"),
            "Key ID": field(comment, "key_id"),
            "Author": _author(comment),
            "Author ID": field(comment, "added_by"),
            "Added": _added(comment),
            "Timestamp": field(comment, "added_at_timestamp"),
        }),
        "",
        format_footer("Comment retrieved"),
    ]
    return "\n".join(lines)


def format_create_comments_result(comments: Any, key_id: int) -> str:
    created = items_of(comments)
    count = len(created)
    lines = [
        format_heading(f"{count} Comment{'' if count == 1 else 's'} Created Successfully", 1),
        "",
        format_heading("Creation Summary", 2),
        format_bullet_list({"Key ID": key_id, "Comments Created": count}),
        "",
        format_heading("Created Comments", 2),
        format_table(_comment_rows(created, 50), COMMENT_COLUMNS),
        "",
        format_recommendations([
            "View the comments in the Lokalise dashboard",
            "Add replies or additional comments as needed",
            "Use comments to guide translation decisions",
        ]),
        format_footer("Comments created"),
    ]
    return "\n".join(lines)


def format_delete_comment_result(result: Any, project_id: str, comment_id: int) -> str:
    deleted = field(result, "comment_deleted", True)
    details: Dict[str, Any] = {
        "Project ID": field(result, "project_id", project_id),
        "Comment ID": comment_id,
        "Deletion Status": "Success" if deleted else "Failed",
        "Branch": field(result, "branch"),
    }
    lines = [
        format_heading("Comment Deleted Successfully", 1),
        "",
        format_heading("Deletion Details", 2),
        format_bullet_list(details),
        "",
        format_heading("⚠️ Important", 2),
        "- This action cannot be undone",
        "- The comment has been permanently removed",
        "- Other comments on the same key remain unaffected",
        "",
        format_footer("Comment deleted"),
    ]
    return "\n".join(lines)
