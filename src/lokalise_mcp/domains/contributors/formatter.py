"""Markdown rendering for project contributors."""

from typing import Any, Sequence

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_page_navigation,
    format_page_summary,
    format_safe_array,
    format_table,
    items_of,
)


def format_role(contributor: Any) -> str:
    if field(contributor, "is_admin"):
        return "Admin (deprecated)"
    if field(contributor, "is_reviewer"):
        return "Reviewer (deprecated)"
    rights = field(contributor, "admin_rights", [])
    if rights:
        return f"Custom ({len(rights)} rights)"
    return "Member"


def format_language_access(languages: Sequence[Any]) -> str:
    if not languages:
        return "None"
    writable = sum(1 for lang in languages if field(lang, "is_writable"))
    total = len(languages)
    if writable == total:
        return f"{total} (all writable)"
    if writable == 0:
        return f"{total} (all read-only)"
    return f"{total} ({writable} writable, {total - writable} read-only)"


def _joined(contributor: Any, missing: str) -> str:
    created = field(contributor, "created_at")
    return format_date(created) if created else missing


def format_contributors_list(collection: Any) -> str:
    contributors = items_of(collection)
    total = field(collection, "total_count", len(contributors))
    lines = [format_heading(f"Contributors List ({total})", 1), ""]

    if not contributors:
        lines.append(format_empty_state("contributors", "this project", [
            "Add team members to collaborate on translations",
            "Check if you have the correct project ID",
            "Verify your admin permissions for this project",
        ]))
        lines.append(format_footer("List retrieved"))
        return "\n".join(lines)

    summary = format_page_summary(collection, len(contributors))
    summary["Total Contributors"] = summary.pop("Total")
    rows = [
        {
            "id": field(c, "user_id"),
            "email": field(c, "email"),
            "name": field(c, "fullname") or "-",
            "role": format_role(c),
            "languages": format_language_access(field(c, "languages", [])),
            "joined": _joined(c, "-"),
        }
        for c in contributors
    ]
    lines += [
        format_heading("Summary", 2),
        format_bullet_list(summary),
        "",
        format_heading("Contributors", 2),
        format_table(rows, [
            {"key": "id", "header": "User ID"},
            {"key": "email", "header": "Email"},
            {"key": "name", "header": "Full Name"},
            {"key": "role", "header": "Role"},
            {"key": "languages", "header": "Languages"},
            {"key": "joined", "header": "Joined", "formatter": str},
        ]),
        "",
        format_page_navigation(collection),
        format_footer("Contributors list retrieved"),
    ]
    return "\n".join(lines)


def format_contributor_details(contributor: Any, title: str = "Contributor") -> str:
    languages = field(contributor, "languages", [])
    lines = [
        format_heading(f"{title}: {field(contributor, 'fullname') or field(contributor, 'email')}", 1),
        "",
        format_heading("Basic Information", 2),
        format_bullet_list({
            "User ID": field(contributor, "user_id"),
            "Email": field(contributor, "email"),
            "Full Name": field(contributor, "fullname") or "Not set",
            "UUID": field(contributor, "uuid", "Not available"),
            "Role ID": field(contributor, "role_id", "Not set"),
            "Joined": _joined(contributor, "Unknown"),
        }),
        "",
        format_heading("Permissions", 2),
        format_bullet_list({
            "Is Admin": "Yes (deprecated)" if field(contributor, "is_admin") else "No",
            "Is Reviewer": "Yes (deprecated)" if field(contributor, "is_reviewer") else "No",
            "Admin Rights": format_safe_array(field(contributor, "admin_rights")),
        }),
        "",
        format_heading("Language Access", 2),
    ]

    if languages:
        rows = [
            {
                "id": field(lang, "lang_id"),
                "iso": field(lang, "lang_iso"),
                "name": field(lang, "lang_name"),
                "access": "Read/Write" if field(lang, "is_writable") else "Read-only",
            }
            for lang in languages
        ]
        lines.append(format_table(rows, [
            {"key": "id", "header": "ID"},
            {"key": "iso", "header": "ISO Code"},
            {"key": "name", "header": "Language"},
            {"key": "access", "header": "Access"},
        ]))
    else:
        lines.append("No language access configured")

    lines += ["", format_footer(f"{title} details retrieved")]
    return "\n".join(lines)


def format_add_contributors_result(created: Any) -> str:
    contributors = items_of(created)
    rows = [
        {
            "id": field(c, "user_id"),
            "email": field(c, "email"),
            "name": field(c, "fullname") or "-",
            "role": format_role(c),
            "languages": len(field(c, "languages", [])),
        }
        for c in contributors
    ]
    lines = [
        format_heading(f"Contributors Added ({len(contributors)})", 1),
        "",
        format_heading("Added Contributors", 2),
        format_table(rows, [
            {"key": "id", "header": "User ID"},
            {"key": "email", "header": "Email"},
            {"key": "name", "header": "Full Name"},
            {"key": "role", "header": "Role"},
            {"key": "languages", "header": "Languages"},
        ]),
        "",
        format_footer("Contributors added", f"({len(contributors)} total)"),
    ]
    return "\n".join(lines)


def format_update_contributor_result(contributor: Any) -> str:
    lines = [
        format_heading("Contributor Updated", 1),
        "",
        format_heading("Updated Details", 2),
        format_bullet_list({
            "User ID": field(contributor, "user_id"),
            "Email": field(contributor, "email"),
            "Full Name": field(contributor, "fullname") or "Not set",
            "Role": format_role(contributor),
            "Admin Rights": format_safe_array(field(contributor, "admin_rights")),
            "Languages": format_language_access(field(contributor, "languages", [])),
        }),
        "",
        format_footer("Contributor updated"),
    ]
    return "\n".join(lines)


def format_remove_contributor_result(result: Any, project_id: str, contributor_id: Any) -> str:
    lines = [
        format_heading("Contributor Removed", 1),
        "",
        format_heading("Removal Confirmation", 2),
        format_bullet_list({
            "Project ID": field(result, "project_id", project_id),
            "Contributor ID": contributor_id,
            "Removed": "Yes" if field(result, "contributor_deleted", True) else "No",
            "Branch": field(result, "branch", "Main"),
        }),
        "",
        format_footer("Contributor removed"),
    ]
    return "\n".join(lines)
