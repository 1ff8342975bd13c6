"""Markdown rendering for team user groups."""

from typing import Any, Dict, List

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_footer,
    format_heading,
    format_table,
    items_of,
)


def _permissions(group: Any) -> Any:
    return field(group, "permissions", {})


def _access(lang: Any) -> str:
    return "Read/Write" if field(lang, "is_writable") else "Read Only"


def _permission_summary(group: Any) -> Dict[str, Any]:
    permissions = _permissions(group)
    summary: Dict[str, Any] = {
        "Admin": bool(field(permissions, "is_admin")),
        "Reviewer": bool(field(permissions, "is_reviewer")),
    }
    rights = field(permissions, "admin_rights", [])
    if field(permissions, "is_admin") and rights:
        summary["Admin Rights"] = ", ".join(rights)
    return summary


def _languages(group: Any) -> List[Any]:
    return list(field(_permissions(group), "languages", []) or [])


def format_user_groups_list(collection: Any, team_id: str) -> str:
    groups = items_of(collection)
    current = field(collection, "current_page", 1)
    pages = field(collection, "page_count", 1)
    lines = [
        format_heading(f"User Groups (Team: {team_id})", 1),
        "",
        f"**Total Groups**: {field(collection, 'total_count', len(groups))}",
        f"**Page**: {current} of {pages}",
        "",
    ]

    if not groups:
        lines += ["*No user groups found for this team.*", "", format_footer("List retrieved")]
        return "\n".join(lines)

    for group in groups:
        lines += [
            format_heading(f"{field(group, 'name')} (ID: {field(group, 'group_id')})", 2),
            "",
            format_heading("Permissions", 3),
            format_bullet_list(_permission_summary(group)),
        ]
        languages = _languages(group)
        if languages:
            lines += ["", format_heading("Language Permissions", 3)]
            lines.extend(
                f"- **{field(lang, 'lang_name')}** ({field(lang, 'lang_iso')}): {_access(lang)}" for lang in languages
            )
        lines.append("")
        members = field(group, "members", [])
        projects = field(group, "projects", [])
        if members:
            lines.append(f"**Members**: {len(members)} user(s)")
        if projects:
            lines.append(f"**Projects**: {len(projects)} project(s)")
        lines.append(f"**Created**: {format_date(field(group, 'created_at'))}")
        if field(group, "role_id"):
            lines.append(f"**Role ID**: {field(group, 'role_id')}")
        lines += ["", "---", ""]

    if pages and current < pages:
        lines += [f"*More groups available. Use page {current + 1} to see more.*", ""]

    lines.append(format_footer("List retrieved"))
    return "\n".join(lines)


def format_user_group_details(group: Any) -> str:
    permissions = _permissions(group)
    lines = [
        format_heading(f"User Group: {field(group, 'name')}", 1),
        "",
        format_bullet_list({"Group ID": field(group, "group_id"), "Team ID": field(group, "team_id")}),
        "",
        format_heading("Permissions", 2),
        format_bullet_list({
            "Admin": bool(field(permissions, "is_admin")),
            "Reviewer": bool(field(permissions, "is_reviewer")),
        }),
    ]

    rights = field(permissions, "admin_rights", [])
    if field(permissions, "is_admin") and rights:
        lines += ["", format_heading("Admin Rights", 3)]
        lines.extend(f"- {right}" for right in rights)

    languages = _languages(group)
    if languages:
        rows = [
            {"name": field(lang, "lang_name"), "iso": field(lang, "lang_iso"), "access": _access(lang)}
            for lang in languages
        ]
        lines += [
            "",
            format_heading("Language Permissions", 2),
            format_table(rows, [
                {"key": "name", "header": "Language"},
                {"key": "iso", "header": "ISO"},
                {"key": "access", "header": "Access"},
            ]),
        ]

    members = field(group, "members", [])
    if members:
        lines += ["", format_heading(f"Members ({len(members)})", 2)]
        lines.extend(f"- User ID: {member}" for member in members)

    projects = field(group, "projects", [])
    if projects:
        lines += ["", format_heading(f"Projects ({len(projects)})", 2)]
        lines.extend(f"- Project ID: {project}" for project in projects)

    lines += [
        "",
        format_heading("Metadata", 2),
        format_bullet_list({
            "Created": format_date(field(group, "created_at")),
            "Role ID": field(group, "role_id"),
        }),
        "",
        format_footer("Details retrieved"),
    ]
    return "\n".join(lines)


def format_create_user_group_result(group: Any) -> str:
    summary = _permission_summary(group)
    languages = _languages(group)
    if languages:
        summary["Languages Configured"] = len(languages)
    lines = [
        format_heading("User Group Created Successfully", 1),
        "",
        format_bullet_list({
            "Name": field(group, "name"),
            "Group ID": field(group, "group_id"),
            "Team ID": field(group, "team_id"),
        }),
        "",
        format_heading("Permissions Set", 2),
        format_bullet_list(summary),
        "",
        "✅ User group created successfully",
        "",
        format_footer("User group created"),
    ]
    return "\n".join(lines)


def format_update_user_group_result(group: Any) -> str:
    summary = _permission_summary(group)
    languages = _languages(group)
    if languages:
        summary["Languages"] = f"{len(languages)} language(s) configured"
    lines = [
        format_heading("User Group Updated Successfully", 1),
        "",
        format_bullet_list({
            "Name": field(group, "name"),
            "Group ID": field(group, "group_id"),
            "Team ID": field(group, "team_id"),
        }),
        "",
        format_heading("Updated Permissions", 2),
        format_bullet_list(summary),
        "",
        "✅ User group updated successfully",
        "",
        format_footer("User group updated"),
    ]
    return "\n".join(lines)


def format_delete_user_group_result(result: Any, team_id: str) -> str:
    deleted = field(result, "group_deleted", True)
    lines = [
        format_heading("User Group Deleted Successfully", 1),
        "",
        format_bullet_list({
            "Team ID": field(result, "team_id", team_id),
            "Status": "✅ Deleted" if deleted else "❌ Failed",
        }),
        "",
        format_footer("User group deleted"),
    ]
    return "\n".join(lines)


def format_membership_result(group: Any, count: int, entity: str, added: bool) -> str:
    """Result of adding or removing members or projects.

    Args:
        group: Group returned by the API after the change
        count: Number of members or projects in the request
        entity: ``"members"`` or ``"projects"``
        added: Whether the items were added or removed
    """
    action = "Added" if added else "Removed"
    noun = "member" if entity == "members" else "project"
    total_label = f"Total {entity.title()}" if added else f"Remaining {entity.title()}"
    preposition = "to" if added else "from"
    lines = [
        format_heading(f"{entity.title()} {action} Successfully", 1),
        "",
        format_bullet_list({
            "Group": f"{field(group, 'name')} (ID: {field(group, 'group_id')})",
            f"{entity.title()} {action}": count,
            total_label: len(field(group, entity, []) or []),
        }),
        "",
        f"✅ Successfully {action.lower()} {count} {noun}(s) {preposition} the user group",
        "",
        format_footer(f"{entity.title()} {action.lower()}"),
    ]
    return "\n".join(lines)
