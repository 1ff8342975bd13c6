"""Markdown rendering for team users."""

from typing import Any

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_footer,
    format_heading,
    items_of,
)

ROLE_PERMISSIONS = {
    "owner": [
        "Full access to all team resources",
        "Can manage billing and subscriptions",
        "Can delete the team",
    ],
    "admin": [
        "Can manage projects and team members",
        "Can create and delete projects",
        "Cannot manage billing",
    ],
    "member": [
        "Can access assigned projects",
        "Limited administrative permissions",
    ],
    "biller": [
        "Can manage billing and subscriptions",
        "Limited access to projects",
    ],
}


def _name(user: Any) -> str:
    return field(user, "fullname") or field(user, "email") or str(field(user, "user_id", "Unknown"))


def format_team_users_list(collection: Any, team_id: str) -> str:
    users = items_of(collection)
    current = field(collection, "current_page", 1)
    pages = field(collection, "page_count", 1)
    lines = [
        format_heading(f"Team Users (Team: {team_id})", 1),
        "",
        f"**Total Users**: {field(collection, 'total_count', len(users))}",
        f"**Page**: {current} of {pages}",
        "",
    ]

    if not users:
        lines += ["*No users found in this team.*", "", format_footer("List retrieved")]
        return "\n".join(lines)

    for user in users:
        lines += [
            format_heading(f"{_name(user)} (ID: {field(user, 'user_id')})", 2),
            "",
            format_bullet_list({
                "Email": field(user, "email"),
                "Role": field(user, "role"),
                "UUID": field(user, "uuid"),
                "Created": format_date(field(user, "created_at")),
            }),
            "",
            "---",
            "",
        ]

    if pages and current < pages:
        lines += [f"*More users available. Use page {current + 1} to see more.*", ""]

    lines.append(format_footer("List retrieved"))
    return "\n".join(lines)


def format_team_user_details(user: Any) -> str:
    role = field(user, "role")
    lines = [
        format_heading(f"Team User: {_name(user)}", 1),
        "",
        format_bullet_list({
            "User ID": field(user, "user_id"),
            "Email": field(user, "email"),
            "Role": role,
            "UUID": field(user, "uuid"),
        }),
        "",
        format_heading("Metadata", 2),
        format_bullet_list({"Created": format_date(field(user, "created_at"))}),
        "",
        format_heading("Role Permissions", 2),
    ]
    lines.extend(f"- {permission}" for permission in ROLE_PERMISSIONS.get(role, ["Unknown role"]))
    lines += ["", format_footer("Details retrieved")]
    return "\n".join(lines)


def format_update_team_user_result(user: Any) -> str:
    lines = [
        format_heading("Team User Updated Successfully", 1),
        "",
        format_bullet_list({
            "Name": _name(user),
            "User ID": field(user, "user_id"),
            "Email": field(user, "email"),
            "New Role": field(user, "role"),
        }),
        "",
        "✅ Team user role updated successfully",
        "",
        format_footer("Team user updated"),
    ]
    return "\n".join(lines)


def format_delete_team_user_result(result: Any, team_id: str) -> str:
    deleted = field(result, "team_user_deleted", True)
    lines = [
        format_heading("Team User Deleted Successfully", 1),
        "",
        format_bullet_list({
            "Team ID": field(result, "team_id", team_id),
            "Status": "✅ Deleted" if deleted else "❌ Failed",
        }),
        "",
        format_footer("Team user deleted"),
    ]
    return "\n".join(lines)
