"""Markdown rendering for projects."""

from typing import Any, Dict, List

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_footer,
    format_heading,
    format_recommendations,
    format_statistics,
    format_url,
    items_of,
    project_url,
)

# (label, statistics field, description)
QA_ISSUE_TYPES = [
    ("Not Reviewed", "not_reviewed", "Translations pending review"),
    ("Unverified", "unverified", "Translations not yet verified"),
    ("Spelling/Grammar", "spelling_grammar", "Potential language quality issues"),
    ("Inconsistent Placeholders", "inconsistent_placeholders", "Placeholder format mismatches"),
    ("Inconsistent HTML", "inconsistent_html", "HTML tag discrepancies"),
    ("Different Number of URLs", "different_number_of_urls", "URL count variations"),
    ("Different URLs", "different_urls", "URL content differences"),
    ("Leading Whitespace", "leading_whitespace", "Extra spaces at start"),
    ("Trailing Whitespace", "trailing_whitespace", "Extra spaces at end"),
    ("Different Number of Email Addresses", "different_number_of_email_address", "Email count variations"),
    ("Different Email Addresses", "different_email_address", "Email content differences"),
    ("Different Brackets", "different_brackets", "Bracket usage inconsistencies"),
    ("Different Numbers", "different_numbers", "Numeric value differences"),
    ("Double Space", "double_space", "Multiple consecutive spaces"),
    ("Special Placeholder Issues", "special_placeholder", "Special format placeholder problems"),
    ("Unbalanced Brackets", "unbalanced_brackets", "Mismatched brackets/parentheses"),
]

LANGUAGE_PREVIEW_LIMIT = 10

SETTINGS = [
    ("Review Workflow", "reviewing"),
    ("Auto-toggle Unverified", "auto_toggle_unverified"),
    ("Offline Translation", "offline_translation"),
    ("Per-platform Key Names", "per_platform_key_names"),
    ("Key Editing", "key_editing"),
    ("Inline Machine Translations", "inline_machine_translations"),
    ("Branching", "branching"),
    ("Segmentation", "segmentation"),
    ("Custom Translation Statuses", "custom_translation_statuses"),
    ("Multiple Custom Statuses", "custom_translation_statuses_allow_multiple"),
]


def dashboard_url(project_id: str) -> str:
    return f"{project_url(project_id)}/?view=multi"


def _progress_indicator(progress: Any) -> str:
    if not progress:
        return "⚪"
    if progress >= 95:
        return "🟢"
    if progress >= 70:
        return "🟡"
    return "🔴"


def _enabled(value: Any) -> str:
    return "✅ Enabled" if value else "❌ Disabled"


def format_projects_list(collection: Any, include_stats: bool = False) -> str:
    projects = items_of(collection)
    lines = [format_heading(f"Lokalise Projects ({len(projects)})", 1), ""]

    if not projects:
        lines += [
            "No projects found. Create your first project in the Lokalise dashboard.",
            "",
            format_footer("List retrieved"),
        ]
        return "\n".join(lines)

    for project in projects:
        stats = field(project, "statistics", {})
        info: Dict[str, Any] = {
            "Project ID": field(project, "project_id"),
            "Base Language": field(project, "base_language_iso"),
            "Created": format_date(field(project, "created_at")),
            "Created By": field(project, "created_by_email"),
            "Description": field(project, "description") or None,
            "Progress": f"{field(stats, 'progress_total', 0)}%",
            "Total Keys": field(stats, "keys_total", 0),
            "Languages": len(field(stats, "languages", [])),
        }
        lines += [
            format_heading(field(project, "name", "Unnamed project"), 2),
            "",
            format_heading("Project Information", 3),
            format_bullet_list(info),
            "",
        ]

        if stats and include_stats:
            stats_info: Dict[str, Any] = {
                "Progress": f"{field(stats, 'progress_total', 0)}%",
                "Total Keys": field(stats, "keys_total", 0),
                "Languages": len(field(stats, "languages", [])),
                "Team Members": field(stats, "team", 0),
                "Base Words": field(stats, "base_words", 0),
            }
            if field(stats, "qa_issues_total", 0) > 0:
                stats_info["QA Issues"] = field(stats, "qa_issues_total")
            lines += [format_heading("Project Statistics", 3), format_bullet_list(stats_info), ""]

        lines += [
            format_heading("Dashboard", 3),
            format_url(dashboard_url(field(project, "project_id")), "View in Lokalise Dashboard"),
            "",
        ]

    lines.append(format_footer("List retrieved"))
    return "\n".join(lines)


def _language_progress(languages: List[Any]) -> List[str]:
    lines = []
    for lang in sorted(languages, key=lambda item: field(item, "progress", 0), reverse=True):
        progress = field(lang, "progress", 0)
        icon = "✅" if progress >= 100 else "🔄" if progress >= 95 else "⚠️"
        words_to_do = field(lang, "words_to_do", 0)
        remaining = f" ({words_to_do:,} words remaining)" if words_to_do > 0 else ""
        lines.append(
            f"{icon} **{str(field(lang, 'language_iso', '')).upper()}** "
            f"(ID: {field(lang, 'language_id')}): {progress}%{remaining}"
        )
    return lines


def _qa_section(stats: Any) -> List[str]:
    total = field(stats, "qa_issues_total", 0)
    if total <= 0:
        return [format_heading("✅ Quality Assurance", 3), "No QA issues detected.", ""]

    lines = [format_heading("🔍 Quality Assurance Issues", 3), f"**Total Issues: {total}**", ""]
    qa_issues = field(stats, "qa_issues", {})
    active = [
        (label, field(qa_issues, name, 0), description)
        for label, name, description in QA_ISSUE_TYPES
        if field(qa_issues, name, 0) > 0
    ]
    for label, count, description in active:
        lines.append(f"• **{label}**: {count} {'issue' if count == 1 else 'issues'} - *{description}*")
    if active:
        lines.append("")

    keys_total = field(stats, "keys_total", 0)
    health = max(0.0, 100 - (total / keys_total) * 100) if keys_total else 0.0
    icon = "🟢" if health >= 95 else "🟡" if health >= 80 else "🔴"
    lines += [f"{icon} **QA Health Score**: {health:.1f}%", ""]
    return lines


def format_project_details(
    project: Any,
    include_languages: bool = False,
    include_keys_summary: bool = False,
) -> str:
    """
    Render a full project report.

    Args:
        project: Lokalise project model
        include_languages: Show per-language progress
        include_keys_summary: Show key and word totals in the overview

    Returns:
        Markdown report
    """
    project_id = field(project, "project_id")
    stats = field(project, "statistics", {})
    settings = field(project, "settings", {})
    languages = field(stats, "languages", [])
    keys_total = field(stats, "keys_total", 0)
    base_words = field(stats, "base_words", 0)

    overview: Dict[str, Any] = {
        "Project ID": f"`{project_id}`",
        "Project Type": field(project, "project_type", "localization_files"),
        "Base Language": f"{field(project, 'base_language_iso')} (ID: {field(project, 'base_language_id')})",
        "Team ID": field(project, "team_id"),
        "Created": format_date(field(project, "created_at")),
        "Created By": field(project, "created_by_email"),
        "Project UUID": field(project, "uuid"),
        "Team UUID": field(project, "team_uuid"),
    }
    description = field(project, "description", "")
    overview["Description"] = description if description.strip() else "*No description provided*"

    lines = [
        format_heading(
            f"{_progress_indicator(field(stats, 'progress_total'))} Project: {field(project, 'name')}", 1
        ),
        "",
        format_heading("📋 Project Overview", 2),
        format_bullet_list(overview),
        "",
        format_heading("📊 Project Statistics", 2),
        format_statistics({
            "Completion": f"{field(stats, 'progress_total', 0)}%",
            "Total Keys": f"{keys_total:,}",
            "Base Words": f"{base_words:,}",
            "Team Members": field(stats, "team", 0),
            "Active Languages": len(languages),
            "QA Issues": field(stats, "qa_issues_total", 0),
        }, "Overall Progress"),
    ]

    if languages:
        shown = _language_progress(languages)
        lines.append(format_heading("🌐 Language Progress", 3))
        if include_languages or len(shown) <= LANGUAGE_PREVIEW_LIMIT:
            lines += shown
        else:
            lines += shown[:LANGUAGE_PREVIEW_LIMIT]
            lines.append(f"*... and {len(shown) - LANGUAGE_PREVIEW_LIMIT} more languages*")
        lines.append("")

    lines += _qa_section(stats)

    lines += [
        format_heading("⚙️ Project Configuration", 2),
        format_bullet_list({label: _enabled(field(settings, name)) for label, name in SETTINGS}),
        "",
        format_heading("📋 Project Context", 2),
    ]

    context = []
    if stats:
        context += [
            f"📊 **Progress**: {field(stats, 'progress_total', 0)}% complete",
            f"🔑 **Scale**: {keys_total:,} keys, {base_words:,} words",
            f"👥 **Team**: {field(stats, 'team', 0)} members",
            f"🌐 **Languages**: {len(languages)} active",
        ]
        remaining = sum(field(lang, "words_to_do", 0) for lang in languages)
        if remaining > 0:
            context.append(f"📝 **Remaining Work**: {remaining:,} words")
    if include_keys_summary and keys_total:
        context.append(f"🧮 **Words per Key**: {base_words / keys_total:.1f}")
    lines += [f"• {item}" for item in context]
    lines.append("")

    url = dashboard_url(project_id)
    lines += [
        format_heading("🔗 Quick Actions", 2),
        f"• {format_url(url, '📊 View Dashboard')}",
        f"• {format_url(f'{url}/settings', '⚙️ Project Settings')}",
        f"• {format_url(f'{url}/statistics', '📈 Statistics')}",
        f"• {format_url(f'{url}/keys', '🔑 Keys')}",
        f"• {format_url(f'{url}/languages', '🌐 Languages')}",
    ]
    if field(stats, "qa_issues_total", 0) > 0:
        lines.append(f"• {format_url(f'{url}/qa', '🔍 QA Issues')}")
    lines += [
        "",
        format_footer("Complete project data exported"),
        f"*Project ID: `{project_id}`*",
    ]
    return "\n".join(lines)


def format_create_project_result(project: Any) -> str:
    project_id = field(project, "project_id")
    lines = [
        format_heading("Project Created Successfully", 1),
        "",
        format_heading("Project Information", 2),
        format_bullet_list({
            "Project Name": field(project, "name"),
            "Project ID": project_id,
            "Base Language": field(project, "base_language_iso"),
            "Created": format_date(field(project, "created_at")),
            "Created By": field(project, "created_by_email"),
            "Description": field(project, "description") or None,
        }),
        "",
        format_recommendations([
            "Add target languages to your project",
            "Upload or create translation keys",
            "Invite team members as translators",
            "Set up integrations with your development workflow",
        ]),
        format_heading("Dashboard", 2),
        format_url(dashboard_url(project_id), "Open Project in Lokalise Dashboard"),
        "",
        format_footer("Project created"),
    ]
    return "\n".join(lines)


def format_update_project_result(project: Any) -> str:
    project_id = field(project, "project_id")
    lines = [
        format_heading("Project Updated Successfully", 1),
        "",
        format_heading("Updated Project Information", 2),
        format_bullet_list({
            "Project Name": field(project, "name"),
            "Project ID": project_id,
            "Base Language": field(project, "base_language_iso"),
            "Description": field(project, "description") or None,
        }),
        "",
        format_heading("Dashboard", 2),
        format_url(dashboard_url(project_id), "View Project in Lokalise Dashboard"),
        "",
        format_footer("Project updated"),
    ]
    return "\n".join(lines)


def format_delete_project_result(project_id: str) -> str:
    lines = [
        format_heading("Project Deleted Successfully", 1),
        "",
        format_heading("Deletion Details", 2),
        format_bullet_list({"Deleted Project ID": project_id, "Status": "Permanently deleted"}),
        "",
        format_heading("⚠️ Important", 2),
        "- This action cannot be undone",
        "- All translation keys and data have been permanently removed",
        "- Team members will lose access to this project",
        "",
        format_footer("Project deleted"),
    ]
    return "\n".join(lines)


def format_empty_project_result(project_id: str) -> str:
    lines = [
        format_heading("Project Emptied Successfully", 1),
        "",
        format_heading("Operation Details", 2),
        format_bullet_list({
            "Project ID": project_id,
            "Keys Deleted": "All translation keys removed",
            "Project Status": "Empty project retained",
        }),
        "",
        format_recommendations([
            "Upload new translation files or create new keys",
            "Import content from backup if needed",
        ]),
        format_heading("Dashboard", 2),
        format_url(dashboard_url(project_id), "View Project in Lokalise Dashboard"),
        "",
        format_footer("Project emptied"),
    ]
    return "\n".join(lines)
