"""Markdown rendering for system and project languages."""

from itertools import groupby
from typing import Any, Dict, Optional

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_empty_state,
    format_footer,
    format_heading,
    format_progress,
    format_project_context,
    format_recommendations,
    format_safe_array,
    format_table,
    items_of,
)


def _name(language: Any) -> str:
    return field(language, "lang_name") or field(language, "lang_iso") or "Unknown"


def _language_info(language: Any) -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "Language ID": field(language, "lang_id"),
        "ISO Code": field(language, "lang_iso"),
        "Right-to-Left": bool(field(language, "is_rtl")),
    }
    plural_forms = field(language, "plural_forms", [])
    if plural_forms:
        info["Plural Forms"] = format_safe_array(plural_forms)
    return info


def _language_context(project_id: str, language: Any) -> str:
    return format_project_context(project_id, [
        {"path": f"/language/{field(language, 'lang_id')}", "label": "View Language in Lokalise Dashboard"},
    ])


def format_system_languages_list(collection: Any) -> str:
    languages = sorted(items_of(collection), key=lambda lang: _name(lang).lower())
    lines = [format_heading(f"Lokalise System Languages ({len(languages)})", 1), ""]

    if not languages:
        lines += [format_empty_state("system languages"), format_footer("List retrieved")]
        return "\n".join(lines)

    for letter, group in groupby(languages, key=lambda lang: _name(lang)[:1].upper()):
        lines += [format_heading(letter, 2), ""]
        for language in group:
            lines += [
                f"**{_name(language)}** ({field(language, 'lang_iso')})",
                "",
                format_bullet_list({"Name": _name(language), **_language_info(language)}),
                "",
            ]

    total_pages = field(collection, "page_count", 1)
    if total_pages and total_pages > 1:
        lines += [f"*Page {field(collection, 'current_page', 1)} of {total_pages}*", ""]

    lines.append(format_footer("List retrieved"))
    return "\n".join(lines)


def format_project_languages(
    collection: Any,
    project_id: str,
    progress: Optional[Dict[int, Any]] = None,
) -> str:
    """
    Render the languages of a project.

    Args:
        collection: Project languages
        project_id: Project the languages belong to
        progress: Optional per-language statistics keyed by language ID
    """
    languages = sorted(items_of(collection), key=lambda lang: _name(lang).lower())
    lines = [format_heading(f"Project Languages ({len(languages)})", 1), ""]

    if not languages:
        lines += [
            format_empty_state("languages", "this project", [
                "Add languages to start translating your content",
                "Set up target languages for your translations",
            ]),
            format_project_context(project_id),
            format_footer("List retrieved"),
        ]
        return "\n".join(lines)

    for language in languages:
        info = _language_info(language)
        if progress is not None:
            stat = progress.get(field(language, "lang_id"))
            if stat is None:
                info["Progress"] = "Not available"
            else:
                info["Progress"] = format_progress(field(stat, "progress", 0))
                info["Words To Do"] = field(stat, "words_to_do", 0)
        lines += [format_heading(_name(language), 2), "", format_bullet_list(info), ""]

    lines += [format_project_context(project_id), format_footer("List retrieved")]
    return "\n".join(lines)


def format_language_details(language: Any, project_id: str) -> str:
    lines = [
        format_heading(f"Language: {_name(language)}", 1),
        "",
        format_heading("Language Information", 2),
        format_bullet_list({"Language Name": _name(language), **_language_info(language)}),
        "",
        _language_context(project_id, language),
        format_footer("Details retrieved"),
    ]
    return "\n".join(lines)


def format_add_languages_result(created: Any, project_id: str) -> str:
    languages = items_of(created)
    lines = [
        format_heading("Languages Added Successfully", 1),
        "",
        format_heading("Operation Summary", 2),
        format_bullet_list({"Languages Added": len(languages), "Project ID": project_id}),
        "",
    ]

    if languages:
        rows = [
            {"name": _name(lang), "iso": field(lang, "lang_iso"), "id": field(lang, "lang_id")}
            for lang in languages
        ]
        lines += [
            format_heading("Added Languages", 2),
            format_table(rows, [
                {"key": "name", "header": "Language Name"},
                {"key": "iso", "header": "ISO Code"},
                {"key": "id", "header": "Language ID"},
            ]),
            "",
        ]

    errors = field(created, "errors", []) or []
    if errors:
        lines.append(format_heading("⚠️ Errors", 2))
        lines.extend(f"- {field(error, 'message', 'Unknown error')}" for error in errors)
        lines.append("")

    lines += [
        format_recommendations([
            "Start translating existing keys into the new languages",
            "Assign translators to work on specific languages",
            "Review language-specific settings and plural forms",
        ]),
        format_project_context(project_id),
        format_footer("Languages added"),
    ]
    return "\n".join(lines)


def format_update_language_result(language: Any, project_id: str) -> str:
    lines = [
        format_heading("Language Updated Successfully", 1),
        "",
        format_heading("Updated Language Information", 2),
        format_bullet_list({"Language Name": _name(language), **_language_info(language)}),
        "",
        _language_context(project_id, language),
        format_footer("Language updated"),
    ]
    return "\n".join(lines)


def format_remove_language_result(result: Any, project_id: str, language_id: int) -> str:
    lines = [
        format_heading("Language Removed Successfully", 1),
        "",
        format_heading("Removal Details", 2),
        format_bullet_list({
            "Removed Language ID": language_id,
            "Project ID": field(result, "project_id", project_id),
            "Removed": "Yes" if field(result, "language_deleted", True) else "No",
        }),
        "",
        format_heading("⚠️ Important", 2),
        "- All translations for this language have been permanently removed",
        "- This action cannot be undone",
        "- Team members assigned to this language will lose access",
        "",
        format_project_context(project_id),
        format_footer("Language removed"),
    ]
    return "\n".join(lines)
