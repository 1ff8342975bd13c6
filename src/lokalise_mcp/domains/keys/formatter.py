"""Markdown rendering for translation keys."""

import json
from typing import Any, List

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_error_list,
    format_footer,
    format_heading,
    format_page_info,
    format_percentage,
    format_platform_data,
    format_platforms,
    format_table,
    format_truncated,
    items_of,
)

PLATFORM_NAMES = {"ios": "iOS", "android": "Android", "web": "Web", "other": "Other"}


def display_key_name(key_name: Any) -> str:
    """Single display string for a key name (plain or per platform)."""
    if key_name is None:
        return "Unnamed"
    if isinstance(key_name, str):
        return key_name
    for platform in ("web", "ios", "android", "other"):
        value = field(key_name, platform)
        if value:
            return value
    return "Unnamed"


def _key_status(key: Any) -> str:
    parts = []
    if field(key, "is_hidden"):
        parts.append("🔒Hidden")
    if field(key, "is_archived"):
        parts.append("📦Archived")
    if field(key, "is_plural"):
        parts.append("🔢Plural")
    comments = field(key, "comments", [])
    if comments:
        parts.append(f"💬{len(comments)}")
    screenshots = field(key, "screenshots", [])
    if screenshots:
        parts.append(f"📷{len(screenshots)}")
    return " ".join(parts) if parts else "✅Standard"


def _translation_status(translation: Any) -> str:
    text = field(translation, "translation", "")
    if field(translation, "is_unverified"):
        return "⚠️ Unverified"
    if field(translation, "is_reviewed"):
        return "✅ Reviewed"
    if not str(text).strip():
        return "❌ Empty"
    return "⏳ Pending Review"


def _short_tags(tags: List[str]) -> str:
    if not tags:
        return "None"
    if len(tags) > 2:
        return f"{', '.join(tags[:2])}+{len(tags) - 2}"
    return ", ".join(tags)


def _has_text(value: Any) -> bool:
    return bool(value and str(value).strip())


def format_keys_list(collection: Any, project_id: str) -> str:
    keys = items_of(collection)
    lines = [
        format_heading("Translation Keys Analysis", 1),
        "",
        format_heading(f"Project: {project_id}", 2),
        "",
    ]

    if not keys:
        lines.append(format_empty_state("keys", "this project", [
            "The project is newly created",
            "All keys have been deleted",
            "Filter criteria excluded all keys",
            "You may not have permission to view keys",
        ]))
        lines.append(format_footer("Analysis completed"))
        return "\n".join(lines)

    total = len(keys)
    platform_counts = {
        platform: sum(1 for k in keys if platform in (field(k, "platforms", []) or []))
        for platform in PLATFORM_NAMES
    }
    with_description = sum(1 for k in keys if _has_text(field(k, "description")))
    with_tags = sum(1 for k in keys if field(k, "tags"))
    with_comments = sum(1 for k in keys if field(k, "comments"))
    with_screenshots = sum(1 for k in keys if field(k, "screenshots"))
    hidden = sum(1 for k in keys if field(k, "is_hidden"))
    archived = sum(1 for k in keys if field(k, "is_archived"))
    plural = sum(1 for k in keys if field(k, "is_plural"))
    translated_keys = [k for k in keys if field(k, "translations")]
    translation_total = sum(len(field(k, "translations", [])) for k in translated_keys)

    lines += [format_heading("Executive Summary", 2), "", f"**{total} translation keys** found in this project.", ""]

    lines += [format_heading("Key Distribution", 3), ""]
    for platform, count in platform_counts.items():
        lines.append(f"- **{platform.upper()} Platform:** {count} keys ({format_percentage(count, total)})")
    lines.append("")

    lines += [format_heading("Content Quality Indicators", 3), ""]
    for label, value in (
        ("Keys with Descriptions", with_description),
        ("Keys with Tags", with_tags),
        ("Keys with Comments", with_comments),
        ("Keys with Screenshots", with_screenshots),
    ):
        lines.append(f"- **{label}:** {value}/{total} ({format_percentage(value, total)})")
    lines.append("")

    lines += [format_heading("Status Overview", 3), ""]
    for label, value in (("Hidden Keys", hidden), ("Archived Keys", archived), ("Plural Keys", plural)):
        lines.append(f"- **{label}:** {value} ({format_percentage(value, total)})")
    lines.append("")

    if translated_keys:
        average = round(translation_total / len(translated_keys), 2)
        lines += [
            format_heading("Translation Status", 3),
            "",
            f"- **Keys with Translation Data:** {len(translated_keys)}/{total}",
            f"- **Total Translations:** {translation_total}",
            f"- **Average Translations per Key:** {average}",
            "",
        ]

    lines += [format_heading("Detailed Keys Inventory", 2), ""]
    rows = [
        {
            "id": field(k, "key_id", "N/A"),
            "key_name": display_key_name(field(k, "key_name")),
            "description": field(k, "description") or "*No description*",
            "platforms": format_platforms(field(k, "platforms")),
            "tags": _short_tags(field(k, "tags", [])),
            "status": _key_status(k),
            "context": field(k, "context") or "None",
        }
        for k in keys
    ]
    lines.append(format_table(rows, [
        {"key": "id", "header": "ID"},
        {"key": "key_name", "header": "Key Name", "formatter": lambda v: f"`{v}`"},
        {"key": "description", "header": "Description", "max_width": 40},
        {"key": "platforms", "header": "Platforms"},
        {"key": "tags", "header": "Tags"},
        {"key": "status", "header": "Status"},
        {"key": "context", "header": "Context", "max_width": 30},
    ]))
    lines.append("")

    recommendations = []
    missing_description = total - with_description
    if missing_description:
        recommendations.append(
            f"**{missing_description} keys without descriptions** - consider adding descriptions for better translator context"
        )
    if total - with_tags:
        recommendations.append(f"**{total - with_tags} keys without tags** - tags help with organization and filtering")
    no_platforms = sum(1 for k in keys if not field(k, "platforms"))
    if no_platforms:
        recommendations.append(f"**{no_platforms} keys without platform assignments** - may indicate configuration issues")
    if hidden:
        recommendations.append(f"**{hidden} hidden keys** - verify these should remain hidden from translators")
    if archived:
        recommendations.append(f"**{archived} archived keys** - these are inactive and may need cleanup")

    if recommendations:
        lines += [format_heading("Recommendations for Improvement", 3), ""]
        lines += [f"- {item}" for item in recommendations]
        lines.append("")

    lines += [format_heading("Platform-Specific Analysis", 3), ""]
    for platform, name in PLATFORM_NAMES.items():
        count = platform_counts[platform]
        percentage = round(count / total * 100)
        if percentage == 100:
            coverage = "Universal coverage ✅"
        elif percentage > 75:
            coverage = "High coverage"
        elif percentage > 50:
            coverage = "Moderate coverage"
        elif percentage > 0:
            coverage = "Limited coverage ⚠️"
        else:
            coverage = "No keys assigned ❌"
        lines.append(f"- **{name}:** {count} keys ({percentage}%) - {coverage}")
    lines.append("")

    most_used = max(platform_counts, key=platform_counts.get)
    lines += [
        format_heading("Summary for Analysis", 2),
        "",
        f"**Project {project_id} contains {total} translation keys** with the following characteristics:",
        "",
        f"- **Most used platform: {most_used}**",
        f"- **Content maturity: {format_percentage(with_description, total)} of keys have descriptions**",
        f"- **Organization level: {format_percentage(with_tags, total)} of keys are tagged**",
        f"- **Collaboration activity: {with_comments} keys have comments**",
        f"- **Visual context: {with_screenshots} keys have screenshots**",
    ]
    if hidden or archived:
        lines.append(f"- **Maintenance needed:** {hidden + archived} keys are archived or hidden")
    lines.append("")

    page_info = format_page_info(collection, total)
    if page_info:
        lines += [page_info, ""]

    lines.append(format_footer("Analysis completed", f"Showing {total} keys from project `{project_id}`"))
    return "\n".join(lines)


def format_key_details(key: Any, project_id: str) -> str:
    lines = [format_heading("Translation Key Details", 1), ""]

    lines.append(format_heading("Core Identification", 2))
    lines.append(format_bullet_list({
        "Key ID": field(key, "key_id"),
        "Project ID": f"`{project_id}`",
        "Description": field(key, "description") or "*No description provided*",
        "Context": field(key, "context") or "*No context specified*",
    }))
    lines.append("")

    key_name = field(key, "key_name")
    lines += [format_heading("Platform-Specific Key Names", 2), ""]
    if isinstance(key_name, str):
        lines.append(f"`{key_name}`")
    else:
        lines.append(format_platform_data(key_name, "No platform-specific values set"))
    lines.append("")

    lines += [format_heading("Platform-Specific Filenames", 2), ""]
    lines += [format_platform_data(field(key, "filenames"), "No platform-specific values set"), ""]

    platforms = field(key, "platforms", [])
    lines += [format_heading("Platform Assignments", 2), ""]
    if platforms:
        lines += [f"**Assigned Platforms:** {len(platforms)}", ""]
        lines += [f"- **{p.upper()}** - Active on this platform" for p in platforms]
    else:
        lines.append("*No platforms assigned - this key is not targeted to any specific platform*")
    lines.append("")

    tags = field(key, "tags", [])
    lines += [format_heading("Tags and Organization", 2), ""]
    if tags:
        lines += [f"**Total Tags:** {len(tags)}", ""]
        lines += [f"- `{tag}`" for tag in tags]
    else:
        lines.append("*No tags assigned - consider adding tags for better organization*")
    lines.append("")

    char_limit = field(key, "char_limit", 0)
    base_words = field(key, "base_words", 0)
    is_plural = field(key, "is_plural", False)
    lines.append(format_heading("Content Specifications", 2))
    lines.append(format_bullet_list({
        "Character Limit": f"{char_limit} characters" if char_limit else "No limit set",
        "Base Word Count": f"{base_words} words" if base_words else "Not calculated",
        "Supports Pluralization": is_plural,
        "Plural Form Name": f"`{field(key, 'plural_name')}`" if is_plural else "Not set",
    }))
    lines.append("")

    lines.append(format_heading("Status and Visibility", 2))
    lines.append(format_bullet_list({
        "Visibility": "🔒 Hidden from translators" if field(key, "is_hidden") else "👁️ Visible to translators",
        "Archive Status": "📦 Archived (inactive)" if field(key, "is_archived") else "✅ Active",
    }))
    lines.append("")

    lines.append(format_heading("Timeline Information", 2))
    lines.append(format_bullet_list({
        "Created": format_date(field(key, "created_at")),
        "Last Modified": format_date(field(key, "modified_at")),
        "Translations Last Modified": format_date(field(key, "translations_modified_at")),
    }))
    lines.append("")

    custom_attributes = field(key, "custom_attributes")
    if custom_attributes:
        lines += [format_heading("Custom Attributes", 2), ""]
        try:
            parsed = json.loads(custom_attributes) if isinstance(custom_attributes, str) else custom_attributes
        except ValueError:
            parsed = None
        if isinstance(parsed, dict) and parsed:
            lines += [f"- **{name}:** {value}" for name, value in parsed.items()]
        elif isinstance(parsed, dict):
            lines.append("*No custom attributes defined*")
        else:
            lines.append(f"Raw value: `{custom_attributes}`")
        lines.append("")

    translations = field(key, "translations", [])
    lines += [format_heading("Translation Status", 2), ""]
    if translations:
        count = len(translations)
        reviewed = sum(1 for t in translations if field(t, "is_reviewed"))
        unverified = sum(1 for t in translations if field(t, "is_unverified"))
        empty = sum(1 for t in translations if not _has_text(field(t, "translation")))
        lines += [f"**Total Languages:** {count}", ""]
        lines.append(format_heading("Translation Statistics", 3))
        lines.append(format_bullet_list({
            "Reviewed": f"{reviewed}/{count} ({format_percentage(reviewed, count)})",
            "Unverified": f"{unverified}/{count} ({format_percentage(unverified, count)})",
            "Empty/Missing": f"{empty}/{count} ({format_percentage(empty, count)})",
        }))
        lines += ["", format_heading("Translation Details", 3), ""]
        rows = [
            {
                "language": field(t, "language_iso", "Unknown"),
                "translation": field(t, "translation") or "*Empty*",
                "status": _translation_status(t),
                "words": field(t, "words", 0),
                "modified": format_date(field(t, "modified_at")),
            }
            for t in translations
        ]
        lines.append(format_table(rows, [
            {"key": "language", "header": "Language"},
            {"key": "translation", "header": "Translation", "max_width": 60},
            {"key": "status", "header": "Status"},
            {"key": "words", "header": "Word Count"},
            {"key": "modified", "header": "Last Modified"},
        ]))
    else:
        lines.append("*No translation data included in this response.*")
    lines.append("")

    comments = field(key, "comments", [])
    lines += [format_heading("Comments and Collaboration", 2), ""]
    if comments:
        lines += [f"**Total Comments:** {len(comments)}", ""]
        for index, comment in enumerate(comments[:5], start=1):
            text = field(comment, "comment")
            lines.append(
                f"**Comment {index}** ({format_date(field(comment, 'added_at'))}): "
                f"{format_truncated(text, 100) if text else '*Empty comment*'}"
            )
            lines.append("")
        if len(comments) > 5:
            lines += [f"*... and {len(comments) - 5} more comments*", ""]
    else:
        lines += ["*No comments on this key yet*", ""]

    screenshots = field(key, "screenshots", [])
    lines += [format_heading("Visual Context", 2), ""]
    if screenshots:
        lines += [f"**Total Screenshots:** {len(screenshots)}", ""]
        for index, screenshot in enumerate(screenshots[:3], start=1):
            title = field(screenshot, "title") or f"Screenshot {index}"
            lines += [f"**{title}:** {field(screenshot, 'description') or 'No description'}", ""]
        if len(screenshots) > 3:
            lines += [f"*... and {len(screenshots) - 3} more screenshots*", ""]
    else:
        lines += ["*No screenshots attached - consider adding visual context for better translations*", ""]

    lines.append(format_footer("Key details retrieved"))
    return "\n".join(lines)


def _bulk_errors(result: Any) -> List[dict]:
    errors = field(result, "errors", []) or []
    return [
        {
            "message": field(e, "message"),
            "code": str(field(e, "code")) if field(e, "code") is not None else None,
            "key": display_key_name(field(field(e, "key"), "key_name")) if field(e, "key") else None,
            "key_id": field(e, "key_id"),
        }
        for e in errors
    ]


def format_create_keys_result(result: Any, project_id: str) -> str:
    created = items_of(result)
    errors = _bulk_errors(result)
    lines = [format_heading("Keys Creation Results", 1), "", f"**Project ID:** `{project_id}`", ""]
    lines.append(format_heading("Summary", 2))
    lines.append(format_bullet_list({
        "Successfully Created": f"{len(created)} keys",
        "Errors": len(errors),
        "Total Requested": len(created) + len(errors),
    }))
    lines.append("")

    if created:
        lines += [format_heading("✅ Successfully Created Keys", 2), ""]
        rows = [
            {
                "key_id": field(k, "key_id", "N/A"),
                "key_name": display_key_name(field(k, "key_name")),
                "platforms": format_platforms(field(k, "platforms")),
            }
            for k in created
        ]
        lines.append(format_table(rows, [
            {"key": "key_id", "header": "Key ID"},
            {"key": "key_name", "header": "Key Name", "formatter": lambda v: f"`{v}`"},
            {"key": "platforms", "header": "Platforms"},
        ]))
        lines.append("")

    if errors:
        lines.append(format_error_list(errors))
    lines.append(format_footer("Keys creation completed"))
    return "\n".join(lines)


def format_update_key_result(key: Any, project_id: str) -> str:
    name = display_key_name(field(key, "key_name"))
    lines = [
        format_heading("Key Update Successful", 1),
        "",
        f"**Key `{name}` (ID: {field(key, 'key_id')}) has been updated successfully.**",
        "",
        format_heading("Updated Key Details", 2),
        format_bullet_list({
            "Key ID": field(key, "key_id"),
            "Key Name": f"`{name}`",
            "Project ID": f"`{project_id}`",
            "Description": field(key, "description") or "No description",
            "Last Modified": format_date(field(key, "modified_at")),
        }),
        "",
        format_heading("Platforms", 3),
    ]
    platforms = field(key, "platforms", [])
    lines += [f"- {p}" for p in platforms] if platforms else ["*No platforms specified*"]
    lines += ["", format_heading("Tags", 3)]
    tags = field(key, "tags", [])
    lines += [f"- `{t}`" for t in tags] if tags else ["*No tags assigned*"]
    lines += ["", format_footer("Key updated")]
    return "\n".join(lines)


def format_delete_key_result(result: Any, project_id: str, key_id: int) -> str:
    return "\n".join([
        format_heading("Key Deletion Successful", 1),
        "",
        f"**Key with ID {key_id} has been successfully deleted from project `{project_id}`.**",
        "",
        format_heading("Details", 2),
        format_bullet_list({
            "Deleted Key ID": key_id,
            "Project ID": f"`{project_id}`",
            "Status": "✅ Confirmed removed" if field(result, "key_removed") else "Processing",
        }),
        "",
        "> **Note:** This action cannot be undone. All translations associated with this key have also been deleted.",
        "",
        format_footer("Key deleted"),
    ])


def format_bulk_update_keys_result(result: Any, project_id: str) -> str:
    updated = items_of(result)
    errors = _bulk_errors(result)
    lines = [format_heading("Bulk Keys Update Results", 1), "", f"**Project ID:** `{project_id}`", ""]
    lines.append(format_heading("Summary", 2))
    lines.append(format_bullet_list({
        "Successfully Updated": f"{len(updated)} keys",
        "Errors": len(errors),
        "Total Requested": len(updated) + len(errors),
    }))
    lines.append("")

    if updated:
        lines += [format_heading("✅ Successfully Updated Keys", 2), ""]
        rows = [
            {
                "key_id": field(k, "key_id", "N/A"),
                "key_name": display_key_name(field(k, "key_name")),
                "modified": format_date(field(k, "modified_at")),
            }
            for k in updated
        ]
        lines.append(format_table(rows, [
            {"key": "key_id", "header": "Key ID"},
            {"key": "key_name", "header": "Key Name", "formatter": lambda v: f"`{v}`"},
            {"key": "modified", "header": "Last Modified"},
        ]))
        lines.append("")

    if errors:
        lines.append(format_error_list(errors))
    lines.append(format_footer("Bulk update completed"))
    return "\n".join(lines)


def format_bulk_delete_keys_result(result: Any, project_id: str, requested_count: int) -> str:
    return "\n".join([
        format_heading("Bulk Keys Deletion Successful", 1),
        "",
        f"**{requested_count} keys have been successfully deleted from project `{project_id}`.**",
        "",
        format_heading("Details", 2),
        format_bullet_list({
            "Deleted Keys Count": requested_count,
            "Project ID": f"`{project_id}`",
            "Status": "✅ All keys confirmed removed" if field(result, "keys_removed") else "Processing",
        }),
        "",
        "> **Note:** This action cannot be undone. All translations associated with these keys have also been deleted.",
        "",
        format_footer("Bulk deletion completed"),
    ])
