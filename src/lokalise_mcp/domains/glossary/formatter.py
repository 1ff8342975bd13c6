"""Markdown rendering for glossary terms."""

from typing import Any, List

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_percentage,
    format_recommendations,
    format_table,
    format_truncated,
    items_of,
)


def term_attr(term: Any, name: str, default: Any = None) -> Any:
    """Read a glossary attribute stored either as snake_case or camelCase."""
    value = field(term, name)
    if value is None:
        head, *rest = name.split("_")
        value = field(term, head + "".join(part.title() for part in rest))
    return default if value is None else value


def format_term_flags(term: Any) -> str:
    flags = []
    if term_attr(term, "case_sensitive"):
        flags.append("Case-sensitive")
    if not term_attr(term, "translatable", True):
        flags.append("Not translatable")
    if term_attr(term, "forbidden"):
        flags.append("⚠️ Forbidden")
    return ", ".join(flags) or "Standard"


def _tags(term: Any) -> str:
    return ", ".join(term_attr(term, "tags", [])) or "-"


def _success_summary(succeeded: int, failed: int, verb: str) -> dict:
    total = succeeded + failed
    return {
        "Total Requested": total,
        f"Successfully {verb}": f"✅ {succeeded}",
        "Failed": f"❌ {failed}" if failed else "✅ 0",
        "Success Rate": format_percentage(succeeded, total) if total else "N/A",
    }


def _errors(result: Any) -> List[Any]:
    return list(field(result, "errors", []) or [])


def format_glossary_terms_list(collection: Any) -> str:
    terms = items_of(collection)
    lines = [format_heading(f"Glossary Terms ({len(terms)} items)", 1), ""]

    if not terms:
        lines.append(format_empty_state("glossary terms", "this project", [
            "Create your first glossary term to maintain translation consistency",
            "Define brand names and technical terms that shouldn't be translated",
            "Add forbidden terms that should never appear in translations",
        ]))
        lines.append(format_footer("List retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "id": term_attr(term, "id"),
            "term": term_attr(term, "term"),
            "description": format_truncated(term_attr(term, "description", ""), 53),
            "flags": format_term_flags(term),
            "translations": len(term_attr(term, "translations", [])),
            "tags": _tags(term),
        }
        for term in terms
    ]
    lines += [
        format_table(rows, [
            {"key": "id", "header": "ID"},
            {"key": "term", "header": "Term", "formatter": str},
            {"key": "description", "header": "Description", "formatter": str},
            {"key": "flags", "header": "Properties"},
            {"key": "translations", "header": "Translations"},
            {"key": "tags", "header": "Tags"},
        ]),
        "",
    ]

    next_cursor = field(collection, "next_cursor")
    if next_cursor:
        lines += [
            format_heading("Pagination", 2),
            f"- **Next cursor**: `{next_cursor}`",
            "- Use the cursor to fetch the next page of results",
            "",
        ]

    lines.append(format_footer("Glossary terms retrieved"))
    return "\n".join(lines)


def format_glossary_term_details(term: Any) -> str:
    translations = term_attr(term, "translations", [])
    tags = term_attr(term, "tags", [])
    lines = [
        format_heading(f"Glossary Term: {term_attr(term, 'term')}", 1),
        "",
        format_heading("Basic Information", 2),
        format_bullet_list({
            "ID": term_attr(term, "id"),
            "Term": term_attr(term, "term"),
            "Description": term_attr(term, "description") or "No description",
            "Project ID": term_attr(term, "project_id"),
            "Created": format_date(term_attr(term, "created_at")) if term_attr(term, "created_at") else None,
            "Updated": format_date(term_attr(term, "updated_at")) if term_attr(term, "updated_at") else None,
        }),
        "",
        format_heading("Properties", 2),
        format_bullet_list({
            "Case Sensitive": bool(term_attr(term, "case_sensitive")),
            "Translatable": bool(term_attr(term, "translatable", True)),
            "Forbidden": "⚠️ Yes" if term_attr(term, "forbidden") else "No",
        }),
        "",
    ]

    if tags:
        lines += [format_heading("Tags", 2), ", ".join(f"`{tag}`" for tag in tags), ""]

    lines.append(format_heading("Translations", 2))
    if translations:
        rows = [
            {
                "language": f"{term_attr(t, 'lang_name', 'Unknown')} ({term_attr(t, 'lang_iso', '?')})",
                "translation": term_attr(t, "translation") or "-",
                "description": term_attr(t, "description") or "-",
            }
            for t in translations
        ]
        lines.append(format_table(rows, [
            {"key": "language", "header": "Language"},
            {"key": "translation", "header": "Translation", "formatter": str},
            {"key": "description", "header": "Description", "formatter": str},
        ]))
    else:
        lines.append("*No translations available for this term.*")

    lines += ["", format_footer("Term details retrieved")]
    return "\n".join(lines)


def format_create_glossary_terms_result(result: Any) -> str:
    created = items_of(result)
    errors = _errors(result)
    lines = [
        format_heading("Glossary Terms Creation Result", 1),
        "",
        format_heading("Summary", 2),
        format_bullet_list(_success_summary(len(created), len(errors), "Created")),
        "",
    ]

    if created:
        rows = [
            {
                "id": term_attr(term, "id"),
                "term": term_attr(term, "term"),
                "properties": format_term_flags(term),
                "tags": _tags(term),
            }
            for term in created
        ]
        lines += [
            format_heading("Created Terms", 2),
            format_table(rows, [
                {"key": "id", "header": "ID"},
                {"key": "term", "header": "Term", "formatter": str},
                {"key": "properties", "header": "Properties"},
                {"key": "tags", "header": "Tags"},
            ]),
            "",
        ]

    if errors:
        lines.append(format_heading("⚠️ Errors", 2))
        lines.extend(f"- **Error**: {field(error, 'message') or 'Unknown error'}" for error in errors)
        lines.append("")

    lines += [
        format_recommendations([
            "Add translations for the created terms in different languages",
            "Review and update term properties as needed",
            "Use these terms to maintain consistency across translations",
        ]),
        format_footer("Terms creation completed"),
    ]
    return "\n".join(lines)


def format_update_glossary_terms_result(result: Any) -> str:
    updated = items_of(result)
    errors = _errors(result)
    lines = [
        format_heading("Glossary Terms Update Result", 1),
        "",
        format_heading("Summary", 2),
        format_bullet_list(_success_summary(len(updated), len(errors), "Updated")),
        "",
    ]

    if updated:
        rows = [
            {
                "id": term_attr(term, "id"),
                "term": term_attr(term, "term"),
                "updated": format_date(term_attr(term, "updated_at")) if term_attr(term, "updated_at") else "-",
            }
            for term in updated
        ]
        lines += [
            format_heading("Updated Terms", 2),
            format_table(rows, [
                {"key": "id", "header": "ID"},
                {"key": "term", "header": "Term", "formatter": str},
                {"key": "updated", "header": "Updated", "formatter": str},
            ]),
            "",
        ]

    if errors:
        lines.append(format_heading("⚠️ Errors", 2))
        lines.extend(f"- **Error**: {field(error, 'message') or 'Unknown error'}" for error in errors)
        lines.append("")

    lines.append(format_footer("Terms update completed"))
    return "\n".join(lines)


def format_delete_glossary_terms_result(result: Any) -> str:
    data = field(result, "data", result)
    deleted = field(data, "deleted", {})
    failed = list(field(data, "failed", []) or [])
    deleted_ids = list(field(deleted, "ids", []) or [])
    deleted_count = field(deleted, "count", len(deleted_ids))
    failed_count = sum(field(f, "count", 0) for f in failed)

    lines = [
        format_heading("Glossary Terms Deletion Result", 1),
        "",
        format_heading("Summary", 2),
        format_bullet_list(_success_summary(deleted_count, failed_count, "Deleted")),
        "",
    ]

    if deleted_ids:
        lines += [format_heading("Deleted Term IDs", 2), f"`{', '.join(str(i) for i in deleted_ids)}`", ""]

    if failed:
        lines.append(format_heading("⚠️ Failed Deletions", 2))
        for failure in failed:
            lines.append(f"- **IDs**: `{', '.join(str(i) for i in field(failure, 'ids', []))}`")
            lines.append(f"  **Reason**: {field(failure, 'message', 'Unknown')}")
        lines.append("")

    lines += [
        format_heading("⚠️ Important", 2),
        "- Deleted terms cannot be recovered",
        "- All translations for these terms have been removed",
        "",
        format_footer("Terms deletion completed"),
    ]
    return "\n".join(lines)
