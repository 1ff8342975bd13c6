"""
Markdown formatting helpers shared by all domain formatters.

Lokalise SDK models expose API fields as attributes, while tests and some
endpoints hand back plain dictionaries; :func:`field` reads either.
"""

import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from lokalise_mcp.config import config

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}")
_TZ_SUFFIX_RE = re.compile(r"\s*(\([^)]*\)|UTC)$")

PLATFORMS = ("ios", "android", "web", "other")


def field(obj: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a model object or a mapping."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        value = obj.get(name, default)
    else:
        value = getattr(obj, name, default)
    return default if value is None else value


def items_of(collection: Any) -> List[Any]:
    """Items of an SDK collection, a dict with ``items`` or a plain list."""
    if collection is None:
        return []
    if isinstance(collection, (list, tuple)):
        return list(collection)
    return list(field(collection, "items", []) or [])


def parse_date(value: Union[str, datetime, int, float, None]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)

    # Lokalise renders dates as "2018-12-09 19:08:28 (Etc/UTC)"
    text = _TZ_SUFFIX_RE.sub("", str(value).strip()).replace("Z", "+00:00")
    parsed = datetime.fromisoformat(text)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def format_date(value: Union[str, datetime, int, float, None] = None) -> str:
    """Format a date as ``YYYY-MM-DD HH:MM:SS UTC``."""
    if value is None or value == "":
        return "Not available"
    try:
        parsed = parse_date(value)
    except (ValueError, OverflowError, OSError):
        return "Invalid date"
    return parsed.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_url(url: Optional[str] = None, title: Optional[str] = None) -> str:
    if not url:
        return "Not available"
    return f"[{title or url}]({url})"


def format_heading(text: str, level: int = 1) -> str:
    level = min(max(level, 1), 6)
    return f"{'#' * level} {text}"


def format_bool(value: Any) -> str:
    return "Yes" if value else "No"


def format_value(value: Any) -> str:
    """Render a scalar for Markdown: links, dates and Yes/No booleans."""
    if value is None:
        return "Not available"
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, datetime):
        return format_date(value)
    if isinstance(value, Mapping) and isinstance(value.get("url"), str):
        return format_url(value["url"], value.get("title"))
    if isinstance(value, str):
        if value.startswith(("http://", "https://")):
            return format_url(value)
        if _ISO_DATE_RE.match(value):
            formatted = format_date(value)
            return value if formatted == "Invalid date" else formatted
        return value
    return str(value)


def format_bullet_list(
    items: Mapping[str, Any],
    key_formatter: Optional[Callable[[str], str]] = None,
) -> str:
    """Render ``- **key**: value`` lines, skipping ``None`` values."""
    lines = []
    for key, value in items.items():
        if value is None:
            continue
        label = key_formatter(key) if key_formatter else key
        lines.append(f"- **{label}**: {format_value(value)}")
    return "\n".join(lines)


def format_separator() -> str:
    return "---"


def format_safe_array(
    values: Optional[Iterable[Any]],
    empty_message: str = "None",
    separator: str = ", ",
) -> str:
    values = [str(v) for v in (values or [])]
    if not values:
        return empty_message
    return separator.join(values)


def format_platforms(platforms: Optional[Iterable[str]]) -> str:
    return format_safe_array(platforms, empty_message="None")


def format_platform_data(obj: Any, empty_message: str = "Not configured") -> str:
    """Render per-platform values (e.g. key names) as a bullet list."""
    if not obj:
        return empty_message
    lines = []
    for platform in PLATFORMS:
        value = field(obj, platform)
        if value:
            lines.append(f"- **{platform.upper()}:** `{value}`")
    return "\n".join(lines) if lines else empty_message


def get_status_icon(progress: float) -> str:
    if progress >= 100:
        return "✅"
    if progress >= 95:
        return "🟡"
    if progress >= 70:
        return "🔄"
    return "🔴"


def format_progress(progress: float) -> str:
    return f"{get_status_icon(progress)} {progress}%"


def format_truncated(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return f"{text[:max_length - 3]}..."


def format_table(
    rows: Sequence[Any],
    columns: Sequence[Dict[str, Any]],
) -> str:
    """
    Render a Markdown table.

    Args:
        rows: Row objects or mappings
        columns: Column specs with ``key``, ``header`` and optional
            ``formatter`` (value -> str) and ``max_width``

    Returns:
        Table text, or an empty string when there are no rows
    """
    if not rows:
        return ""

    lines = [
        "| " + " | ".join(col["header"] for col in columns) + " |",
        "|" + "|".join("---" for _ in columns) + "|",
    ]

    for row in rows:
        cells = []
        for col in columns:
            value = field(row, col["key"])
            formatter = col.get("formatter")
            text = formatter(value) if formatter else format_value(value)
            text = str(text).replace("\n", " ").replace("|", "\\|")
            max_width = col.get("max_width")
            if max_width and len(text) > max_width:
                text = format_truncated(text, max_width)
            cells.append(text)
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(lines)


def format_statistics(stats: Mapping[str, Any], title: str = "Statistics") -> str:
    return "\n".join([format_heading(title, 3), "", format_bullet_list(stats), ""])


def format_empty_state(
    entity_type: str,
    context: Optional[str] = None,
    suggestions: Sequence[str] = (),
) -> str:
    context_text = f" in {context}" if context else ""
    lines = [f"**No {entity_type} found{context_text}.**", ""]
    if suggestions:
        lines.append("This could mean:")
        lines.extend(f"- {suggestion}" for suggestion in suggestions)
        lines.append("")
    return "\n".join(lines)


def format_pagination_info(
    has_more: bool,
    cursor: Union[str, int, None] = None,
    current_count: Optional[int] = None,
) -> str:
    """Render a pagination notice, or nothing when there is no more data."""
    if not has_more:
        return ""

    item_text = f" - showing {current_count} items" if current_count else ""
    lines = [
        format_heading("Pagination Information", 2),
        "",
        f"⚠️ **This is a paginated result**{item_text} out of potentially more.",
        "",
    ]
    if cursor is not None:
        lines.append(f"- **Next Cursor:** `{cursor}`")
    lines.append("- **Has More Data:** Yes")
    lines.append("- **Recommendation:** Use the cursor to fetch additional items for complete analysis")
    lines.append("")
    return "\n".join(lines)


def format_page_info(collection: Any, shown: int) -> str:
    """Page-number pagination notice from an SDK collection."""
    current = field(collection, "current_page")
    pages = field(collection, "page_count")
    total = field(collection, "total_count")
    if not current or not pages:
        return ""
    line = f"*Page {current} of {pages}"
    if total is not None:
        line += f" ({shown} shown, {total} total)"
    return line + "*"


def format_error_list(errors: Sequence[Mapping[str, Any]]) -> str:
    if not errors:
        return ""

    lines = [format_heading("❌ Errors", 2), ""]
    for index, error in enumerate(errors, start=1):
        info: Dict[str, Any] = {"Message": error.get("message") or "Unknown error"}
        if error.get("code"):
            info["Code"] = f"`{error['code']}`"
        if error.get("key"):
            info["Key"] = f"`{error['key']}`"
        if error.get("key_id"):
            info["Key ID"] = error["key_id"]
        lines.extend([format_heading(f"Error {index}", 3), "", format_bullet_list(info), ""])
    return "\n".join(lines)


def format_recommendations(recommendations: Sequence[str], title: str = "Next Steps") -> str:
    if not recommendations:
        return ""
    lines = [format_heading(title, 2), ""]
    lines.extend(f"- {item}" for item in recommendations)
    lines.append("")
    return "\n".join(lines)


def format_footer(action: str = "retrieved", context: Optional[str] = None) -> str:
    context_text = f" {context}" if context else ""
    timestamp = format_date(datetime.now(timezone.utc))
    return "\n".join([
        format_separator(),
        f"*{action[:1].upper() + action[1:]} at {timestamp}*{context_text}",
    ])


def project_url(project_id: str) -> str:
    return f"https://app.{config.get_lokalise_hostname()}/project/{project_id}"


def format_project_context(
    project_id: str,
    sections: Sequence[Mapping[str, str]] = (),
) -> str:
    base_url = project_url(project_id)
    lines = [format_heading("Project", 2), format_url(base_url, "View Project in Lokalise Dashboard")]
    for section in sections:
        url = f"{base_url}{section['path']}" if section.get("path") else base_url
        icon = f"{section['icon']} " if section.get("icon") else ""
        lines.append(format_url(url, f"{icon}{section['label']}"))
    lines.append("")
    return "\n".join(lines)


def format_percentage(value: float, total: float) -> str:
    if total == 0:
        return "0%"
    return f"{round(value / total * 100)}%"


def join_sections(*sections: Optional[str]) -> str:
    """Join non-empty Markdown sections with blank lines."""
    return "\n\n".join(s.rstrip("\n") for s in sections if s)


def format_page_navigation(collection: Any) -> str:
    """Pagination section with next/previous page hints for page-based lists."""
    current = field(collection, "current_page", 1)
    pages = field(collection, "page_count", 1)
    if not pages or pages <= 1:
        return ""

    lines = [format_heading("Pagination", 2), f"Page {current} of {pages}"]
    if current < pages:
        lines.append(f"- Next page: {current + 1}")
    if current > 1:
        lines.append(f"- Previous page: {current - 1}")
    lines.append("")
    return "\n".join(lines)


def format_page_summary(collection: Any, shown: int) -> Dict[str, Any]:
    """Summary fields of a page-based collection."""
    return {
        "Total": field(collection, "total_count", shown),
        "Current Page": field(collection, "current_page", 1),
        "Total Pages": field(collection, "page_count", 1),
        "Results Per Page": field(collection, "per_page", shown),
    }
