"""Tests for the Markdown formatting helpers."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from lokalise_mcp.core.formatting import (
    field,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_page_navigation,
    format_pagination_info,
    format_percentage,
    format_platform_data,
    format_progress,
    format_table,
    format_truncated,
    format_value,
    items_of,
    join_sections,
)
from lokalise_mcp.domains.glossary.formatter import format_term_flags, term_attr
from lokalise_mcp.domains.tasks.formatter import format_due_status
from lokalise_mcp.domains.translations.formatter import format_qa_issues, format_translations_list

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestAccessors:
    """Test field and items_of."""

    def test_field_reads_attributes_and_keys(self):
        """Test reading from objects and dictionaries alike."""
        assert field(SimpleNamespace(name="Web"), "name") == "Web"
        assert field({"name": "Web"}, "name") == "Web"
        assert field({"name": None}, "name", "fallback") == "fallback"
        assert field(None, "name", "fallback") == "fallback"

    def test_items_of(self):
        """Test items of collections, dictionaries and lists."""
        assert items_of(SimpleNamespace(items=[1, 2])) == [1, 2]
        assert items_of({"items": [3]}) == [3]
        assert items_of([4, 5]) == [4, 5]
        assert items_of(None) == []


class TestDates:
    """Test date formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2018-12-09 19:08:28 (Etc/UTC)", "2018-12-09 19:08:28 UTC"),
            ("2024-01-15T10:30:00Z", "2024-01-15 10:30:00 UTC"),
            ("2024-01-15T12:30:00+02:00", "2024-01-15 10:30:00 UTC"),
            ("2024-01-15 10:30:00 UTC", "2024-01-15 10:30:00 UTC"),
            (0, "1970-01-01 00:00:00 UTC"),
        ],
    )
    def test_format_date(self, value, expected):
        """Test the API date forms are normalized to UTC."""
        assert format_date(value) == expected

    def test_missing_and_invalid(self):
        """Test missing and unparsable dates."""
        assert format_date(None) == "Not available"
        assert format_date("") == "Not available"
        assert format_date("yesterday") == "Invalid date"

    def test_format_value_keeps_unparsable_date_text(self):
        """Test that date-like text with trailing notes is left alone."""
        text = "2024-01-15 10:30:00 UTC (🔴 overdue)"
        assert format_value(text) == text


class TestValues:
    """Test scalar and list rendering."""

    def test_format_value(self):
        """Test booleans, URLs and plain values."""
        assert format_value(True) == "Yes"
        assert format_value(None) == "Not available"
        assert format_value("https://lokalise.com") == "[https://lokalise.com](https://lokalise.com)"
        assert format_value({"url": "https://x.io", "title": "X"}) == "[X](https://x.io)"
        assert format_value(42) == "42"

    def test_bullet_list_skips_none(self):
        """Test that None values are omitted."""
        text = format_bullet_list({"Name": "Web", "Description": None, "Active": False})
        assert text == "- **Name**: Web\n- **Active**: No"

    def test_truncated(self):
        assert format_truncated("short", 10) == "short"
        assert format_truncated("a" * 20, 10) == "aaaaaaa..."

    def test_percentage_and_progress(self):
        """Test percentage rounding and progress icons."""
        assert format_percentage(1, 3) == "33%"
        assert format_percentage(5, 0) == "0%"
        assert format_progress(100) == "✅ 100%"
        assert format_progress(50) == "🔴 50%"

    def test_platform_data(self):
        """Test per-platform key names."""
        text = format_platform_data({"ios": "welcome_ios", "web": "welcome.web"})
        assert text == "- **IOS:** `welcome_ios`\n- **WEB:** `welcome.web`"
        assert format_platform_data(None) == "Not configured"


class TestTable:
    """Test format_table."""

    def test_renders_rows(self):
        """Test header, separator and cells."""
        rows = [{"id": 1, "name": "Home | Title"}, SimpleNamespace(id=2, name="Footer")]
        columns = [{"key": "id", "header": "ID"}, {"key": "name", "header": "Name"}]

        lines = format_table(rows, columns).split("\n")

        assert lines[0] == "| ID | Name |"
        assert lines[1] == "|---|---|"
        assert lines[2] == "| 1 | Home \\| Title |"
        assert lines[3] == "| 2 | Footer |"

    def test_formatter_and_max_width(self):
        """Test per-column formatters and truncation."""
        rows = [{"name": "a very long key name"}]
        columns = [{"key": "name", "header": "Name", "formatter": str.upper, "max_width": 10}]

        assert format_table(rows, columns).split("\n")[2] == "| A VERY ... |"

    def test_empty(self):
        assert format_table([], [{"key": "id", "header": "ID"}]) == ""


class TestSections:
    """Test section level helpers."""

    def test_empty_state(self):
        """Test the empty state with suggestions."""
        text = format_empty_state("keys", "project p1", ["The project is new"])
        assert text.startswith("**No keys found in project p1.**")
        assert "- The project is new" in text

    def test_pagination_info(self):
        """Test the cursor pagination notice."""
        assert format_pagination_info(False) == ""
        text = format_pagination_info(True, "abc", 100)
        assert "showing 100 items" in text
        assert "- **Next Cursor:** `abc`" in text

    def test_page_navigation(self):
        """Test page-based navigation hints."""
        text = format_page_navigation({"current_page": 2, "page_count": 3})
        assert "Page 2 of 3" in text
        assert "- Next page: 3" in text
        assert "- Previous page: 1" in text
        assert format_page_navigation({"current_page": 1, "page_count": 1}) == ""

    def test_footer(self):
        assert format_footer("created").startswith("---\n*Created at ")

    def test_join_sections(self):
        assert join_sections("# A\n", None, "", "B") == "# A\n\nB"


class TestTaskDueStatus:
    """Test deadline status of tasks."""

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(days=-2), "🔴 **OVERDUE** by 2 days"),
            (timedelta(hours=12), "🟡 **DUE SOON** (tomorrow)"),
            (timedelta(days=3), "📅 **DUE THIS WEEK** (in 3 days)"),
            (timedelta(days=10), "✅ **ON SCHEDULE** (in 10 days)"),
        ],
    )
    def test_due_status(self, delta, expected):
        assert format_due_status((NOW + delta).isoformat(), NOW) == expected

    def test_no_deadline(self):
        assert format_due_status(None, NOW).startswith("⚠️ **NO DEADLINE**")

    def test_invalid_date(self):
        assert format_due_status("someday", NOW) == "Invalid date format"


class TestGlossaryTerms:
    """Test glossary attribute access."""

    def test_term_attr_reads_both_spellings(self):
        """Test snake_case and camelCase attribute names."""
        assert term_attr({"case_sensitive": True}, "case_sensitive") is True
        assert term_attr({"caseSensitive": True}, "case_sensitive") is True
        assert term_attr({}, "case_sensitive", False) is False

    def test_flags(self):
        """Test the flag summary of a term."""
        assert format_term_flags({"caseSensitive": True, "forbidden": True}) == "Case-sensitive, ⚠️ Forbidden"
        assert format_term_flags({"translatable": False}) == "Not translatable"
        assert format_term_flags({}) == "Standard"


class TestTranslationQaIssues:
    """Test QA issue labels."""

    def test_known_and_unknown_issues(self):
        assert format_qa_issues("spelling_and_grammar, custom") == "📝 Spelling & Grammar, custom"

    def test_filter_shown_in_list(self):
        text = format_translations_list({"items": []}, "double_space")
        assert "**QA issue filter:** ⏩ Double Space" in text
        assert "**No translations found in this query.**" in text
