"""
Tests for the prompt registry system.
"""

import pytest
from mcp.server.fastmcp import FastMCP

from lokalise_mcp.server.prompts import PromptRegistry, PromptTemplate, register_prompts


class TestPromptTemplate:
    """Test the PromptTemplate class."""

    @pytest.fixture
    def template(self):
        return PromptTemplate(
            name="test_template",
            title="Test",
            description="Test template",
            template="Review project '{project_id}' for {lang_iso}.",
            variables=["project_id", "lang_iso"],
        )

    def test_render_with_all_variables(self, template):
        """Test rendering with all variables provided."""
        result = template.render(project_id="123.abc", lang_iso="fr")
        assert result == "Review project '123.abc' for fr."

    def test_render_with_extra_variables(self, template):
        """Test that unused variables are ignored."""
        result = template.render(project_id="123.abc", lang_iso="fr", extra="ignored")
        assert result == "Review project '123.abc' for fr."

    def test_render_with_missing_variable(self, template):
        """Test that a missing variable is an error."""
        with pytest.raises(KeyError):
            template.render(project_id="123.abc")


class TestPromptRegistry:
    """Test the PromptRegistry class."""

    @pytest.fixture
    def registry(self):
        return PromptRegistry()

    def test_builtin_prompts_loaded(self, registry):
        """Test that the workflow prompts are loaded on initialization."""
        prompts = registry.get_all_prompts()

        assert set(prompts) == {
            "project_portfolio_overview",
            "project_deep_dive",
            "translation_progress_check",
            "missing_translations_report",
            "team_workload_review",
            "glossary_consistency_audit",
            "new_language_rollout",
            "review_queue_triage",
        }

    def test_empty_registry(self):
        assert PromptRegistry(load_builtin=False).get_all_prompts() == {}

    def test_register_prompt_extracts_variables(self):
        """Test that variables are read from the template when not given."""
        registry = PromptRegistry(load_builtin=False)

        prompt = registry.register_prompt("audit", "Audit", "Audit {project_id} in {lang_iso} for {project_id}")

        assert prompt.variables == ["project_id", "lang_iso"]
        assert registry.get_prompt("audit") is prompt

    def test_register_prompt_overwrites(self):
        registry = PromptRegistry(load_builtin=False)
        registry.register_prompt("audit", "Audit", "first")
        registry.register_prompt("audit", "Audit", "second")

        assert registry.render_prompt("audit") == "second"

    def test_render_unknown_prompt(self, registry):
        with pytest.raises(KeyError, match="not found"):
            registry.render_prompt("does_not_exist")

    def test_threshold_clause(self, registry):
        """Test the optional completion threshold."""
        with_threshold = registry.render_prompt("translation_progress_check", project_id="p1", threshold="80")
        without = registry.render_prompt("translation_progress_check", project_id="p1", threshold=None)

        assert "Highlight any languages below 80% completion." in with_threshold
        assert "Highlight" not in without
        assert "project 'p1'." in without

    def test_language_clause(self, registry):
        """Test the optional language filter."""
        text = registry.render_prompt("missing_translations_report", project_id="p1", lang_iso="de")
        assert "project 'p1' for language 'de'." in text

        text = registry.render_prompt("missing_translations_report", project_id="p1")
        assert "project 'p1'." in text

    def test_prompts_name_real_tools(self, registry):
        """Test that prompts point at registered tool names."""
        text = registry.render_prompt("review_queue_triage", project_id="p1")
        assert "lokalise_list_translations" in text
        assert "filter_is_reviewed set to 0" in text


class TestServerPrompts:
    """Test prompts exposed through FastMCP."""

    @pytest.mark.asyncio
    async def test_get_prompt_renders_template(self):
        server = FastMCP("test")
        register_prompts(server)

        result = await server.get_prompt("new_language_rollout", {"project_id": "p1", "lang_iso": "ja"})

        text = result.messages[0].content.text
        assert "language 'ja' in project 'p1'" in text

    @pytest.mark.asyncio
    async def test_prompt_arguments(self):
        """Test that optional arguments are advertised as not required."""
        server = FastMCP("test")
        register_prompts(server)

        prompts = {prompt.name: prompt for prompt in await server.list_prompts()}
        arguments = {arg.name: arg.required for arg in prompts["translation_progress_check"].arguments}

        assert arguments == {"project_id": True, "threshold": False}
        assert prompts["project_portfolio_overview"].title == "Project Portfolio Overview"
