"""Tests for the domain registry and the assembled MCP server."""

from unittest.mock import Mock

import pytest
import typer

from lokalise_mcp.domains.base import DomainMeta, DomainModule
from lokalise_mcp.domains.registry import DomainRegistry, create_default_registry
from lokalise_mcp.server.factory import create_server

EXPECTED_DOMAINS = [
    "projects",
    "keys",
    "languages",
    "translations",
    "tasks",
    "comments",
    "contributors",
    "glossary",
    "usergroups",
    "teamusers",
    "queuedprocesses",
]


def make_domain(name: str) -> DomainModule:
    return DomainModule(
        meta=DomainMeta(name=name, description=f"{name} domain", tools_count=2),
        register_cli=Mock(),
        register_tools=Mock(),
        register_resources=Mock(),
    )


class TestDomainRegistry:
    """Test the DomainRegistry class."""

    def test_register_and_list(self):
        """Test registering domains and listing their metadata."""
        registry = DomainRegistry()
        keys = make_domain("keys")
        tasks = make_domain("tasks")

        assert registry.register(keys) is True
        assert registry.register(tasks) is True
        assert registry.list() == [keys.meta, tasks.meta]

    def test_duplicate_needs_force(self):
        """Test that a duplicate name is rejected unless forced."""
        registry = DomainRegistry()
        registry.register(make_domain("keys"))
        replacement = make_domain("keys")

        assert registry.register(replacement) is False
        assert registry.register(replacement, force=True) is True
        assert registry.list() == [replacement.meta]

    def test_register_all_bindings(self):
        """Test that each binding of every domain is wired in."""
        registry = DomainRegistry()
        keys = make_domain("keys")
        tasks = make_domain("tasks")
        registry.register(keys)
        registry.register(tasks)
        app = typer.Typer()
        server = Mock()

        assert registry.register_all_cli(app) == ["keys", "tasks"]
        assert registry.register_all_tools(server) == ["keys", "tasks"]
        assert registry.register_all_resources(server) == ["keys", "tasks"]

        for domain in (keys, tasks):
            domain.register_cli.assert_called_once_with(app)
            domain.register_tools.assert_called_once_with(server)
            domain.register_resources.assert_called_once_with(server)


class TestDefaultRegistry:
    """Test the registry holding all Lokalise domains."""

    def test_all_domains_in_order(self):
        assert [meta.name for meta in create_default_registry().list()] == EXPECTED_DOMAINS

    def test_summary_totals(self):
        """Test the declared tool, resource and command counts."""
        summary = create_default_registry().summary()

        assert summary["total_domains"] == 11
        assert summary["total_tools"] == 59
        assert summary["total_resources"] == 21
        assert summary["total_cli_commands"] == 59
        assert summary["domains"][0]["name"] == "projects"


class TestServer:
    """Test the assembled FastMCP server."""

    @pytest.fixture(scope="class")
    def server(self):
        return create_server()

    @pytest.mark.asyncio
    async def test_tools_match_declared_counts(self, server):
        """Test that every declared tool is registered once with the lokalise_ prefix."""
        tools = await server.list_tools()
        names = [tool.name for tool in tools]

        assert len(names) == 59
        assert len(set(names)) == 59
        assert all(name.startswith("lokalise_") for name in names)
        assert "lokalise_bulk_update_translations" in names

    @pytest.mark.asyncio
    async def test_tool_schemas_require_identifiers(self, server):
        """Test that identifiers are required tool parameters."""
        tools = {tool.name: tool for tool in await server.list_tools()}

        schema = tools["lokalise_get_key"].inputSchema
        assert set(schema["required"]) == {"project_id", "key_id"}

    @pytest.mark.asyncio
    async def test_resources(self, server):
        """Test static resources and URI templates."""
        resources = {str(resource.uri) for resource in await server.list_resources()}
        templates = {template.uriTemplate for template in await server.list_resource_templates()}

        assert resources == {"lokalise://projects", "lokalise://languages/system"}
        assert len(templates) == 19
        assert "lokalise://keys/{project_id}/{key_id}" in templates
        assert all(uri.startswith("lokalise://") for uri in templates)

    @pytest.mark.asyncio
    async def test_prompts(self, server):
        """Test that the built-in prompts are exposed."""
        prompts = {prompt.name for prompt in await server.list_prompts()}

        assert len(prompts) == 8
        assert "translation_progress_check" in prompts
