"""
Prompt registry for Lokalise MCP.

Workflow prompts are Markdown templates that guide an assistant through a
common Lokalise task using the ``lokalise_*`` tools. Templates use
``str.format`` placeholders; processors derive optional clauses from the
raw arguments before rendering.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any, Callable, Dict, List, Optional
import logging
import string

from mcp.server.fastmcp import FastMCP
from pydantic import Field

logger = logging.getLogger(__name__)


@dataclass
class PromptTemplate:
    """A prompt template with metadata."""
    name: str
    title: str
    description: str
    template: str
    variables: List[str] = field(default_factory=list)

    def render(self, **kwargs) -> str:
        """Render the template with provided variables.

        Raises:
            KeyError: When a variable used by the template is missing
        """
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            missing_var = str(e).strip("'")
            logger.error(f"Missing variable '{missing_var}' for prompt '{self.name}'")
            raise


class PromptRegistry:
    """Registry for managing prompt templates."""

    def __init__(self, load_builtin: bool = True):
        self._prompts: Dict[str, PromptTemplate] = {}
        self._processors: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {}
        if load_builtin:
            self._load_builtin_prompts()

    def register_prompt(
        self,
        name: str,
        title: str,
        template: str,
        description: str = "",
        variables: Optional[List[str]] = None,
    ) -> PromptTemplate:
        """Register a prompt template.

        Args:
            name: Unique name for the prompt
            title: Human readable title
            template: Template string with placeholders
            description: Description of the prompt
            variables: Variable names used in the template; extracted from
                the template when omitted

        Returns:
            The registered template
        """
        if name in self._prompts:
            logger.warning(f"Prompt '{name}' already exists. Overwriting.")

        if variables is None:
            variables = self._extract_variables(template)

        prompt = PromptTemplate(
            name=name,
            title=title,
            description=description,
            template=template,
            variables=variables,
        )
        self._prompts[name] = prompt
        logger.debug(f"Registered prompt: {name}")
        return prompt

    def register_processor(
        self,
        prompt_name: str,
        processor: Callable[[Dict[str, Any]], Dict[str, Any]],
    ) -> None:
        """Register a function that prepares the variables of a prompt."""
        self._processors[prompt_name] = processor

    def get_prompt(self, name: str) -> Optional[PromptTemplate]:
        return self._prompts.get(name)

    def get_all_prompts(self) -> Dict[str, PromptTemplate]:
        return self._prompts.copy()

    def render_prompt(self, name: str, **kwargs) -> str:
        """Render a prompt with variables.

        Raises:
            KeyError: When the prompt does not exist or a variable is missing
        """
        prompt = self.get_prompt(name)
        if not prompt:
            raise KeyError(f"Prompt '{name}' not found")

        if name in self._processors:
            kwargs = self._processors[name](dict(kwargs))

        return prompt.render(**kwargs)

    @staticmethod
    def _extract_variables(template: str) -> List[str]:
        """Extract ``{placeholder}`` names in order of first appearance."""
        names: List[str] = []
        for _, field_name, _, _ in string.Formatter().parse(template):
            if field_name and field_name not in names:
                names.append(field_name)
        return names

    def _load_builtin_prompts(self) -> None:
        """Load the built-in Lokalise workflow prompts."""
        self.register_prompt(
            "project_portfolio_overview",
            "Project Portfolio Overview",
            "Show me all my Lokalise projects with their current status, team information "
            "and key statistics. Use lokalise_list_projects with include_stats enabled. "
            "Highlight any projects that need immediate attention or have been inactive "
            "recently. Present this as a management dashboard summary.",
            description="Get a comprehensive overview of all your Lokalise projects",
        )

        self.register_prompt(
            "project_deep_dive",
            "Project Deep Dive Analysis",
            "Give me a comprehensive analysis of project '{project_id}'. Use lokalise_get_project, "
            "lokalise_list_project_languages with include_progress and lokalise_list_keys. "
            "Include project details, all configured languages with progress percentages, "
            "key statistics and recent activity. Identify any potential issues or "
            "optimization opportunities.",
            description="Analyze a specific project in detail with languages and key statistics",
        )

        self.register_prompt(
            "translation_progress_check",
            "Translation Progress Check",
            "Show me the translation progress for all languages in project '{project_id}'."
            "{threshold_clause} Use lokalise_list_project_languages with include_progress. "
            "Include word counts and completion percentages. Suggest priorities for "
            "completing translations.",
            description="Monitor translation status across languages",
            variables=["project_id", "threshold"],
        )
        self.register_processor("translation_progress_check", _threshold_clause)

        self.register_prompt(
            "missing_translations_report",
            "Missing Translations Report",
            "Find untranslated content in project '{project_id}'{language_clause}. Use "
            "lokalise_list_translations with filter_untranslated set to 1 and page through the "
            "results with the returned cursor. Group the missing translations by language and "
            "by key, estimate the remaining effort and suggest which keys to translate first.",
            description="List untranslated keys of a project, optionally for one language",
            variables=["project_id", "lang_iso"],
        )
        self.register_processor("missing_translations_report", _language_clause)

        self.register_prompt(
            "team_workload_review",
            "Team Workload Review",
            "Review the workload of team '{team_id}'. Use lokalise_list_team_users and "
            "lokalise_list_usergroups to see who is on the team and how groups are organized, "
            "then use lokalise_list_projects and lokalise_list_tasks to find open tasks per "
            "assignee. Point out overloaded members, unassigned languages and overdue tasks, "
            "and suggest how to rebalance the work.",
            description="Review team members, groups and their task load",
        )

        self.register_prompt(
            "glossary_consistency_audit",
            "Glossary Consistency Audit",
            "Audit the glossary of project '{project_id}'. Use lokalise_list_glossary_terms to "
            "read every term, following the cursor until all terms are loaded. Identify terms "
            "without descriptions, terms missing translations for project languages, forbidden "
            "terms and inconsistent case sensitivity. Show results and any recommendations.",
            description="Check glossary terms for gaps and inconsistencies",
        )

        self.register_prompt(
            "new_language_rollout",
            "New Language Rollout",
            "Plan and start the rollout of language '{lang_iso}' in project '{project_id}'. "
            "Check lokalise_list_project_languages first and only call "
            "lokalise_add_project_languages if the language is missing. Then review the "
            "contributors with lokalise_list_contributors, and create a translation task with "
            "lokalise_create_task assigned to contributors who can edit '{lang_iso}'. "
            "Summarize what was set up and what is still needed.",
            description="Add a language to a project and organize its translation",
        )

        self.register_prompt(
            "review_queue_triage",
            "Review Queue Triage",
            "Triage the review queue of project '{project_id}'. Use lokalise_list_translations "
            "with filter_is_reviewed set to 0 to find translations waiting for review, and "
            "lokalise_list_project_comments for open discussions. Flag translations with QA "
            "issues first, group the rest by language and suggest an order for reviewers.",
            description="Prioritize unreviewed translations and open comments",
        )


def _threshold_clause(variables: Dict[str, Any]) -> Dict[str, Any]:
    threshold = variables.pop("threshold", None)
    variables["threshold_clause"] = (
        f" Highlight any languages below {threshold}% completion." if threshold else ""
    )
    return variables


def _language_clause(variables: Dict[str, Any]) -> Dict[str, Any]:
    lang_iso = variables.pop("lang_iso", None)
    variables["language_clause"] = f" for language '{lang_iso}'" if lang_iso else ""
    return variables


ProjectId = Annotated[str, Field(description="The ID of the Lokalise project")]


def register_prompts(server: FastMCP, registry: Optional[PromptRegistry] = None) -> PromptRegistry:
    """Register the workflow prompts on a server.

    Returns:
        The registry the prompts render from
    """
    registry = registry or PromptRegistry()

    def describe(name: str) -> Dict[str, str]:
        prompt = registry.get_prompt(name)
        return {"name": name, "title": prompt.title, "description": prompt.description}

    @server.prompt(**describe("project_portfolio_overview"))
    def project_portfolio_overview() -> str:
        return registry.render_prompt("project_portfolio_overview")

    @server.prompt(**describe("project_deep_dive"))
    def project_deep_dive(project_id: ProjectId) -> str:
        return registry.render_prompt("project_deep_dive", project_id=project_id)

    @server.prompt(**describe("translation_progress_check"))
    def translation_progress_check(
        project_id: ProjectId,
        threshold: Annotated[
            Optional[str], Field(description="Completion threshold percentage (e.g., '80')")
        ] = None,
    ) -> str:
        return registry.render_prompt(
            "translation_progress_check", project_id=project_id, threshold=threshold
        )

    @server.prompt(**describe("missing_translations_report"))
    def missing_translations_report(
        project_id: ProjectId,
        lang_iso: Annotated[
            Optional[str], Field(description="Limit the report to one language ISO code")
        ] = None,
    ) -> str:
        return registry.render_prompt(
            "missing_translations_report", project_id=project_id, lang_iso=lang_iso
        )

    @server.prompt(**describe("team_workload_review"))
    def team_workload_review(
        team_id: Annotated[str, Field(description="The ID of the Lokalise team")],
    ) -> str:
        return registry.render_prompt("team_workload_review", team_id=team_id)

    @server.prompt(**describe("glossary_consistency_audit"))
    def glossary_consistency_audit(project_id: ProjectId) -> str:
        return registry.render_prompt("glossary_consistency_audit", project_id=project_id)

    @server.prompt(**describe("new_language_rollout"))
    def new_language_rollout(
        project_id: ProjectId,
        lang_iso: Annotated[str, Field(description="ISO code of the language to roll out")],
    ) -> str:
        return registry.render_prompt("new_language_rollout", project_id=project_id, lang_iso=lang_iso)

    @server.prompt(**describe("review_queue_triage"))
    def review_queue_triage(project_id: ProjectId) -> str:
        return registry.render_prompt("review_queue_triage", project_id=project_id)

    logger.info(f"Registered {len(registry.get_all_prompts())} prompts")
    return registry
