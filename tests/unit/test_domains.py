"""Tests for domain services and controllers with the Lokalise API mocked out."""

from unittest.mock import AsyncMock, create_autospec, patch

import lokalise
import pytest

from lokalise_mcp.core.errors import ErrorType, McpError, create_unexpected_error
from lokalise_mcp.domains.comments import controller as comments_controller
from lokalise_mcp.domains.comments.types import CreateCommentsArgs, ListKeyCommentsArgs
from lokalise_mcp.domains.contributors import controller as contributors_controller
from lokalise_mcp.domains.contributors.types import GetCurrentUserArgs, UpdateContributorArgs
from lokalise_mcp.domains.glossary import controller as glossary_controller
from lokalise_mcp.domains.glossary.service import glossary_service
from lokalise_mcp.domains.glossary.types import CreateGlossaryTermsArgs, DeleteGlossaryTermsArgs
from lokalise_mcp.domains.keys import controller as keys_controller
from lokalise_mcp.domains.keys.types import GetKeyArgs
from lokalise_mcp.domains.languages import controller as languages_controller
from lokalise_mcp.domains.languages.types import GetLanguageArgs, ListSystemLanguagesArgs
from lokalise_mcp.domains.projects import controller as projects_controller
from lokalise_mcp.domains.projects.types import GetProjectArgs, ListProjectsArgs
from lokalise_mcp.domains.queuedprocesses import controller as queued_processes_controller
from lokalise_mcp.domains.queuedprocesses.types import ListQueuedProcessesArgs
from lokalise_mcp.domains.tasks import controller as tasks_controller
from lokalise_mcp.domains.tasks.service import TasksService, assign_languages
from lokalise_mcp.domains.tasks.types import ListTasksArgs
from lokalise_mcp.domains.teamusers import controller as teamusers_controller
from lokalise_mcp.domains.teamusers.types import UpdateTeamUserArgs
from lokalise_mcp.domains.translations import controller as translations_controller
from lokalise_mcp.domains.translations.types import GetTranslationArgs, ListTranslationsArgs
from lokalise_mcp.domains.usergroups import controller as usergroups_controller
from lokalise_mcp.domains.usergroups.service import group_languages
from lokalise_mcp.domains.usergroups.types import CreateUserGroupArgs


class SdkError(Exception):
    def __init__(self, message: str, code: int):
        super().__init__(message)
        self.code = code


@pytest.fixture
def api():
    """A Lokalise client mock that enforces the SDK method signatures."""
    client = create_autospec(lokalise.Client, instance=True)
    with patch("lokalise_mcp.domains.base.get_lokalise_api", return_value=client):
        yield client


class TestTaskAssignment:
    """Test the language assignment of new tasks."""

    def test_assignees_fill_languages_without_users(self):
        languages = [{"language_iso": "fr"}, {"language_iso": "de", "groups": [3]}]

        assigned = assign_languages(languages, [7, 8])

        assert assigned == [
            {"language_iso": "fr", "users": [7, 8]},
            {"language_iso": "de", "groups": [3]},
        ]

    def test_missing_assignees_is_an_error(self):
        """Test that a language without users, groups or fallback is rejected."""
        with pytest.raises(McpError) as exc_info:
            assign_languages([{"language_iso": "fr"}], None)

        assert exc_info.value.status_code == 400
        assert "'assignees' parameter" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_service_sends_assigned_languages(self, api):
        """Test that the assignees field is resolved before the API call."""
        api.create_task.return_value = {"task_id": 1}

        result = await TasksService().create_task("p1", {
            "title": "Translate release notes",
            "languages": [{"language_iso": "fr"}],
            "assignees": [7],
        })

        assert result == {"task_id": 1}
        api.create_task.assert_called_once_with("p1", {
            "title": "Translate release notes",
            "languages": [{"language_iso": "fr", "users": [7]}],
        })

    @pytest.mark.asyncio
    async def test_list_limit_validated(self, api):
        """Test the task list limit before any API call."""
        with pytest.raises(McpError) as exc_info:
            await tasks_controller.list_tasks(ListTasksArgs(project_id="p1", limit=501))

        assert exc_info.value.type == ErrorType.VALIDATION_ERROR
        assert exc_info.value.message == "Invalid limit parameter. Must be between 1 and 500."
        api.tasks.assert_not_called()


class TestUserGroups:
    """Test user group payloads."""

    def test_group_languages(self):
        """Test splitting permissions into reference and contributable IDs."""
        grouped = group_languages([
            {"lang_id": 640, "is_writable": False},
            {"lang_id": 597, "is_writable": True},
            {"lang_id": 673},
        ])

        assert grouped == {"reference": [640, 673], "contributable": [597]}
        assert group_languages(None) is None

    @pytest.mark.asyncio
    async def test_admin_rights_require_admin(self):
        args = CreateUserGroupArgs(team_id="t1", name="Reviewers", admin_rights=["upload"])

        with pytest.raises(McpError) as exc_info:
            await usergroups_controller.create_usergroup(args)

        assert "is_admin" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_create_sends_grouped_languages(self):
        args = CreateUserGroupArgs(
            team_id="t1",
            name="Translators",
            languages=[{"lang_id": 597, "is_writable": True}],
            members=[11],
        )

        with patch.object(
            usergroups_controller.user_groups_service, "create_group", new_callable=AsyncMock,
            return_value={"group_id": 5, "name": "Translators"},
        ) as create_group:
            await usergroups_controller.create_usergroup(args)

        team_id, data = create_group.await_args.args
        assert team_id == "t1"
        assert data["languages"] == {"reference": [], "contributable": [597]}
        assert create_group.await_args.kwargs["members"] == [11]


class TestGlossary:
    """Test glossary payloads."""

    @pytest.mark.asyncio
    async def test_terms_sent_in_camel_case(self):
        """Test that snake_case input reaches the API as camelCase."""
        args = CreateGlossaryTermsArgs(
            project_id="p1",
            terms=[{
                "term": "Acme",
                "description": "Brand name",
                "case_sensitive": True,
                "translations": [{"lang_id": 640, "translation": "Acme"}],
            }],
        )

        with patch.object(
            glossary_controller.glossary_service, "create_terms", new_callable=AsyncMock,
            return_value={"data": [], "errors": []},
        ) as create_terms:
            await glossary_controller.create_glossary_terms(args)

        terms = create_terms.await_args.args[1]
        assert terms[0]["caseSensitive"] is True
        assert terms[0]["translations"] == [{"langId": 640, "translation": "Acme"}]
        assert "case_sensitive" not in terms[0]

    @pytest.mark.asyncio
    async def test_blank_description_rejected(self):
        args = CreateGlossaryTermsArgs(project_id="p1", terms=[{"term": "Acme", "description": "  "}])

        with pytest.raises(McpError) as exc_info:
            await glossary_controller.create_glossary_terms(args)

        assert exc_info.value.type == ErrorType.VALIDATION_ERROR

    @pytest.mark.asyncio
    async def test_delete_passes_term_ids(self, api):
        api.delete_glossary_terms.return_value = {"data": {"deleted": {"count": 2, "ids": [1, 2]}}}

        await glossary_controller.delete_glossary_terms(DeleteGlossaryTermsArgs(project_id="p1", term_ids=[1, 2]))

        api.delete_glossary_terms.assert_called_once_with("p1", [1, 2])

    @pytest.mark.asyncio
    async def test_request_bodies_wrapped_once(self):
        """Test the bodies a real client sends for glossary writes."""
        client = lokalise.Client("token")

        with patch("lokalise_mcp.domains.base.get_lokalise_api", return_value=client), \
                patch("lokalise.request.post", return_value={"data": []}) as post, \
                patch("lokalise.request.put", return_value={"data": []}) as put, \
                patch("lokalise.request.delete", return_value={}) as delete:
            await glossary_service.create_terms("p1", [{"term": "Acme", "description": "Brand"}])
            await glossary_service.update_terms("p1", [{"id": 1, "term": "Acme"}])
            await glossary_service.delete_terms("p1", [1, 2])

        assert post.call_args.args[2] == {"terms": [{"term": "Acme", "description": "Brand"}]}
        assert put.call_args.args[2] == {"terms": [{"id": 1, "term": "Acme"}]}
        assert delete.call_args.args[2] == {"terms": [1, 2]}


class TestLanguages:
    """Test error mapping in the languages controller."""

    @pytest.mark.asyncio
    async def test_unauthorized_becomes_auth_error(self):
        """Test that a 401 from the API is reported as an invalid token."""
        failure = create_unexpected_error("Unexpected service error", SdkError("Unauthorized", 401))

        with patch.object(
            languages_controller.languages_service, "list_system_languages", new_callable=AsyncMock,
            side_effect=failure,
        ):
            with pytest.raises(McpError) as exc_info:
                await languages_controller.list_system_languages(ListSystemLanguagesArgs())

        assert exc_info.value.type == ErrorType.AUTH_INVALID
        assert exc_info.value.message == "Lokalise API authentication failed. Please check your API token."

    @pytest.mark.asyncio
    async def test_get_language(self, api):
        api.language.return_value = {"lang_id": 640, "lang_iso": "de", "lang_name": "German"}

        result = await languages_controller.get_language(GetLanguageArgs(project_id="p1", language_id=640))

        api.language.assert_called_once_with("p1", 640)
        assert result.content.startswith("# Language: German")


class TestKeys:
    """Test the keys controller."""

    @pytest.mark.asyncio
    async def test_get_key_renders_details(self, api):
        api.key.return_value = {
            "key_id": 42,
            "key_name": {"ios": "welcome_title", "web": "welcome.title"},
            "platforms": ["ios", "web"],
            "tags": ["onboarding"],
            "translations": [],
        }

        result = await keys_controller.get_key(GetKeyArgs(project_id="p1", key_id=42))

        api.key.assert_called_once_with("p1", 42, {"disable_references": 0})
        assert result.content.startswith("# Translation Key Details")
        assert "`welcome.title`" in result.content
        assert "- `onboarding`" in result.content

    @pytest.mark.asyncio
    async def test_not_found_is_classified(self, api):
        """Test that SDK errors are classified from their status code."""
        api.key.side_effect = SdkError("Not Found", 404)

        with pytest.raises(McpError) as exc_info:
            await keys_controller.get_key(GetKeyArgs(project_id="p1", key_id=42))

        assert exc_info.value.type == ErrorType.NOT_FOUND
        assert exc_info.value.context.entity_id == "42"


class TestComments:
    """Test the comments controller against the client."""

    @pytest.mark.asyncio
    async def test_list_key_comments(self, api):
        api.key_comments.return_value = {"items": [
            {"comment_id": 3, "comment": "Check the plural forms", "added_by_email": "anna@example.com"},
        ]}

        result = await comments_controller.list_key_comments(ListKeyCommentsArgs(project_id="p1", key_id=5))

        api.key_comments.assert_called_once_with("p1", 5, {"limit": 100, "page": 1})
        assert result.content.startswith("# Comments for Key #5 (1)")
        assert "anna@example.com" in result.content

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, api):
        args = CreateCommentsArgs(project_id="p1", key_id=5, comments=[{"comment": "  "}])

        with pytest.raises(McpError) as exc_info:
            await comments_controller.create_comments(args)

        assert exc_info.value.message == "Comment text is required for comment at index 0."
        api.create_key_comments.assert_not_called()


class TestContributors:
    """Test the contributors controller against the client."""

    @pytest.mark.asyncio
    async def test_current_user(self, api):
        api.current_contributor.return_value = {"user_id": 9, "email": "me@example.com", "fullname": "Mia"}

        result = await contributors_controller.get_current_user(GetCurrentUserArgs(project_id="p1"))

        api.current_contributor.assert_called_once_with("p1")
        assert result.content.startswith("# Current User: Mia")

    @pytest.mark.asyncio
    async def test_update_sends_only_given_fields(self, api):
        api.update_contributor.return_value = {"user_id": 9, "is_reviewer": True}

        await contributors_controller.update_contributor(
            UpdateContributorArgs(project_id="p1", contributor_id=9, is_reviewer=True)
        )

        api.update_contributor.assert_called_once_with("p1", 9, {"is_reviewer": True})

    @pytest.mark.asyncio
    async def test_update_without_fields(self, api):
        with pytest.raises(McpError) as exc_info:
            await contributors_controller.update_contributor(UpdateContributorArgs(project_id="p1", contributor_id=9))

        assert exc_info.value.type == ErrorType.VALIDATION_ERROR
        api.update_contributor.assert_not_called()


class TestProjects:
    """Test the projects controller against the client."""

    @pytest.mark.asyncio
    async def test_list_projects_paging(self, api):
        api.projects.return_value = {"items": []}

        result = await projects_controller.list_projects(ListProjectsArgs(limit=20, page=2))

        api.projects.assert_called_once_with({"limit": 20, "page": 2})
        assert result.content.startswith("# Lokalise Projects (0)")

    @pytest.mark.asyncio
    async def test_missing_project(self, api):
        """Test that a 404 names the project that was asked for."""
        api.project.side_effect = SdkError("Not Found", 404)

        with pytest.raises(McpError) as exc_info:
            await projects_controller.get_project(GetProjectArgs(project_id="p1"))

        assert exc_info.value.type == ErrorType.NOT_FOUND
        assert exc_info.value.message == "Project with ID 'p1' not found. Please check the project ID."


class TestQueuedProcesses:
    """Test the queued processes controller against the client."""

    @pytest.mark.asyncio
    async def test_list_processes(self, api):
        api.queued_processes.return_value = {"items": [
            {"process_id": "abc123", "type": "file-import", "status": "finished", "created_by_email": "a@example.com"},
        ]}

        result = await queued_processes_controller.list_queued_processes(ListQueuedProcessesArgs(project_id="p1"))

        api.queued_processes.assert_called_once_with("p1")
        assert "**Total Processes**: 1" in result.content
        assert "(abc123)" in result.content


class TestTeamUsers:
    """Test the team users controller against the client."""

    @pytest.mark.asyncio
    async def test_update_role(self, api):
        api.update_team_user.return_value = {"user_id": 9, "email": "a@example.com", "role": "admin"}

        result = await teamusers_controller.update_team_user(UpdateTeamUserArgs(team_id="t1", user_id=9, role="admin"))

        api.update_team_user.assert_called_once_with("t1", 9, {"role": "admin"})
        assert result.content.startswith("# Team User Updated Successfully")


class TestTranslations:
    """Test the translations controller against the client."""

    @pytest.mark.asyncio
    async def test_list_uses_cursor_pagination(self, api):
        """Test that filters and the cursor reach the API; unset filters are left out."""
        api.translations.return_value = {"items": []}

        result = await translations_controller.list_translations(ListTranslationsArgs(
            project_id="p1", limit=50, cursor="abc", filter_is_reviewed="1",
        ))

        api.translations.assert_called_once_with(
            "p1", {"limit": 50, "pagination": "cursor", "cursor": "abc", "filter_is_reviewed": "1"},
        )
        assert result.content.startswith("# Translations List (0 items)")

    @pytest.mark.asyncio
    async def test_get_translation(self, api):
        api.translation.return_value = {"translation_id": 7, "key_id": 42, "language_iso": "fr"}

        result = await translations_controller.get_translation(
            GetTranslationArgs(project_id="p1", translation_id=7)
        )

        api.translation.assert_called_once_with("p1", 7, {})
        assert result.content.startswith("# Translation ID: 7")

    @pytest.mark.asyncio
    async def test_unknown_qa_issue_rejected(self, api):
        with pytest.raises(McpError) as exc_info:
            await translations_controller.list_translations(
                ListTranslationsArgs(project_id="p1", filter_qa_issues="typos")
            )

        assert exc_info.value.message.startswith("Invalid QA issue filter: typos.")
        api.translations.assert_not_called()
