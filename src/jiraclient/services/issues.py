"""Jira issues: create, read, edit, delete, assign and transition."""

from collections.abc import Sequence

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json

ISSUE = "/rest/api/3/issue/{issueIdOrKey}"


class IssuesService(Service):
    """Operations on a single issue."""

    async def get_issue(
        self,
        issue_id_or_key: str,
        *,
        fields: Sequence[str] | None = None,
        fields_by_keys: bool | None = None,
        expand: str | None = None,
        properties: Sequence[str] | None = None,
        update_history: bool | None = None,
        fail_fast: bool | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Return the details for an issue.

        Args:
            issue_id_or_key: The ID or key of the issue.
            fields: Fields to return, e.g. ``["summary", "comment"]``.
                ``*all`` and ``*navigable`` are accepted, prefix with ``-`` to exclude.
            fields_by_keys: Reference fields by key rather than ID.
            expand: Comma-separated expansions, e.g. ``renderedFields,changelog``.
            properties: Issue properties to return.
            update_history: Add the issue to the user's "Recently viewed" list.
            fail_fast: Fail early if not all field data can be retrieved.
            opts: Per-call request options.
        """
        return await self._request(
            ISSUE,
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "fields": fields,
                "fieldsByKeys": fields_by_keys,
                "expand": expand,
                "properties": properties,
                "updateHistory": update_history,
                "failFast": fail_fast,
            },
            opts=opts,
        )

    async def create_issue(
        self,
        issue: JsonObject,
        *,
        update_history: bool | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Create an issue or a subtask.

        ``issue`` is the full create payload, typically ``{"fields": {...}}``.
        Returns the ID, key and self link of the new issue.
        """
        return await self._request(
            "/rest/api/3/issue",
            "POST",
            query_params={"updateHistory": update_history},
            body=to_json(issue),
            opts=opts,
        )

    async def edit_issue(
        self,
        issue_id_or_key: str,
        update: JsonObject,
        *,
        notify_users: bool | None = None,
        override_screen_security: bool | None = None,
        override_editable_flag: bool | None = None,
        return_issue: bool | None = None,
        expand: str | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Edit an issue's fields or properties.

        Jira answers 204 unless ``return_issue`` is set, in which case the
        edited issue is returned.
        """
        return await self._request(
            ISSUE,
            "PUT",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "notifyUsers": notify_users,
                "overrideScreenSecurity": override_screen_security,
                "overrideEditableFlag": override_editable_flag,
                "returnIssue": return_issue,
                "expand": expand,
            },
            body=to_json(update),
            opts=opts,
        )

    async def delete_issue(
        self,
        issue_id_or_key: str,
        *,
        delete_subtasks: bool | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[None]:
        """Delete an issue. Issues with subtasks need ``delete_subtasks=True``."""
        return await self._request(
            ISSUE,
            "DELETE",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={"deleteSubtasks": delete_subtasks},
            is_response_available=False,
            opts=opts,
        )

    async def assign_issue(
        self,
        issue_id_or_key: str,
        account_id: str | None,
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[None]:
        """Assign an issue to a user.

        Pass ``None`` to unassign, or ``"-1"`` for the project's default assignee.
        """
        return await self._request(
            ISSUE + "/assignee",
            "PUT",
            path_params={"issueIdOrKey": issue_id_or_key},
            body=to_json({"accountId": account_id}),
            is_response_available=False,
            opts=opts,
        )

    async def get_transitions(
        self,
        issue_id_or_key: str,
        *,
        expand: str | None = None,
        transition_id: str | None = None,
        skip_remote_only_condition: bool | None = None,
        include_unavailable_transitions: bool | None = None,
        sort_by_ops_bar_and_status: bool | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        return await self._request(
            ISSUE + "/transitions",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "expand": expand,
                "transitionId": transition_id,
                "skipRemoteOnlyCondition": skip_remote_only_condition,
                "includeUnavailableTransitions": include_unavailable_transitions,
                "sortByOpsBarAndStatus": sort_by_ops_bar_and_status,
            },
            opts=opts,
        )

    async def do_transition(
        self,
        issue_id_or_key: str,
        transition: JsonObject,
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[None]:
        """Perform a transition, e.g. ``{"transition": {"id": "5"}}``."""
        return await self._request(
            ISSUE + "/transitions",
            "POST",
            path_params={"issueIdOrKey": issue_id_or_key},
            body=to_json(transition),
            is_response_available=False,
            opts=opts,
        )
