"""JQL issue search."""

from collections.abc import Sequence

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json


class IssueSearchService(Service):
    """Search for issues with JQL."""

    async def search_jql(
        self,
        jql: str,
        *,
        next_page_token: str | None = None,
        max_results: int | None = None,
        fields: Sequence[str] | None = None,
        expand: str | None = None,
        properties: Sequence[str] | None = None,
        fields_by_keys: bool | None = None,
        fail_fast: bool | None = None,
        reconcile_issues: Sequence[int] | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Search issues with a bounded JQL query.

        Results are paginated with ``next_page_token``; pass the token from one
        response to get the next page.

        Args:
            jql: The JQL expression, e.g. ``project = EX ORDER BY created DESC``.
            next_page_token: Token for the page to fetch.
            max_results: Maximum number of issues per page.
            fields: Fields to return for each issue. Sent as repeated keys.
            expand: Comma-separated expansions.
            properties: Issue properties to return.
            fields_by_keys: Reference fields by key rather than ID.
            fail_fast: Fail early if not all field data can be retrieved.
            reconcile_issues: Issue IDs to reconcile with the search results.
            opts: Per-call request options.
        """
        return await self._request(
            "/rest/api/3/search/jql",
            query_params={
                "jql": jql,
                "nextPageToken": next_page_token,
                "maxResults": max_results,
                "fields": fields,
                "expand": expand,
                "properties": properties,
                "fieldsByKeys": fields_by_keys,
                "failFast": fail_fast,
                "reconcileIssues": reconcile_issues,
            },
            opts=opts,
        )

    async def search_jql_post(
        self, search: JsonObject, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Same as search_jql with the parameters in a JSON body."""
        return await self._request(
            "/rest/api/3/search/jql", "POST", body=to_json(search), opts=opts
        )

    async def count_issues(
        self, jql: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Return an approximate count of the issues matching a bounded JQL query."""
        return await self._request(
            "/rest/api/3/search/approximate-count",
            "POST",
            body=to_json({"jql": jql}),
            opts=opts,
        )

    async def match_issues(
        self,
        issue_ids: Sequence[int],
        jqls: Sequence[str],
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Check which of the given issues match each JQL query."""
        return await self._request(
            "/rest/api/3/jql/match",
            "POST",
            body=to_json({"issueIds": list(issue_ids), "jqls": list(jqls)}),
            opts=opts,
        )
