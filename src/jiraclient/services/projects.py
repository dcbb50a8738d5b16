"""Projects: get, search, create, update, delete, archive and restore."""

from collections.abc import Sequence
from typing import Literal

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json

PROJECT = "/rest/api/3/project/{projectIdOrKey}"


class ProjectsService(Service):
    """Operations on projects."""

    async def get_project(
        self,
        project_id_or_key: str,
        *,
        expand: str | None = None,
        properties: Sequence[str] | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Return the project details for a project.

        Args:
            project_id_or_key: The project ID or project key (case sensitive).
            expand: Comma-separated expansions: ``description``, ``issueTypes``,
                ``lead``, ``projectKeys``, ``issueTypeHierarchy``.
            properties: Project properties to return.
            opts: Per-call request options.
        """
        return await self._request(
            PROJECT,
            path_params={"projectIdOrKey": project_id_or_key},
            query_params={"expand": expand, "properties": properties},
            opts=opts,
        )

    async def get_all_projects(
        self,
        *,
        expand: str | None = None,
        recent: int | None = None,
        properties: Sequence[str] | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[list[JsonObject]]:
        """Return all projects visible to the user.

        Deprecated upstream in favour of search_projects().
        """
        return await self._request(
            "/rest/api/3/project",
            query_params={"expand": expand, "recent": recent, "properties": properties},
            opts=opts,
        )

    async def search_projects(
        self,
        *,
        start_at: int | None = None,
        max_results: int | None = None,
        order_by: str | None = None,
        ids: Sequence[int] | None = None,
        keys: Sequence[str] | None = None,
        query: str | None = None,
        type_key: str | None = None,
        category_id: int | None = None,
        action: Literal["view", "browse", "edit", "create"] | None = None,
        expand: str | None = None,
        status: Sequence[Literal["live", "archived", "deleted"]] | None = None,
        properties: Sequence[str] | None = None,
        property_query: str | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Return a paginated list of projects visible to the user."""
        return await self._request(
            "/rest/api/3/project/search",
            query_params={
                "startAt": start_at,
                "maxResults": max_results,
                "orderBy": order_by,
                "id": ids,
                "keys": keys,
                "query": query,
                "typeKey": type_key,
                "categoryId": category_id,
                "action": action,
                "expand": expand,
                "status": status,
                "properties": properties,
                "propertyQuery": property_query,
            },
            opts=opts,
        )

    async def create_project(
        self, project: JsonObject, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Create a project from a template or a shared configuration."""
        return await self._request(
            "/rest/api/3/project", "POST", body=to_json(project), opts=opts
        )

    async def update_project(
        self,
        project_id_or_key: str,
        update: JsonObject,
        *,
        expand: str | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        return await self._request(
            PROJECT,
            "PUT",
            path_params={"projectIdOrKey": project_id_or_key},
            query_params={"expand": expand},
            body=to_json(update),
            opts=opts,
        )

    async def delete_project(
        self,
        project_id_or_key: str,
        *,
        enable_undo: bool | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[None]:
        """Delete a project. With ``enable_undo`` it goes to the recycle bin."""
        return await self._request(
            PROJECT,
            "DELETE",
            path_params={"projectIdOrKey": project_id_or_key},
            query_params={"enableUndo": enable_undo},
            is_response_available=False,
            opts=opts,
        )

    async def archive_project(
        self, project_id_or_key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        return await self._request(
            PROJECT + "/archive",
            "POST",
            path_params={"projectIdOrKey": project_id_or_key},
            is_response_available=False,
            opts=opts,
        )

    async def restore(
        self, project_id_or_key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Restore a project that was archived or moved to the recycle bin."""
        return await self._request(
            PROJECT + "/restore",
            "POST",
            path_params={"projectIdOrKey": project_id_or_key},
            opts=opts,
        )
