"""Bulk status management."""

from collections.abc import Sequence

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json

STATUSES = "/rest/api/3/statuses"


class StatusesService(Service):
    """Get, create, edit and delete statuses in bulk.

    Status IDs are sent as repeated ``id`` query parameters.
    """

    async def bulk_get(
        self,
        ids: Sequence[str],
        *,
        expand: str | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[list[JsonObject]]:
        """Return up to 50 statuses by ID."""
        return await self._request(
            STATUSES, query_params={"id": ids, "expand": expand}, opts=opts
        )

    async def bulk_create(
        self, statuses: JsonObject, *, opts: RequestOptions | None = None
    ) -> JiraResult[list[JsonObject]]:
        """Create statuses for a global or project scope.

        ``statuses`` is ``{"scope": {...}, "statuses": [...]}``.
        """
        return await self._request(STATUSES, "POST", body=to_json(statuses), opts=opts)

    async def bulk_edit(
        self, statuses: JsonObject, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        return await self._request(
            STATUSES,
            "PUT",
            body=to_json(statuses),
            is_response_available=False,
            opts=opts,
        )

    async def bulk_delete(
        self, ids: Sequence[str], *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        return await self._request(
            STATUSES,
            "DELETE",
            query_params={"id": ids},
            is_response_available=False,
            opts=opts,
        )
