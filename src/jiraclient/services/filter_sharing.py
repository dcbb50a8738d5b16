"""Filter share permissions and the default share scope."""

from typing import Literal

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json

ShareScope = Literal["GLOBAL", "AUTHENTICATED", "PRIVATE"]


class FilterSharingService(Service):
    """Get share scopes and add or remove share permissions on filters."""

    async def get_default_share_scope(
        self, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        return await self._request("/rest/api/3/filter/defaultShareScope", opts=opts)

    async def set_default_share_scope(
        self, scope: ShareScope, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        return await self._request(
            "/rest/api/3/filter/defaultShareScope",
            "PUT",
            body=to_json({"scope": scope}),
            opts=opts,
        )

    async def get_share_permissions(
        self, filter_id: int, *, opts: RequestOptions | None = None
    ) -> JiraResult[list[JsonObject]]:
        """Return the share permissions of a filter."""
        return await self._request(
            "/rest/api/3/filter/{id}/permission",
            path_params={"id": filter_id},
            opts=opts,
        )

    async def add_share_permission(
        self,
        filter_id: int,
        permission: JsonObject,
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[list[JsonObject]]:
        """Add a share permission to a filter.

        Returns the filter's full list of share permissions.
        """
        return await self._request(
            "/rest/api/3/filter/{id}/permission",
            "POST",
            path_params={"id": filter_id},
            body=to_json(permission),
            opts=opts,
        )

    async def get_share_permission(
        self, filter_id: int, permission_id: int, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        return await self._request(
            "/rest/api/3/filter/{id}/permission/{permissionId}",
            path_params={"id": filter_id, "permissionId": permission_id},
            opts=opts,
        )

    async def delete_share_permission(
        self, filter_id: int, permission_id: int, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        """Delete a share permission from a filter."""
        return await self._request(
            "/rest/api/3/filter/{id}/permission/{permissionId}",
            "DELETE",
            path_params={"id": filter_id, "permissionId": permission_id},
            is_response_available=False,
            opts=opts,
        )
