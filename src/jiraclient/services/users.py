"""Users."""

from collections.abc import Sequence

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json


class UsersService(Service):
    """Get, create and delete users."""

    async def get_user(
        self,
        account_id: str,
        *,
        expand: str | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Return a user.

        Args:
            account_id: The account ID of the user, e.g. ``5b10ac8d82e05b22cc7d4ef5``.
            expand: ``groups`` and/or ``applicationRoles``.
            opts: Per-call request options.
        """
        return await self._request(
            "/rest/api/3/user",
            query_params={"accountId": account_id, "expand": expand},
            opts=opts,
        )

    async def bulk_get_users(
        self,
        account_ids: Sequence[str],
        *,
        start_at: int | None = None,
        max_results: int | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Return a page of users by account ID.

        Account IDs are sent as repeated ``accountId`` parameters.
        """
        return await self._request(
            "/rest/api/3/user/bulk",
            query_params={
                "startAt": start_at,
                "maxResults": max_results,
                "accountId": account_ids,
            },
            opts=opts,
        )

    async def create_user(
        self, user: JsonObject, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Create a user, e.g. ``{"emailAddress": ..., "products": ["jira-software"]}``."""
        return await self._request("/rest/api/3/user", "POST", body=to_json(user), opts=opts)

    async def remove_user(
        self, account_id: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/user",
            "DELETE",
            query_params={"accountId": account_id},
            is_response_available=False,
            opts=opts,
        )

    async def get_user_groups(
        self, account_id: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[list[JsonObject]]:
        return await self._request(
            "/rest/api/3/user/groups",
            query_params={"accountId": account_id},
            opts=opts,
        )
