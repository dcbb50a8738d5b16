"""The calling user and their preferences."""

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json


class MyselfService(Service):

    async def get_current_user(
        self, *, expand: str | None = None, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Return details for the current user."""
        return await self._request(
            "/rest/api/3/myself", query_params={"expand": expand}, opts=opts
        )

    async def get_preference(
        self, key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[str]:
        return await self._request(
            "/rest/api/3/mypreferences",
            query_params={"key": key},
            response_format="text",
            opts=opts,
        )

    async def set_preference(
        self,
        key: str,
        value: str,
        *,
        media_type: str = "text/plain",
        opts: RequestOptions | None = None,
    ) -> JiraResult[None]:
        """Create or update a preference. The body is the raw value, not JSON."""
        return await self._request(
            "/rest/api/3/mypreferences",
            "PUT",
            query_params={"key": key},
            body=value,
            headers={"Content-Type": media_type},
            is_response_available=False,
            opts=opts,
        )

    async def remove_preference(
        self, key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/mypreferences",
            "DELETE",
            query_params={"key": key},
            is_response_available=False,
            opts=opts,
        )

    async def get_locale(self, *, opts: RequestOptions | None = None) -> JiraResult[JsonObject]:
        return await self._request("/rest/api/3/mypreferences/locale", opts=opts)

    async def set_locale(
        self, locale: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        # Deprecated upstream; Jira now only honours the profile locale
        return await self._request(
            "/rest/api/3/mypreferences/locale",
            "PUT",
            body=to_json({"locale": locale}),
            is_response_available=False,
            opts=opts,
        )
