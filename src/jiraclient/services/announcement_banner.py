"""Announcement banner configuration."""

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json


class AnnouncementBannerService(Service):
    """Retrieve and update the announcement banner.

    Both operations need the *Administer Jira* global permission.
    """

    async def get_banner(self, *, opts: RequestOptions | None = None) -> JiraResult[JsonObject]:
        """Return the current announcement banner configuration."""
        return await self._request("/rest/api/3/announcementBanner", opts=opts)

    async def set_banner(
        self,
        banner: JsonObject,
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[None]:
        """Update the announcement banner.

        Args:
            banner: Fields to change, e.g.
                ``{"isEnabled": True, "message": "...", "visibility": "public"}``.
            opts: Per-call request options.
        """
        return await self._request(
            "/rest/api/3/announcementBanner",
            "PUT",
            body=to_json(banner),
            is_response_available=False,
            opts=opts,
        )
