"""Dynamic webhooks registered by Connect and OAuth 2.0 apps."""

from collections.abc import Sequence

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json

WEBHOOK = "/rest/api/3/webhook"


class WebhooksService(Service):
    """Register, list, refresh and delete webhooks.

    Only Connect and OAuth 2.0 apps can use these operations.
    """

    async def register_dynamic_webhooks(
        self,
        url: str,
        webhooks: Sequence[JsonObject],
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Register webhooks that deliver to ``url``.

        Each webhook is ``{"events": [...], "jqlFilter": "..."}``.
        """
        return await self._request(
            WEBHOOK,
            "POST",
            body=to_json({"url": url, "webhooks": list(webhooks)}),
            opts=opts,
        )

    async def get_dynamic_webhooks_for_app(
        self,
        *,
        start_at: int | None = None,
        max_results: int | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        return await self._request(
            WEBHOOK,
            query_params={"startAt": start_at, "maxResults": max_results},
            opts=opts,
        )

    async def delete_webhook_by_id(
        self, webhook_ids: Sequence[int], *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        """Remove webhooks by ID. The IDs travel in the body of the DELETE."""
        return await self._request(
            WEBHOOK,
            "DELETE",
            body=to_json({"webhookIds": list(webhook_ids)}),
            is_response_available=False,
            opts=opts,
        )

    async def refresh_webhooks(
        self, webhook_ids: Sequence[int], *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Extend the life of webhooks, which otherwise expire after 30 days."""
        return await self._request(
            WEBHOOK + "/refresh",
            "PUT",
            body=to_json({"webhookIds": list(webhook_ids)}),
            opts=opts,
        )

    async def get_failed_webhooks(
        self,
        *,
        max_results: int | None = None,
        after: int | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Return webhooks that failed delivery in the last 72 hours."""
        return await self._request(
            WEBHOOK + "/failed",
            query_params={"maxResults": max_results, "after": after},
            opts=opts,
        )
