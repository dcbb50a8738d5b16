"""Jira instance information."""

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service


class ServerInfoService(Service):

    async def get_server_info(self, *, opts: RequestOptions | None = None) -> JiraResult[JsonObject]:
        """Return version, build and deployment details of the Jira instance."""
        return await self._request("/rest/api/3/serverInfo", opts=opts)
