"""Direct HTTPS transport backed by httpx."""

import httpx

from ..config import DefaultJiraConfig
from ..errors import TransportError
from ..logging import get_logger
from .base import TransportRequest, TransportResponse

TRANSPORT_TYPE = "default"

logger = get_logger("transports.direct")


class DirectTransport:
    """Sends requests straight to the Jira site over HTTPS.

    An injected ``httpx.AsyncClient`` is reused for every call and stays owned
    by the caller. Without one, a short-lived client is opened per request.
    """

    def __init__(self, config: DefaultJiraConfig, client: httpx.AsyncClient | None = None):
        self.config = config
        self._client = client

    async def send(self, request: TransportRequest) -> TransportResponse:
        url = f"{self.config.api_base_url}{request.url}"
        timeout = request.timeout if request.timeout is not None else self.config.timeout

        try:
            if self._client is not None:
                response = await self._send(self._client, request, url, timeout)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, request, url, timeout)
        except httpx.HTTPError as e:
            logger.warning(f"{request.method} {request.url} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

        return TransportResponse(
            status=response.status_code,
            reason=response.reason_phrase,
            headers=dict(response.headers),
            content=response.content,
        )

    async def _send(
        self,
        client: httpx.AsyncClient,
        request: TransportRequest,
        url: str,
        timeout: float,
    ) -> httpx.Response:
        return await client.request(
            request.method,
            url,
            headers=dict(request.headers),
            content=request.body,
            timeout=timeout,
        )

    async def aclose(self) -> None:
        # Injected clients belong to the caller
        pass


def create_transport(config: DefaultJiraConfig, **kwargs) -> DirectTransport:
    """Factory used by the transport registry."""
    return DirectTransport(config, **kwargs)
