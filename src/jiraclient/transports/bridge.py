"""Platform bridge transport.

In bridge ("forge") mode the host runtime owns the network hop and the
authentication. The transport only picks the requester (user or app) and
normalizes whatever response object the host hands back.
"""

import inspect
from collections.abc import Mapping
from typing import Any, Protocol

from ..config import ForgeJiraConfig
from ..errors import TransportError
from ..logging import get_logger
from .base import TransportRequest, TransportResponse

TRANSPORT_TYPE = "forge"

logger = get_logger("transports.bridge")


class BridgeRequester(Protocol):
    """Object returned by BridgeApi.as_user() / as_app()."""

    async def request_jira(
        self,
        route: str,
        *,
        method: str,
        headers: Mapping[str, str],
        content: str | bytes | None = None,
    ) -> Any:
        ...


class BridgeApi(Protocol):
    """Host-provided request primitive."""

    def as_user(self) -> BridgeRequester:
        ...

    def as_app(self) -> BridgeRequester:
        ...


class BridgeTransport:
    """Delegates each request to the host bridge."""

    def __init__(self, config: ForgeJiraConfig):
        self.config = config

    async def send(self, request: TransportRequest) -> TransportResponse:
        api = self.config.api
        requester = api.as_app() if request.as_ == "app" else api.as_user()

        try:
            response = await requester.request_jira(
                request.url,
                method=request.method,
                headers=dict(request.headers),
                content=request.body,
            )
            content = await _read_content(response)
        except Exception as e:
            # The host runtime may raise anything; no response means transport failure
            logger.warning(f"Bridge {request.method} {request.url} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

        return TransportResponse(
            status=_first_attr(response, "status_code", "status", default=0),
            reason=_first_attr(response, "reason_phrase", "status_text", "statusText", default="") or "",
            headers=dict(getattr(response, "headers", None) or {}),
            content=content,
        )

    async def aclose(self) -> None:
        pass


def _first_attr(obj: Any, *names: str, default: Any) -> Any:
    for name in names:
        value = getattr(obj, name, None)
        if value is not None:
            return value
    return default


async def _read_content(response: Any) -> bytes:
    """Read the body from a host response.

    Accepts a ``content`` attribute (bytes or str) or a ``read()`` method,
    sync or async.
    """
    content = getattr(response, "content", None)
    if content is None and callable(getattr(response, "read", None)):
        content = response.read()
        if inspect.isawaitable(content):
            content = await content
    if content is None:
        return b""
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def create_transport(config: ForgeJiraConfig, **kwargs) -> BridgeTransport:
    """Factory used by the transport registry."""
    return BridgeTransport(config)
