"""Request dispatcher.

Every service method funnels through Dispatcher.dispatch(): it resolves the
descriptor into a URL and headers, performs exactly one transport call and
wraps the outcome in a JiraResult. Remote errors and transport failures come
back as error envelopes; only malformed descriptors raise.
"""

import asyncio
import json
from typing import Any

from .config import JiraConfig
from .errors import TransportError
from .headers import create_headers
from .logging import PerformanceTimer, get_logger
from .request import RequestDescriptor, RequestOptions, build_url
from .result import JiraResult, err, ok
from .transports import Transport, TransportRequest, TransportResponse, create_transport

logger = get_logger("dispatcher")

ABORTED_MESSAGE = "Request aborted"


class Dispatcher:
    """Sends request descriptors for one client configuration.

    The transport is selected once, from the configuration type, unless one
    is injected.
    """

    def __init__(self, config: JiraConfig, transport: Transport | None = None):
        self.config = config
        self.transport = transport if transport is not None else create_transport(config)

    async def dispatch(
        self,
        descriptor: RequestDescriptor,
        options: RequestOptions | None = None,
    ) -> JiraResult[Any]:
        """Perform one request.

        Args:
            descriptor: What to send.
            options: Per-call headers, bridge identity, abort signal and timeout.

        Returns:
            A success envelope with the decoded body, or an error envelope
            carrying the status (0 when no response arrived) and error payload.

        Raises:
            DescriptorError: If the descriptor cannot be resolved to a URL.
        """
        options = options or RequestOptions()
        url = build_url(descriptor)
        headers = create_headers(
            self.config,
            body=descriptor.body,
            is_experimental=descriptor.is_experimental,
            overlays=(descriptor.headers, options.headers),
        )
        request = TransportRequest(
            method=descriptor.method,
            url=url,
            headers=headers,
            body=descriptor.body,
            as_=options.as_,
            timeout=options.timeout,
        )

        logger.debug(f"{descriptor.method} {url}")
        with PerformanceTimer(
            "dispatch", method=descriptor.method, path=descriptor.path
        ) as timer:
            try:
                response = await self._send(request, options.abort)
            except TransportError as e:
                timer.add_metric("status", 0)
                return err(0, str(e))
            timer.add_metric("status", response.status)

        if not response.is_success:
            logger.warning(f"{descriptor.method} {descriptor.path} returned {response.status}")
            return err(response.status, _parse_error(response))

        if not descriptor.is_response_available:
            return ok(response.status)

        return ok(response.status, _decode_body(response, descriptor.response_format))

    async def _send(
        self, request: TransportRequest, abort: asyncio.Event | None
    ) -> TransportResponse:
        """Await the transport, racing it against the abort signal if given."""
        if abort is None:
            return await self.transport.send(request)

        if abort.is_set():
            raise TransportError(ABORTED_MESSAGE)

        send_task = asyncio.ensure_future(self.transport.send(request))
        abort_task = asyncio.ensure_future(abort.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, abort_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            abort_task.cancel()
            if not send_task.done():
                send_task.cancel()

        if send_task in done:
            return send_task.result()

        # Let the cancelled transport call unwind before reporting the abort
        await asyncio.gather(send_task, return_exceptions=True)
        logger.debug(f"{request.method} {request.url} aborted")
        raise TransportError(ABORTED_MESSAGE)

    async def aclose(self) -> None:
        await self.transport.aclose()


def _decode_body(response: TransportResponse, response_format: str) -> Any:
    if response_format == "bytes":
        return response.content
    if response_format == "text":
        return response.text
    if not response.content:
        return None
    try:
        return json.loads(response.text)
    except ValueError:
        logger.debug(f"Response body is not JSON ({len(response.content)} bytes), returning text")
        return response.text


def _parse_error(response: TransportResponse) -> Any:
    if not response.content:
        return {"message": response.reason}
    try:
        return json.loads(response.text)
    except ValueError:
        return response.text


async def dispatch(
    descriptor: RequestDescriptor,
    config: JiraConfig,
    options: RequestOptions | None = None,
    transport: Transport | None = None,
) -> JiraResult[Any]:
    """Dispatch a single descriptor without keeping a client around."""
    dispatcher = Dispatcher(config, transport)
    try:
        return await dispatcher.dispatch(descriptor, options)
    finally:
        if transport is None:
            await dispatcher.aclose()
