"""Shared pytest fixtures for jiraclient tests."""

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from jiraclient.config import DefaultJiraConfig, ForgeJiraConfig
from jiraclient.dispatcher import Dispatcher
from jiraclient.transports.base import TransportRequest, TransportResponse


def json_response(status: int, payload: Any, reason: str = "") -> TransportResponse:
    """Build a transport response with a JSON body."""
    return TransportResponse(
        status=status,
        reason=reason,
        headers={"content-type": "application/json"},
        content=json.dumps(payload).encode(),
    )


class StubTransport:
    """Transport that records requests and replays a fixed outcome."""

    def __init__(self, response: TransportResponse | None = None, error: Exception | None = None):
        self.response = response or TransportResponse(status=200)
        self.error = error
        self.requests: list[TransportRequest] = []
        self.closed = False

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed = True

    @property
    def last_request(self) -> TransportRequest:
        return self.requests[-1]


@pytest.fixture
def default_config() -> DefaultJiraConfig:
    """Create a direct-mode configuration."""
    return DefaultJiraConfig(
        base_url="https://example.atlassian.net",
        email="me@example.com",
        api_token="secret-token",
    )


@pytest.fixture
def stub_transport() -> StubTransport:
    """Create a stub transport answering 200 with an empty body."""
    return StubTransport()


@pytest.fixture
def dispatcher(default_config: DefaultJiraConfig, stub_transport: StubTransport) -> Dispatcher:
    """Create a dispatcher wired to the stub transport."""
    return Dispatcher(default_config, stub_transport)


@pytest.fixture
def bridge_response() -> MagicMock:
    """Create a host response object as a bridge would return it."""
    response = MagicMock()
    response.status_code = 200
    response.reason_phrase = "OK"
    response.headers = {"content-type": "application/json"}
    response.content = b'{"id": "10000", "key": "EX"}'
    return response


@pytest.fixture
def bridge_api(bridge_response: MagicMock) -> MagicMock:
    """Create a mock host bridge with separate user and app requesters."""
    user_requester = MagicMock()
    user_requester.request_jira = AsyncMock(return_value=bridge_response)
    app_requester = MagicMock()
    app_requester.request_jira = AsyncMock(return_value=bridge_response)

    api = MagicMock()
    api.as_user.return_value = user_requester
    api.as_app.return_value = app_requester
    return api


@pytest.fixture
def forge_config(bridge_api: MagicMock) -> ForgeJiraConfig:
    """Create a bridge-mode configuration."""
    return ForgeJiraConfig(api=bridge_api)
