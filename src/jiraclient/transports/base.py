"""Base interfaces and data types for transports.

All transports must implement the Transport protocol. A transport performs
exactly one network (or bridge) hop per send() and raises TransportError when
no response could be obtained.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from ..request import AsType


@dataclass(frozen=True)
class TransportRequest:
    """A fully resolved request, ready to send."""

    method: str
    url: str  # path and query string, relative to the Jira site
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | bytes | None = None
    as_: AsType = "user"
    timeout: float | None = None


@dataclass(frozen=True)
class TransportResponse:
    """Status line, headers and raw body of a response."""

    status: int
    reason: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Interface all transports must implement."""

    async def send(self, request: TransportRequest) -> TransportResponse:
        """Send one request.

        Args:
            request: The resolved request.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: If no response was received.
        """
        ...

    async def aclose(self) -> None:
        """Release any resources owned by the transport."""
        ...
