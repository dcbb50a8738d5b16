"""Request descriptors and URL building.

A RequestDescriptor is the in-memory form of one pending Jira call. Service
methods create one per call and hand it to the dispatcher, which turns it into
a URL with build_url() before sending it through a transport.
"""

import asyncio
import re
import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from .errors import DescriptorError, MissingPathParameterError

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]
ResponseFormat = Literal["json", "text", "bytes"]
AsType = Literal["user", "app"]

METHODS = ("GET", "POST", "PUT", "DELETE")
RESPONSE_FORMATS = ("json", "text", "bytes")

# Matches {projectIdOrKey} style tokens in a path template
PATH_TOKEN = re.compile(r"\{([^}]+)\}")


def _checked_headers(headers: Mapping[str, str]) -> Mapping[str, str]:
    """Freeze a header overlay, rejecting names or values HTTP can't carry."""
    for name, value in headers.items():
        if not isinstance(value, str):
            raise DescriptorError(f"Header {name!r} must be a string, got {type(value).__name__}")
        if not name.isascii() or not value.isascii():
            raise DescriptorError(f"Header {name!r} contains non-ASCII characters")
    return MappingProxyType(dict(headers))


@dataclass(frozen=True)
class RequestDescriptor:
    """Description of a single Jira REST call.

    Attributes:
        path: Path template with ``{name}`` placeholders, e.g.
            ``/rest/api/3/project/{projectIdOrKey}``.
        method: HTTP method.
        path_params: Values for every placeholder in ``path``.
        query_params: Query values. Lists become repeated keys, None is omitted.
        body: Pre-serialized JSON text or raw bytes. Sent unchanged.
        headers: Header overlay applied over the client defaults.
        is_response_available: Whether a response body should be decoded.
        response_format: How to decode the response body.
        is_experimental: Opt in to experimental Jira APIs.
    """

    path: str
    method: HttpMethod = "GET"
    path_params: Mapping[str, Any] = field(default_factory=dict)
    query_params: Mapping[str, Any] = field(default_factory=dict)
    body: str | bytes | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    is_response_available: bool = True
    response_format: ResponseFormat = "json"
    is_experimental: bool = False

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in METHODS:
            raise DescriptorError(f"Unsupported HTTP method: {self.method}")
        if self.response_format not in RESPONSE_FORMATS:
            raise DescriptorError(f"Unsupported response format: {self.response_format}")
        if self.body is not None and not isinstance(self.body, (str, bytes)):
            raise DescriptorError(
                "Request body must be pre-serialized text or bytes, "
                f"got {type(self.body).__name__}"
            )
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "path_params", MappingProxyType(dict(self.path_params)))
        object.__setattr__(self, "query_params", MappingProxyType(dict(self.query_params)))
        object.__setattr__(self, "headers", _checked_headers(self.headers))


@dataclass(frozen=True)
class RequestOptions:
    """Per-call overrides supplied by the caller.

    Attributes:
        headers: Extra headers. These win over every other header source.
        as_: Bridge mode only. Run the request as the "user" or the "app".
        abort: Cancellation signal. Setting it aborts the in-flight call.
        timeout: Direct mode only. Timeout in seconds for this call.
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    as_: AsType = "user"
    abort: asyncio.Event | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.as_ not in ("user", "app"):
            raise DescriptorError(f"Invalid 'as_' value: {self.as_}. Must be 'user' or 'app'")
        object.__setattr__(self, "headers", _checked_headers(self.headers))


def _format_value(value: Any) -> str:
    """Render a parameter value the way the Jira API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_path(template: str, path_params: Mapping[str, Any]) -> str:
    """Substitute every ``{name}`` token in a path template.

    Args:
        template: Path template.
        path_params: Values for the tokens.

    Returns:
        The path with each token replaced by its URL-encoded value.

    Raises:
        MissingPathParameterError: If a token has no value.
        DescriptorError: If a value is given for a token the template lacks.
    """
    used: set[str] = set()

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        value = path_params.get(name)
        if value is None:
            raise MissingPathParameterError(name, template)
        used.add(name)
        return urllib.parse.quote(_format_value(value), safe="")

    path = PATH_TOKEN.sub(substitute, template)

    unused = set(path_params) - used
    if unused:
        raise DescriptorError(
            f"Path parameters {sorted(unused)} do not appear in {template}"
        )
    return path


def build_query(query_params: Mapping[str, Any]) -> str:
    """Build a query string from a parameter mapping.

    List values are sent as repeated keys (``id=1&id=2``), never comma-joined.
    None values, at the top level or inside a list, are left out.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in query_params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((key, _format_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _format_value(value)))
    return urllib.parse.urlencode(pairs)


def build_url(descriptor: RequestDescriptor) -> str:
    """Build the path and query string for a descriptor (no base URL)."""
    path = build_path(descriptor.path, descriptor.path_params)
    query = build_query(descriptor.query_params)
    return f"{path}?{query}" if query else path
