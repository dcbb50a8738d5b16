"""Shared plumbing for service modules."""

import json
from collections.abc import Mapping
from typing import Any

from ..dispatcher import Dispatcher
from ..request import HttpMethod, RequestDescriptor, RequestOptions, ResponseFormat
from ..result import JiraResult

JsonObject = dict[str, Any]


def to_json(value: Any) -> str:
    """Serialize a request body. Services always send compact JSON."""
    return json.dumps(value, separators=(",", ":"))


class Service:
    """Base class for a group of Jira endpoints."""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def _request(
        self,
        path: str,
        method: HttpMethod = "GET",
        *,
        path_params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        body: str | bytes | None = None,
        headers: Mapping[str, str] | None = None,
        is_response_available: bool = True,
        response_format: ResponseFormat = "json",
        is_experimental: bool = False,
        opts: RequestOptions | None = None,
    ) -> JiraResult[Any]:
        descriptor = RequestDescriptor(
            path=path,
            method=method,
            path_params=path_params or {},
            query_params=query_params or {},
            body=body,
            headers=headers or {},
            is_response_available=is_response_available,
            response_format=response_format,
            is_experimental=is_experimental,
        )
        return await self._dispatcher.dispatch(descriptor, opts)
