"""Request header assembly."""

import base64
from collections.abc import Mapping

from .config import DefaultJiraConfig, JiraConfig

EXPERIMENTAL_HEADER = "X-ExperimentalApi"
JSON_CONTENT_TYPE = "application/json"
BINARY_CONTENT_TYPE = "application/octet-stream"


def auth_header(config: DefaultJiraConfig) -> dict[str, str]:
    """Get the authorization header for a direct-mode configuration."""
    if config.access_token:
        return {"Authorization": f"Bearer {config.access_token}"}
    # Basic Auth: email:api_token base64 encoded
    credentials = f"{config.email}:{config.api_token}"
    encoded = base64.b64encode(credentials.encode()).decode()
    return {"Authorization": f"Basic {encoded}"}


def merge_headers(base: Mapping[str, str], overlay: Mapping[str, str]) -> dict[str, str]:
    """Apply ``overlay`` on top of ``base``. Names compare case-insensitively."""
    merged = dict(base)
    for name, value in overlay.items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def has_header(headers: Mapping[str, str], name: str) -> bool:
    return any(key.lower() == name.lower() for key in headers)


def create_headers(
    config: JiraConfig,
    *,
    body: str | bytes | None = None,
    is_experimental: bool = False,
    overlays: tuple[Mapping[str, str], ...] = (),
) -> dict[str, str]:
    """Build the headers for one request.

    Layers, each winning over the previous one: defaults, the Authorization
    header (direct mode only), the experimental opt-in, then every overlay in
    order. A Content-Type is added for a body when no layer supplied one.
    """
    headers: dict[str, str] = {"Accept": JSON_CONTENT_TYPE}

    if isinstance(config, DefaultJiraConfig):
        headers.update(auth_header(config))

    if is_experimental:
        headers[EXPERIMENTAL_HEADER] = "opt-in"

    for overlay in overlays:
        headers = merge_headers(headers, overlay)

    if body is not None and not has_header(headers, "Content-Type"):
        headers["Content-Type"] = BINARY_CONTENT_TYPE if isinstance(body, bytes) else JSON_CONTENT_TYPE

    return headers
