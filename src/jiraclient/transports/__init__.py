"""Transport registration for jiraclient.

Each transport module exports:
- TRANSPORT_TYPE: str - The client type it serves ("default" or "forge")
- create_transport(config, **kwargs) -> Transport - Factory function

The transport for a client is chosen once, from its configuration type.
"""

import importlib
from typing import Callable

from ..config import JiraConfig
from ..errors import ConfigError
from .base import Transport, TransportRequest, TransportResponse

TRANSPORT_MODULES = ("direct", "bridge")

# Cache of discovered transports
_transports: dict[str, Callable[..., Transport]] | None = None


def discover_transports() -> dict[str, Callable[..., Transport]]:
    """Map client types to their create_transport factory functions."""
    global _transports

    if _transports is not None:
        return _transports

    _transports = {}
    for module_name in TRANSPORT_MODULES:
        module = importlib.import_module(f".{module_name}", package="jiraclient.transports")
        _transports[module.TRANSPORT_TYPE] = module.create_transport

    return _transports


def get_transport(name: str) -> Callable[..., Transport] | None:
    """Get a transport factory by client type, or None if not found."""
    return discover_transports().get(name.lower())


def list_transports() -> list[str]:
    """List all available client types."""
    return list(discover_transports().keys())


def create_transport(config: JiraConfig, **kwargs) -> Transport:
    """Create the transport matching a configuration's client type.

    Raises:
        ConfigError: If no transport serves the configuration type.
    """
    client_type = getattr(config, "client_type", None)
    factory = get_transport(client_type) if client_type else None
    if factory is None:
        raise ConfigError(f"No transport for client type: {client_type!r}")
    return factory(config, **kwargs)


__all__ = [
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "create_transport",
    "discover_transports",
    "get_transport",
    "list_transports",
]
