"""jiraclient - async Python client for the Jira Cloud REST API."""

__version__ = "0.3.0"

from .client import JiraClient
from .config import DefaultJiraConfig, ForgeJiraConfig, validate_config
from .dispatcher import Dispatcher, dispatch
from .errors import (
    ConfigError,
    DescriptorError,
    JiraApiError,
    JiraClientError,
    MissingPathParameterError,
    TransportError,
)
from .request import RequestDescriptor, RequestOptions
from .result import JiraResult

__all__ = [
    "ConfigError",
    "DefaultJiraConfig",
    "DescriptorError",
    "Dispatcher",
    "ForgeJiraConfig",
    "JiraApiError",
    "JiraClient",
    "JiraClientError",
    "JiraResult",
    "MissingPathParameterError",
    "RequestDescriptor",
    "RequestOptions",
    "TransportError",
    "__version__",
    "dispatch",
    "validate_config",
]
