"""Exception types for jiraclient.

Only programmer mistakes (bad configuration, malformed descriptors) are raised
from the dispatch path. Remote API errors and network failures are returned in
a JiraResult instead.
"""

from typing import Any


class JiraClientError(Exception):
    """Base class for all jiraclient exceptions."""

    pass


class ConfigError(JiraClientError):
    """Raised when a client configuration is missing required properties."""

    pass


class DescriptorError(JiraClientError):
    """Raised when a request descriptor cannot be turned into a request."""

    pass


class MissingPathParameterError(DescriptorError):
    """Raised when a path template token has no substitution value."""

    def __init__(self, name: str, path: str):
        super().__init__(f"Missing value for path parameter '{name}' in {path}")
        self.name = name
        self.path = path


class TransportError(JiraClientError):
    """Raised by a transport when no response could be obtained."""

    pass


class JiraApiError(JiraClientError):
    """Raised by JiraResult.unwrap() for an error envelope."""

    def __init__(self, status: int, error: Any):
        super().__init__(f"Jira request failed with status {status}: {error}")
        self.status = status
        self.error = error
