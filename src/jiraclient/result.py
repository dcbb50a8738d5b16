"""Result envelope returned by every dispatched request."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import JiraApiError

T = TypeVar("T")


@dataclass(frozen=True)
class JiraResult(Generic[T]):
    """Success-or-error outcome of one Jira request.

    On success ``data`` holds the decoded response body (``None`` when the
    endpoint returns no body). On failure ``error`` holds the parsed error
    payload, the raw response text, or a transport failure message, and
    ``status`` is 0 when no response was received at all.
    """

    success: bool
    status: int
    data: T | None = None
    error: Any = None

    @property
    def ok(self) -> bool:
        return self.success

    def unwrap(self) -> T | None:
        """Return the decoded data, raising JiraApiError for an error envelope."""
        if not self.success:
            raise JiraApiError(self.status, self.error)
        return self.data

    def as_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "status": self.status,
            "data": self.data,
            "error": self.error,
        }


def ok(status: int, data: Any = None) -> JiraResult[Any]:
    """Build a success envelope."""
    return JiraResult(success=True, status=status, data=data)


def err(status: int, error: Any) -> JiraResult[Any]:
    """Build an error envelope."""
    return JiraResult(success=False, status=status, error=error)
