"""Exception hierarchy shared by the transport, parsing and pagination layers."""

from __future__ import annotations

from dataclasses import dataclass


class GraphError(RuntimeError):
    """Base exception raised for social graph client failures."""


class TransportError(GraphError):
    """Raised when a request could not complete (connectivity, timeout)."""


@dataclass(frozen=True)
class ApiErrorDetail:
    """Single error entry from an error response body."""

    code: int
    message: str


class ApiError(TransportError):
    """Raised when the service answers with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        errors: list[ApiErrorDetail] | None = None,
        endpoint: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.errors = list(errors or [])
        self.endpoint = endpoint
        detail = "; ".join(f"{err.code}: {err.message}" for err in self.errors)
        message = f"Service responded with {status_code}"
        if endpoint:
            message += f" for {endpoint}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class DecodeError(GraphError):
    """Raised when a response body does not match the expected shape."""


class ConfigurationError(GraphError):
    """Raised when an iterator is reconfigured in an invalid way."""


class StalledCursorError(GraphError):
    """Raised when a listing keeps returning empty pages without finishing."""

    def __init__(self, endpoint: str, cursor: int, empty_pages: int) -> None:
        self.endpoint = endpoint
        self.cursor = cursor
        self.empty_pages = empty_pages
        super().__init__(
            f"{endpoint} returned {empty_pages} consecutive empty pages "
            f"(last cursor {cursor})"
        )
