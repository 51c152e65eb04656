"""Error hierarchy for selector usage audits."""
from __future__ import annotations


class AuditError(Exception):
    """Base error for all selector_usage errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Fatal errors: abort the run, no artifacts are produced
# ---------------------------------------------------------------------------


class SourceLoadError(AuditError):
    """The view tree or the stylesheet could not be produced."""

    def __init__(self, message: str, *, source: str = "", cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.source = source


class AuditCancelled(AuditError):
    """The run was aborted through its abort signal."""


# ---------------------------------------------------------------------------
# Recoverable errors: classified and folded into the report
# ---------------------------------------------------------------------------


class DocumentLoadError(AuditError):
    """The document for a single view could not be acquired."""

    def __init__(self, message: str, *, view: str = "", cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.view = view


class SelectorQueryError(AuditError):
    """A selector could not be evaluated against a document tree."""

    def __init__(self, message: str, *, selector: str = "", cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.selector = selector


# ---------------------------------------------------------------------------
# Transport errors raised by the HTTP client
# ---------------------------------------------------------------------------


class RequestTimeoutError(AuditError):
    """A request timed out."""


class NetworkError(AuditError):
    """A network-level error occurred."""


class HttpStatusError(AuditError):
    """The server answered with an error status code."""

    def __init__(self, message: str, *, status_code: int, cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
