"""Cooperative cancellation for audit runs.

The engine polls the signal before each view; a view already in flight is
finished first.
"""
from __future__ import annotations

from selector_usage.errors import AuditCancelled


class AbortSignal:
    """Read side of a cancellation: set once, never cleared."""

    def __init__(self) -> None:
        self._reason: str | None = None

    @property
    def aborted(self) -> bool:
        return self._reason is not None

    @property
    def reason(self) -> str:
        return self._reason or ""

    def raise_if_aborted(self) -> None:
        if self._reason is not None:
            raise AuditCancelled(f"audit cancelled: {self._reason}")

    def _abort(self, reason: str) -> None:
        # The first reason wins; a second Ctrl-C does not rewrite it.
        if self._reason is None:
            self._reason = reason


class AbortController:
    """Owns an :class:`AbortSignal` and is the only thing that may trip it."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: str = "aborted") -> None:
        self.signal._abort(reason)
