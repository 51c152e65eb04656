"""Event system: bus and event types for the audit lifecycle."""

from selector_usage.events.bus import EventBus
from selector_usage.events.types import (
    AuditCompleted,
    AuditFailed,
    AuditStarted,
    ViewCompleted,
    ViewFailed,
    ViewRetrying,
    ViewStarted,
)

__all__ = [
    "EventBus",
    "AuditCompleted",
    "AuditFailed",
    "AuditStarted",
    "ViewCompleted",
    "ViewFailed",
    "ViewRetrying",
    "ViewStarted",
]
