"""Event types emitted during an audit run."""

from dataclasses import dataclass

from selector_usage.model.report import Report


@dataclass(frozen=True)
class AuditStarted:
    total_views: int
    total_selectors: int


@dataclass(frozen=True)
class AuditCompleted:
    report: Report


@dataclass(frozen=True)
class AuditFailed:
    error: str


@dataclass(frozen=True)
class ViewStarted:
    view: str
    index: int  # 1-based


@dataclass(frozen=True)
class ViewRetrying:
    view: str
    attempt: int
    delay: float


@dataclass(frozen=True)
class ViewFailed:
    view: str
    error: str


@dataclass(frozen=True)
class ViewCompleted:
    """Progress sample published after every view."""

    processed_count: int
    total_count: int
    current_view: str
    estimated_time_remaining: str
    distinct_used_so_far: int
    elapsed_ms: float
