"""Report model: the immutable result of a completed audit run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

ARTIFACT_NAMES = ("views", "used", "unused", "invalid", "ignored", "summary")


@dataclass(frozen=True)
class Report:
    """Sorted classification of every extracted selector plus the run summary."""

    views: tuple[str, ...]
    used: tuple[str, ...]
    unused: tuple[str, ...]
    invalid: tuple[str, ...]
    ignored: tuple[str, ...]
    total_selectors: int
    elapsed_ms: float
    run_date: date
    summary: str

    @property
    def total_views(self) -> int:
        return len(self.views)

    def artifacts(self) -> dict[str, Any]:
        """Return the named output artifacts: five lists and the summary text."""
        return {
            "views": list(self.views),
            "used": list(self.used),
            "unused": list(self.unused),
            "invalid": list(self.invalid),
            "ignored": list(self.ignored),
            "summary": self.summary,
        }
