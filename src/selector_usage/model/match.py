"""Match model: per-selector and per-view results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MatchOutcome(Enum):
    """Result of evaluating one selector against one document tree."""

    USED = "used"
    NO_MATCH = "no_match"
    INVALID = "invalid"


@dataclass(frozen=True)
class MatchResult:
    """Outcome for one (view, selector) pair.

    ``ignored`` is independent of ``outcome``: vendor-prefixed selectors are
    reported as ignored whatever the query engine made of them.
    """

    selector: str
    outcome: MatchOutcome
    ignored: bool = False
    error: str = ""

    @property
    def used(self) -> bool:
        return self.outcome is MatchOutcome.USED

    @property
    def invalid(self) -> bool:
        return self.outcome is MatchOutcome.INVALID


@dataclass(frozen=True)
class ViewResult:
    """Contribution of one crawled view to the run."""

    view: str
    used: tuple[str, ...] = ()
    elapsed_ms: float = 0.0
    error: str = ""  # acquisition failure, empty when the document loaded
