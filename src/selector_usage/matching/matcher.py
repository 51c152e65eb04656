"""View matching: evaluate the selector list against one document tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from selector_usage.errors import SelectorQueryError
from selector_usage.matching.sanitizer import remove_pseudo, should_be_ignored
from selector_usage.model.document import DocumentTree
from selector_usage.model.match import MatchOutcome, MatchResult

if TYPE_CHECKING:
    from selector_usage.engine.accumulator import SelectorSet

__all__ = ["match_selector", "ViewMatcher"]

logger = logging.getLogger(__name__)


def match_selector(document: DocumentTree, selector: str) -> MatchResult:
    """Classify one selector against one document.

    The query runs on the sanitized selector; the result always carries the
    original one.
    """
    ignored = should_be_ignored(selector)
    query = remove_pseudo(selector)
    try:
        found = document.matches(query)
    except SelectorQueryError as exc:
        return MatchResult(
            selector=selector,
            outcome=MatchOutcome.INVALID,
            ignored=ignored,
            error=str(exc),
        )
    outcome = MatchOutcome.USED if found else MatchOutcome.NO_MATCH
    return MatchResult(selector=selector, outcome=outcome, ignored=ignored)


@dataclass
class _ViewAccumulator:
    document: DocumentTree
    used: list[str] = field(default_factory=list)


class ViewMatcher:
    """Matches selector lists against documents, one view at a time.

    Invalid and ignored selectors are recorded into the run-scoped sets
    handed in at construction; they are shared by every view of the run.
    """

    def __init__(self, invalid: SelectorSet, ignored: SelectorSet) -> None:
        self.invalid = invalid
        self.ignored = ignored

    def match(self, document: DocumentTree, selectors: Iterable[str]) -> list[str]:
        """Return the selectors, in list order, that match at least one node."""
        acc = _ViewAccumulator(document=document)
        for selector in selectors:
            acc = self._fold(acc, selector)
        return acc.used

    def _fold(self, acc: _ViewAccumulator, selector: str) -> _ViewAccumulator:
        result = match_selector(acc.document, selector)
        if result.ignored:
            self.ignored.add(selector)
        if result.invalid:
            logger.debug("Invalid selector %r: %s", selector, result.error)
            self.invalid.add(selector)
        elif result.used:
            acc.used.append(selector)
        return acc
