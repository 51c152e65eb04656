"""Audit engine: crawls the views one by one and builds the usage report."""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Callable

from selector_usage.cancel import AbortSignal
from selector_usage.engine.retry import NO_RETRY, RetryPolicy
from selector_usage.engine.state import AuditState
from selector_usage.errors import AuditError, DocumentLoadError
from selector_usage.events import types as events
from selector_usage.events.bus import EventBus
from selector_usage.extract.selectors import extract_selectors
from selector_usage.extract.views import collect_views
from selector_usage.matching.matcher import ViewMatcher
from selector_usage.model.document import DocumentTree
from selector_usage.model.match import ViewResult
from selector_usage.model.report import Report
from selector_usage.report.builder import build_report
from selector_usage.sources.base import DocumentLoader, StylesheetSource, ViewTreeSource

logger = logging.getLogger(__name__)


class AuditEngine:
    """Runs one selector usage audit.

    Views are processed strictly in sequence: the remaining-time estimate is
    defined over the view index and target sites may reject parallel crawls.
    Only a failing view tree or stylesheet source (or an abort) ends the run
    early, and then no report is produced.
    """

    def __init__(
        self,
        stylesheet_source: StylesheetSource,
        view_source: ViewTreeSource,
        document_loader: DocumentLoader,
        *,
        event_bus: EventBus | None = None,
        retry_policy: RetryPolicy | None = None,
        abort_signal: AbortSignal | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        run_date: date | None = None,
    ) -> None:
        self.stylesheet_source = stylesheet_source
        self.view_source = view_source
        self.document_loader = document_loader
        self.event_bus = event_bus or EventBus()
        self.retry_policy = retry_policy or NO_RETRY
        self._abort_signal = abort_signal
        self._clock = clock
        self._sleep = sleep
        self._run_date = run_date
        self.state = AuditState()

    def run(self) -> Report:
        """Load both sources, crawl every view, and return the report."""
        try:
            views = collect_views(self.view_source.load_view_tree())
            selectors = extract_selectors(self.stylesheet_source.load_stylesheet())
            self._crawl(views, selectors)
        except AuditError as exc:
            self.event_bus.emit(events.AuditFailed(error=str(exc)))
            raise

        report = build_report(
            selectors,
            self.state.usage,
            invalid=self.state.invalid,
            ignored=self.state.ignored,
            views=views,
            timings_ms=self.state.timing.timings,
            run_date=self._run_date,
        )
        logger.info(
            "Audit finished: %d used, %d unused, %d invalid, %d ignored",
            len(report.used),
            len(report.unused),
            len(report.invalid),
            len(report.ignored),
        )
        self.event_bus.emit(events.AuditCompleted(report=report))
        return report

    def _crawl(self, views: list[str], selectors: list[str]) -> None:
        total = len(views)
        logger.info("Auditing %d selectors across %d views", len(selectors), total)
        self.event_bus.emit(events.AuditStarted(total_views=total, total_selectors=len(selectors)))

        matcher = ViewMatcher(self.state.invalid, self.state.ignored)
        for index, view in enumerate(views, start=1):
            self._check_abort()
            self.event_bus.emit(events.ViewStarted(view=view, index=index))

            result = self.process_view(view, selectors, matcher)
            self.state.timing.record(result.elapsed_ms)
            self.state.usage.fold(result.used)

            self.event_bus.emit(
                events.ViewCompleted(
                    processed_count=index,
                    total_count=total,
                    current_view=view,
                    estimated_time_remaining=self.state.timing.estimate_remaining(total),
                    distinct_used_so_far=len(self.state.usage),
                    elapsed_ms=result.elapsed_ms,
                )
            )

    def process_view(self, view: str, selectors: list[str], matcher: ViewMatcher) -> ViewResult:
        """Acquire one view's document and match every selector against it.

        The elapsed time covers acquisition, retries and matching.
        """
        start = self._clock()
        document, error = self._acquire_document(view)
        used: list[str] = []
        if document is not None:
            used = matcher.match(document, selectors)
        elapsed_ms = (self._clock() - start) * 1000
        return ViewResult(
            view=view,
            used=tuple(used),
            elapsed_ms=elapsed_ms,
            error=error,
        )

    def _acquire_document(self, view: str) -> tuple[DocumentTree | None, str]:
        """Load a document with the retry policy; a final failure yields no document."""
        attempt = 1
        while True:
            try:
                return self.document_loader.load(view), ""
            except DocumentLoadError as exc:
                if attempt >= self.retry_policy.max_attempts:
                    logger.warning("Skipping view %s: %s", view, exc)
                    self.event_bus.emit(events.ViewFailed(view=view, error=str(exc)))
                    return None, str(exc)
                delay = self.retry_policy.delay_for_attempt(attempt)
                logger.info("Retrying view %s in %.2fs after: %s", view, delay, exc)
                self.event_bus.emit(events.ViewRetrying(view=view, attempt=attempt, delay=delay))
                self._sleep(delay)
                attempt += 1

    def _check_abort(self) -> None:
        if self._abort_signal is not None:
            self._abort_signal.raise_if_aborted()
