"""Report building: partition the selector set and sort every artifact."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from selector_usage.model.report import Report
from selector_usage.report.summary import format_summary

__all__ = ["build_report", "partition_selectors", "sort_alphabetical"]


def sort_alphabetical(items: Iterable[str]) -> list[str]:
    """De-duplicate and sort by code point (``".a" < "Z" < "b"``), not by locale."""
    return sorted(set(items))


def partition_selectors(selectors: Iterable[str], matched: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split *selectors* into (used, unused) against the matched union.

    Matched selectors that are not part of *selectors* are disregarded.
    """
    matched_set = set(matched)
    selector_set = set(selectors)
    used = sort_alphabetical(selector_set & matched_set)
    unused = sort_alphabetical(selector_set - matched_set)
    return used, unused


def build_report(
    selectors: Iterable[str],
    matched: Iterable[str],
    *,
    invalid: Iterable[str] = (),
    ignored: Iterable[str] = (),
    views: Iterable[str] = (),
    timings_ms: Iterable[float] = (),
    run_date: date | None = None,
) -> Report:
    """Assemble the immutable report from the final state of a run.

    ``timings_ms`` is the per-view timing log; its sum is the elapsed time
    shown in the summary.
    """
    selector_list = list(selectors)
    used, unused = partition_selectors(selector_list, matched)
    invalid_sorted = sort_alphabetical(invalid)
    ignored_sorted = sort_alphabetical(ignored)
    views_sorted = sort_alphabetical(views)
    elapsed_ms = float(sum(timings_ms))
    run_date = run_date or date.today()
    total_selectors = len(set(selector_list))

    summary = format_summary(
        run_date=run_date,
        total_selectors=total_selectors,
        total_views=len(views_sorted),
        used=len(used),
        unused=len(unused),
        invalid=len(invalid_sorted),
        ignored=len(ignored_sorted),
        elapsed_ms=elapsed_ms,
    )
    return Report(
        views=tuple(views_sorted),
        used=tuple(used),
        unused=tuple(unused),
        invalid=tuple(invalid_sorted),
        ignored=tuple(ignored_sorted),
        total_selectors=total_selectors,
        elapsed_ms=elapsed_ms,
        run_date=run_date,
        summary=summary,
    )
