"""Console progress display driven by engine events."""

from __future__ import annotations

import click

from selector_usage.events import types as events
from selector_usage.events.bus import EventBus


class ConsoleProgress:
    """Prints one status line per view to stderr."""

    def __init__(self, bus: EventBus) -> None:
        bus.subscribe(events.AuditStarted, self._on_started)
        bus.subscribe(events.ViewCompleted, self._on_view_completed)
        bus.subscribe(events.ViewFailed, self._on_view_failed)
        bus.subscribe(events.AuditCompleted, self._on_completed)

    def _on_started(self, event: events.AuditStarted) -> None:
        click.echo(
            f"Checking {event.total_selectors} selectors across {event.total_views} views",
            err=True,
        )

    def _on_view_completed(self, event: events.ViewCompleted) -> None:
        width = len(str(event.total_count))
        click.echo(
            f"[{event.processed_count:>{width}}/{event.total_count}] "
            f"ETA {event.estimated_time_remaining} | "
            f"used {event.distinct_used_so_far} | {event.current_view}",
            err=True,
        )

    def _on_view_failed(self, event: events.ViewFailed) -> None:
        click.echo(f"  ! {event.view}: {event.error}", err=True)

    def _on_completed(self, event: events.AuditCompleted) -> None:
        click.echo(f"Done: {event.report.total_views} views", err=True)
