"""Plain-text summary block for a finished run."""

from __future__ import annotations

from datetime import date

from selector_usage.engine.timing import format_hms

__all__ = ["format_summary"]


def format_summary(
    *,
    run_date: date,
    total_selectors: int,
    total_views: int,
    used: int,
    unused: int,
    invalid: int,
    ignored: int,
    elapsed_ms: float,
) -> str:
    lines = [
        f"SUMMARY ({run_date.isoformat()})",
        f"- Total number of selectors: {total_selectors}",
        f"- Total number of views: {total_views}",
        "",
        f"- Selectors used: {used}",
        f"- Selectors not used: {unused}",
        f"- Selectors invalid: {invalid}",
        f"- Selectors ignored: {ignored}",
        "",
        f"Script run for {format_hms(elapsed_ms)}",
    ]
    return "\n".join(lines) + "\n"
