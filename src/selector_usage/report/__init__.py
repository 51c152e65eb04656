"""Report building, summary formatting and artifact output."""

from selector_usage.report.builder import build_report, partition_selectors, sort_alphabetical
from selector_usage.report.summary import format_summary
from selector_usage.report.writer import ReportWriter

__all__ = [
    "build_report",
    "partition_selectors",
    "sort_alphabetical",
    "format_summary",
    "ReportWriter",
]
