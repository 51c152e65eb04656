"""selector_usage: find the CSS selectors a site actually uses."""
from __future__ import annotations

__version__ = "0.1.0"

from selector_usage.config import AuditConfig
from selector_usage.engine.engine import AuditEngine
from selector_usage.model.report import Report

__all__ = [
    "__version__",
    "AuditConfig",
    "AuditEngine",
    "Report",
]
