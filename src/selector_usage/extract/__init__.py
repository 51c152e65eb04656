"""Extraction: selector set from parsed CSS, view list from the sitemap tree."""

from selector_usage.extract.selectors import extract_selectors
from selector_usage.extract.views import TEST_VIEW_PREFIX, collect_views

__all__ = ["extract_selectors", "collect_views", "TEST_VIEW_PREFIX"]
