"""Matching: selector sanitation and per-view selector evaluation."""

from selector_usage.matching.matcher import ViewMatcher, match_selector
from selector_usage.matching.sanitizer import remove_pseudo, should_be_ignored

__all__ = ["ViewMatcher", "match_selector", "remove_pseudo", "should_be_ignored"]
