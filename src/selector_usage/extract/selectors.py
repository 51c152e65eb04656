"""Selector extraction: the de-duplicated selector set of a stylesheet."""

from __future__ import annotations

from collections.abc import Iterable

from selector_usage.model.stylesheet import StylesheetRule

__all__ = ["extract_selectors"]


def extract_selectors(rules: Iterable[StylesheetRule]) -> list[str]:
    """Return each rule's selector once, in first-seen stylesheet order."""
    seen: set[str] = set()
    selectors: list[str] = []
    for rule in rules:
        if rule.selector in seen:
            continue
        seen.add(rule.selector)
        selectors.append(rule.selector)
    return selectors
