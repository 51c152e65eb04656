"""View collection: flatten the sitemap view tree into crawlable view ids."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from selector_usage.model.view import ViewNode

__all__ = ["TEST_VIEW_PREFIX", "collect_views"]

# Views under this namespace are test fixtures of the site, never crawled.
TEST_VIEW_PREFIX = "test/"


def _flatten(node: ViewNode, collected: list[str]) -> list[str]:
    if node.id and node.id not in collected:
        collected.append(node.id)
    for child in node.views:
        _flatten(child, collected)
    return collected


def collect_views(root: ViewNode | Mapping[str, Any]) -> list[str]:
    """Return the unique, non-test view ids of *root* in pre-order.

    A node's own id comes before the ids of its children; an id seen at
    several positions is kept at its first one.
    """
    if not isinstance(root, ViewNode):
        root = ViewNode.from_dict(root)

    flat = _flatten(root, [])
    views: list[str] = []
    for view in flat:
        if not view or view.startswith(TEST_VIEW_PREFIX):
            continue
        if view not in views:
            views.append(view)
    return views
