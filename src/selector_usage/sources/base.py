from __future__ import annotations

from typing import Protocol

from selector_usage.model.document import DocumentTree
from selector_usage.model.stylesheet import StylesheetRule
from selector_usage.model.view import ViewNode


class StylesheetSource(Protocol):
    """Protocol for stylesheet sources."""

    def load_stylesheet(self) -> list[StylesheetRule]:
        """Return the parsed rules in stylesheet order. Raises SourceLoadError."""
        ...


class ViewTreeSource(Protocol):
    """Protocol for view tree (sitemap) sources."""

    def load_view_tree(self) -> ViewNode:
        """Return the root of the view tree. Raises SourceLoadError."""
        ...


class DocumentLoader(Protocol):
    """Protocol for per-view document acquisition."""

    def load(self, view: str) -> DocumentTree | None:
        """Return the document for *view*, or None when there is nothing to query.

        Raises DocumentLoadError when acquisition fails.
        """
        ...
