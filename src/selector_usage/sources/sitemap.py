"""View tree sources: the sitemap JSON, fetched or read from disk."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from selector_usage.errors import AuditError, SourceLoadError
from selector_usage.model.view import ViewNode
from selector_usage.sources._http import HttpClient

__all__ = ["HttpViewTreeSource", "FileViewTreeSource"]

logger = logging.getLogger(__name__)


def _to_tree(data: Any, source: str) -> ViewNode:
    """Wrap the sitemap's top-level ``views``; the sitemap object itself is not a view."""
    if not isinstance(data, Mapping):
        raise SourceLoadError(
            f"sitemap source failed: expected a JSON object, got {type(data).__name__}",
            source=source,
        )
    return ViewNode(views=ViewNode.from_dict(data).views)


class HttpViewTreeSource:
    """Sitemap fetched from a URL."""

    def __init__(self, client: HttpClient, url: str) -> None:
        self._client = client
        self._url = url

    def load_view_tree(self) -> ViewNode:
        try:
            data = self._client.get_json(self._url)
        except AuditError as exc:
            raise SourceLoadError(f"sitemap source failed: {exc}", source=self._url, cause=exc) from exc
        except ValueError as exc:
            raise SourceLoadError(
                f"sitemap source failed: invalid JSON: {exc}", source=self._url, cause=exc
            ) from exc
        logger.info("Loaded sitemap from %s", self._url)
        return _to_tree(data, self._url)


class FileViewTreeSource:
    """Sitemap read from a local JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load_view_tree(self) -> ViewNode:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SourceLoadError(
                f"sitemap source failed: {exc}", source=str(self._path), cause=exc
            ) from exc
        return _to_tree(data, str(self._path))
