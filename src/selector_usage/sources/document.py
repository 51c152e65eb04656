"""Document acquisition: load a view's HTML and expose it as a DocumentTree."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from selector_usage.errors import AuditError, DocumentLoadError, SelectorQueryError
from selector_usage.sources._http import HttpClient

__all__ = ["SoupDocument", "HttpDocumentLoader", "FileDocumentLoader"]

logger = logging.getLogger(__name__)


class SoupDocument:
    """A parsed HTML page queried through soupsieve."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")

    def matches(self, selector: str) -> bool:
        try:
            return self._soup.select_one(selector) is not None
        except (SelectorSyntaxError, ValueError, NotImplementedError) as exc:
            raise SelectorQueryError(str(exc), selector=selector, cause=exc) from exc


class HttpDocumentLoader:
    """Loads ``base_url + view`` for each view; the base URL ends with a slash."""

    def __init__(self, client: HttpClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url

    def url_for(self, view: str) -> str:
        return f"{self._base_url}{view}"

    def load(self, view: str) -> SoupDocument | None:
        url = self.url_for(view)
        try:
            html = self._client.get_text(url)
        except AuditError as exc:
            raise DocumentLoadError(str(exc), view=view, cause=exc) from exc
        if not html.strip():
            logger.info("Empty document for view %s", view)
            return None
        return SoupDocument(html)


class FileDocumentLoader:
    """Loads saved pages: ``<root>/<view>.html``, else ``<root>/<view>/index.html``."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def path_for(self, view: str) -> Path:
        page = self._root / f"{view}.html"
        if page.is_file():
            return page
        return self._root / view / "index.html"

    def load(self, view: str) -> SoupDocument | None:
        path = self.path_for(view)
        try:
            html = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentLoadError(f"cannot read {path}: {exc}", view=view, cause=exc) from exc
        if not html.strip():
            return None
        return SoupDocument(html)
