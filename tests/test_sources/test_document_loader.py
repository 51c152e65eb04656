"""Tests for document loading and soupsieve-backed matching."""

import httpx
import pytest

from selector_usage.errors import DocumentLoadError, SelectorQueryError
from selector_usage.sources._http import HttpClient
from selector_usage.sources.document import FileDocumentLoader, HttpDocumentLoader, SoupDocument

PAGE = """
<html><body>
  <header class="site-header"><a class="logo" href="/">Home</a></header>
  <ul id="menu"><li class="item">One</li><li class="item active">Two</li></ul>
</body></html>
"""


class TestSoupDocument:
    def test_matching_selectors(self):
        doc = SoupDocument(PAGE)
        assert doc.matches(".site-header")
        assert doc.matches("#menu > li.item.active")
        assert doc.matches("header a[href='/']")

    def test_non_matching_selector(self):
        assert not SoupDocument(PAGE).matches(".footer")

    def test_malformed_selector_raises(self):
        with pytest.raises(SelectorQueryError) as exc_info:
            SoupDocument(PAGE).matches(".item[")
        assert exc_info.value.selector == ".item["

    def test_empty_selector_raises(self):
        with pytest.raises(SelectorQueryError):
            SoupDocument(PAGE).matches("")


# ---------------------------------------------------------------------------
# HttpDocumentLoader
# ---------------------------------------------------------------------------


class TestHttpDocumentLoader:
    def test_url_is_base_plus_view(self):
        loader = HttpDocumentLoader(HttpClient(), "https://example.test/se/")
        assert loader.url_for("private/cards") == "https://example.test/se/private/cards"

    def test_loads_document(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, text=PAGE)

        loader = HttpDocumentLoader(HttpClient(transport=httpx.MockTransport(handler)), "https://example.test/")
        doc = loader.load("start")
        assert requested == ["https://example.test/start"]
        assert doc is not None and doc.matches(".logo")

    def test_blank_body_gives_no_document(self):
        client = HttpClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="  \n")))
        assert HttpDocumentLoader(client, "https://example.test/").load("empty") is None

    def test_http_failure_raises_document_error(self):
        client = HttpClient(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
        with pytest.raises(DocumentLoadError) as exc_info:
            HttpDocumentLoader(client, "https://example.test/").load("broken")
        assert exc_info.value.view == "broken"


# ---------------------------------------------------------------------------
# FileDocumentLoader
# ---------------------------------------------------------------------------


class TestFileDocumentLoader:
    def test_view_html_file(self, tmp_path):
        (tmp_path / "start.html").write_text(PAGE, encoding="utf-8")
        doc = FileDocumentLoader(tmp_path).load("start")
        assert doc is not None and doc.matches("#menu")

    def test_view_directory_index(self, tmp_path):
        (tmp_path / "private" / "cards").mkdir(parents=True)
        (tmp_path / "private" / "cards" / "index.html").write_text(PAGE, encoding="utf-8")
        loader = FileDocumentLoader(tmp_path)
        assert loader.path_for("private/cards") == tmp_path / "private" / "cards" / "index.html"
        assert loader.load("private/cards") is not None

    def test_missing_page(self, tmp_path):
        with pytest.raises(DocumentLoadError, match="cannot read"):
            FileDocumentLoader(tmp_path).load("nowhere")

    def test_blank_page(self, tmp_path):
        (tmp_path / "blank.html").write_text("", encoding="utf-8")
        assert FileDocumentLoader(tmp_path).load("blank") is None
