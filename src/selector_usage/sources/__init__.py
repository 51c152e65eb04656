"""Collaborators: HTTP access, stylesheet and sitemap sources, document loading."""

from selector_usage.sources._http import HttpClient
from selector_usage.sources.base import DocumentLoader, StylesheetSource, ViewTreeSource
from selector_usage.sources.document import FileDocumentLoader, HttpDocumentLoader, SoupDocument
from selector_usage.sources.sitemap import FileViewTreeSource, HttpViewTreeSource
from selector_usage.sources.stylesheet import FileStylesheetSource, HttpStylesheetSource, parse_css

__all__ = [
    "HttpClient",
    "StylesheetSource",
    "ViewTreeSource",
    "DocumentLoader",
    "HttpDocumentLoader",
    "FileDocumentLoader",
    "SoupDocument",
    "HttpViewTreeSource",
    "FileViewTreeSource",
    "HttpStylesheetSource",
    "FileStylesheetSource",
    "parse_css",
]
