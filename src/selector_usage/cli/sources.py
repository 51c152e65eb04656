"""Source wiring shared by the CLI commands."""

from __future__ import annotations

from selector_usage.config import AuditConfig
from selector_usage.sources import (
    FileStylesheetSource,
    FileViewTreeSource,
    HttpClient,
    HttpStylesheetSource,
    HttpViewTreeSource,
    StylesheetSource,
    ViewTreeSource,
)


def make_client(config: AuditConfig) -> HttpClient:
    return HttpClient(
        headers={"User-Agent": config.user_agent},
        connect_timeout=config.connect_timeout,
        request_timeout=config.request_timeout,
    )


def build_sources(
    config: AuditConfig,
    client: HttpClient,
    *,
    sitemap_file: str | None = None,
    css_file: str | None = None,
) -> tuple[ViewTreeSource, StylesheetSource]:
    """Local files take precedence over the configured URLs."""
    view_source: ViewTreeSource
    stylesheet_source: StylesheetSource
    if sitemap_file:
        view_source = FileViewTreeSource(sitemap_file)
    else:
        view_source = HttpViewTreeSource(client, config.resolved_sitemap_url)
    if css_file:
        stylesheet_source = FileStylesheetSource(css_file)
    else:
        stylesheet_source = HttpStylesheetSource(client, config.resolved_css_url)
    return view_source, stylesheet_source
