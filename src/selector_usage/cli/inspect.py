"""CLI command: selector-usage inspect -- show what a run would crawl."""

from __future__ import annotations

import sys

import click

from selector_usage.cli.sources import build_sources, make_client
from selector_usage.config import AuditConfig
from selector_usage.errors import SourceLoadError
from selector_usage.extract import collect_views, extract_selectors

_DEFAULTS = AuditConfig()


@click.command()
@click.option("--country", default=_DEFAULTS.country, show_default=True, help="Site country code")
@click.option("--sitemap-url", default=_DEFAULTS.sitemap_url, help="Sitemap URL template ({country})")
@click.option("--css-url", default=_DEFAULTS.css_url, help="Stylesheet URL template ({country})")
@click.option("--sitemap-file", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--css-file", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--list", "show_list", is_flag=True, help="Print every view and selector")
def inspect(
    country: str,
    sitemap_url: str,
    css_url: str,
    sitemap_file: str | None,
    css_file: str | None,
    show_list: bool,
) -> None:
    """Load the sitemap and stylesheet and report their sizes, without crawling."""
    config = AuditConfig(country=country, sitemap_url=sitemap_url, css_url=css_url)

    try:
        with make_client(config) as client:
            view_source, stylesheet_source = build_sources(
                config, client, sitemap_file=sitemap_file, css_file=css_file
            )
            views = collect_views(view_source.load_view_tree())
            rules = stylesheet_source.load_stylesheet()
    except SourceLoadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    selectors = extract_selectors(rules)
    click.echo(f"Views:     {len(views)}")
    click.echo(f"Rules:     {len(rules)}")
    click.echo(f"Selectors: {len(selectors)}")

    if show_list:
        click.echo()
        click.echo("Views:")
        for view in views:
            click.echo(f"  {view}")
        click.echo()
        click.echo("Selectors:")
        for selector in selectors:
            click.echo(f"  {selector}")
