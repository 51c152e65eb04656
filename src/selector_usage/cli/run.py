"""CLI command: selector-usage run -- crawl all views and write the report."""

from __future__ import annotations

import logging
import signal
import sys
from typing import Any

import click

from selector_usage.cancel import AbortController
from selector_usage.cli.sources import build_sources, make_client
from selector_usage.config import AuditConfig
from selector_usage.engine.engine import AuditEngine
from selector_usage.engine.retry import build_retry_policy
from selector_usage.errors import AuditCancelled, SourceLoadError
from selector_usage.events.bus import EventBus
from selector_usage.progress import ConsoleProgress
from selector_usage.report.writer import ReportWriter
from selector_usage.sources import DocumentLoader, FileDocumentLoader, HttpDocumentLoader

_DEFAULTS = AuditConfig()


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@click.command()
@click.option("--country", default=_DEFAULTS.country, show_default=True, help="Site country code")
@click.option("--sitemap-url", default=_DEFAULTS.sitemap_url, help="Sitemap URL template ({country})")
@click.option("--css-url", default=_DEFAULTS.css_url, help="Stylesheet URL template ({country})")
@click.option("--base-url", default=_DEFAULTS.base_url, help="View base URL template ({country})")
@click.option(
    "--sitemap-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read the sitemap JSON from a file instead",
)
@click.option(
    "--css-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read the stylesheet from a file instead",
)
@click.option(
    "--pages-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Read view pages from saved HTML files instead",
)
@click.option("--out", "output_dir", default=_DEFAULTS.output_dir, show_default=True, help="Output directory")
@click.option(
    "--timeout",
    type=float,
    default=_DEFAULTS.request_timeout,
    show_default=True,
    help="Per-request timeout in seconds",
)
@click.option(
    "--retries",
    type=click.IntRange(min=0),
    default=_DEFAULTS.max_retries,
    show_default=True,
    help="Extra attempts per view document",
)
@click.option("--quiet", is_flag=True, help="No progress output")
@click.option("--verbose", is_flag=True, help="Debug logging")
def run(
    country: str,
    sitemap_url: str,
    css_url: str,
    base_url: str,
    sitemap_file: str | None,
    css_file: str | None,
    pages_dir: str | None,
    output_dir: str,
    timeout: float,
    retries: int,
    quiet: bool,
    verbose: bool,
) -> None:
    """Check every stylesheet selector against every view of the site.

    Writes views, used, unused, invalid and ignored selector lists plus a
    summary into the output directory, then prints the summary.
    """
    configure_logging(verbose, quiet)
    config = AuditConfig(
        country=country,
        sitemap_url=sitemap_url,
        css_url=css_url,
        base_url=base_url,
        output_dir=output_dir,
        request_timeout=timeout,
        max_retries=retries,
    )

    bus = EventBus()
    if not quiet:
        ConsoleProgress(bus)

    controller = AbortController()

    def _interrupt(signum: Any, frame: Any) -> None:
        controller.abort("interrupted")

    old_handler = signal.signal(signal.SIGINT, _interrupt)
    try:
        with make_client(config) as client:
            view_source, stylesheet_source = build_sources(
                config, client, sitemap_file=sitemap_file, css_file=css_file
            )
            document_loader: DocumentLoader
            if pages_dir:
                document_loader = FileDocumentLoader(pages_dir)
            else:
                document_loader = HttpDocumentLoader(client, config.resolved_base_url)
            engine = AuditEngine(
                stylesheet_source,
                view_source,
                document_loader,
                event_bus=bus,
                retry_policy=build_retry_policy(config.max_retries),
                abort_signal=controller.signal,
            )
            report = engine.run()
    except (SourceLoadError, AuditCancelled) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        signal.signal(signal.SIGINT, old_handler)

    writer = ReportWriter(config.output_dir, prefix=config.output_prefix)
    paths = writer.write(report)

    click.echo(report.summary)
    if not quiet:
        for path in paths:
            click.echo(f"  wrote {path}", err=True)
