"""Tests for the selector-usage CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from selector_usage import __version__
from selector_usage.cli.main import cli

CSS = """
.header { color: red }
.header a:hover { color: blue }
.footer { margin: 0 }
.card:bogus { color: green }
.btn:-moz-focusring { outline: 0 }
@media (max-width: 600px) { #menu li { display: block } }
"""

SITEMAP = {
    "id": "sitemap",
    "views": [
        {"id": "start"},
        {"id": "private", "views": [{"id": "private/cards"}]},
        {"id": "test/fixture"},
    ],
}

PAGES = {
    "start.html": '<div class="header"><a href="/">Home</a></div>',
    "private.html": '<ul id="menu"><li>One</li></ul>',
    "private/cards/index.html": '<div class="header"></div>',
}


@pytest.fixture
def site(tmp_path):
    css = tmp_path / "style.css"
    css.write_text(CSS, encoding="utf-8")
    sitemap = tmp_path / "sitemap.json"
    sitemap.write_text(json.dumps(SITEMAP), encoding="utf-8")
    pages = tmp_path / "pages"
    for name, html in PAGES.items():
        path = pages / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    return {"css": css, "sitemap": sitemap, "pages": pages, "out": tmp_path / "result"}


def _run_args(site, *extra: str) -> list[str]:
    return [
        "run",
        "--sitemap-file", str(site["sitemap"]),
        "--css-file", str(site["css"]),
        "--pages-dir", str(site["pages"]),
        "--out", str(site["out"]),
        *extra,
    ]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "find which stylesheet selectors a site really uses" in result.output
        assert "run" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_run_help_shows_options(self) -> None:
        result = CliRunner().invoke(cli, ["run", "--help"])
        assert result.exit_code == 0
        for option in ("--country", "--pages-dir", "--out", "--retries", "--quiet"):
            assert option in result.output


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


class TestRunCommand:
    def test_writes_all_artifacts(self, site) -> None:
        result = CliRunner().invoke(cli, _run_args(site, "--quiet"))
        assert result.exit_code == 0, result.output
        names = sorted(p.name for p in site["out"].iterdir())
        assert names == [
            "se-ignored.json",
            "se-invalid.json",
            "se-summary.txt",
            "se-unused.json",
            "se-used.json",
            "se-views.json",
        ]

    def test_classification(self, site) -> None:
        CliRunner().invoke(cli, _run_args(site, "--quiet"))

        def load(name):
            return json.loads((site["out"] / f"se-{name}.json").read_text(encoding="utf-8"))

        assert load("views") == ["private", "private/cards", "start"]
        assert load("used") == ["#menu li", ".header", ".header a:hover"]
        assert load("unused") == [".btn:-moz-focusring", ".card:bogus", ".footer"]
        assert load("invalid") == [".btn:-moz-focusring", ".card:bogus"]
        assert load("ignored") == [".btn:-moz-focusring"]

    def test_summary_printed(self, site) -> None:
        result = CliRunner().invoke(cli, _run_args(site, "--quiet"))
        assert "- Total number of selectors: 6" in result.output
        assert "- Total number of views: 3" in result.output
        assert "- Selectors used: 3" in result.output

    def test_country_sets_file_prefix(self, site) -> None:
        result = CliRunner().invoke(cli, _run_args(site, "--country", "no", "--quiet"))
        assert result.exit_code == 0
        assert (site["out"] / "no-summary.txt").is_file()

    def test_progress_output(self, site) -> None:
        result = CliRunner().invoke(cli, _run_args(site))
        assert result.exit_code == 0
        assert "Checking 6 selectors across 3 views" in result.output
        assert "[1/3]" in result.output
        assert "wrote" in result.output

    def test_fatal_source_error(self, site) -> None:
        site["sitemap"].write_text("not json", encoding="utf-8")
        result = CliRunner().invoke(cli, _run_args(site, "--quiet"))
        assert result.exit_code == 1
        assert "Error: sitemap source failed" in result.output
        assert not site["out"].exists()

    def test_negative_retries_rejected(self, site) -> None:
        result = CliRunner().invoke(cli, _run_args(site, "--retries", "-1"))
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_counts(self, site) -> None:
        result = CliRunner().invoke(
            cli,
            ["inspect", "--sitemap-file", str(site["sitemap"]), "--css-file", str(site["css"])],
        )
        assert result.exit_code == 0
        assert "Views:     3" in result.output
        assert "Selectors: 6" in result.output

    def test_list(self, site) -> None:
        result = CliRunner().invoke(
            cli,
            ["inspect", "--sitemap-file", str(site["sitemap"]), "--css-file", str(site["css"]), "--list"],
        )
        assert result.exit_code == 0
        assert "  private/cards" in result.output
        assert "  .header a:hover" in result.output
        assert "test/fixture" not in result.output
