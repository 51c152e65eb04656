"""Stylesheet sources: fetch or read CSS and parse it into rules with tinycss2."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import tinycss2

from selector_usage.errors import AuditError, SourceLoadError
from selector_usage.model.stylesheet import StylesheetRule
from selector_usage.sources._http import HttpClient

__all__ = ["parse_css", "HttpStylesheetSource", "FileStylesheetSource"]

logger = logging.getLogger(__name__)

# At-rules whose block holds ordinary style rules.
_GROUPING_AT_RULES = frozenset({"media", "supports", "layer", "container", "document"})

_WHITESPACE_RE = re.compile(r"\s+")


def _normalize_selector(prelude: list) -> str:
    return _WHITESPACE_RE.sub(" ", tinycss2.serialize(prelude)).strip()


def _parse_declarations(content: list | None) -> dict[str, str]:
    """Parse a rule block into ``{property: value}``; later declarations win."""
    declarations: dict[str, str] = {}
    if not content:
        return declarations
    for node in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
        if node.type != "declaration":
            continue
        value = _WHITESPACE_RE.sub(" ", tinycss2.serialize(node.value)).strip()
        if node.important:
            value = f"{value} !important"
        declarations[node.lower_name] = value
    return declarations


def _collect_rules(nodes: list, rules: list[StylesheetRule]) -> None:
    for node in nodes:
        if node.type == "qualified-rule":
            selector = _normalize_selector(node.prelude)
            if selector:
                rules.append(StylesheetRule(selector=selector, declarations=_parse_declarations(node.content)))
        elif node.type == "at-rule":
            if node.lower_at_keyword in _GROUPING_AT_RULES and node.content is not None:
                nested = tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
                _collect_rules(nested, rules)
        elif node.type == "error":
            logger.debug("Skipping unparsable CSS at line %s: %s", node.source_line, node.message)


def parse_css(source: str) -> list[StylesheetRule]:
    """Parse stylesheet text into rules, in source order.

    A comma-separated selector group stays a single selector string. Rules
    inside ``@media``-like blocks are included; ``@keyframes``,
    ``@font-face`` and other at-rules are not.
    """
    rules: list[StylesheetRule] = []
    _collect_rules(tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True), rules)
    return rules


class HttpStylesheetSource:
    """Stylesheet fetched from a URL."""

    def __init__(self, client: HttpClient, url: str) -> None:
        self._client = client
        self._url = url

    def load_stylesheet(self) -> list[StylesheetRule]:
        try:
            text = self._client.get_text(self._url)
        except AuditError as exc:
            raise SourceLoadError(
                f"stylesheet source failed: {exc}", source=self._url, cause=exc
            ) from exc
        rules = parse_css(text)
        logger.info("Loaded %d stylesheet rules from %s", len(rules), self._url)
        return rules


class FileStylesheetSource:
    """Stylesheet read from a local file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load_stylesheet(self) -> list[StylesheetRule]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SourceLoadError(
                f"stylesheet source failed: {exc}", source=str(self._path), cause=exc
            ) from exc
        return parse_css(text)
