"""Stylesheet model: one parsed rule per selector group."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StylesheetRule:
    """A selector exactly as written in the stylesheet, with its declarations."""

    selector: str
    declarations: dict[str, str] = field(default_factory=dict)
