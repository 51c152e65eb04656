from __future__ import annotations

from selector_usage.model.document import DocumentTree
from selector_usage.model.match import MatchOutcome, MatchResult, ViewResult
from selector_usage.model.report import ARTIFACT_NAMES, Report
from selector_usage.model.stylesheet import StylesheetRule
from selector_usage.model.view import ViewNode

__all__ = [
    # stylesheet
    "StylesheetRule",
    # view
    "ViewNode",
    # document
    "DocumentTree",
    # match
    "MatchOutcome",
    "MatchResult",
    "ViewResult",
    # report
    "ARTIFACT_NAMES",
    "Report",
]
