"""Run-scoped state threaded through the per-view loop."""

from __future__ import annotations

from dataclasses import dataclass, field

from selector_usage.engine.accumulator import SelectorSet, UsageAccumulator
from selector_usage.engine.timing import TimeEstimator


@dataclass
class AuditState:
    """Everything one audit run accumulates.

    Created at run start, mutated only by the view being completed, and read
    only once the report is being built.
    """

    invalid: SelectorSet = field(default_factory=SelectorSet)
    ignored: SelectorSet = field(default_factory=SelectorSet)
    usage: UsageAccumulator = field(default_factory=UsageAccumulator)
    timing: TimeEstimator = field(default_factory=TimeEstimator)
