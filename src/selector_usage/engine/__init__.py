"""Run machinery: usage accumulation, time estimation, retry policy, run state.

The orchestrator itself lives in :mod:`selector_usage.engine.engine`.
"""

from selector_usage.engine.accumulator import SelectorSet, UsageAccumulator
from selector_usage.engine.retry import NO_RETRY, BackoffConfig, RetryPolicy, build_retry_policy
from selector_usage.engine.state import AuditState
from selector_usage.engine.timing import TimeEstimator, format_hms, seconds_to_hms

__all__ = [
    "SelectorSet",
    "UsageAccumulator",
    "NO_RETRY",
    "BackoffConfig",
    "RetryPolicy",
    "build_retry_policy",
    "AuditState",
    "TimeEstimator",
    "format_hms",
    "seconds_to_hms",
]
