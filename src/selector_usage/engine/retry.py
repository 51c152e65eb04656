"""Retry policy for view document acquisition.

Only document loads are retried. A failed stylesheet or sitemap load ends
the run at once.
"""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class BackoffConfig:
    """Exponential backoff between attempts, in milliseconds."""

    initial_delay_ms: int = 500
    backoff_factor: float = 2.0
    max_delay_ms: int = 30000
    jitter: bool = True

    def base_delay_ms(self, failed_attempts: int) -> float:
        """Un-jittered delay after *failed_attempts* failures, capped."""
        delay = self.initial_delay_ms * self.backoff_factor ** max(failed_attempts - 1, 0)
        return min(delay, self.max_delay_ms)


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int
    backoff: BackoffConfig

    @property
    def retries(self) -> int:
        return self.max_attempts - 1

    def delay_for_attempt(self, attempt: int) -> float:
        """Seconds to wait after failed attempt number *attempt* (1-based).

        Jitter scales the delay by a factor in ``[0.5, 1.5]``.
        """
        delay = self.backoff.base_delay_ms(attempt)
        if self.backoff.jitter:
            delay *= random.uniform(0.5, 1.5)
        return delay / 1000.0


NO_RETRY = RetryPolicy(max_attempts=1, backoff=BackoffConfig())


def build_retry_policy(max_retries: int, backoff: BackoffConfig | None = None) -> RetryPolicy:
    """Policy allowing *max_retries* extra attempts per view; negatives mean none."""
    if max_retries <= 0 and backoff is None:
        return NO_RETRY
    return RetryPolicy(max_attempts=max(max_retries, 0) + 1, backoff=backoff or BackoffConfig())
