"""Tests for retry logic: policies, backoff, and policy building."""

import pytest

from selector_usage.engine.retry import NO_RETRY, BackoffConfig, RetryPolicy, build_retry_policy


# ---------------------------------------------------------------------------
# RetryPolicy basics
# ---------------------------------------------------------------------------

class TestRetryPolicy:
    def test_max_attempts_one_means_no_retries(self):
        policy = RetryPolicy(max_attempts=1, backoff=BackoffConfig())
        assert policy.max_attempts == 1

    def test_delay_for_attempt_grows_exponentially(self):
        backoff = BackoffConfig(initial_delay_ms=100, backoff_factor=2.0, jitter=False)
        policy = RetryPolicy(max_attempts=5, backoff=backoff)
        assert policy.delay_for_attempt(1) == pytest.approx(0.1)
        assert policy.delay_for_attempt(2) == pytest.approx(0.2)
        assert policy.delay_for_attempt(3) == pytest.approx(0.4)

    def test_delay_capped_at_max(self):
        backoff = BackoffConfig(
            initial_delay_ms=1000, backoff_factor=10.0, max_delay_ms=5000, jitter=False
        )
        policy = RetryPolicy(max_attempts=5, backoff=backoff)
        assert policy.delay_for_attempt(1) == pytest.approx(1.0)
        # 10000ms -> capped at 5000ms
        assert policy.delay_for_attempt(2) == pytest.approx(5.0)

    def test_jitter_stays_within_bounds(self):
        backoff = BackoffConfig(initial_delay_ms=1000, backoff_factor=1.0, jitter=True)
        policy = RetryPolicy(max_attempts=5, backoff=backoff)
        delays = [policy.delay_for_attempt(1) for _ in range(50)]
        assert min(delays) >= 0.5
        assert max(delays) <= 1.5


# ---------------------------------------------------------------------------
# build_retry_policy
# ---------------------------------------------------------------------------

class TestBuildRetryPolicy:
    def test_zero_retries_single_attempt(self):
        assert build_retry_policy(0).max_attempts == 1

    def test_retries_are_extra_attempts(self):
        assert build_retry_policy(3).max_attempts == 4

    def test_negative_treated_as_zero(self):
        assert build_retry_policy(-2).max_attempts == 1

    def test_custom_backoff(self):
        backoff = BackoffConfig(initial_delay_ms=10, jitter=False)
        assert build_retry_policy(1, backoff).backoff is backoff

    def test_no_retry_constant(self):
        assert NO_RETRY.max_attempts == 1

    def test_retries_property(self):
        assert build_retry_policy(2).retries == 2
        assert NO_RETRY.retries == 0


# ---------------------------------------------------------------------------
# BackoffConfig
# ---------------------------------------------------------------------------

class TestBackoffConfig:
    def test_base_delay_without_jitter(self):
        backoff = BackoffConfig(initial_delay_ms=200, backoff_factor=3.0, max_delay_ms=1000)
        assert backoff.base_delay_ms(1) == 200
        assert backoff.base_delay_ms(2) == 600
        assert backoff.base_delay_ms(3) == 1000

    def test_frozen(self):
        with pytest.raises(AttributeError):
            BackoffConfig().jitter = False
