"""Tests for time formatting and the remaining-time estimator."""

import pytest

from selector_usage.engine.timing import TimeEstimator, format_hms, seconds_to_hms


# ---------------------------------------------------------------------------
# HH:MM:SS formatting
# ---------------------------------------------------------------------------


class TestSecondsToHms:
    def test_zero(self):
        assert seconds_to_hms(0) == "00:00:00"

    def test_seconds_only(self):
        assert seconds_to_hms(4) == "00:00:04"

    def test_all_fields(self):
        assert seconds_to_hms(3725) == "01:02:05"

    def test_fractions_are_floored(self):
        assert seconds_to_hms(59.99) == "00:00:59"

    def test_two_digit_fields(self):
        assert seconds_to_hms(36000 + 11 * 60 + 12) == "10:11:12"

    def test_more_than_99_hours_keeps_digits(self):
        assert seconds_to_hms(100 * 3600) == "100:00:00"

    def test_negative_renders_zero(self):
        assert seconds_to_hms(-5) == "00:00:00"

    def test_infinite_renders_zero(self):
        assert seconds_to_hms(float("inf")) == "00:00:00"

    def test_format_hms_takes_milliseconds(self):
        assert format_hms(4000) == "00:00:04"
        assert format_hms(61_500) == "00:01:01"


# ---------------------------------------------------------------------------
# TimeEstimator
# ---------------------------------------------------------------------------


class TestTimeEstimator:
    def test_no_samples(self):
        est = TimeEstimator()
        assert est.processed == 0
        assert est.average_ms is None
        assert est.estimate_remaining_ms(10) is None
        assert est.estimate_remaining(10) == "N/A"

    def test_average_and_remaining(self):
        est = TimeEstimator()
        est.record(1000)
        est.record(3000)
        assert est.processed == 2
        assert est.total_ms == 4000
        assert est.average_ms == pytest.approx(2000)
        assert est.estimate_remaining_ms(4) == pytest.approx(4000)
        assert est.estimate_remaining(4) == "00:00:04"

    def test_last_view_has_nothing_remaining(self):
        est = TimeEstimator()
        for ms in (500, 700, 900):
            est.record(ms)
        assert est.estimate_remaining_ms(3) == 0
        assert est.estimate_remaining(3) == "00:00:00"

    def test_timings_is_a_copy(self):
        est = TimeEstimator()
        est.record(10)
        est.timings.append(99)
        assert est.timings == [10]
