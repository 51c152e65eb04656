"""Time estimation: per-view timing log and remaining-time estimate."""

from __future__ import annotations

import math

HOUR_IN_SECONDS = 60 * 60


def _field(value: float) -> str:
    return f"{int(value):02d}" if value > 0 else "00"


def seconds_to_hms(total_seconds: float) -> str:
    """Format seconds as ``HH:MM:SS``; zero or negative fields render as ``00``."""
    if not math.isfinite(total_seconds) or total_seconds <= 0:
        return "00:00:00"
    hours = total_seconds // HOUR_IN_SECONDS
    minutes = total_seconds % HOUR_IN_SECONDS // 60
    seconds = total_seconds % HOUR_IN_SECONDS % 60 // 1
    return f"{_field(hours)}:{_field(minutes)}:{_field(seconds)}"


def format_hms(milliseconds: float) -> str:
    """Format a millisecond duration as ``HH:MM:SS``."""
    return seconds_to_hms(milliseconds / 1000)


class TimeEstimator:
    """Running average of per-view durations, used for the ETA display only."""

    def __init__(self) -> None:
        self._timings: list[float] = []

    def record(self, elapsed_ms: float) -> None:
        """Append the duration of one completed view."""
        self._timings.append(elapsed_ms)

    @property
    def timings(self) -> list[float]:
        return list(self._timings)

    @property
    def processed(self) -> int:
        return len(self._timings)

    @property
    def total_ms(self) -> float:
        return sum(self._timings)

    @property
    def average_ms(self) -> float | None:
        if not self._timings:
            return None
        return self.total_ms / self.processed

    def estimate_remaining_ms(self, total_views: int) -> float | None:
        """Average duration times the number of views not processed yet."""
        average = self.average_ms
        if average is None:
            return None
        return average * (total_views - self.processed)

    def estimate_remaining(self, total_views: int) -> str:
        remaining = self.estimate_remaining_ms(total_views)
        return "N/A" if remaining is None else format_hms(remaining)
