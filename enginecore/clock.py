"""A high-resolution tick counter and conversions between ticks and seconds."""

from __future__ import annotations

import time

_TICKS_PER_SECOND = 1_000_000_000


class _ClockState:
    """Holds the tick frequency once time has been initialized."""

    def __init__(self):
        self.tick_count_per_second = 0

    def start(self, tick_count_per_second):
        self.tick_count_per_second = tick_count_per_second

    def reset(self):
        self.tick_count_per_second = 0

    @property
    def frequency(self):
        if self.tick_count_per_second <= 0:
            raise RuntimeError("Time hasn't been initialized")
        return self.tick_count_per_second


_clock = _ClockState()


def initialize():
    """Set up the tick frequency; must be called before any conversion."""
    resolution = time.get_clock_info("perf_counter").resolution
    if resolution <= 0:
        raise RuntimeError("This system doesn't support high resolution performance counters")
    _clock.start(_TICKS_PER_SECOND)


def clean_up():
    """Forget the tick frequency."""
    _clock.reset()


def get_current_system_time_tick_count():
    """The current value of the monotonic high-resolution counter, in ticks."""
    return time.perf_counter_ns()


def convert_ticks_to_seconds(tick_count):
    """Convert a tick count to seconds."""
    return float(tick_count) / float(_clock.frequency)


def convert_seconds_to_ticks(seconds):
    """Convert seconds to the nearest tick count."""
    return int(seconds * float(_clock.frequency) + 0.5)


def convert_rate_per_second_to_rate_per_tick(rate_per_second):
    """Convert a rate per second to a rate per tick."""
    return rate_per_second / float(_clock.frequency)