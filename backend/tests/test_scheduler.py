"""
Tests for the fixed-step scheduler.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.scheduler import FixedStepScheduler


class Clock:
    """Minimal stand-in for a session driven by the scheduler."""

    def __init__(self, interval=100.0, active=True):
        self.interval = interval
        self.active = active
        self.ticks = 0

    def step(self):
        self.ticks += 1

    def scheduler(self, **kwargs):
        return FixedStepScheduler(
            step=self.step,
            interval_ms=lambda: self.interval,
            is_active=lambda: self.active,
            **kwargs
        )


def test_zero_ticks_when_frame_shorter_than_interval():
    clock = Clock()
    scheduler = clock.scheduler()

    assert scheduler.advance(40) == 0
    assert scheduler.advance(40) == 0
    assert clock.ticks == 0
    assert scheduler.accumulator == pytest.approx(80)


def test_remainder_carries_forward():
    clock = Clock()
    scheduler = clock.scheduler()

    assert scheduler.advance(70) == 0
    assert scheduler.advance(70) == 1
    assert scheduler.accumulator == pytest.approx(40)


def test_multiple_ticks_in_one_frame():
    clock = Clock()
    scheduler = clock.scheduler()

    assert scheduler.advance(350) == 3
    assert clock.ticks == 3
    assert scheduler.accumulator == pytest.approx(50)


def test_interval_recomputed_between_ticks():
    clock = Clock(interval=100)
    scheduler = FixedStepScheduler(
        step=lambda: (clock.step(), setattr(clock, "interval", 50)),
        interval_ms=lambda: clock.interval,
        is_active=lambda: True,
    )

    # 100 for the first tick, then 50 each
    assert scheduler.advance(200) == 3


def test_inactive_discards_time():
    clock = Clock(active=False)
    scheduler = clock.scheduler()

    assert scheduler.advance(1000) == 0
    assert scheduler.accumulator == 0

    clock.active = True
    assert scheduler.advance(50) == 0


def test_stops_when_step_deactivates():
    clock = Clock()

    def step():
        clock.ticks += 1
        clock.active = False  # e.g. game over

    scheduler = FixedStepScheduler(step=step, interval_ms=lambda: clock.interval,
                                   is_active=lambda: clock.active)

    assert scheduler.advance(1000) == 1
    assert scheduler.accumulator == 0


def test_cap_drops_backlog():
    clock = Clock(interval=1)
    scheduler = clock.scheduler(max_ticks_per_frame=10)

    assert scheduler.advance(500) == 10
    assert scheduler.accumulator == 0


def test_negative_elapsed_rejected():
    scheduler = Clock().scheduler()
    with pytest.raises(ValueError):
        scheduler.advance(-1)
