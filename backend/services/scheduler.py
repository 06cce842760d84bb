"""
Fixed-step scheduler.

Frames arrive at whatever cadence the presentation layer runs at; the
scheduler accumulates elapsed time and runs as many whole ticks as fit,
carrying the remainder into the next frame.
"""

from typing import Callable


class FixedStepScheduler:
    """
    Args:
        step: callable running one tick
        interval_ms: callable returning the current tick length in ms
        is_active: callable telling whether ticks may run right now
        max_ticks_per_frame: cap that keeps a long stall from freezing a frame
    """

    def __init__(
        self,
        step: Callable[[], None],
        interval_ms: Callable[[], float],
        is_active: Callable[[], bool],
        max_ticks_per_frame: int = 240,
    ):
        self.step = step
        self.interval_ms = interval_ms
        self.is_active = is_active
        self.max_ticks_per_frame = max_ticks_per_frame
        self.accumulator = 0.0

    def reset(self) -> None:
        self.accumulator = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Feed elapsed wall time; return the number of ticks executed."""
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must not be negative, got {elapsed_ms}")

        if not self.is_active():
            self.accumulator = 0.0
            return 0

        self.accumulator += elapsed_ms
        ticks = 0
        while ticks < self.max_ticks_per_frame:
            interval = self.interval_ms()
            if self.accumulator < interval:
                break
            self.accumulator -= interval
            self.step()
            ticks += 1
            if not self.is_active():
                # Paused or finished mid-frame: leftover time is stale
                self.accumulator = 0.0
                break
        else:
            self.accumulator = 0.0

        return ticks
