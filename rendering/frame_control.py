"""
Frame rate control.

Paces the loop to a fixed tick: record when the tick started, and at the end
sleep for whatever is left of the frame interval. An overrunning tick is not
compensated; the next one starts immediately.
"""

import time
from collections import deque
from typing import Callable, Optional

import config as cfg
import showlog


class FrameController:
    """Fixed-interval frame pacing with a measured FPS readout."""

    def __init__(self,
                 target_fps: Optional[float] = None,
                 clock: Callable[[], float] = time.perf_counter,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Initialize frame controller.

        Args:
            target_fps: Ticks per second (defaults to config FPS_TARGET)
            clock: Monotonic clock returning seconds
            sleep: Called with the number of seconds to suspend
        """
        fps = float(target_fps if target_fps is not None else getattr(cfg, "FPS_TARGET", 60))
        if fps <= 0:
            raise ValueError(f"target_fps must be positive, got {fps}")
        self.target_fps = fps
        self.interval = 1.0 / fps
        self._clock = clock
        self._sleep = sleep
        self._tick_start: Optional[float] = None
        self._frame_times = deque(maxlen=int(getattr(cfg, "FPS_SAMPLE_FRAMES", 30)))
        self._last_frame_start: Optional[float] = None
        self.overruns = 0

    @property
    def interval_ms(self) -> float:
        return self.interval * 1000.0

    def start_tick(self) -> float:
        """Record the tick start time."""
        now = self._clock()
        if self._last_frame_start is not None:
            self._frame_times.append(now - self._last_frame_start)
        self._last_frame_start = now
        self._tick_start = now
        return now

    def remaining(self) -> float:
        """Seconds left in the current tick (never negative)."""
        if self._tick_start is None:
            return 0.0
        elapsed = self._clock() - self._tick_start
        return max(0.0, self.interval - elapsed)

    def finish_tick(self) -> float:
        """
        Sleep for the rest of the interval.

        Returns:
            Seconds slept (0.0 when the tick overran)
        """
        if self._tick_start is None:
            return 0.0

        elapsed = self._clock() - self._tick_start
        self._tick_start = None

        if elapsed >= self.interval:
            self.overruns += 1
            if getattr(cfg, "FRAME_TRACE", False):
                showlog.debug(f"[FRAME] Tick overran: {elapsed * 1000:.2f}ms > {self.interval_ms:.2f}ms")
            every = int(getattr(cfg, "OVERRUN_WARN_EVERY", 120))
            if every > 0 and self.overruns % every == 0:
                showlog.warn(f"[FRAME] {self.overruns} ticks have overrun {self.interval_ms:.2f}ms")
            return 0.0

        delay = self.interval - elapsed
        self._sleep(delay)
        return delay

    def get_fps(self) -> float:
        """
        Get measured FPS.

        Returns:
            Average ticks per second over the recent window (0.0 until measured)
        """
        if not self._frame_times:
            return 0.0
        total = sum(self._frame_times)
        if total <= 0:
            return 0.0
        return len(self._frame_times) / total
