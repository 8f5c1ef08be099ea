"""
Main frame loop.

One tick: drain input, update keys (and trigger audio), render, pace. The loop
is the only place that suspends, and only at the end of a tick.
"""

from enum import Enum
from typing import Optional

import showlog
from .input_source import EventKind


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class FrameLoop:
    """Fixed-tick input → state → render loop."""

    def __init__(self, piano, input_source, renderer, frame_controller):
        """
        Initialize the frame loop.

        Args:
            piano: Piano aggregate (key states + audio dispatcher)
            input_source: Object with poll() -> list of InputEvent
            renderer: Object with render_frame(keys)
            frame_controller: FrameController pacing each tick
        """
        self.piano = piano
        self.input_source = input_source
        self.renderer = renderer
        self.frame_controller = frame_controller
        self.state = LoopState.RUNNING
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def stop(self):
        """Request the loop to stop; takes effect at the next tick boundary."""
        if self.state is LoopState.RUNNING:
            showlog.info("[LOOP] Stopping")
        self.state = LoopState.STOPPED

    def process_events(self):
        """Drain pending input and apply it to the piano."""
        for event in self.input_source.poll():
            if event.kind is EventKind.QUIT:
                self.stop()
            elif event.kind is EventKind.KEY_DOWN:
                self.piano.press(event.code)
            elif event.kind is EventKind.KEY_UP:
                self.piano.release(event.code)

    def tick(self):
        """Run one full tick."""
        self.frame_controller.start_tick()
        self.process_events()
        self.renderer.render_frame(self.piano.keys())
        self.frame_controller.finish_tick()
        self.ticks += 1

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Run ticks until stopped (or ``max_ticks`` ticks have run).

        Returns:
            Number of ticks run by this call
        """
        showlog.info(f"[LOOP] Running at {self.frame_controller.target_fps:g} FPS")
        start = self.ticks
        while self.running:
            if max_ticks is not None and self.ticks - start >= max_ticks:
                break
            self.tick()
        return self.ticks - start
