"""Frame loop: event draining, rendering once per tick, quitting."""

from __future__ import annotations

import unittest

import pygame

from core.input_source import QUIT_EVENT
from core.loop import FrameLoop, LoopState
from core.piano import Piano
from managers.audio_manager import AudioDispatcher
from rendering.frame_control import FrameController
from tests.fakes import FakeAudioBackend, FakeClock, RecordingRenderer, ScriptedInput, key_down, key_up


class FrameLoopTests(unittest.TestCase):

    def setUp(self) -> None:
        self.backend = FakeAudioBackend()
        self.piano = Piano(AudioDispatcher(self.backend, pool_size=8))
        self.renderer = RecordingRenderer()
        self.clock = FakeClock()
        self.frames = FrameController(60, clock=self.clock, sleep=self.clock.sleep)

    def make_loop(self, *batches) -> FrameLoop:
        return FrameLoop(self.piano, ScriptedInput(*batches), self.renderer, self.frames)

    def test_starts_running(self) -> None:
        loop = self.make_loop()
        self.assertIs(loop.state, LoopState.RUNNING)
        self.assertTrue(loop.running)

    def test_quit_stops_after_current_tick(self) -> None:
        loop = self.make_loop([key_down(pygame.K_1), QUIT_EVENT, key_down(pygame.K_3)])
        ran = loop.run()
        self.assertEqual(ran, 1)
        self.assertIs(loop.state, LoopState.STOPPED)
        # the quitting tick still drains the batch and renders once
        self.assertEqual(len(self.renderer.frames), 1)
        self.assertEqual(sorted(self.piano.pressed_notes()), ["C3", "D3"])

    def test_renders_once_per_tick(self) -> None:
        loop = self.make_loop()
        self.assertEqual(loop.run(max_ticks=3), 3)
        self.assertEqual(len(self.renderer.frames), 3)
        self.assertEqual(loop.input_source.polls, 3)
        self.assertEqual(len(self.clock.sleeps), 3)

    def test_press_then_release_in_one_batch(self) -> None:
        loop = self.make_loop([key_down(pygame.K_1), key_up(pygame.K_1)])
        loop.run(max_ticks=1)
        c3 = self.piano.state_for_note("C3")
        self.assertFalse(c3.pressed)
        self.assertEqual(c3.play_count, 1)

    def test_state_visible_in_rendered_frame(self) -> None:
        loop = self.make_loop([key_down(pygame.K_q)], [key_up(pygame.K_q)])
        loop.run(max_ticks=2)
        first, second = (dict(frame) for frame in self.renderer.frames)
        self.assertTrue(first["Bb3"])
        self.assertFalse(second["Bb3"])

    def test_unmapped_codes_are_dropped(self) -> None:
        loop = self.make_loop([key_down(pygame.K_SPACE), key_up(pygame.K_F1)])
        loop.run(max_ticks=1)
        self.assertEqual(self.piano.pressed_notes(), [])
        self.assertEqual(self.backend.loads, [])
        self.assertTrue(loop.running)

    def test_stop_before_run(self) -> None:
        loop = self.make_loop()
        loop.stop()
        self.assertEqual(loop.run(), 0)
        self.assertEqual(self.renderer.frames, [])

    def test_render_errors_propagate(self) -> None:
        class BrokenRenderer:
            def render_frame(self, keys):
                raise RuntimeError("boom")

        loop = FrameLoop(self.piano, ScriptedInput(), BrokenRenderer(), self.frames)
        with self.assertRaises(RuntimeError):
            loop.tick()


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
