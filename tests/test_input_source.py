"""pygame event translation."""

from __future__ import annotations

import unittest

import pygame

from core.input_source import EventKind, InputEvent, PygameInputSource, QUIT_EVENT


class PygameInputSourceTests(unittest.TestCase):

    def setUp(self) -> None:
        self.source = PygameInputSource(quit_on_escape=True)

    def test_quit(self) -> None:
        self.assertEqual(self.source.translate(pygame.event.Event(pygame.QUIT)), QUIT_EVENT)

    def test_key_events(self) -> None:
        down = self.source.translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1))
        up = self.source.translate(pygame.event.Event(pygame.KEYUP, key=pygame.K_1))
        self.assertEqual(down, InputEvent(EventKind.KEY_DOWN, pygame.K_1))
        self.assertEqual(up, InputEvent(EventKind.KEY_UP, pygame.K_1))

    def test_escape(self) -> None:
        escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
        self.assertEqual(self.source.translate(escape), QUIT_EVENT)

        passthrough = PygameInputSource(quit_on_escape=False)
        self.assertEqual(passthrough.translate(escape), InputEvent(EventKind.KEY_DOWN, pygame.K_ESCAPE))

    def test_other_events_dropped(self) -> None:
        motion = pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0))
        self.assertIsNone(self.source.translate(motion))


class PygameInputSourcePollTests(unittest.TestCase):

    def setUp(self) -> None:
        pygame.display.init()
        self.addCleanup(pygame.display.quit)
        pygame.event.clear()
        self.source = PygameInputSource(quit_on_escape=True)

    def test_drains_in_arrival_order(self) -> None:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1))
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1))
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
        pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_1))
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        self.assertEqual(self.source.poll(), [
            InputEvent(EventKind.KEY_DOWN, pygame.K_1),
            InputEvent(EventKind.KEY_DOWN, pygame.K_q),
            InputEvent(EventKind.KEY_UP, pygame.K_1),
            QUIT_EVENT,
        ])
        self.assertEqual(self.source.poll(), [])

    def test_empty_queue(self) -> None:
        self.assertEqual(self.source.poll(), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
