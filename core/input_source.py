"""
Input source.

Drains the pygame event queue into the three events the frame loop cares
about. Everything else (mouse, window, text input) is dropped here.
"""

from enum import Enum
from typing import List, NamedTuple, Optional

import pygame

import config as cfg


class EventKind(Enum):
    QUIT = "quit"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"


class InputEvent(NamedTuple):
    kind: EventKind
    code: int = 0


QUIT_EVENT = InputEvent(EventKind.QUIT)


class PygameInputSource:
    """Non-blocking poll of the pygame event queue."""

    def __init__(self, quit_on_escape: Optional[bool] = None):
        if quit_on_escape is None:
            quit_on_escape = bool(getattr(cfg, "QUIT_ON_ESCAPE", True))
        self.quit_on_escape = quit_on_escape

    def translate(self, event: pygame.event.Event):
        """Return the InputEvent for a pygame event, or None to drop it."""
        if event.type == pygame.QUIT:
            return QUIT_EVENT
        if event.type == pygame.KEYDOWN:
            if self.quit_on_escape and event.key == pygame.K_ESCAPE:
                return QUIT_EVENT
            return InputEvent(EventKind.KEY_DOWN, event.key)
        if event.type == pygame.KEYUP:
            return InputEvent(EventKind.KEY_UP, event.key)
        return None

    def poll(self) -> List[InputEvent]:
        """Everything queued since the last poll, in arrival order."""
        events = []
        for event in pygame.event.get():
            translated = self.translate(event)
            if translated is not None:
                events.append(translated)
        return events
