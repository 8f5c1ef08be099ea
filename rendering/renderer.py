"""
Keyboard renderer.

Draws every key (fill, outline, two labels) from the piano's current state and
presents the finished frame once.
"""

from typing import Callable, Iterable, Optional, Tuple

import pygame

import config as cfg
from helper import center_x, hex_to_rgb
from core.key_state import KeyState
from core.keys import KeyDescriptor


def _color(name: str, default: str):
    return hex_to_rgb(getattr(cfg, name, default))


class KeyboardRenderer:
    """Full-frame keyboard drawing."""

    def __init__(self,
                 surface: pygame.Surface,
                 labels,
                 present: Optional[Callable[[], None]] = None):
        """
        Initialize renderer.

        Args:
            surface: Target surface (the display surface in the application)
            labels: LabelCache with get(text, color) -> Surface
            present: Called once per frame after drawing (pygame.display.flip)
        """
        self.surface = surface
        self.labels = labels
        self.present = present if present is not None else pygame.display.flip

        self.background = _color("BACKGROUND_COLOR", "#000000")
        self.white_color = _color("WHITE_KEY_COLOR", "#FFFFFF")
        self.black_color = _color("BLACK_KEY_COLOR", "#000000")
        self.pressed_color = _color("PRESSED_KEY_COLOR", "#39C5BB")
        self.outline_color = _color("KEY_OUTLINE_COLOR", "#000000")
        self.separator_color = _color("SEPARATOR_COLOR", "#000000")
        self.white_text = _color("WHITE_KEY_TEXT_COLOR", "#000000")
        self.black_text = _color("BLACK_KEY_TEXT_COLOR", "#FFFFFF")

        self.white_key_width = int(getattr(cfg, "WHITE_KEY_WIDTH", 56))
        self.white_key_height = int(getattr(cfg, "WHITE_KEY_HEIGHT", 390))
        self.white_key_num = int(getattr(cfg, "WHITE_KEY_NUM", 21))
        self.key_name_distance = int(getattr(cfg, "KEY_NAME_DISTANCE", 22))
        self.note_name_distance = int(getattr(cfg, "NOTE_NAME_DISTANCE", 42))
        self.outline_width = int(getattr(cfg, "OUTLINE_WIDTH", 1))
        self.separator_width = int(getattr(cfg, "SEPARATOR_WIDTH", 1))
        self.frames = 0

    def fill_color(self, key: KeyDescriptor, state: KeyState) -> Tuple[int, int, int]:
        if state.pressed:
            return self.pressed_color
        return self.black_color if key.is_black else self.white_color

    def text_color(self, key: KeyDescriptor) -> Tuple[int, int, int]:
        return self.black_text if key.is_black else self.white_text

    def _blit_label(self, text: str, color, rect: pygame.Rect, distance: int):
        label = self.labels.get(text, color)
        self.surface.blit(label, (center_x(rect, label.get_width()), rect.height - distance))

    def draw_key(self, key: KeyDescriptor, state: KeyState):
        rect = key.rect()
        pygame.draw.rect(self.surface, self.fill_color(key, state), rect)
        pygame.draw.rect(self.surface, self.outline_color, rect, self.outline_width)

        color = self.text_color(key)
        self._blit_label(key.key_label, color, rect, self.key_name_distance)
        self._blit_label(key.note_name, color, rect, self.note_name_distance)

    def draw_separators(self):
        for i in range(self.white_key_num):
            x = i * self.white_key_width
            pygame.draw.line(self.surface, self.separator_color,
                             (x, 0), (x, self.white_key_height), self.separator_width)

    def render_frame(self, keys: Iterable[Tuple[KeyDescriptor, KeyState]]):
        """
        Draw one complete frame.

        Args:
            keys: (descriptor, state) pairs, white keys first
        """
        keys = list(keys)
        self.surface.fill(self.background)

        for key, state in keys:
            if not key.is_black:
                self.draw_key(key, state)

        self.draw_separators()

        for key, state in keys:
            if key.is_black:
                self.draw_key(key, state)

        self.present()
        self.frames += 1
