"""
Label surface cache.

Key and note labels never change, so each (text, color) pair is rendered once
and the surface is blitted every frame after that.
"""

from typing import Dict, Tuple

import pygame

import config as cfg

Color = Tuple[int, int, int]


class LabelCache:
    """Renders text once per (text, color) and hands back the cached surface."""

    def __init__(self, font: pygame.font.Font, antialias=None):
        self.font = font
        if antialias is None:
            antialias = bool(getattr(cfg, "FONT_ANTIALIAS", False))
        self.antialias = antialias
        self._surfaces: Dict[Tuple[str, Color], pygame.Surface] = {}

    def get(self, text: str, color: Color) -> pygame.Surface:
        key = (text, tuple(color))
        surface = self._surfaces.get(key)
        if surface is None:
            surface = self.font.render(text, self.antialias, key[1])
            self._surfaces[key] = surface
        return surface

    def __len__(self):
        return len(self._surfaces)
