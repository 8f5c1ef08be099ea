"""Utilities for resolving and loading the label font.

The keyboard ships ``resources/arial.ttf``. When that file is missing the
labels fall back to pygame's built-in default font so the keyboard still
starts; only a font subsystem that cannot produce any font at all is fatal.
"""

import os

import pygame

import config as cfg
import showlog
from core.errors import BackendInitFailure


def label_font_path(path=None):
    """Return absolute path to the label font (config.FONT_PATH by default)."""
    if path:
        return os.path.abspath(path)
    return os.path.abspath(getattr(cfg, "FONT_PATH", os.path.join("resources", "arial.ttf")))


_FONT_CACHE = {}


def load_font(size=None, path=None, *, cache=True):
    """Return a cached ``pygame.font.Font`` for the label font at ``size``.

    Raises:
        BackendInitFailure: if neither the bundled font nor the default font loads
    """
    size = int(size if size is not None else getattr(cfg, "FONT_SIZE", 15))
    resolved = label_font_path(path)
    key = (resolved, size)

    if cache and key in _FONT_CACHE:
        return _FONT_CACHE[key]

    if not pygame.font.get_init():
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise BackendInitFailure("font", str(exc)) from exc

    try:
        font = pygame.font.Font(resolved, size)
    except (OSError, pygame.error) as exc:
        showlog.warn(f"[FONT] Cannot load {resolved}: {exc}; using default font")
        try:
            font = pygame.font.Font(None, size)
        except pygame.error as fallback_exc:
            raise BackendInitFailure("font", str(fallback_exc)) from fallback_exc
    else:
        showlog.debug(f"[FONT] Loaded {resolved} @ {size}px")

    if cache:
        _FONT_CACHE[key] = font

    return font


def clear_cache():
    _FONT_CACHE.clear()
