"""
Rendering modules.

Contains the keyboard renderer, the label cache, and frame control.
"""

from .renderer import KeyboardRenderer
from .labels import LabelCache
from .frame_control import FrameController

__all__ = ["KeyboardRenderer", "LabelCache", "FrameController"]
