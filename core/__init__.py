"""
Core piano module.

Key table, runtime state, input translation and the frame loop. The
application class lives in ``core.app`` and is imported from there.
"""

from .errors import BackendInitFailure, LayoutError, PianoError, ResourceLoadFailure
from .keys import KEY_LAYOUT, KeyDescriptor, KeyKind, KeyRegistry
from .input_mapper import InputMapper
from .key_state import KeyState
from .piano import Piano
from .loop import FrameLoop, LoopState

__all__ = [
    "BackendInitFailure", "LayoutError", "PianoError", "ResourceLoadFailure",
    "KEY_LAYOUT", "KeyDescriptor", "KeyKind", "KeyRegistry",
    "InputMapper", "KeyState", "Piano", "FrameLoop", "LoopState",
]
