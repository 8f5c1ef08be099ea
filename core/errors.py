"""
Error types raised by the piano core and its backends.

Unmapped input is deliberately absent: an unknown key code is a normal
outcome (the mapper returns None), not an error.
"""

from typing import Optional


class PianoError(Exception):
    """Base class for all piano errors."""


class LayoutError(PianoError):
    """The static key layout table is malformed."""


class BackendInitFailure(PianoError):
    """A platform subsystem (display, mixer, font) could not be started."""

    def __init__(self, subsystem: str, reason: str):
        self.subsystem = subsystem
        self.reason = reason
        super().__init__(f"{subsystem} initialization failed: {reason}")


class ResourceLoadFailure(PianoError):
    """A sample or label asset is missing or cannot be decoded."""

    def __init__(self, path: str, reason: str, note: Optional[str] = None):
        self.path = path
        self.reason = reason
        self.note = note
        label = f" for {note}" if note else ""
        super().__init__(f"Cannot load {path}{label}: {reason}")
