"""Mutable per-key runtime state."""

from dataclasses import dataclass
from typing import Any, Optional

from .keys import KeyDescriptor


@dataclass
class KeyState:
    """Pressed flag and decoded sample for one key (lives as long as the piano)."""

    key: KeyDescriptor
    pressed: bool = False
    sample: Optional[Any] = None      # backend sample handle, decoded at most once
    load_failed: bool = False         # a failed load is never retried
    play_count: int = 0

    @property
    def note_name(self) -> str:
        return self.key.note_name

    @property
    def needs_load(self) -> bool:
        return self.sample is None and not self.load_failed
