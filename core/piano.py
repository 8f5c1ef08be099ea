"""
Piano aggregate.

Owns the key registry, the input mapper, one KeyState per key and the audio
dispatcher. The frame loop and the renderer receive it explicitly.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from .input_mapper import InputMapper
from .key_state import KeyState
from .keys import KeyDescriptor, KeyRegistry


class Piano:
    """Key table plus the runtime state the loop mutates and the renderer reads."""

    def __init__(self, dispatcher, registry: Optional[KeyRegistry] = None):
        self.registry = registry or KeyRegistry()
        self.mapper = InputMapper(self.registry)
        self.dispatcher = dispatcher
        self._states: Dict[KeyDescriptor, KeyState] = {key: KeyState(key) for key in self.registry}

    def state_of(self, key: KeyDescriptor) -> KeyState:
        return self._states[key]

    def state_for_note(self, note_name: str) -> KeyState:
        return self._states[self.registry.by_note(note_name)]

    def press(self, code: int) -> Optional[KeyState]:
        """Handle a key-down. Returns the key's state, or None for unmapped codes."""
        key = self.mapper.map_to_key(code)
        if key is None:
            return None
        state = self._states[key]
        self.dispatcher.on_press(state, code)
        return state

    def release(self, code: int) -> Optional[KeyState]:
        """Handle a key-up. Returns the key's state, or None for unmapped codes."""
        key = self.mapper.map_to_key(code)
        if key is None:
            return None
        state = self._states[key]
        self.dispatcher.on_release(state)
        return state

    def preload(self) -> int:
        return self.dispatcher.preload(self._states[key] for key in self.registry)

    def keys(self) -> List[Tuple[KeyDescriptor, KeyState]]:
        """(descriptor, state) pairs in drawing order: white keys, then black keys."""
        return [(key, self._states[key]) for key in self.registry]

    def pressed_notes(self) -> List[str]:
        return [key.note_name for key, state in self.keys() if state.pressed]

    def __iter__(self) -> Iterator[KeyState]:
        return (self._states[key] for key in self.registry)

    def __len__(self) -> int:
        return len(self._states)
