"""
Physical key code → piano key lookup.

Built from the KeyRegistry, so it always agrees with the key table.
"""

from typing import Dict, Optional, Tuple

from .keys import KeyDescriptor, KeyRegistry


class InputMapper:
    """Stateless O(1) map from key code to key descriptor."""

    def __init__(self, registry: KeyRegistry):
        self._by_code: Dict[int, KeyDescriptor] = {key.key_code: key for key in registry}

    def map_to_key(self, code: int) -> Optional[KeyDescriptor]:
        """Return the key bound to ``code``, or None for any other key."""
        return self._by_code.get(code)

    def codes(self) -> Tuple[int, ...]:
        return tuple(self._by_code)

    def __contains__(self, code: int) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)
