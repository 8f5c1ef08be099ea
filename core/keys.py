"""
Key identity table.

``KEY_LAYOUT`` is the single source of truth for the keyboard: every row binds
a physical key code to a key kind, the label printed on the key and the note it
plays. The registry (and the input mapper built from it) are generated from
this table at startup, so the code → note binding cannot drift.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Sequence, Tuple

import pygame

import config as cfg
from .errors import LayoutError


class KeyKind(Enum):
    """Piano keys come in two shapes."""
    BLACK = "black"
    WHITE = "white"


# (key code, kind, key label, note name): white keys C3..B5, then black keys Db3..Bb5
KEY_LAYOUT: Tuple[Tuple[int, KeyKind, str, str], ...] = (
    (pygame.K_1, KeyKind.WHITE, "1", "C3"),
    (pygame.K_3, KeyKind.WHITE, "3", "D3"),
    (pygame.K_5, KeyKind.WHITE, "5", "E3"),
    (pygame.K_6, KeyKind.WHITE, "6", "F3"),
    (pygame.K_8, KeyKind.WHITE, "8", "G3"),
    (pygame.K_0, KeyKind.WHITE, "0", "A3"),
    (pygame.K_w, KeyKind.WHITE, "W", "B3"),
    (pygame.K_e, KeyKind.WHITE, "E", "C4"),
    (pygame.K_t, KeyKind.WHITE, "T", "D4"),
    (pygame.K_u, KeyKind.WHITE, "U", "E4"),
    (pygame.K_i, KeyKind.WHITE, "I", "F4"),
    (pygame.K_p, KeyKind.WHITE, "P", "G4"),
    (pygame.K_s, KeyKind.WHITE, "S", "A4"),
    (pygame.K_f, KeyKind.WHITE, "F", "B4"),
    (pygame.K_g, KeyKind.WHITE, "G", "C5"),
    (pygame.K_j, KeyKind.WHITE, "J", "D5"),
    (pygame.K_l, KeyKind.WHITE, "L", "E5"),
    (pygame.K_z, KeyKind.WHITE, "Z", "F5"),
    (pygame.K_c, KeyKind.WHITE, "C", "G5"),
    (pygame.K_b, KeyKind.WHITE, "B", "A5"),
    (pygame.K_m, KeyKind.WHITE, "M", "B5"),
    (pygame.K_2, KeyKind.BLACK, "2", "Db3"),
    (pygame.K_4, KeyKind.BLACK, "4", "Eb3"),
    (pygame.K_7, KeyKind.BLACK, "7", "Gb3"),
    (pygame.K_9, KeyKind.BLACK, "9", "Ab3"),
    (pygame.K_q, KeyKind.BLACK, "Q", "Bb3"),
    (pygame.K_r, KeyKind.BLACK, "R", "Db4"),
    (pygame.K_y, KeyKind.BLACK, "Y", "Eb4"),
    (pygame.K_o, KeyKind.BLACK, "O", "Gb4"),
    (pygame.K_a, KeyKind.BLACK, "A", "Ab4"),
    (pygame.K_d, KeyKind.BLACK, "D", "Bb4"),
    (pygame.K_h, KeyKind.BLACK, "H", "Db5"),
    (pygame.K_k, KeyKind.BLACK, "K", "Eb5"),
    (pygame.K_x, KeyKind.BLACK, "X", "Gb5"),
    (pygame.K_v, KeyKind.BLACK, "V", "Ab5"),
    (pygame.K_n, KeyKind.BLACK, "N", "Bb5"),
)

# A flat sits on the left edge of the natural with the same letter.
# Cb and Fb do not exist on the keyboard: no black key after B or E.
_FLATTENABLE = ("D", "E", "G", "A", "B")


@dataclass(frozen=True)
class KeyDescriptor:
    """Immutable identity and geometry of one piano key."""

    kind: KeyKind
    key_label: str
    note_name: str
    origin_x: int
    key_code: int

    @property
    def is_black(self) -> bool:
        return self.kind is KeyKind.BLACK

    @property
    def width(self) -> int:
        if self.is_black:
            return int(getattr(cfg, "BLACK_KEY_WIDTH", 40))
        return int(getattr(cfg, "WHITE_KEY_WIDTH", 56))

    @property
    def height(self) -> int:
        if self.is_black:
            return int(getattr(cfg, "BLACK_KEY_HEIGHT", 254))
        return int(getattr(cfg, "WHITE_KEY_HEIGHT", 390))

    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.origin_x, 0, self.width, self.height)


def _natural_of(note_name: str) -> str:
    """'Db4' -> 'D4'."""
    return note_name[0] + note_name[2:]


class KeyRegistry:
    """
    Ordered, read-only collection of key descriptors.

    Indices 0..WHITE_KEY_NUM-1 are white keys, the rest are black keys; each
    subsequence is in ascending ``origin_x`` order.
    """

    def __init__(self, layout: Sequence[Tuple[int, KeyKind, str, str]] = KEY_LAYOUT):
        self._white_w = int(getattr(cfg, "WHITE_KEY_WIDTH", 56))
        self._black_w = int(getattr(cfg, "BLACK_KEY_WIDTH", 40))
        self._keys: Tuple[KeyDescriptor, ...] = tuple(self._build(layout))
        self._by_note: Dict[str, KeyDescriptor] = {k.note_name: k for k in self._keys}
        self._validate()

    def _build(self, layout) -> List[KeyDescriptor]:
        white_rows = [row for row in layout if row[1] is KeyKind.WHITE]
        black_rows = [row for row in layout if row[1] is KeyKind.BLACK]
        if list(layout) != white_rows + black_rows:
            raise LayoutError("white keys must precede black keys in the layout")

        white_index = {row[3]: i for i, row in enumerate(white_rows)}
        keys = []
        for i, (code, kind, label, note) in enumerate(white_rows):
            keys.append(KeyDescriptor(kind, label, note, self._white_w * i, code))

        for code, kind, label, note in black_rows:
            if len(note) < 3 or note[1] != "b" or note[0] not in _FLATTENABLE:
                raise LayoutError(f"{note} is not a black key")
            boundary = white_index.get(_natural_of(note))
            if boundary is None or boundary == 0:
                raise LayoutError(f"{note} has no white key on its left")
            origin_x = self._white_w * boundary - self._black_w // 2
            keys.append(KeyDescriptor(kind, label, note, origin_x, code))
        return keys

    def _validate(self):
        white_num = int(getattr(cfg, "WHITE_KEY_NUM", 21))
        black_num = int(getattr(cfg, "BLACK_KEY_NUM", 15))
        whites = self.white_keys()
        blacks = self.black_keys()

        if len(whites) != white_num or len(blacks) != black_num:
            raise LayoutError(
                f"expected {white_num} white / {black_num} black keys, "
                f"got {len(whites)} / {len(blacks)}"
            )
        if len({k.key_code for k in self._keys}) != len(self._keys):
            raise LayoutError("duplicate key code in layout")
        if len(self._by_note) != len(self._keys):
            raise LayoutError("duplicate note name in layout")
        for seq in (whites, blacks):
            xs = [k.origin_x for k in seq]
            if xs != sorted(xs) or len(set(xs)) != len(xs):
                raise LayoutError("keys must be listed left to right")

    def lookup(self, index: int) -> KeyDescriptor:
        if index < 0:
            raise IndexError(index)
        return self._keys[index]

    def by_note(self, note_name: str) -> KeyDescriptor:
        return self._by_note[note_name]

    def white_keys(self) -> Tuple[KeyDescriptor, ...]:
        return tuple(k for k in self._keys if not k.is_black)

    def black_keys(self) -> Tuple[KeyDescriptor, ...]:
        return tuple(k for k in self._keys if k.is_black)

    def __iter__(self) -> Iterator[KeyDescriptor]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)
