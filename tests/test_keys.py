"""Key table: counts, kinds and black key placement."""

from __future__ import annotations

import unittest

import pygame

from core.errors import LayoutError
from core.keys import KEY_LAYOUT, KeyKind, KeyRegistry


class KeyRegistryTests(unittest.TestCase):

    def setUp(self) -> None:
        self.registry = KeyRegistry()

    def test_counts(self) -> None:
        self.assertEqual(len(self.registry), 36)
        self.assertEqual(len(self.registry.white_keys()), 21)
        self.assertEqual(len(self.registry.black_keys()), 15)

    def test_white_keys_come_first(self) -> None:
        kinds = [key.kind for key in self.registry]
        self.assertEqual(kinds, [KeyKind.WHITE] * 21 + [KeyKind.BLACK] * 15)

    def test_white_keys_tile_the_window(self) -> None:
        for i, key in enumerate(self.registry.white_keys()):
            self.assertEqual(key.origin_x, i * 56)
            self.assertEqual((key.width, key.height), (56, 390))
        self.assertEqual(self.registry.white_keys()[0].note_name, "C3")
        self.assertEqual(self.registry.white_keys()[-1].note_name, "B5")

    def test_black_key_straddles_boundary(self) -> None:
        db3 = self.registry.by_note("Db3")
        self.assertEqual(db3.origin_x, 56 - 20)
        self.assertEqual((db3.width, db3.height), (40, 254))
        bb5 = self.registry.by_note("Bb5")
        self.assertEqual(bb5.origin_x, 20 * 56 - 20)

    def test_no_black_key_between_e_f_or_b_c(self) -> None:
        whites = self.registry.white_keys()
        boundaries = {(key.origin_x + 20) // 56 for key in self.registry.black_keys()}
        for i in range(1, len(whites)):
            left = whites[i - 1].note_name[0]
            if left in ("E", "B"):
                self.assertNotIn(i, boundaries, whites[i].note_name)
            else:
                self.assertIn(i, boundaries, whites[i].note_name)

    def test_black_keys_ascend(self) -> None:
        xs = [key.origin_x for key in self.registry.black_keys()]
        self.assertEqual(xs, sorted(xs))

    def test_lookup(self) -> None:
        self.assertEqual(self.registry.lookup(0).note_name, "C3")
        self.assertEqual(self.registry.lookup(21).note_name, "Db3")
        with self.assertRaises(IndexError):
            self.registry.lookup(36)
        with self.assertRaises(IndexError):
            self.registry.lookup(-1)

    def test_rect_matches_geometry(self) -> None:
        key = self.registry.by_note("Eb3")
        self.assertEqual(key.rect(), pygame.Rect(2 * 56 - 20, 0, 40, 254))

    def test_black_before_white_rejected(self) -> None:
        layout = KEY_LAYOUT[21:] + KEY_LAYOUT[:21]
        with self.assertRaises(LayoutError):
            KeyRegistry(layout)

    def test_impossible_flat_rejected(self) -> None:
        layout = KEY_LAYOUT[:21] + ((pygame.K_2, KeyKind.BLACK, "2", "Fb3"),) + KEY_LAYOUT[22:]
        with self.assertRaises(LayoutError):
            KeyRegistry(layout)

    def test_missing_key_rejected(self) -> None:
        with self.assertRaises(LayoutError):
            KeyRegistry(KEY_LAYOUT[:-1])


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
