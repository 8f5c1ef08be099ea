"""Key code lookup."""

from __future__ import annotations

import unittest

import pygame

from core.input_mapper import InputMapper
from core.keys import KEY_LAYOUT, KeyRegistry


class InputMapperTests(unittest.TestCase):

    def setUp(self) -> None:
        self.mapper = InputMapper(KeyRegistry())

    def test_all_codes_map_to_distinct_keys(self) -> None:
        codes = [row[0] for row in KEY_LAYOUT]
        keys = [self.mapper.map_to_key(code) for code in codes]
        self.assertEqual(len(codes), 36)
        self.assertNotIn(None, keys)
        self.assertEqual(len({key.note_name for key in keys}), 36)
        for code, key in zip(codes, keys):
            self.assertEqual(key.key_code, code)

    def test_known_bindings(self) -> None:
        self.assertEqual(self.mapper.map_to_key(pygame.K_1).note_name, "C3")
        self.assertEqual(self.mapper.map_to_key(pygame.K_w).note_name, "B3")
        self.assertEqual(self.mapper.map_to_key(pygame.K_q).note_name, "Bb3")
        self.assertEqual(self.mapper.map_to_key(pygame.K_m).note_name, "B5")

    def test_unmapped_codes(self) -> None:
        for code in (pygame.K_ESCAPE, pygame.K_SPACE, pygame.K_F1, -1, 0):
            self.assertIsNone(self.mapper.map_to_key(code))
            self.assertNotIn(code, self.mapper)

    def test_codes(self) -> None:
        self.assertEqual(len(self.mapper), 36)
        self.assertEqual(set(self.mapper.codes()), {row[0] for row in KEY_LAYOUT})


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
