import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from hallboard_renderer.compositor import overlay
from hallboard_renderer.models import Color
from hallboard_renderer.pixels import PixelBuffer


class OverlayTests(unittest.TestCase):
    def setUp(self):
        rng = np.random.default_rng(7)
        self.base = PixelBuffer(40, 30, rng.integers(0, 256, size=(30, 40, 4), dtype=np.uint8))
        self.panel = PixelBuffer(10, 6, rng.integers(0, 256, size=(6, 10, 4), dtype=np.uint8))

    def test_inside_matches_panel_outside_unchanged(self):
        original = self.base.copy()
        out = overlay(self.base, self.panel, 7, 3)
        self.assertIs(out, self.base)

        mask = np.zeros((30, 40), dtype=bool)
        mask[3:9, 7:17] = True
        self.assertTrue(np.array_equal(self.base.pixels[~mask], original.pixels[~mask]))
        self.assertTrue(np.array_equal(self.base.pixels[3:9, 7:17], self.panel.pixels))

    def test_no_alpha_blending(self):
        panel = PixelBuffer.new(2, 2, Color(9, 9, 9, 0))
        overlay(self.base, panel, 0, 0)
        self.assertEqual(self.base.get(1, 1), Color(9, 9, 9, 0))

    def test_panel_must_fit(self):
        original = self.base.copy()
        with self.assertRaises(IndexError):
            overlay(self.base, self.panel, 35, 0)
        self.assertEqual(self.base, original)


if __name__ == "__main__":
    unittest.main()
