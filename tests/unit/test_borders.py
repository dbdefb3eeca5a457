import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from hallboard_renderer.borders import BorderRenderer, adjust_intersection
from hallboard_renderer.layout import compute_layout
from hallboard_renderer.models import GridSpec
from hallboard_renderer.palettes import get_palette
from hallboard_renderer.pixels import PixelBuffer

PALETTE = get_palette("classic")


def _painted(spec: GridSpec) -> tuple[PixelBuffer, object]:
    geo = compute_layout(spec)
    canvas = PixelBuffer.new(geo.width, geo.height)
    renderer = BorderRenderer(PALETTE)
    renderer.draw_grid(canvas, geo)
    renderer.draw_intersections(canvas, geo)
    return canvas, geo


class AdjustIntersectionTests(unittest.TestCase):
    def test_edge_rules(self):
        self.assertEqual(adjust_intersection(0, 9, 130, 21), (1, 9))
        self.assertEqual(adjust_intersection(129, 9, 130, 21), (128, 9))
        self.assertEqual(adjust_intersection(32, 0, 130, 21), (32, -1))
        self.assertEqual(adjust_intersection(32, 20, 130, 21), (32, 19))
        self.assertEqual(adjust_intersection(32, 9, 130, 21), (32, 9))

    def test_corners_adjust_independently(self):
        self.assertEqual(adjust_intersection(0, 0, 130, 21), (1, -1))
        self.assertEqual(adjust_intersection(129, 20, 130, 21), (128, 19))
        self.assertEqual(adjust_intersection(0, 20, 130, 21), (1, 19))

    def test_adjusted_centres_stay_within_policy_range(self):
        for n in (0, 1, 4, 9, 17):
            for k in (1, 2, 4, 5):
                geo = compute_layout(GridSpec(entry_count=n, entries_per_row=k))
                for y in geo.horizontal_lines:
                    for x in geo.vertical_lines:
                        cx, cy = adjust_intersection(x, y, geo.width, geo.height)
                        self.assertTrue(1 <= cx <= geo.width - 2)
                        self.assertTrue(-1 <= cy <= geo.height - 2)


class BorderRendererTests(unittest.TestCase):
    def test_every_pixel_is_painted(self):
        canvas, _ = _painted(GridSpec(entry_count=4))
        self.assertTrue((canvas.pixels[:, :, 3] == 255).all())

    def test_frame_and_rows(self):
        canvas, _ = _painted(GridSpec(entry_count=4))
        border, fill = PALETTE.border, PALETTE.fill
        for y in range(3, canvas.height):
            self.assertEqual(canvas.get(0, y), border)
            self.assertEqual(canvas.get(129, y), border)
        for x in range(canvas.width):
            self.assertEqual(canvas.get(x, 20), border)
        self.assertEqual(canvas.get(50, 19), border)
        self.assertEqual(canvas.get(1, 5), border)
        self.assertEqual(canvas.get(128, 5), border)
        self.assertEqual(canvas.get(64, 5), border)
        self.assertEqual(canvas.get(50, 9), border)
        self.assertEqual(canvas.get(10, 5), fill)
        self.assertEqual(canvas.get(2, 5), fill)
        self.assertEqual(canvas.get(31, 5), fill)
        self.assertEqual(canvas.get(127, 14), fill)

    def test_intersection_sprites(self):
        canvas, _ = _painted(GridSpec(entry_count=4))
        accent, border = PALETTE.accent, PALETTE.border
        for cx, cy in ((1, 9), (32, 9), (128, 9), (1, 19), (64, 19), (128, 19)):
            self.assertEqual(canvas.get(cx, cy), accent)
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    if dx or dy:
                        self.assertEqual(canvas.get(cx + dx, cy + dy), border)

    def test_top_sprites_lose_their_centre_row(self):
        canvas, _ = _painted(GridSpec(entry_count=4))
        accent_mask = (canvas.pixels == np.array(PALETTE.accent, dtype=np.uint8)).all(axis=2)
        self.assertFalse(accent_mask[0].any())
        for x in (31, 32, 33, 63, 64, 65):
            self.assertEqual(canvas.get(x, 0), PALETTE.border)
        self.assertEqual(canvas.get(31, 1), PALETTE.fill)
        self.assertEqual(canvas.get(32, 1), PALETTE.border)

    def test_accent_count_matches_visible_crossings(self):
        for n, k in ((4, 4), (9, 4), (3, 1), (0, 2)):
            canvas, geo = _painted(GridSpec(entry_count=n, entries_per_row=k))
            accent_mask = (canvas.pixels == np.array(PALETTE.accent, dtype=np.uint8)).all(axis=2)
            visible_rows = len(geo.horizontal_lines) - 1
            self.assertEqual(int(accent_mask.sum()), visible_rows * len(geo.vertical_lines))


if __name__ == "__main__":
    unittest.main()
