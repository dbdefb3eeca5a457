import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from hallboard_renderer.layout import compute_layout, row_count
from hallboard_renderer.models import EXTRA_TRAILING_ROWS, GridSpec


class LayoutTests(unittest.TestCase):
    def test_stock_grid_geometry(self):
        geo = compute_layout(GridSpec(entry_count=4, entries_per_row=4, entry_width=32, entry_height=9))
        self.assertEqual(geo.rows, 2)
        self.assertEqual(geo.entry_height, 9)
        self.assertEqual((geo.width, geo.height), (130, 21))
        self.assertEqual(geo.entry_starts, (1, 33, 66, 99))
        self.assertEqual(geo.row_starts, (0, 10))
        self.assertEqual(geo.vertical_lines, (0, 32, 64, 96, 129))
        self.assertEqual(geo.horizontal_lines, (0, 9, 20))
        self.assertEqual(geo.cell_lefts, (2, 33, 65, 97))
        self.assertEqual(geo.cell_widths, (30, 31, 31, 31))

    def test_trailing_row_is_always_reserved(self):
        self.assertEqual(EXTRA_TRAILING_ROWS, 1)
        for k in range(1, 7):
            for n in range(0, 30):
                self.assertEqual(row_count(n, k), math.ceil(n / k) + 1)
                geo = compute_layout(GridSpec(entry_count=n, entries_per_row=k))
                self.assertEqual(geo.rows, math.ceil(n / k) + 1)
                self.assertEqual(geo.height, 1 + geo.rows * 10)

    def test_layout_is_deterministic(self):
        spec = GridSpec(entry_count=13, entries_per_row=3, entry_width=20, entry_height=11)
        self.assertEqual(compute_layout(spec), compute_layout(spec))
        self.assertEqual(compute_layout(spec), compute_layout(GridSpec(13, 3, 20, 11)))

    def test_empty_grid_has_one_row(self):
        geo = compute_layout(GridSpec(entry_count=0))
        self.assertEqual(geo.rows, 1)
        self.assertEqual(geo.row_starts, (0,))
        self.assertEqual(geo.horizontal_lines, (0, 10))

    def test_single_column(self):
        geo = compute_layout(GridSpec(entry_count=2, entries_per_row=1, entry_width=32))
        self.assertEqual(geo.width, 34)
        self.assertEqual(geo.vertical_lines, (0, 33))
        self.assertEqual(geo.cell_lefts, (2,))
        self.assertEqual(geo.cell_widths, (30,))

    def test_explicit_width_moves_right_edge_only(self):
        geo = compute_layout(GridSpec(entry_count=4, width=140))
        self.assertEqual(geo.vertical_lines, (0, 32, 64, 96, 139))

    def test_invalid_specs(self):
        with self.assertRaises(ValueError):
            GridSpec(entry_count=-1)
        with self.assertRaises(ValueError):
            GridSpec(entry_count=1, entries_per_row=0)


if __name__ == "__main__":
    unittest.main()
