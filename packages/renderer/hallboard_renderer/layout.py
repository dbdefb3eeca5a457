"""Grid geometry for the leaderboard panel."""

from __future__ import annotations

import math

from .models import EXTRA_TRAILING_ROWS, GRID_GAP, Geometry, GridSpec


def row_count(entry_count: int, entries_per_row: int) -> int:
    """Rows needed for the entries plus the reserved trailing empty row(s)."""
    return math.ceil(entry_count / entries_per_row) + EXTRA_TRAILING_ROWS


def compute_layout(spec: GridSpec) -> Geometry:
    rows = row_count(spec.entry_count, spec.entries_per_row)
    width = spec.canvas_width
    height = 1 + rows * (spec.entry_height + GRID_GAP)

    entry_starts: list[int] = []
    pos_x = 1  # inside the outer left border
    for col in range(spec.entries_per_row):
        entry_starts.append(pos_x)
        # first column gives up a pixel to the artwork border
        pos_x += spec.entry_width - 1 if col == 0 else spec.entry_width
        if col < spec.entries_per_row - 1:
            pos_x += GRID_GAP

    row_starts = [r * (spec.entry_height + GRID_GAP) for r in range(rows)]

    interior = [entry_starts[col] - col for col in range(1, spec.entries_per_row)]
    vertical_lines = [0, *interior, width - 1]
    horizontal_lines = [0, *(y - 1 for y in row_starts[1:]), height - 1]

    cell_lefts = [2, *(x + 1 for x in interior)]
    cell_widths = [spec.entry_width - 2] + [spec.entry_width - 1] * (spec.entries_per_row - 1)

    return Geometry(
        width=width,
        height=height,
        rows=rows,
        entry_height=spec.entry_height,
        entry_starts=tuple(entry_starts),
        row_starts=tuple(row_starts),
        vertical_lines=tuple(vertical_lines),
        horizontal_lines=tuple(horizontal_lines),
        cell_lefts=tuple(cell_lefts),
        cell_widths=tuple(cell_widths),
    )
