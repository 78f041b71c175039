
"""Grid: fixed occupancy matrix, row clearing and compaction"""
from __future__ import annotations
import logging
from typing import List, TYPE_CHECKING
from tetris_config import CONFIG
from tetris_colors import cell_color
from tetris_layout import BOARD_OFFSET, COLS, ROWS

if TYPE_CHECKING:
    from tetris_render import Renderer

log = logging.getLogger(__name__)

EMPTY = 0


class Grid:
    """20x10 matrix of cell values: 0 is empty, 1..7 is the kind that locked there."""

    def __init__(self):
        self.num_rows = ROWS
        self.num_cols = COLS
        self.cells: List[List[int]] = [[EMPTY] * COLS for _ in range(ROWS)]

    def reset(self):
        for row in self.cells:
            for x in range(self.num_cols):
                row[x] = EMPTY

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.cells)

    def is_cell_outside(self, row: int, column: int) -> bool:
        return not (0 <= row < self.num_rows and 0 <= column < self.num_cols)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Precondition: (row, column) is inside the grid. Not checked here."""
        return self.cells[row][column] == EMPTY

    def set_cell(self, row: int, column: int, value: int):
        assert not self.is_cell_outside(row, column), f"cell ({row}, {column}) outside grid"
        assert 0 <= value <= 7, f"cell value {value} out of range"
        self.cells[row][column] = value

    def is_row_full(self, row: int) -> bool:
        return all(v != EMPTY for v in self.cells[row])

    def clear_row(self, row: int):
        for x in range(self.num_cols):
            self.cells[row][x] = EMPTY

    def move_row_down(self, row: int, num_rows: int):
        for x in range(self.num_cols):
            self.cells[row + num_rows][x] = self.cells[row][x]
            self.cells[row][x] = EMPTY

    def clear_full_rows(self) -> int:
        """Clear every full row and drop the rows above; returns rows cleared.

        Scans bottom to top. Full rows are zeroed and counted; each non-full
        row met after that is shifted down by the count so far, so stacked
        clears compact in one pass.
        """
        completed = 0
        for row in range(self.num_rows - 1, -1, -1):
            if self.is_row_full(row):
                self.clear_row(row)
                completed += 1
            elif completed > 0:
                self.move_row_down(row, completed)
        if completed:
            log.debug("cleared %d row(s)", completed)
        return completed

    def draw(self, renderer: Renderer):
        c = int(CONFIG["CELL_SIZE"])
        ox, oy = BOARD_OFFSET
        for y in range(self.num_rows):
            for x in range(self.num_cols):
                renderer.draw_rect(x*c + ox, y*c + oy, c-1, c-1, cell_color(self.cells[y][x]))
