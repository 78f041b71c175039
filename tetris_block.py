
"""Block model: one live piece on the grid"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, TYPE_CHECKING
from tetris_config import CONFIG
from tetris_colors import cell_color
from tetris_position import Position
from tetris_shapes import BlockKind, Layout, layout, rotation_count, spawn_shift

if TYPE_CHECKING:
    from tetris_render import Renderer


@dataclass
class Block:
    kind: BlockKind
    rotation: int = 0
    row_offset: int = 0
    column_offset: int = 0

    @staticmethod
    def spawn(kind: BlockKind) -> "Block":
        b = Block(kind)
        b.move(*spawn_shift(kind))
        return b

    @property
    def id(self) -> int:
        return int(self.kind)

    @property
    def states(self) -> Tuple[Layout, ...]:
        return layout(self.kind)

    def move(self, rows: int, columns: int):
        # No bounds check; callers validate and move back.
        self.row_offset += rows
        self.column_offset += columns

    def rotate(self):
        self.rotation += 1
        if self.rotation == rotation_count(self.kind):
            self.rotation = 0

    def undo_rotation(self):
        self.rotation -= 1
        if self.rotation == -1:
            self.rotation = rotation_count(self.kind) - 1

    def cell_positions(self) -> List[Position]:
        return [p.shifted(self.row_offset, self.column_offset) for p in self.states[self.rotation]]

    def draw(self, renderer: Renderer, offset_x: int, offset_y: int):
        c = int(CONFIG["CELL_SIZE"])
        col = cell_color(self.id)
        for p in self.cell_positions():
            renderer.draw_rect(p.column*c + offset_x, p.row*c + offset_y, c-1, c-1, col)
