# tetris_layout.py
from dataclasses import dataclass
from typing import Dict, Tuple
from tetris_shapes import BlockKind

COLS, ROWS = 10, 20

# Pixel offset of the grid and of the falling block
BOARD_OFFSET = (11, 11)

# Preview offsets for the wide kinds; every other kind uses DEFAULT_PREVIEW_OFFSET
PREVIEW_OFFSETS: Dict[BlockKind, Tuple[int, int]] = {
    BlockKind.I: (255, 290),
    BlockKind.O: (255, 280),
}
DEFAULT_PREVIEW_OFFSET = (270, 270)


def preview_offset(kind: BlockKind) -> Tuple[int, int]:
    return PREVIEW_OFFSETS.get(kind, DEFAULT_PREVIEW_OFFSET)


@dataclass
class Dims:
    total_w: int
    total_h: int
    score_label: Tuple[int, int]
    score_box: Tuple[int, int, int, int]
    next_label: Tuple[int, int]
    next_box: Tuple[int, int, int, int]
    game_over_label: Tuple[int, int]

def compute_dims() -> Dims:
    panel_x = 320
    panel_w = 170

    return Dims(
        total_w=500, total_h=620,
        score_label=(365, 15),
        score_box=(panel_x, 55, panel_w, 60),
        next_label=(370, 175),
        next_box=(panel_x, 215, panel_w, 180),
        game_over_label=(320, 450),
    )
