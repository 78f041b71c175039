
"""Palette: cell colors indexed by grid value, plus UI colors"""
from typing import List, Tuple

Color = Tuple[int, int, int]

DARK_GREY: Color = (26, 31, 40)
GREEN: Color = (47, 230, 23)
RED: Color = (232, 18, 18)
ORANGE: Color = (226, 116, 17)
YELLOW: Color = (237, 234, 4)
PURPLE: Color = (116, 0, 247)
CYAN: Color = (21, 204, 209)
BLUE: Color = (13, 64, 216)
LIGHT_BLUE: Color = (59, 85, 162)
DARK_BLUE: Color = (44, 44, 127)
WHITE: Color = (255, 255, 255)

# Index 0 is the empty cell, 1..7 follow BlockKind values
CELL_COLORS: List[Color] = [DARK_GREY, GREEN, RED, ORANGE, YELLOW, PURPLE, CYAN, BLUE]


def cell_color(value: int) -> Color:
    return CELL_COLORS[value]
