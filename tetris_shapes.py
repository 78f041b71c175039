
"""Shape catalog: block kinds, rotation layouts, spawn shifts"""
from enum import IntEnum
from typing import Dict, Tuple
from tetris_position import Position


class BlockKind(IntEnum):
    # Values double as grid cell values and palette indices.
    L = 1
    J = 2
    I = 3
    O = 4
    S = 5
    T = 6
    Z = 7


# Order the bag is filled in
ALL_KINDS: Tuple[BlockKind, ...] = (
    BlockKind.I, BlockKind.J, BlockKind.L, BlockKind.O,
    BlockKind.S, BlockKind.T, BlockKind.Z,
)

Layout = Tuple[Position, ...]


def _states(*states) -> Tuple[Layout, ...]:
    return tuple(tuple(Position(r, c) for r, c in cells) for cells in states)


# Rotation states indexed by rotation index, each a fixed list of (row, column) cells
SHAPES: Dict[BlockKind, Tuple[Layout, ...]] = {
    BlockKind.L: _states(
        [(0,2),(1,0),(1,1),(1,2)],
        [(0,1),(1,1),(2,1),(2,2)],
        # 180 degrees: a real turn, not a copy of state 0
        [(1,0),(1,1),(1,2),(2,0)],
        [(0,0),(0,1),(1,1),(2,1)],
    ),
    BlockKind.J: _states(
        [(0,0),(1,0),(1,1),(1,2)],
        [(0,1),(0,2),(1,1),(2,1)],
        [(1,0),(1,1),(1,2),(2,2)],
        [(0,1),(1,1),(2,0),(2,1)],
    ),
    BlockKind.I: _states(
        [(1,0),(1,1),(1,2),(1,3)],
        [(0,2),(1,2),(2,2),(3,2)],
        [(2,0),(2,1),(2,2),(2,3)],
        [(0,1),(1,1),(2,1),(3,1)],
    ),
    BlockKind.O: _states(
        [(0,0),(0,1),(1,0),(1,1)],
    ),
    BlockKind.S: _states(
        [(0,1),(0,2),(1,0),(1,1)],
        [(0,1),(1,1),(1,2),(2,2)],
        [(1,1),(1,2),(2,0),(2,1)],
        [(0,0),(1,0),(1,1),(2,1)],
    ),
    BlockKind.T: _states(
        [(0,1),(1,0),(1,1),(1,2)],
        [(0,1),(1,1),(1,2),(2,1)],
        [(1,0),(1,1),(1,2),(2,1)],
        [(0,1),(1,0),(1,1),(2,1)],
    ),
    BlockKind.Z: _states(
        [(0,0),(0,1),(1,1),(1,2)],
        [(0,2),(1,1),(1,2),(2,1)],
        [(1,0),(1,1),(2,1),(2,2)],
        [(0,1),(1,0),(1,1),(2,0)],
    ),
}

# (row, column) shift applied once at spawn so the piece starts centered.
# I is lifted a row because its first state sits on its second row.
SPAWN_SHIFT: Dict[BlockKind, Tuple[int, int]] = {
    BlockKind.L: (0, 3),
    BlockKind.J: (0, 3),
    BlockKind.I: (-1, 3),
    BlockKind.O: (0, 4),
    BlockKind.S: (0, 3),
    BlockKind.T: (0, 3),
    BlockKind.Z: (0, 3),
}


def layout(kind: BlockKind) -> Tuple[Layout, ...]:
    return SHAPES[kind]


def rotation_count(kind: BlockKind) -> int:
    return len(SHAPES[kind])


def spawn_shift(kind: BlockKind) -> Tuple[int, int]:
    return SPAWN_SHIFT[kind]
