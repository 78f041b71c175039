
"""Game controller: active/next block, collision, locking, scoring, game over"""
from __future__ import annotations
import logging
from typing import Optional, TYPE_CHECKING
from tetris_audio import Cue, SilentAudio
from tetris_bag import BlockBag
from tetris_block import Block
from tetris_config import CONFIG
from tetris_grid import Grid
from tetris_input import Key
from tetris_layout import BOARD_OFFSET, preview_offset
from tetris_timer import DropTimer

if TYPE_CHECKING:
    from tetris_render import Renderer

log = logging.getLogger(__name__)

# Points per number of rows cleared by one lock. Four rows has no entry and scores nothing.
LINE_SCORES = {1: 100, 2: 300, 3: 500}
SOFT_DROP_POINTS = 1


class Game:
    def __init__(self, bag: Optional[BlockBag] = None, audio=None, now: float = 0.0):
        self.grid = Grid()
        self.bag = bag if bag is not None else BlockBag(CONFIG["BAG_SEED"])
        self.audio = audio if audio is not None else SilentAudio()
        self.timer = DropTimer(float(CONFIG["DROP_INTERVAL"]), now)
        self.game_over = False
        self.score = 0
        self.current = Block.spawn(self.bag.draw())
        self.next = Block.spawn(self.bag.draw())

    # ---------- input ----------
    def handle_key(self, key: Optional[Key]):
        if key is None:
            return
        if self.game_over:
            # Any key starts a new game, then still applies to the new block.
            self.reset()
        if key is Key.LEFT:
            self.move_block_left()
        elif key is Key.RIGHT:
            self.move_block_right()
        elif key is Key.DOWN:
            if self.move_block_down():
                self.update_score(0, SOFT_DROP_POINTS)
        elif key is Key.UP:
            self.rotate_block()

    def update(self, now: float):
        """Timer-driven drop; call once per frame with the monotonic time."""
        if self.timer.triggered(now):
            self.move_block_down()

    # ---------- movement ----------
    def move_block_left(self):
        self._shift(0, -1)

    def move_block_right(self):
        self._shift(0, 1)

    def _shift(self, rows: int, columns: int) -> bool:
        if self.game_over:
            return False
        self.current.move(rows, columns)
        if self.is_block_outside() or not self.block_fits():
            self.current.move(-rows, -columns)
            return False
        return True

    def move_block_down(self) -> bool:
        """Drop one row. Locks the block instead when it cannot move."""
        if self.game_over:
            return False
        if self._shift(1, 0):
            return True
        self.lock_block()
        return False

    def rotate_block(self):
        if self.game_over:
            return
        self.current.rotate()
        if self.is_block_outside() or not self.block_fits():
            self.current.undo_rotation()
        else:
            self.audio.play(Cue.ROTATE)

    # ---------- collision ----------
    def is_block_outside(self) -> bool:
        return any(self.grid.is_cell_outside(p.row, p.column) for p in self.current.cell_positions())

    def block_fits(self) -> bool:
        for p in self.current.cell_positions():
            assert not self.grid.is_cell_outside(p.row, p.column), f"probe outside grid: {p}"
            if not self.grid.is_cell_empty(p.row, p.column):
                return False
        return True

    # ---------- locking & scoring ----------
    def lock_block(self):
        for p in self.current.cell_positions():
            self.grid.set_cell(p.row, p.column, self.current.id)
        log.debug("locked %s at %s", self.current.kind.name, self.current.cell_positions())
        self.current = self.next
        if not self.block_fits():
            self.game_over = True
            log.info("game over, score %d", self.score)
        self.next = Block.spawn(self.bag.draw())
        rows_cleared = self.grid.clear_full_rows()
        if rows_cleared > 0:
            self.audio.play(Cue.CLEAR)
            self.update_score(rows_cleared, 0)

    def update_score(self, lines_cleared: int, move_down_points: int):
        self.score += LINE_SCORES.get(lines_cleared, 0)
        self.score += move_down_points

    def reset(self, now: Optional[float] = None):
        self.grid.reset()
        self.bag.refill()
        self.current = Block.spawn(self.bag.draw())
        self.next = Block.spawn(self.bag.draw())
        self.score = 0
        self.game_over = False
        if now is not None:
            self.timer.restart(now)
        log.info("new game")

    # ---------- drawing ----------
    def draw(self, renderer: Renderer):
        self.grid.draw(renderer)
        self.current.draw(renderer, *BOARD_OFFSET)
        self.next.draw(renderer, *preview_offset(self.next.kind))
