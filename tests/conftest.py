import os
import sys
from itertools import cycle

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from tetris_bag import BlockBag
from tetris_game import Game
from tetris_shapes import BlockKind


class ScriptedBag(BlockBag):
    """Bag that deals kinds from a fixed, repeating script."""
    def __init__(self, *kinds):
        super().__init__(seed=0)
        self.script = cycle(kinds)

    def draw(self):
        return next(self.script)


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play(self, cue):
        self.played.append(cue)

    def close(self):
        pass


class RecordingRenderer:
    def __init__(self):
        self.rects = []

    def draw_rect(self, x, y, width, height, color):
        self.rects.append((x, y, width, height, color))


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def make_game(audio):
    def make(*kinds):
        return Game(ScriptedBag(*(kinds or (BlockKind.O,))), audio, now=0.0)
    return make


def fill_row(grid, row, skip=(), value=1):
    for x in range(grid.num_cols):
        if x not in skip:
            grid.set_cell(row, x, value)


def drop(game):
    """Move the active block down until it locks."""
    while game.move_block_down():
        pass
