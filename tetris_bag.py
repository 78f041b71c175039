
"""7-bag randomizer module"""
import logging
import random
from typing import List, Optional
from tetris_shapes import ALL_KINDS, BlockKind

log = logging.getLogger(__name__)


class BlockBag:
    """Hands out each of the 7 kinds once before refilling."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.kinds: List[BlockKind] = []
        self.refill()

    @property
    def remaining(self) -> List[BlockKind]:
        return list(self.kinds)

    def refill(self):
        self.kinds = list(ALL_KINDS)
        log.debug("bag refilled")

    def draw(self) -> BlockKind:
        if not self.kinds:
            self.refill()
        i = self.rng.randrange(len(self.kinds))
        return self.kinds.pop(i)
