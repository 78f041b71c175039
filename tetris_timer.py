
"""Auto-drop cooldown"""
from dataclasses import dataclass


@dataclass
class DropTimer:
    interval: float
    last_update: float = 0.0

    def triggered(self, now: float) -> bool:
        if now - self.last_update >= self.interval:
            self.last_update = now
            return True
        return False

    def restart(self, now: float):
        self.last_update = now
