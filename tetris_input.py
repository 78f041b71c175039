
"""Discrete key input: pygame events to game keys"""
from enum import Enum
from typing import Iterable, Optional
import pygame


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    UP = "up"
    OTHER = "other"


KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
}


def key_from_event(e) -> Optional[Key]:
    if e.type != pygame.KEYDOWN:
        return None
    return KEYMAP.get(e.key, Key.OTHER)


def poll_key(events: Iterable) -> Optional[Key]:
    """First key press among this frame's events, or None."""
    for e in events:
        k = key_from_event(e)
        if k is not None:
            return k
    return None
