
"""
Rendering helpers for the Tetris project.

- Renderer: the one drawing call the simulation needs (filled rect in pixel space).
- PygameRenderer: that call on a pygame Surface.
- Hud: score / next / game-over panel, with cached text surfaces so
  text is only re-rendered when the score changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Optional, Protocol
from tetris_colors import Color, DARK_BLUE, LIGHT_BLUE, WHITE
from tetris_config import CONFIG
from tetris_layout import Dims


class Renderer(Protocol):
    def draw_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None: ...


class PygameRenderer:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def draw_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        pygame.draw.rect(self.surface, color, (x, y, width, height))


def load_font() -> pygame.font.Font:
    size = int(CONFIG["FONT_SIZE"])
    try:
        return pygame.font.Font(CONFIG["FONT_PATH"], size)
    except (FileNotFoundError, OSError, pygame.error):
        return pygame.font.Font(None, size)


@dataclass
class HudCache:
    score: int = -1
    score_s: Optional[pygame.Surface] = None
    score_label: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    game_over: Optional[pygame.Surface] = None


class Hud:
    """Side panel: score box, next-block box, game over text."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.cache = HudCache()

    def _text(self, s: str) -> pygame.Surface:
        return self.font.render(s, True, WHITE)

    def draw_background(self, screen: pygame.Surface):
        screen.fill(DARK_BLUE)

    def draw(self, screen: pygame.Surface, score: int, game_over: bool):
        d = self.dims
        c = self.cache
        if c.score_label is None:
            c.score_label = self._text("Score")
            c.next_label = self._text("Next")
            c.game_over = self._text("GAME OVER")
        if score != c.score:
            c.score = score
            c.score_s = self._text(str(score))

        screen.blit(c.score_label, d.score_label)
        screen.blit(c.next_label, d.next_label)
        if game_over:
            screen.blit(c.game_over, d.game_over_label)

        pygame.draw.rect(screen, LIGHT_BLUE, d.score_box, border_radius=18)
        bx, by, bw, _ = d.score_box
        screen.blit(c.score_s, (bx + (bw - c.score_s.get_width()) // 2, by + 10))
        pygame.draw.rect(screen, LIGHT_BLUE, d.next_box, border_radius=18)
