"""Draw render snapshots with pygame."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from .config import (
    BIRD_HEIGHT,
    BIRD_IMAGE,
    BIRD_WIDTH,
    COL_BIRD_FALLBACK,
    COL_PIPE,
    COL_PIPE_EDGE,
    COL_SKY_BOTTOM,
    COL_SKY_TOP,
    COL_TEXT,
    COL_TEXT_DIM,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .controls import DIFFICULTY_BUTTONS
from .simulation import GamePhase, RenderSnapshot
from .utils import scale_color, vertical_gradient

logger = logging.getLogger(__name__)

ASSET_DIR = Path(__file__).resolve().parent / "assets"


def load_bird_image(path: Path | str | None = None) -> pygame.Surface | None:
    """Load and scale the bird sprite; None means draw a flat rectangle instead."""
    path = Path(path) if path is not None else ASSET_DIR / BIRD_IMAGE
    try:
        image = pygame.image.load(str(path))
    except (FileNotFoundError, pygame.error) as exc:
        logger.warning("Could not load bird image %s (%s); using a rectangle instead", path, exc)
        return None
    return pygame.transform.smoothscale(image, (BIRD_WIDTH, BIRD_HEIGHT))


class Renderer:
    """Composes one frame from a snapshot onto a target surface."""

    def __init__(self, bird_image: pygame.Surface | None = None) -> None:
        self.bird_image = bird_image
        self.font_big = pygame.font.SysFont(None, 40)
        self.font_small = pygame.font.SysFont(None, 22)
        self.background = pygame.surfarray.make_surface(
            vertical_gradient(SCREEN_WIDTH, SCREEN_HEIGHT, COL_SKY_TOP, COL_SKY_BOTTOM)
        )

    def draw(self, surf: pygame.Surface, snap: RenderSnapshot) -> None:
        surf.blit(self.background, (0, 0))
        self._draw_pipes(surf, snap)
        self._draw_bird(surf, snap)
        if snap.phase is GamePhase.SELECT_DIFFICULTY:
            self._draw_menu(surf)
        elif snap.phase is GamePhase.PLAYING:
            self._blit_centered(surf, self.font_big, str(snap.score), 50)
        else:
            self._draw_game_over(surf, snap)

    def _draw_bird(self, surf: pygame.Surface, snap: RenderSnapshot) -> None:
        x, y, w, h = snap.bird.as_tuple()
        if self.bird_image is not None:
            surf.blit(self.bird_image, (x, y))
        else:
            pygame.draw.rect(surf, COL_BIRD_FALLBACK, pygame.Rect(x, y, w, h))

    def _draw_pipes(self, surf: pygame.Surface, snap: RenderSnapshot) -> None:
        for rect, top in snap.pipes:
            r = pygame.Rect(rect.as_tuple())
            pygame.draw.rect(surf, COL_PIPE, r)
            # Lip on the edge facing the gap
            lip = pygame.Rect(r.x - 3, r.bottom - 16 if top else r.y, r.width + 6, 16)
            pygame.draw.rect(surf, scale_color(COL_PIPE, 0.85), lip)
            pygame.draw.rect(surf, COL_PIPE_EDGE, r, 2)

    def _draw_menu(self, surf: pygame.Surface) -> None:
        self._blit_centered(surf, self.font_big, "Select Difficulty", SCREEN_HEIGHT // 2 - 100)
        for tier, box in DIFFICULTY_BUTTONS:
            r = pygame.Rect(box.as_tuple())
            pygame.draw.rect(surf, COL_TEXT, r, 2)
            label = self.font_big.render(tier.name.title(), True, COL_TEXT)
            surf.blit(label, label.get_rect(center=r.center))

    def _draw_game_over(self, surf: pygame.Surface, snap: RenderSnapshot) -> None:
        mid = SCREEN_HEIGHT // 2
        self._blit_centered(surf, self.font_big, "Game Over", mid - 50)
        self._blit_centered(surf, self.font_big, f"Score: {snap.score}", mid)
        self._blit_centered(surf, self.font_big, f"High Score: {snap.high_score}", mid + 50)
        self._blit_centered(surf, self.font_small, "Click or Press Space to Restart", mid + 100, COL_TEXT_DIM)

    @staticmethod
    def _blit_centered(
        surf: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        y: int,
        color: tuple[int, int, int] = COL_TEXT,
    ) -> None:
        img = font.render(text, True, color)
        surf.blit(img, img.get_rect(center=(SCREEN_WIDTH // 2, y)))
