"""Window, event pump and frame loop wiring the core to pygame."""

from __future__ import annotations

import logging
import random
import sys

import pygame

from .config import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .controls import map_event
from .lifecycle import Lifecycle
from .render import Renderer, load_bird_image
from .scheduler import FixedTickScheduler

logger = logging.getLogger(__name__)


class Game:
    """Top-level game controller: owns the window and drives the lifecycle."""

    def __init__(self, rng: random.Random | None = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        self.clock = pygame.time.Clock()
        self.lifecycle = Lifecycle(rng=rng)
        self.scheduler = FixedTickScheduler(self.lifecycle.step)
        self.renderer = Renderer(load_bird_image())

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            return
        action = map_event(event, self.lifecycle.phase)
        if action is not None:
            self.lifecycle.handle(action)

    def update(self, elapsed_ms: float) -> int:
        return self.scheduler.advance(elapsed_ms)

    def draw(self) -> None:
        self.renderer.draw(self.screen, self.lifecycle.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        logger.info("Starting Flappy Bird (%dx%d)", SCREEN_WIDTH, SCREEN_HEIGHT)
        while True:
            elapsed = self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    sys.exit(0)
                self.handle_input(event)

            self.update(elapsed)
            self.draw()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    Game().run()
