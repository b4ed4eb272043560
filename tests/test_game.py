import logging
import os
import random

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from flappy_bird.config import BIRD_HEIGHT, BIRD_WIDTH, COL_BIRD_FALLBACK, SCREEN_HEIGHT, SCREEN_WIDTH
from flappy_bird.game import Game
from flappy_bird.render import Renderer, load_bird_image
from flappy_bird.simulation import GamePhase


def setup_module(module: object) -> None:
    pygame.init()


def teardown_module(module: object) -> None:
    pygame.quit()


def test_game_init() -> None:
    """Game builds its window and starts on the difficulty menu."""
    g = Game(random.Random(1))
    assert g.screen.get_size() == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert g.lifecycle.phase is GamePhase.SELECT_DIFFICULTY
    g.draw()


def test_click_easy_then_play_until_ground() -> None:
    """Clicking the Easy box starts a round that ends when the bird hits the ground."""
    g = Game(random.Random(2))
    g.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(180, 295), button=1))
    assert g.lifecycle.phase is GamePhase.PLAYING
    ticks = 0
    while g.lifecycle.phase is GamePhase.PLAYING and ticks < 500:
        ticks += g.update(20)
        g.draw()
    assert g.lifecycle.phase is GamePhase.GAME_OVER
    g.draw()
    g.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert g.lifecycle.phase is GamePhase.SELECT_DIFFICULTY


def test_update_ignored_on_menu() -> None:
    g = Game(random.Random(3))
    y0 = g.lifecycle.simulation.state.bird.y
    g.update(200)
    assert g.lifecycle.simulation.state.bird.y == y0


def test_escape_posts_quit() -> None:
    g = Game(random.Random(4))
    pygame.event.clear()
    g.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert any(e.type == pygame.QUIT for e in pygame.event.get())
    assert g.lifecycle.phase is GamePhase.SELECT_DIFFICULTY


def test_missing_bird_image_falls_back(tmp_path, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="flappy_bird.render"):
        assert load_bird_image(tmp_path / "nope.png") is None
    assert "rectangle" in caplog.text


def test_bird_image_is_scaled(tmp_path) -> None:
    path = tmp_path / "bird.bmp"
    src = pygame.Surface((68, 48))
    src.fill((10, 20, 30))
    pygame.image.save(src, str(path))
    img = load_bird_image(path)
    assert img is not None
    assert img.get_size() == (BIRD_WIDTH, BIRD_HEIGHT)


def test_fallback_rectangle_drawn() -> None:
    g = Game(random.Random(5))
    surf = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    snap = g.lifecycle.snapshot()
    Renderer(None).draw(surf, snap)
    cx = snap.bird.x + snap.bird.width // 2
    cy = snap.bird.y + snap.bird.height // 2
    assert tuple(surf.get_at((cx, cy)))[:3] == COL_BIRD_FALLBACK
