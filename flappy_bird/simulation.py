"""Fixed-tick simulation: bird physics, pipe scrolling, scoring, ramp and collisions."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from .config import PIPE_SPAWN_INTERVAL, SCREEN_WIDTH
from .difficulty import DEFAULT_DIFFICULTY, Difficulty, DifficultySettings, settings_for
from .entities import Bird, Pipe, PipeSpawner
from .utils import Rect

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    SELECT_DIFFICULTY = "select_difficulty"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Everything that changes while the game runs."""

    bird: Bird = field(default_factory=Bird)
    pipes: list[Pipe] = field(default_factory=list)
    phase: GamePhase = GamePhase.SELECT_DIFFICULTY
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    pipe_speed: int = settings_for(DEFAULT_DIFFICULTY).speed
    score: int = 0
    high_score: int = 0

    @property
    def settings(self) -> DifficultySettings:
        return settings_for(self.difficulty)


@dataclass(frozen=True)
class RenderSnapshot:
    """Immutable copy of what the presentation layer needs for one frame."""

    bird: Rect
    pipes: tuple[tuple[Rect, bool], ...]
    phase: GamePhase
    score: int
    high_score: int
    difficulty: Difficulty
    pipe_speed: int


class Simulation:
    """Owns the game state and advances it one fixed tick at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.spawner = PipeSpawner(rng)
        self.state = GameState()

    def configure(self, tier: Difficulty) -> None:
        """Lock in a tier's parameters, restoring its base pipe speed."""
        self.state.difficulty = tier
        self.state.pipe_speed = settings_for(tier).speed

    def start(self, tier: Difficulty | None = None) -> None:
        if tier is not None:
            self.configure(tier)
        self.state.phase = GamePhase.PLAYING
        logger.info(
            "Round started on %s (speed=%d, gap=%d)",
            self.state.difficulty.name,
            self.state.pipe_speed,
            self.state.settings.gap,
        )

    def tick(self) -> None:
        s = self.state
        if s.phase is not GamePhase.PLAYING:
            return

        s.bird.update()

        for pipe in s.pipes:
            pipe.update(s.pipe_speed)

        if s.pipes and s.pipes[0].offscreen():
            assert len(s.pipes) >= 2 and s.pipes[0].top and not s.pipes[1].top
            del s.pipes[:2]

        if not s.pipes or s.pipes[-1].x < SCREEN_WIDTH - PIPE_SPAWN_INTERVAL:
            self.spawner.spawn(s.pipes, s.settings.gap)

        self._update_score()

        if self.check_collisions():
            self.end_round()

    def _update_score(self) -> None:
        s = self.state
        assert len(s.pipes) % 2 == 0, "pipes must come in pairs"
        for i in range(0, len(s.pipes), 2):
            top, bottom = s.pipes[i], s.pipes[i + 1]
            if top.passed or s.bird.x <= top.right:
                continue
            s.score += 1
            top.passed = True
            bottom.passed = True
            self.increase_difficulty()

    def increase_difficulty(self) -> None:
        s = self.state
        if s.score > 0 and s.score % s.settings.speed_up_every == 0:
            s.pipe_speed += 1
            logger.debug("Pipe speed ramped to %d at score %d", s.pipe_speed, s.score)

    def check_collisions(self) -> bool:
        bird = self.state.bird
        if bird.hit_ground():
            return True
        bird_rect = bird.rect
        return any(bird_rect.intersects(pipe.rect) for pipe in self.state.pipes)

    def end_round(self) -> None:
        s = self.state
        s.phase = GamePhase.GAME_OVER
        s.high_score = max(s.high_score, s.score)
        logger.info("Game over: score=%d best=%d", s.score, s.high_score)

    def restart(self) -> None:
        """Reset the round and return to difficulty selection.

        High score and the (possibly ramped) pipe speed survive; only an explicit
        difficulty pick restores the base speed.
        """
        s = self.state
        s.high_score = max(s.high_score, s.score)
        s.bird.reset()
        s.pipes.clear()
        s.score = 0
        s.phase = GamePhase.SELECT_DIFFICULTY

    def snapshot(self) -> RenderSnapshot:
        s = self.state
        return RenderSnapshot(
            bird=s.bird.rect,
            pipes=tuple((p.rect, p.top) for p in s.pipes),
            phase=s.phase,
            score=s.score,
            high_score=s.high_score,
            difficulty=s.difficulty,
            pipe_speed=s.pipe_speed,
        )
