"""Game entities: the player-controlled bird, pipes and the pipe spawner."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .config import (
    BIRD_HEIGHT,
    BIRD_START_Y,
    BIRD_WIDTH,
    BIRD_X,
    GRAVITY,
    JUMP_IMPULSE,
    PIPE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .utils import Rect


@dataclass
class Bird:
    x: int = BIRD_X
    y: int = BIRD_START_Y
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT
    velocity: int = 0

    def reset(self) -> None:
        self.y = BIRD_START_Y
        self.velocity = 0

    def flap(self) -> None:
        self.velocity = JUMP_IMPULSE

    def update(self) -> None:
        """Advance one tick: gravity, then position, clamped at the top edge."""
        self.velocity += GRAVITY
        self.y += self.velocity
        self.y = max(self.y, 0)

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def hit_ground(self) -> bool:
        return self.y + self.height > SCREEN_HEIGHT


@dataclass
class Pipe:
    x: int
    y: int
    width: int
    height: int
    top: bool
    passed: bool = False

    def update(self, speed: int) -> None:
        self.x -= speed

    def offscreen(self) -> bool:
        return self.x + self.width < 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


class PipeSpawner:
    """Creates top/bottom pipe pairs at the right edge around a random split point."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def random_split(self) -> int:
        lo = SCREEN_HEIGHT // 4
        return self.rng.randrange(lo, lo + SCREEN_HEIGHT // 2)

    @staticmethod
    def make_pair(split: int, gap: int, x: int = SCREEN_WIDTH) -> tuple[Pipe, Pipe]:
        top_height = split - gap // 2
        bottom_y = split + gap // 2
        top = Pipe(x, 0, PIPE_WIDTH, top_height, top=True)
        bottom = Pipe(x, bottom_y, PIPE_WIDTH, SCREEN_HEIGHT - bottom_y, top=False)
        return top, bottom

    def spawn(self, pipes: list[Pipe], gap: int) -> tuple[Pipe, Pipe]:
        """Append exactly one new pair to pipes and return it."""
        pair = self.make_pair(self.random_split(), gap)
        pipes.extend(pair)
        return pair
