"""Difficulty tiers and their pipe parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultySettings:
    """Pipe speed (px/tick), gap height (px) and how many points between speed-ups."""

    speed: int
    gap: int
    speed_up_every: int


DIFFICULTY_TABLE: dict[Difficulty, DifficultySettings] = {
    Difficulty.EASY: DifficultySettings(speed=2, gap=200, speed_up_every=10),
    Difficulty.MEDIUM: DifficultySettings(speed=3, gap=150, speed_up_every=5),
    Difficulty.HARD: DifficultySettings(speed=4, gap=100, speed_up_every=3),
}

DEFAULT_DIFFICULTY = Difficulty.EASY


def settings_for(tier: Difficulty) -> DifficultySettings:
    return DIFFICULTY_TABLE[tier]
