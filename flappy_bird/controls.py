"""Translate raw pygame key/pointer events into lifecycle input events."""

from __future__ import annotations

import pygame

from .config import (
    BUTTON_HEIGHT,
    BUTTON_OFFSETS,
    BUTTON_WIDTH,
    BUTTON_X,
    SCREEN_HEIGHT,
)
from .difficulty import Difficulty
from .lifecycle import DefaultStart, Flap, InputEvent, Restart, SelectDifficulty
from .simulation import GamePhase
from .utils import Rect

DIFFICULTY_BUTTONS: tuple[tuple[Difficulty, Rect], ...] = tuple(
    (tier, Rect(BUTTON_X, SCREEN_HEIGHT // 2 + offset, BUTTON_WIDTH, BUTTON_HEIGHT))
    for tier, offset in zip((Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD), BUTTON_OFFSETS)
)


def button_at(x: float, y: float) -> Difficulty | None:
    for tier, box in DIFFICULTY_BUTTONS:
        if box.contains_point(x, y):
            return tier
    return None


def _primary_action(phase: GamePhase) -> InputEvent:
    if phase is GamePhase.SELECT_DIFFICULTY:
        return DefaultStart()
    if phase is GamePhase.PLAYING:
        return Flap()
    return Restart()


def map_event(event: pygame.event.Event, phase: GamePhase) -> InputEvent | None:
    """Return the semantic input for a raw event, or None if it means nothing here."""
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_SPACE:
            return _primary_action(phase)
        return None
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if phase is GamePhase.SELECT_DIFFICULTY:
            tier = button_at(*event.pos)
            if tier is not None:
                return SelectDifficulty(tier)
        return _primary_action(phase)
    return None
