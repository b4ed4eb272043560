"""Input events and the game lifecycle state machine.

SELECT_DIFFICULTY -> PLAYING -> GAME_OVER -> SELECT_DIFFICULTY. Each event is
only accepted in one phase; anything else is ignored without touching state.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Union

from .difficulty import Difficulty
from .simulation import GamePhase, RenderSnapshot, Simulation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flap:
    pass


@dataclass(frozen=True)
class SelectDifficulty:
    tier: Difficulty


@dataclass(frozen=True)
class DefaultStart:
    pass


@dataclass(frozen=True)
class Restart:
    pass


InputEvent = Union[Flap, SelectDifficulty, DefaultStart, Restart]

_ACCEPTED_IN: dict[type, GamePhase] = {
    SelectDifficulty: GamePhase.SELECT_DIFFICULTY,
    DefaultStart: GamePhase.SELECT_DIFFICULTY,
    Flap: GamePhase.PLAYING,
    Restart: GamePhase.GAME_OVER,
}


class Lifecycle:
    """Dispatches input events to the simulation and gates ticking by phase."""

    def __init__(self, simulation: Simulation | None = None, rng: random.Random | None = None) -> None:
        self.simulation = simulation or Simulation(rng)

    @property
    def phase(self) -> GamePhase:
        return self.simulation.state.phase

    def accepts(self, event: InputEvent) -> bool:
        return _ACCEPTED_IN.get(type(event)) is self.phase

    def handle(self, event: InputEvent) -> bool:
        """Apply event if valid for the current phase. Returns whether it was applied."""
        if not self.accepts(event):
            logger.debug("Ignoring %s during %s", event, self.phase.name)
            return False

        sim = self.simulation
        if isinstance(event, SelectDifficulty):
            sim.start(event.tier)
        elif isinstance(event, DefaultStart):
            sim.start()
        elif isinstance(event, Flap):
            sim.state.bird.flap()
        elif isinstance(event, Restart):
            sim.restart()
            logger.info("Restarted; best=%d", sim.state.high_score)
        return True

    def step(self) -> None:
        """Run one fixed tick if a round is in progress."""
        if self.phase is GamePhase.PLAYING:
            self.simulation.tick()

    def snapshot(self) -> RenderSnapshot:
        return self.simulation.snapshot()
