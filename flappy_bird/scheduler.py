"""Accumulator-driven fixed-step driver, independent of any platform timer."""

from __future__ import annotations

import logging
from typing import Callable

from .config import MAX_TICKS_PER_FRAME, TICK_MS

logger = logging.getLogger(__name__)


class FixedTickScheduler:
    def __init__(
        self,
        step: Callable[[], None],
        tick_ms: int = TICK_MS,
        max_steps: int = MAX_TICKS_PER_FRAME,
    ) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.step = step
        self.tick_ms = tick_ms
        self.max_steps = max_steps
        self.accumulator = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Feed real elapsed time; run as many whole ticks as it covers."""
        self.accumulator += max(0.0, elapsed_ms)
        steps = 0
        while self.accumulator >= self.tick_ms and steps < self.max_steps:
            self.step()
            self.accumulator -= self.tick_ms
            steps += 1
        if self.accumulator >= self.tick_ms:
            # Drop the backlog left after a stall.
            logger.debug("Dropping %.0f ms of simulation backlog", self.accumulator)
            self.accumulator %= self.tick_ms
        return steps
