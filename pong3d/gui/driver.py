"""
Fixed-step driver: turns elapsed wall-clock time into whole ticks
"""

import logging

from pong3d.core.entities import TickResult
from pong3d.core.session import GameSession

logger = logging.getLogger(__name__)


class FixedStepDriver:
    """
    Accumulates elapsed time and calls `session.tick()` once per nominal step.

    Only a bounded number of ticks run per `advance()` call; leftover time
    beyond that bound is dropped so a stalled frame does not snowball.
    """

    def __init__(
        self,
        session: GameSession,
        tick_rate: int | None = None,
        max_catch_up: int | None = None,
    ):
        self.session = session
        self.step = 1.0 / (tick_rate or session.config.TICK_RATE)
        self.max_catch_up = max_catch_up or session.config.MAX_CATCH_UP_TICKS
        self.accumulator = 0.0

    def advance(self, elapsed: float) -> list[TickResult]:
        """Runs as many ticks as `elapsed` seconds allow"""
        if elapsed < 0:
            return []
        self.accumulator += elapsed

        results = []
        while self.accumulator >= self.step and len(results) < self.max_catch_up:
            results.append(self.session.tick(self.step))
            self.accumulator -= self.step

        if self.accumulator >= self.step:
            logger.debug("Dropping %.3fs of simulation time", self.accumulator)
            self.accumulator = 0.0
        return results

    def reset(self) -> None:
        self.accumulator = 0.0
