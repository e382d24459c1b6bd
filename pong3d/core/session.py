"""
Game session: owner of the session state and public control API
"""

import logging
from enum import Enum
from typing import TypeVar

import numpy as np

from pong3d.core.entities import (
    Difficulty,
    GameEvent,
    GameSnapshot,
    Key,
    Mode,
    SessionState,
    Side,
    TickResult,
)
from pong3d.core.interfaces.listener import TickListener
from pong3d.core.physics import SimulationStep
from pong3d.utils.config import AIConfig, GameConfig, game_config
from pong3d.utils.config import ai_config as default_ai_config

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _coerce(enum_type: type[E], value: object) -> E | None:
    """Enum member for `value` (member or its string value), None if unknown"""
    try:
        return enum_type(value)
    except ValueError:
        return None


class GameSession:
    """
    Sole mutator of a SessionState.

    Every public method degrades to a no-op on illegal calls (unknown side or
    key, no state yet) so gameplay never fails mid-session. The session does no
    timing of its own: an external driver calls `tick()` at a fixed cadence.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        state: SessionState | None = None,
        ai_config: AIConfig | None = None,
    ):
        self.config = config or game_config
        self.ai_config = ai_config or default_ai_config
        self.simulation = SimulationStep(
            self.config, np.random.default_rng(seed), self.ai_config
        )
        self.listeners: list[TickListener] = []
        self.state: SessionState | None = None
        if state is not None:
            self.state = state
        else:
            self.start()

    # Lifecycle

    def start(self) -> None:
        """Starts a new session with default values (paused, centred ball, zero score)"""
        self.state = SessionState.create(self.config)
        logger.info("Session started in %s mode", self.state.mode.value)

    def end(self) -> None:
        """Discards the session state"""
        self.state = None
        logger.info("Session ended")

    @property
    def is_active(self) -> bool:
        return self.state is not None

    def add_listener(self, listener: TickListener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: TickListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    # Commands

    def is_ai_controlled(self, side: Side) -> bool:
        return (
            self.state is not None
            and self.state.mode is Mode.VS_AI
            and side.value == self.ai_config.AI_SIDE
        )

    def apply_input(self, side: Side | str, key: Key | str, pressed: bool) -> None:
        """Sets or clears a held movement key for a human-controlled paddle"""
        if self.state is None:
            return
        side_value = _coerce(Side, side)
        key_value = _coerce(Key, key)
        if side_value is None or key_value is None:
            logger.debug("Ignoring input for unknown side/key %r/%r", side, key)
            return
        if self.is_ai_controlled(side_value):
            return
        self.state.intents[side_value].set(key_value, bool(pressed))

    def set_paused(self, paused: bool) -> None:
        if self.state is None:
            return
        self.state.paused = bool(paused)

    def toggle_pause(self) -> None:
        if self.state is None:
            return
        self.state.paused = not self.state.paused

    def set_mode(self, mode: Mode | str) -> None:
        """Switches mode; score and ball are kept"""
        if self.state is None:
            return
        mode_value = _coerce(Mode, mode)
        if mode_value is None:
            logger.debug("Ignoring unknown mode %r", mode)
            return
        self.state.mode = mode_value
        if mode_value is Mode.VS_AI:
            # The AI paddle must not keep a human key held from the previous mode
            self.state.intents[Side(self.ai_config.AI_SIDE)].clear()
        logger.info("Mode set to %s", mode_value.value)

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        """Stored in any mode, only used by the AI in VsAI mode from the next tick"""
        if self.state is None:
            return
        difficulty_value = _coerce(Difficulty, difficulty)
        if difficulty_value is None:
            logger.debug("Ignoring unknown difficulty %r", difficulty)
            return
        self.state.difficulty = difficulty_value

    def reset_round(self) -> None:
        """Recentres the ball with a new random velocity; score is untouched"""
        if self.state is None:
            return
        self.simulation.serve(self.state)

    def reset_match(self) -> None:
        """Zeroes both scores and starts a new round"""
        if self.state is None:
            return
        self.state.score.reset()
        self.reset_round()
        logger.info("Match reset")

    # Simulation

    def snapshot(self) -> GameSnapshot | None:
        return self.state.snapshot() if self.state is not None else None

    def tick(self, dt: float | None = None) -> TickResult:
        """
        Advances the simulation by one fixed step

        Args:
            dt: Elapsed time reported by the driver. The step size is fixed,
                so this is only checked against the nominal cadence.

        Returns:
            TickResult with the new snapshot and the ordered events of the tick
        """
        if self.state is None:
            return TickResult(snapshot=None)

        if dt is not None and abs(dt - self.config.tick_seconds) > self.config.tick_seconds:
            logger.debug("tick called with dt=%.4f, step stays %.4f", dt, self.config.tick_seconds)

        events: list[GameEvent] = []
        if not self.state.paused:
            events = self.simulation.run(self.state)

        result = TickResult(snapshot=self.state.snapshot(), events=tuple(events))
        for listener in self.listeners:
            try:
                listener.on_tick(result)
            except Exception:
                logger.exception("Tick listener %r failed", listener)
        return result

