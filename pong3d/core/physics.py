"""
Fixed-step simulation for Pong3D
"""

import logging

import numpy as np

from pong3d.ai.predictive import create_ai
from pong3d.core.collision import CollisionResolver
from pong3d.core.entities import EventType, GameEvent, Mode, SessionState, Side, Vector3
from pong3d.utils.config import AIConfig, GameConfig, game_config
from pong3d.utils.config import ai_config as default_ai_config

logger = logging.getLogger(__name__)


class SimulationStep:
    """Advances a session state by exactly one nominal step"""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        ai_config: AIConfig | None = None,
    ):
        self.config = config or game_config
        self.ai_config = ai_config or default_ai_config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.collision_resolver = CollisionResolver(self.config)

    def serve_velocity(self) -> Vector3:
        """Random serve: fixed-range speed on x towards either side, small spread on z"""
        direction = self.rng.choice([-1, 1])
        speed_x = self.rng.uniform(self.config.SERVE_SPEED_MIN, self.config.SERVE_SPEED_MAX)
        spread = self.config.SERVE_SPREAD_Z
        speed_z = self.rng.uniform(-spread, spread)
        return Vector3(float(direction * speed_x), 0.0, float(speed_z))

    def serve(self, state: SessionState) -> None:
        """Recentres the ball with a new random velocity"""
        state.ball.reset_to_center(self.serve_velocity())

    def run(self, state: SessionState) -> list[GameEvent]:
        """
        Runs one step on an unpaused state

        Order matters: AI, paddle movement, ball movement, wall bounce,
        left then right paddle bounce, and finally the goal check.

        Returns:
            Events in the order they happened
        """
        events: list[GameEvent] = []
        ball = state.ball

        ai_move = self._ai_move(state)

        # Paddle movement
        for side in Side:
            paddle = state.paddle(side)
            if ai_move is not None and side.value == self.ai_config.AI_SIDE:
                paddle.move_z(ai_move)
            else:
                paddle.move_z(state.intents[side].direction * self.config.PADDLE_SPEED)

        ball.update()

        if self.collision_resolver.check_ball_walls(ball):
            events.append(GameEvent(EventType.BOUNCE_WALL))

        for side in Side:
            if self.collision_resolver.check_ball_paddle(ball, state.paddle(side)):
                events.append(GameEvent(EventType.BOUNCE_PADDLE, side))

        scorer = self.collision_resolver.check_goal(ball)
        if scorer is not None:
            state.score.award(scorer)
            events.append(GameEvent(EventType.SCORE, scorer))
            logger.info("%s scores, score is now %s", scorer.value, state.score.as_tuple())
            self.serve(state)
            events.append(GameEvent(EventType.ROUND_RESET))

        state.tick_count += 1
        state.game_time += self.config.tick_seconds
        return events

    def _ai_move(self, state: SessionState) -> float | None:
        """z displacement for the AI paddle, or None outside VsAI mode"""
        if state.mode is not Mode.VS_AI:
            return None
        ai = create_ai(state.difficulty, self.config, self.ai_config)
        paddle = state.paddle(Side(self.ai_config.AI_SIDE))
        return ai.get_move(state.ball.position, state.ball.velocity, paddle.position.z)
