"""
Predictive AI opponent for Pong3D
"""

from pong3d.core.entities import Difficulty, Vector3
from pong3d.utils.config import AIConfig, DifficultyProfile, GameConfig, game_config
from pong3d.utils.config import ai_config as default_ai_config


class PredictiveAI:
    """
    AI that extrapolates the ball linearly and eases its paddle towards it.

    Stateless: every call only depends on its arguments. Wall bounces between
    the ball and the paddle are not anticipated.
    """

    def __init__(
        self,
        profile: DifficultyProfile,
        speed_cap: float,
        paddle_bounds: tuple[float, float],
        prediction_scale: float = 10.0,
    ):
        self.profile = profile
        self.speed_cap = speed_cap
        self.min_z, self.max_z = paddle_bounds
        self.prediction_scale = prediction_scale

    def predict_z(self, ball_position: Vector3, ball_velocity: Vector3) -> float:
        """Ball z after `prediction_horizon * prediction_scale` ticks"""
        return (
            ball_position.z
            + ball_velocity.z * self.profile.prediction_horizon * self.prediction_scale
        )

    def target_z(self, ball_position: Vector3, ball_velocity: Vector3) -> float:
        future_z = self.predict_z(ball_position, ball_velocity)
        return max(self.min_z, min(self.max_z, future_z))

    def get_move(self, ball_position: Vector3, ball_velocity: Vector3, paddle_z: float) -> float:
        """Signed z displacement for this tick, bounded by the paddle speed"""
        step = (self.target_z(ball_position, ball_velocity) - paddle_z) * self.profile.speed
        return max(-self.speed_cap, min(self.speed_cap, step))


def create_ai(
    difficulty: Difficulty | str,
    config: GameConfig | None = None,
    ai_config: AIConfig | None = None,
) -> PredictiveAI:
    """
    Factory to create the AI for a difficulty level

    Args:
        difficulty: Difficulty enum or its name ('easy', 'medium', 'hard')
        config: Game configuration, defaults to the global one
        ai_config: AI configuration, defaults to the global one

    Returns:
        PredictiveAI: controller tuned with the matching profile
    """
    config = config or game_config
    ai_config = ai_config or default_ai_config
    try:
        difficulty = Difficulty(difficulty)
    except ValueError:
        raise ValueError(
            f"Unknown difficulty: {difficulty}. Available: {[d.value for d in Difficulty]}"
        ) from None

    return PredictiveAI(
        profile=config.get_difficulty_profile(difficulty.value),
        speed_cap=config.PADDLE_SPEED,
        paddle_bounds=config.paddle_z_bounds(),
        prediction_scale=ai_config.PREDICTION_SCALE,
    )
