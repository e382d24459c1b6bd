"""
Collision resolution for Pong3D

Pure functions working on positions and velocities, and a small resolver class
binding them to a game configuration.
"""

from pong3d.core.entities import Ball, Paddle, Side, Vector3
from pong3d.utils.config import GameConfig, game_config


def check_wall_collision(position: Vector3, radius: float, arena_depth: float) -> bool:
    """True when the ball reaches a side wall on the depth axis"""
    return abs(position.z) > arena_depth / 2 - radius


def reflect_off_wall(velocity: Vector3) -> None:
    """Wall bounce: z velocity is negated, the position is left untouched"""
    velocity.z = -velocity.z


def ball_overlaps_paddle(
    ball_position: Vector3,
    paddle_position: Vector3,
    paddle_half_extents: tuple[float, float, float],
    radius: float,
) -> bool:
    """Axis-aligned overlap test on x and z (height is ignored)"""
    half_width, _, half_depth = paddle_half_extents
    return (
        abs(ball_position.x - paddle_position.x) < half_width + radius
        and abs(ball_position.z - paddle_position.z) < half_depth + radius
    )


def apply_paddle_bounce(
    velocity: Vector3,
    ball_position: Vector3,
    paddle_position: Vector3,
    side: Side,
    paddle_depth: float,
    spin_factor: float,
    speed_increment: float,
    max_speed_x: float | None = None,
) -> None:
    """
    Sends the ball back towards the opponent.

    Off-centre hits add z velocity proportional to the normalised offset
    (not clamped, so edge hits may exceed 1), and every hit adds
    `speed_increment` to the x speed.
    """
    normalized_hit = (ball_position.z - paddle_position.z) / (paddle_depth / 2)
    velocity.z += normalized_hit * spin_factor

    speed_x = abs(velocity.x) + speed_increment
    if max_speed_x is not None:
        speed_x = min(speed_x, max_speed_x)
    velocity.x = side.direction * speed_x


def check_goal(position: Vector3, arena_width: float) -> Side | None:
    """Returns the side that scores, if the ball crossed a goal line"""
    if position.x > arena_width / 2:
        return Side.LEFT
    if position.x < -arena_width / 2:
        return Side.RIGHT
    return None


class CollisionResolver:
    """Collision checks bound to a configuration"""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or game_config

    def check_ball_walls(self, ball: Ball) -> bool:
        """Checks and handles a wall bounce"""
        if check_wall_collision(ball.position, ball.radius, self.config.ARENA_DEPTH):
            reflect_off_wall(ball.velocity)
            return True
        return False

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """Checks and handles a paddle bounce"""
        if not ball_overlaps_paddle(
            ball.position, paddle.position, paddle.half_extents, ball.radius
        ):
            return False

        apply_paddle_bounce(
            ball.velocity,
            ball.position,
            paddle.position,
            paddle.side,
            paddle.depth,
            self.config.PADDLE_SPIN_FACTOR,
            self.config.PADDLE_SPEED_INCREMENT,
            self.config.MAX_BALL_SPEED_X,
        )
        return True

    def check_goal(self, ball: Ball) -> Side | None:
        return check_goal(ball.position, self.config.ARENA_WIDTH)
