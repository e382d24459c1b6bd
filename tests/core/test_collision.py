"""
Unit tests for collision resolution

Tests wall bounces, the paddle overlap test, the paddle bounce law
and goal detection.
"""

import pytest

from pong3d.core.collision import (
    CollisionResolver,
    apply_paddle_bounce,
    ball_overlaps_paddle,
    check_goal,
    check_wall_collision,
    reflect_off_wall,
)
from pong3d.core.entities import Ball, Paddle, Side, Vector3
from pong3d.utils.config import GameConfig

PADDLE_HALF_EXTENTS = (0.5, 0.5, 3.5)


class TestWallCollision:
    """Test wall contact on the depth axis"""

    def test_inside_arena_no_collision(self):
        assert not check_wall_collision(Vector3(0, 0.5, 14.5), 0.5, 30)

    @pytest.mark.parametrize("z", [14.6, -14.6])
    def test_past_wall_limit_collides(self, z):
        """Both walls trigger once the ball is past depth/2 - radius"""
        assert check_wall_collision(Vector3(0, 0.5, z), 0.5, 30)

    def test_reflect_keeps_magnitude(self):
        """Test z velocity flips sign and nothing else changes"""
        velocity = Vector3(0.2, 0.0, 0.13)
        reflect_off_wall(velocity)
        assert velocity.to_tuple() == (0.2, 0.0, -0.13)


class TestPaddleOverlap:
    """Test the axis-aligned paddle overlap test"""

    def test_centered_hit(self):
        assert ball_overlaps_paddle(
            Vector3(-19.1, 0.5, 0), Vector3(-19.5, 0.6, 0), PADDLE_HALF_EXTENTS, 0.5
        )

    def test_edge_is_exclusive(self):
        """Exactly half extent + radius away on z is not a hit"""
        assert not ball_overlaps_paddle(
            Vector3(-19.5, 0.5, 4.0), Vector3(-19.5, 0.6, 0), PADDLE_HALF_EXTENTS, 0.5
        )

    def test_miss_on_x(self):
        assert not ball_overlaps_paddle(
            Vector3(-17.0, 0.5, 0), Vector3(-19.5, 0.6, 0), PADDLE_HALF_EXTENTS, 0.5
        )


class TestPaddleBounce:
    """Test the paddle bounce law"""

    def test_left_paddle_sends_ball_right(self):
        velocity = Vector3(-0.2, 0.0, 0.0)
        apply_paddle_bounce(
            velocity, Vector3(-19.1, 0.5, 0), Vector3(-19.5, 0.6, 0), Side.LEFT, 7, 0.2, 0.02
        )
        assert velocity.x == pytest.approx(0.22)
        assert velocity.z == pytest.approx(0.0)

    def test_right_paddle_sends_ball_left(self):
        velocity = Vector3(0.2, 0.0, 0.0)
        apply_paddle_bounce(
            velocity, Vector3(19.1, 0.5, 0), Vector3(19.5, 0.6, 0), Side.RIGHT, 7, 0.2, 0.02
        )
        assert velocity.x == pytest.approx(-0.22)

    def test_off_center_hit_adds_spin(self):
        """Half-way to the paddle edge adds half the spin factor"""
        velocity = Vector3(-0.2, 0.0, 0.05)
        apply_paddle_bounce(
            velocity, Vector3(-19.1, 0.5, 1.75), Vector3(-19.5, 0.6, 0), Side.LEFT, 7, 0.2, 0.02
        )
        assert velocity.z == pytest.approx(0.15)

    def test_extreme_edge_is_not_clamped(self):
        """Offsets beyond the paddle half depth give a normalised hit above 1"""
        velocity = Vector3(-0.2, 0.0, 0.0)
        apply_paddle_bounce(
            velocity, Vector3(-19.1, 0.5, -3.9), Vector3(-19.5, 0.6, 0), Side.LEFT, 7, 0.2, 0.02
        )
        assert velocity.z == pytest.approx(-3.9 / 3.5 * 0.2)
        assert velocity.z < -0.2

    def test_speed_increases_by_increment_per_hit(self):
        """Each hit adds exactly the increment to |vx|, with no upper bound"""
        velocity = Vector3(0.2, 0.0, 0.0)
        speeds = []
        for _ in range(20):
            apply_paddle_bounce(
                velocity, Vector3(0, 0.5, 0), Vector3(0, 0.6, 0), Side.LEFT, 7, 0.2, 0.02
            )
            speeds.append(abs(velocity.x))

        for previous, current in zip(speeds, speeds[1:]):
            assert current - previous == pytest.approx(0.02)
        assert speeds[-1] == pytest.approx(0.2 + 20 * 0.02)

    def test_optional_speed_cap(self):
        velocity = Vector3(0.24, 0.0, 0.0)
        apply_paddle_bounce(
            velocity, Vector3(0, 0.5, 0), Vector3(0, 0.6, 0), Side.RIGHT, 7, 0.2, 0.02, 0.25
        )
        assert velocity.x == pytest.approx(-0.25)


class TestGoal:
    """Test goal line detection"""

    def test_no_goal_on_the_line(self):
        assert check_goal(Vector3(20.0, 0.5, 0), 40) is None
        assert check_goal(Vector3(19.9, 0.5, 0), 40) is None

    def test_right_goal_line_scores_for_left(self):
        assert check_goal(Vector3(20.2, 0.5, 0), 40) is Side.LEFT

    def test_left_goal_line_scores_for_right(self):
        assert check_goal(Vector3(-20.2, 0.5, 0), 40) is Side.RIGHT


class TestCollisionResolver:
    """Test the resolver bound to a configuration"""

    def test_wall_bounce(self):
        resolver = CollisionResolver(GameConfig())
        ball = Ball(Vector3(0, 0.5, 14.6), Vector3(0.2, 0, 0.2), 0.5)
        assert resolver.check_ball_walls(ball)
        assert ball.velocity.z == -0.2
        assert ball.position.z == 14.6, "Wall bounce must not move the ball"

    def test_paddle_bounce_uses_config(self):
        config = GameConfig(PADDLE_SPEED_INCREMENT=0.05)
        resolver = CollisionResolver(config)
        paddle = Paddle(Side.LEFT, Vector3(-19.5, 0.6, 0), config)
        ball = Ball(Vector3(-19.1, 0.5, 0), Vector3(-0.2, 0, 0), 0.5)
        assert resolver.check_ball_paddle(ball, paddle)
        assert ball.velocity.x == pytest.approx(0.25)

    def test_paddle_miss_leaves_velocity(self):
        resolver = CollisionResolver(GameConfig())
        paddle = Paddle(Side.LEFT, Vector3(-19.5, 0.6, 11.5))
        ball = Ball(Vector3(-19.1, 0.5, 0), Vector3(-0.2, 0, 0), 0.5)
        assert not resolver.check_ball_paddle(ball, paddle)
        assert ball.velocity.x == -0.2
