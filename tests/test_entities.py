"""
Tests for Pong3D game entities
"""

import pytest

from pong3d.core.entities import (
    Ball,
    InputIntent,
    Key,
    Mode,
    Paddle,
    Score,
    SessionState,
    Side,
    Vector3,
)
from pong3d.utils.config import GameConfig, game_config, game_config_tmp


class TestVector3:
    """Tests for Vector3 class"""

    def test_addition(self) -> None:
        """Test vector addition"""
        result = Vector3(1.0, 2.0, 3.0) + Vector3(0.5, 0.5, 0.5)
        assert result == Vector3(1.5, 2.5, 3.5)

    def test_in_place_addition_mutates(self) -> None:
        """Test in-place addition keeps the same object"""
        v = Vector3(1.0, 0.0, 0.0)
        original = v
        v += Vector3(0.0, 1.0, 2.0)
        assert v is original
        assert v.to_tuple() == (1.0, 1.0, 2.0)

    def test_magnitude(self) -> None:
        """Test magnitude calculation"""
        assert Vector3(2.0, 3.0, 6.0).magnitude() == pytest.approx(7.0)

    def test_copy_is_independent(self) -> None:
        """Test copy returns a distinct vector"""
        v = Vector3(1.0, 2.0, 3.0)
        c = v.copy()
        c.x = 9.0
        assert v.x == 1.0


class TestSide:
    """Tests for Side enum helpers"""

    def test_opponent(self) -> None:
        assert Side.LEFT.opponent is Side.RIGHT
        assert Side.RIGHT.opponent is Side.LEFT

    def test_direction(self) -> None:
        """Left returns the ball to the right, right returns it to the left"""
        assert Side.LEFT.direction == 1
        assert Side.RIGHT.direction == -1

    def test_accepts_string_values(self) -> None:
        assert Side("left") is Side.LEFT
        assert Key("down") is Key.DOWN


class TestBall:
    """Tests for Ball class"""

    def test_update_moves_by_one_full_step(self) -> None:
        ball = Ball(Vector3(1.0, 0.5, 2.0), Vector3(0.2, 0.0, -0.1))
        ball.update()
        assert ball.position.x == pytest.approx(1.2)
        assert ball.position.z == pytest.approx(1.9)

    def test_reset_to_center(self) -> None:
        ball = Ball(Vector3(5.0, 3.0, 5.0), Vector3(1.0, 0.0, 1.0))
        ball.reset_to_center(Vector3(-0.2, 0.0, 0.05))
        assert ball.position.to_tuple() == (0.0, game_config.BALL_RADIUS, 0.0)
        assert ball.velocity.to_tuple() == (-0.2, 0.0, 0.05)


class TestPaddle:
    """Tests for Paddle class"""

    def test_size_from_config(self) -> None:
        paddle = Paddle(Side.LEFT, Vector3(-19.5, 0.6, 0.0))
        assert paddle.half_extents == (0.5, 0.5, 3.5)

    def test_move_is_clamped(self) -> None:
        """Test the paddle never leaves the arena depth"""
        paddle = Paddle(Side.RIGHT, Vector3(19.5, 0.6, 11.0))
        paddle.move_z(5.0)
        assert paddle.position.z == 11.5
        paddle.move_z(-50.0)
        assert paddle.position.z == -11.5

    def test_bounds_follow_config_changes(self) -> None:
        """Test a deeper paddle is clamped to the new bounds"""
        config = GameConfig()
        paddle = Paddle(Side.LEFT, Vector3(-19.5, 0.6, 0.0), config)
        config.PADDLE_DEPTH = 11

        paddle.move_z(20.0)

        assert paddle.depth == 11
        assert paddle.position.z == 9.5

    def test_bounds_follow_temporary_global_config(self) -> None:
        paddle = Paddle(Side.RIGHT, Vector3(19.5, 0.6, 0.0))
        with game_config_tmp(ARENA_DEPTH=20.0):
            paddle.move_z(-20.0)
            assert paddle.position.z == -6.5
        paddle.move_z(-20.0)
        assert paddle.position.z == -11.5


class TestScoreAndIntent:
    """Tests for Score and InputIntent"""

    def test_award_and_reset(self) -> None:
        score = Score()
        score.award(Side.LEFT)
        score.award(Side.LEFT)
        score.award(Side.RIGHT)
        assert score.as_tuple() == (2, 1)
        score.reset()
        assert score.as_tuple() == (0, 0)

    def test_intent_direction(self) -> None:
        intent = InputIntent()
        assert intent.direction == 0
        intent.set(Key.UP, True)
        assert intent.direction == -1
        intent.set(Key.DOWN, True)
        assert intent.direction == 0, "Both keys held should cancel out"
        intent.set(Key.UP, False)
        assert intent.direction == 1
        intent.clear()
        assert not intent.move_up and not intent.move_down


class TestSessionState:
    """Tests for the default session state"""

    def test_defaults(self) -> None:
        state = SessionState.create()
        assert state.paused is True
        assert state.mode is Mode.TWO_PLAYER
        assert state.score.as_tuple() == (0, 0)
        assert state.ball.position.to_tuple() == (0.0, 0.5, 0.0)
        assert state.ball.velocity.to_tuple() == (0.15, 0.0, 0.15)
        assert state.left_paddle.position.to_tuple() == (-19.5, 0.6, 0.0)
        assert state.right_paddle.position.to_tuple() == (19.5, 0.6, 0.0)

    def test_snapshot_is_a_copy(self) -> None:
        """Test that later mutations do not leak into a snapshot"""
        state = SessionState.create()
        snapshot = state.snapshot()
        state.ball.position.x = 10.0
        state.score.award(Side.LEFT)
        assert snapshot.ball_position[0] == 0.0
        assert snapshot.score == (0, 0)
