"""
Pong3D game entities: ball, paddles, score, input intents and session state
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum

import numpy as np

from pong3d.utils.config import GameConfig
from pong3d.utils.config import game_config


class Side(str, Enum):
    """Paddle side, seen from the camera"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT

    @property
    def direction(self) -> int:
        """x direction of the ball after this side returns it"""
        return 1 if self is Side.LEFT else -1


class Key(str, Enum):
    """Paddle movement keys"""

    UP = "up"
    DOWN = "down"


class Mode(str, Enum):
    """Available game modes"""

    TWO_PLAYER = "two_player"
    VS_AI = "vs_ai"


class Difficulty(str, Enum):
    """AI difficulty levels"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class EventType(Enum):
    """Discrete events emitted by a tick"""

    BOUNCE_WALL = "bounce_wall"
    BOUNCE_PADDLE = "bounce_paddle"
    SCORE = "score"
    ROUND_RESET = "round_reset"


@dataclass
class Vector3:
    """Simple 3D vector for positions and velocities"""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y, self.z]))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)


class Ball:
    """Game ball"""

    def __init__(self, position: Vector3, velocity: Vector3, radius: float | None = None):
        self.position = position
        self.velocity = velocity
        self.radius = radius if radius is not None else game_config.BALL_RADIUS

    def update(self) -> None:
        """Advances the ball by one full step"""
        self.position += self.velocity

    def reset_to_center(self, velocity: Vector3) -> None:
        """Puts the ball back at the arena centre, resting on the floor"""
        self.position = Vector3(0.0, self.radius, 0.0)
        self.velocity = velocity


class Paddle:
    """Player paddle. Only the depth axis moves at runtime."""

    def __init__(self, side: Side, position: Vector3, config: GameConfig | None = None):
        self.side = side
        self.position = position
        self.config = config or game_config

    # Sizes and bounds are read from the config on every use
    @property
    def width(self) -> float:
        return self.config.PADDLE_WIDTH

    @property
    def height(self) -> float:
        return self.config.PADDLE_HEIGHT

    @property
    def depth(self) -> float:
        return self.config.PADDLE_DEPTH

    def constrain_position(self) -> None:
        """Ensures the paddle stays within the arena depth"""
        min_z, max_z = self.config.paddle_z_bounds()
        self.position.z = max(min_z, min(max_z, self.position.z))

    def move_z(self, delta: float) -> None:
        """Moves the paddle along z with constraints"""
        self.position.z += delta
        self.constrain_position()

    @property
    def half_extents(self) -> tuple[float, float, float]:
        return (self.width / 2, self.height / 2, self.depth / 2)


@dataclass
class Score:
    """Points per side"""

    left: int = 0
    right: int = 0

    def award(self, side: Side) -> None:
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1

    def reset(self) -> None:
        self.left = 0
        self.right = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.left, self.right)


@dataclass
class InputIntent:
    """Held movement keys for one paddle, persisting between ticks"""

    move_up: bool = False
    move_down: bool = False

    def set(self, key: Key, pressed: bool) -> None:
        if key is Key.UP:
            self.move_up = pressed
        else:
            self.move_down = pressed

    def clear(self) -> None:
        self.move_up = False
        self.move_down = False

    @property
    def direction(self) -> int:
        """-1 towards negative z (up), +1 towards positive z (down); both keys cancel"""
        return int(self.move_down) - int(self.move_up)


@dataclass
class SessionState:
    """Complete mutable state of one play session"""

    ball: Ball
    left_paddle: Paddle
    right_paddle: Paddle
    score: Score = field(default_factory=Score)
    intents: dict[Side, InputIntent] = field(
        default_factory=lambda: {Side.LEFT: InputIntent(), Side.RIGHT: InputIntent()}
    )
    mode: Mode = Mode.TWO_PLAYER
    difficulty: Difficulty = Difficulty.MEDIUM
    paused: bool = True
    tick_count: int = 0
    game_time: float = 0.0

    @classmethod
    def create(cls, config: GameConfig | None = None) -> "SessionState":
        """Builds the default state of a new session"""
        config = config or game_config
        ball = Ball(
            Vector3(0.0, config.BALL_RADIUS, 0.0),
            Vector3(*config.INITIAL_BALL_VELOCITY),
            config.BALL_RADIUS,
        )
        left = Paddle(
            Side.LEFT, Vector3(config.paddle_x(Side.LEFT), config.PADDLE_ELEVATION, 0.0), config
        )
        right = Paddle(
            Side.RIGHT, Vector3(config.paddle_x(Side.RIGHT), config.PADDLE_ELEVATION, 0.0), config
        )
        return cls(
            ball=ball,
            left_paddle=left,
            right_paddle=right,
            mode=Mode(config.DEFAULT_MODE),
            difficulty=Difficulty(config.DEFAULT_DIFFICULTY),
        )

    def paddle(self, side: Side) -> Paddle:
        return self.left_paddle if side is Side.LEFT else self.right_paddle

    def snapshot(self) -> "GameSnapshot":
        return GameSnapshot(
            ball_position=self.ball.position.to_tuple(),
            ball_velocity=self.ball.velocity.to_tuple(),
            left_paddle=PaddleSnapshot(Side.LEFT, self.left_paddle.position.to_tuple()),
            right_paddle=PaddleSnapshot(Side.RIGHT, self.right_paddle.position.to_tuple()),
            score=self.score.as_tuple(),
            paused=self.paused,
            mode=self.mode,
            difficulty=self.difficulty,
            tick_count=self.tick_count,
            game_time=self.game_time,
        )


@dataclass(frozen=True)
class GameEvent:
    """Something that happened during a tick, for the audio and UI layers"""

    type: EventType
    side: Side | None = None


@dataclass(frozen=True)
class PaddleSnapshot:
    side: Side
    position: tuple[float, float, float]


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of the session state for renderers"""

    ball_position: tuple[float, float, float]
    ball_velocity: tuple[float, float, float]
    left_paddle: PaddleSnapshot
    right_paddle: PaddleSnapshot
    score: tuple[int, int]
    paused: bool
    mode: Mode
    difficulty: Difficulty
    tick_count: int
    game_time: float


@dataclass(frozen=True)
class TickResult:
    """Outcome of one tick: the new snapshot and the events in occurrence order"""

    snapshot: GameSnapshot | None
    events: tuple[GameEvent, ...] = ()
