"""
Pong3D game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

DIFFICULTY_NAMES = ("easy", "medium", "hard")


class DifficultyProfile(BaseModel):
    """AI tuning for one difficulty level"""

    model_config = {"frozen": True}

    speed: float = Field(gt=0, le=1.0, description="Fraction of the gap closed per tick")
    prediction_horizon: float = Field(ge=0, description="How far ahead the AI extrapolates")


def _default_profiles() -> dict[str, DifficultyProfile]:
    return {
        "easy": DifficultyProfile(speed=0.3, prediction_horizon=0.1),
        "medium": DifficultyProfile(speed=0.6, prediction_horizon=0.3),
        "hard": DifficultyProfile(speed=0.9, prediction_horizon=0.6),
    }


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Arena (x = width, y = height, z = depth)
    ARENA_WIDTH: float = Field(default=40.0, gt=0, description="Arena size along x")
    ARENA_HEIGHT: float = Field(default=2.0, gt=0, description="Arena size along y")
    ARENA_DEPTH: float = Field(default=30.0, gt=0, description="Arena size along z")

    # Paddles
    PADDLE_WIDTH: float = Field(default=1.0, gt=0, description="Paddle size along x")
    PADDLE_HEIGHT: float = Field(default=1.0, gt=0, description="Paddle size along y")
    PADDLE_DEPTH: float = Field(default=7.0, gt=0, description="Paddle size along z")
    PADDLE_INSET: float = Field(default=0.5, ge=0, description="Paddle distance from goal line")
    PADDLE_ELEVATION: float = Field(default=0.6, description="Paddle centre height")
    PADDLE_SPEED: float = Field(default=0.5, gt=0, description="Paddle displacement per tick")

    # Ball
    BALL_RADIUS: float = Field(default=0.5, gt=0, description="Ball radius")
    INITIAL_BALL_VELOCITY: tuple[float, float, float] = Field(
        default=(0.15, 0.0, 0.15), description="Ball velocity when a session starts"
    )
    SERVE_SPEED_MIN: float = Field(default=0.2, gt=0, description="Minimum serve speed on x")
    SERVE_SPEED_MAX: float = Field(default=0.2, gt=0, description="Maximum serve speed on x")
    SERVE_SPREAD_Z: float = Field(default=0.1, ge=0, description="Serve speed spread on z")
    PADDLE_SPIN_FACTOR: float = Field(default=0.2, ge=0, description="Spin per normalised hit")
    PADDLE_SPEED_INCREMENT: float = Field(default=0.02, ge=0, description="Speed gain per hit")
    MAX_BALL_SPEED_X: Annotated[float, Field(gt=0)] | None = Field(
        default=None, description="Optional cap on ball speed along x"
    )

    # Timing
    TICK_RATE: int = Field(default=60, gt=0, description="Nominal ticks per second")
    MAX_CATCH_UP_TICKS: int = Field(default=5, gt=0, description="Max ticks per driver advance")

    # Gameplay
    DIFFICULTY_PROFILES: dict[str, DifficultyProfile] = Field(default_factory=_default_profiles)
    DEFAULT_MODE: Literal["two_player", "vs_ai"] = Field(default="two_player")
    DEFAULT_DIFFICULTY: Literal["easy", "medium", "hard"] = Field(default="medium")

    # Keyboard layout
    KEYBOARD_LAYOUT: Literal["qwerty", "azerty", "qwertz"] = Field(default="qwerty")

    @field_validator("DIFFICULTY_PROFILES")
    @classmethod
    def validate_profiles(cls, v: dict[str, DifficultyProfile]) -> dict[str, DifficultyProfile]:
        missing = [name for name in DIFFICULTY_NAMES if name not in v]
        if missing:
            raise ValueError(f"Missing difficulty profiles: {missing}")
        return v

    @model_validator(mode="after")
    def validate_dimensions(self) -> "GameConfig":
        """Validate the serve range and that the arena fits its paddles and ball"""
        if self.SERVE_SPEED_MIN > self.SERVE_SPEED_MAX:
            raise ValueError(
                f"SERVE_SPEED_MIN ({self.SERVE_SPEED_MIN}) must not exceed "
                f"SERVE_SPEED_MAX ({self.SERVE_SPEED_MAX})"
            )
        if self.PADDLE_DEPTH >= self.ARENA_DEPTH:
            raise ValueError("PADDLE_DEPTH must be smaller than ARENA_DEPTH")
        if 2 * self.BALL_RADIUS >= self.ARENA_DEPTH:
            raise ValueError("Ball does not fit in ARENA_DEPTH")
        if self.PADDLE_INSET >= self.ARENA_WIDTH / 2:
            raise ValueError("PADDLE_INSET must be smaller than half ARENA_WIDTH")
        return self

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.TICK_RATE

    def paddle_z_bounds(self) -> tuple[float, float]:
        """Range allowed for a paddle centre on the depth axis"""
        half = self.ARENA_DEPTH / 2 - self.PADDLE_DEPTH / 2
        return (-half, half)

    def paddle_x(self, side: str) -> float:
        """Paddle centre on x for 'left' or 'right'"""
        if side == "left":
            return -self.ARENA_WIDTH / 2 + self.PADDLE_INSET
        return self.ARENA_WIDTH / 2 - self.PADDLE_INSET

    def get_difficulty_profile(self, name: str) -> DifficultyProfile:
        return self.DIFFICULTY_PROFILES[name]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump(mode="json")

    def save_to_file(self, filepath: str | Path = "pong3d_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str | Path = "pong3d_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        replace_values(self, GameConfig().model_dump())


class AIConfig(BaseModel):
    """Configuration for the AI controller"""

    model_config = {"validate_assignment": True}

    PREDICTION_SCALE: float = Field(
        default=10.0, gt=0, description="Ticks per unit of prediction horizon"
    )
    AI_SIDE: Literal["left", "right"] = Field(default="right", description="Paddle driven by AI")


# Global configuration instances with validation
game_config = GameConfig()
ai_config = AIConfig()


def replace_values(obj: BaseModel, values: dict[str, Any]) -> None:
    """
    Applies several field values at once.

    The merged values are validated as a whole model first, so fields that
    depend on each other (arena and paddle sizes, serve range) never go
    through an invalid intermediate state. On error `obj` is left untouched.
    """
    validated = type(obj)(**{**obj.model_dump(), **values})
    for name in values:
        object.__setattr__(obj, name, getattr(validated, name))


def load_config_from_file(filepath: str | Path = "pong3d_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
        replace_values(game_config, loaded_config.model_dump())
    except FileNotFoundError:
        logger.info("No configuration file at %s, keeping defaults", filepath)
        return False
    except (ValueError, json.JSONDecodeError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False
    return True


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = {name: getattr(game_config, name) for name in kwargs}
    replace_values(game_config, kwargs)
    try:
        yield
    finally:
        replace_values(game_config, old_values)


@contextmanager
def ai_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify AI config (with validation)"""
    old_values = {name: getattr(ai_config, name) for name in kwargs}
    replace_values(ai_config, kwargs)
    try:
        yield
    finally:
        replace_values(ai_config, old_values)
