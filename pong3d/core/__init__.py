"""
Core module of Pong3D: entities, collisions, simulation and session
"""

from pong3d.core.entities import Ball
from pong3d.core.entities import Difficulty
from pong3d.core.entities import EventType
from pong3d.core.entities import GameEvent
from pong3d.core.entities import GameSnapshot
from pong3d.core.entities import Key
from pong3d.core.entities import Mode
from pong3d.core.entities import Paddle
from pong3d.core.entities import SessionState
from pong3d.core.entities import Side
from pong3d.core.entities import TickResult
from pong3d.core.entities import Vector3
from pong3d.core.session import GameSession

__all__ = [
    "Ball",
    "Paddle",
    "Vector3",
    "Side",
    "Key",
    "Mode",
    "Difficulty",
    "EventType",
    "GameEvent",
    "GameSnapshot",
    "SessionState",
    "TickResult",
    "GameSession",
]
