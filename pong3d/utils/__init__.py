"""
Pong3D utility module
"""

from pong3d.utils.config import AIConfig
from pong3d.utils.config import DifficultyProfile
from pong3d.utils.config import GameConfig
from pong3d.utils.config import ai_config
from pong3d.utils.config import game_config

__all__ = ["game_config", "ai_config", "GameConfig", "AIConfig", "DifficultyProfile"]
