"""
Pong3D: fixed-step simulation core of a two-paddle Pong game in a 3D arena
"""

from pong3d.core import GameSession

__all__ = ["GameSession"]
