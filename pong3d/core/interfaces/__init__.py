"""
Protocols for collaborators of the simulation core
"""

from pong3d.core.interfaces.listener import TickListener

__all__ = ["TickListener"]
