"""
Tick listener protocol - defines interface for presentation collaborators
"""

from typing import Protocol

from pong3d.core.entities import TickResult


class TickListener(Protocol):
    """
    Protocol for anything consuming tick output: renderers, audio cues,
    score displays.

    Listeners only ever see immutable snapshots, never the live state.
    """

    def on_tick(self, result: TickResult) -> None:
        """
        Called after each tick that produced a snapshot.

        Args:
            result: Snapshot of the new state and the events of the tick,
                    in the order they happened
        """
        ...
