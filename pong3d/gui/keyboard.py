"""
Keyboard bindings for Pong3D using pygame key constants

Maps platform key codes to (side, key) commands on a GameSession. Left
paddle uses the layout's W/S keys (Z/S on AZERTY), right paddle the arrows.
"""

import logging
from dataclasses import dataclass

import pygame

from pong3d.core.entities import Key, Side
from pong3d.core.session import GameSession
from pong3d.utils.config import game_config

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    left_keys: dict[str, int]
    right_keys: dict[str, int]
    display_names: dict[str, str]


ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        right_keys=ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}

PAUSE_KEYS = (pygame.K_p, pygame.K_SPACE)
RESET_KEYS = (pygame.K_r,)


def get_keyboard_layout(name: str | None = None) -> KeyboardLayout:
    """Layout by name, defaulting to the configured one"""
    name = name or game_config.KEYBOARD_LAYOUT
    if name not in KEYBOARD_LAYOUTS:
        raise ValueError(
            f"Unknown keyboard layout '{name}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
        )
    return KEYBOARD_LAYOUTS[name]


class KeyboardController:
    """Translates pygame key events into GameSession commands"""

    def __init__(self, session: GameSession, layout: str | None = None):
        self.session = session
        self.layout = get_keyboard_layout(layout)
        self.bindings: dict[int, tuple[Side, Key]] = {}
        for side, keys in ((Side.LEFT, self.layout.left_keys), (Side.RIGHT, self.layout.right_keys)):
            for key_name, key_code in keys.items():
                self.bindings[key_code] = (side, Key(key_name))

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle a pygame event

        Returns:
            String naming the control action triggered ("pause", "reset"),
            or None for movement keys and ignored events
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return None

        pressed = event.type == pygame.KEYDOWN
        binding = self.bindings.get(event.key)
        if binding is not None:
            side, key = binding
            self.session.apply_input(side, key, pressed)
            return None

        if not pressed:
            return None
        if event.key in PAUSE_KEYS:
            self.session.toggle_pause()
            return "pause"
        if event.key in RESET_KEYS:
            self.session.reset_match()
            return "reset"

        logger.debug("Unmapped key %s", event.key)
        return None

    def get_control_info(self) -> dict[str, dict[str, str]]:
        """Key names per side, for help screens"""
        return {
            Side.LEFT.value: self.layout.display_names.copy(),
            Side.RIGHT.value: {"up": "↑", "down": "↓"},
        }
