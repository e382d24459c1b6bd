"""
Collaborator-side adapters: pygame keyboard bindings and fixed-step driver
"""

from pong3d.gui.driver import FixedStepDriver
from pong3d.gui.keyboard import KEYBOARD_LAYOUTS
from pong3d.gui.keyboard import KeyboardController
from pong3d.gui.keyboard import KeyboardLayout
from pong3d.gui.keyboard import get_keyboard_layout

__all__ = [
    "FixedStepDriver",
    "KeyboardController",
    "KeyboardLayout",
    "KEYBOARD_LAYOUTS",
    "get_keyboard_layout",
]
