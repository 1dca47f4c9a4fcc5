"""
input_manager.py
----------------
Event-driven keyboard and mouse state.

Provides:
- Held-key queries by pygame key code
- The most recent key code, shared by per-frame logic and key events
- Mouse position and left-button edge detection (pressed, released)

State is built only from the events handed to handle_event(), so the
manager works identically with a real window or with synthetic events.
"""

import pygame

from sgc.core.debug.debug_logger import DebugLogger


LEFT_MOUSE_BUTTON = 1


class InputManager:
    """
    Keyboard and mouse state for one game.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event)
        ...
        if input_manager.is_key_down(pygame.K_LEFT):
            ...
        input_manager.end_frame()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        DebugLogger.init_entry("InputManager")
        self.reset()

    def reset(self):
        """Forget all key and mouse state."""
        self._held_keys = set()
        self.last_key_code = None
        self.mouse_pos = (0, 0)
        self.mouse_down = False
        self.mouse_pressed = False
        self.mouse_released = False

    # ===========================================================
    # Event Intake
    # ===========================================================

    def handle_event(self, event):
        """
        Update state from a single pygame event.

        Returns:
            bool: True if the event was an input event
        """
        if event.type == pygame.KEYDOWN:
            self._held_keys.add(event.key)
            self.last_key_code = event.key
            DebugLogger.trace(f"Key down: {event.key}", category="input")
            return True

        if event.type == pygame.KEYUP:
            self._held_keys.discard(event.key)
            return True

        if event.type == pygame.MOUSEMOTION:
            self.mouse_pos = tuple(event.pos)
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_MOUSE_BUTTON:
            self.mouse_pos = tuple(event.pos)
            if not self.mouse_down:
                self.mouse_pressed = True
            self.mouse_down = True
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_MOUSE_BUTTON:
            self.mouse_pos = tuple(event.pos)
            if self.mouse_down:
                self.mouse_released = True
            self.mouse_down = False
            return True

        return False

    def end_frame(self):
        """Clear one-frame edges after every sprite has seen them."""
        self.mouse_pressed = False
        self.mouse_released = False

    # ===========================================================
    # Queries
    # ===========================================================

    def is_key_down(self, key_code) -> bool:
        """Check if a key is currently held."""
        if key_code is None:
            return False
        return key_code in self._held_keys

    @property
    def mouse_x(self):
        return self.mouse_pos[0]

    @property
    def mouse_y(self):
        return self.mouse_pos[1]
