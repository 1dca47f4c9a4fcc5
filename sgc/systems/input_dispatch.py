"""
input_dispatch.py
-----------------
Per-frame delivery of keyboard, mouse and boundary events to sprites.

A sprite opts into an event by defining the matching handler method;
the base Sprite sets every handler to None, so presence is a plain
None check.
"""

import string

import pygame


# Handler attribute -> key that must be held for it to fire
KEY_HANDLERS = (
    ("handle_left_arrow_key", pygame.K_LEFT),
    ("handle_right_arrow_key", pygame.K_RIGHT),
    ("handle_up_arrow_key", pygame.K_UP),
    ("handle_down_arrow_key", pygame.K_DOWN),
    ("handle_spacebar", pygame.K_SPACE),
    ("handle_esc_key", pygame.K_ESCAPE),
    ("handle_enter_key", pygame.K_RETURN),
)

ALPHANUMERIC = frozenset(string.ascii_uppercase + string.digits)


def key_char(key_code):
    """
    Capital letter or numeral for a key code, or None for any other key.
    """
    if key_code is None or key_code < 0:
        return None
    try:
        char = chr(key_code).upper()
    except (ValueError, OverflowError):
        return None
    return char if char in ALPHANUMERIC else None


def dispatch_input(sprite, input_manager, display_width, display_height):
    """
    Fire every input-driven handler the sprite defines.

    Stops as soon as a handler removes the sprite.

    Args:
        sprite: Facade Sprite being updated
        input_manager: InputManager holding this frame's state
        display_width: Right boundary for boundary contact
        display_height: Bottom boundary for boundary contact
    """
    for handler_name, key_code in KEY_HANDLERS:
        handler = getattr(sprite, handler_name)
        if handler is not None and input_manager.is_key_down(key_code):
            handler()
            if sprite.is_removed:
                return

    if sprite.handle_alpha_numeric_keys is not None:
        last_key = input_manager.last_key_code
        if input_manager.is_key_down(last_key):
            char = key_char(last_key)
            if char is not None:
                sprite.handle_alpha_numeric_keys(char)
                if sprite.is_removed:
                    return

    if sprite.contains_point(input_manager.mouse_x, input_manager.mouse_y):
        mouse_handlers = []
        if input_manager.mouse_pressed:
            mouse_handlers.append(sprite.handle_mouse_left_button_down)
        if input_manager.mouse_released:
            mouse_handlers += [sprite.handle_mouse_left_button_up, sprite.handle_mouse_click]

        for handler in mouse_handlers:
            if handler is not None:
                handler()
                if sprite.is_removed:
                    return

    if sprite.handle_boundary_contact is not None and (
            sprite.x < 0 or sprite.y < 0 or
            sprite.x > display_width or sprite.y > display_height):
        sprite.handle_boundary_contact()
