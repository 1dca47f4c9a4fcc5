"""
background_manager.py
---------------------
Tiled, optionally auto-scrolling game background.

Provides:
- A single background scroller filling the display
- Horizontal/vertical auto-scroll in pixels per second
- Seamless tiling of images smaller than the display
"""

import math

import pygame

from sgc.core.debug.debug_logger import DebugLogger


class BackgroundScroller:
    """
    Background image tiled over the display.

    Positive scroll speeds move the image right / down.
    """

    __slots__ = (
        "image_name",
        "image",
        "scroll_speed",
        "scroll_offset",
        "screen_width",
        "screen_height",
        "destroyed",
    )

    def __init__(self, image_name, image, scroll_speed, screen_size):
        """
        Args:
            image_name: Name the image was preloaded under
            image: pygame.Surface to tile
            scroll_speed: (x, y) pixels per second
            screen_size: (width, height) of the display
        """
        self.image_name = image_name
        self.image = image
        self.scroll_speed = pygame.Vector2(scroll_speed)
        self.scroll_offset = pygame.Vector2(0, 0)
        self.screen_width, self.screen_height = screen_size
        self.destroyed = False

        DebugLogger.state(
            f"Background '{image_name}' scroll=({self.scroll_speed.x}, {self.scroll_speed.y})",
            category="background"
        )

    @property
    def is_scrolling(self) -> bool:
        return self.scroll_speed.length_squared() > 0

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt):
        """Advance auto-scroll, wrapped to the image size."""
        if not self.is_scrolling:
            return
        width, height = self.image.get_size()
        self.scroll_offset += self.scroll_speed * dt
        self.scroll_offset.x %= max(width, 1)
        self.scroll_offset.y %= max(height, 1)

    # ===========================================================
    # Render
    # ===========================================================

    def render(self, surface):
        """Draw the tiled background to surface."""
        width, height = self.image.get_size()
        if width == 0 or height == 0:
            return

        tiles_x = (self.screen_width // width) + 2
        tiles_y = (self.screen_height // height) + 2

        start_x = math.floor(self.scroll_offset.x) - width
        start_y = math.floor(self.scroll_offset.y) - height

        for tx in range(tiles_x):
            for ty in range(tiles_y):
                surface.blit(self.image, (start_x + tx * width, start_y + ty * height))

    def destroy(self):
        self.destroyed = True
        DebugLogger.state(f"Background '{self.image_name}' destroyed", category="background")
