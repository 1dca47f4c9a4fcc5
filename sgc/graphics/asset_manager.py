"""
asset_manager.py
----------------
Loads and caches named images, optionally sliced into frames.

Responsibilities:
- Load image files (or accept ready-made surfaces) under a name
- Slice spritesheets into equally sized frames, row by row
- Provide placeholder frames for images that were never loaded
"""

import os

import pygame

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.runtime.game_settings import SpriteDefaults


MISSING_KEY = "__missing"
DEFAULT_KEY = "__default"


class AssetManager:
    """Named image store shared by every live sprite of an engine."""

    def __init__(self, base_dir=None):
        """
        Args:
            base_dir: Directory image file names are resolved against
        """
        self.base_dir = base_dir
        self._frames = {}
        self._placeholders = {}

    # ===========================================================
    # Loading
    # ===========================================================

    def load(self, file_name, frame_width=None, frame_height=None) -> bool:
        """
        Load an image file under its own file name.

        Returns:
            bool: False if the file could not be loaded
        """
        path = file_name
        if self.base_dir and not os.path.isabs(file_name):
            path = os.path.join(self.base_dir, file_name)

        try:
            surface = pygame.image.load(path)
        except (pygame.error, FileNotFoundError) as e:
            DebugLogger.warn(f"Unable to load file {file_name}: {e}", category="loading")
            return False

        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()

        self.add_surface(file_name, surface, frame_width, frame_height)
        return True

    def add_surface(self, name, surface, frame_width=None, frame_height=None):
        """Register an existing surface, slicing it when a frame size is given."""
        if frame_width and frame_height:
            frames = self._slice(surface, int(frame_width), int(frame_height))
        else:
            frames = [surface]

        self._frames[name] = frames
        DebugLogger.system(f"Image '{name}' ready ({len(frames)} frame(s))", category="loading")

    @staticmethod
    def _slice(surface, frame_width, frame_height):
        """Cut a spritesheet into frames, left to right then top to bottom."""
        columns = surface.get_width() // frame_width
        rows = surface.get_height() // frame_height
        frames = []
        for row in range(rows):
            for col in range(columns):
                rect = pygame.Rect(col * frame_width, row * frame_height, frame_width, frame_height)
                frames.append(surface.subsurface(rect))

        if not frames:
            DebugLogger.warn(
                f"Frame size {frame_width}x{frame_height} larger than image; using whole image",
                category="loading"
            )
            frames.append(surface)
        return frames

    # ===========================================================
    # Queries
    # ===========================================================

    def has(self, name) -> bool:
        return name in self._frames

    def frames(self, name):
        """Return the frame list for a name, or None if never loaded."""
        return self._frames.get(name)

    def placeholder(self, key=MISSING_KEY):
        """
        Frames used when no image is available.

        MISSING_KEY gives a visible magenta square, DEFAULT_KEY a transparent one.
        """
        if key not in self._placeholders:
            surface = pygame.Surface(SpriteDefaults.PLACEHOLDER_SIZE, pygame.SRCALPHA)
            if key == MISSING_KEY:
                surface.fill(SpriteDefaults.PLACEHOLDER_COLOR)
            self._placeholders[key] = [surface]
        return self._placeholders[key]
