"""
live_sprite.py
--------------
Engine-native sprite backing a facade Sprite once the engine has booted.

Coordinate System
-----------------
- pos is the top-left corner, in float pixels, y growing downward
- velocity is in pixels per second in the same screen space, so a
  positive y component moves the sprite down
- rect is derived from pos and size each time it is read

A LiveSprite is never destroyed mid-frame: removal sets pending_destroy
and the engine kills it once the frame's collision dispatch is over.
"""

import pygame

from sgc.graphics.animation_player import AnimationPlayer


class LiveSprite(pygame.sprite.Sprite):
    """Drawable, physics-enabled object created by Engine.create_live_sprite()."""

    def __init__(self, x: float, y: float, frames, key: str):
        """
        Args:
            x: Left edge
            y: Top edge
            frames: Non-empty list of pygame.Surface frames
            key: Name of the image the frames came from
        """
        super().__init__()
        self.key = key
        self.frames = list(frames)
        self.frame = 0
        self.default_frame = 0

        self.pos = pygame.Vector2(x, y)
        self.size = pygame.Vector2(self.frames[0].get_size())

        # Arcade body
        self.physics_enabled = False
        self.velocity = pygame.Vector2(0, 0)
        self.bounce = pygame.Vector2(0, 0)
        self.immovable = False

        self.animations = AnimationPlayer()
        # Back-references for collision callbacks
        self.data = {}
        self.pending_destroy = False

        # (frame, size) of the last scaled frame, and that surface
        self._scaled_key = None
        self._scaled = None

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value):
        self.pos.y = value

    @property
    def width(self) -> float:
        return self.size.x

    @width.setter
    def width(self, value):
        self.size.x = value

    @property
    def height(self) -> float:
        return self.size.y

    @height.setter
    def height(self, value):
        self.size.y = value

    @property
    def right(self) -> float:
        return self.pos.x + self.size.x

    @property
    def bottom(self) -> float:
        return self.pos.y + self.size.y

    @property
    def center(self):
        return self.pos + self.size / 2

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.pos.x), round(self.pos.y),
                           max(int(round(self.size.x)), 0), max(int(round(self.size.y)), 0))

    def hit_test(self, px: float, py: float) -> bool:
        """Check if a point lies inside this sprite's bounds."""
        return self.pos.x <= px < self.right and self.pos.y <= py < self.bottom

    # ===========================================================
    # Motion
    # ===========================================================

    @property
    def speed(self) -> float:
        return self.velocity.length()

    # ===========================================================
    # Frames & Textures
    # ===========================================================

    def set_frame(self, index: int):
        """Show a frame, clamped to the frames available."""
        self.frame = max(0, min(int(index), len(self.frames) - 1))

    def load_texture(self, frames, key: str):
        """Swap in new frames; size follows the new image."""
        self.frames = list(frames)
        self.key = key
        self.frame = 0
        self.size.update(self.frames[0].get_size())
        self._scaled_key = None
        self._scaled = None

    def update_animation(self, dt: float):
        frame = self.animations.update(dt)
        if frame is not None:
            self.set_frame(frame)

    @property
    def image(self) -> pygame.Surface:
        """Current frame scaled to the sprite's size."""
        surface = self.frames[self.frame]
        size = self.rect.size
        if surface.get_size() == size:
            return surface

        key = (self.frame, size)
        if key != self._scaled_key:
            self._scaled = pygame.transform.scale(surface, size)
            self._scaled_key = key
        return self._scaled

    def __repr__(self) -> str:
        return (
            f"<LiveSprite key={self.key} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"vel=({self.velocity.x:.1f}, {self.velocity.y:.1f})>"
        )
