"""
sprite_registry.py
------------------
Ordered store of a game's sprites and their live counterparts.

Responsibilities
----------------
- Keep sprites in creation order; removal is explicit only.
- Keep a parallel list of live sprites for collision-pair enumeration.
- Answer rectangle overlap queries against facade positions.
"""

from sgc.core.debug.debug_logger import DebugLogger
from sgc.systems.collision.collision_manager import aabb_overlap


class SpriteRegistry:
    """Sprites registered with one Game."""

    def __init__(self):
        self._sprites = []
        self._lives = []
        self._ids = set()

    # ===========================================================
    # Registration
    # ===========================================================

    def register(self, sprite):
        if id(sprite) in self._ids:
            return
        self._sprites.append(sprite)
        self._ids.add(id(sprite))
        DebugLogger.trace(f"Registered {sprite.name} ({len(self._sprites)} sprites)", category="sprite")

    def attach_live(self, live):
        """Add a newly materialized live sprite to the collision list."""
        self._lives.append(live)

    def remove(self, sprite, live=None) -> bool:
        """
        Remove a sprite and its live sprite.

        Returns:
            bool: False if the sprite was not registered
        """
        if id(sprite) not in self._ids:
            return False

        self._sprites.remove(sprite)
        self._ids.discard(id(sprite))
        if live is not None and live in self._lives:
            self._lives.remove(live)

        DebugLogger.trace(f"Removed {sprite.name} ({len(self._sprites)} sprites)", category="sprite")
        return True

    def clear(self):
        self._sprites.clear()
        self._lives.clear()
        self._ids.clear()

    # ===========================================================
    # Queries
    # ===========================================================

    def contains(self, sprite) -> bool:
        return id(sprite) in self._ids

    def snapshot(self):
        """Sprites as of now; safe to iterate while sprites come and go."""
        return tuple(self._sprites)

    def live_snapshot(self):
        return tuple(self._lives)

    @property
    def sprites(self):
        return list(self._sprites)

    def __len__(self):
        return len(self._sprites)

    def overlapping(self, x, y, width, height, sprite_class=None):
        """
        Sprites whose bounds strictly overlap a rectangle.

        Args:
            sprite_class: If given, only instances of this class are returned
        """
        results = []
        for sprite in self._sprites:
            if sprite_class is not None and not isinstance(sprite, sprite_class):
                continue
            if aabb_overlap(sprite.x, sprite.y, sprite.width, sprite.height, x, y, width, height):
                results.append(sprite)
        return results
