"""
collision_manager.py
--------------------
Pairwise collision detection between live sprites with handler-driven
response.

Responsibilities
----------------
- Detect overlapping pairs among live sprites (strict AABB overlap).
- Ask the owning facade sprites whether they want the default bounce.
- Apply the default elastic bounce only when no handler vetoes it.

Physics provides the default; a sprite's handle_collision() may veto it
for a single pair by returning a falsy value.
"""

from sgc.core.debug.debug_logger import DebugLogger


# ===========================================================
# Geometry
# ===========================================================

def aabb_overlap(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """
    Strict axis-aligned overlap test.

    Rectangles that only touch along an edge or corner do not overlap.
    """
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def live_overlap(a, b) -> bool:
    return aabb_overlap(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)


# ===========================================================
# Handler Dispatch
# ===========================================================

def _same_handler(first, second) -> bool:
    """True when two bound handlers wrap the same function."""
    return getattr(first, "__func__", first) is getattr(second, "__func__", second)


def dispatch_collision(sprite_a, sprite_b) -> bool:
    """
    Call the collision handlers of a colliding pair.

    A's handler is called with B; B's handler is called with A unless it
    is the very same function (two sprites of one class share a single
    call per pair). B is skipped if A's handler removed it.

    Returns:
        bool: True if the default bounce should happen
    """
    wants_bounce = True

    handler_a = sprite_a.handle_collision
    if handler_a is not None:
        wants_bounce = bool(handler_a(sprite_b)) and wants_bounce

    # A's handler may have removed B
    if sprite_b.is_removed:
        return wants_bounce

    handler_b = sprite_b.handle_collision
    if handler_b is not None and not (handler_a is not None and _same_handler(handler_a, handler_b)):
        wants_bounce = bool(handler_b(sprite_a)) and wants_bounce

    return wants_bounce


# ===========================================================
# Collision Manager
# ===========================================================

class CollisionManager:
    """Detects collisions but lets the sprites decide what happens."""

    def __init__(self, physics):
        self.physics = physics
        self._collisions = []
        DebugLogger.init_entry("CollisionManager")

    def collide(self, lives, process_callback=None):
        """
        Check every pair of live sprites once.

        Args:
            lives: Sequence of LiveSprite, in registry order
            process_callback: fn(live_a, live_b) -> bool; False skips the bounce

        Returns:
            list: (live_a, live_b) pairs that overlapped this frame
        """
        self._collisions.clear()
        # Snapshot: handlers may add or remove sprites while we iterate
        lives = tuple(lives)
        count = len(lives)

        for i in range(count):
            a = lives[i]
            for j in range(i + 1, count):
                # Re-check a each time; a handler may have removed it
                if a.pending_destroy:
                    break
                b = lives[j]
                if b.pending_destroy or not live_overlap(a, b):
                    continue

                self._collisions.append((a, b))
                bounce = True if process_callback is None else process_callback(a, b)
                if bounce and not (a.pending_destroy or b.pending_destroy):
                    self.physics.separate(a, b)

        if self._collisions:
            DebugLogger.trace(f"{len(self._collisions)} collision(s) this frame", category="collision")
        return list(self._collisions)
