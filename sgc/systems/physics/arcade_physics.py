"""
arcade_physics.py
-----------------
Minimal arcade physics for live sprites.

Provides:
- Angle/speed <-> velocity conversion between facade and screen space
- Velocity integration for enabled bodies
- Elastic separation of two overlapping bodies

Facade angles are degrees counter-clockwise from +x in [0, 360).
Screen space has y growing downward, so a live heading is measured
clockwise; conversion negates the angle and changes units.
"""

import math

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.runtime.game_settings import Physics


# ===========================================================
# Conversions
# ===========================================================

def normalize_degrees(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    angle = angle % 360.0
    # -1e-15 % 360.0 rounds to 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


def velocity_from_angle(angle: float, speed: float):
    """
    Facade (degrees CCW, speed) -> screen velocity (vx, vy).
    """
    radians_cw = math.radians(-angle)
    return speed * math.cos(radians_cw), speed * math.sin(radians_cw)


def angle_from_velocity(vx: float, vy: float) -> float:
    """Screen velocity -> facade angle. Undefined (0) for a zero vector."""
    return normalize_degrees(-math.degrees(math.atan2(vy, vx)))


def bearing(from_x, from_y, to_x, to_y):
    """
    Facade angle pointing from one screen point to another.

    Returns:
        float or None: None when both points coincide
    """
    dx = to_x - from_x
    dy = to_y - from_y
    if dx == 0 and dy == 0:
        return None
    return angle_from_velocity(dx, dy)


# ===========================================================
# Physics World
# ===========================================================

class ArcadePhysics:
    """Integrates velocities and resolves bounces for enabled live sprites."""

    def __init__(self):
        self.bodies = []

    def enable(self, live):
        """Give a live sprite a body with elastic bounce on both axes."""
        if live.physics_enabled:
            return
        live.physics_enabled = True
        live.bounce.update(Physics.BOUNCE, Physics.BOUNCE)
        self.bodies.append(live)

    def disable(self, live):
        if not live.physics_enabled:
            return
        live.physics_enabled = False
        if live in self.bodies:
            self.bodies.remove(live)

    def clear(self):
        for live in self.bodies:
            live.physics_enabled = False
        self.bodies.clear()

    def step(self, dt: float):
        """Move every body by velocity * dt."""
        for live in self.bodies:
            if live.pending_destroy:
                continue
            live.pos += live.velocity * dt

    # ===========================================================
    # Collision Response
    # ===========================================================

    def separate(self, a, b) -> bool:
        """
        Push two overlapping bodies apart along the axis of least
        penetration and exchange (or reflect) their velocity on that axis.

        Returns:
            bool: True if the bodies were moved
        """
        if a.immovable and b.immovable:
            return False

        overlap_x = min(a.right, b.right) - max(a.x, b.x)
        overlap_y = min(a.bottom, b.bottom) - max(a.y, b.y)
        if overlap_x <= 0 or overlap_y <= 0:
            return False

        axis, overlap = (0, overlap_x) if overlap_x < overlap_y else (1, overlap_y)
        # -1 when a sits before b on this axis
        direction = -1 if a.center[axis] < b.center[axis] else 1

        va = a.velocity[axis]
        vb = b.velocity[axis]

        if not a.immovable and not b.immovable:
            a.pos[axis] += direction * overlap / 2
            b.pos[axis] -= direction * overlap / 2
            a.velocity[axis] = vb * a.bounce[axis]
            b.velocity[axis] = va * b.bounce[axis]
        elif a.immovable:
            b.pos[axis] -= direction * overlap
            b.velocity[axis] = va - vb * b.bounce[axis]
        else:
            a.pos[axis] += direction * overlap
            a.velocity[axis] = vb - va * a.bounce[axis]

        DebugLogger.trace(f"Separated {a!r} / {b!r} on axis {'xy'[axis]}", category="collision")
        return True
