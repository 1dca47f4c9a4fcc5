"""
sprite_cache.py
---------------
Facade-held property store for a Sprite.

Every write lands here. Before materialization the cache is the only
state; afterwards it stays authoritative for angle and speed until the
next velocity recomputation, because a velocity vector cannot give back
the (angle, speed) pair it was built from once it is zero or has been
changed by a bounce.

Per-property state for angle and speed:

    UNMATERIALIZED  no live sprite; the cached value is read
    DIRTY           live sprite exists, value written since last sync; cached value is read
    CLEAN           live sprite exists, synced; value is derived from the live velocity
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class SyncState(Enum):
    """Which side is authoritative for a velocity-backed property."""
    UNMATERIALIZED = "unmaterialized"
    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True)
class AnimationDefinition:
    """Inclusive spritesheet frame range under a name."""
    name: str
    first_frame: int
    last_frame: int

    @property
    def frames(self) -> List[int]:
        return list(range(self.first_frame, self.last_frame + 1))


@dataclass(frozen=True)
class AnimationRequest:
    """Most recent play_animation() call."""
    name: str
    repeat: bool = False


class SpriteCache:
    """Last-assigned facade values plus dirty flags for angle and speed."""

    __slots__ = ("values", "angle_changed", "speed_changed", "animations", "current_animation")

    VELOCITY_FLAGS = {"angle": "angle_changed", "speed": "speed_changed"}

    def __init__(self):
        self.values = {}
        self.angle_changed = False
        self.speed_changed = False
        self.animations: List[AnimationDefinition] = []
        self.current_animation: Optional[AnimationRequest] = None

    # ===========================================================
    # Plain Values
    # ===========================================================

    def get(self, name, default=0):
        value = self.values.get(name)
        return default if value is None else value

    def set(self, name, value):
        self.values[name] = value

    def has(self, name) -> bool:
        return self.values.get(name) is not None

    # ===========================================================
    # Velocity-backed Values
    # ===========================================================

    def set_angle(self, value):
        self.values["angle"] = value
        self.angle_changed = True

    def set_speed(self, value):
        self.values["speed"] = value
        self.speed_changed = True

    @property
    def velocity_dirty(self) -> bool:
        return self.angle_changed or self.speed_changed

    def clear_velocity_flags(self):
        self.angle_changed = False
        self.speed_changed = False

    def sync_state(self, name, materialized: bool) -> SyncState:
        """
        Args:
            name: "angle" or "speed"
            materialized: Whether the sprite currently has a live representation
        """
        if not materialized:
            return SyncState.UNMATERIALIZED
        if getattr(self, self.VELOCITY_FLAGS[name]):
            return SyncState.DIRTY
        return SyncState.CLEAN

    # ===========================================================
    # Animations
    # ===========================================================

    def define_animation(self, name, first_frame, last_frame) -> AnimationDefinition:
        """Add a definition, replacing an earlier one with the same name."""
        definition = AnimationDefinition(name, int(first_frame), int(last_frame))
        for index, existing in enumerate(self.animations):
            if existing.name == name:
                self.animations[index] = definition
                return definition
        self.animations.append(definition)
        return definition

    def find_animation(self, name) -> Optional[AnimationDefinition]:
        for definition in self.animations:
            if definition.name == name:
                return definition
        return None
