"""
animation_player.py
-------------------
Frame-sequence playback for live sprites.

Responsibilities
----------------
- Keep named clips (frame index lists) registered on one live sprite.
- Advance the current clip at a fixed frame rate, looping if asked.
- Fire a completion callback when a non-repeating clip reaches its end.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from sgc.core.debug.debug_logger import DebugLogger


@dataclass
class AnimationClip:
    """A named run of spritesheet frames."""
    name: str
    frames: List[int]
    fps: float


class AnimationPlayer:
    """Plays one AnimationClip at a time."""

    __slots__ = (
        '_clips',       # {name: AnimationClip}
        'current',      # Clip being played (kept after it finishes)
        'repeat',       # Loop flag for the current clip
        'is_playing',   # False once a non-repeating clip completes
        '_index',       # Position inside current.frames
        '_timer',       # Time spent on the current frame
        'on_complete',  # Called when a non-repeating clip ends
    )

    def __init__(self, on_complete: Optional[Callable[[], None]] = None):
        self._clips = {}
        self.current = None
        self.repeat = False
        self.is_playing = False
        self._index = 0
        self._timer = 0.0
        self.on_complete = on_complete

    # ===========================================================
    # Clip Registry
    # ===========================================================

    def add(self, name: str, frames: List[int], fps: float) -> AnimationClip:
        clip = AnimationClip(name, list(frames), fps)
        self._clips[name] = clip
        DebugLogger.trace(f"Clip '{name}' added ({len(clip.frames)} frames)", category="animation")
        return clip

    def get(self, name: str) -> Optional[AnimationClip]:
        return self._clips.get(name)

    # ===========================================================
    # Playback Controls
    # ===========================================================

    def play(self, name: str, fps: Optional[float] = None, repeat: bool = False) -> bool:
        """
        Start a clip from its first frame.

        Returns:
            bool: False if no clip with that name exists
        """
        clip = self._clips.get(name)
        if clip is None or not clip.frames:
            return False

        if fps is not None:
            clip.fps = fps

        self.current = clip
        self.repeat = bool(repeat)
        self.is_playing = True
        self._index = 0
        self._timer = 0.0
        DebugLogger.state(f"Animation '{name}' started (repeat={self.repeat})", category="animation")
        return True

    def stop(self):
        self.is_playing = False
        self._index = 0
        self._timer = 0.0

    @property
    def frame(self) -> Optional[int]:
        """Spritesheet frame index to show, or None when nothing was played."""
        if self.current is None:
            return None
        return self.current.frames[self._index]

    # ===========================================================
    # Per-frame Update
    # ===========================================================

    def update(self, dt: float) -> Optional[int]:
        """
        Advance playback by dt seconds.

        Returns:
            int or None: Frame index to display while playing
        """
        if not self.is_playing:
            return None

        clip = self.current
        frame_time = 1.0 / clip.fps if clip.fps > 0 else float("inf")
        self._timer += dt

        while self._timer >= frame_time and self.is_playing:
            self._timer -= frame_time
            if self._index + 1 < len(clip.frames):
                self._index += 1
            elif self.repeat:
                self._index = 0
            else:
                self.is_playing = False
                DebugLogger.state(f"Animation '{clip.name}' complete", category="animation")
                if self.on_complete is not None:
                    self.on_complete()
                return None

        return clip.frames[self._index]
