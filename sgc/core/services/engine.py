"""
engine.py
---------
Boundary between the sgc facade and the machinery that runs a game.

Engine owns everything that exists only after boot: loaded images, live
sprites, the physics world, collision detection, input state, the game
clock, the background and on-screen text. It never needs a window, so
subclasses only add how frames are shown and how alerts reach the player
(PygameEngine for real games, a headless engine in tests).
"""

from abc import ABC, abstractmethod

import pygame

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.errors import AssetLoadError, report_error
from sgc.core.runtime.game_settings import Layers, Text
from sgc.core.services.input_manager import InputManager
from sgc.graphics.asset_manager import AssetManager, DEFAULT_KEY, MISSING_KEY
from sgc.graphics.background_manager import BackgroundScroller
from sgc.graphics.live_sprite import LiveSprite
from sgc.systems.collision.collision_manager import CollisionManager
from sgc.systems.physics.arcade_physics import ArcadePhysics
from sgc.ui.text_area import TextArea


class Engine(ABC):
    """Window-independent game engine services."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, width, height, asset_dir=None):
        """
        Args:
            width: Display width in pixels
            height: Display height in pixels
            asset_dir: Directory image file names are resolved against
        """
        self.width = width
        self.height = height

        self.assets = AssetManager(asset_dir)
        self.input = InputManager()
        self.physics = ArcadePhysics()
        self.collisions = CollisionManager(self.physics)

        self.sprites = pygame.sprite.LayeredUpdates()
        self.texts = []
        self.background = None
        self.game_over_text = None

        self.booted = False
        self._elapsed = 0.0

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def boot(self, preloads):
        """
        Open the display and load every preloaded image.

        Args:
            preloads: Iterable of (file_name, frame_width, frame_height)
        """
        if self.booted:
            return

        DebugLogger.section("Booting Engine")
        self._open_display()
        for file_name, frame_width, frame_height in preloads:
            self.preload(file_name, frame_width, frame_height)

        self.booted = True
        self._elapsed = 0.0
        DebugLogger.init_entry(f"{type(self).__name__} booted")

    def preload(self, file_name, frame_width=None, frame_height=None) -> bool:
        if self.assets.has(file_name):
            return True
        if not self.assets.load(file_name, frame_width, frame_height):
            report_error(self, AssetLoadError(file_name))
            return False
        return True

    def clear_world(self):
        """Destroy every live sprite, text area and the background."""
        for live in self.sprites.sprites():
            live.pending_destroy = True
            live.kill()
        self.physics.clear()
        self.texts.clear()
        self.game_over_text = None
        self.remove_background()
        DebugLogger.state("World cleared")

    # ===========================================================
    # Live Sprites
    # ===========================================================

    def create_live_sprite(self, x, y, image) -> LiveSprite:
        """
        Create a drawable sprite for a named image.

        An unnamed image gets a transparent placeholder, an unknown one a
        magenta placeholder.
        """
        if image is None:
            frames, key = self.assets.placeholder(DEFAULT_KEY), DEFAULT_KEY
        else:
            frames = self.assets.frames(image)
            key = image
            if frames is None:
                frames, key = self.assets.placeholder(MISSING_KEY), MISSING_KEY

        live = LiveSprite(x, y, frames, key)
        self.sprites.add(live, layer=Layers.SPRITES)
        return live

    def load_texture(self, live, image) -> bool:
        """
        Show a different image on a live sprite.

        Returns:
            bool: False if the image was never loaded (placeholder shown)
        """
        frames = self.assets.frames(image) if image is not None else self.assets.placeholder(DEFAULT_KEY)
        if frames is None:
            live.load_texture(self.assets.placeholder(MISSING_KEY), MISSING_KEY)
            return False
        live.load_texture(frames, image if image is not None else DEFAULT_KEY)
        return True

    def enable_physics(self, live):
        self.physics.enable(live)

    def collide(self, lives, process_callback):
        return self.collisions.collide(lives, process_callback)

    def purge_destroyed(self):
        """Kill live sprites whose owners were removed during the frame."""
        for live in self.sprites.sprites():
            if live.pending_destroy:
                self.physics.disable(live)
                live.kill()

    # ===========================================================
    # Frame Step
    # ===========================================================

    def step(self, dt):
        """Advance physics, animations, background scroll and the clock."""
        if not self.booted:
            return
        self._elapsed += dt
        self.physics.step(dt)
        for live in self.sprites.sprites():
            if not live.pending_destroy:
                live.update_animation(dt)
        if self.background is not None:
            self.background.update(dt)

    def elapsed_seconds(self) -> float:
        return self._elapsed

    # ===========================================================
    # Background & Text
    # ===========================================================

    def set_background(self, image, horizontal_scroll=0, vertical_scroll=0) -> bool:
        """
        Replace the background scroller.

        Returns:
            bool: False if the image was never loaded (placeholder shown)
        """
        self.remove_background()
        frames = self.assets.frames(image)
        found = frames is not None
        if not found:
            frames = self.assets.placeholder(MISSING_KEY)

        self.background = BackgroundScroller(
            image, frames[0],
            (horizontal_scroll or 0, vertical_scroll or 0),
            (self.width, self.height)
        )
        return found

    def remove_background(self):
        if self.background is not None:
            self.background.destroy()
            self.background = None

    def add_text(self, x, y) -> TextArea:
        area = TextArea(x, y)
        self.texts.append(area)
        return area

    def show_game_over(self, message):
        """Clear the world and show the terminal message."""
        self.clear_world()
        self.game_over_text = TextArea(
            Text.GAME_OVER_X, self.height / 2 - 100,
            font_size=Text.GAME_OVER_FONT_SIZE, background=None, text=message
        )
        DebugLogger.state(f"Game over: {message.strip()!r}")

    # ===========================================================
    # Presentation (subclass responsibility)
    # ===========================================================

    @abstractmethod
    def _open_display(self):
        """Create whatever surface frames are drawn on."""

    @abstractmethod
    def alert(self, message):
        """Tell the player about a problem; may block until acknowledged."""

    @abstractmethod
    def render(self, scoreboard=None):
        """Draw the current frame."""

    def poll_events(self) -> bool:
        """
        Feed pending window events to the input manager.

        Returns:
            bool: False once the player asked to quit
        """
        return True

    def wait_frame(self, fps) -> float:
        """Wait for the next frame; returns its duration in seconds."""
        return 1.0 / fps

    def shutdown(self):
        DebugLogger.system(f"{type(self).__name__} shut down")
