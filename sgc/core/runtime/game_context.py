"""
game_context.py
---------------
The Game: global configuration, sprite registry and lifecycle.

Responsibilities:
- Hold display size, score, background and preloaded images
- Keep the ordered sprite registry and its live-sprite counterpart
- Boot the engine and materialize every sprite created before boot
- Run one frame: sprite updates, collision dispatch, engine step
- Move between the Booting, Playing and Terminal phases

A Game is explicitly constructed and handed to each Sprite:

    game = Game({"display": {"width": 640, "height": 480}})
    ball = Ball(game)
    game.run()
"""

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.errors import MissingAssetError, MisuseError, report_error
from sgc.core.runtime.game_settings import Animation, Text
from sgc.core.runtime.game_state import GamePhase
from sgc.core.runtime.main_loop import MainLoop
from sgc.core.services.config_manager import GameConfig
from sgc.core.services.pygame_engine import PygameEngine
from sgc.entities.materializer import owner_of
from sgc.entities.sprite_registry import SpriteRegistry
from sgc.systems.collision.collision_manager import dispatch_collision
from sgc.ui.text_area import TextArea


class Game:
    """Controller for one sgc game."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config=None, engine=None):
        """
        Args:
            config: GameConfig, mapping or config file name (json/yaml/py)
            engine: Engine to run on; a PygameEngine window by default
        """
        self.config = GameConfig.load(config)
        if engine is None:
            engine = PygameEngine(self.config.display_width,
                                  self.config.display_height,
                                  self.config.caption)
        self.engine = engine

        self.show_score = self.config.show_score
        self._score = 0
        self._scoreboard = None

        self._images = []
        self._background = None
        self._end_message = None

        self._registry = SpriteRegistry()
        self._materializing = False
        self.phase = GamePhase.BOOTING

        DebugLogger.init_entry("Game")
        DebugLogger.init_sub(f"Display {self.display_width}x{self.display_height}")

    @property
    def display_width(self):
        return self.config.display_width

    @property
    def display_height(self):
        return self.config.display_height

    @property
    def frame_rate(self):
        """Playback speed for animations, in frames per second."""
        return Animation.FRAME_RATE

    @property
    def last_key_code(self):
        """Code of the most recently pressed key, or None."""
        return self.engine.input.last_key_code

    @property
    def sprites(self):
        """Registered sprites in creation order."""
        return self._registry.sprites

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def boot(self):
        """Boot the engine, load preloaded images and start play."""
        if self.engine.booted:
            return
        self.engine.boot(self._images)
        if self.phase is GamePhase.TERMINAL:
            self.engine.show_game_over(self._end_message)
            return
        self._start_play()

    def reset(self):
        """Start play over, removing every existing sprite."""
        if self._materializing:
            report_error(self.engine, MisuseError("reset() cannot be called while sprites are being created"))
            return

        for sprite in self._registry.snapshot():
            sprite._detach()
        self._registry.clear()
        self.engine.input.last_key_code = None
        self._scoreboard = None

        if not self.engine.booted:
            self.phase = GamePhase.BOOTING
            DebugLogger.state("Reset before boot; waiting for boot")
            return

        self.engine.clear_world()
        self._start_play()

    def end(self, message=None):
        """
        Terminate this game.

        Args:
            message: End-of-game message, converted with str(); "Game Over!" if omitted
        """
        text = Text.GAME_OVER_MESSAGE if message in (None, "") else str(message)
        if self.show_score:
            text += Text.GAME_OVER_SCORE.format(score=self.score)

        self.phase = GamePhase.TERMINAL
        self._end_message = text
        self._scoreboard = None
        if self.engine.booted:
            self.engine.show_game_over(text)
        DebugLogger.state("Phase -> TERMINAL")

    def _start_play(self):
        """Materialize cached sprites and rebuild scoreboard and background."""
        self.phase = GamePhase.PLAYING
        DebugLogger.state("Phase -> PLAYING")

        self._materializing = True
        try:
            for sprite in self._registry.snapshot():
                sprite._materialize()
        finally:
            self._materializing = False

        if self.show_score:
            self._scoreboard = TextArea(*Text.SCOREBOARD_POS)
            self._refresh_scoreboard()

        if self._background is not None:
            self.set_background(*self._background)

    def run(self):
        """Boot and run the frame loop until the window is closed."""
        MainLoop(self).run()

    # ===========================================================
    # Frame Update
    # ===========================================================

    def tick(self, dt):
        """
        Run one frame.

        Order:
            1. Every registered sprite's update (materializing new ones)
            2. Pairwise collision detection and handler dispatch
            3. Physics, animation and background step
            4. Destruction of live sprites removed this frame
        """
        if self.phase is GamePhase.PLAYING:
            self._update_sprites()
            if self.phase is GamePhase.PLAYING:
                self.engine.collide(self._registry.live_snapshot(), self._on_collision)

        self.engine.step(dt)
        self.engine.purge_destroyed()
        self.engine.input.end_frame()

    def _update_sprites(self):
        for sprite in self._registry.snapshot():
            if not self._registry.contains(sprite):
                continue
            sprite._update()
            if self.phase is not GamePhase.PLAYING:
                break

    @staticmethod
    def _on_collision(live_a, live_b):
        return dispatch_collision(owner_of(live_a), owner_of(live_b))

    # ===========================================================
    # Sprite Registry
    # ===========================================================

    def register_sprite(self, sprite):
        """Add a sprite; called by Sprite.__init__."""
        self._registry.register(sprite)

    def _attach_live(self, sprite):
        self._registry.attach_live(sprite._live)

    def remove_sprite(self, sprite):
        """Remove a sprite from the game; unknown sprites are ignored."""
        live = sprite._live
        if not self._registry.remove(sprite, live):
            return
        sprite._detach()

    def is_active_sprite(self, sprite) -> bool:
        return self._registry.contains(sprite)

    def get_sprites_overlapping(self, x, y, width, height, sprite_class=None):
        """
        Sprites strictly overlapping a rectangle; touching edges do not count.

        Args:
            sprite_class: Only return instances of this class
        """
        return self._registry.overlapping(x, y, width, height, sprite_class)

    # ===========================================================
    # Assets & Background
    # ===========================================================

    def preload_image(self, file_name, width=None, height=None):
        """
        Register an image for loading at boot.

        Args:
            file_name: Image path, also used as the image's name
            width: Frame width, if the image is a spritesheet
            height: Frame height, if the image is a spritesheet
        """
        self._images.append((file_name, width, height))
        if self.engine.booted:
            self.engine.preload(file_name, width, height)

    def set_background(self, image, horizontal_scroll=0, vertical_scroll=0):
        """
        Show an image behind all sprites, optionally scrolling.

        Args:
            horizontal_scroll: Pixels per second
            vertical_scroll: Pixels per second
        """
        self._background = (image, horizontal_scroll, vertical_scroll)
        if not self.engine.booted:
            return
        if not self.engine.set_background(image, horizontal_scroll, vertical_scroll):
            report_error(self.engine, MissingAssetError("The background", image))

    # ===========================================================
    # Score, Time & Text
    # ===========================================================

    @property
    def score(self):
        return self._score

    @score.setter
    def score(self, value):
        self._score = value
        self._refresh_scoreboard()

    def _refresh_scoreboard(self):
        if self._scoreboard is not None:
            self._scoreboard.text = f" Score: {self._score} "

    @property
    def scoreboard(self):
        return self._scoreboard

    def get_time(self):
        """Seconds elapsed since the game booted; 0 before boot."""
        if not self.engine.booted:
            return 0
        return self.engine.elapsed_seconds()

    def get_mouse_x(self):
        return self.engine.input.mouse_x

    def get_mouse_y(self):
        return self.engine.input.mouse_y

    def create_text_area(self, x, y):
        """Create an empty text area with its top-left corner at (x, y)."""
        return self.engine.add_text(x, y)

    def write_to_text_area(self, text_area, message):
        """Replace the content of a text area made by create_text_area()."""
        if not isinstance(text_area, TextArea):
            report_error(self.engine, MisuseError(
                "write_to_text_area() needs a text area made by create_text_area()"))
            return
        text_area.text = Text.MARGIN + str(message) + Text.MARGIN

    def __repr__(self) -> str:
        return f"<Game {self.phase.name} sprites={len(self._registry)}>"
