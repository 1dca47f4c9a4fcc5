"""
sprite.py
---------
A simple game object with plain properties.

Sprite wraps an engine-native LiveSprite, physics body and animations
behind x, y, width, height, angle, speed and image. Everything can be
set before the game has booted; values are cached and applied when the
live sprite is created.

Handlers
--------
Subclasses opt into events by defining methods with these names. The
base class sets each to None, so an absent handler costs one None check.

    handle_left_arrow_key()          left arrow held
    handle_right_arrow_key()         right arrow held
    handle_up_arrow_key()            up arrow held
    handle_down_arrow_key()          down arrow held
    handle_spacebar()                spacebar held
    handle_esc_key()                 Esc held
    handle_enter_key()               Enter held
    handle_alpha_numeric_keys(char)  letter/numeral held ("A".."Z", "0".."9")
    handle_mouse_left_button_down()  left button pressed over this sprite
    handle_mouse_left_button_up()    left button released over this sprite
    handle_mouse_click()             left button released over this sprite
    handle_boundary_contact()        position outside the display
    handle_first_game_loop()         first frame this sprite is active (once)
    handle_game_loop()               every frame
    handle_animation_end()           a non-repeating animation finished
    handle_collision(other) -> bool  touching another sprite; return True to bounce

Example:
    class Ball(Sprite):
        def handle_collision(self, other):
            game.score += 1
            return True
"""

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.errors import MissingAssetError, MisuseError, report_error
from sgc.core.runtime.game_settings import SpriteDefaults
from sgc.entities.materializer import materialize, rest_on_default_frame
from sgc.entities.sprite_cache import AnimationRequest, SpriteCache, SyncState
from sgc.systems.input_dispatch import dispatch_input
from sgc.systems.physics.arcade_physics import angle_from_velocity, bearing, velocity_from_angle


class Sprite:
    """A simple computer game object."""

    # ===================================================================
    # Optional Handlers
    # ===================================================================

    handle_left_arrow_key = None
    handle_right_arrow_key = None
    handle_up_arrow_key = None
    handle_down_arrow_key = None
    handle_spacebar = None
    handle_esc_key = None
    handle_enter_key = None
    handle_alpha_numeric_keys = None
    handle_mouse_left_button_down = None
    handle_mouse_left_button_up = None
    handle_mouse_click = None
    handle_boundary_contact = None
    handle_first_game_loop = None
    handle_game_loop = None
    handle_animation_end = None
    handle_collision = None

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, game):
        """
        Create a sprite and add it to a game.

        Args:
            game: The Game this sprite belongs to
        """
        self.game = game
        self.name = SpriteDefaults.NAME
        self.accelerate_on_bounce = True

        self.cache = SpriteCache()
        self._live = None
        self._removed = False

        game.register_sprite(self)

    # ===================================================================
    # Position & Size
    # ===================================================================

    @property
    def x(self):
        """Horizontal display coordinate of the left edge, in pixels."""
        if self._live is not None:
            return self._live.x
        return self.cache.get("x")

    @x.setter
    def x(self, value):
        self.cache.set("x", value)
        if self._live is not None:
            self._live.x = value

    @property
    def y(self):
        """Vertical display coordinate of the top edge, in pixels."""
        if self._live is not None:
            return self._live.y
        return self.cache.get("y")

    @y.setter
    def y(self, value):
        self.cache.set("y", value)
        if self._live is not None:
            self._live.y = value

    @property
    def width(self):
        """Width in pixels; 0 until set or until the image is shown."""
        if self._live is not None:
            return self._live.width
        return self.cache.get("width")

    @width.setter
    def width(self, value):
        self.cache.set("width", value)
        if self._live is not None:
            self._live.width = value

    @property
    def height(self):
        """Height in pixels; 0 until set or until the image is shown."""
        if self._live is not None:
            return self._live.height
        return self.cache.get("height")

    @height.setter
    def height(self, value):
        self.cache.set("height", value)
        if self._live is not None:
            self._live.height = value

    def contains_point(self, px, py) -> bool:
        if self._live is not None:
            return self._live.hit_test(px, py)
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    # ===================================================================
    # Motion
    # ===================================================================

    @property
    def angle(self):
        """Direction of travel in degrees counter-clockwise from a ray pointing right."""
        if self.cache.sync_state("angle", self._live is not None) is not SyncState.CLEAN:
            return self.cache.get("angle")

        velocity = self._live.velocity
        if velocity.length_squared() == 0:
            # A zero vector has no direction; keep the last one we were given
            return self.cache.get("angle")
        return angle_from_velocity(velocity.x, velocity.y)

    @angle.setter
    def angle(self, value):
        self.cache.set_angle(value)

    @property
    def speed(self):
        """Speed of travel in pixels per second."""
        if self.cache.sync_state("speed", self._live is not None) is not SyncState.CLEAN:
            return self.cache.get("speed")
        return self._live.speed

    @speed.setter
    def speed(self, value):
        self.cache.set_speed(value)

    def aim_for(self, x, y):
        """
        Point this sprite toward (x, y) without changing its speed.

        The speed may be zero, and the sprite is not guaranteed to reach
        the point. Aiming at the sprite's own position changes nothing.
        """
        new_angle = bearing(self.x, self.y, x, y)
        if new_angle is None:
            return
        self.angle = new_angle

    def _sync_velocity(self):
        """Push a changed angle/speed into the live velocity."""
        vx, vy = velocity_from_angle(self.angle, self.speed)
        self._live.velocity.update(vx, vy)
        self.cache.clear_velocity_flags()

    # ===================================================================
    # Image & Animation
    # ===================================================================

    @property
    def image(self):
        """Name of the preloaded image displayed for this sprite."""
        return self.cache.get("image", None)

    @image.setter
    def image(self, value):
        self.cache.set("image", value)
        if self._live is None:
            return
        if not self.game.engine.load_texture(self._live, value):
            report_error(self.game.engine, MissingAssetError(self.name, value))
        rest_on_default_frame(self._live)

    def define_animation(self, name, first_frame, last_frame):
        """
        Create an animation that play_animation() can start.

        Args:
            name: The animation's name
            first_frame: Zero-based index of the first spritesheet frame
            last_frame: Zero-based index of the last spritesheet frame (inclusive)
        """
        self.cache.define_animation(name, first_frame, last_frame)

    def play_animation(self, name, repeat=False):
        """
        Start an animation defined with define_animation().

        Args:
            name: The animation's name
            repeat: Loop continuously if True
        """
        self.cache.current_animation = AnimationRequest(name, bool(repeat))
        if self._live is None:
            return

        player = self._live.animations
        if player.is_playing and player.current.name == name:
            return

        frame_rate = self.game.frame_rate
        for definition in self.cache.animations:
            if player.get(definition.name) is None:
                player.add(definition.name, definition.frames, frame_rate)

        if not player.play(name, frame_rate, repeat):
            report_error(self.game.engine,
                         MisuseError(f"unable to play animation {name} on {self.name}"))

    def _on_animation_complete(self):
        self.cache.current_animation = None
        if self._live is not None:
            self._live.set_frame(self._live.default_frame)
        if self.handle_animation_end is not None:
            self.handle_animation_end()

    # ===================================================================
    # Lifecycle (driven by Game)
    # ===================================================================

    @property
    def is_materialized(self) -> bool:
        return self._live is not None

    @property
    def is_removed(self) -> bool:
        return self._removed

    def _materialize(self):
        """Create the live sprite once; later calls do nothing."""
        if self._live is not None or self._removed:
            return

        self._live = materialize(self, self.game.engine)
        self.game._attach_live(self)

        request = self.cache.current_animation
        if request is not None:
            self.play_animation(request.name, request.repeat)

    def _update(self):
        """Run this sprite's share of one frame."""
        if self._removed:
            return
        if self._live is None:
            self._materialize()

        self._live.immovable = not self.accelerate_on_bounce

        dispatch_input(self, self.game.engine.input,
                       self.game.display_width, self.game.display_height)
        if self._live is None:
            return

        if self.cache.velocity_dirty:
            self._sync_velocity()

        if self.handle_first_game_loop is not None:
            self.handle_first_game_loop()
            self.handle_first_game_loop = None
            if self._live is None:
                return

        if self.handle_game_loop is not None:
            self.handle_game_loop()

    def _detach(self):
        """
        Let go of the live sprite for good.

        Last known values are written back to the cache so that reads
        after removal still answer sensibly.
        """
        live = self._live
        if live is not None:
            angle, speed = self.angle, self.speed
            for name in ("x", "y", "width", "height"):
                self.cache.set(name, getattr(live, name))
            self.cache.set("angle", angle)
            self.cache.set("speed", speed)
            live.pending_destroy = True
            DebugLogger.state(f"{self.name} detached from {live!r}", category="sprite")

        self._live = None
        self._removed = True

    def __repr__(self) -> str:
        state = "live" if self._live is not None else ("removed" if self._removed else "cached")
        return (
            f"<{type(self).__name__} {self.name!r} "
            f"pos=({self.x:.1f}, {self.y:.1f}) {state}>"
        )
