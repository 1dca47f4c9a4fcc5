"""
game_settings.py
----------------
Centralized constants for all sgc systems.

Values here are defaults; display size, caption, fps and scoreboard
visibility can be overridden per game through GameConfig.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "sgc game"
    BACKGROUND_COLOR = (0, 0, 0)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Arcade physics defaults."""
    BOUNCE: float = 1.0
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Animation
# ===========================================================

class Animation:
    """Frame-based animation playback."""
    # Not configurable per game
    FRAME_RATE: int = 10


# ===========================================================
# Sprite Defaults
# ===========================================================

class SpriteDefaults:
    """Facade defaults for newly created sprites."""
    NAME: str = "An unnamed sprite"
    # Frame 7 is the "standing" pose in twelve-image character sheets
    DEFAULT_FRAME: int = 7
    PLACEHOLDER_SIZE = (32, 32)
    PLACEHOLDER_COLOR = (255, 0, 255)


# ===========================================================
# Text & Scoreboard
# ===========================================================

class Text:
    """Text area, scoreboard and game-over styling."""
    FONT_NAME: str = "arial"
    FONT_SIZE: int = 24
    COLOR = (255, 255, 255)
    BACKGROUND = (0, 0, 0, 72)
    MARGIN: str = " "

    SCOREBOARD_POS = (10, 10)

    GAME_OVER_FONT_SIZE: int = 30
    GAME_OVER_X: int = 150
    GAME_OVER_MESSAGE: str = "               Game Over!"
    GAME_OVER_SCORE: str = "\n\n               Your score: {score}"


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order inside the live sprite group.

    The engine draws the background before this group and all text after it.
    """
    SPRITES: int = 100


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HITBOX_VISIBLE: bool = False
    HITBOX_COLOR = (255, 0, 0)
