"""
materializer.py
---------------
One-time creation of a sprite's live representation from its cache.

materialize() depends only on the sprite's cached configuration and the
engine it is given, so a headless engine can drive it in tests exactly
as the pygame engine does at boot.
"""

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.errors import MissingAssetError, report_error
from sgc.core.runtime.game_settings import SpriteDefaults


BACK_REFERENCE = "sgc_sprite"


def materialize(sprite, engine):
    """
    Build and register the live sprite backing a facade Sprite.

    Steps:
        1. Create the live sprite at the cached position with the cached image
           (a missing image is reported and replaced by a placeholder)
        2. Enable physics with elastic bounce
        3. Store a back-reference for collision callbacks
        4. Show the default "standing" frame
        5. Apply a cached size

    Cached animation requests are replayed by the caller once the live
    sprite is attached, so that play_animation() sees a live target.

    Returns:
        LiveSprite
    """
    cache = sprite.cache
    image = cache.get("image", None)

    live = engine.create_live_sprite(cache.get("x"), cache.get("y"), image)
    if image is not None and not engine.assets.has(image):
        report_error(engine, MissingAssetError(sprite.name, image))

    engine.enable_physics(live)
    live.data[BACK_REFERENCE] = sprite

    rest_on_default_frame(live)

    if cache.has("width"):
        live.width = cache.get("width")
    if cache.has("height"):
        live.height = cache.get("height")

    live.animations.on_complete = sprite._on_animation_complete

    DebugLogger.state(f"Materialized {sprite.name} as {live!r}", category="materialize")
    return live


def rest_on_default_frame(live):
    """Pick the "standing" frame for the live sprite's current image and show it."""
    live.default_frame = min(SpriteDefaults.DEFAULT_FRAME, len(live.frames) - 1)
    live.set_frame(live.default_frame)


def owner_of(live):
    """Facade sprite that owns a live sprite."""
    return live.data.get(BACK_REFERENCE)
