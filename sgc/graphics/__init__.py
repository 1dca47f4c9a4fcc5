"""
Graphics exports.

Provides image loading, live sprites, animation playback and scrolling backgrounds.
"""

from sgc.graphics.asset_manager import AssetManager
from sgc.graphics.animation_player import AnimationPlayer, AnimationClip
from sgc.graphics.background_manager import BackgroundScroller
from sgc.graphics.live_sprite import LiveSprite

__all__ = [
    'AssetManager',
    'AnimationPlayer',
    'AnimationClip',
    'BackgroundScroller',
    'LiveSprite',
]
