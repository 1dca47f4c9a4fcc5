"""
Runtime configuration exports.

Provides sgc-wide constants and the game phase enum. All exports are
lightweight class constants with no initialization overhead; the Game
itself is imported from sgc.core.runtime.game_context.
"""

from sgc.core.runtime.game_settings import (
    Display,
    Physics,
    Animation,
    SpriteDefaults,
    Text,
    Layers,
    Debug,
)
from sgc.core.runtime.game_state import GamePhase

__all__ = [
    # Display & Rendering
    'Display',
    'Layers',
    'Text',
    # Configuration
    'Physics',
    'Animation',
    'SpriteDefaults',
    # Debug
    'Debug',
    # State
    'GamePhase',
]
