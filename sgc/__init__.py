"""
sgc/__init__.py
---------------
Simple Game Classes: a small facade over pygame for first games.

Exports:
    Game              - Game controller: configuration, lifecycle, score
    Sprite            - Game object with plain position/motion/image properties
    GamePhase         - BOOTING, PLAYING, TERMINAL
    SgcError          - Base class of reported problems
    MissingAssetError - Image used but never preloaded
    MisuseError       - Helper used with the wrong argument or at the wrong time
    AssetLoadError    - Image file that could not be read
"""

from sgc.core.errors import AssetLoadError, MissingAssetError, MisuseError, SgcError
from sgc.core.runtime.game_context import Game
from sgc.core.runtime.game_state import GamePhase
from sgc.entities.sprite import Sprite

__all__ = [
    # Facade
    'Game',
    'Sprite',
    'GamePhase',
    # Errors
    'SgcError',
    'MissingAssetError',
    'MisuseError',
    'AssetLoadError',
]
