"""
game_state.py
-------------
Lifecycle phases of a Game.
"""

from enum import IntEnum


class GamePhase(IntEnum):
    """
    Tracks where a Game is in its lifecycle.

    BOOTING  -> engine not yet booted; sprites live in cache only
    PLAYING  -> per-frame update and collision dispatch run every tick
    TERMINAL -> game over screen; no further per-frame processing
    """
    BOOTING = 0
    PLAYING = 1
    TERMINAL = 2
