"""
Core services exports.

Provides configuration loading, input state and the engine boundary.
"""

from sgc.core.services.config_manager import load_config, GameConfig
from sgc.core.services.input_manager import InputManager
from sgc.core.services.engine import Engine
from sgc.core.services.pygame_engine import PygameEngine

__all__ = [
    # Config
    'load_config',
    'GameConfig',
    # Services
    'InputManager',
    'Engine',
    'PygameEngine',
]
