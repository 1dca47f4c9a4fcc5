"""
sgc/entities/__init__.py
------------------------
Entity module exports.

Exports:
    Sprite       - Facade game object
    SpriteCache  - Cached property values and dirty flags
    SyncState    - Which side of a sprite property is authoritative
"""

from sgc.entities.sprite import Sprite
from sgc.entities.sprite_cache import SpriteCache, SyncState

__all__ = [
    'Sprite',
    'SpriteCache',
    'SyncState',
]
