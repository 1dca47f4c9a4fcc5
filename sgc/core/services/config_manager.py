"""
config_manager.py
-----------------
Configuration loader for per-game settings.

Features:
- Supports .json, .yaml/.yml and .py config files
- Recursively merges file values over defaults
- Ignores '_notes' keys for human-readable configs
- GameConfig: typed view over the merged result used by Game
"""

import os
import json
import importlib.util
from dataclasses import dataclass

import yaml

from sgc.core.debug.debug_logger import DebugLogger
from sgc.core.runtime.game_settings import Display


# ===========================================================
# Configuration
# ===========================================================

DEFAULT_GAME_CONFIG = {
    "display": {
        "width": Display.WIDTH,
        "height": Display.HEIGHT,
        "fps": Display.FPS,
        "caption": Display.CAPTION,
    },
    "show_score": False,
}


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Path to a .json, .yaml/.yml or .py file
        default_dict: Default fallback config
        strict: If True, raise exception on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    try:
        if filename.endswith(".py"):
            data = _load_py_module(filename)
        elif filename.endswith((".yaml", ".yml")):
            data = _load_yaml(filename)
        else:
            data = _load_json(filename)

        return _merge_dicts(default_dict, data or {})

    except (json.JSONDecodeError, yaml.YAMLError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {filename}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


# ===========================================================
# Game Config
# ===========================================================

@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the lifetime of a Game."""
    display_width: int = Display.WIDTH
    display_height: int = Display.HEIGHT
    fps: int = Display.FPS
    caption: str = Display.CAPTION
    show_score: bool = False

    @classmethod
    def from_dict(cls, data):
        merged = _merge_dicts(DEFAULT_GAME_CONFIG, data or {})
        display = merged["display"]
        return cls(
            display_width=int(display["width"]),
            display_height=int(display["height"]),
            fps=int(display["fps"]),
            caption=str(display["caption"]),
            show_score=bool(merged["show_score"]),
        )

    @classmethod
    def load(cls, source=None):
        """
        Build a GameConfig from None, a mapping, a GameConfig or a file name.
        """
        if source is None:
            return cls()
        if isinstance(source, GameConfig):
            return source
        if isinstance(source, dict):
            return cls.from_dict(source)
        return cls.from_dict(load_config(os.fspath(source)))


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data


def _load_py_module(path):
    """Load Python config file and return DEFAULT_CONFIG if present."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    try:
        spec = importlib.util.spec_from_file_location("sgc_config_module", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        DebugLogger.system(f"Loaded {os.path.basename(path)} (Python)", category="loading")
        return getattr(module, "DEFAULT_CONFIG", {})
    except (ImportError, AttributeError, SyntaxError) as e:
        DebugLogger.warn(f"Failed to load Python config {path}: {e}", category="loading")
        return {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: (_merge_dicts(v, {}) if isinstance(v, dict) else v)
              for k, v in default.items() if k != "_notes"}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        elif isinstance(value, dict):
            merged[key] = _merge_dicts(value, {})
        else:
            merged[key] = value
    return merged
