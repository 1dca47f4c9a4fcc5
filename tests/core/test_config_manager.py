"""
test_config_manager.py
----------------------
Unit tests for config file loading and GameConfig.

Responsibilities
----------------
- Verify JSON, YAML and Python config files load and merge over defaults.
- Verify '_notes' keys are ignored at every depth.
- Verify missing files fall back to defaults, or raise when strict.
- Verify Game picks up display size and scoreboard settings.
"""

import json

import pytest

from sgc.core.runtime.game_context import Game
from sgc.core.runtime.game_settings import Display
from sgc.core.services.config_manager import GameConfig, load_config


DEFAULTS = {"display": {"width": 800, "height": 600}, "show_score": False}


# ===========================================================
# load_config
# ===========================================================

def test_json_merges_over_defaults(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"display": {"width": 320}}), encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config == {"display": {"width": 320, "height": 600}, "show_score": False}


def test_yaml_config(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("display:\n  height: 240\nshow_score: true\n", encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config["display"] == {"width": 800, "height": 240}
    assert config["show_score"] is True


def test_python_config(tmp_path):
    path = tmp_path / "game_config.py"
    path.write_text('DEFAULT_CONFIG = {"show_score": True}\n', encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config["show_score"] is True
    assert config["display"]["width"] == 800


def test_notes_are_ignored(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({
        "_notes": "top-level comment",
        "display": {"_notes": "nested comment", "fps": 30},
    }), encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert "_notes" not in config
    assert "_notes" not in config["display"]
    assert config["display"]["fps"] == 30


def test_defaults_are_not_mutated(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"display": {"width": 1}}), encoding="utf-8")

    load_config(str(path), DEFAULTS)

    assert DEFAULTS["display"]["width"] == 800


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = load_config(str(tmp_path / "absent.json"), DEFAULTS)
    assert config == DEFAULTS


def test_missing_file_raises_when_strict(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yaml"), DEFAULTS, strict=True)


def test_malformed_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(str(path), DEFAULTS) == DEFAULTS


# ===========================================================
# GameConfig
# ===========================================================

class TestGameConfig:
    """Typed settings a Game is built with."""

    def test_defaults_match_settings(self):
        config = GameConfig.load()
        assert config.display_width == Display.WIDTH
        assert config.display_height == Display.HEIGHT
        assert config.fps == Display.FPS
        assert config.show_score is False

    def test_partial_mapping(self):
        config = GameConfig.load({"display": {"width": "640"}, "show_score": 1})
        assert config.display_width == 640
        assert config.display_height == Display.HEIGHT
        assert config.show_score is True

    def test_instance_passes_through(self):
        config = GameConfig(display_width=100)
        assert GameConfig.load(config) is config

    def test_game_reads_config_file(self, tmp_path, engine):
        path = tmp_path / "sgc.yaml"
        path.write_text("display:\n  width: 480\n  height: 320\n", encoding="utf-8")

        game = Game(str(path), engine=engine)

        assert (game.display_width, game.display_height) == (480, 320)
