"""
test_sprite_cache.py
--------------------
Unit tests for SpriteCache dirty-flag bookkeeping.
"""

import pytest

from sgc.entities.sprite_cache import AnimationDefinition, SpriteCache, SyncState


@pytest.fixture
def cache():
    return SpriteCache()


# ===========================================================
# Plain Values
# ===========================================================

def test_unset_values_default_to_zero(cache):
    assert cache.get("x") == 0
    assert cache.get("image", None) is None
    assert not cache.has("x")


def test_none_reads_as_default(cache):
    cache.set("width", None)
    assert cache.get("width") == 0
    assert not cache.has("width")


# ===========================================================
# Sync State
# ===========================================================

def test_state_unmaterialized_without_live_sprite(cache):
    cache.set_angle(10)
    assert cache.sync_state("angle", False) is SyncState.UNMATERIALIZED


def test_angle_and_speed_flags_are_independent(cache):
    cache.set_angle(10)

    assert cache.sync_state("angle", True) is SyncState.DIRTY
    assert cache.sync_state("speed", True) is SyncState.CLEAN
    assert cache.velocity_dirty


def test_clearing_flags_makes_both_clean(cache):
    cache.set_angle(10)
    cache.set_speed(3)

    cache.clear_velocity_flags()

    assert cache.sync_state("angle", True) is SyncState.CLEAN
    assert cache.sync_state("speed", True) is SyncState.CLEAN
    assert not cache.velocity_dirty
    # Values survive the sync
    assert cache.get("angle") == 10
    assert cache.get("speed") == 3


# ===========================================================
# Animation Definitions
# ===========================================================

def test_definitions_keep_order_and_replace_by_name(cache):
    cache.define_animation("walk", 0, 3)
    cache.define_animation("jump", 4, 5)
    cache.define_animation("walk", 6, 8)

    assert [d.name for d in cache.animations] == ["walk", "jump"]
    assert cache.find_animation("walk") == AnimationDefinition("walk", 6, 8)
    assert cache.find_animation("swim") is None
