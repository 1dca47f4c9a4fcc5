"""
test_sprite_properties.py
-------------------------
Tests for Sprite property synchronization between cache and live sprite.

Covers:
1. Values written before boot read back exactly (cache fidelity)
2. Position/size default to 0 until written
3. Live delegation for position and size after materialization
4. Angle/speed round trip through the live velocity
5. aim_for() bearings, including the coincident point
6. Values remain readable after removal
"""

import pytest

from sgc.entities.sprite import Sprite
from sgc.entities.sprite_cache import SyncState


# ===========================================================
# Before Boot
# ===========================================================


class TestCachedProperties:
    """Reads before materialization come from the cache."""

    def test_position_and_size_default_to_zero(self, game):
        sprite = Sprite(game)
        assert (sprite.x, sprite.y, sprite.width, sprite.height) == (0, 0, 0, 0)
        assert sprite.angle == 0
        assert sprite.speed == 0

    def test_last_write_wins(self, game):
        sprite = Sprite(game)
        sprite.x = 10
        sprite.x = 25
        sprite.y = -4
        sprite.width = 12
        sprite.height = 8

        assert sprite.x == 25
        assert sprite.y == -4
        assert sprite.width == 12
        assert sprite.height == 8

    @pytest.mark.parametrize("angle, speed", [
        (45, 100),
        (359.5, 0),
        (-90, 12.5),
        (720, 3),
    ])
    def test_angle_and_speed_read_back_exactly(self, game, angle, speed):
        sprite = Sprite(game)
        sprite.angle = angle
        sprite.speed = speed

        assert sprite.angle == angle
        assert sprite.speed == speed
        assert sprite.cache.sync_state("angle", sprite.is_materialized) is SyncState.UNMATERIALIZED

    def test_defaults(self, game):
        sprite = Sprite(game)
        assert sprite.name == "An unnamed sprite"
        assert sprite.accelerate_on_bounce is True
        assert sprite.image is None
        assert not sprite.is_materialized


# ===========================================================
# After Boot
# ===========================================================


class TestLiveProperties:
    """Once live, position and size delegate; angle/speed follow dirty flags."""

    def test_cached_position_applied_at_boot(self, game):
        sprite = Sprite(game)
        sprite.image = "box.png"
        sprite.x = 30
        sprite.y = 40

        game.boot()

        assert sprite.is_materialized
        assert sprite._live.x == 30
        assert sprite._live.y == 40
        # Size comes from the image when never set
        assert (sprite.width, sprite.height) == (40, 30)

    def test_cached_size_overrides_image_size(self, game):
        sprite = Sprite(game)
        sprite.image = "box.png"
        sprite.width = 80
        sprite.height = 10

        game.boot()

        assert (sprite.width, sprite.height) == (80, 10)

    def test_reads_follow_live_sprite(self, booted_game):
        sprite = Sprite(booted_game)
        booted_game.tick(0)

        sprite._live.x = 99
        assert sprite.x == 99

        sprite.y = 7
        assert sprite._live.y == 7

    def test_dirty_angle_reads_cached_value_until_synced(self, booted_game):
        sprite = Sprite(booted_game)
        booted_game.tick(0)

        sprite.angle = 45
        sprite.speed = 100
        assert sprite.cache.sync_state("angle", True) is SyncState.DIRTY
        assert sprite.angle == 45
        # Velocity not pushed yet
        assert sprite._live.velocity.length() == 0

        booted_game.tick(0)

        assert sprite.cache.sync_state("angle", True) is SyncState.CLEAN
        assert sprite._live.velocity.x == pytest.approx(70.7107, abs=1e-3)
        assert sprite._live.velocity.y == pytest.approx(-70.7107, abs=1e-3)

    @pytest.mark.parametrize("angle", [0, 30, 90, 135, 180, 270, 315, 359])
    def test_angle_speed_round_trip(self, booted_game, angle):
        sprite = Sprite(booted_game)
        sprite.angle = angle
        sprite.speed = 50

        booted_game.tick(0)

        assert sprite.angle == pytest.approx(angle, abs=1e-6)
        assert sprite.speed == pytest.approx(50)

    def test_zero_speed_keeps_cached_angle(self, booted_game):
        sprite = Sprite(booted_game)
        sprite.angle = 120
        sprite.speed = 0

        booted_game.tick(0)

        assert sprite.angle == 120
        assert sprite.speed == 0

    def test_speed_only_write_keeps_live_direction(self, booted_game):
        sprite = Sprite(booted_game)
        sprite.angle = 0
        sprite.speed = 100
        booted_game.tick(0)

        # A bounce reverses the live velocity behind the cache's back
        sprite._live.velocity.x = -100
        sprite.speed = 50

        assert sprite.angle == pytest.approx(180)

        booted_game.tick(0)

        assert sprite.angle == pytest.approx(180)
        assert sprite.speed == pytest.approx(50)
        assert sprite._live.velocity.x == pytest.approx(-50)
        assert sprite._live.velocity.y == pytest.approx(0, abs=1e-9)

    def test_velocity_moves_sprite(self, booted_game):
        sprite = Sprite(booted_game)
        sprite.angle = 270  # straight down
        sprite.speed = 10

        booted_game.tick(0)   # velocity applied
        booted_game.tick(1.0)

        assert sprite.x == pytest.approx(0, abs=1e-6)
        assert sprite.y == pytest.approx(10)

    def test_width_change_every_frame_rescales_current_size_only(self, booted_game):
        class Grower(Sprite):
            def handle_game_loop(self):
                self.width += 1

        sprite = Grower(booted_game)
        sprite.image = "ball.png"
        booted_game.tick(0)
        start = sprite.width

        for _ in range(300):
            booted_game.tick(0)
            assert sprite._live.image.get_width() == sprite.width

        assert sprite.width == start + 300
        assert sprite._live._scaled_key == (sprite._live.frame, (start + 300, 20))


# ===========================================================
# aim_for
# ===========================================================


class TestAimFor:
    """aim_for() turns the sprite toward a point, leaving speed alone."""

    @pytest.mark.parametrize("target, expected", [
        ((10, 0), 0),
        ((0, -10), 90),
        ((-10, 0), 180),
        ((0, 10), 270),
        ((10, -10), 45),
    ])
    def test_bearings(self, game, target, expected):
        sprite = Sprite(game)
        sprite.speed = 33
        sprite.aim_for(*target)

        assert sprite.angle == pytest.approx(expected)
        assert sprite.speed == 33

    def test_coincident_point_keeps_angle(self, game):
        sprite = Sprite(game)
        sprite.x = 5
        sprite.y = 5
        sprite.angle = 60

        sprite.aim_for(5, 5)

        assert sprite.angle == 60

    def test_aim_on_live_sprite_updates_velocity(self, booted_game):
        sprite = Sprite(booted_game)
        sprite.speed = 20
        booted_game.tick(0)

        sprite.aim_for(0, 10)
        booted_game.tick(0)

        assert sprite._live.velocity.x == pytest.approx(0, abs=1e-9)
        assert sprite._live.velocity.y == pytest.approx(20)


# ===========================================================
# Removal
# ===========================================================


class TestRemovedSprite:
    """A removed sprite answers with its last known values."""

    def test_values_survive_removal(self, booted_game):
        sprite = Sprite(booted_game)
        sprite.x = 12
        sprite.angle = 90
        sprite.speed = 5
        booted_game.tick(0)

        booted_game.remove_sprite(sprite)

        assert sprite.is_removed
        assert not sprite.is_materialized
        assert sprite.x == 12
        assert sprite.angle == pytest.approx(90)
        assert sprite.speed == pytest.approx(5)

    def test_removed_sprite_never_rematerializes(self, booted_game):
        sprite = Sprite(booted_game)
        booted_game.remove_sprite(sprite)

        sprite._update()

        assert not sprite.is_materialized
