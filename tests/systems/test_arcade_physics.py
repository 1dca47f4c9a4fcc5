"""
test_arcade_physics.py
----------------------
Unit tests for angle conversion, integration and bounce separation.
"""

import math

import pytest

from sgc.systems.physics.arcade_physics import (
    ArcadePhysics,
    angle_from_velocity,
    bearing,
    normalize_degrees,
    velocity_from_angle,
)


# ===========================================================
# Conversions
# ===========================================================

@pytest.mark.parametrize("angle, expected", [
    (0, 0),
    (360, 0),
    (-90, 270),
    (725, 5),
    (-1e-15, 0),
])
def test_normalize_degrees(angle, expected):
    result = normalize_degrees(angle)
    assert 0 <= result < 360
    assert result == pytest.approx(expected)


def test_up_is_negative_screen_y():
    vx, vy = velocity_from_angle(90, 10)
    assert vx == pytest.approx(0, abs=1e-9)
    assert vy == pytest.approx(-10)


@pytest.mark.parametrize("angle", [0, 1, 89.5, 90, 180, 181, 270, 359.9])
def test_angle_round_trip(angle):
    vx, vy = velocity_from_angle(angle, 7)
    assert angle_from_velocity(vx, vy) == pytest.approx(angle, abs=1e-9)
    assert math.hypot(vx, vy) == pytest.approx(7)


def test_bearing_undefined_for_same_point():
    assert bearing(3, 4, 3, 4) is None


def test_bearing_down_is_270():
    assert bearing(0, 0, 0, 10) == pytest.approx(270)


# ===========================================================
# Physics World
# ===========================================================

@pytest.fixture
def physics():
    return ArcadePhysics()


def test_enable_sets_elastic_bounce(engine, physics):
    live = engine.create_live_sprite(0, 0, "ball.png")

    physics.enable(live)
    physics.enable(live)

    assert live.physics_enabled
    assert tuple(live.bounce) == (1, 1)
    assert physics.bodies == [live]


def test_step_moves_bodies_except_pending(engine, physics):
    moving = engine.create_live_sprite(0, 0, "ball.png")
    doomed = engine.create_live_sprite(0, 0, "ball.png")
    for live in (moving, doomed):
        physics.enable(live)
        live.velocity.update(10, -20)
    doomed.pending_destroy = True

    physics.step(0.5)

    assert (moving.x, moving.y) == (5, -10)
    assert (doomed.x, doomed.y) == (0, 0)


def test_separate_exchanges_velocity_on_shallow_axis(engine, physics):
    a = engine.create_live_sprite(0, 0, "ball.png")
    b = engine.create_live_sprite(0, 16, "ball.png")
    for live in (a, b):
        physics.enable(live)
    a.velocity.update(3, 10)
    b.velocity.update(-1, -5)

    assert physics.separate(a, b)

    # 4px overlap on y, split evenly
    assert a.y == pytest.approx(-2)
    assert b.y == pytest.approx(18)
    assert tuple(a.velocity) == (3, -5)
    assert tuple(b.velocity) == (-1, 10)


def test_separate_two_immovable_bodies_is_noop(engine, physics):
    a = engine.create_live_sprite(0, 0, "ball.png")
    b = engine.create_live_sprite(5, 0, "ball.png")
    a.immovable = b.immovable = True

    assert not physics.separate(a, b)
    assert (a.x, b.x) == (0, 5)


def test_disable_and_clear(engine, physics):
    a = engine.create_live_sprite(0, 0, "ball.png")
    b = engine.create_live_sprite(0, 0, "ball.png")
    physics.enable(a)
    physics.enable(b)

    physics.disable(a)
    assert physics.bodies == [b]
    assert not a.physics_enabled

    physics.clear()
    assert physics.bodies == []
    assert not b.physics_enabled
