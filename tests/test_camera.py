"""Tests for Camera2D."""

import pytest

from tribody.camera import Camera2D, ease_for_interval


def test_follow_converges_to_stationary_target():
    cam = Camera2D(position=(0.0, 0.0), ease=0.995)
    for _ in range(5000):
        cam.follow((100.0, -50.0))
    assert cam.position == pytest.approx((100.0, -50.0), abs=1e-6)


def test_follow_moves_monotonically_closer():
    cam = Camera2D(position=(0.0, 0.0), ease=0.9)
    last = float("inf")
    for _ in range(50):
        cam.follow((10.0, 0.0))
        gap = 10.0 - cam.position[0]
        assert 0.0 <= gap < last
        last = gap


def test_zero_ease_snaps():
    cam = Camera2D(position=(3.0, 4.0), ease=0.0)
    cam.follow((-1.0, 2.0))
    assert cam.position == (-1.0, 2.0)


def test_world_screen_round_trip_at_center():
    cam = Camera2D(position=(10.0, 20.0), zoom=2.0)
    cam.set_viewport_size(800, 600)
    assert cam.world_to_screen((10.0, 20.0)) == (400, 300)
    assert cam.world_to_screen((15.0, 20.0)) == (410, 300)
    assert cam.screen_to_world((410, 300)) == (15.0, 20.0)


def test_ease_for_interval():
    assert ease_for_interval(0.995, 1 / 30, 1 / 60) == pytest.approx(0.995 ** 2)
    assert ease_for_interval(0.995, 1 / 60, 1 / 60) == pytest.approx(0.995)
    assert ease_for_interval(0.995, 0.1, 0.0) == 0.995
