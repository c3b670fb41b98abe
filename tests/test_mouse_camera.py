import pytest

from quadkit.mouse_camera import MouseCamera
from quadkit.vecmath import Vec2


def test_defaults():
    cam = MouseCamera()
    assert cam.offset == Vec2(0.0, 0.0)
    assert cam.scale == 1.0


def test_wheel_zero_changes_nothing():
    cam = MouseCamera(Vec2(1.0, 2.0), 1.5)
    cam.scale_wheel(Vec2(3.0, 4.0), 0.0, 2.0)
    assert cam.offset == Vec2(1.0, 2.0)
    assert cam.scale == 1.5


def test_wheel_in_then_out_round_trips():
    cam = MouseCamera(Vec2(1.0, -2.0), 1.0)
    center = Vec2(0.5, 0.25)
    cam.scale_wheel(center, 1.0, 1.25)
    assert cam.scale == pytest.approx(1.25)
    cam.scale_wheel(center, -1.0, 1.25)
    assert cam.scale == pytest.approx(1.0)
    assert cam.offset.x == pytest.approx(1.0)
    assert cam.offset.y == pytest.approx(-2.0)


def test_scale_around_own_offset_keeps_offset():
    cam = MouseCamera(Vec2(3.0, 3.0), 1.0)
    cam.scale_mul(Vec2(3.0, 3.0), 4.0)
    assert cam.offset == Vec2(3.0, 3.0)
    assert cam.scale == 4.0


def test_scale_new_moves_offset_away_from_center():
    cam = MouseCamera(Vec2(4.0, 4.0), 1.0)
    cam.scale_new(Vec2(2.0, 2.0), 2.0)
    assert cam.offset == Vec2(6.0, 6.0)


def test_update_pans_by_mouse_delta():
    cam = MouseCamera()
    cam.update(Vec2(0.5, 0.5), False)
    assert cam.offset == Vec2(0.0, 0.0)
    cam.update(Vec2(1.0, 0.75), True)
    assert cam.offset == Vec2(0.5, 0.25)


def test_zoom_and_offset():
    cam = MouseCamera(Vec2(0.5, 0.25), 1.0)
    zoom, offset = cam.zoom_and_offset(2.0)
    assert zoom == Vec2(1.0, -2.0)
    assert offset == Vec2(0.5, -0.25)