import math

import numpy as np
import pytest

from glsandbox.camera import (
    Camera,
    look_at,
    ortho,
    perspective,
    rotate,
    scale,
    translate,
)
from glsandbox.window import Key, KeyAction, Window


def test_default_camera_looks_down_negative_z():
    camera = Camera()
    assert np.allclose(camera.direction, (0.0, 0.0, -1.0))
    assert np.allclose(camera.right, (1.0, 0.0, 0.0))
    assert np.allclose(camera.up, (0.0, 1.0, 0.0))


def test_default_view_matrix_is_identity():
    assert np.allclose(Camera().view_matrix(), np.identity(4))


def test_basis_is_orthonormal_after_turning():
    camera = Camera()
    camera.mouse_control(37.0, 21.0)
    for vector in (camera.direction, camera.right, camera.up):
        assert np.linalg.norm(vector) == pytest.approx(1.0)
    assert np.dot(camera.direction, camera.right) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(camera.direction, camera.up) == pytest.approx(0.0, abs=1e-9)


def test_mouse_control_scales_by_turn_speed():
    camera = Camera(turn_speed=0.5)
    camera.mouse_control(10.0, 4.0)
    assert camera.yaw == pytest.approx(-90.0 + 10.0 * camera.turn_speed)
    assert camera.pitch == pytest.approx(4.0 * camera.turn_speed)


@pytest.mark.parametrize("y_change, limit", [(1000.0, 89.0), (-1000.0, -89.0)])
def test_pitch_is_clamped(y_change, limit):
    camera = Camera()
    camera.mouse_control(0.0, y_change)
    assert camera.pitch == limit


def test_key_control_moves_forward_and_back():
    window = Window()
    camera = Camera(move_speed=5.0)
    window.handle_key(Key.W, KeyAction.PRESS)
    camera.key_control(window, 0.5)
    forward = camera.position.copy()
    assert np.allclose(forward, camera.direction * 5.0 * 0.5)
    window.handle_key(Key.W, KeyAction.RELEASE)
    window.handle_key(Key.S, KeyAction.PRESS)
    camera.key_control(window, 0.5)
    assert np.allclose(camera.position, (0.0, 0.0, 0.0))


def test_key_control_strafes():
    window = Window()
    camera = Camera()
    window.handle_key(Key.D, KeyAction.PRESS)
    camera.key_control(window, 1.0)
    assert np.allclose(camera.position, camera.right * camera.move_speed)
    window.handle_key(Key.D, KeyAction.RELEASE)
    window.handle_key(Key.A, KeyAction.PRESS)
    camera.key_control(window, 1.0)
    assert np.allclose(camera.position, (0.0, 0.0, 0.0))


def test_look_at_moves_eye_to_origin():
    eye = (1.0, 2.0, 3.0)
    view = look_at(eye, (1.0, 2.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(view @ np.array([*eye, 1.0]), (0.0, 0.0, 0.0, 1.0))


def test_perspective_projects_near_plane_to_minus_one():
    proj = perspective(45.0, 1.6, 0.1, 100.0)
    assert proj[3, 2] == -1.0
    point = proj @ np.array([0.0, 0.0, -0.1, 1.0])
    assert point[2] / point[3] == pytest.approx(-1.0)
    far_point = proj @ np.array([0.0, 0.0, -100.0, 1.0])
    assert far_point[2] / far_point[3] == pytest.approx(1.0)


def test_ortho_maps_corners():
    proj = ortho(0.0, 1280.0, 0.0, 800.0, -1.0, 1.0)
    assert np.allclose(proj @ np.array([0.0, 0.0, 0.0, 1.0]), (-1.0, -1.0, 0.0, 1.0))
    assert np.allclose(proj @ np.array([1280.0, 800.0, 0.0, 1.0]), (1.0, 1.0, 0.0, 1.0))


def test_translate_moves_origin():
    model = translate(np.identity(4), (-1.0, 0.0, -2.5))
    assert np.allclose(model @ np.array([0.0, 0.0, 0.0, 1.0]), (-1.0, 0.0, -2.5, 1.0))


def test_rotate_about_y_sends_x_to_negative_z():
    model = rotate(np.identity(4), math.pi / 2, (0.0, 1.0, 0.0))
    assert np.allclose(model @ np.array([1.0, 0.0, 0.0, 0.0]), (0.0, 0.0, -1.0, 0.0))


def test_rotate_full_turn_is_identity():
    model = rotate(np.identity(4), 2 * math.pi, (1.0, 2.0, 3.0))
    assert np.allclose(model, np.identity(4))


def test_scale_then_translate_order():
    model = translate(np.identity(4), (1.0, 0.0, -2.5))
    model = scale(model, (0.5, 0.5, 1.0))
    point = model @ np.array([2.0, 2.0, 1.0, 1.0])
    assert np.allclose(point, (2.0, 1.0, -1.5, 1.0))