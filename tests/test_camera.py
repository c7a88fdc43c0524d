import math

import numpy as np
import pytest

from phantom.camera import CameraDirection, CameraNode, look_at, perspective


def test_defaults_follow_source_constants():
    cam = CameraNode("main")
    assert cam.name == "main"
    assert cam.yaw == -90.0
    assert cam.pitch == -45.0
    assert cam.zoom == 45.0
    np.testing.assert_allclose(cam.position, (0.0, 500.0, 500.0))


def test_look_at_maps_eye_to_origin_and_is_rigid():
    eye = np.array([3.0, 4.0, 5.0])
    view = look_at(eye, [0.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    np.testing.assert_allclose(view @ np.append(eye, 1.0), [0, 0, 0, 1], atol=1e-9)
    rot = view[:3, :3]
    np.testing.assert_allclose(rot @ rot.T, np.identity(3), atol=1e-9)


def test_look_at_target_lies_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    target = np.array([4.0, 2.0, 3.0])
    view = look_at(eye, target, [0.0, 1.0, 0.0])
    p = view @ np.append(target, 1.0)
    assert p[0] == pytest.approx(0.0, abs=1e-9)
    assert p[1] == pytest.approx(0.0, abs=1e-9)
    assert p[2] < 0.0


def test_look_at_rejects_coincident_points():
    with pytest.raises(ValueError):
        look_at([1.0, 1.0, 1.0], [1.0, 1.0, 1.0], [0.0, 1.0, 0.0])


def test_perspective_maps_near_and_far_to_clip_bounds():
    near, far = 1.0, 100.0
    proj = perspective(math.radians(45.0), 1.5, near, far)
    for depth, expected in ((near, -1.0), (far, 1.0)):
        clip = proj @ np.array([0.0, 0.0, -depth, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


def test_perspective_rejects_bad_arguments():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 1.0, 10.0)
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5.0, 5.0)


def test_update_camera_vectors_builds_orthonormal_basis():
    cam = CameraNode()
    cam.update_camera_vectors()
    for vec in (cam.front, cam.right, cam.up):
        assert np.linalg.norm(vec) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(cam.right, cam.world_up) == pytest.approx(0.0, abs=1e-9)


def test_keyboard_forward_then_backward_returns_to_start():
    cam = CameraNode()
    cam.update_camera_vectors()
    start = cam.position.copy()
    cam.process_keyboard(CameraDirection.FORWARD, 0.5)
    moved = cam.position.copy()
    np.testing.assert_allclose(moved - start, cam.front * 0.5 * CameraNode.MOVE_SPEED)
    cam.process_keyboard(CameraDirection.BACKWARD, 0.5)
    np.testing.assert_allclose(cam.position, start)


def test_keyboard_left_and_right_cancel():
    cam = CameraNode()
    start = cam.position.copy()
    cam.process_keyboard(CameraDirection.RIGHT, 0.2)
    assert not np.allclose(cam.position, start)
    cam.process_keyboard(CameraDirection.LEFT, 0.2)
    np.testing.assert_allclose(cam.position, start)


def test_mouse_movement_scales_offsets():
    cam = CameraNode()
    cam.process_mouse_movement(10.0, 20.0)
    assert cam.yaw == pytest.approx(CameraNode.YAW + 1.0)
    assert cam.pitch == pytest.approx(CameraNode.PITCH - 2.0)
    assert np.linalg.norm(cam.front) == pytest.approx(1.0)


def test_init_view_matrix_nudges_yaw_and_centres_position():
    cam = CameraNode()
    cam.init_view_matrix()
    assert cam.yaw == pytest.approx(CameraNode.YAW + 0.1)
    p = cam.view_matrix @ np.append(cam.position, 1.0)
    np.testing.assert_allclose(p, [0, 0, 0, 1], atol=1e-6)


def test_calculate_vp_matrix_uses_zoom_and_clip_planes():
    cam = CameraNode()
    cam.update_camera_vectors()
    cam.calculate_vp_matrix(16 / 9)
    expected = perspective(math.radians(cam.zoom), 16 / 9, CameraNode.NEAR, CameraNode.FAR)
    np.testing.assert_allclose(cam.projection_matrix, expected)
    np.testing.assert_allclose(
        cam.view_matrix, look_at(cam.position, cam.position + cam.front, cam.up)
    )