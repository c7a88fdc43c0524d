"""A free-flying camera node driven by yaw and pitch angles."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from phantom.tree import SceneBaseNode


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def look_at(eye, target, up) -> np.ndarray:
    """A right-handed view matrix looking from ``eye`` towards ``target``."""
    eye = np.asarray(eye, dtype=float)
    target = np.asarray(target, dtype=float)
    up = np.asarray(up, dtype=float)
    forward = _normalize(target - eye)
    side = _normalize(np.cross(forward, up))
    upward = np.cross(side, forward)
    view = np.identity(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[:3, 3] = -(view[:3, :3] @ eye)
    return view


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """A right-handed perspective projection; ``fovy`` is in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    focal = 1.0 / math.tan(fovy / 2.0)
    proj = np.zeros((4, 4))
    proj[0, 0] = focal / aspect
    proj[1, 1] = focal
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = 2.0 * far * near / (near - far)
    proj[3, 2] = -1.0
    return proj


class CameraDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


class CameraNode(SceneBaseNode):
    """A camera with Euler angles, basis vectors and view/projection matrices."""

    YAW = -90.0
    PITCH = -45.0
    SPEED = 2.5
    SENSITIVITY = 0.1
    ZOOM = 45.0
    NEAR = 1.0
    FAR = 50000.0
    MOVE_SPEED = 50.0

    DEFAULT_POS = (0.0, 500.0, 500.0)
    DEFAULT_FRONT = (1.0, -1.0, 0.0)
    DEFAULT_UP = (1.0, 1.0, 0.0)

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.up = np.array(self.DEFAULT_UP)
        self.position = np.array(self.DEFAULT_POS)
        self.front = np.array(self.DEFAULT_FRONT)
        self.world_up = np.array((0.0, 1.0, 0.0))
        self.right = np.array((-1.0, 0.0, 0.0))
        self.zoom = self.ZOOM
        self.yaw = self.YAW
        self.pitch = self.PITCH
        self.view_matrix = np.identity(4)
        self.projection_matrix = np.identity(4)

    def init_view_matrix(self) -> None:
        """Nudge the yaw, rebuild the basis vectors and the view matrix."""
        self.yaw += 0.1
        self.update_camera_vectors()
        self.view_matrix = look_at(self.position, self.position + self.front, self.up)

    def calculate_vp_matrix(self, aspect: float) -> None:
        """Rebuild the view and projection matrices for the given aspect ratio."""
        self.view_matrix = look_at(self.position, self.position + self.front, self.up)
        self.projection_matrix = perspective(
            math.radians(self.zoom), aspect, self.NEAR, self.FAR
        )

    def process_keyboard(self, direction: CameraDirection, delta_time: float) -> None:
        """Move the camera along its front or right vector."""
        velocity = delta_time * self.MOVE_SPEED
        if direction is CameraDirection.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is CameraDirection.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is CameraDirection.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraDirection.RIGHT:
            self.position = self.position + self.right * velocity

    def process_mouse_movement(self, xoffset: float, yoffset: float) -> None:
        """Turn the camera by a mouse offset, scaled by the sensitivity."""
        self.yaw += xoffset * self.SENSITIVITY
        self.pitch -= yoffset * self.SENSITIVITY
        self.update_camera_vectors()

    def update_camera_vectors(self) -> None:
        """Recompute front, right and up from the yaw and pitch angles."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            (
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            )
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))