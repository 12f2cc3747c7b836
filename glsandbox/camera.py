"""A fly-through camera and the 4x4 transform helpers the scenes use.

Matrices are numpy arrays acting on column vectors (``matrix @ vector``).
Angles given to the matrix helpers are in radians.
"""

from __future__ import annotations

import math

import numpy as np

from glsandbox.window import Key

PITCH_LIMIT = 89.0


def _normalize(vector) -> np.ndarray:
    vector = np.asarray(vector, dtype=np.float64)
    with np.errstate(invalid="ignore", divide="ignore"):
        return vector / np.linalg.norm(vector)


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye = np.asarray(eye, dtype=np.float64)
    f = _normalize(np.asarray(center, dtype=np.float64) - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip space in [-1, 1]."""
    f = 1.0 / math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = f / aspect
    matrix[1, 1] = f
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Orthographic projection of the given box onto clip space."""
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def translate(matrix, offset) -> np.ndarray:
    """Return matrix multiplied by a translation."""
    step = np.identity(4)
    step[:3, 3] = offset
    return np.asarray(matrix, dtype=np.float64) @ step


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Return matrix multiplied by a rotation of angle radians about axis."""
    x, y, z = _normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    step = np.identity(4)
    step[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return np.asarray(matrix, dtype=np.float64) @ step


def scale(matrix, factors) -> np.ndarray:
    """Return matrix multiplied by a per-axis scale."""
    step = np.diag([*factors, 1.0])
    return np.asarray(matrix, dtype=np.float64) @ step


class Camera:
    """A yaw/pitch camera moved with WASD and turned with the mouse."""

    def __init__(
        self,
        position=(0.0, 0.0, 0.0),
        world_up=(0.0, 1.0, 0.0),
        yaw: float = -90.0,
        pitch: float = 0.0,
        move_speed: float = 5.0,
        turn_speed: float = 0.5,
    ) -> None:
        self.position = np.array(position, dtype=np.float64)
        self.world_up = np.array(world_up, dtype=np.float64)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.move_speed = float(move_speed)
        self.turn_speed = float(turn_speed)
        self.direction = np.array([0.0, 0.0, -1.0])
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self._update()

    def key_control(self, window, dt: float) -> None:
        """Move along the view direction and its right vector for held keys."""
        velocity = self.move_speed * dt
        if window.get_key(Key.W):
            self.position += self.direction * velocity
        if window.get_key(Key.S):
            self.position -= self.direction * velocity
        if window.get_key(Key.A):
            self.position -= self.right * velocity
        if window.get_key(Key.D):
            self.position += self.right * velocity

    def mouse_control(self, x_change: float, y_change: float) -> None:
        """Turn by a mouse movement, keeping pitch within +/-89 degrees."""
        self.yaw += x_change * self.turn_speed
        self.pitch += y_change * self.turn_speed
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))
        self._update()

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.direction, self.up)

    def _update(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.direction = _normalize(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.right = _normalize(np.cross(self.direction, self.world_up))
        self.up = _normalize(np.cross(self.right, self.direction))