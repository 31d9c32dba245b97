"""A first-person camera driven by keyboard and mouse state."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .linalg import (
    G_PI_2,
    Mat4,
    Vec4,
    is_approx_equal,
    quaternion_rotation,
    radian,
    translation,
    view,
)

MOUSE_SENSITIVITY = 0.1
ANGLE_LIMIT = 90.0

_X_AXIS = Vec4(1.0, 0.0, 0.0, 0.0)
_NEG_X_AXIS = Vec4(-1.0, 0.0, 0.0, 0.0)
_NEG_Y_AXIS = Vec4(0.0, -1.0, 0.0, 0.0)
_Z_AXIS = Vec4(0.0, 0.0, 1.0, 0.0)


class Key(Enum):
    """Movement keys, valued by the physical key they sit on."""

    FORWARD = "w"
    BACKWARD = "s"
    RIGHT = "d"
    LEFT = "a"


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


class Camera:
    """Camera basis, position and the view matrix derived from them."""

    def __init__(self, width: float, height: float) -> None:
        self.position = Vec4(0.0, 0.0, -1.0, 0.0)
        up = Vec4(0.0, 1.0, 0.0, 0.0)
        self.front = self.position.scaled(-1.0).normalized()
        self.right = self.front.cross(up).normalized()
        self.up = self.right.cross(self.front)

        self.fov = G_PI_2
        self.width = float(width)
        self.height = float(height)
        self.old_x = self.width / 2
        self.old_y = self.height / 2
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.view = self._compute_view()

    def _compute_view(self) -> Mat4:
        basis = view(self.right, self.up, self.front)
        return basis @ translation(self.position.x, self.position.y, self.position.z)

    def process_keyboard(self, keys: Iterable[Key], speed: float) -> None:
        """Move by ``speed`` along the first held key, then rebuild the view."""
        held = set(keys)
        if Key.FORWARD in held:
            self.position = self.position + self.front.scaled(speed)
        elif Key.BACKWARD in held:
            self.position = self.position - self.front.scaled(speed)
        elif Key.RIGHT in held:
            step = self.up.cross(self.front).normalized().scaled(speed)
            self.position = self.position + step
        elif Key.LEFT in held:
            step = self.front.cross(self.up).normalized().scaled(speed)
            self.position = self.position + step
        self.view = self._compute_view()

    def process_mouse(self, x: int, y: int, left_pressed: bool) -> bool:
        """Turn the camera by a left-button drag to (x, y); True if it turned."""
        if not left_pressed:
            return False
        offset_x = int(x - self.old_x)
        offset_y = int(self.old_y - y)
        if is_approx_equal(offset_x, 0.0) and is_approx_equal(offset_y, 0.0):
            return False

        self.mouse_x = _clamp(self.mouse_x + offset_x * MOUSE_SENSITIVITY, ANGLE_LIMIT)
        self.mouse_y = _clamp(self.mouse_y + offset_y * MOUSE_SENSITIVITY, ANGLE_LIMIT)

        pitch = quaternion_rotation(radian(self.mouse_y), _NEG_X_AXIS)
        yaw = quaternion_rotation(radian(self.mouse_x), _NEG_Y_AXIS)
        direction = (pitch @ yaw).transform(_Z_AXIS)

        self.front = direction.normalized()
        self.up = self.front.cross(_X_AXIS).normalized()
        self.right = self.front.cross(self.up).normalized()
        self.view = self._compute_view()

        self.old_x = x
        self.old_y = y
        return True