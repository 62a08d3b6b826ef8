"""A free-look perspective camera."""

from __future__ import annotations

import math

from .matrix4 import Matrix4
from .vector3 import Vector3


def _direction_from_angles(pitch: float, yaw: float) -> Vector3:
    return Vector3(
        math.cos(yaw) * math.cos(pitch),
        math.sin(pitch),
        math.sin(yaw) * math.cos(pitch),
    ).normalized()


class Camera:
    """A camera with a position, a facing direction and cached view/projection matrices."""

    def __init__(
        self,
        position: Vector3,
        look_at: Vector3,
        up: Vector3,
        fov: float,
        width: float,
        height: float,
        near_plane: float,
        far_plane: float,
    ) -> None:
        self.view = Matrix4.look_at(position, look_at, up)
        self.projection = Matrix4.perspective(fov, width, height, near_plane, far_plane)
        self.position = position
        # The initial direction is the look-at point itself, not the offset from the position.
        self.direction = look_at
        self.up = up
        self.pitch = 0.0
        self.yaw = 0.0

    def right(self) -> Vector3:
        """Unit vector to the camera's right."""
        return self.direction.cross(self.up).normalized()

    def _refresh(self) -> None:
        self.direction = _direction_from_angles(self.pitch, self.yaw)
        self.view = Matrix4.look_at(self.position, self.position + self.direction, self.up)

    def adjust_yaw(self, adjust: float) -> None:
        """Turn left or right by ``adjust`` radians."""
        self.yaw += adjust
        self._refresh()

    def adjust_pitch(self, adjust: float) -> None:
        """Tilt up or down by ``adjust`` radians."""
        self.pitch += adjust
        self._refresh()

    def translate(self, translation: Vector3) -> None:
        """Move the camera by ``translation`` relative to its position."""
        self.position = self.position + translation
        self._refresh()