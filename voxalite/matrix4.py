"""Column-major 4x4 matrices for view and projection transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from .vector3 import Vector3, _format_float

_IDENTITY: Tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True)
class Matrix4:
    """An immutable 4x4 matrix stored as 16 floats in column-major order."""

    elements: Tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        values = tuple(float(e) for e in self.elements)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 elements, got {len(values)}")
        object.__setattr__(self, "elements", values)

    @classmethod
    def from_elements(cls, elements: Iterable[float]) -> Matrix4:
        return cls(tuple(elements))

    @classmethod
    def from_translation(cls, translation: Vector3) -> Matrix4:
        """A matrix that translates by ``translation``."""
        return cls((
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            translation.x, translation.y, translation.z, 1.0,
        ))

    @classmethod
    def look_at(cls, eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """A view matrix looking from ``eye`` towards ``target``."""
        f = (target - eye).normalized()
        up_normalized = up.normalized()
        s = f.cross(up_normalized).normalized()
        u = s.cross(f).normalized()

        rotation = cls((
            s.x, u.x, -f.x, 0.0,
            s.y, u.y, -f.y, 0.0,
            s.z, u.z, -f.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))
        return rotation * cls.from_translation(-eye)

    @classmethod
    def perspective(
        cls, fov: float, width: float, height: float, near_plane: float, far_plane: float
    ) -> Matrix4:
        """A perspective projection with vertical field of view ``fov`` in radians."""
        aspect_ratio = width / height
        t = math.tan(fov / 2.0) * near_plane
        b = -t
        r = t * aspect_ratio
        l = b * aspect_ratio
        depth = far_plane - near_plane

        return cls((
            (2.0 * near_plane) / (r - l), 0.0, 0.0, 0.0,
            0.0, (2.0 * near_plane) / (t - b), 0.0, 0.0,
            (r + l) / (r - l), (t + b) / (t - b), -(far_plane + near_plane) / depth, -1.0,
            0.0, 0.0, -(2.0 * far_plane * near_plane) / depth, 0.0,
        ))

    def __mul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        a = self.elements
        b = other.elements
        return Matrix4(tuple(
            sum(a[k * 4 + row] * b[col * 4 + k] for k in range(4))
            for col in range(4)
            for row in range(4)
        ))

    def __str__(self) -> str:
        e = self.elements
        return "\n".join(
            " ".join(_format_float(e[col * 4 + row]) for col in range(4))
            for row in range(4)
        )