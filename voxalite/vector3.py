"""Three-component vectors and RGB colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


def _format_float(value: float) -> str:
    """Format a number the short way: whole numbers lose their trailing '.0'."""
    number = float(value)
    if number.is_integer() and abs(number) < 1e16:
        if number == 0.0 and math.copysign(1.0, number) < 0:
            return "-0"
        return str(int(number))
    return repr(number)


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vector3:
        """A vector with all three components set to ``value``."""
        return cls(value, value, value)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = math.hypot(self.x, self.y, self.z)
        if length == 0.0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, float]) -> Vector3:
        """Component-wise product; a number scales every component."""
        if isinstance(other, (int, float)):
            other = Vector3.splat(other)
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"x={_format_float(self.x)}, y={_format_float(self.y)}, z={_format_float(self.z)}"


@dataclass(frozen=True)
class Color:
    """An RGB colour with float channels."""

    r: float
    g: float
    b: float