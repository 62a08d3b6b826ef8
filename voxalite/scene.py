"""Entities, lights and the scene that groups them for rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from .matrix4 import Matrix4
from .vector3 import Color, Vector3


@dataclass(frozen=True)
class Entity:
    """A mesh drawn with a material and texture at a fixed position."""

    mesh: Any
    material: Any
    position: Vector3
    texture: Any
    sampler: Any

    @property
    def model(self) -> Matrix4:
        """The model matrix: a translation to the entity's position."""
        return Matrix4.from_translation(self.position)


@dataclass
class DirectionalLight:
    """Light shining from one direction everywhere in the scene."""

    direction: Vector3
    color: Color


@dataclass
class PointLight:
    """Light radiating from a single point."""

    position: Vector3
    color: Color


@dataclass
class Scene:
    """Everything the renderer draws in one frame."""

    entities: List[Entity] = field(default_factory=list)
    ambient: Color = Color(0.0, 0.0, 0.0)
    directional: DirectionalLight = field(
        default_factory=lambda: DirectionalLight(Vector3(), Color(0.0, 0.0, 0.0))
    )
    point: PointLight = field(
        default_factory=lambda: PointLight(Vector3(), Color(0.0, 0.0, 0.0))
    )