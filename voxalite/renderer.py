"""Drawing a scene from a camera's point of view."""

from __future__ import annotations

import struct
from typing import Any

from .buffers import Buffer, BufferWriter, _default_gl
from .camera import Camera
from .scene import Scene

_CAMERA_FORMAT = struct.Struct("=16f16f3f")
# Each member of the light block is aligned to 16 bytes.
_LIGHT_FORMAT = struct.Struct("=" + "3f4x" * 5)

CAMERA_BLOCK_SIZE = _CAMERA_FORMAT.size
LIGHT_BLOCK_SIZE = _LIGHT_FORMAT.size

CAMERA_BINDING = 0
LIGHT_BINDING = 1


def pack_camera_block(camera: Camera) -> bytes:
    """View matrix, projection matrix and camera position as native floats."""
    position = camera.position
    return _CAMERA_FORMAT.pack(
        *camera.view.elements,
        *camera.projection.elements,
        position.x, position.y, position.z,
    )


def pack_light_block(scene: Scene) -> bytes:
    """Ambient, directional and point light data, each member padded to 16 bytes."""
    ambient = scene.ambient
    direction = scene.directional.direction
    direction_color = scene.directional.color
    position = scene.point.position
    point_color = scene.point.color
    return _LIGHT_FORMAT.pack(
        ambient.r, ambient.g, ambient.b,
        direction.x, direction.y, direction.z,
        direction_color.r, direction_color.g, direction_color.b,
        position.x, position.y, position.z,
        point_color.r, point_color.g, point_color.b,
    )


class Renderer:
    """Owns the uniform buffers and draws every entity of a scene."""

    def __init__(self, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self._camera_buffer = Buffer(CAMERA_BLOCK_SIZE, gl=self._gl)
        self._light_buffer = Buffer(LIGHT_BLOCK_SIZE, gl=self._gl)

    @property
    def camera_buffer(self) -> Buffer:
        return self._camera_buffer

    @property
    def light_buffer(self) -> Buffer:
        return self._light_buffer

    def render(self, camera: Camera, scene: Scene) -> None:
        """Clear the frame and draw the scene as seen by ``camera``."""
        gl = self._gl
        gl.clear()

        BufferWriter(self._camera_buffer).write(pack_camera_block(camera))
        BufferWriter(self._light_buffer).write(pack_light_block(scene))

        gl.bind_uniform_buffer(CAMERA_BINDING, self._camera_buffer.native_handle)
        gl.bind_uniform_buffer(LIGHT_BINDING, self._light_buffer.native_handle)

        for entity in scene.entities:
            program = entity.material.native_handle
            gl.use_program(program)
            gl.set_uniform(program, "model", entity.model.elements)

            gl.bind_texture_unit(0, entity.texture.native_handle)
            gl.bind_sampler(0, entity.sampler.native_handle)
            gl.set_uniform(program, "tex", 0)

            mesh = entity.mesh
            mesh.bind()
            gl.draw_triangles(36)
            gl.draw_indexed_triangles(mesh.index_count, mesh.index_offset)
            gl.bind_vertex_array(0)

    def release(self) -> None:
        self._camera_buffer.release()
        self._light_buffer.release()

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()