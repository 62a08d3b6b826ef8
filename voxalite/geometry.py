"""Vertex layout and the cube mesh."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from .buffers import Buffer, BufferWriter, Handle, _default_gl
from .vector3 import Vector3


@dataclass(frozen=True)
class UV:
    """A texture coordinate."""

    x: float
    y: float


@dataclass(frozen=True)
class VertexData:
    """One vertex: position, normal and texture coordinate."""

    position: Vector3
    normal: Vector3
    uv: UV


_VERTEX_FORMAT = struct.Struct("=8f")
VERTEX_STRIDE = _VERTEX_FORMAT.size

# (component count, byte offset) for position, normal and uv.
_ATTRIBUTES: Tuple[Tuple[int, int], ...] = ((3, 0), (3, 12), (2, 24))


def _v(position: Tuple[float, float, float], normal: Tuple[float, float, float],
       uv: Tuple[float, float]) -> VertexData:
    return VertexData(Vector3(*position), Vector3(*normal), UV(*uv))


CUBE_VERTICES: Tuple[VertexData, ...] = (
    # Front face
    _v((-0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 0.0)),
    _v((0.5, -0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 0.0)),
    _v((0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (1.0, 1.0)),
    _v((-0.5, 0.5, 0.5), (0.0, 0.0, 1.0), (0.0, 1.0)),
    # Back face
    _v((0.5, -0.5, -0.5), (0.0, 0.0, -1.0), (0.0, 0.0)),
    _v((-0.5, -0.5, -0.5), (0.0, 0.0, -1.0), (1.0, 0.0)),
    _v((-0.5, 0.5, -0.5), (0.0, 0.0, -1.0), (1.0, 1.0)),
    _v((0.5, 0.5, -0.5), (0.0, 0.0, -1.0), (0.0, 1.0)),
    # Top face
    _v((-0.5, 0.5, -0.5), (0.0, 1.0, 0.0), (0.0, 0.0)),
    _v((-0.5, 0.5, 0.5), (0.0, 1.0, 0.0), (1.0, 0.0)),
    _v((0.5, 0.5, 0.5), (0.0, 1.0, 0.0), (1.0, 1.0)),
    _v((0.5, 0.5, -0.5), (0.0, 1.0, 0.0), (0.0, 1.0)),
    # Bottom face
    _v((-0.5, -0.5, 0.5), (0.0, -1.0, 0.0), (0.0, 0.0)),
    _v((-0.5, -0.5, -0.5), (0.0, -1.0, 0.0), (1.0, 0.0)),
    _v((0.5, -0.5, -0.5), (0.0, -1.0, 0.0), (1.0, 1.0)),
    _v((0.5, -0.5, 0.5), (0.0, -1.0, 0.0), (0.0, 1.0)),
    # Right face
    _v((0.5, -0.5, 0.5), (1.0, 0.0, 0.0), (0.0, 0.0)),
    _v((0.5, -0.5, -0.5), (1.0, 0.0, 0.0), (1.0, 0.0)),
    _v((0.5, 0.5, -0.5), (1.0, 0.0, 0.0), (1.0, 1.0)),
    _v((0.5, 0.5, 0.5), (1.0, 0.0, 0.0), (0.0, 1.0)),
    # Left face
    _v((-0.5, -0.5, -0.5), (-1.0, 0.0, 0.0), (0.0, 0.0)),
    _v((-0.5, -0.5, 0.5), (-1.0, 0.0, 0.0), (1.0, 0.0)),
    _v((-0.5, 0.5, 0.5), (-1.0, 0.0, 0.0), (1.0, 1.0)),
    _v((-0.5, 0.5, -0.5), (-1.0, 0.0, 0.0), (0.0, 1.0)),
)

CUBE_INDICES: Tuple[int, ...] = tuple(
    index
    for face in range(6)
    for index in (face * 4, face * 4 + 1, face * 4 + 2, face * 4, face * 4 + 2, face * 4 + 3)
)


def pack_vertices(vertices: Iterable[VertexData]) -> bytes:
    """Interleave vertices as native-order floats: position, normal, uv."""
    return b"".join(
        _VERTEX_FORMAT.pack(
            v.position.x, v.position.y, v.position.z,
            v.normal.x, v.normal.y, v.normal.z,
            v.uv.x, v.uv.y,
        )
        for v in vertices
    )


def pack_indices(indices: Iterable[int]) -> bytes:
    """Pack indices as native-order unsigned 32-bit integers."""
    values = tuple(indices)
    try:
        return struct.pack(f"={len(values)}I", *values)
    except struct.error as exc:
        raise ValueError(f"indices must be unsigned 32-bit integers: {exc}") from exc


class Mesh:
    """Vertex and index data on the GPU with its vertex array layout."""

    def __init__(
        self,
        vertices: Sequence[VertexData] = CUBE_VERTICES,
        indices: Sequence[int] = CUBE_INDICES,
        gl: Any = None,
    ) -> None:
        self._gl = gl if gl is not None else _default_gl()
        vertex_bytes = pack_vertices(vertices)
        index_bytes = pack_indices(indices)

        self._vbo = Buffer(len(vertex_bytes) + len(index_bytes), gl=self._gl)
        writer = BufferWriter(self._vbo)
        writer.write(vertex_bytes)
        writer.write(index_bytes)

        self.index_count = len(index_bytes) // 4
        self.index_offset = len(vertex_bytes)

        self._vao = Handle(self._gl.create_vertex_array(), self._gl.delete_vertex_array)
        vao = self._vao.value
        vbo = self._vbo.native_handle
        self._gl.vertex_array_vertex_buffer(vao, 0, vbo, 0, VERTEX_STRIDE)
        self._gl.vertex_array_element_buffer(vao, vbo)

        for index in range(len(_ATTRIBUTES)):
            self._gl.enable_vertex_array_attrib(vao, index)
        for index, (size, offset) in enumerate(_ATTRIBUTES):
            self._gl.vertex_array_attrib_format(vao, index, size, offset)
        for index in range(len(_ATTRIBUTES)):
            self._gl.vertex_array_attrib_binding(vao, index, 0)

    @property
    def native_handle(self) -> int:
        return self._vao.value

    def bind(self) -> None:
        self._gl.bind_vertex_array(self._vao.value)

    @staticmethod
    def unbind() -> None:
        _default_gl().bind_vertex_array(0)

    def release(self) -> None:
        self._vao.release()
        self._vbo.release()

    def __enter__(self) -> Mesh:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()